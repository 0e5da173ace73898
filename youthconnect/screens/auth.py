"""Sign in / sign up screen."""
import logging
from typing import Optional

from youthconnect.client import ApiError, JobBoardClient
from youthconnect.schemas.auth import AuthResponse
from youthconnect.screens.base import Screen

logger = logging.getLogger(__name__)


class AuthScreen(Screen):
    def __init__(self, client: JobBoardClient):
        super().__init__(client)
        self.user: Optional[AuthResponse] = None
        self.redirect_to: Optional[str] = None

    async def login(self, email: str, password: str) -> bool:
        self.is_loading = True
        try:
            self.user = await self.client.login(email, password)
        except ApiError as e:
            logger.warning(f"Login failed for {email}: {e}")
            self.notify("Login failed", str(e), "destructive")
            return False
        finally:
            self.is_loading = False

        self.notify("Welcome back!", "You have successfully logged in.")
        self.redirect_to = "/"
        return True

    async def signup(self, email: str, password: str, first_name: str = "", last_name: str = "") -> bool:
        """Create an account. The user must confirm the emailed link before logging in."""
        self.is_loading = True
        try:
            await self.client.signup(email, password, first_name, last_name)
        except ApiError as e:
            logger.warning(f"Signup failed for {email}: {e}")
            self.notify("Signup failed", str(e), "destructive")
            return False
        finally:
            self.is_loading = False

        self.notify("Account created!", "Please check your email to verify your account.")
        return True

    async def logout(self) -> None:
        """Sign out. A rejected logout still ends the local session."""
        try:
            await self.client.logout()
        except ApiError as e:
            logger.warning(f"Logout failed: {e}")
        self.user = None
        self.redirect_to = "/"
