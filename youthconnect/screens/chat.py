"""Floating career assistant chat widget."""
import asyncio
import logging
from datetime import datetime
from typing import List

from pydantic import BaseModel

from youthconnect.client import ApiError, JobBoardClient
from youthconnect.screens.base import Screen
from youthconnect.services.chat import GREETING

logger = logging.getLogger(__name__)


class ChatMessage(BaseModel):
    id: int
    text: str
    is_user: bool
    timestamp: datetime


class ChatWidget(Screen):
    """
    Chat panel state.

    Starts closed with the assistant greeting as the only message.
    """

    def __init__(self, client: JobBoardClient, reply_delay: float = 1.0):
        super().__init__(client)
        self.is_open = False
        self.draft = ""
        self.reply_delay = reply_delay
        self.messages: List[ChatMessage] = []
        self._next_id = 1
        self._append(GREETING, is_user=False)

    def _append(self, text: str, is_user: bool) -> ChatMessage:
        message = ChatMessage(id=self._next_id, text=text, is_user=is_user, timestamp=datetime.now())
        self._next_id += 1
        self.messages.append(message)
        return message

    def toggle(self) -> None:
        self.is_open = not self.is_open

    async def send(self, text: str = None) -> bool:
        """Post the user's message and append the assistant reply. Blank input is ignored."""
        text = (self.draft if text is None else text).strip()
        if not text:
            return False

        self._append(text, is_user=True)
        self.draft = ""
        self.is_loading = True
        try:
            if self.reply_delay:
                await asyncio.sleep(self.reply_delay)
            reply = await self.client.chat(text)
        except ApiError as e:
            logger.error(f"Chat reply failed: {e}")
            self.notify("Error", "Failed to get a reply. Please try again.", "destructive")
            return False
        finally:
            self.is_loading = False

        self._append(reply, is_user=False)
        return True
