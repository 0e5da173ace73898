"""
Authentication endpoints for email/password accounts.

Security features:
- Passwords stored as salted PBKDF2 hashes
- Email must be confirmed before first login
- Account lockout after 5 failed attempts (30 min cooldown)
- Signed session token in an httpOnly cookie
- IP address logging for audit trail
"""
import logging
from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Request, Response, Cookie
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from youthconnect.config import settings
from youthconnect.database import get_db
from youthconnect.models.user import User
from youthconnect.schemas.auth import (
    SignupRequest,
    SignupResponse,
    VerifyEmailRequest,
    LoginRequest,
    AuthResponse
)
from youthconnect.services.email import email_service
from youthconnect.services.security import (
    hash_password,
    verify_password,
    create_session_token,
    read_session_token,
    new_verification_token
)

logger = logging.getLogger(__name__)
router = APIRouter()

# Security constants
MAX_FAILED_ATTEMPTS = 5
ACCOUNT_LOCK_MINUTES = 30
SESSION_COOKIE = "auth_token"


def get_client_ip(request: Request) -> str:
    """
    Extract client IP address from request.

    Checks X-Forwarded-For header (for proxies/load balancers) first,
    falls back to direct client IP.
    """
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def set_session_cookie(response: Response, token: str) -> None:
    # In production, set secure=True for HTTPS-only
    response.set_cookie(
        key=SESSION_COOKIE,
        value=token,
        httponly=True,
        samesite="lax",
        max_age=86400 * settings.session_max_age_days,
        secure=not settings.debug and settings.get_frontend_url().startswith("https://"),
    )


def build_auth_response(user: User, token: str) -> AuthResponse:
    return AuthResponse(
        access_token=token,
        user_id=str(user.id),
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name
    )


# Authentication Dependencies
async def get_optional_user(
    auth_token: Optional[str] = Cookie(None),
    db: AsyncSession = Depends(get_db)
) -> Optional[User]:
    """
    Dependency returning the signed-in user, or None for anonymous visitors.

    A tampered or stale cookie is treated as anonymous.
    """
    user_id = read_session_token(auth_token)
    if not user_id:
        return None
    try:
        user_id = UUID(user_id)
    except ValueError:
        return None

    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if not user or user.is_account_locked():
        return None
    return user


async def get_current_user(
    user: Optional[User] = Depends(get_optional_user)
) -> User:
    """
    Dependency to require an authenticated user.

    Raises:
        HTTPException 401: If no valid session cookie is present
    """
    if user is None:
        raise HTTPException(
            status_code=401,
            detail="Authentication required. Please log in."
        )
    return user


# Endpoints
@router.post("/signup", response_model=SignupResponse, status_code=201)
async def signup(
    signup_request: SignupRequest,
    db: AsyncSession = Depends(get_db)
):
    """
    Create an account and email a confirmation link.

    Returns:
        201: Account created, confirmation email sent
        409: Email already registered
        500: Database or system error
    """
    email = signup_request.email.lower()
    result = await db.execute(select(User).where(User.email == email))
    if result.scalar_one_or_none():
        raise HTTPException(status_code=409, detail="User already registered")

    try:
        user = User(
            email=email,
            password_hash=hash_password(signup_request.password),
            first_name=signup_request.first_name,
            last_name=signup_request.last_name,
            email_verification_token=new_verification_token()
        )
        db.add(user)
        await db.commit()
    except Exception as e:
        await db.rollback()
        logger.error(f"Error creating account: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail="Failed to create account. Please try again."
        )

    verify_link = f"{settings.get_frontend_url()}/auth/verify?token={user.email_verification_token}"
    await email_service.send_verification_email(user.email, verify_link)
    logger.info(f"Account created for {user.email}")

    return SignupResponse(
        message="Account created! Please check your email to verify your account.",
        email=user.email
    )


@router.post("/verify-email", response_model=AuthResponse)
async def verify_email(
    verify_request: VerifyEmailRequest,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """
    Confirm an email address with the token from the signup email.

    The token is one-time use. A confirmed user is signed in immediately.
    """
    result = await db.execute(
        select(User).where(User.email_verification_token == verify_request.token)
    )
    user = result.scalar_one_or_none()
    if not user:
        raise HTTPException(
            status_code=401,
            detail="Invalid or already used confirmation link."
        )

    user.email_verification_token = None
    user.email_verified_at = datetime.utcnow()
    await db.commit()

    logger.info(f"Email confirmed: {user.email}")

    token = create_session_token(str(user.id))
    set_session_cookie(response, token)
    return build_auth_response(user, token)


@router.post("/login", response_model=AuthResponse)
async def login(
    login_request: LoginRequest,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db)
):
    """
    Sign in with email and password.

    Returns:
        200: Credentials valid, session cookie set
        401: Invalid email or password
        403: Email not confirmed, or account locked
    """
    result = await db.execute(
        select(User).where(User.email == login_request.email.lower())
    )
    user = result.scalar_one_or_none()

    if not user:
        logger.warning(f"Login for unknown email from IP: {get_client_ip(request)}")
        raise HTTPException(status_code=401, detail="Invalid login credentials")

    if user.is_account_locked():
        logger.warning(
            f"Login attempt on locked account: {user.email} from IP: {get_client_ip(request)}"
        )
        raise HTTPException(
            status_code=403,
            detail=f"Account temporarily locked. Try again after {user.account_locked_until.isoformat()}"
        )

    if not verify_password(login_request.password, user.password_hash):
        user.failed_login_attempts += 1
        if user.failed_login_attempts >= MAX_FAILED_ATTEMPTS:
            user.account_locked_until = datetime.utcnow() + timedelta(minutes=ACCOUNT_LOCK_MINUTES)
            logger.warning(
                f"Account locked due to {MAX_FAILED_ATTEMPTS} failed attempts: {user.email}"
            )
        await db.commit()
        raise HTTPException(status_code=401, detail="Invalid login credentials")

    if not user.is_email_verified():
        raise HTTPException(status_code=403, detail="Email not confirmed")

    user.last_login_at = datetime.utcnow()
    user.last_login_ip = get_client_ip(request)
    user.failed_login_attempts = 0
    user.account_locked_until = None
    await db.commit()

    logger.info(f"Successful login: {user.email} from IP: {user.last_login_ip}")

    token = create_session_token(str(user.id))
    set_session_cookie(response, token)
    return build_auth_response(user, token)


@router.post("/logout")
async def logout(
    response: Response,
    current_user: User = Depends(get_current_user)
):
    """Logout user by clearing the authentication cookie."""
    response.delete_cookie(
        key=SESSION_COOKIE,
        httponly=True,
        samesite="lax"
    )

    logger.info(f"User logged out: {current_user.email}")

    return {"message": "Successfully logged out"}


@router.get("/me", response_model=AuthResponse)
async def me(
    auth_token: str = Cookie(None),
    current_user: User = Depends(get_current_user)
):
    """Return the signed-in user."""
    return build_auth_response(current_user, auth_token)
