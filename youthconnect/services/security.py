"""
Password hashing and session tokens.

Passwords: werkzeug salted PBKDF2-SHA256 hashes.
Sessions: HS256 JWT carrying the user id, signed with SECRET_KEY and kept
in an httpOnly cookie.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

import jwt
from werkzeug.security import check_password_hash, generate_password_hash

from youthconnect.config import settings

PASSWORD_METHOD = "pbkdf2:sha256"
TOKEN_ALGORITHM = "HS256"


def hash_password(password: str, method: str = PASSWORD_METHOD) -> str:
    return generate_password_hash(password, method=method)


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        # Unknown hash method
        return False


def create_session_token(user_id: str) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(days=settings.session_max_age_days),
    }
    return jwt.encode(payload, settings.secret_key, algorithm=TOKEN_ALGORITHM)


def read_session_token(token: Optional[str]) -> Optional[str]:
    """Return the user id carried by a session token, or None if invalid or expired."""
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[TOKEN_ALGORITHM])
    except jwt.InvalidTokenError:
        return None
    return payload.get("sub")


def new_verification_token() -> str:
    return uuid4().hex
