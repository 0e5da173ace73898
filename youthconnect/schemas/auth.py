"""Authentication-related Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel, EmailStr, Field


class SignupRequest(BaseModel):
    """Request to create an email/password account."""
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: Optional[str] = None
    last_name: Optional[str] = None


class SignupResponse(BaseModel):
    message: str
    email: str


class VerifyEmailRequest(BaseModel):
    """Request to confirm an email address with the emailed token."""
    token: str


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    """Response after successful authentication."""
    access_token: str
    token_type: str = "bearer"
    user_id: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
