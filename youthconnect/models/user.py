from datetime import datetime
import uuid

from sqlalchemy import Column, String, DateTime, Integer

from youthconnect.database import Base
from youthconnect.database_types import GUID


class User(Base):
    __tablename__ = "users"

    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)

    # Profile captured at signup
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)

    # Email confirmation
    email_verification_token = Column(String, nullable=True, index=True)
    email_verified_at = Column(DateTime, nullable=True)

    # Security & audit fields
    last_login_at = Column(DateTime, nullable=True)
    last_login_ip = Column(String(45), nullable=True)  # IPv4 or IPv6
    failed_login_attempts = Column(Integer, default=0, nullable=False)
    account_locked_until = Column(DateTime, nullable=True)

    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @property
    def full_name(self) -> str | None:
        parts = [part for part in (self.first_name, self.last_name) if part]
        return " ".join(parts) or None

    def is_email_verified(self) -> bool:
        return self.email_verified_at is not None

    def is_account_locked(self) -> bool:
        """Check if account is currently locked due to failed login attempts."""
        if not self.account_locked_until:
            return False
        return datetime.utcnow() < self.account_locked_until
