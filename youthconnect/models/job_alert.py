from datetime import datetime
import uuid

from sqlalchemy import Column, String, Boolean, DateTime

from youthconnect.database import Base
from youthconnect.database_types import GUID, StringList


class JobAlert(Base):
    """Saved search a user wants to be notified about."""
    __tablename__ = "job_alerts"

    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    user_id = Column(String, nullable=False, index=True)

    keywords = Column(StringList, nullable=True, default=list)
    location = Column(String, nullable=True)
    job_type = Column(String, nullable=True)
    experience_level = Column(String, nullable=True)

    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
