from datetime import datetime
from enum import Enum
import uuid

from sqlalchemy import Column, String, Text, DateTime

from youthconnect.database import Base
from youthconnect.database_types import GUID, StringList


class GuideCategory(str, Enum):
    """Fixed set of career guidance categories."""
    TECHNOLOGY = "Technology"
    MARKETING = "Marketing"
    ANALYTICS = "Analytics"
    CREATIVE = "Creative"
    FINANCE = "Finance"
    HEALTHCARE = "Healthcare"


class CareerGuide(Base):
    __tablename__ = "career_guidance"

    id = Column(GUID, primary_key=True, default=uuid.uuid4)
    title = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)  # GuideCategory value
    content = Column(Text, nullable=False)

    skills_required = Column(StringList, nullable=True, default=list)
    salary_info = Column(Text, nullable=True)
    growth_prospects = Column(Text, nullable=True)
    education_path = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
