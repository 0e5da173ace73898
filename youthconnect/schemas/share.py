"""Share menu Pydantic schemas."""
from enum import Enum

from pydantic import BaseModel


class ShareTarget(str, Enum):
    """Closed set of places a job can be shared to."""
    MESSAGING = "messaging"
    EMAIL = "email"
    SOCIAL = "social"


class ShareLink(BaseModel):
    target: ShareTarget
    label: str
    url: str
    opens_new_window: bool


class ShareMenu(BaseModel):
    title: str
    share_text: str
    links: list[ShareLink]
