"""
Review data model.

Each model serializes with the camelCase names the relay and the original
sample data use (``clientEmail``, ``isArchived`` ...); Python code uses the
snake_case attributes.
"""

import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SubmissionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class NotificationAction(str, Enum):
    CREATED = "created"
    APPROVED = "approved"
    REJECTED = "rejected"

    @classmethod
    def for_status(cls, status: SubmissionStatus) -> "NotificationAction":
        return cls(SubmissionStatus(status).value)


class Role(str, Enum):
    DESIGNER = "designer"
    CLIENT = "client"


class DesignerTab(str, Enum):
    ACTIVE = "active"
    ARCHIVED = "archived"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubmissionDraft(_CamelModel):
    """What the designer fills in on the upload form."""
    title: str = ""
    client_email: str = ""
    description: str = ""
    image_url: Optional[str] = None
    file_name: str = ""
    file_size: float = 0.0


class Submission(_CamelModel):
    id: int
    title: str
    description: str = ""
    client_email: str
    status: SubmissionStatus = SubmissionStatus.PENDING
    feedback: str = ""
    image_url: str
    date: datetime.date = Field(default_factory=datetime.date.today)
    file_name: str = ""
    file_size: float = 0.0
    is_archived: bool = False
    drive_linked: bool = False

    @property
    def is_pending(self) -> bool:
        return self.status == SubmissionStatus.PENDING


class NotificationPayload(_CamelModel):
    """JSON body posted to the mail relay."""
    client_email: str
    admin_email: str
    project_title: str
    description: str
    action: NotificationAction

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def normalize_email(email: Optional[str]) -> str:
    """Trims and case-folds an address for comparison. Not an identity check."""
    return (email or "").strip().lower()
