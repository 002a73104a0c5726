"""
Relay request and response schemas.

Field names follow the JSON wire format posted by the review portal
(camelCase); the Python attributes are snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Literal, Optional


class NotificationRequest(BaseModel):
    """Body of POST /api/send-email."""
    model_config = ConfigDict(populate_by_name=True)

    client_email: str = Field(..., alias="clientEmail", min_length=1)
    admin_email: Optional[str] = Field(None, alias="adminEmail")
    project_title: Optional[str] = Field("", alias="projectTitle")
    description: Optional[str] = Field("")
    action: Optional[str] = Field("created")

    @field_validator("project_title", "description", mode="after")
    @classmethod
    def _null_as_empty(cls, value: Optional[str]) -> str:
        return value or ""


class RelayResponse(BaseModel):
    status: Literal["success", "error"]
    message: Optional[str] = None
