# backend/relay/api/notifications.py
from fastapi import APIRouter, Request
import json
import logging
from pydantic import ValidationError

from ..schemas import NotificationRequest, RelayResponse
from ..services.email_service import email_service
from ..templates.email_templates import notification_template

router = APIRouter()
logger = logging.getLogger(__name__)


def _error(message: str) -> dict:
    return RelayResponse(status="error", message=message).model_dump(exclude_none=True)


@router.post("/send-email")
async def send_design_notification(request: Request):
    """
    Relays one design notification: a message to the client and a copy to the admin.
    Answers "success" once both sends were attempted; SMTP outcome is only logged.
    """
    raw_body = await request.body()
    try:
        data = json.loads(raw_body) if raw_body else None
    except (json.JSONDecodeError, UnicodeDecodeError):
        data = None

    if not isinstance(data, dict) or not data:
        logger.warning("Rejected notification request with an empty or unparseable body.")
        return _error("No data")

    try:
        notification = NotificationRequest.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected notification request: {e.errors()}")
        return _error("Missing or invalid fields: " + ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        ))

    content = notification_template.render(notification.project_title, notification.description)

    logger.info(
        f"Relaying '{notification.action}' for project '{notification.project_title}' "
        f"to {notification.client_email} (copy: {notification.admin_email or 'none'})"
    )
    client_sent = await email_service.send_email(
        receiver_email=notification.client_email,
        subject=content["subject"],
        text_content=content["text"],
        html_content=content["html"],
    )
    admin_sent = None
    if notification.admin_email:
        admin_sent = await email_service.send_email(
            receiver_email=notification.admin_email,
            subject=notification_template.copy_subject(),
            text_content=content["text"],
            html_content=content["html"],
        )
    logger.info(f"Relay finished: client_sent={client_sent}, admin_sent={admin_sent}")

    return RelayResponse(status="success").model_dump(exclude_none=True)
