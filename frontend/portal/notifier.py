# frontend/portal/notifier.py
import concurrent.futures as cf
import logging
from typing import Optional

from . import api_client
from .errors import DispatchError
from .messages import action_label, text
from .models import NotificationAction, NotificationPayload, Submission

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    """
    Relays design notifications to the mail relay without blocking the caller.

    ``notify`` must only be called after the store mutation it reports on has
    been committed. Delivery runs on a worker thread; its outcome is written to
    the store's notification log and never touches submission state.
    """

    def __init__(self, relay_url: str, locale: str = "en", timeout: float = 10,
                 executor: Optional[cf.Executor] = None):
        self.relay_url = relay_url
        self.locale = locale
        self.timeout = timeout
        self.executor = executor or cf.ThreadPoolExecutor(max_workers=4, thread_name_prefix="notify")

    def build_payload(self, admin_email: str, submission: Submission, action: NotificationAction) -> NotificationPayload:
        description = submission.description or text(
            "description.fallback", self.locale, action=action_label(action, self.locale)
        )
        return NotificationPayload(
            client_email=submission.client_email,
            admin_email=admin_email,
            project_title=submission.title,
            description=description,
            action=action,
        )

    def describe(self, admin_email: str, submission: Submission, action: NotificationAction) -> str:
        if action == NotificationAction.CREATED:
            return text("log.created", self.locale, client=submission.client_email,
                        admin=admin_email, title=submission.title)
        return text("log.status", self.locale, client=submission.client_email, admin=admin_email,
                    action=action_label(action, self.locale), title=submission.title)

    def notify(self, store, submission: Submission, action) -> Optional[cf.Future]:
        action = NotificationAction(action)
        admin_email = store.admin_email
        store.log_notification(self.describe(admin_email, submission, action))
        payload = self.build_payload(admin_email, submission, action)

        if not self.relay_url:
            logger.info(f"Relay disabled; '{action.value}' notification for submission {submission.id} not sent.")
            return None

        logger.info(f"Dispatching '{action.value}' notification for submission {submission.id}")
        return self.executor.submit(self.deliver, store, payload)

    def deliver(self, store, payload: NotificationPayload) -> bool:
        """Sends one payload. Failures are logged and swallowed."""
        try:
            api_client.post_notification(self.relay_url, payload.to_wire(), timeout=self.timeout)
        except DispatchError as e:
            logger.warning(f"Notification for '{payload.project_title}' was not delivered: {e}")
            store.log_notification(text("log.failed", self.locale, title=payload.project_title))
            return False
        logger.info(f"Notification for '{payload.project_title}' relayed to {payload.client_email}")
        store.log_notification(text("log.sent", self.locale, title=payload.project_title))
        return True

    def shutdown(self, wait: bool = False):
        self.executor.shutdown(wait=wait)
