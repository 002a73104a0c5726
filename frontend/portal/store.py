# frontend/portal/store.py
"""
Per-session review state.

``SubmissionStore`` owns the submission collection together with the session
fields (view mode, designer tab, client login, admin email, drive flag and the
notification log). Its methods are the only way that state changes. Each
browser session gets its own deep copy of the initial store, so nothing here
is shared between sessions.
"""

import datetime
import logging
import random
import threading
import time
from typing import List, Optional

from .errors import InvalidTransitionError, NotFoundError, ValidationError
from .models import (
    DesignerTab,
    Role,
    Submission,
    SubmissionDraft,
    SubmissionStatus,
    normalize_email,
)

logger = logging.getLogger(__name__)

# Serializes mutations; the dispatcher appends log lines from worker threads.
lock = threading.RLock()

NOTIFICATION_LOG_SIZE = 5
DEFAULT_STORAGE_LIMIT = 2000.0
STORAGE_WARNING_PERCENT = 85

_TERMINAL_STATUSES = (SubmissionStatus.APPROVED, SubmissionStatus.REJECTED)


def simulated_file_size(rng=random) -> float:
    """Uploads are not measured; the indicator uses a 10-59 MB stand-in."""
    return float(rng.randint(10, 59))


class SubmissionStore:

    def __init__(self, admin_email: str, placeholder_image_url: str,
                 storage_limit: float = DEFAULT_STORAGE_LIMIT, submissions: Optional[List[Submission]] = None):
        self.submissions: List[Submission] = list(submissions or [])
        self.admin_email = admin_email
        self.placeholder_image_url = placeholder_image_url
        self.storage_limit = storage_limit
        self.drive_connected = False
        self.notification_log: List[str] = []
        self.view_mode = Role.DESIGNER
        self.designer_tab = DesignerTab.ACTIVE
        self.client_session: Optional[str] = None
        self._last_id = max((s.id for s in self.submissions), default=0)

    # --- lookups ---

    def _index_of(self, submission_id: int) -> int:
        for i, submission in enumerate(self.submissions):
            if submission.id == submission_id:
                return i
        raise NotFoundError(submission_id)

    def get(self, submission_id: int) -> Submission:
        with lock:
            return self.submissions[self._index_of(submission_id)]

    def _next_id(self) -> int:
        candidate = int(time.time() * 1000)
        self._last_id = max(candidate, self._last_id + 1)
        return self._last_id

    # --- submission mutations ---

    def create(self, draft: SubmissionDraft) -> Submission:
        if not draft.client_email.strip():
            raise ValidationError("A client email is required.")
        if not draft.title.strip():
            raise ValidationError("A project title is required.")

        with lock:
            submission = Submission(
                id=self._next_id(),
                title=draft.title.strip(),
                description=draft.description,
                client_email=draft.client_email.strip(),
                status=SubmissionStatus.PENDING,
                feedback="",
                image_url=draft.image_url or self.placeholder_image_url,
                date=datetime.date.today(),
                file_name=draft.file_name,
                file_size=draft.file_size,
                is_archived=False,
                drive_linked=self.drive_connected,
            )
            self.submissions.insert(0, submission)
        logger.info(f"Created submission {submission.id} '{submission.title}' for {submission.client_email}")
        return submission

    def update_status(self, submission_id: int, status, feedback: str = "") -> Submission:
        try:
            target = SubmissionStatus(status)
        except ValueError:
            raise ValidationError(f"Unknown status: {status}")
        with lock:
            index = self._index_of(submission_id)
            current = self.submissions[index]
            if target not in _TERMINAL_STATUSES or current.status != SubmissionStatus.PENDING:
                raise InvalidTransitionError(submission_id, current.status.value, target.value)
            updated = current.model_copy(update={"status": target, "feedback": feedback or ""})
            self.submissions[index] = updated
        logger.info(f"Submission {submission_id} is now {target.value}")
        return updated

    def _set_archived(self, submission_id: int, archived: bool) -> Submission:
        with lock:
            index = self._index_of(submission_id)
            updated = self.submissions[index].model_copy(update={"is_archived": archived})
            self.submissions[index] = updated
        return updated

    def archive(self, submission_id: int) -> Submission:
        return self._set_archived(submission_id, True)

    def unarchive(self, submission_id: int) -> Submission:
        return self._set_archived(submission_id, False)

    def toggle_archive(self, submission_id: int) -> Submission:
        return self._set_archived(submission_id, not self.get(submission_id).is_archived)

    def delete(self, submission_id: int) -> Submission:
        with lock:
            removed = self.submissions.pop(self._index_of(submission_id))
        logger.info(f"Deleted submission {submission_id}")
        return removed

    # --- derived views ---

    def visible(self, role, session_email: Optional[str] = None, tab=DesignerTab.ACTIVE) -> List[Submission]:
        role = Role(role)
        with lock:
            snapshot = list(self.submissions)
        if role == Role.DESIGNER:
            show_archived = DesignerTab(tab) == DesignerTab.ARCHIVED
            return [s for s in snapshot if s.is_archived == show_archived]
        if not session_email:
            return []
        wanted = normalize_email(session_email)
        return [s for s in snapshot if not s.is_archived and normalize_email(s.client_email) == wanted]

    def current_view(self) -> List[Submission]:
        return self.visible(self.view_mode, self.client_session, self.designer_tab)

    @property
    def used_storage(self) -> float:
        return sum(s.file_size or 0 for s in self.submissions)

    @property
    def storage_percentage(self) -> float:
        if self.storage_limit <= 0:
            return 100.0
        return min(self.used_storage / self.storage_limit * 100, 100.0)

    @property
    def storage_warning(self) -> bool:
        return self.storage_percentage > STORAGE_WARNING_PERCENT

    # --- session ---

    def login(self, email: str) -> str:
        if not email or not email.strip():
            raise ValidationError("Enter your email to see your designs.")
        self.client_session = email
        self.view_mode = Role.CLIENT
        return email

    def logout(self):
        self.client_session = None

    def set_view_mode(self, role):
        self.view_mode = Role(role)

    def set_designer_tab(self, tab):
        self.designer_tab = DesignerTab(tab)

    def set_admin_email(self, email: str) -> str:
        if not email or not email.strip():
            raise ValidationError("The notification email cannot be empty.")
        self.admin_email = email.strip()
        return self.admin_email

    def connect_drive(self):
        self.drive_connected = True

    def log_notification(self, line: str):
        with lock:
            self.notification_log = ([line] + self.notification_log)[:NOTIFICATION_LOG_SIZE]


def demo_submissions() -> List[Submission]:
    return [
        Submission(
            id=1,
            title="Logo Redesign - Option A",
            description="Minimal version using the corporate palette.",
            status=SubmissionStatus.APPROVED,
            image_url="https://images.unsplash.com/photo-1626785774573-4b7993125651?auto=format&fit=crop&q=80&w=800",
            date=datetime.date(2023, 10, 25),
            feedback="Love this option!",
            file_name="logo_v1.png",
            file_size=12.5,
            client_email="client@tech.com",
            is_archived=False,
            drive_linked=True,
        )
    ]
