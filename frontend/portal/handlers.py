# frontend/portal/handlers.py
# Gradio callbacks. Every callback receives the session's SubmissionStore,
# applies at most one store mutation, fires any notification after the
# mutation is committed, and returns a full re-render of the view.

import logging
import os

import gradio as gr
import pandas as pd

from . import api_client
from .errors import ReviewError, ValidationError
from .messages import text
from .models import NotificationAction, Role, SubmissionDraft, SubmissionStatus
from .store import simulated_file_size

logger = logging.getLogger(__name__)

SUBMISSION_COLUMNS = ["ID", "Title", "Client", "Status", "Feedback", "Date", "File", "Size (MB)", "Drive"]

# Output order of render(); main.py wires components in exactly this order.
VIEW_KEYS = [
    "store",
    "designer_column", "client_column", "login_column", "review_column",
    "designer_title", "designer_dataframe", "designer_gallery", "storage_status", "drive_btn", "notification_log",
    "client_title", "client_dataframe", "client_gallery", "review_dd",
]

STATUS_BADGES = {
    SubmissionStatus.PENDING: "🟡 pending",
    SubmissionStatus.APPROVED: "🟢 approved",
    SubmissionStatus.REJECTED: "🔴 rejected",
}


# --- Rendering helpers ---

def submissions_frame(submissions) -> pd.DataFrame:
    rows = [{
        "ID": s.id,
        "Title": s.title,
        "Client": s.client_email,
        "Status": STATUS_BADGES[s.status],
        "Feedback": s.feedback,
        "Date": s.date.isoformat(),
        "File": s.file_name,
        "Size (MB)": round(s.file_size, 1),
        "Drive": "☁️" if s.drive_linked else "",
    } for s in submissions]
    return pd.DataFrame(rows, columns=SUBMISSION_COLUMNS)


def gallery_items(submissions) -> list:
    return [(s.image_url, f"{s.title} · {s.status.value}") for s in submissions]


def storage_markdown(store) -> str:
    marker = "🔴" if store.storage_warning else "🟣"
    return (f"{marker} **{store.used_storage:.1f} MB** of {store.storage_limit:.0f} MB used "
            f"({store.storage_percentage:.0f}%)")


def log_markdown(store) -> str:
    if not store.notification_log:
        return "_No notifications yet._"
    return "\n".join(f"- {line}" for line in store.notification_log)


def review_choices(submissions) -> list:
    return [(f"{s.id} · {s.title}", s.id) for s in submissions if s.is_pending]


def render(store) -> list:
    """Recomputes every derived view from the store, in VIEW_KEYS order."""
    designer_rows = store.visible(Role.DESIGNER, tab=store.designer_tab)
    client_rows = store.visible(Role.CLIENT, store.client_session)
    is_designer = store.view_mode == Role.DESIGNER
    logged_in = bool(store.client_session)
    designer_title = "## Control panel" if store.designer_tab.value == "active" else "## Archive"
    client_title = f"## My proposals ({store.client_session})" if logged_in else "## Client portal"
    return [
        store,
        gr.update(visible=is_designer),
        gr.update(visible=not is_designer),
        gr.update(visible=not logged_in),
        gr.update(visible=logged_in),
        designer_title,
        submissions_frame(designer_rows),
        gallery_items(designer_rows),
        storage_markdown(store),
        gr.update(visible=not store.drive_connected),
        log_markdown(store),
        client_title,
        submissions_frame(client_rows),
        gallery_items(client_rows),
        gr.update(choices=review_choices(client_rows), value=None),
    ]


def _submission_id(raw):
    if raw is None or raw == "":
        raise ValidationError("Select a submission first.")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid submission id: {raw}")


# --- Gradio Callback Handlers ---

def check_relay_status():
    """Callback to check the mail relay on load."""
    return api_client.check_relay()


def refresh_view(store):
    return render(store)


def handle_switch_role(store, role):
    store.set_view_mode(role)
    return render(store)


def handle_switch_tab(store, tab):
    store.set_designer_tab(tab)
    return render(store)


def handle_upload(dispatcher, store, client_email, title, description, image_path):
    """Creates a submission from the upload form and notifies the client."""
    try:
        draft = SubmissionDraft(
            title=title or "",
            client_email=client_email or "",
            description=description or "",
            image_url=image_path or None,
            file_name=os.path.basename(image_path) if image_path else "",
            file_size=simulated_file_size() if image_path else 0.0,
        )
        submission = store.create(draft)
    except ReviewError as e:
        gr.Warning(str(e))
        return render(store) + [gr.update(), gr.update(), gr.update(), gr.update()]

    dispatcher.notify(store, submission, NotificationAction.CREATED)
    gr.Info(f"Delivery '{submission.title}' sent to {submission.client_email}.")
    return render(store) + ["", "", "", None]


def handle_toggle_archive(store, submission_id):
    try:
        submission = store.toggle_archive(_submission_id(submission_id))
    except ReviewError as e:
        gr.Warning(str(e))
        return render(store)
    gr.Info(f"'{submission.title}' {'archived' if submission.is_archived else 'restored'}.")
    return render(store)


def handle_delete(store, submission_id):
    try:
        submission = store.delete(_submission_id(submission_id))
    except ReviewError as e:
        gr.Warning(str(e))
        return render(store)
    gr.Info(f"'{submission.title}' deleted.")
    return render(store)


def handle_save_admin_email(store, email):
    try:
        saved = store.set_admin_email(email)
    except ReviewError as e:
        gr.Warning(str(e))
        return render(store)
    gr.Info(f"Notifications will be copied to {saved}.")
    return render(store)


def handle_connect_drive(store):
    store.connect_drive()
    gr.Info("Google Drive connected. New deliveries will be marked as linked.")
    return render(store)


def handle_login(store, email):
    try:
        store.login(email)
    except ReviewError as e:
        gr.Warning(str(e))
    return render(store)


def handle_logout(store):
    store.logout()
    return render(store)


def handle_review(dispatcher, status, store, submission_id, feedback):
    """Approves or rejects a pending submission, then notifies the admin."""
    status = SubmissionStatus(status)
    if status == SubmissionStatus.APPROVED and not (feedback or "").strip():
        feedback = text("feedback.approved_default", dispatcher.locale)
    try:
        submission = store.update_status(_submission_id(submission_id), status, feedback or "")
    except ReviewError as e:
        gr.Warning(str(e))
        return render(store) + [gr.update()]

    dispatcher.notify(store, submission, NotificationAction.for_status(status))
    gr.Info(f"'{submission.title}' marked as {status.value}.")
    return render(store) + [""]
