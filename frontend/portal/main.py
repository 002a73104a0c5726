# frontend/portal/main.py
# Assembles the UI and wires the event handlers.

import atexit
import logging
import os
from functools import partial

import gradio as gr

from .config import config
from . import handlers
from . import ui
from .logging_config import setup_logging
from .notifier import NotificationDispatcher
from .store import SubmissionStore, demo_submissions

logger = logging.getLogger(__name__)


def create_store(app_config=config) -> SubmissionStore:
    """Initial store; Gradio gives every session its own deep copy."""
    return SubmissionStore(
        admin_email=app_config.admin_email,
        placeholder_image_url=app_config.placeholder_image_url,
        storage_limit=app_config.storage_limit,
        submissions=demo_submissions() if app_config.seed_demo else None,
    )


def build_app(dispatcher: NotificationDispatcher, app_config=config) -> gr.Blocks:
    with gr.Blocks(theme=gr.themes.Soft(primary_hue="indigo", secondary_hue="slate"), title="DesignFlow") as demo:
        # --- 1. Global Components ---
        store_state = gr.State(create_store(app_config))
        relay_status = gr.Markdown()
        gr.Markdown("# DESIGN**FLOW**")
        role_radio = gr.Radio(
            label="View as",
            choices=[("Designer", "designer"), ("Client", "client")],
            value="designer",
            interactive=True,
        )

        # --- 2. Panels ---
        designer_ui = ui.create_designer_panel()
        client_ui = ui.create_client_panel()

        components = {"store": store_state, **designer_ui, **client_ui}
        view_outputs = [components[key] for key in handlers.VIEW_KEYS]
        upload_form = [designer_ui["client_email_input"], designer_ui["title_input"],
                       designer_ui["description_input"], designer_ui["image_input"]]

        # --- 3. Wire Event Handlers ---
        demo.load(handlers.check_relay_status, outputs=relay_status)
        demo.load(handlers.refresh_view, inputs=store_state, outputs=view_outputs)
        demo.load(lambda: app_config.admin_email, outputs=designer_ui["admin_email_input"])

        role_radio.change(handlers.handle_switch_role, inputs=[store_state, role_radio], outputs=view_outputs)

        # Designer panel
        designer_ui["tab_radio"].change(handlers.handle_switch_tab, inputs=[store_state, designer_ui["tab_radio"]], outputs=view_outputs)
        designer_ui["upload_btn"].click(
            partial(handlers.handle_upload, dispatcher),
            inputs=[store_state] + upload_form,
            outputs=view_outputs + upload_form,
        )
        designer_ui["archive_btn"].click(handlers.handle_toggle_archive, inputs=[store_state, designer_ui["selected_id"]], outputs=view_outputs)
        designer_ui["delete_btn"].click(handlers.handle_delete, inputs=[store_state, designer_ui["selected_id"]], outputs=view_outputs)
        designer_ui["save_admin_btn"].click(handlers.handle_save_admin_email, inputs=[store_state, designer_ui["admin_email_input"]], outputs=view_outputs)
        designer_ui["drive_btn"].click(handlers.handle_connect_drive, inputs=store_state, outputs=view_outputs)
        designer_ui["refresh_btn"].click(handlers.refresh_view, inputs=store_state, outputs=view_outputs)

        # Client panel
        client_ui["login_btn"].click(handlers.handle_login, inputs=[store_state, client_ui["login_email"]], outputs=view_outputs)
        client_ui["logout_btn"].click(handlers.handle_logout, inputs=store_state, outputs=view_outputs)
        review_inputs = [store_state, client_ui["review_dd"], client_ui["feedback_input"]]
        client_ui["approve_btn"].click(
            partial(handlers.handle_review, dispatcher, "approved"),
            inputs=review_inputs,
            outputs=view_outputs + [client_ui["feedback_input"]],
        )
        client_ui["reject_btn"].click(
            partial(handlers.handle_review, dispatcher, "rejected"),
            inputs=review_inputs,
            outputs=view_outputs + [client_ui["feedback_input"]],
        )

    return demo


def main():
    """
    Builds the Gradio UI, wires up all the event handlers, and launches the interface.
    """
    os.environ["GRADIO_ANALYTICS_ENABLED"] = "false"
    setup_logging()

    dispatcher = NotificationDispatcher(config.relay_url, locale=config.locale, timeout=config.relay_timeout)
    atexit.register(dispatcher.shutdown)
    logger.info(f"Notifications go to: {config.relay_url or '(disabled)'}")

    demo = build_app(dispatcher)
    demo.queue().launch(server_name="0.0.0.0", server_port=config.run_port)
