# frontend/portal/ui.py

import gradio as gr

from .handlers import SUBMISSION_COLUMNS


def create_designer_panel():
    """Builds the designer side: upload form, submission lists and studio settings."""
    with gr.Column(visible=True) as designer_column:
        with gr.Row():
            with gr.Column(scale=1, min_width=300):
                with gr.Group():
                    gr.Markdown("### New delivery")
                    client_email_input = gr.Textbox(label="Client email", placeholder="client@example.com")
                    title_input = gr.Textbox(label="Project", placeholder="e.g. Final logo")
                    description_input = gr.Textbox(label="Description", lines=3)
                    image_input = gr.Image(label="Design file", type="filepath")
                    upload_btn = gr.Button("Confirm and notify", variant="primary")

                with gr.Group():
                    gr.Markdown("### Mail settings")
                    admin_email_input = gr.Textbox(label="Notification copy goes to")
                    save_admin_btn = gr.Button("Save")

                with gr.Group():
                    gr.Markdown("### Storage")
                    storage_status = gr.Markdown()
                    drive_btn = gr.Button("Connect Google Drive", variant="secondary")

                with gr.Group():
                    with gr.Row():
                        gr.Markdown("### Mail log")
                        refresh_btn = gr.Button("🔄", size="sm")
                    notification_log = gr.Markdown()

            with gr.Column(scale=3):
                designer_title = gr.Markdown()
                tab_radio = gr.Radio(
                    label="Show",
                    choices=[("Active", "active"), ("Archived", "archived")],
                    value="active",
                    interactive=True,
                )
                designer_dataframe = gr.DataFrame(headers=SUBMISSION_COLUMNS, interactive=False)
                designer_gallery = gr.Gallery(label="Designs", columns=3, height="auto")
                with gr.Row():
                    selected_id = gr.Number(label="Submission ID", precision=0)
                    archive_btn = gr.Button("🗄️ Archive / restore")
                    delete_btn = gr.Button("🗑️ Delete", variant="stop")

    components = {
        "designer_column": designer_column,
        "client_email_input": client_email_input, "title_input": title_input,
        "description_input": description_input, "image_input": image_input, "upload_btn": upload_btn,
        "admin_email_input": admin_email_input, "save_admin_btn": save_admin_btn,
        "storage_status": storage_status, "drive_btn": drive_btn,
        "refresh_btn": refresh_btn, "notification_log": notification_log,
        "designer_title": designer_title, "tab_radio": tab_radio,
        "designer_dataframe": designer_dataframe, "designer_gallery": designer_gallery,
        "selected_id": selected_id, "archive_btn": archive_btn, "delete_btn": delete_btn,
    }
    return components


def create_client_panel():
    """Builds the client side: email login and the review list."""
    with gr.Column(visible=False) as client_column:
        with gr.Column(visible=True) as login_column:
            gr.Markdown("## Client portal\nEnter your email to see your designs.")
            login_email = gr.Textbox(label="Email", placeholder="you@example.com")
            login_btn = gr.Button("See my designs", variant="primary")

        with gr.Column(visible=False) as review_column:
            with gr.Row():
                client_title = gr.Markdown()
                logout_btn = gr.Button("Log out", size="sm")
            client_dataframe = gr.DataFrame(headers=SUBMISSION_COLUMNS, interactive=False)
            client_gallery = gr.Gallery(label="My designs", columns=2, height="auto")

            with gr.Group():
                gr.Markdown("### Review a pending design")
                review_dd = gr.Dropdown(label="Design", choices=[], interactive=True)
                feedback_input = gr.Textbox(label="Feedback", placeholder="Reason...", lines=3)
                with gr.Row():
                    approve_btn = gr.Button("✅ Approve", variant="primary")
                    reject_btn = gr.Button("✏️ Request changes", variant="stop")

    components = {
        "client_column": client_column, "login_column": login_column, "review_column": review_column,
        "login_email": login_email, "login_btn": login_btn, "logout_btn": logout_btn,
        "client_title": client_title, "client_dataframe": client_dataframe, "client_gallery": client_gallery,
        "review_dd": review_dd, "feedback_input": feedback_input,
        "approve_btn": approve_btn, "reject_btn": reject_btn,
    }
    return components
