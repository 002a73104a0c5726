# backend/relay/templates/email_templates.py
import html

from ..core.config import settings


class NotificationTemplate:
    """
    Renders the design-update message sent to the client and copied to the admin.
    The subject is fixed; the body interpolates the project title and description.
    """

    def __init__(self, subject: str = None, copy_prefix: str = None):
        self.subject = subject or settings.MAIL_SUBJECT
        self.copy_prefix = settings.MAIL_COPY_PREFIX if copy_prefix is None else copy_prefix

    def copy_subject(self) -> str:
        return f"{self.copy_prefix}{self.subject}"

    @staticmethod
    def render_text(project_title: str, description: str) -> str:
        return f"Hello,\n\nThere is news about your project: {project_title}\n\n{description}"

    def render_html(self, project_title: str, description: str) -> str:
        content = f"""
            <p>Hello,</p>
            <p>There is news about your project: <strong>{html.escape(project_title)}</strong></p>
            <pre>{html.escape(description)}</pre>
        """
        return self.get_base_html(content, self.subject)

    def render(self, project_title: str, description: str) -> dict:
        return {
            "subject": self.subject,
            "text": self.render_text(project_title, description),
            "html": self.render_html(project_title, description),
        }

    @staticmethod
    def get_base_html(content: str, title: str) -> str:
        """Responsive container shared by every message."""
        return f"""
        <!DOCTYPE html>
        <html lang="en">
        <head>
            <meta charset="UTF-8">
            <meta name="viewport" content="width=device-width, initial-scale=1.0">
            <style>
                body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif; line-height: 1.6; color: #333; background-color: #f8fafc; margin: 0; padding: 0; }}
                .wrapper {{ width: 100%; table-layout: fixed; background-color: #f8fafc; padding: 40px 0; }}
                .container {{ max-width: 600px; margin: 0 auto; background-color: #ffffff; border-radius: 12px; box-shadow: 0 4px 12px rgba(0,0,0,0.08); overflow: hidden; }}
                .header {{ background-color: #4f46e5; color: #ffffff; padding: 30px 25px; text-align: center; }}
                .header h1 {{ margin: 0; font-size: 26px; font-weight: 600; }}
                .content {{ padding: 30px 25px; color: #555; word-wrap: break-word; word-break: break-word; }}
                .content p {{ margin: 0 0 15px; }}
                .footer {{ font-size: 12px; color: #888; text-align: center; padding: 20px 25px; background-color: #f9f9f9; }}
                pre {{ white-space: pre-wrap; word-wrap: break-word; font-family: inherit; }}
            </style>
        </head>
        <body>
            <div class="wrapper">
                <div class="container">
                    <div class="header"><h1>{html.escape(title)}</h1></div>
                    <div class="content">{content}</div>
                    <div class="footer"><p>Sent by {html.escape(settings.MAIL_FROM_NAME)}</p></div>
                </div>
            </div>
        </body>
        </html>
        """


notification_template = NotificationTemplate()
