# backend/relay/services/email_service.py
import aiosmtplib
import random
import logging
from email.mime.text import MIMEText
from email.mime.multipart import MIMEMultipart
from ..core.config import settings

logger = logging.getLogger(__name__)


class EmailService:
    """Sends relay messages over SMTP."""

    def __init__(self, accounts=None, smtp_server=None, smtp_port=None, use_tls=None):
        self.accounts = accounts if accounts is not None else settings.SENDER_ACCOUNTS
        self.smtp_server = smtp_server or settings.SMTP_SERVER
        self.smtp_port = smtp_port or settings.SMTP_PORT
        self.use_tls = settings.SMTP_USE_TLS if use_tls is None else use_tls
        if not self.accounts:
            error_msg = "No sender account available, check backend/.env"
            logger.critical(error_msg)
            raise ValueError(error_msg)

    def _get_random_account(self) -> dict:
        """Picks one sender from the pool so load spreads across accounts."""
        return random.choice(self.accounts)

    def build_message(self, sender_email: str, receiver_email: str, subject: str,
                      text_content: str, html_content: str = None) -> MIMEMultipart:
        message = MIMEMultipart('alternative')
        message["Subject"] = subject
        message["From"] = f"{settings.MAIL_FROM_NAME} <{sender_email}>"
        message["To"] = receiver_email
        message.attach(MIMEText(text_content, "plain", "utf-8"))
        if html_content:
            message.attach(MIMEText(html_content, "html", "utf-8"))
        return message

    async def send_email(
        self,
        receiver_email: str,
        subject: str,
        text_content: str,
        html_content: str = None,
    ) -> bool:
        """
        Sends a single message without blocking the event loop.

        :param receiver_email: recipient address.
        :param subject: message subject.
        :param text_content: plain-text body.
        :param html_content: optional HTML alternative.
        :return: True when the SMTP server accepted the message.
        """
        sender_account = self._get_random_account()
        sender_email = sender_account["email"]
        sender_password = sender_account["password"]

        message = self.build_message(sender_email, receiver_email, subject, text_content, html_content)

        try:
            await aiosmtplib.send(
                message,
                hostname=self.smtp_server,
                port=self.smtp_port,
                username=sender_email,
                password=sender_password,
                use_tls=self.use_tls,
            )
            logger.info(f"Mail sent: [{sender_email}] -> [{receiver_email}] | subject: {subject}")
            return True

        except aiosmtplib.SMTPAuthenticationError:
            logger.error(f"Mail failed: sender [{sender_email}] was rejected at login. Check the address and app password.")
            return False
        except aiosmtplib.SMTPServerDisconnected:
            # Some providers drop the connection right after accepting the message.
            logger.warning(f"Mail probably sent (server disconnected early): [{sender_email}] -> [{receiver_email}].")
            return True
        except Exception as e:
            logger.error(f"Mail failed: [{sender_email}] -> [{receiver_email}]. Details: {e}", exc_info=True)
            return False


email_service = EmailService()
