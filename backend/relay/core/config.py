# backend/relay/core/config.py
import os
from dotenv import load_dotenv

# Loads backend/.env; variables already present in the environment win.
env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), '..', '.env')
load_dotenv(dotenv_path=env_path)


def _parse_sender_accounts(raw: str) -> list[dict]:
    """Parses 'email|password,email|password' into account dicts."""
    accounts = []
    for chunk in raw.split(','):
        chunk = chunk.strip()
        if not chunk:
            continue
        if '|' not in chunk:
            raise ValueError(f"Malformed SENDER_ACCOUNTS entry (expected email|password): {chunk}")
        email, password = chunk.split('|', 1)
        accounts.append({"email": email.strip(), "password": password.strip()})
    return accounts


class Settings:
    """
    Relay configuration read from environment variables.
    Values are converted by hand; there is no pydantic settings layer here.
    """
    # SMTP
    SMTP_SERVER: str = os.getenv("SMTP_SERVER", "smtp.gmail.com")
    SMTP_PORT: int = int(os.getenv("SMTP_PORT", 465))
    SMTP_USE_TLS: bool = os.getenv("SMTP_USE_TLS", "true").lower() in ("1", "true", "yes")

    _sender_accounts_str = os.getenv("SENDER_ACCOUNTS")
    if not _sender_accounts_str:
        raise ValueError("SENDER_ACCOUNTS is not set. Configure at least one sender in backend/.env")

    SENDER_ACCOUNTS: list[dict] = _parse_sender_accounts(_sender_accounts_str)

    # Message
    MAIL_FROM_NAME: str = os.getenv("MAIL_FROM_NAME", "DesignFlow")
    MAIL_SUBJECT: str = os.getenv("MAIL_SUBJECT", "Design update")
    MAIL_COPY_PREFIX: str = os.getenv("MAIL_COPY_PREFIX", "Copy: ")


settings = Settings()
