# frontend/portal/config.py
# Command-line arguments win over environment variables (frontend/.env), which win over defaults.

import argparse
import os
from dotenv import load_dotenv

env_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), '.env')
load_dotenv(dotenv_path=env_path)

DEFAULT_RELAY_URL = "http://127.0.0.1:8421/api/send-email"
PLACEHOLDER_IMAGE_URL = "https://images.unsplash.com/photo-1557683316-973673baf926?auto=format&fit=crop&q=80&w=800"


class AppConfig:
    """
    Parses command-line arguments and environment variables for the review portal.
    """
    def __init__(self, argv=None):
        parser = argparse.ArgumentParser(description="DesignFlow review portal launcher", allow_abbrev=False)
        parser.add_argument(
            "--port",
            type=int,
            default=int(os.getenv("DESIGNFLOW_PORT", 10101)),
            help="Port to run the portal on (default: 10101)"
        )
        parser.add_argument(
            "--relay-url",
            type=str,
            default=os.getenv("DESIGNFLOW_RELAY_URL", DEFAULT_RELAY_URL),
            help="Mail relay endpoint; an empty value disables outbound notifications"
        )
        parser.add_argument(
            "--admin-email",
            type=str,
            default=os.getenv("DESIGNFLOW_ADMIN_EMAIL", "studio@example.com"),
            help="Address that receives a copy of every notification"
        )
        parser.add_argument(
            "--storage-limit",
            type=float,
            default=float(os.getenv("DESIGNFLOW_STORAGE_LIMIT", 2000)),
            help="Storage ceiling in MB for the usage indicator (default: 2000)"
        )
        parser.add_argument(
            "--locale",
            type=str,
            choices=["en", "es"],
            default=os.getenv("DESIGNFLOW_LOCALE", "en"),
            help="Language of log lines and notification texts"
        )
        parser.add_argument(
            "--timeout",
            type=float,
            default=float(os.getenv("DESIGNFLOW_RELAY_TIMEOUT", 10)),
            help="Relay request timeout in seconds"
        )
        parser.add_argument(
            "--seed-demo",
            action="store_true",
            default=os.getenv("DESIGNFLOW_SEED_DEMO", "").lower() in ("1", "true", "yes"),
            help="Start every session with a sample approved submission"
        )

        # Gradio's reload mode passes extra arguments.
        args, _ = parser.parse_known_args(argv)

        self.run_port = args.port
        self.relay_url = (args.relay_url or "").strip()
        self.admin_email = args.admin_email
        self.storage_limit = args.storage_limit
        self.locale = args.locale
        self.relay_timeout = args.timeout
        self.seed_demo = args.seed_demo
        self.placeholder_image_url = PLACEHOLDER_IMAGE_URL

    @property
    def relay_enabled(self) -> bool:
        return bool(self.relay_url)


config = AppConfig()
