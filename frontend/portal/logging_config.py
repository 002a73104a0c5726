# frontend/portal/logging_config.py

import os

from relay.core.logging_config import configure_file_logging

PORTAL_QUIET_LOGGERS = {
    'httpx': 'WARNING',
    'urllib3': 'WARNING',
}


def setup_logging(log_dir: str = None) -> str:
    """Portal logging, written under frontend/logs/."""
    if log_dir is None:
        log_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), '..', 'logs')
    return configure_file_logging(log_dir, 'designflow_portal.log', PORTAL_QUIET_LOGGERS)
