# frontend/portal/api_client.py
# Every HTTP request the portal makes to the mail relay goes through here.

import requests

from .config import config
from .errors import DispatchError


def check_relay(relay_url: str = None) -> str:
    """Reports whether the relay answers at its root URL."""
    relay_url = config.relay_url if relay_url is None else relay_url
    if not relay_url:
        return "⚪ Mail relay disabled"
    root_url = relay_url.split("/api/")[0]
    try:
        response = requests.get(root_url, timeout=2)
        if response.status_code == 200:
            return "🟢 Mail relay online"
        return f"🟡 Mail relay answered with status {response.status_code}"
    except requests.RequestException:
        return "🔴 Mail relay not reachable"


def post_notification(relay_url: str, payload: dict, timeout: float = 10) -> dict:
    """
    Posts one notification to the relay.
    Raises DispatchError when the relay cannot be reached, answers non-2xx,
    or reports {"status": "error"}.
    """
    try:
        response = requests.post(relay_url, json=payload, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise DispatchError(f"Relay request failed: {e}") from e

    try:
        body = response.json()
    except ValueError:
        # Only the HTTP status matters; the body is advisory.
        return {}
    if isinstance(body, dict) and body.get("status") == "error":
        raise DispatchError(f"Relay reported an error: {body.get('message', 'unknown')}")
    return body if isinstance(body, dict) else {}
