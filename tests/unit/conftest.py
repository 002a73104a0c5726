import os
from concurrent.futures import Future

import pytest

# The relay refuses to import without a sender; tests never reach a real SMTP server.
os.environ.setdefault("SENDER_ACCOUNTS", "relay@example.com|secret")

from portal.store import SubmissionStore  # noqa: E402


class InlineExecutor:
    """Runs submitted work immediately so dispatch outcomes are visible to asserts."""

    def __init__(self):
        self.calls = 0

    def submit(self, fn, *args, **kwargs):
        self.calls += 1
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future

    def shutdown(self, wait=True):
        pass


@pytest.fixture
def store():
    return SubmissionStore(admin_email="studio@example.com", placeholder_image_url="https://img.test/placeholder.png")


@pytest.fixture
def inline_executor():
    return InlineExecutor()
