"""
Pytest fixtures for panic recovery tests.
Provides a raw ASGI harness so middleware can be driven without a server.
"""

import pytest
from unittest.mock import MagicMock


class SendRecorder:
    """Collects every ASGI message the app sends."""

    def __init__(self):
        self.messages = []

    async def __call__(self, message):
        self.messages.append(message)

    @property
    def start(self):
        return next(
            (m for m in self.messages if m["type"] == "http.response.start"), None
        )

    @property
    def body(self) -> bytes:
        return b"".join(
            m.get("body", b"") for m in self.messages if m["type"] == "http.response.body"
        )

    def header(self, name: str) -> str | None:
        if self.start is None:
            return None
        for key, value in self.start["headers"]:
            if key.decode("latin-1").lower() == name.lower():
                return value.decode("latin-1")
        return None


@pytest.fixture
def http_scope():
    """Minimal ASGI HTTP scope for GET /."""
    return {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": "/",
        "raw_path": b"/",
        "root_path": "",
        "query_string": b"",
        "headers": [],
        "client": ("testclient", 50000),
        "server": ("testserver", 80),
    }


@pytest.fixture
def receive():
    async def _receive():
        return {"type": "http.request", "body": b"", "more_body": False}

    return _receive


@pytest.fixture
def send():
    return SendRecorder()


@pytest.fixture
def log_func():
    """Capturing sink for the recovery middleware."""
    return MagicMock()


@pytest.fixture
def make_send():
    """Factory for extra recorders when one test drives several requests."""
    return SendRecorder
