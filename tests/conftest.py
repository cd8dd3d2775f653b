import os

import httpx
import pytest
import structlog

from http2sms.config import configure, reset_settings

SUCCESS_JSON = '{"status":100,"creditLeft":"1987","SmsIds":["123456789"]}'


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate every test from OVH_SMS_* variables and global state."""
    for key in list(os.environ):
        if key.startswith("OVH_SMS_"):
            monkeypatch.delenv(key)
    reset_settings()
    yield
    monkeypatch.undo()
    reset_settings()
    structlog.reset_defaults()


@pytest.fixture
def configured():
    return configure(account="sms-test-1", login="test_user", password="test_password")


class RecordingHandler:
    """MockTransport handler returning a canned body and keeping requests."""

    def __init__(self, body: str = SUCCESS_JSON, status_code: int = 200, error: Exception = None):
        self.body = body
        self.status_code = status_code
        self.error = error
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def params(self) -> dict:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest.fixture
def client(configured, handler):
    from http2sms.http import Http2SmsClient

    return Http2SmsClient(transport=httpx.MockTransport(handler))
