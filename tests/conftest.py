"""Shared fixtures for slack_notifier tests."""

import json
from urllib.parse import parse_qs

import httpx
import pytest


WEBHOOK_URL = "https://hooks.slack.com/services/T0/B0/X0"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SLACK_* variables from the developer's shell out of the tests."""
    monkeypatch.delenv("SLACK_WEBHOOK_TOKEN", raising=False)
    monkeypatch.delenv("SLACK_WEBHOOK_BASE_URL", raising=False)


@pytest.fixture
def config():
    return {
        "webhook_base_url": "https://hooks.slack.com/services",
        "webhook_token": "T0/B0/X0",
    }


@pytest.fixture
def execution_data():
    """The Deploy job of project infra, execution 42."""
    return {
        "id": 42,
        "href": "http://host/exec/42",
        "project": "infra",
        "user": "admin",
        "status": "running",
        "job": {
            "name": "Deploy",
            "href": "http://host/job/1",
            "project": "infra",
        },
    }


def sent_message(request: httpx.Request) -> dict:
    """Decode the JSON document out of a form-encoded webhook request."""
    form = parse_qs(request.content.decode("utf-8"))
    assert list(form) == ["payload"]
    return json.loads(form["payload"][0])


class RecordingStream(httpx.SyncByteStream):
    """Response body that counts how often it was closed."""

    def __init__(self, chunks, fail_after=False):
        self.chunks = chunks
        self.fail_after = fail_after
        self.closed = 0

    def __iter__(self):
        yield from self.chunks
        if self.fail_after:
            raise httpx.ReadError("connection reset by peer")

    def close(self):
        self.closed += 1


class RecordingTransport(httpx.MockTransport):
    """Mock transport that counts how often it was closed."""

    def __init__(self, handler):
        super().__init__(handler)
        self.closed = 0
        self.requests = []

    def handle_request(self, request):
        self.requests.append(request)
        return super().handle_request(request)

    def close(self):
        self.closed += 1
