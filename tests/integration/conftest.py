"""Shared helpers: a GitHubClient wired to an in-memory transport.

Nothing here touches the network. Each test builds the responses it wants
and inspects the requests the client sent.
"""

import json

import httpx
import pytest

from github_rest_client.client import GitHubClient
from github_rest_client.settings import Settings

RATE_LIMIT_HEADERS = {
    "X-RateLimit-Limit": "5000",
    "X-RateLimit-Remaining": "4999",
    "X-RateLimit-Reset": "1700000000",
}


class Recorder:
    """MockTransport handler that replays queued responses and keeps requests."""

    def __init__(self, *responses: httpx.Response):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        template = self.responses[0] if len(self.responses) == 1 else self.responses.pop(0)
        # A fresh Response per request; httpx binds each one to its request.
        return httpx.Response(template.status_code, headers=template.headers, content=template.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


def json_response(status_code=200, body=None, headers=None) -> httpx.Response:
    return httpx.Response(status_code, json=body, headers={**RATE_LIMIT_HEADERS, **(headers or {})})


def text_response(status_code=204, text="", headers=None) -> httpx.Response:
    return httpx.Response(status_code, text=text, headers={**RATE_LIMIT_HEADERS, **(headers or {})})


def make_client(handler, token="test-token", **overrides) -> GitHubClient:
    settings = Settings(_env_file=None, token=token, **overrides)
    return GitHubClient(settings, transport=httpx.MockTransport(handler))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("GITHUB_TOKEN", "GITHUB_BASE_URL", "GITHUB_USER_AGENT", "GITHUB_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
