"""E2E fixtures: real GitHub API, opt-in with GITHUB_E2E=1.

GITHUB_TOKEN is used when set; without it the calls run anonymously.
"""

import os

import pytest

from github_rest_client.client import GitHubClient
from github_rest_client.settings import Settings


def pytest_collection_modifyitems(config, items):
    if os.environ.get("GITHUB_E2E") == "1":
        return
    skip = pytest.mark.skip(reason="set GITHUB_E2E=1 to run against the real GitHub API")
    for item in items:
        if "e2e" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def settings():
    return Settings()


def make_live_client(settings) -> GitHubClient:
    return GitHubClient(settings)
