"""Top-level GitHub REST API client built on httpx."""

import logging

import httpx

from .clients import (
    GistsClient,
    IssuesClient,
    PullRequestsClient,
    RepositoriesClient,
    SearchClient,
    UsersClient,
)
from .dispatcher import Dispatcher
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "2022-11-28"
MEDIA_TYPE = "application/vnd.github+json"


def default_headers(settings: Settings) -> dict[str, str]:
    """Headers sent with every request."""
    headers = {
        "Accept": MEDIA_TYPE,
        "User-Agent": settings.user_agent,
        "X-GitHub-Api-Version": API_VERSION,
    }
    if settings.token:
        headers["Authorization"] = f"Bearer {settings.token}"
    return headers


class GitHubClient:
    """Async client for the GitHub REST API.

    Resource areas are exposed as attributes (``repositories``, ``issues``,
    ``pull_requests``, ``users``, ``gists``, ``search``). All of them share one
    connection pool, so calls may be awaited concurrently. Without a token the
    client runs anonymously under GitHub's lower rate limit.

        async with GitHubClient() as gh:
            resp = await gh.repositories.get("python", "cpython")
            if resp.is_success:
                print(resp.data.stargazers_count)
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or get_settings()
        self._client = httpx.AsyncClient(
            base_url=self.settings.base_url,
            headers=default_headers(self.settings),
            timeout=self.settings.timeout,
            transport=transport,
        )
        if not self.settings.token:
            logger.debug("No GitHub token configured, using anonymous access")

        dispatcher = Dispatcher(self._client)
        self.repositories = RepositoriesClient(dispatcher)
        self.issues = IssuesClient(dispatcher)
        self.pull_requests = PullRequestsClient(dispatcher)
        self.users = UsersClient(dispatcher)
        self.gists = GistsClient(dispatcher)
        self.search = SearchClient(dispatcher)

    async def aclose(self):
        await self._client.aclose()

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()
