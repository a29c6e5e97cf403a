"""Search endpoints.

Each method takes a GitHub search query (``q``), e.g.
``"language:python stars:>1000"``, and returns one page of results.
Valid ``sort`` values differ per kind:

- repositories: stars, forks, help-wanted-issues, updated
- code: indexed
- issues: comments, reactions, created, updated
- users: followers, repositories, joined
- commits: author-date, committer-date
"""

from ..dispatcher import Dispatcher
from ..models import (
    CodeSearchResult,
    CommitSearchResult,
    IssueSearchResult,
    RepositorySearchResult,
    UserSearchResult,
)
from ..options import SearchOptions
from ..query import with_query
from ..response import ApiResponse


class SearchClient:
    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def _search(self, kind: str, query: str, options: SearchOptions | None, result_type):
        options = options or SearchOptions()
        path = with_query(f"/search/{kind}", options.to_params(query))
        return await self._dispatcher.send("GET", path, result_type)

    async def repositories(
        self, query: str, options: SearchOptions | None = None
    ) -> ApiResponse[RepositorySearchResult]:
        return await self._search("repositories", query, options, RepositorySearchResult)

    async def code(self, query: str, options: SearchOptions | None = None) -> ApiResponse[CodeSearchResult]:
        return await self._search("code", query, options, CodeSearchResult)

    async def issues(self, query: str, options: SearchOptions | None = None) -> ApiResponse[IssueSearchResult]:
        """Search issues and pull requests."""
        return await self._search("issues", query, options, IssueSearchResult)

    async def users(self, query: str, options: SearchOptions | None = None) -> ApiResponse[UserSearchResult]:
        return await self._search("users", query, options, UserSearchResult)

    async def commits(self, query: str, options: SearchOptions | None = None) -> ApiResponse[CommitSearchResult]:
        return await self._search("commits", query, options, CommitSearchResult)
