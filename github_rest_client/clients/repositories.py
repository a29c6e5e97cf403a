"""Repository endpoints."""

from ..dispatcher import Dispatcher
from ..models import (
    Branch,
    Contributor,
    CreateRepositoryRequest,
    Release,
    Repository,
    RepositoryContent,
    Tag,
)
from ..options import MyRepositoryListOptions, Pagination, RepositoryListOptions
from ..query import with_query
from ..response import ApiResponse


class RepositoriesClient:
    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def get(self, owner: str, repo: str) -> ApiResponse[Repository]:
        return await self._dispatcher.send("GET", f"/repos/{owner}/{repo}", Repository)

    async def list_for_user(
        self, username: str, options: RepositoryListOptions | None = None
    ) -> ApiResponse[list[Repository]]:
        options = options or RepositoryListOptions()
        path = with_query(f"/users/{username}/repos", options.to_params())
        return await self._dispatcher.send("GET", path, list[Repository])

    async def list_mine(
        self, options: MyRepositoryListOptions | None = None
    ) -> ApiResponse[list[Repository]]:
        """List repositories the authenticated user can access."""
        options = options or MyRepositoryListOptions()
        path = with_query("/user/repos", options.to_params())
        return await self._dispatcher.send("GET", path, list[Repository])

    async def create(self, request: CreateRepositoryRequest) -> ApiResponse[Repository]:
        """Create a repository owned by the authenticated user."""
        return await self._dispatcher.send("POST", "/user/repos", Repository, body=request)

    async def delete(self, owner: str, repo: str) -> ApiResponse[str]:
        return await self._dispatcher.send_text("DELETE", f"/repos/{owner}/{repo}")

    async def list_branches(
        self, owner: str, repo: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[Branch]]:
        pagination = pagination or Pagination()
        path = with_query(f"/repos/{owner}/{repo}/branches", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[Branch])

    async def get_branch(self, owner: str, repo: str, branch: str) -> ApiResponse[Branch]:
        return await self._dispatcher.send("GET", f"/repos/{owner}/{repo}/branches/{branch}", Branch)

    async def list_tags(
        self, owner: str, repo: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[Tag]]:
        pagination = pagination or Pagination()
        path = with_query(f"/repos/{owner}/{repo}/tags", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[Tag])

    async def list_releases(
        self, owner: str, repo: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[Release]]:
        pagination = pagination or Pagination()
        path = with_query(f"/repos/{owner}/{repo}/releases", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[Release])

    async def get_latest_release(self, owner: str, repo: str) -> ApiResponse[Release]:
        return await self._dispatcher.send("GET", f"/repos/{owner}/{repo}/releases/latest", Release)

    async def list_contributors(
        self, owner: str, repo: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[Contributor]]:
        pagination = pagination or Pagination()
        path = with_query(f"/repos/{owner}/{repo}/contributors", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[Contributor])

    async def get_content(
        self, owner: str, repo: str, path: str, ref: str | None = None
    ) -> ApiResponse[RepositoryContent]:
        """Get a single file. ``content`` in the result is base64 encoded."""
        url = with_query(f"/repos/{owner}/{repo}/contents/{path}", {"ref": ref})
        return await self._dispatcher.send("GET", url, RepositoryContent)

    async def list_contents(
        self, owner: str, repo: str, path: str = "", ref: str | None = None
    ) -> ApiResponse[list[RepositoryContent]]:
        """List a directory; the empty path is the repository root."""
        url = with_query(f"/repos/{owner}/{repo}/contents/{path}", {"ref": ref})
        return await self._dispatcher.send("GET", url, list[RepositoryContent])
