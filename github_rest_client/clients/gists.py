"""Gist endpoints, including stars, forks, history and comments."""

from ..dispatcher import Dispatcher
from ..models import (
    CreateGistCommentRequest,
    CreateGistRequest,
    Gist,
    GistComment,
    GistCommit,
    UpdateGistRequest,
)
from ..options import GistListOptions, Pagination
from ..query import with_query
from ..response import ApiResponse


class GistsClient:
    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def _list(self, path: str, options: GistListOptions | None) -> ApiResponse[list[Gist]]:
        options = options or GistListOptions()
        return await self._dispatcher.send("GET", with_query(path, options.to_params()), list[Gist])

    async def list_mine(self, options: GistListOptions | None = None) -> ApiResponse[list[Gist]]:
        return await self._list("/gists", options)

    async def list_public(self, options: GistListOptions | None = None) -> ApiResponse[list[Gist]]:
        return await self._list("/gists/public", options)

    async def list_starred(self, options: GistListOptions | None = None) -> ApiResponse[list[Gist]]:
        return await self._list("/gists/starred", options)

    async def list_for_user(
        self, username: str, options: GistListOptions | None = None
    ) -> ApiResponse[list[Gist]]:
        return await self._list(f"/users/{username}/gists", options)

    async def get(self, gist_id: str) -> ApiResponse[Gist]:
        return await self._dispatcher.send("GET", f"/gists/{gist_id}", Gist)

    async def create(self, request: CreateGistRequest) -> ApiResponse[Gist]:
        return await self._dispatcher.send("POST", "/gists", Gist, body=request)

    async def update(self, gist_id: str, request: UpdateGistRequest) -> ApiResponse[Gist]:
        return await self._dispatcher.send("PATCH", f"/gists/{gist_id}", Gist, body=request)

    async def delete(self, gist_id: str) -> ApiResponse[str]:
        return await self._dispatcher.send_text("DELETE", f"/gists/{gist_id}")

    async def list_commits(
        self, gist_id: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[GistCommit]]:
        pagination = pagination or Pagination()
        path = with_query(f"/gists/{gist_id}/commits", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[GistCommit])

    async def fork(self, gist_id: str) -> ApiResponse[Gist]:
        return await self._dispatcher.send("POST", f"/gists/{gist_id}/forks", Gist)

    async def list_forks(self, gist_id: str, pagination: Pagination | None = None) -> ApiResponse[list[Gist]]:
        pagination = pagination or Pagination()
        path = with_query(f"/gists/{gist_id}/forks", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[Gist])

    async def star(self, gist_id: str) -> ApiResponse[str]:
        return await self._dispatcher.send_text("PUT", f"/gists/{gist_id}/star")

    async def unstar(self, gist_id: str) -> ApiResponse[str]:
        return await self._dispatcher.send_text("DELETE", f"/gists/{gist_id}/star")

    async def is_starred(self, gist_id: str) -> ApiResponse[str]:
        """204 if the authenticated user starred the gist, 404 if not."""
        return await self._dispatcher.send_text("GET", f"/gists/{gist_id}/star")

    async def list_comments(
        self, gist_id: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[GistComment]]:
        pagination = pagination or Pagination()
        path = with_query(f"/gists/{gist_id}/comments", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[GistComment])

    async def get_comment(self, gist_id: str, comment_id: int) -> ApiResponse[GistComment]:
        return await self._dispatcher.send("GET", f"/gists/{gist_id}/comments/{comment_id}", GistComment)

    async def create_comment(self, gist_id: str, request: CreateGistCommentRequest) -> ApiResponse[GistComment]:
        return await self._dispatcher.send("POST", f"/gists/{gist_id}/comments", GistComment, body=request)

    async def update_comment(
        self, gist_id: str, comment_id: int, request: CreateGistCommentRequest
    ) -> ApiResponse[GistComment]:
        return await self._dispatcher.send(
            "PATCH", f"/gists/{gist_id}/comments/{comment_id}", GistComment, body=request
        )

    async def delete_comment(self, gist_id: str, comment_id: int) -> ApiResponse[str]:
        return await self._dispatcher.send_text("DELETE", f"/gists/{gist_id}/comments/{comment_id}")
