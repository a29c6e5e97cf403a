"""Issue endpoints, including comments, labels and milestones."""

from ..dispatcher import Dispatcher
from ..models import (
    CreateCommentRequest,
    CreateIssueRequest,
    Issue,
    IssueComment,
    Label,
    Milestone,
    UpdateIssueRequest,
)
from ..options import CommentListOptions, IssueListOptions, MilestoneListOptions, Pagination
from ..query import with_query
from ..response import ApiResponse


class IssuesClient:
    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def list_for_repository(
        self, owner: str, repo: str, options: IssueListOptions | None = None
    ) -> ApiResponse[list[Issue]]:
        """List issues of a repository. ``options.filter`` is not used here."""
        options = options or IssueListOptions()
        params = options.to_params()
        params.pop("filter")
        path = with_query(f"/repos/{owner}/{repo}/issues", params)
        return await self._dispatcher.send("GET", path, list[Issue])

    async def list_mine(self, options: IssueListOptions | None = None) -> ApiResponse[list[Issue]]:
        """List issues assigned to the authenticated user across repositories."""
        options = options or IssueListOptions()
        path = with_query("/issues", options.to_params())
        return await self._dispatcher.send("GET", path, list[Issue])

    async def get(self, owner: str, repo: str, number: int) -> ApiResponse[Issue]:
        return await self._dispatcher.send("GET", f"/repos/{owner}/{repo}/issues/{number}", Issue)

    async def create(self, owner: str, repo: str, request: CreateIssueRequest) -> ApiResponse[Issue]:
        return await self._dispatcher.send("POST", f"/repos/{owner}/{repo}/issues", Issue, body=request)

    async def update(
        self, owner: str, repo: str, number: int, request: UpdateIssueRequest
    ) -> ApiResponse[Issue]:
        return await self._dispatcher.send(
            "PATCH", f"/repos/{owner}/{repo}/issues/{number}", Issue, body=request
        )

    async def lock(self, owner: str, repo: str, number: int) -> ApiResponse[str]:
        return await self._dispatcher.send_text("PUT", f"/repos/{owner}/{repo}/issues/{number}/lock")

    async def unlock(self, owner: str, repo: str, number: int) -> ApiResponse[str]:
        return await self._dispatcher.send_text("DELETE", f"/repos/{owner}/{repo}/issues/{number}/lock")

    async def list_comments(
        self, owner: str, repo: str, number: int, options: CommentListOptions | None = None
    ) -> ApiResponse[list[IssueComment]]:
        options = options or CommentListOptions()
        path = with_query(f"/repos/{owner}/{repo}/issues/{number}/comments", options.to_params())
        return await self._dispatcher.send("GET", path, list[IssueComment])

    async def create_comment(
        self, owner: str, repo: str, number: int, request: CreateCommentRequest
    ) -> ApiResponse[IssueComment]:
        return await self._dispatcher.send(
            "POST", f"/repos/{owner}/{repo}/issues/{number}/comments", IssueComment, body=request
        )

    async def update_comment(
        self, owner: str, repo: str, comment_id: int, request: CreateCommentRequest
    ) -> ApiResponse[IssueComment]:
        return await self._dispatcher.send(
            "PATCH", f"/repos/{owner}/{repo}/issues/comments/{comment_id}", IssueComment, body=request
        )

    async def delete_comment(self, owner: str, repo: str, comment_id: int) -> ApiResponse[str]:
        return await self._dispatcher.send_text("DELETE", f"/repos/{owner}/{repo}/issues/comments/{comment_id}")

    async def list_labels(
        self, owner: str, repo: str, pagination: Pagination | None = None
    ) -> ApiResponse[list[Label]]:
        pagination = pagination or Pagination()
        path = with_query(f"/repos/{owner}/{repo}/labels", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[Label])

    async def list_milestones(
        self, owner: str, repo: str, options: MilestoneListOptions | None = None
    ) -> ApiResponse[list[Milestone]]:
        options = options or MilestoneListOptions()
        path = with_query(f"/repos/{owner}/{repo}/milestones", options.to_params())
        return await self._dispatcher.send("GET", path, list[Milestone])

    async def get_milestone(self, owner: str, repo: str, number: int) -> ApiResponse[Milestone]:
        return await self._dispatcher.send("GET", f"/repos/{owner}/{repo}/milestones/{number}", Milestone)
