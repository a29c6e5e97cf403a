"""Pull request endpoints, including reviews and review comments."""

from ..dispatcher import Dispatcher
from ..models import (
    CreatePullRequestRequest,
    CreateReviewRequest,
    PullRequest,
    PullRequestFile,
    PullRequestReview,
    ReviewComment,
    ReviewCommentDraft,
    UpdatePullRequestRequest,
)
from ..options import MergeOptions, Pagination, PullRequestListOptions, ReviewCommentListOptions
from ..query import with_query
from ..response import ApiResponse


class PullRequestsClient:
    def __init__(self, dispatcher: Dispatcher):
        self._dispatcher = dispatcher

    async def list_for_repository(
        self, owner: str, repo: str, options: PullRequestListOptions | None = None
    ) -> ApiResponse[list[PullRequest]]:
        options = options or PullRequestListOptions()
        path = with_query(f"/repos/{owner}/{repo}/pulls", options.to_params())
        return await self._dispatcher.send("GET", path, list[PullRequest])

    async def get(self, owner: str, repo: str, number: int) -> ApiResponse[PullRequest]:
        return await self._dispatcher.send("GET", f"/repos/{owner}/{repo}/pulls/{number}", PullRequest)

    async def create(
        self, owner: str, repo: str, request: CreatePullRequestRequest
    ) -> ApiResponse[PullRequest]:
        return await self._dispatcher.send("POST", f"/repos/{owner}/{repo}/pulls", PullRequest, body=request)

    async def update(
        self, owner: str, repo: str, number: int, request: UpdatePullRequestRequest
    ) -> ApiResponse[PullRequest]:
        return await self._dispatcher.send(
            "PATCH", f"/repos/{owner}/{repo}/pulls/{number}", PullRequest, body=request
        )

    async def list_files(
        self, owner: str, repo: str, number: int, pagination: Pagination | None = None
    ) -> ApiResponse[list[PullRequestFile]]:
        pagination = pagination or Pagination()
        path = with_query(f"/repos/{owner}/{repo}/pulls/{number}/files", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[PullRequestFile])

    async def is_merged(self, owner: str, repo: str, number: int) -> ApiResponse[str]:
        """204 if the pull request was merged, 404 if not. See ApiResponse.presence."""
        return await self._dispatcher.send_text("GET", f"/repos/{owner}/{repo}/pulls/{number}/merge")

    async def merge(
        self, owner: str, repo: str, number: int, options: MergeOptions | None = None
    ) -> ApiResponse[str]:
        """Merge a pull request. The payload is GitHub's merge result JSON as text."""
        options = options or MergeOptions()
        return await self._dispatcher.send_text(
            "PUT", f"/repos/{owner}/{repo}/pulls/{number}/merge", body=options.to_body()
        )

    async def list_reviews(
        self, owner: str, repo: str, number: int, pagination: Pagination | None = None
    ) -> ApiResponse[list[PullRequestReview]]:
        pagination = pagination or Pagination()
        path = with_query(f"/repos/{owner}/{repo}/pulls/{number}/reviews", pagination.to_params())
        return await self._dispatcher.send("GET", path, list[PullRequestReview])

    async def get_review(
        self, owner: str, repo: str, number: int, review_id: int
    ) -> ApiResponse[PullRequestReview]:
        return await self._dispatcher.send(
            "GET", f"/repos/{owner}/{repo}/pulls/{number}/reviews/{review_id}", PullRequestReview
        )

    async def create_review(
        self, owner: str, repo: str, number: int, request: CreateReviewRequest
    ) -> ApiResponse[PullRequestReview]:
        return await self._dispatcher.send(
            "POST", f"/repos/{owner}/{repo}/pulls/{number}/reviews", PullRequestReview, body=request
        )

    async def list_review_comments(
        self, owner: str, repo: str, number: int, options: ReviewCommentListOptions | None = None
    ) -> ApiResponse[list[ReviewComment]]:
        options = options or ReviewCommentListOptions()
        path = with_query(f"/repos/{owner}/{repo}/pulls/{number}/comments", options.to_params())
        return await self._dispatcher.send("GET", path, list[ReviewComment])

    async def get_review_comment(self, owner: str, repo: str, comment_id: int) -> ApiResponse[ReviewComment]:
        return await self._dispatcher.send("GET", f"/repos/{owner}/{repo}/pulls/comments/{comment_id}", ReviewComment)

    async def create_review_comment(
        self, owner: str, repo: str, number: int, comment: ReviewCommentDraft
    ) -> ApiResponse[ReviewComment]:
        return await self._dispatcher.send(
            "POST", f"/repos/{owner}/{repo}/pulls/{number}/comments", ReviewComment, body=comment
        )

    async def delete_review_comment(self, owner: str, repo: str, comment_id: int) -> ApiResponse[str]:
        return await self._dispatcher.send_text("DELETE", f"/repos/{owner}/{repo}/pulls/comments/{comment_id}")
