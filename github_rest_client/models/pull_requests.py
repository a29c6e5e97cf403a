"""Pull requests, reviews, review comments and changed files."""

from datetime import datetime

from .base import GitHubModel, RequestModel
from .common import Label, Repository, User
from .issues import Milestone


class PullRequestBranch(GitHubModel):
    label: str | None = None
    ref: str | None = None
    sha: str | None = None
    user: User | None = None
    repo: Repository | None = None


class PullRequest(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    state: str | None = None
    locked: bool | None = None
    title: str | None = None
    user: User | None = None
    body: str | None = None
    labels: list[Label] | None = None
    milestone: Milestone | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    merged_at: datetime | None = None
    merge_commit_sha: str | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    requested_reviewers: list[User] | None = None
    head: PullRequestBranch | None = None
    base: PullRequestBranch | None = None
    draft: bool | None = None
    merged: bool | None = None
    mergeable: bool | None = None
    mergeable_state: str | None = None
    merged_by: User | None = None
    comments: int | None = None
    review_comments: int | None = None
    commits: int | None = None
    additions: int | None = None
    deletions: int | None = None
    changed_files: int | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    url: str | None = None


class PullRequestReview(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    user: User | None = None
    body: str | None = None
    state: str | None = None
    html_url: str | None = None
    pull_request_url: str | None = None
    submitted_at: datetime | None = None
    commit_id: str | None = None


class ReviewComment(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    pull_request_review_id: int | None = None
    diff_hunk: str | None = None
    path: str | None = None
    position: int | None = None
    original_position: int | None = None
    commit_id: str | None = None
    original_commit_id: str | None = None
    user: User | None = None
    body: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    html_url: str | None = None


class PullRequestFile(GitHubModel):
    sha: str | None = None
    filename: str | None = None
    status: str | None = None
    additions: int | None = None
    deletions: int | None = None
    changes: int | None = None
    blob_url: str | None = None
    raw_url: str | None = None
    contents_url: str | None = None
    patch: str | None = None


class CreatePullRequestRequest(RequestModel):
    title: str
    head: str
    base: str
    body: str | None = None
    maintainer_can_modify: bool | None = None
    draft: bool | None = None


class UpdatePullRequestRequest(RequestModel):
    title: str | None = None
    body: str | None = None
    state: str | None = None
    base: str | None = None
    maintainer_can_modify: bool | None = None


class ReviewCommentDraft(RequestModel):
    """A line comment, sent alone or as part of a review."""

    path: str
    body: str
    position: int | None = None
    line: int | None = None
    side: str | None = None
    start_line: int | None = None
    start_side: str | None = None


class CreateReviewRequest(RequestModel):
    event: str  # APPROVE, REQUEST_CHANGES, COMMENT
    commit_id: str | None = None
    body: str | None = None
    comments: list[ReviewCommentDraft] | None = None
