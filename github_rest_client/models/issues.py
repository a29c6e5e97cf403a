"""Issues, comments, labels and milestones."""

from datetime import datetime

from .base import GitHubModel, RequestModel
from .common import Label, User


class Milestone(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    title: str | None = None
    description: str | None = None
    creator: User | None = None
    open_issues: int | None = None
    closed_issues: int | None = None
    state: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    due_on: datetime | None = None
    closed_at: datetime | None = None
    html_url: str | None = None


class IssuePullRequest(GitHubModel):
    """Set on issues that are actually pull requests."""

    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None
    merged_at: datetime | None = None


class Issue(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    number: int | None = None
    title: str | None = None
    user: User | None = None
    labels: list[Label] | None = None
    state: str | None = None
    locked: bool | None = None
    assignee: User | None = None
    assignees: list[User] | None = None
    milestone: Milestone | None = None
    comments: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    body: str | None = None
    html_url: str | None = None
    url: str | None = None
    repository_url: str | None = None
    pull_request: IssuePullRequest | None = None


class IssueComment(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    html_url: str | None = None
    body: str | None = None
    user: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateIssueRequest(RequestModel):
    title: str
    body: str | None = None
    assignees: list[str] | None = None
    milestone: int | None = None
    labels: list[str] | None = None


class UpdateIssueRequest(RequestModel):
    title: str | None = None
    body: str | None = None
    state: str | None = None
    assignees: list[str] | None = None
    milestone: int | None = None
    labels: list[str] | None = None


class CreateCommentRequest(RequestModel):
    body: str
