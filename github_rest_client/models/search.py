"""Search result pages."""

from datetime import datetime

from .base import GitHubModel
from .common import Label, Repository, User


class CodeItem(GitHubModel):
    name: str | None = None
    path: str | None = None
    sha: str | None = None
    url: str | None = None
    git_url: str | None = None
    html_url: str | None = None
    repository: Repository | None = None
    score: float | None = None


class PullRequestReference(GitHubModel):
    url: str | None = None
    html_url: str | None = None
    diff_url: str | None = None
    patch_url: str | None = None


class IssueItem(GitHubModel):
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
    comments: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    closed_at: datetime | None = None
    body: str | None = None
    score: float | None = None
    html_url: str | None = None
    pull_request: PullRequestReference | None = None


class GitUser(GitHubModel):
    name: str | None = None
    email: str | None = None
    date: datetime | None = None


class CommitDetail(GitHubModel):
    author: GitUser | None = None
    committer: GitUser | None = None
    message: str | None = None
    comment_count: int | None = None


class CommitItem(GitHubModel):
    sha: str | None = None
    url: str | None = None
    html_url: str | None = None
    comments_url: str | None = None
    commit: CommitDetail | None = None
    author: User | None = None
    committer: User | None = None
    repository: Repository | None = None
    score: float | None = None


class SearchResult(GitHubModel):
    total_count: int | None = None
    incomplete_results: bool | None = None


class RepositorySearchResult(SearchResult):
    items: list[Repository] | None = None


class CodeSearchResult(SearchResult):
    items: list[CodeItem] | None = None


class IssueSearchResult(SearchResult):
    items: list[IssueItem] | None = None


class UserSearchResult(SearchResult):
    items: list[User] | None = None


class CommitSearchResult(SearchResult):
    items: list[CommitItem] | None = None
