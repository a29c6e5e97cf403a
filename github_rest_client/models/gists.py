"""Gists, their files, comments and history."""

from datetime import datetime

from .base import GitHubModel, RequestModel
from .common import User


class GistFile(GitHubModel):
    filename: str | None = None
    type: str | None = None
    language: str | None = None
    raw_url: str | None = None
    size: int | None = None
    truncated: bool | None = None
    content: str | None = None


class Gist(GitHubModel):
    id: str | None = None
    node_id: str | None = None
    url: str | None = None
    forks_url: str | None = None
    commits_url: str | None = None
    git_pull_url: str | None = None
    git_push_url: str | None = None
    html_url: str | None = None
    files: dict[str, GistFile] | None = None
    public: bool | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    description: str | None = None
    comments: int | None = None
    user: User | None = None
    comments_url: str | None = None
    owner: User | None = None
    truncated: bool | None = None


class GistComment(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    url: str | None = None
    body: str | None = None
    user: User | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class GistChangeStatus(GitHubModel):
    deletions: int | None = None
    additions: int | None = None
    total: int | None = None


class GistCommit(GitHubModel):
    url: str | None = None
    version: str | None = None
    user: User | None = None
    change_status: GistChangeStatus | None = None
    committed_at: datetime | None = None


class GistFileContent(RequestModel):
    content: str


class CreateGistRequest(RequestModel):
    files: dict[str, GistFileContent]
    description: str | None = None
    public: bool = False


class GistFileUpdate(RequestModel):
    """New content and/or name for a file. Renaming needs ``filename``."""

    content: str | None = None
    filename: str | None = None


class UpdateGistRequest(RequestModel):
    description: str | None = None
    files: dict[str, GistFileUpdate] | None = None


class CreateGistCommentRequest(RequestModel):
    body: str
