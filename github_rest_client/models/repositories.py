"""Repository sub-resources: branches, tags, releases, contributors, contents."""

from datetime import datetime

from pydantic import Field

from .base import GitHubModel, RequestModel
from .common import User


class BranchCommit(GitHubModel):
    sha: str | None = None
    url: str | None = None


class Branch(GitHubModel):
    name: str | None = None
    commit: BranchCommit | None = None
    protected: bool | None = None


class Tag(GitHubModel):
    name: str | None = None
    zipball_url: str | None = None
    tarball_url: str | None = None
    commit: BranchCommit | None = None
    node_id: str | None = None


class ReleaseAsset(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    name: str | None = None
    label: str | None = None
    content_type: str | None = None
    size: int | None = None
    download_count: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    browser_download_url: str | None = None
    uploader: User | None = None


class Release(GitHubModel):
    id: int | None = None
    node_id: str | None = None
    tag_name: str | None = None
    target_commitish: str | None = None
    name: str | None = None
    body: str | None = None
    draft: bool | None = None
    prerelease: bool | None = None
    created_at: datetime | None = None
    published_at: datetime | None = None
    author: User | None = None
    assets: list[ReleaseAsset] | None = None
    html_url: str | None = None
    url: str | None = None


class Contributor(GitHubModel):
    login: str | None = None
    id: int | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    contributions: int | None = None
    type: str | None = None


class RepositoryContent(GitHubModel):
    """A file, directory, symlink or submodule entry.

    ``content`` is base64 encoded (see ``encoding``) and only present when a
    single file is requested.
    """

    type: str | None = None
    encoding: str | None = None
    size: int | None = None
    name: str | None = None
    path: str | None = None
    content: str | None = None
    sha: str | None = None
    url: str | None = None
    git_url: str | None = None
    html_url: str | None = None
    download_url: str | None = None


class CreateRepositoryRequest(RequestModel):
    name: str = Field(min_length=1)
    description: str | None = None
    homepage: str | None = None
    private: bool = False
    has_issues: bool = True
    has_projects: bool = True
    has_wiki: bool = True
    auto_init: bool = False
    gitignore_template: str | None = None
    license_template: str | None = None
