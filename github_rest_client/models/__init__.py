"""Typed records for GitHub REST payloads."""

from .base import GitHubModel, RequestModel
from .common import Label, License, Repository, User
from .gists import (
    CreateGistCommentRequest,
    CreateGistRequest,
    Gist,
    GistChangeStatus,
    GistComment,
    GistCommit,
    GistFile,
    GistFileContent,
    GistFileUpdate,
    UpdateGistRequest,
)
from .issues import (
    CreateCommentRequest,
    CreateIssueRequest,
    Issue,
    IssueComment,
    IssuePullRequest,
    Milestone,
    UpdateIssueRequest,
)
from .pull_requests import (
    CreatePullRequestRequest,
    CreateReviewRequest,
    PullRequest,
    PullRequestBranch,
    PullRequestFile,
    PullRequestReview,
    ReviewComment,
    ReviewCommentDraft,
    UpdatePullRequestRequest,
)
from .repositories import (
    Branch,
    BranchCommit,
    Contributor,
    CreateRepositoryRequest,
    Release,
    ReleaseAsset,
    RepositoryContent,
    Tag,
)
from .search import (
    CodeItem,
    CodeSearchResult,
    CommitDetail,
    CommitItem,
    CommitSearchResult,
    GitUser,
    IssueItem,
    IssueSearchResult,
    PullRequestReference,
    RepositorySearchResult,
    UserSearchResult,
)
from .users import CreateSshKeyRequest, GpgEmail, GpgKey, SshKey, UserEmail

__all__ = [
    "Branch",
    "BranchCommit",
    "CodeItem",
    "CodeSearchResult",
    "CommitDetail",
    "CommitItem",
    "CommitSearchResult",
    "Contributor",
    "CreateCommentRequest",
    "CreateGistCommentRequest",
    "CreateGistRequest",
    "CreateIssueRequest",
    "CreatePullRequestRequest",
    "CreateRepositoryRequest",
    "CreateReviewRequest",
    "CreateSshKeyRequest",
    "Gist",
    "GistChangeStatus",
    "GistComment",
    "GistCommit",
    "GistFile",
    "GistFileContent",
    "GistFileUpdate",
    "GitHubModel",
    "GitUser",
    "GpgEmail",
    "GpgKey",
    "Issue",
    "IssueComment",
    "IssueItem",
    "IssuePullRequest",
    "IssueSearchResult",
    "Label",
    "License",
    "Milestone",
    "PullRequest",
    "PullRequestBranch",
    "PullRequestFile",
    "PullRequestReference",
    "PullRequestReview",
    "Release",
    "ReleaseAsset",
    "Repository",
    "RepositoryContent",
    "RepositorySearchResult",
    "RequestModel",
    "ReviewComment",
    "ReviewCommentDraft",
    "SshKey",
    "Tag",
    "UpdateGistRequest",
    "UpdateIssueRequest",
    "UpdatePullRequestRequest",
    "User",
    "UserEmail",
    "UserSearchResult",
]
