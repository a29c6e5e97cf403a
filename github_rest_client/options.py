"""Per-call option objects for list, search and merge endpoints.

Each object carries the optional filters of one endpoint family and renders
them with ``to_params()`` for ``query.build_query_string``. Defaults match the
GitHub API: 30 items per page, first page.
"""

from dataclasses import dataclass
from datetime import datetime

from .query import pagination_params

DEFAULT_PER_PAGE = 30
DEFAULT_PAGE = 1


def _str(value: int | None) -> str | None:
    return None if value is None else str(value)


def _iso(value: datetime | None) -> str | None:
    return None if value is None else value.isoformat()


@dataclass(frozen=True)
class Pagination:
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    def to_params(self) -> dict[str, str | None]:
        return pagination_params(per_page=_str(self.per_page), page=_str(self.page))


@dataclass(frozen=True)
class RepositoryListOptions:
    """Filters for repositories owned by a user."""

    type: str | None = None  # all, owner, member
    sort: str | None = None  # created, updated, pushed, full_name
    direction: str | None = None  # asc, desc
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    def to_params(self) -> dict[str, str | None]:
        return {
            "type": self.type,
            "sort": self.sort,
            "direction": self.direction,
            "per_page": _str(self.per_page),
            "page": _str(self.page),
        }


@dataclass(frozen=True)
class MyRepositoryListOptions:
    """Filters for repositories of the authenticated user."""

    visibility: str | None = None  # all, public, private
    affiliation: str | None = None  # e.g. "owner,collaborator"
    type: str | None = None
    sort: str | None = None
    direction: str | None = None
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    def to_params(self) -> dict[str, str | None]:
        return {
            "visibility": self.visibility,
            "affiliation": self.affiliation,
            "type": self.type,
            "sort": self.sort,
            "direction": self.direction,
            "per_page": _str(self.per_page),
            "page": _str(self.page),
        }


@dataclass(frozen=True)
class IssueListOptions:
    """Filters for issue listings.

    ``filter`` only applies to the authenticated user's issues; ``labels`` is a
    comma-separated list of label names.
    """

    filter: str | None = None
    state: str | None = None
    labels: str | None = None
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    def to_params(self) -> dict[str, str | None]:
        return {
            "filter": self.filter,
            "state": self.state,
            "labels": self.labels,
            "sort": self.sort,
            "direction": self.direction,
            "since": _iso(self.since),
            "per_page": _str(self.per_page),
            "page": _str(self.page),
        }


@dataclass(frozen=True)
class CommentListOptions:
    since: datetime | None = None
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    def to_params(self) -> dict[str, str | None]:
        return pagination_params(_iso(self.since), _str(self.per_page), _str(self.page))


# Gist listings take the same since/per_page/page triple.
GistListOptions = CommentListOptions


@dataclass(frozen=True)
class MilestoneListOptions:
    state: str | None = None
    sort: str | None = None
    direction: str | None = None
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    def to_params(self) -> dict[str, str | None]:
        return {
            "state": self.state,
            "sort": self.sort,
            "direction": self.direction,
            "per_page": _str(self.per_page),
            "page": _str(self.page),
        }


@dataclass(frozen=True)
class PullRequestListOptions:
    state: str | None = None
    head: str | None = None  # "user:ref-name"
    base: str | None = None
    sort: str | None = None
    direction: str | None = None
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    def to_params(self) -> dict[str, str | None]:
        return {
            "state": self.state,
            "head": self.head,
            "base": self.base,
            "sort": self.sort,
            "direction": self.direction,
            "per_page": _str(self.per_page),
            "page": _str(self.page),
        }


@dataclass(frozen=True)
class ReviewCommentListOptions:
    sort: str | None = None
    direction: str | None = None
    since: datetime | None = None
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    def to_params(self) -> dict[str, str | None]:
        return {
            "sort": self.sort,
            "direction": self.direction,
            "since": _iso(self.since),
            "per_page": _str(self.per_page),
            "page": _str(self.page),
        }


@dataclass(frozen=True)
class UserListOptions:
    """``since`` is a user id here, not a timestamp."""

    since: int | None = None
    per_page: int = DEFAULT_PER_PAGE

    def to_params(self) -> dict[str, str | None]:
        return pagination_params(since=_str(self.since), per_page=_str(self.per_page))


@dataclass(frozen=True)
class SearchOptions:
    sort: str | None = None
    order: str | None = None  # asc, desc
    per_page: int = DEFAULT_PER_PAGE
    page: int = DEFAULT_PAGE

    def to_params(self, query: str) -> dict[str, str | None]:
        return {
            "q": query,
            "sort": self.sort,
            "order": self.order,
            "per_page": _str(self.per_page),
            "page": _str(self.page),
        }


@dataclass(frozen=True)
class MergeOptions:
    commit_title: str | None = None
    commit_message: str | None = None
    merge_method: str | None = None  # merge, squash, rebase

    def to_body(self) -> dict[str, str]:
        body = {
            "commit_title": self.commit_title,
            "commit_message": self.commit_message,
            "merge_method": self.merge_method,
        }
        return {key: value for key, value in body.items() if value}
