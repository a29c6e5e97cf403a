"""Resource clients, one per GitHub API area."""

from .gists import GistsClient
from .issues import IssuesClient
from .pull_requests import PullRequestsClient
from .repositories import RepositoriesClient
from .search import SearchClient
from .users import UsersClient

__all__ = [
    "GistsClient",
    "IssuesClient",
    "PullRequestsClient",
    "RepositoriesClient",
    "SearchClient",
    "UsersClient",
]
