"""Typed async client for the GitHub REST API.

Every call returns an ApiResponse carrying the status code, the decoded
payload or the raw error body, and the rate-limit headers of the response.
"""

from .cli import main
from .client import GitHubClient
from .response import ApiResponse, ErrorKind, Presence, RateLimit
from .settings import Settings, get_settings

__all__ = [
    "main",
    "GitHubClient",
    "ApiResponse",
    "ErrorKind",
    "Presence",
    "RateLimit",
    "Settings",
    "get_settings",
]

if __name__ == "__main__":
    main()
