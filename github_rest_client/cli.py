"""CLI commands for quick GitHub REST lookups."""

import argparse
import asyncio
import json
import logging
import sys

from pydantic import BaseModel

SEARCH_KINDS = ("repositories", "code", "issues", "users", "commits")


def _jsonable(data):
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", exclude_none=True)
    if isinstance(data, list):
        return [_jsonable(item) for item in data]
    return data


def render(resp) -> dict:
    """Plain-JSON view of an ApiResponse."""
    rate_limit = None
    if resp.rate_limit is not None:
        rate_limit = {
            "limit": resp.rate_limit.limit,
            "remaining": resp.rate_limit.remaining,
            "reset": resp.rate_limit.reset.isoformat(),
        }
    return {
        "status": resp.status,
        "success": resp.is_success,
        "rate_limit": rate_limit,
        "data": _jsonable(resp.data),
        "error": resp.error,
    }


async def _run(args):
    from . import client as client_mod
    from .options import IssueListOptions, SearchOptions

    async with client_mod.GitHubClient() as gh:
        if args.command == "repo":
            return await gh.repositories.get(args.owner, args.repo)
        if args.command == "user":
            return await gh.users.get(args.username)
        if args.command == "issues":
            options = IssueListOptions(
                state=args.state, labels=args.labels, per_page=args.per_page, page=args.page
            )
            return await gh.issues.list_for_repository(args.owner, args.repo, options)
        if args.command == "search":
            options = SearchOptions(sort=args.sort, order=args.order, per_page=args.per_page, page=args.page)
            return await getattr(gh.search, args.kind)(args.query, options)
        if args.command == "starred":
            return await gh.gists.is_starred(args.gist_id)
    raise ValueError(f"Unknown command: {args.command}")


def main():
    parser = argparse.ArgumentParser(
        description="Query the GitHub REST API",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log each request at debug level",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    repo_parser = subparsers.add_parser("repo", help="Get a repository")
    repo_parser.add_argument("owner")
    repo_parser.add_argument("repo")

    user_parser = subparsers.add_parser("user", help="Get a user profile")
    user_parser.add_argument("username")

    issues_parser = subparsers.add_parser("issues", help="List issues of a repository")
    issues_parser.add_argument("owner")
    issues_parser.add_argument("repo")
    issues_parser.add_argument("--state", default=None, help="open, closed or all")
    issues_parser.add_argument("--labels", default=None, help="Comma-separated label names")
    issues_parser.add_argument("--per-page", type=int, default=30)
    issues_parser.add_argument("--page", type=int, default=1)

    search_parser = subparsers.add_parser("search", help="Search GitHub")
    search_parser.add_argument("kind", choices=SEARCH_KINDS)
    search_parser.add_argument("query", help="Search query (e.g., language:python stars:>1000)")
    search_parser.add_argument("--sort", default=None)
    search_parser.add_argument("--order", default=None, help="asc or desc")
    search_parser.add_argument("--per-page", type=int, default=30)
    search_parser.add_argument("--page", type=int, default=1)

    starred_parser = subparsers.add_parser("starred", help="Check whether you starred a gist")
    starred_parser.add_argument("gist_id")

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    resp = asyncio.run(_run(args))
    json.dump(render(resp), sys.stdout, indent=2)
    sys.stdout.write("\n")
    if not resp.is_success:
        sys.exit(1)


if __name__ == "__main__":
    main()
