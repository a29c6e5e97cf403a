"""Integration tests for user endpoints."""

import pytest

from github_rest_client.models import CreateSshKeyRequest
from github_rest_client.options import Pagination, UserListOptions
from github_rest_client.response import Presence

from .conftest import Recorder, json_response, make_client, text_response

OCTOCAT = {"login": "octocat", "id": 1, "type": "User", "followers": 20, "public_repos": 8}


class TestProfiles:
    @pytest.mark.asyncio
    async def test_get(self):
        handler = Recorder(json_response(body=OCTOCAT))

        async with make_client(handler) as gh:
            resp = await gh.users.get("octocat")

        assert resp.data.login == "octocat"
        assert resp.data.public_repos == 8
        assert resp.data.bio is None
        assert handler.last.url.path == "/users/octocat"

    @pytest.mark.asyncio
    async def test_get_authenticated_requires_token(self):
        handler = Recorder(text_response(401, '{"message":"Requires authentication"}'))

        async with make_client(handler, token=None) as gh:
            resp = await gh.users.get_authenticated()

        assert resp.status == 401
        assert "Requires authentication" in resp.error
        assert handler.last.url.path == "/user"

    @pytest.mark.asyncio
    async def test_list_all_pages_by_user_id(self):
        handler = Recorder(json_response(body=[OCTOCAT]))

        async with make_client(handler) as gh:
            await gh.users.list_all(UserListOptions(since=135, per_page=10))

        assert handler.last.url.path == "/users"
        assert dict(handler.last.url.params) == {"since": "135", "per_page": "10"}


class TestFollowers:
    @pytest.mark.asyncio
    async def test_followers_and_following(self):
        handler = Recorder(json_response(body=[OCTOCAT]))

        async with make_client(handler) as gh:
            await gh.users.list_followers("octocat", Pagination(page=3))
            await gh.users.list_following("octocat")

        assert handler.requests[0].url.path == "/users/octocat/followers"
        assert handler.requests[0].url.params["page"] == "3"
        assert handler.requests[1].url.path == "/users/octocat/following"

    @pytest.mark.asyncio
    async def test_check_following(self):
        handler = Recorder(text_response(204), text_response(404, ""))

        async with make_client(handler) as gh:
            follows = await gh.users.check_following("octocat", "hubot")
            does_not = await gh.users.check_following("octocat", "nobody")

        assert follows.presence is Presence.PRESENT
        assert does_not.presence is Presence.ABSENT
        assert handler.last.url.path == "/users/octocat/following/nobody"


class TestKeys:
    @pytest.mark.asyncio
    async def test_emails(self):
        handler = Recorder(json_response(body=[{"email": "octocat@github.com", "primary": True, "verified": True}]))

        async with make_client(handler) as gh:
            resp = await gh.users.list_emails()

        assert resp.data[0].primary is True
        assert handler.last.url.path == "/user/emails"

    @pytest.mark.asyncio
    async def test_ssh_keys(self):
        handler = Recorder(
            json_response(body=[{"id": 1, "key": "ssh-rsa AAA"}]),
            json_response(body=[{"id": 2, "key": "ssh-ed25519 BBB", "title": "laptop"}]),
            json_response(201, {"id": 3, "key": "ssh-ed25519 CCC", "title": "desktop"}),
            text_response(204),
        )

        async with make_client(handler) as gh:
            public = await gh.users.list_ssh_keys_for_user("octocat")
            mine = await gh.users.list_my_ssh_keys()
            created = await gh.users.create_ssh_key(CreateSshKeyRequest(title="desktop", key="ssh-ed25519 CCC"))
            deleted = await gh.users.delete_ssh_key(3)

        assert public.data[0].key == "ssh-rsa AAA"
        assert mine.data[0].title == "laptop"
        assert created.data.id == 3
        assert deleted.status == 204
        assert [(r.method, r.url.path) for r in handler.requests] == [
            ("GET", "/users/octocat/keys"),
            ("GET", "/user/keys"),
            ("POST", "/user/keys"),
            ("DELETE", "/user/keys/3"),
        ]
        assert handler.requests[2].content

    @pytest.mark.asyncio
    async def test_gpg_keys(self):
        handler = Recorder(
            json_response(body=[{"id": 3, "key_id": "3262EFF25BA0D270", "emails": [{"email": "o@github.com"}]}])
        )

        async with make_client(handler) as gh:
            public = await gh.users.list_gpg_keys_for_user("octocat")
            mine = await gh.users.list_my_gpg_keys()

        assert public.data[0].emails[0].email == "o@github.com"
        assert mine.data[0].key_id == "3262EFF25BA0D270"
        assert handler.requests[0].url.path == "/users/octocat/gpg_keys"
        assert handler.requests[1].url.path == "/user/gpg_keys"
