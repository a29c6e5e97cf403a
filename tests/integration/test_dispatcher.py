"""Integration tests for the request path shared by every resource client."""

import asyncio

import httpx
import pytest

from github_rest_client.client import API_VERSION, MEDIA_TYPE, GitHubClient
from github_rest_client.models import Repository
from github_rest_client.response import ErrorKind, Presence
from github_rest_client.settings import Settings

from .conftest import Recorder, json_response, make_client, text_response


class TestHeaders:
    @pytest.mark.asyncio
    async def test_default_headers(self):
        handler = Recorder(json_response(body={"id": 1}))

        async with make_client(handler) as gh:
            await gh.repositories.get("o", "r")

        headers = handler.last.headers
        assert headers["Accept"] == MEDIA_TYPE
        assert headers["X-GitHub-Api-Version"] == API_VERSION
        assert headers["User-Agent"] == "github-rest-client"
        assert headers["Authorization"] == "Bearer test-token"

    @pytest.mark.asyncio
    async def test_anonymous_client_sends_no_authorization(self):
        handler = Recorder(json_response(body={"id": 1}))

        async with make_client(handler, token=None) as gh:
            resp = await gh.repositories.get("o", "r")

        assert resp.is_success
        assert "Authorization" not in handler.last.headers

    @pytest.mark.asyncio
    async def test_custom_user_agent_and_base_url(self):
        handler = Recorder(json_response(body={"id": 1}))

        async with make_client(
            handler, user_agent="my-bot/1.0", base_url="https://github.example.com/api/v3"
        ) as gh:
            await gh.repositories.get("o", "r")

        assert handler.last.headers["User-Agent"] == "my-bot/1.0"
        assert str(handler.last.url) == "https://github.example.com/api/v3/repos/o/r"

    @pytest.mark.asyncio
    async def test_get_has_no_body(self):
        handler = Recorder(json_response(body={"id": 1}))

        async with make_client(handler) as gh:
            await gh.repositories.get("o", "r")

        assert handler.last.content == b""


class TestSuccess:
    @pytest.mark.asyncio
    async def test_decodes_body_and_rate_limit(self):
        handler = Recorder(json_response(body={"id": 1, "full_name": "o/r", "stargazers_count": 3}))

        async with make_client(handler) as gh:
            resp = await gh.repositories.get("o", "r")

        assert resp.status == 200
        assert isinstance(resp.data, Repository)
        assert resp.data.full_name == "o/r"
        assert resp.error is None
        assert resp.error_kind is None
        assert resp.rate_limit.limit == 5000
        assert resp.rate_limit.remaining == 4999

    @pytest.mark.asyncio
    async def test_missing_rate_limit_headers(self):
        handler = Recorder(httpx.Response(200, json={"id": 1}))

        async with make_client(handler) as gh:
            resp = await gh.repositories.get("o", "r")

        assert resp.is_success
        assert resp.rate_limit is None

    @pytest.mark.asyncio
    async def test_repeated_calls_give_equal_envelopes(self):
        handler = Recorder(json_response(body={"id": 1, "name": "r"}))

        async with make_client(handler) as gh:
            first = await gh.repositories.get("o", "r")
            second = await gh.repositories.get("o", "r")

        assert first == second
        assert len(handler.requests) == 2

    @pytest.mark.asyncio
    async def test_concurrent_calls_share_one_client(self):
        handler = Recorder(json_response(body={"id": 1}))

        async with make_client(handler) as gh:
            responses = await asyncio.gather(
                gh.repositories.get("o", "a"),
                gh.users.get("octocat"),
                gh.issues.get("o", "a", 1),
            )

        assert [r.status for r in responses] == [200, 200, 200]
        assert sorted(r.url.path for r in handler.requests) == [
            "/repos/o/a",
            "/repos/o/a/issues/1",
            "/users/octocat",
        ]


class TestHttpErrors:
    @pytest.mark.asyncio
    async def test_not_found_keeps_raw_body(self):
        body = '{"message":"Not Found","documentation_url":"https://docs.github.com/rest"}'
        handler = Recorder(text_response(404, body))

        async with make_client(handler) as gh:
            resp = await gh.repositories.get("o", "missing")

        assert resp.status == 404
        assert not resp.is_success
        assert resp.data is None
        assert resp.error == body
        assert resp.error_kind is ErrorKind.HTTP

    @pytest.mark.asyncio
    async def test_rate_limited_forbidden(self):
        handler = Recorder(
            text_response(
                403,
                '{"message":"API rate limit exceeded"}',
                headers={"X-RateLimit-Remaining": "0"},
            )
        )

        async with make_client(handler) as gh:
            resp = await gh.search.repositories("stars:>1")

        assert resp.status == 403
        assert resp.rate_limit.limit == 5000
        assert resp.rate_limit.remaining == 0
        assert resp.rate_limit.reset.timestamp() == 1700000000

    @pytest.mark.asyncio
    async def test_server_error_on_text_endpoint(self):
        handler = Recorder(text_response(502, "Bad Gateway"))

        async with make_client(handler) as gh:
            resp = await gh.gists.delete("abc")

        assert resp.status == 502
        assert resp.data is None
        assert resp.error == "Bad Gateway"
        assert resp.presence is Presence.ERROR


class TestDecodeErrors:
    @pytest.mark.asyncio
    async def test_malformed_json(self):
        handler = Recorder(httpx.Response(200, text="<html>oops</html>"))

        async with make_client(handler) as gh:
            resp = await gh.repositories.get("o", "r")

        assert resp.status == 0
        assert not resp.is_success
        assert resp.data is None
        assert resp.error_kind is ErrorKind.DECODE
        assert "200" in resp.error

    @pytest.mark.asyncio
    async def test_wrong_shape(self):
        handler = Recorder(json_response(body={"id": 1}))

        async with make_client(handler) as gh:
            resp = await gh.repositories.list_for_user("octocat")

        assert resp.status == 0
        assert resp.error_kind is ErrorKind.DECODE
        assert resp.rate_limit is not None


class TestTransportErrors:
    @pytest.mark.asyncio
    async def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("Name or service not known", request=request)

        async with make_client(handler) as gh:
            resp = await gh.repositories.get("o", "r")

        assert resp.status == 0
        assert resp.data is None
        assert resp.rate_limit is None
        assert resp.error == "Name or service not known"
        assert resp.error_kind is ErrorKind.TRANSPORT

    @pytest.mark.asyncio
    async def test_timeout_on_text_endpoint(self):
        def handler(request):
            raise httpx.ReadTimeout("", request=request)

        async with make_client(handler) as gh:
            resp = await gh.gists.is_starred("abc")

        assert resp.status == 0
        assert resp.error == "ReadTimeout"
        assert resp.presence is Presence.ERROR

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self):
        started = asyncio.Event()

        async def handler(request):
            started.set()
            await asyncio.sleep(60)
            return httpx.Response(200, json={})

        async with make_client(handler) as gh:
            task = asyncio.create_task(gh.repositories.get("o", "r"))
            await started.wait()
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task


class TestClientLifecycle:
    @pytest.mark.asyncio
    async def test_uses_cached_settings_by_default(self, monkeypatch):
        monkeypatch.setattr(
            "github_rest_client.client.get_settings",
            lambda: Settings(_env_file=None, token="env-token"),
        )
        handler = Recorder(json_response(body={"login": "me"}))

        async with GitHubClient(transport=httpx.MockTransport(handler)) as gh:
            resp = await gh.users.get_authenticated()

        assert resp.data.login == "me"
        assert handler.last.headers["Authorization"] == "Bearer env-token"

    @pytest.mark.asyncio
    async def test_aclose(self):
        gh = make_client(Recorder(json_response(body={})))

        await gh.aclose()

        assert gh._client.is_closed
