"""Sends one request and turns the outcome into an ApiResponse."""

import logging
from functools import lru_cache
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .response import ApiResponse, ErrorKind, is_success_status, parse_rate_limit

logger = logging.getLogger(__name__)

T = TypeVar("T")

RequestBody = BaseModel | Mapping[str, Any] | None


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def _encode_body(body: RequestBody) -> Any:
    if body is None:
        return None
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return dict(body)


def _transport_failure(method: str, path: str, exc: httpx.HTTPError) -> ApiResponse:
    message = str(exc) or type(exc).__name__
    logger.warning("%s %s failed before a response arrived: %s", method, path, message)
    return ApiResponse(status=0, error=message, error_kind=ErrorKind.TRANSPORT)


class Dispatcher:
    """Shared request path for all resource clients.

    Never raises for network or API failures: transport errors come back as
    status 0, HTTP errors carry the raw body as ``error``. Task cancellation
    is not a transport error and propagates.
    """

    def __init__(self, http: httpx.AsyncClient):
        self._http = http

    async def _request(self, method: str, path: str, body: RequestBody) -> httpx.Response:
        resp = await self._http.request(method, path, json=_encode_body(body))
        logger.debug("%s %s -> %s", method, path, resp.status_code)
        return resp

    async def send(
        self,
        method: str,
        path: str,
        response_type: type[T] | Any,
        body: RequestBody = None,
    ) -> ApiResponse[T]:
        """Send a request and decode a successful body into ``response_type``."""
        try:
            resp = await self._request(method, path, body)
        except httpx.HTTPError as exc:
            return _transport_failure(method, path, exc)

        rate_limit = parse_rate_limit(resp.headers)
        if not is_success_status(resp.status_code):
            return ApiResponse(
                status=resp.status_code,
                error=resp.text,
                rate_limit=rate_limit,
                error_kind=ErrorKind.HTTP,
            )

        try:
            data = _adapter(response_type).validate_json(resp.content)
        except ValidationError as exc:
            # Status 0 keeps is_success false; the real status goes in the message.
            logger.warning("%s %s returned %s with an undecodable body", method, path, resp.status_code)
            return ApiResponse(
                status=0,
                error=f"Could not decode {resp.status_code} response body: {exc}",
                rate_limit=rate_limit,
                error_kind=ErrorKind.DECODE,
            )
        return ApiResponse(status=resp.status_code, data=data, rate_limit=rate_limit)

    async def send_text(self, method: str, path: str, body: RequestBody = None) -> ApiResponse[str]:
        """Send a request whose successful payload is the raw body text."""
        try:
            resp = await self._request(method, path, body)
        except httpx.HTTPError as exc:
            return _transport_failure(method, path, exc)

        rate_limit = parse_rate_limit(resp.headers)
        if is_success_status(resp.status_code):
            return ApiResponse(status=resp.status_code, data=resp.text, rate_limit=rate_limit)
        return ApiResponse(
            status=resp.status_code,
            error=resp.text,
            rate_limit=rate_limit,
            error_kind=ErrorKind.HTTP,
        )
