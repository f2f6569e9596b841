"""Request engine: one entity in, one HTTP round trip to Teamwork.com out.

An entity is any object with ``build_request(server) -> httpx.Request``.
It may also provide ``decode_response(body)`` (called for GET requests) and
``populate_web_link(server)`` (called after decoding so the entity can fill
in human-facing URLs).

Options are small hooks run around the exchange in declaration order. The
standard one is ``with_id_callback``, which hands the server-assigned ID of
a newly created record to the caller.
"""

import json
import uuid
from typing import Any, Callable, Optional, Protocol

import httpx

from teamwork.errors import (
    DecodeError,
    IDExtractionError,
    RequestError,
    StatusError,
    TransportError,
)
from utils.logging_ import logger


class Entity(Protocol):
    def build_request(self, server: str) -> httpx.Request: ...


# ─── Options ────────────────────────────────────────────────────

class Option:
    """Request-lifecycle hook passed to ``Engine.do``."""

    def before_request(self, request: httpx.Request) -> None:
        """Inspect or amend the outgoing request."""

    def after_response(self, request: httpx.Request, body: bytes, entity: Any) -> None:
        """Inspect the buffered response once the status was accepted."""


_MISSING = object()


class IDCallback(Option):
    """Extract the created record's ID from a non-GET response."""

    def __init__(self, id_field: str, callback: Callable[[int], None]):
        self.id_field = id_field
        self.callback = callback

    def after_response(self, request: httpx.Request, body: bytes, entity: Any) -> None:
        if request.method == "GET":
            return
        try:
            data = json.loads(body)
        except ValueError as e:
            raise IDExtractionError(e) from e

        value = _find_field(data, self.id_field)
        if value is _MISSING:
            raise IDExtractionError(f"field {self.id_field!r} not found in response")
        self.callback(_as_id(value))


def _find_field(data: Any, name: str) -> Any:
    """Look for ``name`` at the top level, then one object down."""
    if not isinstance(data, dict):
        return _MISSING
    wanted = name.lower()
    for key, value in data.items():
        if key.lower() == wanted:
            return value
    for nested in data.values():
        if isinstance(nested, dict):
            for key, value in nested.items():
                if key.lower() == wanted:
                    return value
    return _MISSING


def _as_id(value: Any) -> int:
    if isinstance(value, bool):
        raise IDExtractionError(f"invalid ID value: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            pass
    raise IDExtractionError(f"invalid ID value: {value!r}")


class RequestID(Option):
    """Tag the outgoing request with a fresh correlation ID."""

    def __init__(self, header: str = "X-Request-ID"):
        self.header = header

    def before_request(self, request: httpx.Request) -> None:
        request_id = str(uuid.uuid4())
        request.headers[self.header] = request_id
        logger.debug(f"{request.method} {request.url.path} tagged {self.header}={request_id}")


def with_id_callback(id_field: str, callback: Callable[[int], None]) -> Option:
    return IDCallback(id_field, callback)


def with_request_id(header: str = "X-Request-ID") -> Option:
    return RequestID(header)


# ─── Engine ─────────────────────────────────────────────────────

class Engine:
    """Dispatches entities against one Teamwork.com installation.

    The engine is safe to share between concurrent tasks: it keeps no
    per-call state and the underlying ``httpx.AsyncClient`` pools
    connections.
    """

    def __init__(
        self,
        server: str,
        api_token: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        self.server = server.rstrip("/")
        self._auth = httpx.BasicAuth(api_token, "")
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    async def do(self, entity: Entity, *options: Option) -> None:
        """Send ``entity`` and decode the answer into it.

        Raises a ``TeamworkError`` subclass on failure. Cancelling the calling
        task aborts the exchange and propagates the cancellation.
        """
        try:
            request = entity.build_request(self.server)
        except (ValueError, TypeError, httpx.InvalidURL) as e:
            raise RequestError(e) from e

        for option in options:
            option.before_request(request)

        logger.debug(f"{request.method} {request.url}")
        try:
            response = await self._http.send(request, auth=self._auth, stream=True)
        except httpx.TransportError as e:
            raise TransportError(e) from e

        try:
            body = await self._read(response)

            if request.method == "GET":
                decode = getattr(entity, "decode_response", None)
                if decode is not None:
                    try:
                        decode(body)
                    except ValueError as e:
                        raise DecodeError(f"{_describe(entity)}: {e}") from e

                populate = getattr(entity, "populate_web_link", None)
                if populate is not None:
                    populate(self.server)

            for option in options:
                option.after_response(request, body, entity)
        finally:
            await self._close(response)

    async def _read(self, response: httpx.Response) -> bytes:
        """Buffer the body and classify the status."""
        try:
            body = await response.aread()
        except httpx.TransportError as e:
            if not response.is_success:
                raise StatusError(response.status_code) from e
            raise TransportError(e) from e

        if not response.is_success:
            text = body.decode("utf-8", errors="replace")
            logger.warning(
                f"{response.request.method} {response.request.url.path} "
                f"returned {response.status_code}"
            )
            raise StatusError(response.status_code, text)
        return body

    async def _close(self, response: httpx.Response) -> None:
        try:
            await response.aclose()
        except Exception as e:
            logger.error(f"failed to close response body: {e}")


def _describe(entity: Any) -> str:
    kind = type(entity)
    return f"{kind.__module__.rsplit('.', 1)[-1]}.{kind.__qualname__}"
