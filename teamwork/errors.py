"""Failures raised while dispatching an entity to Teamwork.com.

Every class keeps the underlying cause chained (``raise ... from err``) and
renders the message the MCP host sees verbatim.
"""

from typing import Optional


class TeamworkError(Exception):
    """Base class for dispatch failures."""


class RequestError(TeamworkError):
    """The entity could not be turned into an HTTP request."""

    def __init__(self, cause: object):
        super().__init__(f"failed to create request: {cause}")


class TransportError(TeamworkError):
    """Network, TLS or timeout failure while talking to the server."""

    def __init__(self, cause: object):
        super().__init__(f"failed to execute request: {cause}")


class StatusError(TeamworkError):
    """The server answered with a non-2xx status."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        message = f"unexpected status code: {status_code}"
        if body is not None:
            message += f", body: {body}"
        super().__init__(message)


class DecodeError(TeamworkError):
    """The response body did not match the entity's shape."""

    def __init__(self, cause: object):
        super().__init__(f"failed to decode response body: {cause}")


class IDExtractionError(TeamworkError):
    """An ID callback was requested but the response carried no usable ID."""

    def __init__(self, cause: object):
        super().__init__(f"failed to extract ID: {cause}")
