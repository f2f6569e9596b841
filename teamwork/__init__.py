"""Teamwork.com API client: entities, wire types and the request engine."""

from teamwork.engine import Engine, with_id_callback, with_request_id
from teamwork.errors import (
    DecodeError,
    IDExtractionError,
    RequestError,
    StatusError,
    TeamworkError,
    TransportError,
)

__all__ = [
    "Engine",
    "with_id_callback",
    "with_request_id",
    "TeamworkError",
    "RequestError",
    "TransportError",
    "StatusError",
    "DecodeError",
    "IDExtractionError",
]
