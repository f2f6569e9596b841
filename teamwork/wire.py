"""Request-building helpers shared by the entity modules.

Entities describe one HTTP exchange each; these helpers keep the rules that
every entity follows in one place:

- query parameters are only sent when they carry a value,
- mutating bodies are wrapped in a single-key envelope,
- identifiers that only live in the URL never reach the body,
- updates and deletes refuse to run without a target ID.
"""

import json
from typing import Any, Dict, List, Optional, Sequence, Tuple

import httpx
from pydantic import BaseModel


class Query:
    """Query-string builder that skips unset values.

    Parameters are emitted sorted by name so URLs are stable.
    """

    def __init__(self):
        self._params: Dict[str, str] = {}

    def text(self, name: str, value: Optional[str]) -> "Query":
        if value:
            self._params[name] = value
        return self

    def ids(self, name: str, values: Optional[Sequence[int]]) -> "Query":
        if values:
            self._params[name] = ",".join(str(v) for v in values)
        return self

    def words(self, name: str, values: Optional[Sequence[str]]) -> "Query":
        if values:
            self._params[name] = ",".join(values)
        return self

    def flag(self, name: str, value: Optional[bool]) -> "Query":
        # None means "not asked"; False is a real answer and is sent.
        if value is not None:
            self._params[name] = "true" if value else "false"
        return self

    def positive(self, name: str, value: Optional[int]) -> "Query":
        if value is not None and value > 0:
            self._params[name] = str(value)
        return self

    def value(self, name: str, value: Any) -> "Query":
        if value is not None:
            self._params[name] = str(value)
        return self

    def items(self) -> List[Tuple[str, str]]:
        return sorted(self._params.items())

    def __bool__(self) -> bool:
        return bool(self._params)


def new_request(
    method: str,
    url: str,
    query: Optional[Query] = None,
    body: Optional[Dict[str, Any]] = None,
) -> httpx.Request:
    """Build an ``httpx.Request`` with the JSON headers Teamwork.com expects."""
    headers = {"Accept": "application/json"}
    content = None
    if body is not None:
        headers["Content-Type"] = "application/json"
        content = json.dumps(body).encode("utf-8")
    params = query.items() if query else None
    return httpx.Request(method, url, params=params, headers=headers, content=content)


def payload(model: BaseModel) -> Dict[str, Any]:
    """Wire form of a create/update model.

    Unset optional fields and empty lists are dropped. URL-only fields are
    declared with ``Field(exclude=True)`` and never appear.
    """
    # Checked before dumping: an empty legacy list serializes to "".
    empty = {name for name, value in model if isinstance(value, list) and not value}
    return model.model_dump(mode="json", by_alias=True, exclude_none=True, exclude=empty)


def envelope(key: str, model: BaseModel) -> Dict[str, Any]:
    """``{"<key>": {...}}`` body for mutating requests."""
    return {key: payload(model)}


def require_id(value: int, what: str) -> int:
    if value <= 0:
        raise ValueError(f"missing {what} ID")
    return value
