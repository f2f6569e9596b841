"""Binding of MCP tool arguments onto entity fields.

Tool arguments arrive as a loosely typed mapping decoded from JSON-RPC. Each
binder reads one key and writes one attribute of a target object (a pydantic
entity, or a ``LegacyUserGroups``). ``param_group`` runs binders in order and
stops at the first failure.

Validation is strict: a value of the wrong JSON type is an error, never
coerced. JSON numbers are truncated to integers. Keys nobody binds are
ignored. A key that is present with a ``null`` value counts as absent.
"""

import math
from typing import Any, Callable, Iterable, Mapping, Sequence

from teamwork.scalars import Date, LegacyDate, LegacyNumericList, OptionalDateTime, Time

Binder = Callable[[Mapping[str, Any]], None]
Check = Callable[[str, Any], None]


class ParamError(ValueError):
    """A tool argument was missing or malformed."""


def param_group(arguments: Mapping[str, Any], *binders: Binder) -> None:
    for bind in binders:
        bind(arguments)


# ─── Type checks ────────────────────────────────────────────────

def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _invalid(key: str, expected: str, value: Any) -> ParamError:
    return ParamError(f"invalid {key}: expected {expected}, got {_json_type(value)}")


def _scalar(key: str, value: Any, kind: type) -> Any:
    if kind is bool:
        ok = isinstance(value, bool)
    else:
        ok = isinstance(value, kind) and not isinstance(value, bool)
    if not ok:
        raise _invalid(key, _json_type(kind()), value)
    return value


def _number(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _invalid(key, "number", value)
    if isinstance(value, float) and not math.isfinite(value):
        raise ParamError(f"invalid {key}: {value} is not a finite number")
    return int(value)


def _numbers(key: str, value: Any) -> list:
    if not isinstance(value, (list, tuple)):
        raise _invalid(key, "array", value)
    numbers = []
    for item in value:
        if isinstance(item, bool) or not isinstance(item, (int, float)):
            raise ParamError(f"invalid {key}: expected number elements, got {_json_type(item)}")
        numbers.append(_number(key, item))
    return numbers


def _parsed(key: str, value: Any, parse: Callable[[str], Any], layout: str) -> Any:
    if not isinstance(value, str):
        raise _invalid(key, "string", value)
    try:
        return parse(value)
    except ValueError:
        raise ParamError(f"invalid {key}: expected {layout}, got {value!r}") from None


def _present(arguments: Mapping[str, Any], key: str) -> bool:
    return arguments.get(key) is not None


def _require(arguments: Mapping[str, Any], key: str) -> Any:
    if not _present(arguments, key):
        raise ParamError(f"missing required parameter: {key}")
    return arguments[key]


def _binder(target: Any, attr: str, key: str, convert: Callable[[Any], Any], required: bool) -> Binder:
    def bind(arguments: Mapping[str, Any]) -> None:
        if required:
            value = _require(arguments, key)
        elif _present(arguments, key):
            value = arguments[key]
        else:
            return
        setattr(target, attr, convert(value))
    return bind


# ─── Scalars ────────────────────────────────────────────────────

def restrict_values(*allowed: Any) -> Check:
    """Reject values outside ``allowed``."""
    def check(key: str, value: Any) -> None:
        if value not in allowed:
            choices = ", ".join(str(a) for a in allowed)
            raise ParamError(f"invalid {key}: expected one of {choices}, got {value!r}")
    return check


def _scalar_binder(target, attr, key, kind, checks: Iterable[Check], required: bool) -> Binder:
    def convert(value: Any) -> Any:
        value = _scalar(key, value, kind)
        for check in checks:
            check(key, value)
        return value
    return _binder(target, attr, key, convert, required)


def required_param(target: Any, attr: str, key: str, kind: type = str, checks: Sequence[Check] = ()) -> Binder:
    return _scalar_binder(target, attr, key, kind, checks, required=True)


def optional_param(target: Any, attr: str, key: str, kind: type = str, checks: Sequence[Check] = ()) -> Binder:
    """Bind ``key`` when present.

    The target attribute keeps its default otherwise, so a field defaulting
    to ``None`` stays tri-state (absent / false / true).
    """
    return _scalar_binder(target, attr, key, kind, checks, required=False)


def required_numeric_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _number(key, v), required=True)


def optional_numeric_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _number(key, v), required=False)


# ─── Lists ──────────────────────────────────────────────────────

def required_numeric_list_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _numbers(key, v), required=True)


def optional_numeric_list_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _numbers(key, v), required=False)


def optional_legacy_numeric_list_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: LegacyNumericList(_numbers(key, v)), required=False)


def optional_list_param(target: Any, attr: str, key: str, checks: Sequence[Check] = ()) -> Binder:
    """Bind a list of strings; ``checks`` run against every element."""
    def convert(value: Any) -> list:
        if not isinstance(value, (list, tuple)):
            raise _invalid(key, "array", value)
        for item in value:
            if not isinstance(item, str):
                raise ParamError(f"invalid {key}: expected string elements, got {_json_type(item)}")
            for check in checks:
                check(key, item)
        return list(value)
    return _binder(target, attr, key, convert, required=False)


# ─── Dates and times ────────────────────────────────────────────

def required_legacy_date_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _parsed(key, v, LegacyDate.parse, "YYYYMMDD"), required=True)


def optional_legacy_date_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _parsed(key, v, LegacyDate.parse, "YYYYMMDD"), required=False)


def required_date_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _parsed(key, v, Date.parse, "YYYY-MM-DD"), required=True)


def optional_date_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _parsed(key, v, Date.parse, "YYYY-MM-DD"), required=False)


def required_time_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _parsed(key, v, Time.parse, "HH:MM:SS"), required=True)


def optional_time_param(target: Any, attr: str, key: str) -> Binder:
    return _binder(target, attr, key, lambda v: _parsed(key, v, Time.parse, "HH:MM:SS"), required=False)


def _moment(text: str) -> OptionalDateTime:
    if not text:
        raise ValueError("empty date-time")
    moment = OptionalDateTime.parse(text)
    if moment.tzinfo is None:
        raise ValueError("date-time without offset")
    return moment


def optional_datetime_param(target: Any, attr: str, key: str) -> Binder:
    """RFC 3339 moment such as ``2025-06-01T09:00:00Z``; the offset is mandatory."""
    return _binder(target, attr, key, lambda v: _parsed(key, v, _moment, "YYYY-MM-DDTHH:MM:SSZ"), required=False)


# ─── Objects ────────────────────────────────────────────────────

def _object(key: str, value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise _invalid(key, "object", value)
    return value


def required_object_param(key: str, *binders: Binder) -> Binder:
    """Apply ``binders`` to the nested mapping under ``key``."""
    def bind(arguments: Mapping[str, Any]) -> None:
        param_group(_object(key, _require(arguments, key)), *binders)
    return bind


def optional_object_param(key: str, *binders: Binder) -> Binder:
    def bind(arguments: Mapping[str, Any]) -> None:
        if _present(arguments, key):
            param_group(_object(key, arguments[key]), *binders)
    return bind
