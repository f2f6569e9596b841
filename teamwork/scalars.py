"""Wire-format scalars shared by the Teamwork.com entities.

Two generations of the Teamwork.com API live side by side: the v3 endpoints
speak ISO dates and JSON numbers, while the legacy (v1) endpoints still use
compact ``YYYYMMDD`` dates, integers wrapped in strings and comma-joined
identifier lists. Every type here plugs into pydantic (JSON codec) and also
has a ``parse``/``str`` pair (plain-text codec), so a value can key a mapping
in a JSON document, e.g. the per-day entries of a workload report.
"""

import re
from datetime import date, datetime, time, timezone
from typing import Any, Callable, Iterable, List, Optional

from pydantic_core import core_schema


def _text_schema(validate: Callable[[Any], Any], serialize: Callable[[Any], Any]) -> core_schema.CoreSchema:
    return core_schema.no_info_plain_validator_function(
        validate,
        serialization=core_schema.plain_serializer_function_ser_schema(serialize),
    )


def _is_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ─── Dates and clock times ──────────────────────────────────────

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_TIME_RE = re.compile(r"^\d{2}:\d{2}:\d{2}$")
_LEGACY_DATE_RE = re.compile(r"^\d{8}$")


class Date(date):
    """Calendar day encoded as ``YYYY-MM-DD``."""

    FORMAT = "%Y-%m-%d"
    PATTERN = _DATE_RE

    @classmethod
    def parse(cls, text: str):
        if not cls.PATTERN.match(text):
            raise ValueError(f"invalid date format: {text!r}")
        parsed = datetime.strptime(text, cls.FORMAT)
        return cls(parsed.year, parsed.month, parsed.day)

    @classmethod
    def from_date(cls, value: date):
        return cls(value.year, value.month, value.day)

    def __str__(self) -> str:
        return self.strftime(self.FORMAT)

    @classmethod
    def _validate(cls, value: Any):
        if type(value) is cls:
            return value
        if isinstance(value, datetime):
            return cls.from_date(value.date())
        if isinstance(value, date):
            return cls.from_date(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"expected a date string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return _text_schema(cls._validate, str)


class LegacyDate(Date):
    """Calendar day in the legacy compact ``YYYYMMDD`` form."""

    FORMAT = "%Y%m%d"
    PATTERN = _LEGACY_DATE_RE


class Time(time):
    """Clock time encoded as ``HH:MM:SS``."""

    FORMAT = "%H:%M:%S"

    @classmethod
    def parse(cls, text: str) -> "Time":
        if not _TIME_RE.match(text):
            raise ValueError(f"invalid time format: {text!r}")
        parsed = datetime.strptime(text, cls.FORMAT)
        return cls(parsed.hour, parsed.minute, parsed.second)

    def __str__(self) -> str:
        return self.strftime(self.FORMAT)

    @classmethod
    def _validate(cls, value: Any) -> "Time":
        if isinstance(value, cls):
            return value
        if isinstance(value, time):
            return cls(value.hour, value.minute, value.second)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"expected a time string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return _text_schema(cls._validate, str)


class OptionalDateTime(datetime):
    """ISO-8601 moment that also accepts ``""`` and ``null`` on input.

    Both empty forms decode to the zero moment (``0001-01-01T00:00:00Z``).
    """

    @classmethod
    def zero(cls) -> "OptionalDateTime":
        return cls(1, 1, 1, tzinfo=timezone.utc)

    def is_zero(self) -> bool:
        return self == self.zero()

    @classmethod
    def parse(cls, text: Optional[str]) -> "OptionalDateTime":
        if not text:
            return cls.zero()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        return cls._from_datetime(datetime.fromisoformat(text))

    @classmethod
    def _from_datetime(cls, value: datetime) -> "OptionalDateTime":
        return cls(
            value.year, value.month, value.day,
            value.hour, value.minute, value.second, value.microsecond,
            tzinfo=value.tzinfo,
        )

    def __str__(self) -> str:
        text = self.isoformat()
        if text.endswith("+00:00"):
            text = text[:-6] + "Z"
        return text

    @classmethod
    def _validate(cls, value: Any) -> "OptionalDateTime":
        if isinstance(value, cls):
            return value
        if isinstance(value, datetime):
            return cls._from_datetime(value)
        if value is None or isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"expected a date-time string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return _text_schema(cls._validate, str)


# ─── Numbers ────────────────────────────────────────────────────

class LegacyNumber(int):
    """Integer the legacy API wraps in a JSON string (``"42"``)."""

    @classmethod
    def parse(cls, text: str) -> "LegacyNumber":
        return cls(int(text.strip()))

    @classmethod
    def _validate(cls, value: Any) -> "LegacyNumber":
        if _is_integer(value):
            return cls(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"expected an integer or numeric string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return _text_schema(cls._validate, lambda v: str(int(v)))


class LegacyNumericList(list):
    """Integer list sent as one comma-joined string (``"1,2,3"``)."""

    @classmethod
    def parse(cls, text: str) -> "LegacyNumericList":
        return cls(int(token) for token in (t.strip() for t in text.split(",")) if token)

    def __str__(self) -> str:
        return ",".join(str(int(v)) for v in self)

    @classmethod
    def _validate(cls, value: Any) -> "LegacyNumericList":
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (list, tuple)):
            items = []
            for item in value:
                if _is_integer(item):
                    items.append(item)
                elif isinstance(item, str):
                    items.append(int(item))
                else:
                    raise ValueError(f"invalid list element: {item!r}")
            return cls(items)
        raise ValueError(f"expected a comma separated string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return _text_schema(cls._validate, str)


class Money(int):
    """Fixed-point amount stored in hundredths.

    ``Money.from_value(12.5)`` holds ``1250``; ``value()`` gives ``12.5`` back.
    """

    @classmethod
    def from_value(cls, amount: float) -> "Money":
        return cls(round(amount * 100))

    def value(self) -> float:
        return int(self) / 100

    @classmethod
    def _validate(cls, value: Any) -> "Money":
        if _is_integer(value):
            return cls(value)
        if isinstance(value, float) and value.is_integer():
            return cls(int(value))
        raise ValueError(f"expected an integer amount, got {value!r}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return _text_schema(cls._validate, int)


# ─── Assignee lists ─────────────────────────────────────────────

class LegacyUserGroups:
    """Users, companies and teams packed into one string.

    Users are bare numbers, companies carry a ``c`` prefix and teams a ``t``
    prefix: ``"1,2,c5,t9"``. Users always come first, then companies, then
    teams.
    """

    def __init__(
        self,
        user_ids: Optional[Iterable[int]] = None,
        company_ids: Optional[Iterable[int]] = None,
        team_ids: Optional[Iterable[int]] = None,
    ):
        self.user_ids: List[int] = list(user_ids or [])
        self.company_ids: List[int] = list(company_ids or [])
        self.team_ids: List[int] = list(team_ids or [])

    def is_empty(self) -> bool:
        return not (self.user_ids or self.company_ids or self.team_ids)

    @classmethod
    def parse(cls, text: str) -> "LegacyUserGroups":
        groups = cls()
        for token in text.split(","):
            token = token.strip()
            if not token:
                continue
            if token.startswith("c"):
                groups.company_ids.append(_prefixed_id(token, "company"))
            elif token.startswith("t"):
                groups.team_ids.append(_prefixed_id(token, "team"))
            else:
                try:
                    groups.user_ids.append(int(token))
                except ValueError:
                    raise ValueError(f"invalid user ID format: {token}") from None
        return groups

    def __str__(self) -> str:
        tokens = [str(i) for i in self.user_ids]
        tokens += [f"c{i}" for i in self.company_ids]
        tokens += [f"t{i}" for i in self.team_ids]
        return ",".join(tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LegacyUserGroups):
            return NotImplemented
        return (
            self.user_ids == other.user_ids
            and self.company_ids == other.company_ids
            and self.team_ids == other.team_ids
        )

    def __repr__(self) -> str:
        return (
            f"LegacyUserGroups(user_ids={self.user_ids}, "
            f"company_ids={self.company_ids}, team_ids={self.team_ids})"
        )

    @classmethod
    def _validate(cls, value: Any) -> "LegacyUserGroups":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"expected a comma separated string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type, handler):
        return _text_schema(cls._validate, str)


def _prefixed_id(token: str, kind: str) -> int:
    try:
        return int(token[1:])
    except ValueError:
        raise ValueError(f"invalid {kind} ID format: {token}") from None
