# tests/test_params.py
from datetime import date, datetime, time, timedelta, timezone
from typing import List, Optional

import pytest
from pydantic import Field

from handlers.params import (
    ParamError,
    optional_date_param,
    optional_datetime_param,
    optional_legacy_date_param,
    optional_legacy_numeric_list_param,
    optional_list_param,
    optional_numeric_list_param,
    optional_numeric_param,
    optional_object_param,
    optional_param,
    optional_time_param,
    param_group,
    required_date_param,
    required_legacy_date_param,
    required_numeric_list_param,
    required_numeric_param,
    required_object_param,
    required_param,
    restrict_values,
)
from teamwork.scalars import LegacyUserGroups
from teamwork.types import Model


class _Target(Model):
    name: str = ""
    note: Optional[str] = None
    count: int = 0
    flag: Optional[bool] = None
    ids: List[int] = Field(default_factory=list)
    words: List[str] = Field(default_factory=list)
    legacy_ids: Optional[list] = None
    day: Optional[date] = None
    clock: Optional[time] = None
    moment: Optional[datetime] = None


@pytest.fixture()
def target() -> _Target:
    return _Target()


# --- Scalars ---------------------------------------------------------------

def test_required_scalar(target):
    param_group({"name": "Apollo"}, required_param(target, "name", "name"))
    assert target.name == "Apollo"

    with pytest.raises(ParamError, match="missing required parameter: name"):
        param_group({}, required_param(target, "name", "name"))


def test_wrong_json_type_is_never_coerced(target):
    with pytest.raises(ParamError, match="invalid name: expected string, got number"):
        param_group({"name": 5}, required_param(target, "name", "name"))
    with pytest.raises(ParamError, match="invalid flag: expected boolean, got string"):
        param_group({"flag": "true"}, optional_param(target, "flag", "flag", bool))


def test_optional_scalar_is_tri_state(target):
    param_group({}, optional_param(target, "flag", "flag", bool))
    assert target.flag is None
    param_group({"flag": False}, optional_param(target, "flag", "flag", bool))
    assert target.flag is False


def test_null_counts_as_absent(target):
    param_group({"note": None, "count": None}, optional_param(target, "note", "note"), optional_numeric_param(target, "count", "count"))
    assert target.note is None
    assert target.count == 0
    with pytest.raises(ParamError, match="missing required parameter: count"):
        param_group({"count": None}, required_numeric_param(target, "count", "count"))


def test_restricted_values(target):
    check = restrict_values("low", "medium", "high")
    param_group({"name": "low"}, required_param(target, "name", "name", checks=[check]))
    assert target.name == "low"
    with pytest.raises(ParamError, match="expected one of low, medium, high"):
        param_group({"name": "urgent"}, required_param(target, "name", "name", checks=[check]))


# --- Numbers ---------------------------------------------------------------

def test_numbers_are_truncated(target):
    param_group({"count": 12.9}, required_numeric_param(target, "count", "count"))
    assert target.count == 12


@pytest.mark.parametrize("value, kind", [(True, "boolean"), ("3", "string"), ([3], "array")])
def test_numbers_reject_other_types(target, value, kind):
    with pytest.raises(ParamError, match=f"invalid count: expected number, got {kind}"):
        param_group({"count": value}, required_numeric_param(target, "count", "count"))


def test_numeric_lists(target):
    param_group({"ids": [1, 2.0, 3]}, required_numeric_list_param(target, "ids", "ids"))
    assert target.ids == [1, 2, 3]

    with pytest.raises(ParamError, match="expected number elements, got string"):
        param_group({"ids": [1, "2"]}, optional_numeric_list_param(target, "ids", "ids"))
    with pytest.raises(ParamError, match="expected array, got number"):
        param_group({"ids": 1}, optional_numeric_list_param(target, "ids", "ids"))


def test_legacy_numeric_list(target):
    param_group({"legacy": [4, 5]}, optional_legacy_numeric_list_param(target, "legacy_ids", "legacy"))
    assert str(target.legacy_ids) == "4,5"


def test_string_lists(target):
    param_group({"words": ["a", "b"]}, optional_list_param(target, "words", "words"))
    assert target.words == ["a", "b"]
    with pytest.raises(ParamError, match="expected string elements"):
        param_group({"words": ["a", 1]}, optional_list_param(target, "words", "words"))


def test_string_list_checks_every_element(target):
    only_ab = [restrict_values("a", "b")]
    param_group({"words": ["b", "a"]}, optional_list_param(target, "words", "words", checks=only_ab))
    assert target.words == ["b", "a"]
    with pytest.raises(ParamError, match="invalid words: expected one of a, b, got 'c'"):
        param_group({"words": ["a", "c"]}, optional_list_param(target, "words", "words", checks=only_ab))


# --- Dates and times -------------------------------------------------------

def test_dates(target):
    param_group({"day": "20250102"}, required_legacy_date_param(target, "day", "day"))
    assert target.day == date(2025, 1, 2)
    param_group({"day": "2025-01-03"}, required_date_param(target, "day", "day"))
    assert target.day == date(2025, 1, 3)
    param_group({"clock": "07:45:00"}, optional_time_param(target, "clock", "clock"))
    assert target.clock == time(7, 45)


@pytest.mark.parametrize(
    "binder, value, layout",
    [
        (optional_legacy_date_param, "2025-01-02", "YYYYMMDD"),
        (optional_date_param, "20250102", "YYYY-MM-DD"),
        (optional_time_param, "7:45", "HH:MM:SS"),
    ],
)
def test_malformed_dates(target, binder, value, layout):
    attr = "clock" if binder is optional_time_param else "day"
    with pytest.raises(ParamError, match=f"expected {layout}"):
        param_group({"when": value}, binder(target, attr, "when"))


def test_moments_need_an_offset(target):
    param_group({"at": "2025-06-01T09:00:00Z"}, optional_datetime_param(target, "moment", "at"))
    assert target.moment == datetime(2025, 6, 1, 9, tzinfo=timezone.utc)
    param_group({"at": "2025-06-01T09:00:00-03:00"}, optional_datetime_param(target, "moment", "at"))
    assert target.moment.utcoffset() == timedelta(hours=-3)

    for value in ("2025-06-01T09:00:00", "2025-06-01", ""):
        with pytest.raises(ParamError, match="invalid at: expected YYYY-MM-DDTHH:MM:SSZ"):
            param_group({"at": value}, optional_datetime_param(target, "moment", "at"))


# --- Objects ---------------------------------------------------------------

def test_nested_objects_bind_into_groups():
    groups = LegacyUserGroups()
    binder = required_object_param(
        "assignees",
        optional_numeric_list_param(groups, "user_ids", "user-ids"),
        optional_numeric_list_param(groups, "team_ids", "team-ids"),
    )
    param_group({"assignees": {"user-ids": [7], "team-ids": [2]}}, binder)
    assert str(groups) == "7,t2"


def test_object_errors():
    groups = LegacyUserGroups()
    with pytest.raises(ParamError, match="missing required parameter: assignees"):
        param_group({}, required_object_param("assignees"))
    with pytest.raises(ParamError, match="invalid assignees: expected object, got array"):
        param_group({"assignees": [7]}, optional_object_param("assignees"))
    param_group({}, optional_object_param("assignees", optional_numeric_list_param(groups, "user_ids", "user-ids")))
    assert groups.is_empty()


def test_group_stops_at_first_failure(target):
    with pytest.raises(ParamError, match="missing required parameter: name"):
        param_group(
            {"count": 3},
            required_param(target, "name", "name"),
            required_numeric_param(target, "count", "count"),
        )
    assert target.count == 0
