# tests/test_wire.py
from typing import List, Optional

import pytest
from pydantic import Field

from teamwork.scalars import LegacyNumericList
from teamwork.types import Model
from teamwork.wire import Query, envelope, new_request, payload, require_id


def test_query_omits_unset_values():
    query = (
        Query()
        .text("searchTerm", "")
        .text("other", None)
        .ids("tagIds", [])
        .words("include", None)
        .flag("matchAllTags", None)
        .positive("page", 0)
        .positive("pageSize", None)
        .value("startDate", None)
    )
    assert query.items() == []
    assert not query


def test_query_keeps_false_flags_and_sorts():
    query = (
        Query()
        .positive("pageSize", 10)
        .flag("matchAllTags", False)
        .ids("tagIds", [1, 2, 3])
        .words("include", ["users", "teams"])
        .text("searchTerm", "q")
    )
    assert query.items() == [
        ("include", "users,teams"),
        ("matchAllTags", "false"),
        ("pageSize", "10"),
        ("searchTerm", "q"),
        ("tagIds", "1,2,3"),
    ]


def test_new_request_headers():
    plain = new_request("GET", "https://acme.teamwork.com/x.json")
    assert plain.headers["Accept"] == "application/json"
    assert "Content-Type" not in plain.headers
    assert plain.url.query == b""

    with_body = new_request("POST", "https://acme.teamwork.com/x.json", body={"a": 1})
    assert with_body.headers["Content-Type"] == "application/json"
    assert with_body.content == b'{"a": 1}'


class _Draft(Model):
    id: int = Field(0, exclude=True)
    name: Optional[str] = None
    tag_ids: List[int] = Field(default_factory=list, alias="tagIds")
    done: Optional[bool] = None


def test_payload_drops_unset_fields_and_url_ids():
    assert payload(_Draft(id=5)) == {}
    assert payload(_Draft(id=5, name="x", tag_ids=[1], done=False)) == {"name": "x", "tagIds": [1], "done": False}
    assert envelope("draft", _Draft(name="y")) == {"draft": {"name": "y"}}


class _LegacyDraft(Model):
    id: int = Field(0, exclude=True)
    name: Optional[str] = None
    user_ids: Optional[LegacyNumericList] = Field(None, alias="userIds")


def test_payload_drops_empty_legacy_lists():
    assert payload(_LegacyDraft(name="Ops", user_ids=LegacyNumericList())) == {"name": "Ops"}
    assert payload(_LegacyDraft(user_ids=LegacyNumericList([4, 5]))) == {"userIds": "4,5"}


def test_require_id():
    assert require_id(3, "task") == 3
    with pytest.raises(ValueError, match="missing task ID"):
        require_id(0, "task")
