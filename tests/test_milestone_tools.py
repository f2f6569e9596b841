# tests/test_milestone_tools.py
"""Milestone tools and resources end to end against the fake Teamwork.com."""

import json

import pytest

from conftest import SERVER, body_of, query_of
from handlers.params import ParamError

V3 = f"{SERVER}/projects/api/v3"

MILESTONE = {
    "milestone": {
        "id": 17,
        "name": "Beta",
        "description": "beta cut",
        "deadline": "2025-12-31T00:00:00Z",
        "project": {"id": 4, "type": "projects"},
        "responsibleParties": [{"id": 7, "type": "users"}],
    }
}


async def test_create_milestone(registry, teamwork):
    result = await registry.call_tool(
        "create-milestone",
        {
            "project-id": 4,
            "name": "Beta",
            "due-date": "20251231",
            "assignees": {"user-ids": [7]},
            "tasklist-ids": [3],
            "tag-ids": [9],
            "description": "beta cut",
        },
    )

    assert result == "Milestone created successfully"
    assert len(teamwork.requests) == 1
    request = teamwork.last
    assert (request.method, str(request.url)) == ("POST", f"{SERVER}/projects/4/milestones.json")
    assert body_of(request) == {
        "milestone": {
            "title": "Beta",
            "description": "beta cut",
            "deadline": "20251231",
            "tasklistIds": [3],
            "tagIds": [9],
            "responsible-party-ids": "7",
        }
    }


async def test_create_milestone_without_assignees_is_rejected(registry, teamwork):
    with pytest.raises(ParamError, match="at least one assignee must be provided"):
        await registry.call_tool(
            "create-milestone",
            {"project-id": 4, "name": "Beta", "due-date": "20251231", "assignees": {}},
        )
    assert teamwork.requests == []


@pytest.mark.parametrize(
    "arguments, message",
    [
        ({"name": "Beta", "due-date": "20251231", "assignees": {"user-ids": [7]}}, "missing required parameter: project-id"),
        ({"project-id": 4, "name": "Beta", "due-date": "2025-12-31", "assignees": {"user-ids": [7]}}, "expected YYYYMMDD"),
        ({"project-id": 4, "name": "Beta", "due-date": "20251231"}, "missing required parameter: assignees"),
        ({"project-id": "4", "name": "Beta", "due-date": "20251231", "assignees": {"user-ids": [7]}}, "invalid project-id"),
    ],
)
async def test_create_milestone_bad_input(registry, teamwork, arguments, message):
    with pytest.raises(ParamError, match=f"invalid parameters: .*{message}"):
        await registry.call_tool("create-milestone", arguments)
    assert teamwork.requests == []


async def test_retrieve_milestones_with_filters(registry, teamwork):
    teamwork.reply(json_body={"meta": {"page": {"hasMore": False}}, "milestones": []})
    await registry.call_tool(
        "retrieve-milestones",
        {"tag-ids": [1, 2, 3], "match-all-tags": True, "page": 1, "page-size": 10, "search-term": "q"},
    )

    request = teamwork.last
    assert request.method == "GET"
    assert request.url.path == "/projects/api/v3/milestones.json"
    assert query_of(request) == {
        "matchAllTags": "true",
        "page": "1",
        "pageSize": "10",
        "searchTerm": "q",
        "tagIds": "1,2,3",
    }
    assert [key for key, _ in request.url.params.multi_items()] == [
        "matchAllTags", "page", "pageSize", "searchTerm", "tagIds",
    ]


async def test_retrieve_milestones_sends_no_empty_filters(registry, teamwork):
    teamwork.reply(json_body={"milestones": []})
    await registry.call_tool("retrieve-milestones", {"search-term": "", "tag-ids": [], "page": 0})
    assert str(teamwork.last.url) == f"{V3}/milestones.json"


async def test_retrieve_project_milestones(registry, teamwork):
    teamwork.reply(json_body={"milestones": [{"id": 1, "name": "Alpha"}]})
    text = await registry.call_tool("retrieve-project-milestones", {"project-id": 4})

    assert str(teamwork.last.url) == f"{V3}/projects/4/milestones.json"
    decoded = json.loads(text)
    assert decoded["milestones"][0]["name"] == "Alpha"
    assert decoded["milestones"][0]["webLink"] == f"{SERVER}/app/milestones/1"
    assert decoded["meta"] == {"page": {"hasMore": False}}


async def test_retrieve_milestone(registry, teamwork):
    teamwork.reply(json_body=MILESTONE)
    decoded = json.loads(await registry.call_tool("retrieve-milestone", {"milestone-id": 17}))
    assert str(teamwork.last.url) == f"{V3}/milestones/17.json"
    assert decoded["id"] == 17
    assert decoded["responsibleParties"] == [{"id": 7, "type": "users", "meta": None}]


async def test_update_milestone_sends_only_given_fields(registry, teamwork):
    result = await registry.call_tool("update-milestone", {"milestone-id": 17, "due-date": "20260115"})
    assert result == "Milestone updated successfully"
    request = teamwork.last
    assert (request.method, str(request.url)) == ("PUT", f"{SERVER}/milestones/17.json")
    assert body_of(request) == {"milestone": {"deadline": "20260115"}}


async def test_delete_milestone(registry, teamwork):
    result = await registry.call_tool("delete-milestone", {"milestone-id": 17})
    assert result == "Milestone deleted successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("DELETE", f"{SERVER}/milestones/17.json")


async def test_read_milestone_resource(registry, teamwork):
    teamwork.reply(json_body=MILESTONE)
    contents = await registry.read_resource("twapi://milestones/17")

    assert str(teamwork.last.url) == f"{V3}/milestones/17.json"
    assert len(contents) == 1
    assert contents[0].uri == "twapi://milestones/17"
    assert contents[0].mime_type == "application/json"
    assert json.loads(contents[0].text)["name"] == "Beta"


async def test_read_milestone_resource_rejects_non_numeric_ids(registry, teamwork):
    with pytest.raises(ValueError, match="invalid milestone ID"):
        await registry.read_resource("twapi://milestones/abc")
    assert teamwork.requests == []
