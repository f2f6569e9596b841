# tests/test_tools.py
"""Tool handlers of every domain besides milestones."""

import json

import pytest

from conftest import SERVER, body_of, query_of
from handlers.params import ParamError

V3 = f"{SERVER}/projects/api/v3"

EXPECTED_TOOLS = {
    "retrieve-projects", "retrieve-project", "create-project", "update-project",
    "retrieve-tasks", "retrieve-project-tasks", "retrieve-tasklist-tasks", "retrieve-task",
    "create-task", "update-task",
    "retrieve-tasklists", "retrieve-project-tasklists", "retrieve-tasklist",
    "create-tasklist", "update-tasklist", "delete-tasklist",
    "retrieve-milestones", "retrieve-project-milestones", "retrieve-milestone",
    "create-milestone", "update-milestone", "delete-milestone",
    "retrieve-timelogs", "retrieve-project-timelogs", "retrieve-task-timelogs", "retrieve-timelog",
    "create-timelog", "update-timelog", "delete-timelog",
    "retrieve-timers", "retrieve-timer", "create-timer", "update-timer",
    "pause-timer", "resume-timer", "complete-timer",
    "retrieve-comments", "retrieve-file-comments", "retrieve-milestone-comments",
    "retrieve-notebook-comments", "retrieve-task-comments", "retrieve-comment",
    "create-comment", "update-comment",
    "retrieve-activities", "retrieve-project-activities",
    "retrieve-users", "retrieve-project-users", "retrieve-user", "create-user", "update-user",
    "delete-user", "project-users", "assign-jobrole-users", "unassign-jobrole-users",
    "retrieve-users-workload",
    "retrieve-teams", "retrieve-team", "create-team", "update-team", "delete-team",
    "retrieve-companies", "retrieve-company", "create-company", "update-company", "delete-company",
    "retrieve-tags", "retrieve-tag", "create-tag", "update-tag", "delete-tag",
    "retrieve-skills", "retrieve-skill", "create-skill", "update-skill", "delete-skill",
    "retrieve-jobroles", "retrieve-jobrole", "create-jobrole", "update-jobrole", "delete-jobrole",
    "retrieve-industries",
}


def test_every_tool_is_published(registry):
    assert set(registry.tools) == EXPECTED_TOOLS


def test_manifests_declare_required_arguments(registry):
    for tool in registry.tools.values():
        schema = tool.input_schema
        assert schema["type"] == "object"
        assert set(schema.get("required", [])) <= set(schema["properties"]), tool.name
        assert tool.description


async def test_unknown_tool(registry):
    with pytest.raises(ValueError, match="unknown tool: nope"):
        await registry.call_tool("nope", {})


# --- Projects --------------------------------------------------------------

async def test_create_project(registry, teamwork):
    result = await registry.call_tool(
        "create-project", {"name": "Apollo", "start-at": "20250101", "company-id": 3, "tag-ids": [1]}
    )
    assert result == "Project created successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("POST", f"{SERVER}/projects.json")
    assert body_of(teamwork.last) == {
        "project": {"name": "Apollo", "start-date": "20250101", "companyId": 3, "tagIds": [1]}
    }


async def test_update_project(registry, teamwork):
    assert await registry.call_tool("update-project", {"project-id": 5, "name": "Renamed"}) == "Project updated successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("PUT", f"{SERVER}/projects/5.json")
    assert body_of(teamwork.last) == {"project": {"name": "Renamed"}}


async def test_retrieve_projects(registry, teamwork):
    teamwork.reply(json_body={"meta": {"page": {"hasMore": True}}, "projects": [{"id": 9, "name": "Apollo"}]})
    decoded = json.loads(await registry.call_tool("retrieve-projects", {"match-all-tags": False, "page-size": 5}))
    assert query_of(teamwork.last) == {"matchAllProjectTags": "false", "pageSize": "5"}
    assert decoded["meta"]["page"]["hasMore"] is True
    assert decoded["projects"][0]["webLink"] == f"{SERVER}/app/projects/9"


# --- Tasks -----------------------------------------------------------------

async def test_create_task(registry, teamwork):
    result = await registry.call_tool(
        "create-task",
        {
            "tasklist-id": 6,
            "name": "Write docs",
            "priority": "low",
            "start-date": "2025-03-01",
            "assignees": {"team-ids": [2]},
        },
    )
    assert result == "Task created successfully"
    assert str(teamwork.last.url) == f"{V3}/tasklists/6/tasks.json"
    assert body_of(teamwork.last) == {
        "task": {
            "name": "Write docs",
            "priority": "low",
            "startAt": "2025-03-01",
            "assignees": {"userIds": [], "companyIds": [], "teamIds": [2]},
        }
    }


async def test_create_task_rejects_unknown_priority(registry, teamwork):
    with pytest.raises(ParamError, match="invalid parameters: invalid priority"):
        await registry.call_tool("create-task", {"tasklist-id": 6, "name": "x", "priority": "urgent"})
    assert teamwork.requests == []


async def test_update_task_without_assignees(registry, teamwork):
    await registry.call_tool("update-task", {"task-id": 9, "tasklist-id": 2, "progress": 50})
    assert (teamwork.last.method, str(teamwork.last.url)) == ("PATCH", f"{V3}/tasks/9.json")
    assert body_of(teamwork.last) == {"task": {"progress": 50, "tasklistId": 2}}


@pytest.mark.parametrize(
    "tool, arguments, path",
    [
        ("retrieve-tasks", {}, "/projects/api/v3/tasks.json"),
        ("retrieve-project-tasks", {"project-id": 3}, "/projects/api/v3/projects/3/tasks.json"),
        ("retrieve-tasklist-tasks", {"tasklist-id": 6}, "/projects/api/v3/tasklists/6/tasks.json"),
    ],
)
async def test_task_lists(registry, teamwork, tool, arguments, path):
    teamwork.reply(json_body={"tasks": [{"id": 1}]})
    decoded = json.loads(await registry.call_tool(tool, arguments))
    assert teamwork.last.url.path == path
    assert decoded["tasks"][0]["webLink"] == f"{SERVER}/app/tasks/1"


# --- Tasklists -------------------------------------------------------------

async def test_tasklist_tools(registry, teamwork):
    assert await registry.call_tool("create-tasklist", {"project-id": 3, "name": "Sprint"}) == "Tasklist created successfully"
    assert str(teamwork.last.url) == f"{SERVER}/projects/3/tasklists.json"
    assert body_of(teamwork.last) == {"todo-list": {"name": "Sprint"}}

    assert await registry.call_tool("update-tasklist", {"tasklist-id": 11, "milestone-id": 17}) == "Tasklist updated successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("POST", f"{SERVER}/projects/tasklists/11.json")
    assert body_of(teamwork.last) == {"todo-list": {"milestone-Id": 17}}

    assert await registry.call_tool("delete-tasklist", {"tasklist-id": 11}) == "Tasklist deleted successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("DELETE", f"{V3}/tasklists/11.json")


# --- Timelogs --------------------------------------------------------------

async def test_create_timelog_on_task(registry, teamwork):
    result = await registry.call_tool(
        "create-timelog",
        {"task-id": 9, "date": "2025-02-03", "time": "08:30:00", "hours": 1, "minutes": 30, "billable": True},
    )
    assert result == "Timelog created successfully"
    assert str(teamwork.last.url) == f"{V3}/tasks/9/time.json"
    assert body_of(teamwork.last)["timelog"]["isBillable"] is True


async def test_create_timelog_needs_a_target(registry, teamwork):
    with pytest.raises(ParamError, match="invalid parameters: one of project-id or task-id must be provided"):
        await registry.call_tool("create-timelog", {"date": "2025-02-03", "time": "08:30:00", "hours": 1, "minutes": 0})
    assert teamwork.requests == []


async def test_retrieve_task_timelogs(registry, teamwork):
    teamwork.reply(json_body={"timelogs": [{"id": 3, "minutes": 90}]})
    decoded = json.loads(await registry.call_tool("retrieve-task-timelogs", {"task-id": 9, "tag-ids": [4]}))
    assert teamwork.last.url.path == "/projects/api/v3/tasks/9/time.json"
    assert query_of(teamwork.last) == {"tagIds": "4"}
    assert decoded["timelogs"][0]["minutes"] == 90


# --- Timers ----------------------------------------------------------------

async def test_create_timer_sends_only_given_fields(registry, teamwork):
    result = await registry.call_tool("create-timer", {"description": "Review", "running": True, "project-id": 3})
    assert result == "Timer created successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("POST", f"{V3}/me/timers.json")
    assert body_of(teamwork.last) == {"timer": {"description": "Review", "isRunning": True, "projectId": 3}}


async def test_update_timer(registry, teamwork):
    assert await registry.call_tool("update-timer", {"timer-id": 7, "billable": False}) == "Timer updated successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("PUT", f"{V3}/me/timers/7.json")
    assert body_of(teamwork.last) == {"timer": {"isBillable": False}}


@pytest.mark.parametrize(
    "tool, action, message",
    [
        ("pause-timer", "pause", "Timer paused successfully"),
        ("resume-timer", "resume", "Timer resumed successfully"),
        ("complete-timer", "complete", "Timer completed successfully"),
    ],
)
async def test_timer_state_changes(registry, teamwork, tool, action, message):
    assert await registry.call_tool(tool, {"timer-id": 7}) == message
    assert (teamwork.last.method, str(teamwork.last.url)) == ("PUT", f"{V3}/me/timers/7/{action}.json")
    assert teamwork.last.content == b""


async def test_retrieve_timers(registry, teamwork):
    teamwork.reply(json_body={"timers": [{"id": 7, "running": True, "intervals": [{"id": 1, "duration": 60}]}]})
    decoded = json.loads(
        await registry.call_tool("retrieve-timers", {"user-id": 8, "running-timers-only": True, "page-size": 10})
    )
    assert query_of(teamwork.last) == {"userId": "8", "runningTimersOnly": "true", "pageSize": "10"}
    assert decoded["timers"][0]["intervals"][0]["duration"] == 60

    await registry.call_tool("retrieve-timers", {"running-timers-only": False})
    assert query_of(teamwork.last) == {}


# --- Comments --------------------------------------------------------------

async def test_create_comment_on_object(registry, teamwork):
    result = await registry.call_tool(
        "create-comment",
        {"object": {"type": "tasks", "id": 9}, "body": "<p>Done</p>", "content-type": "HTML"},
    )
    assert result == "Comment created successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("POST", f"{SERVER}/tasks/9/comments.json")
    assert body_of(teamwork.last) == {"comment": {"body": "<p>Done</p>", "contentType": "HTML"}}


@pytest.mark.parametrize(
    "arguments, message",
    [
        ({"body": "x"}, "missing required parameter: object"),
        ({"object": "tasks/9", "body": "x"}, "invalid object: expected object, got string"),
        ({"object": {"type": "planets", "id": 9}, "body": "x"}, "invalid type"),
        ({"object": {"type": "tasks"}, "body": "x"}, "missing required parameter: id"),
        ({"object": {"type": "tasks", "id": 9}, "body": "x", "content-type": "markdown"}, "invalid content-type"),
    ],
)
async def test_create_comment_rejects_bad_input(registry, teamwork, arguments, message):
    with pytest.raises(ParamError, match=f"invalid parameters: {message}"):
        await registry.call_tool("create-comment", arguments)
    assert teamwork.requests == []


async def test_update_comment_uses_legacy_content_type(registry, teamwork):
    result = await registry.call_tool("update-comment", {"comment-id": 12, "body": "edited", "content-type": "TEXT"})
    assert result == "Comment updated successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("PUT", f"{SERVER}/comments/12.json")
    assert body_of(teamwork.last) == {"comment": {"body": "edited", "content-type": "TEXT"}}


@pytest.mark.parametrize(
    "tool, arguments, path",
    [
        ("retrieve-comments", {}, "/projects/api/v3/comments.json"),
        ("retrieve-file-comments", {"file-id": 2}, "/projects/api/v3/files/2/comments.json"),
        ("retrieve-milestone-comments", {"milestone-id": 3}, "/projects/api/v3/milestones/3/comments.json"),
        ("retrieve-notebook-comments", {"notebook-id": 4}, "/projects/api/v3/notebooks/4/comments.json"),
        ("retrieve-task-comments", {"task-id": 5}, "/projects/api/v3/tasks/5/comments.json"),
    ],
)
async def test_comment_lists(registry, teamwork, tool, arguments, path):
    teamwork.reply(json_body={"comments": [{"id": 12, "body": "hi", "object": {"id": 5, "type": "tasks"}}]})
    decoded = json.loads(await registry.call_tool(tool, {**arguments, "user-ids": [8], "search-term": "hi"}))
    assert teamwork.last.url.path == path
    assert query_of(teamwork.last) == {"searchTerm": "hi", "userIds": "8"}
    assert decoded["comments"][0]["webLink"] == f"{SERVER}/#tasks/5?c=12"


async def test_retrieve_comment(registry, teamwork):
    teamwork.reply(json_body={"comments": {"id": 12, "body": "hi", "object": {"id": 5, "type": "tasks"}}})
    decoded = json.loads(await registry.call_tool("retrieve-comment", {"comment-id": 12}))
    assert str(teamwork.last.url) == f"{V3}/comments/12.json"
    assert decoded["body"] == "hi"
    assert decoded["webLink"] == f"{SERVER}/#tasks/5?c=12"


# --- Activities ------------------------------------------------------------

async def test_retrieve_project_activities(registry, teamwork):
    teamwork.reply(json_body={"activities": [{"id": 31, "activityType": "edited", "item": {"id": 4, "type": "task"}}]})
    decoded = json.loads(
        await registry.call_tool(
            "retrieve-project-activities",
            {
                "project-id": 3,
                "start-date": "2025-06-01T09:00:00Z",
                "end-date": "2025-06-02T17:30:00+01:00",
                "log-item-types": ["task", "task_comment"],
            },
        )
    )
    assert teamwork.last.url.path == "/projects/api/v3/projects/3/latestactivity.json"
    assert query_of(teamwork.last) == {
        "activityTypes": "task,task_comment",
        "endDate": "2025-06-02T17:30:00+01:00",
        "startDate": "2025-06-01T09:00:00Z",
    }
    assert decoded["activities"][0]["activityType"] == "edited"


@pytest.mark.parametrize(
    "arguments, message",
    [
        ({"start-date": "2025-06-01"}, "invalid start-date: expected YYYY-MM-DDTHH:MM:SSZ"),
        ({"end-date": "2025-06-01T09:00:00"}, "invalid end-date: expected YYYY-MM-DDTHH:MM:SSZ"),
        ({"log-item-types": ["task", "planet"]}, "invalid log-item-types: expected one of"),
        ({"log-item-types": "task"}, "invalid log-item-types: expected array, got string"),
    ],
)
async def test_retrieve_activities_rejects_bad_filters(registry, teamwork, arguments, message):
    with pytest.raises(ParamError, match=f"invalid parameters: {message}"):
        await registry.call_tool("retrieve-activities", arguments)
    assert teamwork.requests == []


# --- Users -----------------------------------------------------------------

async def test_user_tools(registry, teamwork):
    result = await registry.call_tool(
        "create-user", {"first-name": "Ada", "last-name": "Lovelace", "email": "ada@example.com", "type": "account"}
    )
    assert result == "User created successfully"
    assert body_of(teamwork.last) == {
        "person": {"first-name": "Ada", "last-name": "Lovelace", "email-address": "ada@example.com", "user-type": "account"}
    }

    with pytest.raises(ParamError, match="invalid type"):
        await registry.call_tool("retrieve-users", {"type": "robot"})


async def test_retrieve_users_decodes_people(registry, teamwork):
    teamwork.reply(json_body={"people": [{"id": 8, "firstName": "Ada", "userCost": 1250}]})
    decoded = json.loads(await registry.call_tool("retrieve-project-users", {"project-id": 2, "type": "contact"}))
    assert teamwork.last.url.path == "/projects/api/v3/projects/2/people.json"
    assert query_of(teamwork.last) == {"userType": "contact"}
    assert decoded["people"][0]["firstName"] == "Ada"
    assert decoded["people"][0]["webLink"] == f"{SERVER}/app/people/8"


async def test_membership_tools(registry, teamwork):
    assert await registry.call_tool("project-users", {"project-id": 3, "user-ids": [1, 2]}) == "Users assigned to project successfully"
    assert (teamwork.last.method, str(teamwork.last.url)) == ("PUT", f"{V3}/projects/3/people.json")
    assert body_of(teamwork.last) == {"userIds": [1, 2]}

    await registry.call_tool("assign-jobrole-users", {"jobrole-id": 5, "user-ids": [1], "is-primary": True})
    assert (teamwork.last.method, str(teamwork.last.url)) == ("POST", f"{V3}/jobroles/5/people.json")
    assert body_of(teamwork.last) == {"users": [1], "isPrimary": True}

    result = await registry.call_tool("unassign-jobrole-users", {"jobrole-id": 5, "user-ids": [1]})
    assert result == "Users unassigned from job role successfully"
    assert teamwork.last.method == "DELETE"


async def test_retrieve_users_workload(registry, teamwork):
    teamwork.reply(json_body={"workload": {"users": [{"userId": 8, "dates": {"2025-06-02": {"capacity": 75}}}]}})
    decoded = json.loads(
        await registry.call_tool("retrieve-users-workload", {"start-date": "2025-06-01", "end-date": "2025-06-07"})
    )
    assert query_of(teamwork.last) == {
        "startDate": "2025-06-01",
        "endDate": "2025-06-07",
        "include": "users.workingHours.workingHoursEntry",
        "omitEmptyDateEntries": "true",
    }
    assert decoded["workload"]["users"][0]["dates"]["2025-06-02"]["capacity"] == 75

    with pytest.raises(ParamError, match="missing required parameter: end-date"):
        await registry.call_tool("retrieve-users-workload", {"start-date": "2025-06-01"})


# --- Teams, companies, tags, skills, job roles, industries -----------------

async def test_team_tools(registry, teamwork):
    await registry.call_tool("create-team", {"name": "Core", "user-ids": [4, 5], "parent-team-id": 1})
    assert body_of(teamwork.last) == {"team": {"name": "Core", "parentTeamId": 1, "userIds": "4,5"}}

    teamwork.reply(json_body={"team": {"id": "2", "name": "Core"}})
    decoded = json.loads(await registry.call_tool("retrieve-team", {"team-id": 2}))
    assert decoded["id"] == "2"
    assert decoded["webLink"] == f"{SERVER}/app/teams/2"


@pytest.mark.parametrize(
    "tool, arguments, expected",
    [
        ("create-team", {"name": "Ops", "user-ids": []}, {"team": {"name": "Ops"}}),
        ("update-team", {"team-id": 2, "handle": "ops", "user-ids": []}, {"team": {"handle": "ops"}}),
    ],
)
async def test_team_tools_omit_empty_member_lists(registry, teamwork, tool, arguments, expected):
    await registry.call_tool(tool, arguments)
    assert body_of(teamwork.last) == expected


async def test_company_tools(registry, teamwork):
    assert await registry.call_tool("create-company", {"name": "Acme", "country-code": "IE"}) == "Company created successfully"
    assert body_of(teamwork.last) == {"company": {"name": "Acme", "countrycode": "IE"}}
    await registry.call_tool("delete-company", {"company-id": 3})
    assert (teamwork.last.method, str(teamwork.last.url)) == ("DELETE", f"{V3}/companies/3.json")


async def test_tag_tools(registry, teamwork):
    teamwork.reply(json_body={"tags": [{"id": 1, "name": "urgent"}]})
    decoded = json.loads(await registry.call_tool("retrieve-tags", {"item-type": "task"}))
    assert query_of(teamwork.last) == {"itemType": "task"}
    assert decoded["tags"][0]["webLink"] == f"{SERVER}/app/settings/tags"

    with pytest.raises(ParamError, match="invalid item-type"):
        await registry.call_tool("retrieve-tags", {"item-type": "planet"})


async def test_skill_and_jobrole_lists_include_users(registry, teamwork):
    teamwork.reply(json_body={"skills": []})
    await registry.call_tool("retrieve-skills", {})
    assert query_of(teamwork.last) == {"include": "users"}

    teamwork.reply(json_body={"jobRoles": [{"id": 4, "name": "Lead", "isActive": True}]})
    decoded = json.loads(await registry.call_tool("retrieve-jobroles", {"search-term": "lead"}))
    assert query_of(teamwork.last) == {"include": "users", "searchTerm": "lead"}
    assert decoded["jobRoles"][0]["isActive"] is True
    assert decoded["jobRoles"][0]["webLink"] == f"{SERVER}/people/roles"


async def test_jobrole_update_requires_name(registry, teamwork):
    with pytest.raises(ParamError, match="missing required parameter: name"):
        await registry.call_tool("update-jobrole", {"jobrole-id": 4})
    assert await registry.call_tool("update-jobrole", {"jobrole-id": 4, "name": "Lead"}) == "Job role updated successfully"


async def test_retrieve_industries(registry, teamwork):
    teamwork.reply(json_body={"industries": [{"id": 1, "name": "Software"}]})
    decoded = json.loads(await registry.call_tool("retrieve-industries", {}))
    assert str(teamwork.last.url) == f"{SERVER}/industries.json"
    assert decoded == {"industries": [{"id": 1, "name": "Software"}]}


# --- Failures reach the host verbatim --------------------------------------

async def test_remote_errors_propagate(registry, teamwork):
    teamwork.reply(status=404, text='{"errors":["not found"]}')
    with pytest.raises(Exception, match='unexpected status code: 404, body: {"errors":\\["not found"\\]}'):
        await registry.call_tool("retrieve-task", {"task-id": 1})
