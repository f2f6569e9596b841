# tests/test_mcp_server.py
"""The MCP surface as a host sees it, over an in-memory client session."""

import json
from importlib.metadata import version

import pytest
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session
from pydantic import AnyUrl

from conftest import SERVER
from config import SERVER_NAME
from mcp_server import build_server


def test_sdk_is_the_1x_line():
    # build_server relies on the 1.x low-level Server decorators
    assert version("mcp").split(".")[0] == "1"


@pytest.fixture()
def server(registry):
    return build_server(registry)


async def test_initialize_reports_server_name(server):
    async with create_connected_server_and_client_session(server) as client:
        tools = await client.list_tools()
    assert server.name == SERVER_NAME
    assert len(tools.tools) == 82


async def test_tool_manifest_uses_kebab_case(server):
    async with create_connected_server_and_client_session(server) as client:
        tools = {tool.name: tool for tool in (await client.list_tools()).tools}

    schema = tools["create-milestone"].inputSchema
    assert set(schema["required"]) == {"project-id", "name", "due-date", "assignees"}
    assert set(schema["properties"]["assignees"]["properties"]) == {"user-ids", "company-ids", "team-ids"}
    assert schema["properties"]["tag-ids"]["items"] == {"type": "number"}


async def test_call_tool_returns_text(server, teamwork):
    teamwork.reply(json_body={"tags": [{"id": 1, "name": "urgent"}]})
    async with create_connected_server_and_client_session(server) as client:
        result = await client.call_tool("retrieve-tags", {"search-term": "urg"})

    assert not result.isError
    decoded = json.loads(result.content[0].text)
    assert decoded["tags"][0]["name"] == "urgent"


async def test_call_tool_failures_carry_the_raw_message(server, teamwork):
    async with create_connected_server_and_client_session(server) as client:
        result = await client.call_tool(
            "create-milestone",
            {"project-id": 4, "name": "Beta", "due-date": "20251231", "assignees": {}},
        )

    assert result.isError
    assert "invalid parameters: at least one assignee must be provided" in result.content[0].text
    assert teamwork.requests == []


async def test_null_arguments_count_as_absent(server, teamwork):
    teamwork.reply(json_body={"tasks": []})
    async with create_connected_server_and_client_session(server) as client:
        result = await client.call_tool("retrieve-tasks", {"page": None, "search-term": None})

    assert not result.isError
    assert str(teamwork.last.url) == f"{SERVER}/projects/api/v3/tasks.json"


async def test_resources_and_templates(server):
    async with create_connected_server_and_client_session(server) as client:
        resources = (await client.list_resources()).resources
        templates = (await client.list_resource_templates()).resourceTemplates

    assert "twapi://milestones" in {str(r.uri) for r in resources}
    assert all(r.mimeType == "application/json" for r in resources)
    assert "twapi://milestones/{id}" in {t.uriTemplate for t in templates}


async def test_read_resource(server, teamwork):
    teamwork.reply(json_body={"milestone": {"id": 17, "name": "Beta"}})
    async with create_connected_server_and_client_session(server) as client:
        result = await client.read_resource(AnyUrl("twapi://milestones/17"))

    assert teamwork.last.url.path == "/projects/api/v3/milestones/17.json"
    content = result.contents[0]
    assert content.mimeType == "application/json"
    assert json.loads(content.text)["name"] == "Beta"


async def test_read_resource_with_bad_id(server, teamwork):
    async with create_connected_server_and_client_session(server) as client:
        with pytest.raises(McpError, match="invalid milestone ID"):
            await client.read_resource(AnyUrl("twapi://milestones/abc"))
    assert teamwork.requests == []
