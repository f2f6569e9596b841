# tests/integration/test_live.py
"""Smoke tests against a real Teamwork.com installation.

Run with ``pytest -m integration`` after exporting TWAI_TEAMWORK_SERVER and
TWAI_TEAMWORK_API_TOKEN. Everything created here is deleted again.
"""

import json
import uuid

import pytest

from config import HTTP_TIMEOUT, TEAMWORK_API_TOKEN, TEAMWORK_SERVER, missing_settings
from handlers import build_registry
from teamwork import tag
from teamwork.engine import Engine, with_id_callback

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(bool(missing_settings()), reason="Teamwork.com credentials not configured"),
]


@pytest.fixture()
async def live_engine():
    engine = Engine(TEAMWORK_SERVER, TEAMWORK_API_TOKEN, timeout=HTTP_TIMEOUT or 30)
    try:
        yield engine
    finally:
        await engine.aclose()


async def test_list_tools_reach_the_server(live_engine):
    registry = build_registry(live_engine)
    projects = json.loads(await registry.call_tool("retrieve-projects", {"page-size": 1}))
    assert "projects" in projects
    industries = json.loads(await registry.call_tool("retrieve-industries", {}))
    assert industries["industries"]


async def test_tag_lifecycle(live_engine):
    created = []
    name = f"twai-{uuid.uuid4().hex[:8]}"
    await live_engine.do(tag.Create(name=name), with_id_callback("id", created.append))
    assert len(created) == 1

    try:
        single = tag.Single(id=created[0])
        await live_engine.do(single)
        assert single.tag.name == name

        await live_engine.do(tag.Update(id=created[0], name=f"{name}-renamed"))
    finally:
        await live_engine.do(tag.Delete(id=created[0]))
