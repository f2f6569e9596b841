"""Handlers module: MCP tools and resources for each Teamwork.com entity."""

from handlers import (
    activity,
    comment,
    company,
    industry,
    jobrole,
    milestone,
    project,
    skill,
    tag,
    task,
    tasklist,
    team,
    timelog,
    timer,
    user,
)
from handlers.registry import Registry
from teamwork.engine import Engine

_MODULES = (
    project,
    task,
    tasklist,
    milestone,
    timelog,
    timer,
    comment,
    activity,
    user,
    team,
    company,
    tag,
    skill,
    jobrole,
    industry,
)


def build_registry(engine: Engine) -> Registry:
    """Registry with every domain's tools and resources, bound to ``engine``."""
    registry = Registry(engine)
    for module in _MODULES:
        module.register(registry)
    return registry


__all__ = ["build_registry", "Registry"]
