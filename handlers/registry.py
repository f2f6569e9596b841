"""Tool and resource tables published to the MCP host.

Domain modules describe their tools with an explicit JSON-schema manifest
(argument names are kebab-case, which Python signatures cannot express) and
their resources as ``twapi://`` URIs. The MCP server in ``mcp_server.py``
only reads these tables and dispatches through them.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel

from handlers.params import Binder, ParamError, param_group
from teamwork.engine import Engine
from utils.logging_ import logger

MIME_JSON = "application/json"

ToolHandler = Callable[[Engine, Dict[str, Any]], Awaitable[str]]


@dataclass
class Content:
    """One block of a resource read."""
    uri: str
    text: str
    mime_type: str = MIME_JSON


@dataclass
class Tool:
    name: str
    description: str
    input_schema: Dict[str, Any]
    handler: ToolHandler


@dataclass
class Resource:
    uri: str
    name: str
    description: str
    handler: Callable[[Engine], Awaitable[List[Content]]]


@dataclass
class ResourceTemplate:
    uri_template: str
    name: str
    description: str
    handler: Callable[[Engine, str], Awaitable[List[Content]]]

    @property
    def prefix(self) -> str:
        return self.uri_template.split("{", 1)[0]


@dataclass
class Registry:
    engine: Engine
    tools: Dict[str, Tool] = field(default_factory=dict)
    resources: Dict[str, Resource] = field(default_factory=dict)
    templates: Dict[str, ResourceTemplate] = field(default_factory=dict)

    # ─── Tools ──────────────────────────────────────────────────

    def tool(
        self,
        name: str,
        description: str,
        properties: Optional[Dict[str, Any]] = None,
        required: Sequence[str] = (),
    ) -> Callable[[ToolHandler], ToolHandler]:
        """Register the decorated coroutine as tool ``name``."""
        schema: Dict[str, Any] = {"type": "object", "properties": properties or {}}
        if required:
            schema["required"] = list(required)

        def decorator(handler: ToolHandler) -> ToolHandler:
            self.tools[name] = Tool(name, description, schema, handler)
            return handler
        return decorator

    async def call_tool(self, name: str, arguments: Optional[Mapping[str, Any]]) -> str:
        tool = self.tools.get(name)
        if tool is None:
            raise ValueError(f"unknown tool: {name}")
        logger.info(f"tool call: {name}")
        return await tool.handler(self.engine, dict(arguments or {}))

    # ─── Resources ──────────────────────────────────────────────

    def collection(
        self,
        plural: str,
        singular: str,
        fetch_all: Callable[[Engine], Awaitable[Sequence[BaseModel]]],
        fetch_one: Optional[Callable[[Engine, int], Awaitable[Optional[BaseModel]]]] = None,
    ) -> None:
        """Publish ``twapi://<plural>`` and, with ``fetch_one``, ``twapi://<plural>/{id}``."""
        base = f"twapi://{plural}"

        async def read_all(engine: Engine) -> List[Content]:
            items = await fetch_all(engine)
            return [Content(uri=f"{base}/{item.id}", text=dump(item)) for item in items]

        self.resources[base] = Resource(
            uri=base,
            name=plural,
            description=f"Available {plural} in the customer site",
            handler=read_all,
        )
        if fetch_one is None:
            return

        pattern = re.compile(rf"^{re.escape(base)}/(\d+)$")

        async def read_one(engine: Engine, uri: str) -> List[Content]:
            match = pattern.match(uri)
            if match is None:
                raise ValueError(f"invalid {singular} ID")
            item = await fetch_one(engine, int(match.group(1)))
            return [Content(uri=uri, text=dump(item))]

        template = f"{base}/{{id}}"
        self.templates[template] = ResourceTemplate(
            uri_template=template,
            name=singular,
            description=f"A {singular} in the customer site, addressed by its numeric ID",
            handler=read_one,
        )

    async def read_resource(self, uri: str) -> List[Content]:
        uri = uri.rstrip("/")
        resource = self.resources.get(uri)
        if resource is not None:
            return await resource.handler(self.engine)
        for template in self.templates.values():
            if uri.startswith(template.prefix):
                return await template.handler(self.engine, uri)
        raise ValueError(f"unknown resource: {uri}")


# ─── Handler helpers ────────────────────────────────────────────

def bind(arguments: Mapping[str, Any], *binders: Binder) -> None:
    """Run ``binders``; any failure becomes ``invalid parameters: ...``."""
    try:
        param_group(arguments, *binders)
    except ParamError as e:
        raise ParamError(f"invalid parameters: {e}") from e


def dump(model: Optional[BaseModel]) -> str:
    if model is None:
        return "null"
    return model.model_dump_json(by_alias=True, indent=2)


# ─── Manifest builders ──────────────────────────────────────────

def string(description: str, **extra: Any) -> Dict[str, Any]:
    return {"type": "string", "description": description, **extra}


def number(description: str) -> Dict[str, Any]:
    return {"type": "number", "description": description}


def boolean(description: str) -> Dict[str, Any]:
    return {"type": "boolean", "description": description}


def number_array(description: str) -> Dict[str, Any]:
    return {"type": "array", "items": {"type": "number"}, "description": description}


def string_array(description: str, enum: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    items: Dict[str, Any] = {"type": "string"}
    if enum:
        items["enum"] = list(enum)
    return {"type": "array", "items": items, "description": description}


def obj(description: str, properties: Dict[str, Any]) -> Dict[str, Any]:
    return {"type": "object", "description": description, "properties": properties}


# Filters shared by most list tools
def pagination() -> Dict[str, Any]:
    return {
        "page": number("Page number for pagination of results."),
        "page-size": number("Number of results per page for pagination."),
    }
