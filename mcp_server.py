"""Teamwork AI MCP server.

Publishes the registry's tools and ``twapi://`` resources over MCP. Runs on
stdio for desktop hosts, or behind the FastAPI app in ``main.py`` for the
streamable HTTP transport.

Usage:
    python mcp_server.py --mode stdio
    python mcp_server.py --mode http
"""

import argparse
import asyncio
import sys
from typing import Any, Dict, List

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server

from config import (
    HTTP_TIMEOUT,
    PORT,
    SERVER_NAME,
    SERVER_VERSION,
    TEAMWORK_API_TOKEN,
    TEAMWORK_SERVER,
    missing_settings,
)
from handlers import build_registry
from handlers.registry import MIME_JSON, Registry
from teamwork.engine import Engine
from utils.logging_ import logger


def build_server(registry: Registry) -> Server:
    """Low-level MCP server dispatching through ``registry``."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return [
            types.Tool(name=tool.name, description=tool.description, inputSchema=tool.input_schema)
            for tool in registry.tools.values()
        ]

    # Arguments are checked by the handlers themselves so hosts get the
    # same messages whatever transport they use.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: Dict[str, Any]) -> List[types.TextContent]:
        try:
            text = await registry.call_tool(name, arguments)
        except Exception as e:
            logger.warning(f"tool {name} failed: {e}")
            raise
        return [types.TextContent(type="text", text=text)]

    @server.list_resources()
    async def list_resources() -> List[types.Resource]:
        return [
            types.Resource(uri=r.uri, name=r.name, description=r.description, mimeType=MIME_JSON)
            for r in registry.resources.values()
        ]

    @server.list_resource_templates()
    async def list_resource_templates() -> List[types.ResourceTemplate]:
        return [
            types.ResourceTemplate(
                uriTemplate=t.uri_template,
                name=t.name,
                description=t.description,
                mimeType=MIME_JSON,
            )
            for t in registry.templates.values()
        ]

    @server.read_resource()
    async def read_resource(uri: Any) -> List[ReadResourceContents]:
        contents = await registry.read_resource(str(uri))
        return [ReadResourceContents(content=c.text, mime_type=c.mime_type) for c in contents]

    return server


# ─── Entry point ────────────────────────────────────────────────

async def _run_stdio() -> None:
    engine = Engine(TEAMWORK_SERVER, TEAMWORK_API_TOKEN, timeout=HTTP_TIMEOUT)
    server = build_server(build_registry(engine))
    logger.info(f"{SERVER_NAME} v{SERVER_VERSION} serving on stdio ({TEAMWORK_SERVER})")
    try:
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
    finally:
        await engine.aclose()


def main() -> None:
    parser = argparse.ArgumentParser(description=f"{SERVER_NAME} MCP server")
    parser.add_argument("--mode", choices=["stdio", "http"], default="stdio", help="Transport to serve")
    args = parser.parse_args()

    missing = missing_settings()
    if missing:
        logger.error(f"Missing configuration: {', '.join(missing)}")
        sys.exit(1)

    if args.mode == "http":
        import uvicorn
        uvicorn.run("main:app", host="0.0.0.0", port=PORT)
    else:
        asyncio.run(_run_stdio())


if __name__ == "__main__":
    main()
