"""Teamwork AI: MCP bridge to Teamwork.com over streamable HTTP.

FastAPI application hosting the MCP endpoint at ``/mcp`` alongside a small
service description and a health check. The stdio transport lives in
``mcp_server.py``.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from mcp.server.streamable_http_manager import StreamableHTTPSessionManager

from config import HTTP_TIMEOUT, PORT, SERVER_NAME, SERVER_VERSION, TEAMWORK_API_TOKEN, TEAMWORK_SERVER, missing_settings
from handlers import build_registry
from mcp_server import build_server
from teamwork.engine import Engine
from utils.logging_ import logger

engine = Engine(TEAMWORK_SERVER, TEAMWORK_API_TOKEN, timeout=HTTP_TIMEOUT)
registry = build_registry(engine)
server = build_server(registry)
session_manager = StreamableHTTPSessionManager(app=server, json_response=False, stateless=True)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown logic."""
    logger.info("=" * 60)
    logger.info(f"{SERVER_NAME} v{SERVER_VERSION} starting up...")
    logger.info(f"  Port: {PORT}")
    logger.info(f"  Teamwork.com: {TEAMWORK_SERVER or 'NOT configured'}")
    logger.info(f"  Tools: {len(registry.tools)}")
    logger.info(f"  Resources: {len(registry.resources)} (+{len(registry.templates)} templates)")
    missing = missing_settings()
    if missing:
        logger.warning(f"  Missing configuration: {', '.join(missing)}; tool calls will fail")
    logger.info(f"{SERVER_NAME} ready.")
    logger.info("=" * 60)

    async with session_manager.run():
        yield

    logger.info(f"{SERVER_NAME} shutting down...")
    await engine.aclose()
    logger.info(f"{SERVER_NAME} shutdown complete.")


app = FastAPI(
    title=SERVER_NAME,
    description="MCP bridge exposing Teamwork.com projects, tasks and people as tools and resources.",
    version=SERVER_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["Mcp-Session-Id"],
)


async def handle_mcp(scope, receive, send) -> None:
    try:
        await session_manager.handle_request(scope, receive, send)
    except RuntimeError:
        # Session manager not started (lifespan not run)
        response = JSONResponse({"error": "MCP session manager not initialized"}, status_code=503)
        await response(scope, receive, send)


app.mount("/mcp", handle_mcp)


@app.get("/health")
async def health():
    missing = missing_settings()
    return {
        "status": "ok" if not missing else "degraded",
        "missing": missing,
    }


@app.get("/")
async def root():
    return {
        "service": SERVER_NAME,
        "version": SERVER_VERSION,
        "mcp": "/mcp",
        "tools": len(registry.tools),
        "docs": "/docs",
    }
