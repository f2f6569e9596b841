# tests/test_app.py
from fastapi.testclient import TestClient

from config import SERVER_NAME, SERVER_VERSION, missing_settings
from main import app

# No context manager: the lifespan (and the MCP session manager) stays off.
client = TestClient(app)


def test_root_describes_the_service():
    response = client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["service"] == SERVER_NAME
    assert data["version"] == SERVER_VERSION
    assert data["mcp"] == "/mcp"
    assert data["tools"] == 82


def test_health_reports_configuration():
    data = client.get("/health").json()
    assert data["missing"] == missing_settings()
    assert data["status"] == ("ok" if not data["missing"] else "degraded")


def test_mcp_endpoint_needs_the_lifespan():
    response = client.post("/mcp/", json={"jsonrpc": "2.0", "id": 1, "method": "ping"})
    assert response.status_code == 503
