"""Teamwork AI configuration.

All config comes from environment variables.
Values are read once at import; nothing here changes at runtime.
"""

import os
from pathlib import Path
from typing import List, Optional


# ─── Server ─────────────────────────────────────────────────────
SERVER_NAME = "Teamwork AI"
SERVER_VERSION = "0.1.0"
PORT = int(os.environ.get("TWAI_PORT", 8080))

# ─── Teamwork.com ───────────────────────────────────────────────
# Base URL of the installation, e.g. https://acme.teamwork.com
TEAMWORK_SERVER = os.environ.get("TWAI_TEAMWORK_SERVER", "").rstrip("/")
TEAMWORK_API_TOKEN = os.environ.get("TWAI_TEAMWORK_API_TOKEN", "")

# Seconds. Unset means no implicit timeout; callers bring their own deadline.
_timeout = os.environ.get("TWAI_HTTP_TIMEOUT", "")
HTTP_TIMEOUT: Optional[float] = float(_timeout) if _timeout else None

# ─── Logging ────────────────────────────────────────────────────
LOG_LEVEL = os.environ.get("TWAI_LOG_LEVEL", "info").upper()
# Empty = console only
LOGS_DIR = Path(os.environ["TWAI_LOG_DIR"]) if os.environ.get("TWAI_LOG_DIR") else None


def missing_settings() -> List[str]:
    """Names of required variables that are not set."""
    missing = []
    if not TEAMWORK_SERVER:
        missing.append("TWAI_TEAMWORK_SERVER")
    if not TEAMWORK_API_TOKEN:
        missing.append("TWAI_TEAMWORK_API_TOKEN")
    return missing
