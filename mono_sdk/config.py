"""
Mono SDK — Configuration

Environment-driven defaults for the Mono v2 API.
"""

from __future__ import annotations

import os

# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------
BASE_URL = os.environ.get("MONO_BASE_URL", "https://api.withmono.com/v2/")

# ---------------------------------------------------------------------------
# Credentials
# ---------------------------------------------------------------------------
MONO_SEC_KEY = os.environ.get("MONO_SEC_KEY", "")

# ---------------------------------------------------------------------------
# Wire constants
# ---------------------------------------------------------------------------
AUTH_HEADER = "mono-sec-key"
SESSION_HEADER = "x-session-id"
SUCCESS_STATUS = "successful"


def endpoint(base_url: str, path: str) -> str:
    """Join a base URL and a relative API path with exactly one slash."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"
