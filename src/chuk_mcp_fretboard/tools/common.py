"""
Shared helpers for MCP tool responses.
"""

from __future__ import annotations

import json
from typing import Any

from chuk_mcp_fretboard.core import MusicTheoryError


def success_response(**payload: Any) -> str:
    """Serialize a successful tool result."""
    return json.dumps({"status": "success", **payload})


def error_response(error: Exception) -> str:
    """Serialize a failed tool result, keeping the error code when there is one."""
    code = error.code if isinstance(error, MusicTheoryError) else "ERROR"
    return json.dumps({"status": "error", "code": code, "message": str(error)})
