"""Helper functions for the MCP tools."""

from typing import Any, Callable, Dict

import requests

from ..core.base import SCHEMA
from ..core.exceptions import TransportError
from ..core.http_client import err_payload
from ..models.types import Result


def tool_response(result: Result) -> Dict[str, Any]:
    """Tag a request result with the schema version, or turn a failure into an err_payload."""
    if not result.ok:
        resp = result.response
        code = f"UPSTREAM_{resp.get('http_status')}" if result.reason == "http" else "BAD_RESPONSE"
        msg = resp.get("message") or resp.get("error") or "Unknown API error"
        return err_payload("jikan", code, msg)
    return {"schemaVersion": SCHEMA, **result.response}


def run_tool(call: Callable[[], Result]) -> Dict[str, Any]:
    try:
        return tool_response(call())
    except TransportError as e:
        if isinstance(e.__cause__, requests.Timeout):
            return err_payload("jikan", "TIMEOUT", "Upstream timed out")
        return err_payload("jikan", "UNREACHABLE", str(e))
    except (TypeError, ValueError) as e:
        return err_payload("jikan", "BAD_REQUEST", str(e))
