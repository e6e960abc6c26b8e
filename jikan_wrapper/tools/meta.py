"""Metadata tools for jikan-wrapper."""

from importlib.metadata import version, PackageNotFoundError
from typing import Optional

from ..core.base import JikanClient, SCHEMA, client

# Version info
try:
    __VERSION__ = version("jikan-wrapper")   # nombre del paquete en pyproject
except PackageNotFoundError:
    __VERSION__ = "0.0.0+dev"


def health():
    """Health check endpoint."""
    return {"schemaVersion": SCHEMA, "ok": True, "sources": ["jikan"]}


def about(jikan: Optional[JikanClient] = None):
    """About information for the service."""
    jikan = jikan or client()
    return {
        "schemaVersion": SCHEMA,
        "name": "jikan-wrapper",
        "version": __VERSION__,
        "endpoints": {"jikan": jikan.base_url},
        "statusThreshold": jikan.status_threshold,
        "limits": {"timeoutSec": jikan.timeout},
    }


def register_tools(mcp, jikan: JikanClient):
    """Register meta tools with FastMCP."""
    def jikan_about():
        """Versión, endpoint y límites configurados."""
        return about(jikan)

    mcp.tool()(health)
    mcp.tool()(jikan_about)
