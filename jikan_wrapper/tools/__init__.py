"""MCP tools for jikan-wrapper."""

from . import lookup
from . import listing
from . import meta

__all__ = [
    "lookup",
    "listing",
    "meta",
]
