# SPDX-License-Identifier: MIT
"""
jikan-wrapper MCP server entrypoint.

Wires FastMCP with the tool modules under jikan_wrapper/tools/. This is the
only place the environment is read: JIKAN_BASE_URL overrides the public
api.jikan.moe endpoint.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .core.base import JikanClient, client
from .tools import lookup, listing, meta


def create_app(jikan: Optional[JikanClient] = None) -> FastMCP:
    if jikan is None:
        jikan = client(os.environ.get("JIKAN_BASE_URL"))

    mcp = FastMCP("jikan-wrapper")

    # Register tools from each module
    lookup.register_tools(mcp, jikan)
    listing.register_tools(mcp, jikan)
    meta.register_tools(mcp, jikan)

    return mcp


if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    app = create_app()
    app.run()
