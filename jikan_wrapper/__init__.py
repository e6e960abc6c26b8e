"""jikan-wrapper package.

A thin wrapper for the Jikan API. Create a client and pass it to the
functions in `jikan_wrapper.request`:

    from jikan_wrapper import client, request
    jikan = client()
    response = request.anime(jikan, 1).unwrap()
    print(response["title"])  # Cowboy Bebop

Also exports the FastMCP app factory `create_app`.
"""
from .core import JikanClient, JikanError, TransportError, client
from .models import Result, unwrap
from . import request
from .server import create_app

__all__ = [
    "JikanClient", "JikanError", "TransportError", "client",
    "Result", "unwrap", "request", "create_app",
]
