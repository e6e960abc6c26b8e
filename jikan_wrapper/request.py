"""Wrapper functions for the Jikan endpoints.

Each resource function takes the client, zero or more identifying arguments,
a list of extra URL parts, a dict of GET parameters, and transport options
(`headers`, `timeout`, or anything `requests` accepts). It returns a `Result`;
call `.unwrap()` to get the response map directly and raise `JikanError` on
unsuccessful status codes. Connection failures raise `TransportError` either way.

    jikan = client()
    user(jikan, "nekomata1037", ["animelist", "completed", 2], {"year": 2019}).unwrap()
    # same as
    request_or_raise("user/nekomata1037/animelist/completed/2?year=2019&", jikan)

The response map holds every key Jikan returned plus `http_headers`,
`http_url` and `http_status`.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from .core import url as urls
from .core.base import JikanClient
from .core.check_response import check_response
from .core.http_client import perform_get
from .core.normalizers import simplify
from .models.types import Result

logger = logging.getLogger(__name__)

Paths = Optional[List[urls.PathSegment]]
Params = Optional[Mapping[str, Any]]


def request(url: str, client: JikanClient, **opts) -> Result:
    """Base request, every wrapper ends up here. `url` is relative to the client's base url."""
    full_url = client.base_url + urls.encode(urls.trim(url))
    opts.setdefault("timeout", client.timeout)
    opts.setdefault("user_agent", client.user_agent)
    envelope = perform_get(full_url, **opts)
    reason, envelope = check_response(envelope, client.status_threshold)
    response = simplify(envelope)
    if reason is not None:
        logger.debug("%s failed (%s): status=%s", full_url, reason, response.get("http_status"))
        return Result(False, response, reason)
    return Result(True, response)


def request_or_raise(url: str, client: JikanClient, **opts) -> Dict[str, Any]:
    """Same as `request`, but returns the response map and raises `JikanError` on errors."""
    return request(url, client, **opts).unwrap()


def _get(client: JikanClient, resource: str, paths: Paths, params: Params, opts) -> Result:
    return request(urls.build_url(resource, paths or [], params), client, **opts)


def anime(client: JikanClient, id: int, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/anime/{id}, e.g. paths=["characters_staff"] or ["episodes", 2]."""
    return _get(client, "anime", [id, *(paths or [])], params, opts)


def manga(client: JikanClient, id: int, paths: Paths = None, params: Params = None, **opts) -> Result:
    return _get(client, "manga", [id, *(paths or [])], params, opts)


def person(client: JikanClient, id: int, paths: Paths = None, params: Params = None, **opts) -> Result:
    return _get(client, "person", [id, *(paths or [])], params, opts)


def character(client: JikanClient, id: int, paths: Paths = None, params: Params = None, **opts) -> Result:
    return _get(client, "character", [id, *(paths or [])], params, opts)


def producer(client: JikanClient, id: int, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/producer/{id}/{page}"""
    return _get(client, "producer", [id, *(paths or [])], params, opts)


def magazine(client: JikanClient, id: int, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/magazine/{id}/{page}"""
    return _get(client, "magazine", [id, *(paths or [])], params, opts)


def club(client: JikanClient, id: int, paths: Paths = None, params: Params = None, **opts) -> Result:
    return _get(client, "club", [id, *(paths or [])], params, opts)


def season(client: JikanClient, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/season, the current season when no paths are given, e.g. [2019, "winter"] or ["later"]."""
    return _get(client, "season", paths, params, opts)


def schedule(client: JikanClient, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/schedule, optionally filtered by day: ["monday"]."""
    return _get(client, "schedule", paths, params, opts)


def top(client: JikanClient, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/top/{type}/{page}/{subtype}"""
    return _get(client, "top", paths, params, opts)


def genre(client: JikanClient, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/genre/{type}/{genre_id}/{page}"""
    return _get(client, "genre", paths, params, opts)


def meta(client: JikanClient, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/meta/{request}/{type}/{period}"""
    return _get(client, "meta", paths, params, opts)


def search(client: JikanClient, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/search/{type}?q=...; the query and filters go in `params`."""
    return _get(client, "search", paths, params, opts)


def user(client: JikanClient, username: str, paths: Paths = None, params: Params = None, **opts) -> Result:
    """/user/{username}/{request}, e.g. paths=["animelist", "all", 2]."""
    return _get(client, "user", [username, *(paths or [])], params, opts)
