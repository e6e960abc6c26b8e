"""Lookup tools for single Jikan entries (anime, manga, people, users...)."""

from typing import Any, Dict, List, Optional, Union

from .. import request as jr
from ..core.base import JikanClient
from ..core.http_client import err_payload
from ..utils.helpers import run_tool

RESOURCES = {
    "anime": jr.anime,
    "manga": jr.manga,
    "person": jr.person,
    "character": jr.character,
    "producer": jr.producer,
    "magazine": jr.magazine,
    "club": jr.club,
}


def resource(jikan: JikanClient, kind: str, id: int, paths: Optional[List[Union[str, int]]] = None,
             params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Fetch /{kind}/{id}/{paths...}. kind: anime, manga, person, character, producer, magazine, club."""
    fn = RESOURCES.get(kind.lower())
    if fn is None:
        return err_payload("jikan", "BAD_REQUEST", f"Unknown resource '{kind}', expected one of {sorted(RESOURCES)}")
    return run_tool(lambda: fn(jikan, id, paths, params))


def user(jikan: JikanClient, username: str, paths: Optional[List[Union[str, int]]] = None,
         params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Fetch /user/{username}/{paths...}, e.g. paths=["animelist", "completed"]."""
    return run_tool(lambda: jr.user(jikan, username, paths, params))


def register_tools(mcp, jikan: JikanClient):
    def jikan_resource(kind: str, id: int, paths: Optional[List[Union[str, int]]] = None,
                       params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Entrada de Jikan por id. kind: anime, manga, person, character, producer, magazine, club."""
        return resource(jikan, kind, id, paths, params)

    def jikan_user(username: str, paths: Optional[List[Union[str, int]]] = None,
                   params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Perfil o listas de un usuario de MAL (profile, animelist, mangalist, friends...)."""
        return user(jikan, username, paths, params)

    mcp.tool()(jikan_resource)
    mcp.tool()(jikan_user)
