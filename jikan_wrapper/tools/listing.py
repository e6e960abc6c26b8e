"""Search, season, schedule and top tools."""

from typing import Any, Dict, List, Optional, Union

from .. import request as jr
from ..core.base import JikanClient
from ..core.http_client import err_payload
from ..utils.helpers import run_tool


def search(jikan: JikanClient, query: str, kind: str = "anime", limit: int = 5,
           params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Busca ANIME, MANGA, PERSON o CHARACTER por título/nombre."""
    limit = min(max(limit, 1), 50)
    return run_tool(lambda: jr.search(jikan, [kind.lower()], {"q": query, "limit": limit, **(params or {})}))


def season(jikan: JikanClient, year: Optional[int] = None, season_name: Optional[str] = None) -> Dict[str, Any]:
    """Anime of a season; the current one when both year and season_name are omitted."""
    if (year is None) != (season_name is None):
        return err_payload("jikan", "BAD_REQUEST", "Provide both year and season_name, or neither")
    paths: List[Union[str, int]] = [year, season_name.lower()] if year is not None else []
    return run_tool(lambda: jr.season(jikan, paths))


def schedule(jikan: JikanClient, day: Optional[str] = None) -> Dict[str, Any]:
    return run_tool(lambda: jr.schedule(jikan, [day.lower()] if day else []))


def top(jikan: JikanClient, kind: str = "anime", page: int = 1, subtype: Optional[str] = None) -> Dict[str, Any]:
    paths: List[Union[str, int]] = [kind.lower(), page] + ([subtype.lower()] if subtype else [])
    return run_tool(lambda: jr.top(jikan, paths))


def register_tools(mcp, jikan: JikanClient):
    def jikan_search(query: str, kind: str = "anime", limit: int = 5,
                     params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Búsqueda por título (anime/manga) o nombre (person/character). params: filtros extra de Jikan."""
        return search(jikan, query, kind, limit, params)

    def jikan_season(year: Optional[int] = None, season_name: Optional[str] = None) -> Dict[str, Any]:
        """Anime de una temporada (winter/spring/summer/fall); la actual si no se indica."""
        return season(jikan, year, season_name)

    def jikan_schedule(day: Optional[str] = None) -> Dict[str, Any]:
        """Calendario semanal de emisión, opcionalmente de un día (monday...sunday)."""
        return schedule(jikan, day)

    def jikan_top(kind: str = "anime", page: int = 1, subtype: Optional[str] = None) -> Dict[str, Any]:
        """Ranking de MAL (anime/manga/people/characters), con subtype opcional (airing, upcoming, tv...)."""
        return top(jikan, kind, page, subtype)

    mcp.tool()(jikan_search)
    mcp.tool()(jikan_season)
    mcp.tool()(jikan_schedule)
    mcp.tool()(jikan_top)
