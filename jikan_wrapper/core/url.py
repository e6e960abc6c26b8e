"""URL building for Jikan endpoints.

URLs here are relative to the client's base URL, shouldn't start with a slash
and usually end with one. The trailing slash is dropped when the first query
parameter is added, or by `trim` before the request is sent.
"""

from typing import Any, Iterable, Mapping, Optional, Union
from urllib.parse import quote

PathSegment = Union[str, int]

# reserved + unreserved URI characters are left alone; a literal "%" is
# encoded as %25 since builder text is never pre-encoded
_SAFE = "/?&=:;,+$@!*'()#[]~"


def render_segment(segment: PathSegment) -> str:
    if isinstance(segment, bool) or not isinstance(segment, (str, int)):
        raise TypeError(f"path segment must be str or int, got {type(segment).__name__}")
    text = str(segment)
    if not text:
        raise ValueError("path segment must not be empty")
    return text


def append_segment(url: str, segment: PathSegment) -> str:
    """Add one path segment and a trailing slash.

    >>> append_segment("anime/5/", "videos")
    'anime/5/videos/'
    """
    return url + render_segment(segment) + "/"


def append_segments(url: str, segments: Iterable[PathSegment]) -> str:
    """Add several segments joined by '/', plus one trailing slash.

    >>> append_segments("anime/", [1, "characters_staff"])
    'anime/1/characters_staff/'
    """
    return url + "/".join(render_segment(s) for s in segments) + "/"


def trim(url: str) -> str:
    """Remove trailing slashes.

    >>> trim("username/animelist/2//")
    'username/animelist/2'
    """
    return url.rstrip("/")


def append_param(url: str, key: Any, value: Any) -> str:
    """Add a `key=value&` pair, inserting '?' for the first parameter.

    >>> append_param("animelist/all/2/", "year", 2019)
    'animelist/all/2?year=2019&'
    """
    if not url.endswith("&"):
        url = trim(url) + "?"
    return f"{url}{key}={value}&"


def append_params(url: str, params: Optional[Mapping[Any, Any]]) -> str:
    """Add every entry of `params`, in the mapping's iteration order."""
    for key, value in (params or {}).items():
        url = append_param(url, key, value)
    return url


def build(segments: Iterable[PathSegment], params: Optional[Mapping[Any, Any]] = None) -> str:
    """Build a relative URL from path segments and GET parameters.

    >>> build(["user", "nekomata1037", "animelist", "completed", 2], {"year": 2019})
    'user/nekomata1037/animelist/completed/2?year=2019&'
    """
    return append_params(append_segments("", segments), params)


def build_url(resource: str, segments: Iterable[PathSegment],
              params: Optional[Mapping[Any, Any]] = None) -> str:
    """Same as `build`, with the resource name as the first segment."""
    return build([resource, *segments], params)


def encode(url: str) -> str:
    """Percent-encode an assembled path+query string, once."""
    return quote(url, safe=_SAFE)
