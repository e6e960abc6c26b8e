"""Type definitions for jikan-wrapper."""

from typing import Any, Dict, List, NamedTuple, Optional, Tuple, TypedDict

from ..core.exceptions import JikanError


class Envelope(TypedDict):
    status: int
    headers: List[Tuple[str, str]]
    url: str
    body: Any                      # raw text, decoded JSON, or None


class Result(NamedTuple):
    ok: bool
    response: Dict[str, Any]       # normalized map, same shape on success and failure
    reason: Optional[str] = None   # None | "http" | "decode"

    def unwrap(self) -> Dict[str, Any]:
        """Return the response, raising `JikanError` if the request failed."""
        if not self.ok:
            raise JikanError(self.response)
        return self.response


def unwrap(result: Result) -> Dict[str, Any]:
    return result.unwrap()
