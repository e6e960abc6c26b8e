"""HTTP transport for jikan-wrapper."""

import logging
import requests
from typing import Dict, Any, Optional

from .base import DEFAULT_TIMEOUT, MAX_REDIRECTS, SCHEMA, UA
from .exceptions import TransportError
from ..models.types import Envelope

logger = logging.getLogger(__name__)


def _decode(r: requests.Response) -> Any:
    """JSON-decode the body when the server says it is JSON, else keep the text."""
    text = r.text
    if "json" not in r.headers.get("Content-Type", "").lower():
        return text
    try:
        return r.json()
    except ValueError:
        # left for the fallback decode in check_response
        return text


def perform_get(url: str, timeout: float = DEFAULT_TIMEOUT, headers: Optional[Dict[str, str]] = None,
                user_agent: str = UA, **kw) -> Envelope:
    """GET `url`, following up to MAX_REDIRECTS redirects.

    Returns the response envelope for any HTTP status. Raises `TransportError`
    when no response was received at all.
    """
    headers = {"User-Agent": user_agent, **(headers or {})}
    logger.debug("GET %s", url)
    try:
        with requests.Session() as s:
            s.max_redirects = MAX_REDIRECTS
            r = s.get(url, timeout=timeout, headers=headers, allow_redirects=True, **kw)
            envelope: Envelope = {
                "status": r.status_code,
                "headers": list(r.headers.items()),
                "url": r.url,
                "body": _decode(r),
            }
    except requests.RequestException as e:
        logger.warning("GET %s failed: %s", url, e)
        raise TransportError(url, str(e)) from e
    return envelope


def err_payload(source: str, code: str, message: str) -> Dict[str, Any]:
    return {"schemaVersion": SCHEMA, "error": {"code": code, "message": message, "source": source}}
