"""Errors raised by jikan-wrapper."""

from typing import Any, Dict

DEFAULT_ERROR = "An Unexpected error occurred"
UNKNOWN_API_ERROR = "Unknown API error"


class JikanError(Exception):
    """Raised when a response is unwrapped after an unsuccessful request.

    `message` is built from the Jikan error response, `response` is the whole
    normalized failure map (including `http_status`, `http_url` and `http_headers`).
    """

    def __init__(self, response: Dict[str, Any]):
        if "http_status" not in response:
            msg = DEFAULT_ERROR
        else:
            msg = response.get("message") or response.get("error") or UNKNOWN_API_ERROR
        status = response.get("http_status")
        self.message = f"HTTP Error {'' if status is None else status}: {msg}"
        self.response = response
        super().__init__(self.message)


class TransportError(Exception):
    """The request could not be completed (DNS, TLS, timeout, too many redirects...)."""

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"{url}: {message}")
