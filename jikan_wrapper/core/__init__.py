"""Core functionality for jikan-wrapper."""

from .base import JikanClient, client, DEFAULT_BASE_URL, STATUS_THRESHOLD, LEGACY_STATUS_THRESHOLD
from .exceptions import JikanError, TransportError
from .http_client import perform_get, err_payload
from .check_response import check_response, is_success
from .normalizers import simplify
from . import url

__all__ = [
    "JikanClient", "client", "DEFAULT_BASE_URL", "STATUS_THRESHOLD", "LEGACY_STATUS_THRESHOLD",
    "JikanError", "TransportError",
    "perform_get", "err_payload",
    "check_response", "is_success",
    "simplify", "url",
]
