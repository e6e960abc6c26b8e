"""Classifies transport results before their body is trusted."""

import json
import logging
from typing import Optional, Tuple

from .base import STATUS_THRESHOLD
from ..models.types import Envelope

logger = logging.getLogger(__name__)

HTTP_FAILURE = "http"
DECODE_FAILURE = "decode"
DECODE_ERROR_MESSAGE = "Response body is not valid JSON"


def is_success(envelope: Optional[Envelope], threshold: int = STATUS_THRESHOLD) -> bool:
    return bool(envelope) and envelope.get("status") is not None and envelope["status"] < threshold


def decode_body(envelope: Envelope) -> Envelope:
    """Parse a body the transport left as text. Raises ValueError if it isn't JSON."""
    body = envelope.get("body")
    if not isinstance(body, str):
        return envelope
    decoded = json.loads(body) if body.strip() else None
    return {**envelope, "body": decoded}


def check_response(envelope: Optional[Envelope],
                   threshold: int = STATUS_THRESHOLD) -> Tuple[Optional[str], Optional[Envelope]]:
    """Return `(reason, envelope)`; reason is None on success, else "http" or "decode"."""
    if not is_success(envelope, threshold):
        logger.debug("HTTP failure: status=%s", (envelope or {}).get("status"))
        return HTTP_FAILURE, envelope
    try:
        return None, decode_body(envelope)
    except ValueError as e:
        logger.warning("could not decode body from %s: %s", envelope.get("url"), e)
        return DECODE_FAILURE, {**envelope, "body": {"error": DECODE_ERROR_MESSAGE}}
