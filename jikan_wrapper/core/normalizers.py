"""Flattens response envelopes into the map every caller gets back."""

from typing import Any, Dict, Mapping, Optional

KEEP_HTTP_VALUES = ("headers", "status", "url", "body")


def simplify(envelope: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Prefix headers/status/url with `http_` and lift the body's fields to the top level.

    Reserved `http_*` keys win over body fields with the same name. A missing
    envelope (no response at all) gives an empty map.
    """
    envelope = envelope or {}
    resp = {f"http_{k}": envelope[k] for k in KEEP_HTTP_VALUES if k in envelope}
    body = resp.pop("http_body", None)
    if not isinstance(body, Mapping):
        body = {}
    return {**body, **resp}
