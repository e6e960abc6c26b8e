import json
import types

import pytest

from jikan_wrapper.core import http_client as hc


class DummyResponse:
    def __init__(self, status_code=200, json_data=None, text=None, headers=None, url=None):
        self.status_code = status_code
        self._json = json_data
        if text is None:
            text = json.dumps(json_data) if json_data is not None else ""
        self.text = text
        if headers is None:
            ctype = "application/json" if json_data is not None else "text/plain"
            headers = {"Content-Type": ctype}
        self.headers = headers
        self.url = url

    def json(self):
        return json.loads(self.text)


class DummySession:
    """Stands in for requests.Session; replies with queued responses or raises queued errors."""

    def __init__(self, replies, calls):
        self._replies = replies
        self.calls = calls
        self.max_redirects = 30

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def get(self, url, **kw):
        self.calls.append({"url": url, "max_redirects": self.max_redirects, **kw})
        reply = self._replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        if reply.url is None:
            reply.url = url
        return reply


@pytest.fixture
def fake_http(monkeypatch):
    """Queue replies in `fake_http.replies`; requests made are recorded in `fake_http.calls`."""
    fake = types.SimpleNamespace(replies=[], calls=[])
    monkeypatch.setattr(hc.requests, "Session", lambda: DummySession(fake.replies, fake.calls))
    return fake
