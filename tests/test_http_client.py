import pytest

from jikan_wrapper.core import http_client as hc
from jikan_wrapper.core.exceptions import TransportError

from .conftest import DummyResponse


def test_perform_get_success(fake_http):
    fake_http.replies.append(DummyResponse(200, {"title": "Cowboy Bebop"}))

    env = hc.perform_get("https://api.jikan.moe/v3/anime/1")
    assert env["status"] == 200
    assert env["url"] == "https://api.jikan.moe/v3/anime/1"
    assert env["body"] == {"title": "Cowboy Bebop"}
    assert ("Content-Type", "application/json") in env["headers"]
    assert len(fake_http.calls) == 1, "No debe reintentar"


def test_perform_get_sets_user_agent_timeout_and_redirect_cap(fake_http):
    fake_http.replies.append(DummyResponse(200, {}))

    hc.perform_get("https://example.com", timeout=3, headers={"If-None-Match": "abc"})
    call = fake_http.calls[0]
    assert call["timeout"] == 3
    assert call["allow_redirects"] is True
    assert call["max_redirects"] == hc.MAX_REDIRECTS == 3
    assert call["headers"] == {"User-Agent": hc.UA, "If-None-Match": "abc"}


def test_perform_get_keeps_error_statuses(fake_http):
    fake_http.replies.append(DummyResponse(503, {"message": "down"}))

    env = hc.perform_get("https://example.com")
    assert env["status"] == 503
    assert len(fake_http.calls) == 1


def test_non_json_content_type_left_as_text(fake_http):
    fake_http.replies.append(DummyResponse(200, text='{"a": 1}', headers={"Content-Type": "text/html"}))

    env = hc.perform_get("https://example.com")
    assert env["body"] == '{"a": 1}'


def test_broken_json_left_as_text(fake_http):
    fake_http.replies.append(DummyResponse(200, text="<html>", headers={"Content-Type": "application/json"}))

    env = hc.perform_get("https://example.com")
    assert env["body"] == "<html>"


def test_request_exception_raises_transport_error(fake_http):
    fake_http.replies.append(hc.requests.ConnectionError("network down"))

    with pytest.raises(TransportError) as exc:
        hc.perform_get("https://down.example")
    assert exc.value.url == "https://down.example"
    assert isinstance(exc.value.__cause__, hc.requests.ConnectionError)
    assert len(fake_http.calls) == 1, "No debe reintentar"


def test_err_payload():
    assert hc.err_payload("jikan", "TIMEOUT", "slow") == {
        "schemaVersion": "1.0.0",
        "error": {"code": "TIMEOUT", "message": "slow", "source": "jikan"},
    }
