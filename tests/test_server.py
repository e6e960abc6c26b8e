from jikan_wrapper import server
from jikan_wrapper.core.base import DEFAULT_BASE_URL


def test_create_app_reads_base_url_from_env(monkeypatch):
    seen = {}
    real_client = server.client

    def spy(base_url=None, **kw):
        seen["base_url"] = base_url
        return real_client(base_url, **kw)

    monkeypatch.setattr(server, "client", spy)
    monkeypatch.setenv("JIKAN_BASE_URL", "http://localhost:8080/v3/")
    server.create_app()
    assert seen["base_url"] == "http://localhost:8080/v3/"

    monkeypatch.delenv("JIKAN_BASE_URL")
    server.create_app()
    assert seen["base_url"] is None
    assert real_client(seen["base_url"]).base_url == DEFAULT_BASE_URL
