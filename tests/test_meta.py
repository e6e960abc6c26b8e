from jikan_wrapper.core.base import client
from jikan_wrapper.tools import meta


def test_health_ok():
    h = meta.health()
    assert isinstance(h, dict)
    assert h.get("schemaVersion") == "1.0.0"
    assert h.get("ok") is True
    assert set(h.get("sources", [])) >= {"jikan"}


def test_about_reports_client_settings():
    a = meta.about(client("http://localhost:8000/v3/", status_threshold=400))
    assert a["endpoints"]["jikan"] == "http://localhost:8000/v3/"
    assert a["statusThreshold"] == 400
    assert meta.about()["endpoints"]["jikan"] == "https://api.jikan.moe/v3/"
