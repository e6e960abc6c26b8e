import pytest

from jikan_wrapper import client, request
from jikan_wrapper.core.exceptions import JikanError


@pytest.mark.integration
def test_jikan_anime_smoke():
    response = request.anime(client(), 1).unwrap()
    assert response["http_status"] == 200
    assert response["title"] == "Cowboy Bebop"


@pytest.mark.integration
def test_jikan_bad_request_raises():
    with pytest.raises(JikanError):
        request.request_or_raise("something", client())
