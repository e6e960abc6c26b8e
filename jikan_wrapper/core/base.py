"""Client configuration for the Jikan API."""

from dataclasses import dataclass
from typing import Optional

# Constants
DEFAULT_BASE_URL = "https://api.jikan.moe/v3/"
DEFAULT_TIMEOUT = 15
MAX_REDIRECTS = 3
UA = "jikan-wrapper/0.1"
SCHEMA = "1.0.0"

# Responses with a status below the threshold are successful. Older releases
# of the wrapper accepted anything below 400, including 3xx responses that
# were not followed (e.g. 304 Not Modified).
STATUS_THRESHOLD = 300
LEGACY_STATUS_THRESHOLD = 400


@dataclass(frozen=True)
class JikanClient:
    """Immutable request settings, passed to every function in `jikan_wrapper.request`."""

    base_url: str = DEFAULT_BASE_URL
    status_threshold: int = STATUS_THRESHOLD
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = UA

    def __post_init__(self):
        if not self.base_url.endswith("/"):
            object.__setattr__(self, "base_url", self.base_url + "/")


def client(base_url: Optional[str] = None, **kw) -> JikanClient:
    """Create a client, using the public api.jikan.moe endpoint when no base url is passed.

    >>> client().base_url
    'https://api.jikan.moe/v3/'
    >>> client("http://localhost:8000/v3").base_url
    'http://localhost:8000/v3/'
    """
    return JikanClient(base_url=base_url or DEFAULT_BASE_URL, **kw)
