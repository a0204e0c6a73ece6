"""
Shared HTTP client.

Provides a pre-configured ``requests.Session`` with a project User-Agent and
a default timeout.  Forecast fetches are single-attempt: the mounted adapter
never retries, and non-2xx responses are handed back to the caller instead
of raising, so the caller decides what a failure means.

Usage::

    from jma_weather_gen.services.http import session

    resp = session.get("https://www.jma.go.jp/bosai/forecast/data/forecast/130000.json")
    if resp.status_code == 200:
        ...
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from jma_weather_gen import __version__

#: Single attempt, no retry on connect/read errors or status codes.
DEFAULT_RETRY = Retry(
    total=0,
    raise_on_status=False,  # caller inspects resp.status_code
)

DEFAULT_TIMEOUT = 30  # seconds

USER_AGENT = f"jma-weather-gen/{__version__}"


def create_session(timeout: float = DEFAULT_TIMEOUT) -> requests.Session:
    """
    Build a ``requests.Session`` with the single-attempt adapter mounted.

    Args:
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so callers don't need to pass ``timeout=``.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()
