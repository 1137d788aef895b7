import requests
from typing import Optional

from brokenlinks.domain.http_response import HttpResponse
from brokenlinks.exceptions import HttpFetchError


class HttpService:
    """
    HTTP client wrapper used for both page fetches and link probes.

    Accepts a `requests.Session` (or anything with the same `request` method)
    so tests can inject a fake without patching. The redirect limit is applied
    through the session's `max_redirects`; exceeding it surfaces as an
    HttpFetchError like any other transport failure.
    """

    def __init__(self, user_agent: str, session=None, timeout: float = 10, max_redirects: int = 5):
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()
        self.session.max_redirects = int(max_redirects)

    def _request(self, method: str, url: str, timeout: Optional[float], stream: bool):
        headers = {"User-Agent": self.user_agent}
        try:
            return self.session.request(
                method,
                url,
                headers=headers,
                timeout=timeout if timeout is not None else self.timeout,
                allow_redirects=True,
                stream=stream,
            )
        except requests.exceptions.RequestException as e:
            raise HttpFetchError(url, e) from e

    def fetch(self, url: str, timeout: Optional[float] = None) -> HttpResponse:
        """GET `url` and return status code, body text, and Content-Type."""
        resp = self._request("GET", url, timeout, stream=False)
        ct = None
        if hasattr(resp, "headers"):
            ct = resp.headers.get("Content-Type")
        return HttpResponse(resp.status_code, resp.text, ct)

    def probe(self, url: str, method: str = "HEAD", timeout: Optional[float] = None) -> HttpResponse:
        """Issue `method` against `url` and return only the status; the body is never read."""
        resp = self._request(method, url, timeout, stream=True)
        try:
            ct = resp.headers.get("Content-Type") if hasattr(resp, "headers") else None
            return HttpResponse(resp.status_code, "", ct)
        finally:
            close = getattr(resp, "close", None)
            if close is not None:
                close()
