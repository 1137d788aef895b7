from typing import NamedTuple, Optional


class HttpResponse(NamedTuple):
    """Response from an HTTP request (HEAD responses carry an empty body)."""
    status_code: int
    text: str
    content_type: Optional[str] = None
