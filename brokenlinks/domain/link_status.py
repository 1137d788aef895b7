from typing import NamedTuple, Optional


class LinkStatus(NamedTuple):
    """Liveness verdict for a single absolute URL."""
    is_valid: bool
    status: int
    """HTTP status code, or 0 when no response was received"""

    error: Optional[str] = None
    """Transport error message when status is 0"""
