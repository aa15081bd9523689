"""utils/validators.py

Validation utilities for httpurl.
"""

from typing import Optional

ALLOWED_SCHEMES = ("http", "https")
DEFAULT_PATH = "/"


def is_http_scheme(scheme: Optional[str]) -> bool:
    """Exact, case-sensitive check against the supported schemes."""
    return scheme in ALLOWED_SCHEMES


def has_hostname(hostname: Optional[str]) -> bool:
    """Check that a hostname is present and non-empty."""
    return bool(hostname)
