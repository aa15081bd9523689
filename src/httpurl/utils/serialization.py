"""utils/serialization.py

Stringification of query and template values for httpurl.
"""

from typing import Any


def to_text(value: Any) -> str:
    """
    Render a value the way it should appear in a URL.

    Args:
        value: Any value convertible to a string.

    Returns:
        ``str`` values unchanged, ``bytes`` decoded as UTF-8 (invalid bytes
        replaced with U+FFFD), booleans as
        ``true``/``false``, ``None`` as the empty string, and ``str(value)``
        for everything else.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)
