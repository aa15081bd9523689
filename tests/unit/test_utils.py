"""tests/unit/test_utils.py"""

import pytest

from httpurl.utils.serialization import to_text
from httpurl.utils.validators import ALLOWED_SCHEMES, has_hostname, is_http_scheme


@pytest.mark.parametrize(
    "value, expected",
    [
        ("abc", "abc"),
        (123, "123"),
        (1.5, "1.5"),
        (True, "true"),
        (False, "false"),
        (None, ""),
        (b"caf\xc3\xa9", "café"),
        (b"\xff", "\ufffd"),
        (bytearray(b"ok"), "ok"),
    ],
)
def test_to_text(value, expected):
    """Test stringification of query and template values."""
    assert to_text(value) == expected


@pytest.mark.parametrize(
    "scheme, expected",
    [
        ("http", True),
        ("https", True),
        ("HTTP", False),
        ("ftp", False),
        ("foobar", False),
        ("", False),
        (None, False),
    ],
)
def test_is_http_scheme(scheme, expected):
    """Test the exact scheme check."""
    assert is_http_scheme(scheme) is expected


def test_allowed_schemes():
    """Only plain HTTP and HTTPS are supported."""
    assert set(ALLOWED_SCHEMES) == {"http", "https"}


@pytest.mark.parametrize(
    "hostname, expected",
    [("example.com", True), ("::1", True), ("", False), (None, False)],
)
def test_has_hostname(hostname, expected):
    """Test hostname presence check."""
    assert has_hostname(hostname) is expected
