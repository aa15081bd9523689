import pytest

from httpurl import parse


@pytest.fixture
def example_url():
    """Fresh URL with a two-segment path and two query parameters."""
    return parse("http://example.com/foo/bar?a=1&b=2")


@pytest.fixture
def www_url():
    """Fresh URL on a subdomain, used by the domain predicate tests."""
    return parse("http://www.example.com/foo/bar/xyz?b=3")
