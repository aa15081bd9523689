"""tests/unit/test_exceptions.py"""

import pytest

from httpurl.exceptions import (
    BuildError,
    HttpURLError,
    InvalidLiteralError,
    InvalidScheme,
    MissingHost,
    MissingTemplateValue,
    ParseError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of httpurl exceptions."""
    assert issubclass(ParseError, HttpURLError)
    assert issubclass(ParseError, ValueError)
    assert issubclass(BuildError, HttpURLError)
    assert issubclass(InvalidScheme, BuildError)
    assert issubclass(MissingHost, BuildError)
    assert issubclass(MissingTemplateValue, HttpURLError)
    assert issubclass(MissingTemplateValue, LookupError)


def test_invalid_literal_is_not_recoverable_error():
    """InvalidLiteralError must not be caught by HttpURLError handlers."""
    assert issubclass(InvalidLiteralError, RuntimeError)
    assert not issubclass(InvalidLiteralError, HttpURLError)


def test_invalid_scheme_names_scheme():
    """Verify that InvalidScheme carries and reports the offending scheme."""
    with pytest.raises(InvalidScheme) as exc_info:
        raise InvalidScheme("foobar")
    assert exc_info.value.scheme == "foobar"
    assert "foobar" in str(exc_info.value)


def test_missing_host_default_message():
    """Verify that MissingHost has a default message."""
    with pytest.raises(MissingHost) as exc_info:
        raise MissingHost()
    assert "URL has no host" in str(exc_info.value)


def test_missing_template_value_names_placeholder():
    """Verify that MissingTemplateValue names the unresolved placeholder."""
    with pytest.raises(MissingTemplateValue) as exc_info:
        raise MissingTemplateValue("b")
    assert exc_info.value.name == "b"
    assert str(exc_info.value) == "failed to find b"


@pytest.mark.parametrize(
    "exception_class",
    [HttpURLError, ParseError, BuildError, InvalidLiteralError],
)
def test_generic_exceptions_accept_message(exception_class):
    """Verify that generic exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)
