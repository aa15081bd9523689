"""src/httpurl/exceptions.py

httpurl Exceptions hierarchy.
"""

from typing import Optional


class HttpURLError(Exception):
    """Base exception for all recoverable httpurl errors."""


class ParseError(HttpURLError, ValueError):
    """The input string is not a valid absolute URI."""


class BuildError(HttpURLError):
    """
    Base exception for finalization errors.
    Raised by URLBuilder.build() when the accumulated state is not a valid URL.
    """


class InvalidScheme(BuildError):
    """Scheme is not one of the supported HTTP schemes."""

    def __init__(self, scheme: str, message: Optional[str] = None):
        self.scheme = scheme
        super().__init__(message or f"invalid scheme {scheme!r}")


class MissingHost(BuildError):
    """URL has an empty hostname."""

    def __init__(self, message: str = "URL has no host"):
        super().__init__(message)


class MissingTemplateValue(HttpURLError, LookupError):
    """A {name} placeholder has no value in the template map."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"failed to find {name}")


class InvalidLiteralError(RuntimeError):
    """
    A trusted URL literal failed to parse.

    This is a programmer error and intentionally sits outside the
    HttpURLError hierarchy.
    """
