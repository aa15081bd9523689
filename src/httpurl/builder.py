"""src/httpurl/builder.py

Chainable URL builder.

The builder accumulates scheme, host, path and query edits without
validating them, and checks the result once in build(). This keeps partially
configured URLs from leaking into use.
"""

import logging
from typing import Any, Mapping

from httpurl import mutators
from httpurl.exceptions import InvalidScheme, MissingHost
from httpurl.query import QueryParams
from httpurl.url import URL, must_parse, parse
from httpurl.utils.validators import DEFAULT_PATH, has_hostname, is_http_scheme

__all__ = ["URLBuilder"]

logger = logging.getLogger(__name__)


class URLBuilder:
    """
    Fluent builder for absolute HTTP(S) URLs.

    Every mutating method returns the builder itself. build() may be called
    any number of times; each call validates the current state and returns a
    new, independent URL.

    Example::

        url = (
            URLBuilder.from_literal("https://api.example.com/v1")
            .add_path_segment("users")
            .add_path_segment(user_id)
            .set_query_param("page", 2)
            .build()
        )
    """

    __slots__ = ("_url", "_query")

    def __init__(self) -> None:
        """Create an empty builder. Scheme and host must be set before build()."""
        self._url = URL()
        self._query = QueryParams()

    @classmethod
    def from_url(cls, url: URL) -> "URLBuilder":
        """Start from a copy of an existing URL value."""
        builder = cls()
        builder._url = url.copy()
        builder._query = url.query_params
        builder._url.query = ""
        return builder

    @classmethod
    def from_string(cls, raw: str) -> "URLBuilder":
        """
        Start from untrusted input.

        Raises:
            ParseError: If ``raw`` is not a valid absolute URI.
        """
        return cls.from_url(parse(raw))

    @classmethod
    def from_literal(cls, raw: str) -> "URLBuilder":
        """
        Start from a trusted constant.

        Raises:
            InvalidLiteralError: If ``raw`` does not parse. This signals a bug
                in the caller, not bad input.
        """
        return cls.from_url(must_parse(raw))

    def scheme(self, scheme: str) -> "URLBuilder":
        """Set the scheme. Checked only by build()."""
        self._url.scheme = scheme
        return self

    def host(self, host: str) -> "URLBuilder":
        """Set the host, optionally with ``:port``."""
        self._url.host = host
        return self

    def userinfo(self, userinfo: str) -> "URLBuilder":
        """Set the ``user[:password]`` part of the authority."""
        self._url.userinfo = userinfo
        return self

    def fragment(self, fragment: str) -> "URLBuilder":
        """Set the fragment, without the leading ``#``."""
        self._url.fragment = fragment
        return self

    def add_path_segment(self, segment: str) -> "URLBuilder":
        """Append an escaped path segment. See mutators.add_path_segment()."""
        mutators.add_path_segment(self._url, segment)
        return self

    def remove_path_segment(self, index: int) -> "URLBuilder":
        """Drop the segment at ``index``; out of range is a no-op."""
        mutators.remove_path_segment(self._url, index)
        return self

    def expand_path(self, values: Mapping[str, Any]) -> "URLBuilder":
        """
        Expand ``{name}`` path placeholders.

        Raises:
            MissingTemplateValue: If a placeholder has no value. The builder
                is left unchanged.
        """
        mutators.expand_path(self._url, values)
        return self

    def add_query_param(self, key: str, value: Any) -> "URLBuilder":
        """Append a value to ``key``, keeping existing values."""
        self._query.add(key, value)
        return self

    def set_query_param(self, key: str, value: Any) -> "URLBuilder":
        """Replace every value of ``key`` with ``value``."""
        self._query.set(key, value)
        return self

    def remove_query_param(self, key: str) -> "URLBuilder":
        """Drop every value of ``key``. Missing keys are ignored."""
        self._query.remove(key)
        return self

    def remove_all_query_params(self) -> "URLBuilder":
        """Drop the whole query."""
        self._query.clear()
        return self

    def build(self) -> URL:
        """
        Validate the accumulated state and return a new URL.

        Returns:
            Independent URL with the query encoded and the path defaulted to
            ``/`` when empty.

        Raises:
            InvalidScheme: If the scheme is not ``http`` or ``https``.
            MissingHost: If the hostname is empty.
        """
        if not is_http_scheme(self._url.scheme):
            raise InvalidScheme(self._url.scheme)
        if not has_hostname(self._url.hostname):
            raise MissingHost()

        url = self._url.copy()
        url.query = self._query.encode()
        if not url.path:
            url.path = DEFAULT_PATH
        logger.debug("Built URL %s", url)
        return url

    def __repr__(self) -> str:
        return f"URLBuilder(url={str(self._url)!r}, query={self._query!r})"
