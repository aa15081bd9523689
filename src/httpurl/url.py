"""src/httpurl/url.py

Mutable URL value and parser for httpurl.
"""

import logging
import urllib.parse
from typing import List, Optional, Tuple

from httpurl.exceptions import InvalidLiteralError, ParseError
from httpurl.query import QueryParams

__all__ = ["URL", "parse", "must_parse", "clone", "split_path", "join_path"]

logger = logging.getLogger(__name__)


class URL:
    """
    Absolute URL split into mutable string fields.

    ``path`` and ``query`` hold the escaped form, exactly as serialized.
    ``userinfo`` and ``fragment`` are passed through untouched.

    Attributes:
        scheme: URL scheme, e.g. ``https``.
        userinfo: ``user[:password]`` part of the authority, may be empty.
        host: Host, optionally with ``:port``.
        path: Escaped path, absolute when non-empty.
        query: Encoded query string without the leading ``?``.
        fragment: Fragment without the leading ``#``.
    """

    __slots__ = ("scheme", "userinfo", "host", "path", "query", "fragment")

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        scheme: str = "",
        host: str = "",
        path: str = "",
        query: str = "",
        fragment: str = "",
        *,
        userinfo: str = "",
    ) -> None:
        self.scheme = scheme
        self.userinfo = userinfo
        self.host = host
        self.path = path
        self.query = query
        self.fragment = fragment

    @property
    def hostname(self) -> str:
        """Host without port or IPv6 brackets. Case is preserved."""
        return _split_host_port(self.host)[0]

    @property
    def port(self) -> Optional[int]:
        """Explicit port, or None when the host carries none."""
        port = _split_host_port(self.host)[1]
        return int(port) if port else None

    @property
    def netloc(self) -> str:
        if self.userinfo:
            return f"{self.userinfo}@{self.host}"
        return self.host

    @property
    def segments(self) -> List[str]:
        """
        Decoded path segments.

        Neither the leading nor a trailing separator counts as a segment, so
        indices match remove_path_segment().
        """
        segments, _ = split_path(self.path)
        return [urllib.parse.unquote(s) for s in segments]

    @property
    def query_params(self) -> QueryParams:
        """Decoded copy of the query string."""
        return QueryParams.parse(self.query)

    def copy(self) -> "URL":
        """Return an independent copy of this URL."""
        return URL(
            self.scheme,
            self.host,
            self.path,
            self.query,
            self.fragment,
            userinfo=self.userinfo,
        )

    def __str__(self) -> str:
        return urllib.parse.urlunsplit(
            (self.scheme, self.netloc, self.path, self.query, self.fragment)
        )

    def __repr__(self) -> str:
        return f"URL({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, URL):
            return str(self) == str(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


def _split_host_port(host: str) -> Tuple[str, str]:
    colon = host.rfind(":")
    port = ""
    if colon != -1 and _is_optional_port(host[colon:]):
        host, port = host[:colon], host[colon + 1 :]
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    return host, port


def _is_optional_port(port: str) -> bool:
    # ":" alone is a valid (empty) port
    return port.startswith(":") and (port == ":" or port[1:].isdigit())


def split_path(path: str) -> Tuple[List[str], bool]:
    """
    Split an escaped path into raw segments.

    Returns:
        Tuple of the segments after the leading separator and a flag telling
        whether the path ends with a trailing separator. ``""`` and ``"/"``
        both have no segments.
    """
    if path in ("", "/"):
        return [], False
    body = path[1:] if path.startswith("/") else path
    trailing = body.endswith("/")
    if trailing:
        body = body[:-1]
    return body.split("/"), trailing


def join_path(segments: List[str], trailing: bool = False) -> str:
    """Inverse of split_path(). An empty segment list yields ``"/"``."""
    if not segments:
        return "/"
    return "/" + "/".join(segments) + ("/" if trailing else "")


def parse(raw: str) -> URL:
    """
    Parse an absolute URI from untrusted input.

    Args:
        raw: String such as ``https://user@example.com:8443/a/b?x=1#top``.

    Returns:
        New URL value.

    Raises:
        ParseError: If the string is not a valid absolute URI.
    """
    if not isinstance(raw, str):
        raise ParseError(f"expected str, got {type(raw).__name__}")
    for char in raw:
        if char <= " " or char == "\x7f":
            raise ParseError(f"invalid character {char!r} in URL {raw!r}")

    try:
        parts = urllib.parse.urlsplit(raw)
        # port is validated lazily by urllib
        _ = parts.port
    except ValueError as e:
        logger.debug("Rejected URL %r: %s", raw, e)
        raise ParseError(f"invalid URL {raw!r}: {e}") from e

    if not parts.scheme:
        raise ParseError(f"missing scheme in URL {raw!r}")
    if not raw[len(parts.scheme) + 1 :].startswith("//"):
        raise ParseError(f"URL {raw!r} is not absolute")

    userinfo, _, host = parts.netloc.rpartition("@")
    return URL(
        parts.scheme,
        host,
        parts.path,
        parts.query,
        parts.fragment,
        userinfo=userinfo,
    )


def must_parse(raw: str) -> URL:
    """
    Parse a trusted URL literal.

    Meant for constants known to be valid. A failure is a programmer error
    and is raised as InvalidLiteralError instead of ParseError.
    """
    try:
        return parse(raw)
    except ParseError as e:
        raise InvalidLiteralError(f"invalid URL literal {raw!r}: {e}") from e


def clone(url: URL) -> URL:
    """Return an independent copy of ``url``."""
    return url.copy()
