"""src/httpurl/mutators.py

In-place URL mutation helpers.

Every function here takes a URL value, modifies one aspect of it and returns
None. Use httpurl.url.clone() first when the original must be kept.
"""

import logging
import urllib.parse
from typing import Any, Mapping, Optional

from httpurl.exceptions import MissingTemplateValue
from httpurl.query import QueryParams
from httpurl.url import URL, join_path, split_path
from httpurl.utils.serialization import to_text

__all__ = [
    "add_query_param",
    "set_query_param",
    "remove_query_param",
    "add_path_segment",
    "remove_path_segment",
    "expand_path",
    "escape_segment",
]

logger = logging.getLogger(__name__)


def escape_segment(segment: str) -> str:
    """
    Escape text so it is a single literal path segment.

    ``/`` becomes ``%2F`` and the dot-segments ``.`` and ``..`` have their
    dots escaped, so the result can never act as a separator or a parent
    reference.
    """
    escaped = urllib.parse.quote(segment, safe="")
    if escaped in (".", ".."):
        escaped = escaped.replace(".", "%2E")
    return escaped


def _update_query(url: URL, params: QueryParams) -> None:
    url.query = params.encode()


def add_query_param(url: URL, key: str, value: Any) -> None:
    """Append ``value`` to the values of ``key``, keeping existing values."""
    params = url.query_params
    params.add(key, value)
    _update_query(url, params)


def set_query_param(url: URL, key: str, value: Any) -> None:
    """Replace every value of ``key`` with ``value``."""
    params = url.query_params
    params.set(key, value)
    _update_query(url, params)


def remove_query_param(url: URL, key: str) -> None:
    """Drop every value of ``key``. Missing keys are ignored."""
    params = url.query_params
    if key not in params:
        return
    params.remove(key)
    _update_query(url, params)


def add_path_segment(url: URL, segment: str) -> None:
    """
    Append one path segment.

    Safe to use with externally controlled data: the segment is escaped, so
    ``..`` or ``/`` cannot change the existing path. An empty segment is
    ignored.

    Example:
        ``http://example.com/foo`` + ``"../bar"`` gives
        ``http://example.com/foo/..%2Fbar``.
    """
    if not segment:
        return
    segments, _ = split_path(url.path)
    # a trailing separator is the slot the new segment goes into
    url.path = join_path(segments + [escape_segment(segment)])


def remove_path_segment(url: URL, index: int) -> None:
    """
    Drop the path segment at ``index``, counting from 0.

    E.g. removing index 1 from ``http://example.com/foo/bar/xyz`` results in
    ``http://example.com/foo/xyz``. Out of range indices are a no-op.
    """
    segments, trailing = split_path(url.path)
    if not 0 <= index < len(segments):
        logger.debug("Path segment %d not in %r, nothing removed", index, url.path)
        return
    del segments[index]
    url.path = join_path(segments, trailing)


def _placeholder_name(segment: str) -> Optional[str]:
    # matched on the escaped form; escape_segment() always encodes braces
    if len(segment) >= 2 and segment.startswith("{") and segment.endswith("}"):
        return urllib.parse.unquote(segment[1:-1])
    return None


def expand_path(url: URL, values: Mapping[str, Any]) -> None:
    """
    Replace ``{name}`` path segments with concrete values.

    E.g. expanding ``http://example.com/{a}/xyz/{b}`` with
    ``{"a": "foo", "b": 123}`` results in ``http://example.com/foo/xyz/123``.
    Only literal braces in the escaped path mark a placeholder, so segments
    added with add_path_segment() and substituted values are never expanded.

    Raises:
        MissingTemplateValue: If a placeholder has no value. ``url`` is left
            unchanged.
    """
    segments, trailing = split_path(url.path)
    expanded = []
    for segment in segments:
        name = _placeholder_name(segment)
        if name is None:
            expanded.append(segment)
            continue
        if name not in values:
            logger.debug("No value for placeholder %r in %r", name, url.path)
            raise MissingTemplateValue(name)
        expanded.append(escape_segment(to_text(values[name])))

    if segments:
        url.path = join_path(expanded, trailing)
