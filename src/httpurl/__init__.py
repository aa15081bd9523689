"""src/httpurl/__init__.py

httpurl - Safe construction and mutation of absolute HTTP(S) URLs.

httpurl is a zero-dependency library built on Python's ``urllib.parse``. It
escapes user-supplied path segments and query values so they can never change
the scheme, host or unrelated parts of a URL.

Key Features:
    - Chainable URLBuilder with validation deferred to build()
    - In-place mutators for path segments and query parameters
    - ``{name}`` path template expansion, all-or-nothing
    - Domain and subdomain predicates
    - Full type hints (PEP 561)

Example:
    Builder usage::

        from httpurl import URLBuilder

        url = (
            URLBuilder()
            .scheme("https")
            .host("example.com")
            .add_path_segment("users")
            .add_path_segment("../admin")
            .add_query_param("tag", "a")
            .add_query_param("tag", "b")
            .build()
        )
        str(url)  # 'https://example.com/users/..%2Fadmin?tag=a&tag=b'

    Mutator usage::

        from httpurl import parse, set_query_param, is_subdomain_of

        url = parse("http://www.example.com/foo/bar?a=1&b=2")
        set_query_param(url, "b", 3)
        str(url)  # 'http://www.example.com/foo/bar?a=1&b=3'
        is_subdomain_of(url, "example.com")  # True
"""

import logging

from httpurl.builder import URLBuilder
from httpurl.domain import is_domain, is_domain_or_subdomain_of, is_subdomain_of
from httpurl.exceptions import (
    BuildError,
    HttpURLError,
    InvalidLiteralError,
    InvalidScheme,
    MissingHost,
    MissingTemplateValue,
    ParseError,
)
from httpurl.mutators import (
    add_path_segment,
    add_query_param,
    expand_path,
    remove_path_segment,
    remove_query_param,
    set_query_param,
)
from httpurl.query import QueryParams
from httpurl.url import URL, clone, must_parse, parse
from httpurl.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "URL",
    "URLBuilder",
    "QueryParams",
    "parse",
    "must_parse",
    "clone",
    "add_query_param",
    "set_query_param",
    "remove_query_param",
    "add_path_segment",
    "remove_path_segment",
    "expand_path",
    "is_domain",
    "is_subdomain_of",
    "is_domain_or_subdomain_of",
    "HttpURLError",
    "ParseError",
    "BuildError",
    "InvalidScheme",
    "MissingHost",
    "MissingTemplateValue",
    "InvalidLiteralError",
    "__version__",
]
