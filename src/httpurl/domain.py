"""src/httpurl/domain.py

Hostname classification against a reference domain.
"""

from httpurl.url import URL

__all__ = ["is_domain", "is_subdomain_of", "is_domain_or_subdomain_of"]


def is_domain(url: URL, domain: str) -> bool:
    """
    Check if ``domain`` is exactly the URL's hostname.

    Given ``http://www.example.com/``, only ``"www.example.com"`` matches.
    The port is ignored and the comparison is case-sensitive.
    """
    return url.hostname == domain


def is_subdomain_of(url: URL, domain: str) -> bool:
    """
    Check if the URL's hostname is a subdomain of ``domain``.

    Given ``http://www.example.com/``, this is true for ``"example.com"`` and
    for ``"com"``, but not for ``"www.example.com"`` or ``"example"``.
    """
    return url.hostname.endswith("." + domain)


def is_domain_or_subdomain_of(url: URL, domain: str) -> bool:
    """Either is_domain() or is_subdomain_of()."""
    return is_domain(url, domain) or is_subdomain_of(url, domain)
