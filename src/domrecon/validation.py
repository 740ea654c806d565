from __future__ import annotations

from urllib.parse import urlsplit, urlunsplit

_ALLOWED_SCHEMES = {"http", "https"}


class InvalidUrlError(ValueError):
    pass


class ReportFormatError(ValueError):
    pass


def domain_from_url(url: str) -> str:
    """Return the hostname of ``url`` without a literal leading ``www.``."""
    hostname = hostname_from_url(url)
    return hostname.removeprefix("www.")


def parse_target_url(raw: str) -> str:
    value = (raw or "").strip()
    if not hostname_from_url(value):
        raise InvalidUrlError(f'Invalid URL: "{raw}"')
    parts = urlsplit(value)
    scheme = parts.scheme.lower()
    if scheme not in _ALLOWED_SCHEMES:
        raise InvalidUrlError(f'URL must start with http:// or https:// (got "{scheme}:")')
    path = parts.path or "/"
    return urlunsplit((scheme, parts.netloc, path, parts.query, parts.fragment))


def hostname_from_url(url: str) -> str:
    if not isinstance(url, str) or not url.strip():
        raise InvalidUrlError(f'Invalid URL: "{url}"')
    try:
        parts = urlsplit(url.strip())
        hostname = parts.hostname
        # Accessing the port validates it.
        parts.port
    except ValueError as exc:
        raise InvalidUrlError(f'Invalid URL: "{url}"') from exc
    if not parts.scheme:
        raise InvalidUrlError(f'Invalid URL: "{url}"')
    # Scheme-only URLs such as file:///x have an empty hostname.
    return hostname or ""
