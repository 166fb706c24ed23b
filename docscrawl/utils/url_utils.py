"""URL helpers shared by the crawl policy, link discovery and the API boundary."""
from typing import Optional, Tuple
from urllib.parse import SplitResult, urldefrag, urljoin, urlsplit, urlunsplit

from docscrawl.exceptions import InvalidUrlError

# (scheme, host, port)
Origin = Tuple[str, str, int]

# Schemes with a tuple origin; everything else (mailto:, javascript:, data:, ...) is opaque.
DEFAULT_PORTS = {"http": 80, "https": 443, "ws": 80, "wss": 443, "ftp": 21}


def parse_url(url: Optional[str]) -> SplitResult:
    """Parse `url` as an absolute URL or raise InvalidUrlError.

    Absolute means a scheme is present and, for network schemes, a host.
    """
    if not url or not isinstance(url, str):
        raise InvalidUrlError(str(url), "empty")
    try:
        parts = urlsplit(url)
        # port is validated lazily by urllib
        parts.port
    except ValueError as e:
        raise InvalidUrlError(url, str(e)) from e
    if not parts.scheme:
        raise InvalidUrlError(url)
    if parts.scheme in DEFAULT_PORTS:
        host = parts.hostname
        if not host:
            raise InvalidUrlError(url, "missing host")
        if any(ch.isspace() for ch in host):
            raise InvalidUrlError(url, "invalid host")
    return parts


def is_absolute_url(url: Optional[str]) -> bool:
    try:
        parse_url(url)
    except InvalidUrlError:
        return False
    return True


def origin_of(url: str) -> Optional[Origin]:
    """Return the (scheme, host, port) origin of `url`, or None for opaque origins.

    Raises InvalidUrlError if `url` is not an absolute URL.
    """
    parts = parse_url(url)
    scheme = parts.scheme.lower()
    if scheme not in DEFAULT_PORTS:
        return None
    return (scheme, parts.hostname, parts.port or DEFAULT_PORTS[scheme])


def same_origin(a: Optional[Origin], b: Optional[Origin]) -> bool:
    # opaque origins never match anything
    return a is not None and a == b


def strip_fragment(url: str) -> str:
    return urldefrag(url).url


def resolve_link(base_url: str, href: str) -> str:
    """Resolve `href` against `base_url` and drop its fragment, then normalize it.

    Raises InvalidUrlError when the result is not an absolute URL.
    """
    try:
        joined = urljoin(base_url, href.strip())
    except ValueError as e:
        raise InvalidUrlError(href, str(e)) from e
    return normalize_url(strip_fragment(joined))


def normalize_url(url: str) -> str:
    """Lowercase the scheme and host of an absolute URL and drop a default port.

    Userinfo, path and query are kept as given. Opaque URLs only get their
    scheme lowercased. Raises InvalidUrlError if `url` is not absolute.
    """
    parts = parse_url(url)
    scheme = parts.scheme.lower()
    if scheme not in DEFAULT_PORTS:
        return urlunsplit(parts._replace(scheme=scheme))

    host = parts.hostname
    if ":" in host:
        # IPv6 literal
        host = f"[{host}]"
    if parts.port is not None and parts.port != DEFAULT_PORTS[scheme]:
        host = f"{host}:{parts.port}"
    userinfo, at, _ = parts.netloc.rpartition("@")
    return urlunsplit(parts._replace(scheme=scheme, netloc=f"{userinfo}{at}{host}"))
