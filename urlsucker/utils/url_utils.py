"""
urlsucker/utils/url_utils.py

URL parsing helpers shared by the resolver, the pipeline and the store.

urllib.parse is lenient and accepts almost any string, so split_url first
rejects strings that are not syntactically valid URI references (raw spaces,
quotes, braces, broken percent escapes, ...).
"""

import re
from urllib.parse import SplitResult, urlsplit

UNKNOWN = "unknown"

# Characters that may never appear unescaped in a URI reference
_ILLEGAL_URI_CHARS_RE = re.compile(r'[\x00-\x20"<>\\^`{|}\x7f]')

# A '%' that does not start a two-digit hex escape
_BAD_PERCENT_RE = re.compile(r'%(?![0-9A-Fa-f]{2})')

# Optional scheme plus "//authority"; brackets are only legal inside the authority (IPv6 literals)
_AUTHORITY_PREFIX_RE = re.compile(r'^(?:[A-Za-z][A-Za-z0-9+.-]*:)?//[^/?#]*')


def is_valid_uri(value: str) -> bool:
    """Whether value is a syntactically valid URI reference."""
    if _ILLEGAL_URI_CHARS_RE.search(value) or _BAD_PERCENT_RE.search(value):
        return False
    rest = _AUTHORITY_PREFIX_RE.sub("", value, count=1)
    if "[" in rest or "]" in rest:
        return False
    # at most one fragment delimiter
    return value.count("#") <= 1


def split_url(value: str) -> SplitResult:
    """
    Split a URI reference into its components.

    Args:
        value: Absolute URL or relative reference.

    Returns:
        The urlsplit() result.

    Raises:
        ValueError: If value is not a syntactically valid URI reference.
    """
    if not is_valid_uri(value):
        raise ValueError(f"Malformed URI: {value!r}")
    parts = urlsplit(value)
    # accessing port validates the authority (raises ValueError when out of range)
    parts.port
    return parts


def host_label(parts: SplitResult) -> str | None:
    """Host as written in a URL: IPv6 literals keep their brackets."""
    host = parts.hostname
    if host and ":" in host:
        return f"[{host}]"
    return host


def origin_of(url: str) -> str:
    """
    Return the origin key ("scheme://host") of url, or "unknown" when the
    scheme or the host is missing.

    Raises:
        ValueError: If url is malformed.
    """
    parts = split_url(url)
    host = host_label(parts)
    if not parts.scheme or not host:
        return UNKNOWN
    return f"{parts.scheme}://{host}"


def host_and_path(url: str) -> tuple[str, str]:
    """
    Split url into the (host, path) pair shown by the view.

    host is "scheme://host" ("unknown" stands in for a missing host and the
    scheme prefix is dropped when there is none); path is the path plus
    "?query" when a query is present.

    Raises:
        ValueError: If url is malformed.
    """
    parts = split_url(url)
    host = (f"{parts.scheme}://" if parts.scheme else "") + (host_label(parts) or UNKNOWN)
    path = parts.path
    if parts.query:
        path += "?" + parts.query
    return host, path
