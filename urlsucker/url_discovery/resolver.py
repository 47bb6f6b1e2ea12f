"""
urlsucker/url_discovery/resolver.py

Turns a raw candidate string into an absolute URL using the context of the
request whose response it was found in.

Resolution order:
1. too short (< 3 chars after trimming)  -> rejected
2. http:// or https://                   -> returned as-is
3. //host/path (scheme-relative)         -> scheme taken from the request
4. /path (path-absolute)                 -> joined to scheme://host
5. anything else (relative)              -> joined to scheme://host[:port]/

Rejections are reported as None, never as exceptions.
"""

from urllib.parse import urljoin

from urlsucker.url_discovery.models import RequestContext
from urlsucker.utils.logger import get_logger
from urlsucker.utils.url_utils import split_url

logger = get_logger(name=__name__)

_MIN_CANDIDATE_LENGTH = 3

# Ports left out of the base URL of relative candidates, whatever the scheme
_IMPLICIT_PORTS = (80, 443)


def _resolve_scheme_relative(candidate: str, ctx: RequestContext | None) -> str:
    """Prefix a //host/path candidate with the scheme of the originating request."""
    if ctx is not None and ctx.secure:
        return "https:" + candidate
    return "http:" + candidate


def _join(base: str, candidate: str) -> str:
    """
    RFC 3986 reference resolution of candidate against base.

    Raises:
        ValueError: If the candidate or the result is malformed.
    """
    split_url(candidate)
    resolved = urljoin(base, candidate)
    split_url(resolved)
    return resolved


def base_url_for(ctx: RequestContext) -> str:
    """Base URL for relative candidates: scheme://host[:port]/."""
    port = "" if ctx.port in _IMPLICIT_PORTS else f":{ctx.port}"
    return f"{ctx.scheme}://{ctx.host}{port}/"


def resolve_candidate(candidate: str, ctx: RequestContext | None) -> str | None:
    """
    Resolve a candidate into an absolute URL.

    Args:
        candidate: Raw string matched by the extractor.
        ctx: Originating request, or None when the response has none.

    Returns:
        The absolute URL, the unchanged candidate for a path-absolute
        candidate without context, or None if the candidate is rejected.
    """
    candidate = candidate.strip()
    if len(candidate) < _MIN_CANDIDATE_LENGTH:
        return None

    if candidate.startswith(("http://", "https://")):
        return candidate

    if candidate.startswith("//"):
        return _resolve_scheme_relative(candidate, ctx)

    try:
        if candidate.startswith("/"):
            if ctx is None:
                # best effort: left non-absolute
                return candidate
            return _join(f"{ctx.scheme}://{ctx.host}", candidate)

        if ctx is None:
            # relative paths need a request to resolve against
            return None
        return _join(base_url_for(ctx), candidate)
    except ValueError as e:
        logger.debug("Rejected candidate %r: %s", candidate, e)
        return None
