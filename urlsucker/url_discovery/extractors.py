"""
urlsucker/url_discovery/extractors.py

Regex-based extraction of URL-like string literals from JavaScript text.

Two strategies:
- greedy: any quoted string containing a '/' and none of "'()\\s:;,
  (high recall; also matches things like "a/b")
- conservative: quoted or parenthesized runs of [-\\w./:?=]
  (higher precision, misses unusual path characters)

Text is scanned line by line, so string literals spanning several lines
are never matched.
"""

import re

from urlsucker.utils.logger import get_logger

logger = get_logger(name=__name__)

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# "x/y" or 'x/y' with no quotes, parens, whitespace, ':', ';' or ','
_GREEDY_RE = re.compile(
    r""""([^"'()\s:;,]+/[^"'()\s:;,]+)"|'([^"'()\s:;,]+/[^"'()\s:;,]+)'""",
    re.ASCII,
)

# "...", '...' or (...) made only of URL-ish characters
_CONSERVATIVE_RE = re.compile(
    r""""([-\w./:?=]+)"|'([-\w./:?=]+)'|\(([-\w./:?=]+)\)""",
    re.ASCII,
)


def get_pattern(greedy: bool) -> re.Pattern[str]:
    """Return the compiled pattern for the requested strategy."""
    return _GREEDY_RE if greedy else _CONSERVATIVE_RE


def extract_candidates(text: str | None, greedy: bool = True) -> list[str]:
    """
    Extract URL-like candidate strings from text.

    Args:
        text: Response body (JavaScript source).
        greedy: Use the greedy pattern instead of the conservative one.

    Returns:
        Candidates in first-seen order, without duplicates.
    """
    if not text:
        return []

    pattern = get_pattern(greedy)
    # dict keeps insertion order and gives O(1) dedup
    found: dict[str, None] = {}
    for line in text.split("\n"):
        for m in pattern.finditer(line):
            for group in m.groups():
                if group is not None:
                    found[group] = None

    logger.debug(
        "Extracted %d candidates (%s)",
        len(found),
        "greedy" if greedy else "conservative",
    )
    return list(found)
