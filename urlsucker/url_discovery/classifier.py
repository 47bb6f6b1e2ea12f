"""
urlsucker/url_discovery/classifier.py

Decides whether a response body is JavaScript worth scanning.
"""

# Content-Type fragments that mark a JavaScript response
_JS_CONTENT_TYPES = (
    "javascript",
    "application/x-javascript",
    "text/javascript",
)


def is_js_like(content_type: str | None, source_url: str | None) -> bool:
    """
    Whether a response looks like JavaScript.

    True if the declared Content-Type mentions javascript, or if the source
    URL ends with ".js". Missing inputs simply do not match.

    Args:
        content_type: Value of the Content-Type header, if any.
        source_url: URL of the originating request, if any.

    Returns:
        True if the body should be fed to the extractor.
    """
    if content_type:
        lowered = content_type.lower()
        if any(fragment in lowered for fragment in _JS_CONTENT_TYPES):
            return True
    if source_url and source_url.lower().endswith(".js"):
        return True
    return False
