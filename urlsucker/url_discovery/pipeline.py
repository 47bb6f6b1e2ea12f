"""
urlsucker/url_discovery/pipeline.py

Ingestion pipeline: classifier -> extractor -> resolver -> store.

Pipeline, per response:
1. Skip the response unless it looks like JavaScript
2. Derive the source file label from the request URL
3. Extract candidates with the current greedy setting
4. Resolve each candidate against the request context
5. Group resolved URLs by origin and store them

A bad candidate is skipped on its own; it never aborts the rest of the batch.
"""

from urlsucker.url_discovery.classifier import is_js_like
from urlsucker.url_discovery.extractors import extract_candidates
from urlsucker.url_discovery.models import CapturedResponse, DiscoveredUrl, RequestContext
from urlsucker.url_discovery.resolver import resolve_candidate
from urlsucker.url_discovery.store import DiscoveryStore
from urlsucker.utils.logger import get_logger
from urlsucker.utils.url_utils import UNKNOWN, origin_of

logger = get_logger(name=__name__)


def derive_source_file(request_url: str | None) -> str:
    """
    Short provenance label for a request URL: its last path segment without
    the query string, e.g. "https://a.test/static/app.js?v=3" -> "app.js".

    Returns "unknown" when there is no URL or the segment is empty.
    """
    if not request_url:
        return UNKNOWN
    filename = request_url.split("/")[-1].split("?", 1)[0]
    return filename or UNKNOWN


class IngestionPipeline:
    """
    Feeds response bodies through extraction and resolution into a DiscoveryStore.

    Usage:
        pipeline = IngestionPipeline(DiscoveryStore())
        pipeline.ingest(body, "text/javascript", ctx, ctx.url, greedy=True)
    """

    def __init__(self, store: DiscoveryStore) -> None:
        self._store = store

    @property
    def store(self) -> DiscoveryStore:
        return self._store

    def ingest(
        self,
        body: str | None,
        content_type: str | None,
        request_context: RequestContext | None,
        request_url: str | None,
        greedy: bool = True,
    ) -> int:
        """
        Scan one response and store whatever URLs it yields.

        Args:
            body: Response body as text.
            content_type: Declared Content-Type header, if any.
            request_context: Originating request, if any.
            request_url: Full URL of the originating request, if any.
            greedy: Extraction strategy to use for this call.

        Returns:
            Number of entries that were new to the store.
        """
        if not is_js_like(content_type, request_url):
            return 0
        if not body:
            return 0

        source_file = derive_source_file(request_url)
        candidates = extract_candidates(body, greedy=greedy)

        added = 0
        for candidate in candidates:
            try:
                if self._ingest_candidate(candidate, request_context, source_file):
                    added += 1
            except Exception as e:
                logger.debug("Skipping candidate %r from %s: %s", candidate, source_file, e)

        logger.debug(
            "Ingested %s: %d candidates, %d new entries",
            source_file,
            len(candidates),
            added,
        )
        return added

    def _ingest_candidate(
        self,
        candidate: str,
        request_context: RequestContext | None,
        source_file: str,
    ) -> bool:
        resolved = resolve_candidate(candidate, request_context)
        if resolved is None:
            return False
        try:
            origin = origin_of(resolved)
        except ValueError:
            logger.debug("Unparseable resolved URL %r", resolved)
            return False
        return self._store.insert(origin, DiscoveredUrl(url=resolved, source_file=source_file))

    def ingest_response(self, response: CapturedResponse, greedy: bool = True) -> int:
        """Ingest a CapturedResponse, using its originating request for context and provenance."""
        request_url = response.request.url if response.request is not None else None
        return self.ingest(
            body=response.body,
            content_type=response.content_type,
            request_context=response.request,
            request_url=request_url,
            greedy=greedy,
        )
