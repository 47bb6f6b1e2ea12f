"""
urlsucker/url_discovery/__init__.py

URL discovery engine - passive extraction of URL-like string literals from
JavaScript responses, resolved against the originating request and grouped
by origin.
"""

from urlsucker.url_discovery.actions import ActionDispatcher, HostActions, build_get_request
from urlsucker.url_discovery.classifier import is_js_like
from urlsucker.url_discovery.extractors import extract_candidates
from urlsucker.url_discovery.models import (
    CapturedResponse,
    DiscoveredUrl,
    ExtractionSettings,
    OutboundRequest,
    RequestContext,
    SnapshotRow,
)
from urlsucker.url_discovery.pipeline import IngestionPipeline, derive_source_file
from urlsucker.url_discovery.resolver import resolve_candidate
from urlsucker.url_discovery.session import UrlSuckerSession
from urlsucker.url_discovery.store import DiscoveryStore
