"""
urlsucker/url_discovery/session.py

The object the host runtime talks to.

Wires the ingestion pipeline, the discovery store, the extraction settings
and the host actions together, and exposes what the interactive surface
needs: the response handler, greedy toggle, search filter, clear, the row
snapshot and the row actions. Views subscribe with add_refresh_listener().
"""

from collections.abc import Callable

from urlsucker.url_discovery.actions import ActionDispatcher, HostActions
from urlsucker.url_discovery.models import CapturedResponse, ExtractionSettings, SnapshotRow
from urlsucker.url_discovery.pipeline import IngestionPipeline
from urlsucker.url_discovery.store import DiscoveryStore
from urlsucker.utils.logger import get_logger

logger = get_logger(name=__name__)

RefreshListener = Callable[[], None]


class UrlSuckerSession:
    """
    One discovery session: a store, its settings, and the host boundary.

    Usage:
        session = UrlSuckerSession(actions=my_host_actions)
        session.add_refresh_listener(view.refresh)
        session.handle_response_received(response)   # from the host's I/O threads
        rows = session.rows()
    """

    def __init__(
        self,
        actions: HostActions | None = None,
        store: DiscoveryStore | None = None,
        settings: ExtractionSettings | None = None,
        label_prefix: str | None = None,
    ) -> None:
        self._store = store if store is not None else DiscoveryStore()
        self._pipeline = IngestionPipeline(self._store)
        self._settings = settings if settings is not None else ExtractionSettings()
        self._dispatcher = ActionDispatcher(actions, label_prefix) if actions is not None else None
        self._listeners: list[RefreshListener] = []

    @property
    def store(self) -> DiscoveryStore:
        return self._store

    @property
    def settings(self) -> ExtractionSettings:
        return self._settings

    # -- View refresh ------------------------------------------------------------

    def add_refresh_listener(self, listener: RefreshListener) -> None:
        # _notify iterates over a copy, so registering from another thread is safe
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("Refresh listener %r failed", listener)

    # -- Host callbacks ------------------------------------------------------------

    def handle_response_received(self, response: CapturedResponse | None) -> int:
        """
        Scan a response delivered by the host.

        Never raises: host callbacks must always let the traffic continue.

        Returns:
            Number of new entries stored.
        """
        if response is None:
            return 0
        try:
            added = self._pipeline.ingest_response(response, greedy=self._settings.greedy)
        except Exception:
            logger.exception("Failed to inspect response")
            return 0
        self._notify()
        return added

    # -- Interactive surface -------------------------------------------------------

    def set_greedy(self, enabled: bool) -> None:
        """Switch extraction strategy for responses ingested from now on."""
        self._settings.greedy = enabled
        logger.info("Greedy extraction %s", "enabled" if enabled else "disabled")

    def set_search_filter(self, text: str) -> None:
        """Update the view filter; listeners are only notified when it changes."""
        new_filter = text.lower()
        if new_filter == self._settings.search_filter:
            return
        self._settings.search_filter = new_filter
        self._notify()

    def rows(self) -> list[SnapshotRow]:
        """Current view rows under the active search filter."""
        return self._store.snapshot(self._settings.search_filter)

    def clear(self) -> None:
        """Forget every discovery and reset the search filter."""
        self._store.clear()
        self._settings.search_filter = ""
        self._notify()

    # -- Row actions -----------------------------------------------------------------

    @staticmethod
    def copy_url(host: str, path: str) -> str:
        """The URL a row stands for, as copied to the clipboard."""
        return host + path

    def send_row_to_repeater(self, host: str, path: str) -> bool:
        if self._dispatcher is None:
            logger.warning("No host actions available; cannot send %s%s to Repeater", host, path)
            return False
        return self._dispatcher.send_to_repeater(self.copy_url(host, path))

    def send_row_to_organizer(self, host: str, path: str) -> bool:
        if self._dispatcher is None:
            logger.warning("No host actions available; cannot send %s%s to Organizer", host, path)
            return False
        return self._dispatcher.send_to_organizer(self.copy_url(host, path))
