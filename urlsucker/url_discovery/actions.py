"""
urlsucker/url_discovery/actions.py

Boundary with the host's "send to tool" actions.

The host runtime is modeled as a HostActions implementation with two narrow
operations. ActionDispatcher builds the GET request for a selected URL, hands
it over, and logs failures instead of raising them.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable

from urlsucker.config import Config
from urlsucker.url_discovery.models import OutboundRequest
from urlsucker.utils.exceptions import HostActionError, InvalidRequestUrlError
from urlsucker.utils.logger import get_logger
from urlsucker.utils.url_utils import split_url

logger = get_logger(name=__name__)

_DEFAULT_PORTS = {"http": 80, "https": 443}


def build_get_request(url: str) -> OutboundRequest:
    """
    Build a plain GET request for an absolute http(s) URL.

    Args:
        url: Absolute URL, e.g. "https://example.com/api/v1/users?page=2".

    Returns:
        OutboundRequest with the raw HTTP/1.1 request text.

    Raises:
        InvalidRequestUrlError: If url is malformed or not absolute http(s).
    """
    try:
        parts = split_url(url.strip())
    except ValueError as e:
        raise InvalidRequestUrlError(str(e)) from e

    scheme = parts.scheme.lower()
    if scheme not in _DEFAULT_PORTS or not parts.hostname:
        raise InvalidRequestUrlError(f"Not an absolute http(s) URL: {url!r}")

    port = parts.port or _DEFAULT_PORTS[scheme]
    target = parts.path or "/"
    if parts.query:
        target += "?" + parts.query
    host_header = parts.netloc.rpartition("@")[2]

    raw = f"GET {target} HTTP/1.1\r\nHost: {host_header}\r\n\r\n"
    return OutboundRequest(
        url=url.strip(),
        secure=scheme == "https",
        host=parts.hostname,
        port=port,
        raw=raw,
    )


class HostActions(ABC):
    """Actions the host runtime exposes for a selected request."""

    @abstractmethod
    def send_to_repeater(self, request: OutboundRequest, label: str) -> None:
        """Open the request in the host's repeat-and-resend workspace under a tab label."""

    @abstractmethod
    def send_to_organizer(self, request: OutboundRequest) -> None:
        """Send the request to the host's organizing/annotation tool."""


class ActionDispatcher:
    """
    Hands user-selected URLs to the host actions.

    Failures are logged and reported as False; they never reach the caller
    as exceptions and never touch discovery state.
    """

    def __init__(self, actions: HostActions, label_prefix: str | None = None) -> None:
        self._actions = actions
        self._label_prefix = Config.REPEATER_LABEL_PREFIX if label_prefix is None else label_prefix

    def repeater_label(self, url: str) -> str:
        return f"{self._label_prefix}{url}"

    def send_to_repeater(self, url: str) -> bool:
        """Send a GET for url to the repeater workspace."""
        return self._dispatch(
            "Send to Repeater",
            url,
            lambda request: self._actions.send_to_repeater(request, self.repeater_label(url)),
        )

    def send_to_organizer(self, url: str) -> bool:
        """Send a GET for url to the organizer."""
        return self._dispatch("Send to Organizer", url, self._actions.send_to_organizer)

    def _dispatch(self, action: str, url: str, send: Callable[[OutboundRequest], None]) -> bool:
        try:
            send(build_get_request(url))
        except Exception as e:
            error = e if isinstance(e, HostActionError) else HostActionError(action, url, e)
            logger.error("%s", error)
            return False
        logger.info("%s: %s", action, url)
        return True
