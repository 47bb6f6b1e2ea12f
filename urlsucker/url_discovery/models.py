"""
urlsucker/url_discovery/models.py

Data models for the URL discovery engine.

Contains Pydantic models for:
- DiscoveredUrl: An absolute URL and the JS file it was found in
- RequestContext: Scheme/host/port/path of the request that produced a response
- CapturedResponse: One intercepted response, as delivered by the host
- ExtractionSettings: Runtime-mutable greedy flag and search filter
- SnapshotRow: One (host, path, source file) row of the live view
- OutboundRequest: A GET request handed to a host action
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from urlsucker.config import Config
from urlsucker.utils.url_utils import host_label, split_url

_DEFAULT_PORTS = {"http": 80, "https": 443}


class DiscoveredUrl(BaseModel):
    """A discovered absolute URL together with its provenance label."""
    model_config = ConfigDict(frozen=True)

    url: str = Field(description="Absolute URL (or best-effort path when no context was available)")
    source_file: str = Field(description="Short label of the JS file the URL was found in, or 'unknown'")

    def __str__(self) -> str:
        return f"{self.url} (from: {self.source_file})"


class RequestContext(BaseModel):
    """
    The originating request of a response.

    Only used while resolving candidates and labeling provenance; never stored.
    """
    secure: bool = Field(default=False, description="Whether the request went over TLS")
    host: str = Field(description="Target host name")
    port: int | None = Field(default=None, description="Target port (defaults to 443/80 from `secure`)")
    path: str = Field(default="/", description="Request path including any query string")

    @model_validator(mode="after")
    def _default_port(self) -> "RequestContext":
        if self.port is None:
            self.port = 443 if self.secure else 80
        return self

    @property
    def scheme(self) -> str:
        return "https" if self.secure else "http"

    @property
    def url(self) -> str:
        """Full request URL; the port is omitted when it is the scheme default."""
        netloc = self.host
        if self.port != _DEFAULT_PORTS[self.scheme]:
            netloc += f":{self.port}"
        return f"{self.scheme}://{netloc}{self.path}"

    @classmethod
    def from_url(cls, url: str) -> "RequestContext":
        """
        Build a context from an absolute http(s) URL.

        Raises:
            ValueError: If url is not an absolute http(s) URL.
        """
        parts = split_url(url)
        if parts.scheme.lower() not in _DEFAULT_PORTS or not parts.hostname:
            raise ValueError(f"Not an absolute http(s) URL: {url!r}")
        path = parts.path or "/"
        if parts.query:
            path += "?" + parts.query
        return cls(
            secure=parts.scheme.lower() == "https",
            host=host_label(parts),
            port=parts.port,
            path=path,
        )


class CapturedResponse(BaseModel):
    """An intercepted HTTP response and, when known, its originating request."""
    headers: dict[str, str] = Field(default_factory=dict, description="Response headers")
    body: str = Field(default="", description="Response body decoded as text")
    request: RequestContext | None = Field(default=None, description="Originating request, if any")

    def header(self, name: str) -> str | None:
        """Return the first header value whose name matches case-insensitively."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @property
    def content_type(self) -> str | None:
        return self.header("Content-Type")

    @classmethod
    def from_capture_record(cls, record: dict[str, Any]) -> "CapturedResponse":
        """
        Build a response from a JSONL capture record.

        Recognized keys: url, response_body, response_headers, mime_type.
        A url that is not an absolute http(s) URL leaves the request unset.
        """
        headers = dict(record.get("response_headers") or {})
        mime_type = record.get("mime_type")
        if mime_type and not any(k.lower() == "content-type" for k in headers):
            headers["Content-Type"] = mime_type

        request: RequestContext | None = None
        url = record.get("url")
        if isinstance(url, str) and url:
            try:
                request = RequestContext.from_url(url)
            except ValueError:
                request = None

        return cls(headers=headers, body=record.get("response_body") or "", request=request)


class ExtractionSettings(BaseModel):
    """
    Runtime-mutable settings written by the interactive surface.

    Read without synchronization; a slightly stale value is acceptable.
    """
    greedy: bool = Field(default_factory=lambda: Config.GREEDY, description="Use the greedy extraction pattern")
    search_filter: str = Field(default="", description="Case-insensitive substring filter for the view")


class SnapshotRow(BaseModel):
    """One row of the live view."""
    model_config = ConfigDict(frozen=True)

    host: str = Field(description="scheme://host, or 'unknown'")
    path: str = Field(description="Path plus ?query, or the raw URL when it could not be parsed")
    source_file: str = Field(description="Provenance label")
    url: str = Field(description="The stored URL this row was derived from")

    @property
    def full_url(self) -> str:
        """The URL the view hands to row actions (host + path)."""
        return self.host + self.path


class OutboundRequest(BaseModel):
    """A plain GET request built for a host "send to tool" action."""
    url: str = Field(description="Absolute request URL")
    secure: bool = Field(description="Whether to send over TLS")
    host: str = Field(description="Target host")
    port: int = Field(description="Target port")
    raw: str = Field(description="HTTP/1.1 request text")
