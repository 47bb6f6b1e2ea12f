"""Tests for urlsucker/url_discovery/models.py"""

import pytest
from pydantic import ValidationError

from urlsucker.url_discovery.models import (
    CapturedResponse,
    DiscoveredUrl,
    RequestContext,
    SnapshotRow,
)


class TestDiscoveredUrl:
    def test_structural_equality_and_hash(self) -> None:
        a = DiscoveredUrl(url="https://a.test/x", source_file="app.js")
        b = DiscoveredUrl(url="https://a.test/x", source_file="app.js")
        c = DiscoveredUrl(url="https://a.test/x", source_file="other.js")
        assert a == b
        assert hash(a) == hash(b)
        assert a != c
        assert len({a, b, c}) == 2

    def test_immutable(self) -> None:
        entry = DiscoveredUrl(url="https://a.test/x", source_file="app.js")
        with pytest.raises(ValidationError):
            entry.url = "https://evil.test/"

    def test_str(self) -> None:
        entry = DiscoveredUrl(url="https://a.test/x", source_file="app.js")
        assert str(entry) == "https://a.test/x (from: app.js)"


class TestRequestContext:
    def test_default_ports(self) -> None:
        assert RequestContext(secure=True, host="a.test").port == 443
        assert RequestContext(secure=False, host="a.test").port == 80

    def test_url(self) -> None:
        ctx = RequestContext(secure=True, host="a.test", path="/static/app.js?v=1")
        assert ctx.scheme == "https"
        assert ctx.url == "https://a.test/static/app.js?v=1"

    def test_url_with_custom_port(self) -> None:
        ctx = RequestContext(secure=False, host="a.test", port=8080, path="/x.js")
        assert ctx.url == "http://a.test:8080/x.js"

    def test_from_url(self) -> None:
        ctx = RequestContext.from_url("http://a.test:8080/js/app.js?v=2")
        assert ctx.secure is False
        assert ctx.host == "a.test"
        assert ctx.port == 8080
        assert ctx.path == "/js/app.js?v=2"

    def test_from_url_ipv6(self) -> None:
        ctx = RequestContext.from_url("http://[::1]:8080/app.js")
        assert ctx.host == "[::1]"
        assert ctx.url == "http://[::1]:8080/app.js"

    def test_from_url_without_path(self) -> None:
        ctx = RequestContext.from_url("https://a.test")
        assert (ctx.port, ctx.path) == (443, "/")

    @pytest.mark.parametrize("url", ["/relative", "ftp://a.test/x", "https://a.test/a b"])
    def test_from_url_rejects(self, url: str) -> None:
        with pytest.raises(ValueError):
            RequestContext.from_url(url)


class TestCapturedResponse:
    def test_header_lookup_is_case_insensitive(self) -> None:
        response = CapturedResponse(headers={"content-TYPE": "text/javascript"})
        assert response.header("Content-Type") == "text/javascript"
        assert response.content_type == "text/javascript"
        assert response.header("X-Missing") is None

    def test_from_capture_record(self) -> None:
        response = CapturedResponse.from_capture_record({
            "url": "https://a.test/app.js",
            "response_body": "x",
            "mime_type": "application/javascript",
        })
        assert response.content_type == "application/javascript"
        assert response.body == "x"
        assert response.request is not None
        assert response.request.url == "https://a.test/app.js"

    def test_from_capture_record_keeps_explicit_header(self) -> None:
        response = CapturedResponse.from_capture_record({
            "url": "https://a.test/app.js",
            "response_headers": {"content-type": "text/plain"},
            "mime_type": "application/javascript",
        })
        assert response.content_type == "text/plain"
        assert response.body == ""

    def test_from_capture_record_without_usable_url(self) -> None:
        response = CapturedResponse.from_capture_record({"url": "data:text/plain,hi", "response_body": "x"})
        assert response.request is None


class TestSnapshotRow:
    def test_full_url(self) -> None:
        row = SnapshotRow(host="https://a.test", path="/p?q=1", source_file="app.js", url="https://a.test/p?q=1")
        assert row.full_url == "https://a.test/p?q=1"
