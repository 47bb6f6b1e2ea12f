"""Tests for urlsucker/utils/url_utils.py"""

import pytest

from urlsucker.utils.url_utils import host_and_path, is_valid_uri, origin_of, split_url


class TestIsValidUri:
    @pytest.mark.parametrize("value", [
        "https://a.test/x?y=1#frag",
        "/p/q",
        "rel/x",
        "/a%20b",
        "//cdn.test/lib.js",
        "http://[::1]:8080/p",
        "//[2001:db8::1]/x",
    ])
    def test_valid(self, value: str) -> None:
        assert is_valid_uri(value) is True

    @pytest.mark.parametrize("value", [
        "/a b",
        '/a"b',
        "/a{b}",
        "/a|b",
        "/a\\b",
        "/100%",
        "/a#b#c",
        "a/[0]/b",
        "/p?q=[1]",
        "https://a.test/x#[frag]",
    ])
    def test_invalid(self, value: str) -> None:
        assert is_valid_uri(value) is False


class TestSplitUrl:
    def test_raises_on_malformed(self) -> None:
        with pytest.raises(ValueError):
            split_url("/a b")

    def test_raises_on_bad_port(self) -> None:
        with pytest.raises(ValueError):
            split_url("http://a.test:99999/")


class TestOriginOf:
    def test_scheme_and_host(self) -> None:
        assert origin_of("https://a.test:8443/x") == "https://a.test"

    def test_missing_scheme_or_host(self) -> None:
        assert origin_of("/p/q") == "unknown"
        assert origin_of("mailto:someone") == "unknown"


class TestHostAndPath:
    def test_with_query(self) -> None:
        assert host_and_path("https://a.test/p?q=1") == ("https://a.test", "/p?q=1")

    def test_without_path(self) -> None:
        assert host_and_path("https://a.test") == ("https://a.test", "")

    def test_relative(self) -> None:
        assert host_and_path("/p/q") == ("unknown", "/p/q")


class TestIpv6Hosts:
    def test_origin_keeps_brackets(self) -> None:
        assert origin_of("http://[::1]:8080/p") == "http://[::1]"

    def test_host_and_path_keeps_brackets(self) -> None:
        assert host_and_path("https://[2001:db8::1]/api?x=1") == ("https://[2001:db8::1]", "/api?x=1")
