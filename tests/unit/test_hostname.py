"""Unit tests for punycode host transcoding."""

import pytest

from gemurl.url import decode_host, encode_host, encode_url_host


class TestEncodeHost:
    """Tests for encode_host() function."""

    def test_encode_host_ascii_unchanged(self):
        """Test ASCII hosts are returned exactly as given."""
        assert encode_host("example.org") == "example.org"
        assert encode_host("Example.ORG") == "Example.ORG"
        assert encode_host("my-host.example") == "my-host.example"

    def test_encode_host_non_ascii_label(self):
        """Test non-ASCII labels get the xn-- prefix."""
        assert encode_host("bücher.example") == "xn--bcher-kva.example"
        assert encode_host("münchen.de") == "xn--mnchen-3ya.de"

    def test_encode_host_only_touches_non_ascii_labels(self):
        """Test ASCII labels next to encoded ones are untouched."""
        assert encode_host("www.bücher.example") == "www.xn--bcher-kva.example"

    def test_encode_host_keeps_empty_labels(self):
        """Test empty labels (trailing or doubled dots) survive."""
        assert encode_host("bücher.example.") == "xn--bcher-kva.example."
        assert encode_host("a..b") == "a..b"
        assert encode_host("") == ""

    def test_encode_host_already_ace(self):
        """Test ACE labels are ASCII and therefore left alone."""
        assert encode_host("xn--bcher-kva.example") == "xn--bcher-kva.example"


class TestDecodeHost:
    """Tests for decode_host() function."""

    def test_decode_host_ace_label(self):
        """Test xn-- labels are decoded to Unicode."""
        assert decode_host("xn--bcher-kva.example") == "bücher.example"

    def test_decode_host_prefix_is_case_insensitive(self):
        """Test an upper-case ACE prefix is recognized."""
        assert decode_host("XN--bcher-kva.example") == "bücher.example"

    def test_decode_host_plain_labels_unchanged(self):
        """Test labels without the prefix pass through."""
        assert decode_host("gemini.example.org") == "gemini.example.org"

    @pytest.mark.parametrize("host", ["xn--!!.example", "xn--.example", "xn--ü.example"])
    def test_decode_host_invalid_label_falls_back(self, host: str):
        """Test undecodable labels are returned unchanged."""
        assert decode_host(host) == host


class TestHostRoundTrip:
    """Tests for encode_host()/decode_host() together."""

    @pytest.mark.parametrize(
        "host",
        [
            "bücher.example",
            "Bücher.example",
            "münchen.de",
            "ελληνικά.gr",
            "例え.テスト",
            "gemini.circumlunar.space",
        ],
    )
    def test_round_trip(self, host: str):
        """Test decode_host(encode_host(h)) == h."""
        assert decode_host(encode_host(host)) == host

    def test_encoded_host_is_ascii(self):
        """Test encode_host() output is pure ASCII."""
        assert encode_host("例え.テスト").isascii()


class TestEncodeUrlHost:
    """Tests for encode_url_host() function."""

    def test_encode_url_host_rewrites_host_only(self):
        """Test the port and path are preserved verbatim."""
        url = "gemini://bücher.example:1966/päth?q=ü"
        assert encode_url_host(url) == "gemini://xn--bcher-kva.example:1966/päth?q=ü"

    def test_encode_url_host_without_host(self):
        """Test URLs without a host are returned unchanged."""
        assert encode_url_host("/relative/päth") == "/relative/päth"
        assert encode_url_host("file:///tmp/ä") == "file:///tmp/ä"
