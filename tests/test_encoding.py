"""Unit tests for stringkit.encoding."""

import pytest

from stringkit.capabilities import UnsupportedEnvironmentError
from stringkit.encoding import base64_decode, base64_encode, base64url_decode, base64url_encode


class TestBase64:
    def test_encode_utf8(self, stdlib_codec):
        assert base64_encode("h\u00e9llo", codec=stdlib_codec) == "aMOpbGxv"

    def test_decode_utf8(self, stdlib_codec):
        assert base64_decode("aMOpbGxv", codec=stdlib_codec) == "h\u00e9llo"

    def test_default_codec_round_trip(self):
        assert base64_decode(base64_encode("Grüße, 世界")) == "Grüße, 世界"

    def test_unavailable_codec(self, unavailable_codec):
        with pytest.raises(UnsupportedEnvironmentError):
            base64_encode("x", codec=unavailable_codec)
        with pytest.raises(UnsupportedEnvironmentError):
            base64_decode("eA==", codec=unavailable_codec)


class TestBase64Url:
    def test_url_alphabet_and_no_padding(self, stdlib_codec):
        # "??>" encodes to "Pz8+" in the standard alphabet.
        assert base64url_encode("??>", codec=stdlib_codec) == "Pz8-"
        assert base64url_encode("a", codec=stdlib_codec) == "YQ"

    def test_decode_without_padding(self, stdlib_codec):
        assert base64url_decode("YQ", codec=stdlib_codec) == "a"

    def test_decode_url_alphabet(self, stdlib_codec):
        assert base64url_decode("Pz8-", codec=stdlib_codec) == "??>"

    def test_no_unsafe_characters(self, stdlib_codec):
        encoded = base64url_encode("subjects?_d=1&x=\u00ff\u00ff", codec=stdlib_codec)
        assert not set(encoded) & {"+", "/", "="}
