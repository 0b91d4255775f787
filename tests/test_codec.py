"""Tests for the percent-encoding codec."""

from __future__ import annotations

import pytest

from uri_components._codec import (
    PERCENT_CODEC,
    Codec,
    decode_query_part,
    encode_query_part,
    validate_query,
)
from uri_components._errors import InvalidPath, InvalidQuery
from uri_components._path import Path


class TestPercentCodecDecode:
    """CODEC-001: only unreserved triplets are decoded."""

    @pytest.mark.contract("CODEC-001")
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("%41%5a%7E", "AZ~"),
            ("%2d%2E%5F", "-._"),
            ("%2F", "%2F"),
            ("%3F%23", "%3F%23"),
            ("%20", "%20"),
            ("100%", "100%"),
        ],
    )
    def test_decode(self, raw: str, expected: str) -> None:
        assert PERCENT_CODEC.decode(raw) == expected


class TestPercentCodecEncode:
    """CODEC-002: characters outside pchar are encoded."""

    @pytest.mark.contract("CODEC-002")
    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            ("abc-._~", "abc-._~"),
            ("a:b@c;d=e", "a:b@c;d=e"),
            ("a b", "a%20b"),
            ("é", "%C3%A9"),
            ("a%2Fb", "a%2Fb"),
            ("50%", "50%25"),
            ("a\\b", "a%5Cb"),
        ],
    )
    def test_encode_if_reserved(self, segment: str, expected: str) -> None:
        assert PERCENT_CODEC.encode_if_reserved(segment) == expected


class TestPercentCodecValidate:
    """CODEC-003: path validation."""

    @pytest.mark.contract("CODEC-003")
    def test_valid_returned_unchanged(self) -> None:
        assert PERCENT_CODEC.validate("a/b c") == "a/b c"

    @pytest.mark.contract("CODEC-003")
    def test_invalid_raises(self) -> None:
        with pytest.raises(InvalidPath):
            PERCENT_CODEC.validate("a?b")

    @pytest.mark.contract("CODEC-003")
    def test_non_string_raises_type_error(self) -> None:
        with pytest.raises(TypeError):
            PERCENT_CODEC.validate(b"a")  # type: ignore[arg-type]


class TestQueryHelpers:
    """CODEC-004: query part helpers."""

    @pytest.mark.contract("CODEC-004")
    def test_validate_query(self) -> None:
        assert validate_query("a=1&b=?/") == "a=1&b=?/"
        with pytest.raises(InvalidQuery):
            validate_query("a=1#frag")

    @pytest.mark.contract("CODEC-004")
    def test_decode_query_part(self) -> None:
        assert decode_query_part("a%20b%26c") == "a b&c"

    @pytest.mark.contract("CODEC-004")
    def test_encode_query_part(self) -> None:
        assert encode_query_part("a b&c=d") == "a%20b%26c%3Dd"
        assert encode_query_part("a;b", separator=";") == "a%3Bb"
        assert encode_query_part("a;b") == "a;b"


class UpperCodec(Codec):
    """Test codec that stores segments upper-cased and renders them lower-cased."""

    def validate(self, raw: str) -> str:
        return raw

    def decode(self, raw: str) -> str:
        return raw.upper()

    def encode_if_reserved(self, segment: str) -> str:
        return segment.lower()


class TestInjectedCodec:
    """CODEC-005: the path uses the codec it was built with."""

    @pytest.mark.contract("CODEC-005")
    def test_custom_codec(self) -> None:
        p = Path("/a/b", codec=UpperCodec())
        assert p.segments == ("A", "B")
        assert str(p) == "/a/b"

    @pytest.mark.contract("CODEC-005")
    def test_derived_paths_keep_codec(self) -> None:
        p = Path("a", codec=UpperCodec()).append("c")
        assert p.segments == ("A", "C")
