"""Percent-encoding capability shared by the path and query components."""

from __future__ import annotations

import abc
import logging
import re
from urllib.parse import quote, unquote

from uri_components._errors import InvalidPath, InvalidQuery

log = logging.getLogger(__name__)

# RFC 3986 pchar, plus "%" so existing triplets survive encoding.
_PATH_SAFE = "A-Za-z0-9\\-._~!$&'()*+,;=:@%"
_PATH_ENCODE = re.compile(rf"[^{_PATH_SAFE}]+|%(?![A-Fa-f0-9]{{2}})")
_ENCODED_UNRESERVED = re.compile(r"%(2[DE]|3[0-9]|4[1-9A-F]|5[0-9AF]|6[1-9A-F]|7[0-9AE])", re.IGNORECASE)
_INVALID_PATH_CHARS = re.compile(r"[\x00-\x1f\x7f?#]")
_INVALID_QUERY_CHARS = re.compile(r"[\x00-\x1f\x7f#]")
_QUERY_SAFE = "!$'()*,;:@/?"


class Codec(abc.ABC):
    """Encoding capability injected into path parsing and formatting.

    Segment manipulation never touches percent-encoding directly; it goes
    through a ``Codec`` so alternative encodings can be swapped in.
    """

    @abc.abstractmethod
    def validate(self, raw: str) -> str:
        """Return ``raw`` unchanged if it is legal in a path.

        :raises InvalidPath: If ``raw`` contains illegal characters.
        """

    @abc.abstractmethod
    def decode(self, raw: str) -> str:
        """Decode ``raw`` into its segment representation."""

    @abc.abstractmethod
    def encode_if_reserved(self, segment: str) -> str:
        """Encode the characters of ``segment`` that may not appear in a path."""


class PercentCodec(Codec):
    """RFC 3986 percent-encoding codec.

    Decoding only touches triplets of *unreserved* characters, so an encoded
    separator (``%2F``) stays encoded and can never split a segment.
    """

    def validate(self, raw: str) -> str:
        if not isinstance(raw, str):
            raise TypeError(f"Expected a string, got {type(raw).__name__}")
        if _INVALID_PATH_CHARS.search(raw):
            log.debug("Rejected path %r: illegal characters", raw)
            raise InvalidPath("Path contains characters illegal in a URI path", component=raw, kind="path")
        return raw

    def decode(self, raw: str) -> str:
        return _ENCODED_UNRESERVED.sub(lambda m: chr(int(m.group(1), 16)), raw)

    def encode_if_reserved(self, segment: str) -> str:
        return _PATH_ENCODE.sub(lambda m: quote(m.group(0), safe=""), segment)

    def __repr__(self) -> str:
        return "PercentCodec()"


PERCENT_CODEC = PercentCodec()


def validate_query(raw: str) -> str:
    """Return ``raw`` unchanged if it is legal in a query.

    :raises InvalidQuery: If ``raw`` contains a fragment delimiter or control characters.
    """
    if not isinstance(raw, str):
        raise TypeError(f"Expected a string, got {type(raw).__name__}")
    if _INVALID_QUERY_CHARS.search(raw):
        log.debug("Rejected query %r: illegal characters", raw)
        raise InvalidQuery("Query contains characters illegal in a URI query", component=raw, kind="query")
    return raw


def decode_query_part(raw: str) -> str:
    """Fully percent-decode a query key or value."""
    return unquote(raw)


def encode_query_part(part: str, separator: str = "&") -> str:
    """Percent-encode a query key or value, leaving ``separator`` and ``=`` encoded."""
    safe = "".join(c for c in _QUERY_SAFE if c != separator)
    return quote(part, safe=safe)
