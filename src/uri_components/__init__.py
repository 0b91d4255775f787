"""Immutable, segment-aware URI path and query components."""

from uri_components._codec import PERCENT_CODEC, Codec, PercentCodec
from uri_components._config import ComponentConfig
from uri_components._errors import (
    InvalidBasename,
    InvalidExtension,
    InvalidFlag,
    InvalidPath,
    InvalidQuery,
    UriComponentError,
)
from uri_components._modifiers import QueryModifier
from uri_components._path import Path, format_path, parse_path
from uri_components._query import FilterMode, Query
from uri_components._reference import Reference
from uri_components._segments import PathKind, Segments

__version__ = "0.1.0"

__all__ = [
    # Path
    "Path",
    "PathKind",
    "Segments",
    "parse_path",
    "format_path",
    # Query & composites
    "Query",
    "FilterMode",
    "QueryModifier",
    "Reference",
    # Codec
    "Codec",
    "PercentCodec",
    "PERCENT_CODEC",
    # Config
    "ComponentConfig",
    # Errors
    "UriComponentError",
    "InvalidFlag",
    "InvalidPath",
    "InvalidBasename",
    "InvalidExtension",
    "InvalidQuery",
    # Version
    "__version__",
]
