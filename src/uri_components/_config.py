"""Configuration model — immutable options for building components."""

from __future__ import annotations

import dataclasses

_RESERVED_SEPARATORS = frozenset("/?#=")


@dataclasses.dataclass(frozen=True)
class ComponentConfig:
    """Options used when parsing and rendering composite references.

    :param query_separator: Separator between query pairs (e.g. ``"&"``, ``";"``).
    :param encode_output: If ``False``, ``str()`` renders the decoded path.
    """

    query_separator: str = "&"
    encode_output: bool = True

    def validate(self) -> None:
        """Validate the options.

        :raises ValueError: If the query separator is empty, longer than one
            character, or a URI delimiter.
        """
        if len(self.query_separator) != 1:
            raise ValueError(f"Query separator must be a single character, got {self.query_separator!r}")
        if self.query_separator in _RESERVED_SEPARATORS:
            raise ValueError(
                f"Query separator {self.query_separator!r} is reserved. "
                f"Reserved characters: {sorted(_RESERVED_SEPARATORS)}"
            )

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> ComponentConfig:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        :param data: Dict with optional ``query_separator`` and ``encode_output`` keys.
        """
        if not isinstance(data, dict):
            msg = "Expected component config to be a dict"
            raise TypeError(msg)
        unknown = set(data) - {f.name for f in dataclasses.fields(cls)}
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        separator = data.get("query_separator", "&")
        if not isinstance(separator, str):
            msg = f"'query_separator' must be a string, got {type(separator).__name__}"
            raise TypeError(msg)
        encode_output = data.get("encode_output", True)
        if not isinstance(encode_output, bool):
            msg = f"'encode_output' must be a bool, got {type(encode_output).__name__}"
            raise TypeError(msg)
        config = cls(query_separator=separator, encode_output=encode_output)
        config.validate()
        return config


DEFAULT_CONFIG = ComponentConfig()
