"""Reference — composite path + query + fragment value object."""

from __future__ import annotations

import logging
from typing import Optional, Union

from uri_components._config import DEFAULT_CONFIG, ComponentConfig
from uri_components._modifiers import QueryModifier
from uri_components._path import Path
from uri_components._query import Query

log = logging.getLogger(__name__)

_PROPERTIES = ("path", "query", "fragment")


class Reference(QueryModifier):
    """An immutable relative reference made of a path, a query and a fragment.

    :param path: The path component (string or :class:`Path`).
    :param query: The query component (string or :class:`Query`).
    :param fragment: The fragment, or ``None`` when absent.
    :param config: Query separator and rendering options.
    :raises ValueError: If ``config`` is invalid.
    """

    __slots__ = ("_config", "_fragment", "_path", "_query")
    _path: Path
    _query: Query
    _fragment: Optional[str]
    _config: ComponentConfig

    def __init__(
        self,
        path: Union[Path, str, None] = None,
        query: Union[Query, str, None] = None,
        fragment: Optional[str] = None,
        *,
        config: ComponentConfig = DEFAULT_CONFIG,
    ) -> None:
        config.validate()
        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "_path", path if isinstance(path, Path) else Path(path))
        separator = config.query_separator
        if not isinstance(query, Query):
            query = Query(query, separator=separator)
        elif query.separator != separator:
            query = Query.from_pairs(query.pairs, separator=separator)
        object.__setattr__(self, "_query", query)
        object.__setattr__(self, "_fragment", fragment)

    @classmethod
    def from_string(cls, raw: str, *, config: ComponentConfig = DEFAULT_CONFIG) -> Reference:
        """Split ``"path?query#fragment"`` into its components.

        :raises InvalidPath: If the path part contains illegal characters.
        :raises InvalidQuery: If the query part contains illegal characters.
        """
        if not isinstance(raw, str):
            raise TypeError(f"Expected a string, got {type(raw).__name__}")
        rest, hash_sign, fragment = raw.partition("#")
        path, _, query = rest.partition("?")
        return cls(path, query, fragment if hash_sign else None, config=config)

    @property
    def path(self) -> Path:
        return self._path

    @property
    def query(self) -> Query:
        return self._query

    @property
    def fragment(self) -> Optional[str]:
        return self._fragment

    @property
    def config(self) -> ComponentConfig:
        return self._config

    def _with_property(self, name: str, value: Union[Path, Query, str, None]) -> Reference:
        if name not in _PROPERTIES:
            log.debug("Rejected unknown reference property %r", name)
            raise ValueError(f"Unknown property '{name}'. Available properties: {list(_PROPERTIES)}")
        components: dict[str, Union[Path, Query, str, None]] = {
            "path": self._path,
            "query": self._query,
            "fragment": self._fragment,
        }
        if name == "fragment" and value is not None and not isinstance(value, str):
            raise TypeError(f"Expected a string or None, got {type(value).__name__}")
        components[name] = value
        new = type(self)(
            components["path"],  # type: ignore[arg-type]
            components["query"],  # type: ignore[arg-type]
            components["fragment"],  # type: ignore[arg-type]
            config=self._config,
        )
        if new == self:
            return self
        return new

    def with_path(self, path: Union[Path, str]) -> Reference:
        return self._with_property("path", path)

    def with_fragment(self, fragment: Optional[str]) -> Reference:
        return self._with_property("fragment", fragment)

    def __str__(self) -> str:
        path = str(self._path) if self._config.encode_output else self._path.decoded
        query = f"?{self._query}" if self._query else ""
        fragment = f"#{self._fragment}" if self._fragment is not None else ""
        return f"{path}{query}{fragment}"

    def __repr__(self) -> str:
        return f"Reference({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Reference):
            return (self._path, self._query, self._fragment) == (other._path, other._query, other._fragment)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._path, self._query, self._fragment))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Reference is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Reference is immutable: cannot delete '{name}'")
