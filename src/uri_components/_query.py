"""Query — immutable, ordered collection of query pairs."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from multidict import MultiDict, MultiDictProxy

from uri_components._codec import decode_query_part, encode_query_part, validate_query
from uri_components._errors import InvalidFlag

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

Pair = tuple[str, Optional[str]]


class FilterMode(enum.Enum):
    """What a :meth:`Query.filter` predicate receives."""

    KEY = "key"
    VALUE = "value"
    BOTH = "both"


def _parse(raw: str, separator: str) -> list[Pair]:
    if raw == "":
        return []
    pairs: list[Pair] = []
    for chunk in raw.split(separator):
        key, sep, value = chunk.partition("=")
        pairs.append((decode_query_part(key), decode_query_part(value) if sep else None))
    return pairs


class Query:
    """An immutable query component.

    Pairs keep their order and duplicate keys. A key without ``=`` has the
    value ``None`` (``"flag"``), which differs from an empty value (``"flag="``).

    :param raw: The query string, without the leading ``?``.
    :param separator: The pair separator.
    :raises InvalidQuery: If ``raw`` contains ``#`` or control characters.
    """

    __slots__ = ("_params", "_separator")
    _params: MultiDictProxy[Optional[str]]
    _separator: str

    def __init__(self, raw: str | None = None, *, separator: str = "&") -> None:
        raw = "" if raw is None else validate_query(raw)
        self._init(_parse(raw, separator) if separator else [], separator)

    def _init(self, pairs: Iterable[Pair], separator: str) -> None:
        if not separator:
            raise ValueError("Query separator must not be empty")
        object.__setattr__(self, "_params", MultiDictProxy(MultiDict(pairs)))
        object.__setattr__(self, "_separator", separator)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Pair], *, separator: str = "&") -> Query:
        """Build a query from ``(key, value)`` pairs; ``value`` may be ``None``."""
        query = object.__new__(cls)
        query._init(((str(k), None if v is None else str(v)) for k, v in pairs), separator)
        return query

    @property
    def pairs(self) -> tuple[Pair, ...]:
        return tuple(self._params.items())

    @property
    def params(self) -> MultiDictProxy[Optional[str]]:
        """Read-only multi-valued mapping view of the pairs."""
        return self._params

    @property
    def separator(self) -> str:
        return self._separator

    def keys(self) -> list[str]:
        """Distinct keys, in first-seen order."""
        return list(dict.fromkeys(self._params.keys()))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """First value for ``key``, or ``default``."""
        return self._params.get(key, default)

    def getall(self, key: str) -> list[Optional[str]]:
        return self._params.getall(key, [])

    def _derive(self, pairs: list[Pair]) -> Query:
        if tuple(pairs) == self.pairs:
            return self
        return type(self).from_pairs(pairs, separator=self._separator)

    def _coerce(self, other: Union[Query, str]) -> Query:
        if isinstance(other, Query):
            return other
        return type(self)(other, separator=self._separator)

    def merge(self, other: Union[Query, str]) -> Query:
        """Return the union of both queries; ``other`` wins on key collision.

        Colliding keys keep their position but take all of ``other``'s values.
        New keys are appended in ``other``'s order.
        """
        incoming = MultiDict(self._coerce(other).pairs)
        merged: list[Pair] = []
        replaced: set[str] = set()
        for key, value in self._params.items():
            if key not in incoming:
                merged.append((key, value))
            elif key not in replaced:
                merged.extend((key, v) for v in incoming.getall(key))
                replaced.add(key)
        merged.extend((k, v) for k, v in incoming.items() if k not in replaced)
        return self._derive(merged)

    def sort_keys(self, key: Optional[Callable[[str], Any]] = None, *, reverse: bool = False) -> Query:
        """Return a query with pairs stably sorted by key.

        :param key: Optional sort key applied to each query key.
        :param reverse: Sort in descending order.
        """
        if key is None:
            pairs = sorted(self._params.items(), key=lambda p: p[0], reverse=reverse)
        else:
            pairs = sorted(self._params.items(), key=lambda p: key(p[0]), reverse=reverse)
        return self._derive(pairs)

    def without(self, *keys: str) -> Query:
        drop = set(keys)
        return self._derive([(k, v) for k, v in self._params.items() if k not in drop])

    def filter(self, predicate: Callable[..., bool], mode: FilterMode = FilterMode.VALUE) -> Query:
        """Return a query keeping the pairs accepted by ``predicate``.

        :param mode: ``KEY`` passes the key, ``VALUE`` the value, ``BOTH``
            passes ``(key, value)`` as two arguments.
        :raises InvalidFlag: If ``mode`` is not a :class:`FilterMode`.
        """
        if not isinstance(mode, FilterMode):
            raise InvalidFlag("Expected a FilterMode", flag=mode, kind="query")
        if mode is FilterMode.KEY:
            kept = [(k, v) for k, v in self._params.items() if predicate(k)]
        elif mode is FilterMode.VALUE:
            kept = [(k, v) for k, v in self._params.items() if predicate(v)]
        else:
            kept = [(k, v) for k, v in self._params.items() if predicate(k, v)]
        return self._derive(kept)

    def __len__(self) -> int:
        return len(self._params)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._params

    def __bool__(self) -> bool:
        return len(self._params) > 0

    def __str__(self) -> str:
        encoded = []
        for key, value in self._params.items():
            chunk = encode_query_part(key, self._separator)
            if value is not None:
                chunk = f"{chunk}={encode_query_part(value, self._separator)}"
            encoded.append(chunk)
        return self._separator.join(encoded)

    def __repr__(self) -> str:
        return f"Query({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Query):
            return self.pairs == other.pairs
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.pairs)

    def __reduce__(self) -> tuple[object, ...]:
        return (_restore, (type(self), self.pairs, self._separator))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Query is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Query is immutable: cannot delete '{name}'")


def _restore(cls: type[Query], pairs: tuple[Pair, ...], separator: str) -> Query:
    return cls.from_pairs(pairs, separator=separator)
