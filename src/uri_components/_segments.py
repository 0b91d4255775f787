"""PathKind enum and the generic immutable Segments value."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from uri_components._errors import InvalidFlag

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


class PathKind(enum.Enum):
    """Whether a hierarchical component starts with its separator."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"


def check_kind(kind: object) -> PathKind:
    """Return ``kind`` if it is a :class:`PathKind`.

    :raises InvalidFlag: For any other value, including the enum's raw values.
    """
    if not isinstance(kind, PathKind):
        raise InvalidFlag("Expected PathKind.ABSOLUTE or PathKind.RELATIVE", flag=kind)
    return kind


class Segments:
    """An immutable ordered sequence of segments with an absolute/relative flag.

    Knows nothing about separators or encoding; :class:`~uri_components.Path`
    composes it with its own parsing and formatting rules.

    :param items: The segments, in left-to-right order.
    :param kind: Whether the owning component is absolute or relative.
    :raises InvalidFlag: If ``kind`` is not a :class:`PathKind`.
    """

    __slots__ = ("_items", "_kind")
    _items: tuple[str, ...]
    _kind: PathKind

    def __init__(self, items: Iterable[str], kind: PathKind = PathKind.RELATIVE) -> None:
        object.__setattr__(self, "_kind", check_kind(kind))
        object.__setattr__(self, "_items", tuple(items))

    @property
    def items(self) -> tuple[str, ...]:
        return self._items

    @property
    def kind(self) -> PathKind:
        return self._kind

    def get(self, index: int, default: str | None = None) -> str | None:
        """Segment at ``index``, counting from the end when negative.

        Returns ``default`` when ``index`` is out of range in either direction.
        """
        count = len(self._items)
        if 0 <= index < count:
            return self._items[index]
        if index < 0 and count + index >= 0:
            return self._items[count + index]
        return default

    def indexes(self, value: str | None = None) -> list[int]:
        """All indexes, or the ascending indexes whose segment equals ``value``."""
        if value is None:
            return list(range(len(self._items)))
        return [i for i, item in enumerate(self._items) if item == value]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"Segments({list(self._items)!r}, {self._kind})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Segments):
            return self._items == other._items and self._kind is other._kind
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._items, self._kind))

    def __reduce__(self) -> tuple[object, ...]:
        return (Segments, (self._items, self._kind))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Segments is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Segments is immutable: cannot delete '{name}'")
