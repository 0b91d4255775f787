"""QueryModifier — query editing surface for composite URI objects."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar, Union

from uri_components._query import FilterMode, Query

if TYPE_CHECKING:
    from uri_components._path import Path

Self = TypeVar("Self", bound="QueryModifier")


class QueryModifier(abc.ABC):
    """Query editing for any object that owns a :class:`Query`.

    Implementers expose their query component and rebuild themselves through
    :meth:`_with_property`; every modifier here is pure and returns a new
    object built by that hook.
    """

    __slots__ = ()

    @property
    @abc.abstractmethod
    def query(self) -> Query:
        """The owned query component."""

    @abc.abstractmethod
    def _with_property(self: Self, name: str, value: Union[Path, Query, str, None]) -> Self:
        """Return a copy of this object with property ``name`` set to ``value``."""

    def _to_query(self, query: Union[Query, str]) -> Query:
        separator = self.query.separator
        if isinstance(query, Query):
            if query.separator == separator:
                return query
            return Query.from_pairs(query.pairs, separator=separator)
        return Query(query, separator=separator)

    def get_query(self) -> str:
        """The encoded query string, without the leading ``?``."""
        return str(self.query)

    def with_query(self: Self, query: Union[Query, str]) -> Self:
        return self._with_property("query", self._to_query(query))

    def merge_query(self: Self, query: Union[Query, str]) -> Self:
        """Merge ``query`` into the current query; ``query`` wins on key collision."""
        return self._with_property("query", self.query.merge(self._to_query(query)))

    def sort_query_keys(self: Self, key: Optional[Callable[[str], Any]] = None, *, reverse: bool = False) -> Self:
        """Stably sort the query pairs by key.

        :param key: Sort key applied to each query key. To order keys with a
            two-argument comparator, pass ``functools.cmp_to_key(comparator)``.
        :param reverse: Sort in descending order.
        """
        return self._with_property("query", self.query.sort_keys(key, reverse=reverse))

    def without_query_keys(self: Self, *keys: str) -> Self:
        return self._with_property("query", self.query.without(*keys))

    def filter_query(self: Self, predicate: Callable[..., bool], mode: FilterMode = FilterMode.VALUE) -> Self:
        """Keep the query pairs accepted by ``predicate``. See :meth:`Query.filter`."""
        return self._with_property("query", self.query.filter(predicate, mode))
