"""Path — immutable, segment-aware URI path value object."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from uri_components._codec import PERCENT_CODEC
from uri_components._errors import InvalidBasename, InvalidExtension
from uri_components._segments import PathKind, Segments, check_kind

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from uri_components._codec import Codec

SEPARATOR: Final = "/"

_MISSING: Final = object()


def _split(raw: str, codec: Codec) -> Segments:
    """Decompose a raw path string into segments and a kind."""
    codec.validate(raw)
    kind = PathKind.RELATIVE
    if raw.startswith(SEPARATOR):
        kind = PathKind.ABSOLUTE
        raw = raw[1:]

    trailing = False
    if raw.endswith(SEPARATOR):
        raw = raw[:-1]
        trailing = True

    items = codec.decode(raw).split(SEPARATOR)
    if trailing:
        items.append("")
    return Segments(items, kind)


def _join(items: Iterable[str], kind: PathKind) -> str:
    path = SEPARATOR.join(items)
    if kind is PathKind.ABSOLUTE:
        return SEPARATOR + path
    return path


def _dirname(path: str) -> str:
    """Parent directory of ``path``, considering ``/`` as the only separator.

    ``"a/b/"`` gives ``"a"``, ``"file"`` gives ``"."``, ``"//"`` gives ``"/"``.
    """
    if not path:
        return ""
    end = len(path)
    while end > 0 and path[end - 1] == SEPARATOR:
        end -= 1
    if end == 0:
        return SEPARATOR
    while end > 0 and path[end - 1] != SEPARATOR:
        end -= 1
    if end == 0:
        return "."
    while end > 0 and path[end - 1] == SEPARATOR:
        end -= 1
    if end == 0:
        return SEPARATOR
    return path[:end]


def _build_basename(filename: str, extension: str, parameters: str) -> str:
    dot = filename.rfind(".")
    if dot != -1:
        filename = filename[:dot]
    parameters = parameters.strip()
    if parameters:
        parameters = f";{parameters}"
    extension = extension.strip()
    if extension:
        extension = f".{extension}"
    return f"{filename}{extension}{parameters}"


def _restore(cls: type[Path], decoded: str, codec: Codec) -> Path:
    return cls(decoded, codec=codec)


class Path:
    """An immutable URI path split into ordered, decoded segments.

    One leading ``/`` makes the path absolute. One trailing ``/`` is kept as a
    single empty last segment, so ``Path("a/b/").segments == ("a", "b", "")``.
    Every ``with_*``/editing method returns a new instance (or ``self`` when
    nothing changes); the original is never modified.

    :param raw: The path string. ``None`` is the empty relative path.
    :param codec: Encoding capability used to validate, decode and encode.
    :raises InvalidPath: If ``raw`` contains characters illegal in a path.
    """

    __slots__ = ("_codec", "_segments")
    _segments: Segments
    _codec: Codec

    def __init__(self, raw: str | None = None, *, codec: Codec = PERCENT_CODEC) -> None:
        object.__setattr__(self, "_segments", _split("" if raw is None else raw, codec))
        object.__setattr__(self, "_codec", codec)

    @classmethod
    def from_string(cls, raw: str, *, codec: Codec = PERCENT_CODEC) -> Path:
        """Parse ``raw`` into a path. Same as calling the class."""
        return cls(raw, codec=codec)

    @classmethod
    def from_segments(
        cls, segments: Iterable[str], kind: PathKind = PathKind.RELATIVE, *, codec: Codec = PERCENT_CODEC
    ) -> Path:
        """Build a path from explicit segments.

        The segments are joined and re-parsed, so the result is always in
        parsed form. A segment containing ``/`` is therefore split in two.

        :param segments: Segments in left-to-right order.
        :param kind: :attr:`PathKind.ABSOLUTE` or :attr:`PathKind.RELATIVE`.
        :raises InvalidFlag: If ``kind`` is not a :class:`PathKind`.
        """
        return cls(_join(segments, check_kind(kind)), codec=codec)

    # region: accessors
    @property
    def segments(self) -> tuple[str, ...]:
        """All segments, as stored."""
        return self._segments.items

    @property
    def kind(self) -> PathKind:
        return self._segments.kind

    @property
    def is_absolute(self) -> bool:
        return self._segments.kind is PathKind.ABSOLUTE

    @property
    def has_trailing_slash(self) -> bool:
        decoded = self.decoded
        return decoded != "" and decoded.endswith(SEPARATOR)

    @property
    def decoded(self) -> str:
        """Canonical decoded string form."""
        return _join(self._segments, self._segments.kind)

    @property
    def content(self) -> str:
        """Encoded string form, with reserved characters percent-encoded."""
        return _join((self._codec.encode_if_reserved(s) for s in self._segments), self._segments.kind)

    def get_segment(self, index: int, default: str | None = None) -> str | None:
        """Segment at ``index`` (``-1`` is the last), or ``default`` if out of range."""
        return self._segments.get(index, default)

    def keys(self, value: object = _MISSING) -> list[int]:
        """Segment indexes.

        Without an argument, every index in order. With ``value``, the
        ascending indexes whose segment equals the decoded ``value``.
        """
        if value is _MISSING:
            return self._segments.indexes()
        return self._segments.indexes(self._codec.decode(self._codec.validate(value)))  # type: ignore[arg-type]

    @property
    def basename(self) -> str:
        """Last segment, or ``""`` for a path without segments."""
        return self._segments.get(-1, "") or ""

    @property
    def dirname(self) -> str:
        """Parent directory as a string, using ``/`` as the only separator."""
        return _dirname(self.decoded)

    @property
    def extension(self) -> str:
        """Text after the last ``.`` of the basename, ignoring any ``;parameter`` part."""
        filename = self.basename.split(";", 1)[0]
        dot = filename.rfind(".")
        if dot == -1:
            return ""
        return filename[dot + 1 :]

    # endregion

    # region: structural editors
    def _derive(self, items: Iterable[str], kind: PathKind | None = None) -> Path:
        return type(self).from_segments(items, kind or self._segments.kind, codec=self._codec)

    def _component_segments(self, component: str) -> list[str]:
        component = self._codec.validate(component)
        if component.startswith(SEPARATOR):
            component = component[1:]
        return self._codec.decode(component).split(SEPARATOR)

    def append(self, component: str) -> Path:
        """Return a path with the segments of ``component`` added at the end.

        A leading ``/`` in ``component`` is ignored, and a trailing empty
        segment of this path is dropped first so no empty segment is doubled.
        """
        items = list(self._segments)
        if items and items[-1] == "":
            items.pop()
        return self._derive(items + self._component_segments(component))

    def prepend(self, component: str) -> Path:
        """Return a path with the segments of ``component`` added at the front."""
        new_items = self._component_segments(component)
        if new_items and new_items[-1] == "":
            new_items.pop()
        return self._derive(new_items + list(self._segments))

    def with_dirname(self, dirname: str) -> Path:
        """Return a path with the parent directory replaced.

        The result is re-parsed from ``dirname`` + ``/`` + basename, so
        whether it is absolute follows ``dirname``, not this path.
        """
        dirname = self._codec.validate(dirname)
        if dirname == self.dirname:
            return self
        if not dirname.endswith(SEPARATOR):
            dirname += SEPARATOR
        return type(self)(dirname + self.basename, codec=self._codec)

    def with_basename(self, basename: str) -> Path:
        """Return a path with the last segment replaced.

        :raises InvalidBasename: If ``basename`` contains ``/``.
        """
        basename = self._codec.validate(basename)
        if SEPARATOR in basename:
            raise InvalidBasename("The basename can not contain the path separator", component=basename, kind="path")
        items = list(self._segments)
        current = items.pop() if items else ""
        if basename == current:
            return self
        items.append(basename)
        return self._derive(items)

    def with_extension(self, extension: str) -> Path:
        """Return a path whose basename carries ``extension``.

        The current extension, if any, is replaced. An empty ``extension``
        removes it. A ``;parameter`` part of the basename is preserved.

        :param extension: The new extension, without a leading dot.
        :raises InvalidExtension: If ``extension`` starts with ``.`` or contains ``/``.
        """
        extension = self._codec.validate(extension)
        if extension.startswith("."):
            raise InvalidExtension(
                "An extension can not start with a '.' character", component=extension, kind="path"
            )
        if SEPARATOR in extension:
            raise InvalidExtension("An extension can not contain the path separator", component=extension, kind="path")
        extension = self._codec.decode(extension)

        items = list(self._segments)
        basename = items.pop() if items else ""
        filename, _, parameters = basename.partition(";")
        if not filename:
            return self

        new_basename = _build_basename(filename, extension, parameters)
        if new_basename == basename:
            return self
        items.append(new_basename)
        return self._derive(items)

    def with_leading_slash(self) -> Path:
        if self.is_absolute:
            return self
        return self._derive(self._segments, PathKind.ABSOLUTE)

    def without_leading_slash(self) -> Path:
        """Return a relative version of this path.

        Only one leading ``/`` is removed, so ``"//a"`` becomes ``"/a"``.
        """
        if not self.is_absolute:
            return self
        return self._derive(self._segments, PathKind.RELATIVE)

    def with_trailing_slash(self) -> Path:
        if self.has_trailing_slash:
            return self
        return type(self)(self.decoded + SEPARATOR, codec=self._codec)

    def without_trailing_slash(self) -> Path:
        if not self.has_trailing_slash:
            return self
        return type(self)(self.decoded[:-1], codec=self._codec)

    def without(self, *indexes: int) -> Path:
        """Return a path without the segments at ``indexes``.

        Negative indexes count from the end; out-of-range indexes are ignored.
        """
        count = len(self._segments)
        drop = {i + count if i < 0 else i for i in indexes}
        if not any(0 <= i < count for i in drop):
            return self
        return self._derive(item for i, item in enumerate(self._segments) if i not in drop)

    def replace(self, index: int, component: str) -> Path:
        """Return a path with the segment at ``index`` replaced by the segments of ``component``."""
        count = len(self._segments)
        if index < 0:
            index += count
        if not 0 <= index < count:
            return self
        items = list(self._segments)
        items[index : index + 1] = self._component_segments(component)
        if tuple(items) == self._segments.items:
            return self
        return self._derive(items)

    def __truediv__(self, other: str) -> Path:
        return self.append(other)

    # endregion

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[str]:
        return iter(self._segments)

    def __str__(self) -> str:
        return self.content

    def __repr__(self) -> str:
        return f"Path({self.decoded!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Path):
            return self._segments == other._segments
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._segments)

    def __reduce__(self) -> tuple[object, ...]:
        return (_restore, (type(self), self.decoded, self._codec))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Path is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Path is immutable: cannot delete '{name}'")


def parse_path(raw: str, *, codec: Codec = PERCENT_CODEC) -> Path:
    """Parse ``raw`` into a :class:`Path`."""
    return Path(raw, codec=codec)


def format_path(path: Path) -> str:
    """Canonical decoded string of ``path``: segments joined by ``/``, led by ``/`` if absolute."""
    return path.decoded
