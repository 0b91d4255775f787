"""Normalized error hierarchy for uri_components."""

from __future__ import annotations

from typing import Optional


class UriComponentError(Exception):
    """Base class for all uri_components errors.

    :param message: Human-readable error description.
    :param component: The offending input, if any.
    :param kind: The component type involved (``"path"``, ``"query"``...), if any.
    """

    def __init__(self, message: str = "", *, component: Optional[str] = None, kind: Optional[str] = None) -> None:
        self.component = component
        self.kind = kind
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def _context(self) -> dict[str, object]:
        """Keyword context rendered after the message, in order."""
        context = {"component": self.component, "kind": self.kind}
        return {name: value for name, value in context.items() if value is not None}

    def __str__(self) -> str:
        details = [f"{name}={value!r}" for name, value in self._context().items()]
        return " | ".join([self.message, *details] if self.message else details)

    def __repr__(self) -> str:
        details = [f"{name}={value!r}" for name, value in self._context().items()]
        return f"{type(self).__name__}({', '.join([repr(self.message), *details])})"


class InvalidFlag(UriComponentError):
    """Raised when a segment constructor receives an unknown path kind flag.

    :param flag: The rejected flag value, always rendered (even ``None``).
    """

    def __init__(self, message: str = "", *, flag: object = None, kind: Optional[str] = None) -> None:
        self.flag = flag
        super().__init__(message, kind=kind)

    def _context(self) -> dict[str, object]:
        return {"flag": self.flag, **super()._context()}


class InvalidPath(UriComponentError):
    """Raised when a path string contains characters illegal in a path."""


class InvalidBasename(UriComponentError):
    """Raised when a new basename contains the path separator."""


class InvalidExtension(UriComponentError):
    """Raised when a new extension starts with ``.`` or contains the path separator."""


class InvalidQuery(UriComponentError):
    """Raised when a query string contains characters illegal in a query."""
