"""Error handling — catching InvalidPath, InvalidBasename, InvalidExtension, etc.

Demonstrates the normalized error hierarchy and how to handle errors
programmatically using structured attributes.
"""

from __future__ import annotations

from uri_components import (
    InvalidBasename,
    InvalidExtension,
    InvalidFlag,
    InvalidPath,
    Path,
    UriComponentError,
)

if __name__ == "__main__":
    # --- InvalidPath ---
    try:
        Path("/a?b")
    except InvalidPath as exc:
        print(f"InvalidPath: {exc}")
        print(f"  component={exc.component}, kind={exc.kind}")

    # --- InvalidBasename ---
    try:
        Path("/a/b").with_basename("c/d")
    except InvalidBasename as exc:
        print(f"InvalidBasename: {exc}")

    # --- InvalidExtension ---
    try:
        Path("/a/b").with_extension(".txt")
    except InvalidExtension as exc:
        print(f"InvalidExtension: {exc}")

    # --- InvalidFlag ---
    try:
        Path.from_segments(["a"], "absolute")  # type: ignore[arg-type]
    except InvalidFlag as exc:
        print(f"InvalidFlag: {exc.flag!r}")

    # --- Catch-all ---
    try:
        Path("bad\0path")
    except UriComponentError as exc:
        print(f"UriComponentError ({type(exc).__name__}): {exc}")
