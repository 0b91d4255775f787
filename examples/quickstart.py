"""Quickstart — parse a path, inspect it, and derive new paths.

Demonstrates:
- Parsing absolute and relative paths
- Reading segments, basename, dirname and extension
- Structural edits that return new immutable paths
"""

from __future__ import annotations

from uri_components import Path, PathKind, format_path

if __name__ == "__main__":
    path = Path("/docs/guides/intro.txt")
    print(f"Segments: {path.segments}")
    print(f"Absolute: {path.is_absolute}")
    print(f"Basename: {path.basename}, dirname: {path.dirname}, extension: {path.extension}")

    # Every edit returns a new path; the original is untouched
    print(f"append:         {path.with_trailing_slash().append('extra')}")
    print(f"with_extension: {path.with_extension('md')}")
    print(f"with_basename:  {path.with_basename('index.html')}")
    print(f"with_dirname:   {path.with_dirname('/archive')}")
    print(f"original:       {path}")

    # Build from explicit segments
    built = Path.from_segments(["api", "v1", ""], PathKind.ABSOLUTE)
    print(f"Built: {format_path(built)} (trailing slash: {built.has_trailing_slash})")
