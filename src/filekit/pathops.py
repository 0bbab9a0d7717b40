"""Path string normalization and derivation.

All functions here are pure string transformations. ``format_path`` turns
any Unix-style path string into a normalized absolute path; the remaining
functions assume their argument is already normalized.
"""

from __future__ import annotations

from pathlib import Path

__all__ = ["SEPARATOR", "ROOT", "format_path", "parent_path", "base_name", "parent_name"]

SEPARATOR = "/"
ROOT = SEPARATOR


def format_path(raw: str, home: str | None = None) -> str:
    """Format any Unix path into a normalized absolute path.

    A leading ``~`` is replaced by the home directory. Runs of separators
    collapse into one, trailing separators are dropped and a single
    leading separator is enforced. Any string is accepted.

    Args:
        raw: Path string to normalize.
        home: Home directory used for ``~`` expansion. Defaults to ``Path.home()``.

    Returns:
        Normalized path string.

    Example:
        >>> format_path("/a//b///c/")
        '/a/b/c'
        >>> format_path("")
        '/'
    """
    path = raw
    if path.startswith("~"):
        if home is None:
            home = str(Path.home())
        path = home + path[1:]
    if path.startswith(SEPARATOR):
        path = path[1:]

    kept: list[str] = []
    at_end = True
    after_separator = False
    for char in reversed(path):
        if char == SEPARATOR:
            if at_end or after_separator:
                continue
            after_separator = True
        else:
            at_end = False
            after_separator = False
        kept.append(char)

    path = "".join(reversed(kept))
    if not path.startswith(SEPARATOR):
        path = SEPARATOR + path
    return path


def parent_path(path: str) -> str:
    """Get the parent directory path.

    The separator before the last component is removed unless it is the
    leading one, so top-level entries keep ``/`` as their parent. The
    parent of the root is the root.

    Args:
        path: Normalized path.

    Returns:
        Parent directory path.
    """
    index = path.rfind(SEPARATOR)
    if index > 0:
        return path[:index]
    return path[: index + 1]


def base_name(path: str) -> str:
    """Get the last component of a path, or ``/`` for the root."""
    if path == ROOT:
        return ROOT
    return path[path.rfind(SEPARATOR) + 1 :]


def parent_name(path: str) -> str:
    """Get the name of the directory holding the last component.

    The last component is dropped together with its separator, then only
    the segment after the next separator is kept. Paths with fewer than
    two segments give an empty string.

    Args:
        path: Normalized path.

    Returns:
        Parent directory name, possibly empty.
    """
    index = path.rfind(SEPARATOR)
    if index == -1:
        return ""
    head = path[:index]
    return head[head.rfind(SEPARATOR) + 1 :]
