"""String helpers for argument lists and paths."""

from __future__ import annotations

from collections.abc import Sequence


def argv_join(argv: Sequence[str], sep: str, start: int = 0) -> str:
    """Join ``argv[start:]`` with ``sep``.

    An empty sequence or a ``start`` outside the sequence gives an empty string.
    """
    if not argv or start < 0 or start >= len(argv):
        return ""
    return sep.join(argv[start:])


def path_join(a: str | None, b: str | None, sep: str = "/") -> str:
    """Join two path parts with exactly one ``sep`` between them.

    A separator is inserted only when both parts are non-empty and neither
    already supplies one; when both do, the leading one of ``b`` is dropped.
    """
    if a is None or b is None:
        raise ValueError("path_join: input path cannot be None")
    if not sep:
        raise ValueError("path_join: separator cannot be empty")

    if a and b:
        a_has = a.endswith(sep)
        b_has = b.startswith(sep)
        if a_has and b_has:
            return a + b[len(sep):]
        if not a_has and not b_has:
            return a + sep + b
    return a + b