"""Removing a set of characters from both ends of a string."""

from __future__ import annotations

__all__ = ["trim"]


def trim(src: str, trim_chars: str) -> str:
    """Return ``src`` without any leading or trailing characters found in ``trim_chars``.

    Characters inside the string are kept. An empty ``trim_chars`` leaves
    ``src`` unchanged. A ``None`` argument raises ``TypeError``.
    """
    if src is None or trim_chars is None:
        raise TypeError("trim() requires both a source string and a set of characters")
    if not isinstance(src, str) or not isinstance(trim_chars, str):
        raise TypeError("trim() arguments must be str")
    if not trim_chars:
        return src
    return src.strip(trim_chars)