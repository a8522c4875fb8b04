"""Blankness predicates for text.

Whitespace is whatever :meth:`str.isspace` classifies as whitespace.
"""

from __future__ import annotations


def has_text(text: str | None) -> bool:
    """Return ``True`` when *text* holds at least one non-whitespace character.

    ``None``, ``""`` and strings made only of whitespace have no text.
    """
    return text is not None and len(text) > 0 and not text.isspace()


def is_blank(text: str | None) -> bool:
    """Inverse of :func:`has_text`: ``None``, empty or all-whitespace."""
    return not has_text(text)


__all__ = ["has_text", "is_blank"]
