"""Testing – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install hypothesis
    # or
    pip install "stroption[testing]"
"""
from __future__ import annotations

import functools
import sys
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy  # type: ignore[import-untyped]

    from stroption.kernel.types import StringOption


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st  # type: ignore[import-untyped]
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


@functools.cache
def whitespace_characters() -> tuple[str, ...]:
    """Every code point that :meth:`str.isspace` classifies as whitespace."""
    return tuple(c for c in map(chr, range(sys.maxunicode + 1)) if c.isspace())


def blank_text_strategy(*, include_none: bool = True) -> "SearchStrategy[str | None]":
    """Hypothesis strategy for values a :class:`StringOption` treats as absent.

    Draws ``None`` (unless *include_none* is false), ``""`` or a non-empty run
    of whitespace characters.

    Example::

        @given(blank_text_strategy())
        def test_blank_is_absent(text):
            assert StringOption.of(text).is_empty()
    """
    st = _require_hypothesis()
    whitespace = st.text(alphabet=st.sampled_from(whitespace_characters()), min_size=1)
    options = [st.just(""), whitespace]
    if include_none:
        options.insert(0, st.none())
    return st.one_of(*options)


def present_text_strategy(*, max_size: int | None = None) -> "SearchStrategy[str]":
    """Hypothesis strategy for strings with at least one non-whitespace character.

    Surrounding whitespace is drawn too, so callers can check that values are
    kept untrimmed.
    """
    from stroption.kernel.types.text import has_text

    st = _require_hypothesis()
    padding = st.text(alphabet=st.sampled_from(whitespace_characters()), max_size=3)
    core = st.text(min_size=1, max_size=max_size).filter(has_text)
    return st.tuples(padding, core, padding).map("".join)


def string_option_strategy() -> "SearchStrategy[StringOption]":
    """Hypothesis strategy for :class:`StringOption`, present or absent."""
    from stroption.kernel.types.string_option import StringOption

    st = _require_hypothesis()
    return st.one_of(blank_text_strategy(), present_text_strategy()).map(StringOption.of)


__all__ = [
    "blank_text_strategy",
    "present_text_strategy",
    "string_option_strategy",
    "whitespace_characters",
]
