"""Testing support – Hypothesis strategies for blank and present text.

Usage::

    from hypothesis import given
    from stroption.testing import present_text_strategy

    @given(present_text_strategy())
    def test_present(text): ...
"""

from stroption.testing.strategies import (
    blank_text_strategy,
    present_text_strategy,
    string_option_strategy,
    whitespace_characters,
)

__all__ = [
    "blank_text_strategy",
    "present_text_strategy",
    "string_option_strategy",
    "whitespace_characters",
]
