"""Kernel value types — public re-export surface.

Modules:
  string_option.py — StringOption, EMPTY
  option.py        — Some, Nothing, Option, option_of
  text.py          — has_text, is_blank
"""

from stroption.kernel.types.option import Nothing, Option, Some, option_of
from stroption.kernel.types.string_option import EMPTY, StringOption
from stroption.kernel.types.text import has_text, is_blank

__all__ = [
    "EMPTY",
    "Nothing",
    "Option",
    "Some",
    "StringOption",
    "has_text",
    "is_blank",
    "option_of",
]
