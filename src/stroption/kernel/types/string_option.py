"""StringOption — an Option-like wrapper that treats blank text as absent.

Examples::

    StringOption.of(None).is_present()       # False
    StringOption.of("").is_present()         # False
    StringOption.of("   ").is_present()      # False
    StringOption.of("content").is_present()  # True

Presence is computed once, at construction, and never changes.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, ClassVar, Final, Iterator, TypeVar

from stroption.kernel.errors.domain import InvalidArgumentError
from stroption.kernel.types.option import Nothing, Option, Some, option_of
from stroption.kernel.types.text import has_text

T = TypeVar("T")
logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class StringOption:
    """Immutable wrapper around ``str | None`` with a blankness-based presence flag.

    ``raw`` is kept verbatim (never trimmed); ``present`` is ``True`` only when
    ``raw`` contains at least one non-whitespace character.
    """

    EMPTY: ClassVar["StringOption"]

    raw: str | None = None
    present: bool = dataclasses.field(init=False, compare=False)

    def __post_init__(self) -> None:
        if self.raw is not None and not isinstance(self.raw, str):
            raise InvalidArgumentError(
                "text", f"expected str or None, got {type(self.raw).__name__}"
            )
        object.__setattr__(self, "present", self.check_presence(self.raw))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def of(cls, text: str | None) -> "StringOption":
        """Wrap a nullable string."""
        return cls(text)

    @classmethod
    def of_optional(cls, optional: "Option[str] | str | None") -> "StringOption":
        """Wrap the content of an :data:`Option` (or a native ``str | None``).

        ``Nothing()`` and ``None`` both map to :data:`EMPTY`.
        """
        if optional is None or isinstance(optional, Nothing):
            return EMPTY
        if isinstance(optional, Some):
            return cls.of(optional.value)
        return cls.of(optional)

    @staticmethod
    def check_presence(text: str | None) -> bool:
        """Blank-aware check: non-null, non-empty and not only whitespace."""
        return has_text(text)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_present(self) -> bool:
        return self.present

    def is_empty(self) -> bool:
        return not self.present

    def get(self) -> str | None:
        """Return the wrapped value as-is, even when it is ``None`` or blank.

        **Use with care**: no presence check is made, so the result may be
        ``None``. Prefer :meth:`or_else` / :meth:`or_else_throw`.
        """
        return self.raw

    # ------------------------------------------------------------------
    # Fallback extraction
    # ------------------------------------------------------------------

    def or_else(self, default: Any) -> Any:
        """Return the value if present, otherwise *default* (unvalidated)."""
        return self.raw if self.present else default

    def or_else_get(self, supplier: Callable[[], T]) -> "str | T":
        """Return the value if present, otherwise call *supplier* once.

        *supplier* is never called when the value is present.
        """
        if self.present:
            return self.raw  # type: ignore[return-value]
        return supplier()

    def or_else_throw(self, exception_supplier: Callable[[], BaseException]) -> str:
        """Return the value if present, otherwise raise ``exception_supplier()``.

        The produced exception is raised unchanged.
        """
        if not self.present:
            error = exception_supplier()
            logger.debug("string_option.absent_raise error=%s", type(error).__name__)
            raise error
        return self.raw  # type: ignore[return-value]

    def or_none(self) -> str | None:
        """Return the value if present, otherwise ``None``."""
        return self.raw if self.present else None

    # ------------------------------------------------------------------
    # Conditional side effects
    # ------------------------------------------------------------------

    def if_present(self, action: Callable[[str], Any]) -> None:
        if self.present:
            action(self.raw)  # type: ignore[arg-type]

    def if_present_or_else(
        self,
        action: Callable[[str], Any],
        empty_action: Callable[[], Any],
    ) -> None:
        """Call *action* with the value if present, else call *empty_action*."""
        if self.present:
            action(self.raw)  # type: ignore[arg-type]
        else:
            empty_action()

    # ------------------------------------------------------------------
    # Transformation
    # ------------------------------------------------------------------

    def map(self, mapping_function: Callable[[str], T | None]) -> "Option[T]":
        """Transform the value if present.

        A ``None`` result is returned as ``Nothing()``, not ``Some(None)``,
        matching how ``str | None`` optionals behave.

        Raises:
            InvalidArgumentError: *mapping_function* is ``None`` or not
                callable. Checked before presence.
        """
        if mapping_function is None or not callable(mapping_function):
            raise InvalidArgumentError("mapping_function", "a callable is required")
        if not self.present:
            return Nothing()
        return option_of(mapping_function(self.raw))  # type: ignore[arg-type]

    def filter(self, predicate: Callable[[str], bool]) -> "StringOption":
        """Keep this option when present and *predicate* accepts the value."""
        if self.present and predicate(self.raw):  # type: ignore[arg-type]
            return self
        return EMPTY

    # ------------------------------------------------------------------
    # Interop
    # ------------------------------------------------------------------

    def as_optional(self) -> "Option[str]":
        return Some(self.raw) if self.present else Nothing()  # type: ignore[arg-type]

    def stream(self) -> Iterator[str]:
        """Lazy single-pass iterator: one element when present, none otherwise."""
        if self.present:
            yield self.raw  # type: ignore[misc]

    def __iter__(self) -> Iterator[str]:
        return self.stream()

    def __bool__(self) -> bool:
        return self.present

    def __repr__(self) -> str:
        if self is EMPTY:
            return "StringOption.EMPTY"
        return f"StringOption({self.raw!r})"


EMPTY: Final[StringOption] = StringOption()
StringOption.EMPTY = EMPTY

__all__ = ["EMPTY", "StringOption"]
