"""Domain errors — invalid values and arguments."""

from __future__ import annotations

from typing import Any

from stroption.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a value-level rule is violated."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Input data does not meet validation rules.

    ``errors`` is a list of field-level validation failures.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["errors"] = self.errors
        return base


class InvalidArgumentError(ValidationError, ValueError):
    """An argument passed to an operation is missing or of the wrong kind.

    Also a :class:`ValueError`, so callers that only know the builtin
    hierarchy can still catch it.
    """

    default_code = "invalid_argument"

    def __init__(self, argument: str, reason: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid argument '{argument}': {reason}", **kwargs)
        self.argument = argument
        self.reason = reason


__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
