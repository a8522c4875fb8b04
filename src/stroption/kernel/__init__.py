"""Kernel – the string option type, its optional sum type and errors."""

from stroption.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidArgumentError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidArgumentError",
    "ValidationError",
]
