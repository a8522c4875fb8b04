"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError          (domain.py)
    │   └── ValidationError
    │       └── InvalidArgumentError   (also a ValueError)
    └── ApplicationError     (application.py)
        └── ConfigError      (stroption.config.validation)
"""

from stroption.kernel.errors.application import ApplicationError
from stroption.kernel.errors.base import BaseError
from stroption.kernel.errors.domain import (
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
