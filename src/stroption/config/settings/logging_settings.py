"""Config settings – LoggingSettings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from stroption.config.settings.base import Settings
from stroption.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class LoggingSettings(Settings):
    """Logging configuration, read from ``STROPTION_LOG_*`` variables."""

    _prefix: ClassVar[str] = "STROPTION_LOG"

    level: str = "INFO"
    json: bool = True

    def _validate(self) -> None:
        self.level = self.level.strip().upper()
        if not isinstance(logging.getLevelNamesMapping().get(self.level), int):
            raise InvalidSettingValueError("level", self.level, "unknown log level name")

    @property
    def level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.level]


__all__ = ["LoggingSettings"]
