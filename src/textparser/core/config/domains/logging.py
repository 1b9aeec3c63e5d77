"""Logging configuration for the textparser CLI."""
from __future__ import annotations

import logging
from functools import cached_property

from ..base import BaseDomainConfig


class LoggingConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "logging"

    @cached_property
    def level_name(self) -> str:
        return str(self.section.get("level", "WARNING") or "WARNING").upper()

    @cached_property
    def level(self) -> int:
        return logging.getLevelName(self.level_name)

    def configure(self, *, verbose: bool = False) -> None:
        """Install a stderr handler on the root logger."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else self.level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )


__all__ = ["LoggingConfig"]
