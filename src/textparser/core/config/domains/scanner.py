"""Scanner defaults."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class ScannerConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "scan"

    @cached_property
    def strict_syntax_check(self) -> bool:
        return bool(self.section.get("strict_syntax_check", False))


__all__ = ["ScannerConfig"]
