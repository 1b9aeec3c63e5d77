"""Default placeholder marker pair."""
from __future__ import annotations

from functools import cached_property

from textparser.core.delimiters import DelimiterSpec

from ..base import BaseDomainConfig


class DelimitersConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "delimiters"

    @cached_property
    def start(self) -> str:
        return self.section.get("start")

    @cached_property
    def end(self) -> str:
        return self.section.get("end")

    @cached_property
    def spec(self) -> DelimiterSpec:
        """Configured marker pair; raises ConfigError when either is empty."""
        return DelimiterSpec(self.start, self.end)


__all__ = ["DelimitersConfig"]
