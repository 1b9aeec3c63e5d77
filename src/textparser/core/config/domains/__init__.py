"""Domain-specific configuration accessors."""
from __future__ import annotations

from .delimiters import DelimitersConfig
from .logging import LoggingConfig
from .scanner import ScannerConfig

__all__ = ["DelimitersConfig", "LoggingConfig", "ScannerConfig"]
