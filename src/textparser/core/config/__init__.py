"""textparser configuration system.

Usage:
    from textparser.core.config import ConfigManager, DelimitersConfig

    config = ConfigManager(repo_root=Path("/path/to/project")).load_config()
    delimiters = DelimitersConfig(repo_root=Path("/path/to/project"))
    delimiters.spec  # DelimiterSpec("*(", ")*") by default
"""
from __future__ import annotations

from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config, is_cached
from .domains import DelimitersConfig, LoggingConfig, ScannerConfig
from .manager import ConfigManager

__all__ = [
    "ConfigManager",
    "BaseDomainConfig",
    "get_cached_config",
    "clear_all_caches",
    "is_cached",
    "DelimitersConfig",
    "ScannerConfig",
    "LoggingConfig",
]
