"""Centralized configuration caching.

Single source of truth for loaded configuration across all domain configs.
The cache key covers the repo root, the TEXTPARSER_* environment and the
mtimes of project config files, so edits are picked up without a manual
reset.
"""
from __future__ import annotations

import hashlib
import os
from pathlib import Path
from typing import Any, Dict, Optional

_config_cache: Dict[str, Dict[str, Any]] = {}


def _cache_key(repo_root: Path, validate: bool) -> str:
    from .manager import ENV_PREFIX, PROJECT_CONFIG_DIRNAME

    env_items = sorted(
        (k, os.environ.get(k, "")) for k in os.environ.keys() if k.startswith(ENV_PREFIX)
    )
    files: list[tuple[str, int, int]] = []
    config_dir = repo_root / PROJECT_CONFIG_DIRNAME / "config"
    if config_dir.is_dir():
        for p in sorted(config_dir.iterdir()):
            if p.suffix in {".yaml", ".yml"}:
                st = p.stat()
                files.append((p.name, int(st.st_mtime_ns), int(st.st_size)))
    fingerprint = hashlib.sha256(repr((env_items, files)).encode("utf-8")).hexdigest()[:12]
    suffix = ":validated" if validate else ":raw"
    return f"{repo_root}{suffix}:{fingerprint}"


def get_cached_config(repo_root: Optional[Path] = None, validate: bool = True) -> Dict[str, Any]:
    """Return the merged configuration for ``repo_root`` (cwd if None)."""
    from .manager import ConfigManager

    root = (Path(repo_root) if repo_root is not None else Path.cwd()).expanduser().resolve()
    key = _cache_key(root, validate)
    cached = _config_cache.get(key)
    if cached is None:
        cached = ConfigManager(root)._load_config_uncached(validate=validate)
        _config_cache[key] = cached
    return cached


def clear_all_caches() -> None:
    """Clear every cached configuration (useful for testing)."""
    from textparser.data import clear_caches

    _config_cache.clear()
    clear_caches()


def is_cached(repo_root: Optional[Path] = None, validate: bool = True) -> bool:
    root = (Path(repo_root) if repo_root is not None else Path.cwd()).expanduser().resolve()
    return _cache_key(root, validate) in _config_cache


__all__ = ["get_cached_config", "clear_all_caches", "is_cached"]
