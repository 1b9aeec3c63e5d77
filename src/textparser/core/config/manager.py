"""
textparser configuration management (YAML layers + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import jsonschema
import yaml

from textparser.core.exceptions import ConfigError
from textparser.core.utils.merge import deep_merge as _deep_merge
from textparser.data import get_data_path, read_yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "TEXTPARSER_"
PROJECT_CONFIG_DIRNAME = ".textparser"
SCHEMA_FILE = "config.schema.yaml"


class ConfigManager:
    """Load, merge, and validate textparser configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: TEXTPARSER_<section>__<key>
    2. Project config: <repo-root>/.textparser/config/*.yaml (alphabetical order)
    3. Bundled defaults: textparser.data/config/*.yaml (alphabetical order)
    """

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root) if repo_root is not None else Path.cwd()
        self.core_config_dir = get_data_path("config")
        self.project_config_dir = self.repo_root / PROJECT_CONFIG_DIRNAME / "config"

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge dictionaries. Delegates to shared implementation."""
        return _deep_merge(base, override)

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            # Fail closed: configuration must never silently ignore invalid YAML.
            raise ConfigError(
                f"Invalid YAML in {path}: {exc}", context={"path": str(path)}
            ) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file {path} must contain a mapping", context={"path": str(path)}
            )
        return data

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        if not directory.is_dir():
            return cfg
        files = sorted([*directory.glob("*.yaml"), *directory.glob("*.yml")])
        for path in files:
            logger.debug("Loading config layer %s", path)
            cfg = self.deep_merge(cfg, self.load_yaml(path))
        return cfg

    # ========== Environment overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        # Markers may legitimately be whitespace-sensitive; keep them verbatim.
        return value

    def _parse_env_key(self, raw: str) -> List[str]:
        segs = raw.split("__")
        if any(seg == "" for seg in segs):
            raise ConfigError(
                f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
                context={"key": ENV_PREFIX + raw},
            )
        return [seg.lower() for seg in segs]

    def _iter_env_overrides(self) -> Iterator[Tuple[List[str], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX):]
            if "__" not in raw:
                # Only section__key paths are config overrides.
                continue
            yield self._parse_env_key(raw), self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[str], value: Any) -> None:
        cur = root
        for part in path[:-1]:
            nxt = cur.get(part)
            if not isinstance(nxt, dict):
                nxt = {}
                cur[part] = nxt
            cur = nxt
        cur[path[-1]] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, typed_value in self._iter_env_overrides():
            logger.debug("Applying env override %s", ".".join(path))
            self._set_nested(cfg, path, typed_value)

    # ========== Validation ==========

    def validate_schema(self, config: Dict[str, Any]) -> None:
        schema = read_yaml("schemas", SCHEMA_FILE)
        validator = jsonschema.Draft202012Validator(schema)
        errors = sorted(validator.iter_errors(config), key=lambda e: list(e.path))
        if errors:
            details = [
                f"{'.'.join(str(p) for p in err.path) or '<root>'}: {err.message}"
                for err in errors
            ]
            raise ConfigError(
                "Invalid textparser configuration: " + "; ".join(details),
                context={"errors": details},
            )

    # ========== Loading ==========

    def _load_config_uncached(self, validate: bool = True) -> Dict[str, Any]:
        cfg: Dict[str, Any] = {}
        cfg = self._load_directory(self.core_config_dir, cfg)
        cfg = self._load_directory(self.project_config_dir, cfg)
        self.apply_env_overrides(cfg)
        if validate:
            self.validate_schema(cfg)
        return cfg

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load configuration using the centralized cache.

        Returned dict should be treated as immutable.
        """
        from textparser.core.config.cache import get_cached_config

        return get_cached_config(repo_root=self.repo_root, validate=validate)

    def get_all(self) -> Dict[str, Any]:
        return self.load_config()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value by dot-notation key.

        Example:
            >>> manager.get('delimiters.start')
            '*('
        """
        cur: Any = self.load_config()
        for part in key.split("."):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return cur


__all__ = ["ConfigManager", "ENV_PREFIX", "PROJECT_CONFIG_DIRNAME"]
