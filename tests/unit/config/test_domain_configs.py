"""Tests for BaseDomainConfig and the delimiter, scanner and logging accessors."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from textparser.core.config import BaseDomainConfig, DelimitersConfig, LoggingConfig, ScannerConfig
from textparser.core.delimiters import DelimiterSpec
from textparser.core.exceptions import ConfigError


def _write(root: Path, content: str) -> None:
    config_dir = root / ".textparser" / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "project.yaml").write_text(content, encoding="utf-8")


class TestBaseDomainConfig:
    def test_base_config_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            BaseDomainConfig()  # type: ignore[abstract]

    def test_subclass_reads_its_section(self, tmp_path: Path) -> None:
        _write(tmp_path, "custom:\n  key: value\n")

        class CustomConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "custom"

        cfg = CustomConfig(repo_root=tmp_path)
        assert cfg.section == {"key": "value"}
        assert cfg.repo_root == tmp_path

    def test_missing_section_is_empty(self, tmp_path: Path) -> None:
        class AbsentConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "absent"

        assert AbsentConfig(repo_root=tmp_path).section == {}


class TestDelimitersConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        cfg = DelimitersConfig(repo_root=tmp_path)
        assert (cfg.start, cfg.end) == ("*(", ")*")
        assert cfg.spec == DelimiterSpec("*(", ")*")

    def test_project_overrides(self, tmp_path: Path) -> None:
        _write(tmp_path, "delimiters:\n  start: '${'\n  end: '}'\n")
        assert DelimitersConfig(repo_root=tmp_path).spec == DelimiterSpec("${", "}")

    def test_spec_parses_text(self, tmp_path: Path) -> None:
        cfg = DelimitersConfig(repo_root=tmp_path)
        assert cfg.spec.parse("Hi *(name)*", {"name": "Ann"}) == "Hi Ann"

    def test_invalid_pair_without_validation_raises(self, tmp_path: Path) -> None:
        class UnvalidatedDelimiters(DelimitersConfig):
            def __init__(self, repo_root: Path) -> None:
                super().__init__(repo_root)
                self._config = {"delimiters": {"start": "", "end": ")*"}}

        with pytest.raises(ConfigError):
            UnvalidatedDelimiters(tmp_path).spec


class TestScannerConfig:
    def test_default_is_lenient(self, tmp_path: Path) -> None:
        assert ScannerConfig(repo_root=tmp_path).strict_syntax_check is False

    def test_project_override(self, tmp_path: Path) -> None:
        _write(tmp_path, "scan:\n  strict_syntax_check: true\n")
        assert ScannerConfig(repo_root=tmp_path).strict_syntax_check is True


class TestLoggingConfig:
    def test_default_level(self, tmp_path: Path) -> None:
        cfg = LoggingConfig(repo_root=tmp_path)
        assert cfg.level_name == "WARNING"
        assert cfg.level == logging.WARNING

    def test_lowercase_level_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TEXTPARSER_LOGGING__LEVEL", "info")
        cfg = LoggingConfig(repo_root=tmp_path)
        assert cfg.level_name == "INFO"
        assert cfg.level == logging.INFO
