"""Unit tests for optfile.config."""

from pathlib import Path

import pytest

from optfile.config import OptfileConfig, load_config
from optfile.errors import ConfigurationError


class TestLoadConfig:
    def test_defaults_without_file(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg == OptfileConfig(root=tmp_path)
        assert cfg.encoding == "utf-8"
        assert cfg.verbose is False
        assert cfg.log_format == "[OptionFileParser] %(message)s"

    def test_reads_section(self, tmp_path: Path):
        (tmp_path / "optfile.toml").write_text(
            '[optfile]\nencoding = "latin-1"\nverbose = true\nlog_format = "%(levelname)s %(message)s"\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.encoding == "latin-1"
        assert cfg.verbose is True
        assert cfg.log_format == "%(levelname)s %(message)s"

    def test_found_upward(self, tmp_path: Path):
        (tmp_path / "optfile.toml").write_text("[optfile]\nverbose = true\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        cfg = load_config(nested)
        assert cfg.root == tmp_path
        assert cfg.verbose is True

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        (tmp_path / "optfile.toml").write_text("[optfile]\nverbose = true\n")
        monkeypatch.setenv("OPTFILE_VERBOSE", "no")
        monkeypatch.setenv("OPTFILE_ENCODING", "utf-16")
        cfg = load_config(tmp_path)
        assert cfg.verbose is False
        assert cfg.encoding == "utf-16"

    @pytest.mark.parametrize("value", ["1", "true", "YES", " on "])
    def test_env_verbose_truthy(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, value):
        monkeypatch.setenv("OPTFILE_VERBOSE", value)
        assert load_config(tmp_path).verbose is True

    def test_invalid_toml(self, tmp_path: Path):
        (tmp_path / "optfile.toml").write_text("[optfile\n")
        with pytest.raises(ConfigurationError, match="optfile.toml"):
            load_config(tmp_path)
