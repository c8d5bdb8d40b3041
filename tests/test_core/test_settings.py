"""Tests for config loading."""

from __future__ import annotations

from pathlib import Path

from vfdwrap.core.config import VfdConfig, ensure_gitignore, get_state_dir, load_config


class TestLoadConfig:
    def test_defaults_when_no_config_file(self, tmp_path: Path):
        config = load_config(tmp_path)

        assert isinstance(config, VfdConfig)
        assert config.scan.test == r"\.vue$"
        assert config.scan.verbose is False
        assert config.write.backup_before_write is True
        assert "node_modules/" in config.exclude

    def test_loads_toml_sections(self, tmp_path: Path):
        toml_content = """\
[general]
exclude = ["vendor/"]

[scan]
test = "\\\\.vue\\\\.js$"
verbose = true

[write]
backup_before_write = false
"""
        (tmp_path / "vfdwrap.toml").write_text(toml_content)
        config = load_config(tmp_path)

        assert config.exclude == ["vendor/"]
        assert config.scan.test == r"\.vue\.js$"
        assert config.scan.verbose is True
        assert config.write.backup_before_write is False

    def test_partial_config_keeps_defaults(self, tmp_path: Path):
        (tmp_path / "vfdwrap.toml").write_text("[scan]\nverbose = true\n")
        config = load_config(tmp_path)

        assert config.scan.test == r"\.vue$"
        assert config.write.backup_before_write is True


class TestStateDir:
    def test_creates_state_dir(self, tmp_path: Path):
        state_dir = get_state_dir(tmp_path)

        assert state_dir == tmp_path / ".vfdwrap"
        assert state_dir.is_dir()

    def test_gitignore_created(self, tmp_path: Path):
        ensure_gitignore(tmp_path)
        assert (tmp_path / ".gitignore").read_text() == ".vfdwrap/\n"

    def test_gitignore_appended_once(self, tmp_path: Path):
        (tmp_path / ".gitignore").write_text("node_modules/")
        ensure_gitignore(tmp_path)
        ensure_gitignore(tmp_path)

        assert (tmp_path / ".gitignore").read_text() == "node_modules/\n.vfdwrap/\n"

    def test_gitignore_entry_without_slash_counts(self, tmp_path: Path):
        (tmp_path / ".gitignore").write_text(".vfdwrap\n")

        assert ensure_gitignore(tmp_path) is False
        assert (tmp_path / ".gitignore").read_text() == ".vfdwrap\n"

    def test_gitignore_reports_addition(self, tmp_path: Path):
        assert ensure_gitignore(tmp_path) is True
        assert ensure_gitignore(tmp_path) is False
