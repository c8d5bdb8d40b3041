"""Tests for the vfdwrap command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from vfdwrap.cli.main import cli

CLASS_COMPONENT = '''\
import { Component, Vue } from "vue-facing-decorator";
let Counter = class Counter extends Vue {};
const _sfc_main = Counter;
export default _sfc_main;
'''

OPTIONS_COMPONENT = 'export default {\n  name: "Options",\n};\n'


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    (tmp_path / "Counter.vue").write_text(CLASS_COMPONENT)
    (tmp_path / "Options.vue").write_text(OPTIONS_COMPONENT)
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestScanCommand:
    def test_json_report(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["scan", ".", "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["total_files"] == 2
        assert data["class_components"] == 1
        by_name = {Path(f["file"]).name: f for f in data["files"]}
        assert by_name["Counter.vue"]["score"] == 80
        assert by_name["Counter.vue"]["early_exit"] is True
        assert by_name["Options.vue"]["is_class_component"] is False

    def test_table_report(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["scan", "--verbose"])

        assert result.exit_code == 0
        assert "1 class components" in result.output

    def test_no_files(self, runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.chdir(tmp_path)
        result = runner.invoke(cli, ["scan"])

        assert result.exit_code == 0
        assert "No matching component files" in result.output


class TestTransformCommand:
    def test_stdin_to_stdout(self, runner: CliRunner):
        result = runner.invoke(cli, ["transform"], input=CLASS_COMPONENT)

        assert result.exit_code == 0
        assert "const _sfc_main = toNative(Counter);" in result.output

    def test_stdin_passthrough(self, runner: CliRunner):
        result = runner.invoke(cli, ["transform", "-"], input=OPTIONS_COMPONENT)

        assert result.exit_code == 0
        assert result.output == OPTIONS_COMPONENT

    def test_check_stdin(self, runner: CliRunner):
        assert runner.invoke(cli, ["transform", "--check"], input=CLASS_COMPONENT).exit_code == 1
        assert runner.invoke(cli, ["transform", "--check"], input=OPTIONS_COMPONENT).exit_code == 0

    def test_file_to_stdout_leaves_file(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["transform", "Counter.vue"])

        assert result.exit_code == 0
        assert "toNative(Counter)" in result.output
        assert (project / "Counter.vue").read_text() == CLASS_COMPONENT

    def test_check_directory(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["transform", "--check", "."])

        assert result.exit_code == 1
        assert "Counter.vue" in result.output

    def test_write_then_undo(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["transform", "--write", "."])

        assert result.exit_code == 0
        assert "toNative(Counter)" in (project / "Counter.vue").read_text()
        assert (project / "Options.vue").read_text() == OPTIONS_COMPONENT
        assert ".vfdwrap/" in (project / ".gitignore").read_text()

        result = runner.invoke(cli, ["undo", "--last"])

        assert result.exit_code == 0
        assert (project / "Counter.vue").read_text() == CLASS_COMPONENT

    def test_missing_path(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["transform", "Missing.vue"])
        assert result.exit_code != 0


class TestUndoCommand:
    def test_nothing_to_list(self, runner: CliRunner, project: Path):
        result = runner.invoke(cli, ["undo", "--list"])

        assert result.exit_code == 0
        assert "No undoable rewrites" in result.output

    def test_undo_single_file(self, runner: CliRunner, project: Path):
        runner.invoke(cli, ["transform", "--write", "Counter.vue"])

        result = runner.invoke(cli, ["undo", "Counter.vue"])

        assert result.exit_code == 0
        assert (project / "Counter.vue").read_text() == CLASS_COMPONENT


class TestUnreadableFiles:
    @pytest.fixture
    def broken(self, project: Path) -> Path:
        path = project / "Broken.vue"
        path.write_bytes(b"\xff\xfe")
        return path

    def test_write_continues_past_broken_file(self, runner: CliRunner, project: Path, broken: Path):
        result = runner.invoke(cli, ["transform", "--write", "."])

        assert result.exception is None
        assert result.exit_code == 0
        assert "toNative(Counter)" in (project / "Counter.vue").read_text()
        assert broken.read_bytes() == b"\xff\xfe"
        assert "1 files wrapped" in result.output

    def test_stdout_skips_broken_file(self, runner: CliRunner, project: Path, broken: Path):
        result = runner.invoke(cli, ["transform", "Broken.vue", "Counter.vue"])

        assert result.exception is None
        assert "toNative(Counter)" in result.output

    def test_check_skips_broken_file(self, runner: CliRunner, project: Path, broken: Path):
        result = runner.invoke(cli, ["transform", "--check", "Broken.vue", "Options.vue"])

        assert result.exception is None
        assert result.exit_code == 0
