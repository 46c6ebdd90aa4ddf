"""Tests for the projects command."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from ablscope.core.config import get_settings_path
from ablscope.main import app

runner = CliRunner()


class TestProjects:
    def test_lists_projects(self, tmp_path: Path, write_project):
        write_project("a", name="Alpha")
        write_project("b", name="Beta", profiles=[{"name": "dev", "value": {}}])
        result = runner.invoke(app, ["projects", "--workspace", str(tmp_path)])
        assert result.exit_code == 0
        assert "Alpha" in result.output
        assert "Beta" in result.output
        assert "dev" in result.output

    def test_empty_workspace(self, tmp_path: Path):
        result = runner.invoke(app, ["projects", "--workspace", str(tmp_path)])
        assert result.exit_code == 0
        assert "No projects found" in result.output

    def test_warns_on_unknown_default(self, tmp_path: Path, write_project):
        write_project("a", name="Alpha")
        get_settings_path(tmp_path).write_text("default_project: Ghost\n")
        result = runner.invoke(app, ["projects", "--workspace", str(tmp_path)])
        assert result.exit_code == 0
        assert "Ghost" in result.output
        assert "not loaded" in result.output

    def test_bad_settings_file(self, tmp_path: Path):
        get_settings_path(tmp_path).write_text("- not\n- a mapping\n")
        result = runner.invoke(app, ["projects", "--workspace", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error loading workspace settings" in result.output

    def test_roots_shown_relative_to_workspace(self, tmp_path: Path, write_project):
        write_project("apps/billing", name="Billing")
        result = runner.invoke(app, ["projects", "--workspace", str(tmp_path)])
        assert result.exit_code == 0
        assert "apps/billing" in result.output.replace("\\", "/")

    def test_malformed_settings_yaml(self, tmp_path: Path):
        get_settings_path(tmp_path).write_text("default_project: [unclosed\n")
        result = runner.invoke(app, ["projects", "--workspace", str(tmp_path)])
        assert result.exit_code == 1
        assert "Error loading workspace settings" in result.output
