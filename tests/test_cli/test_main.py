from typer.testing import CliRunner

from ablscope.main import app

runner = CliRunner()


def test_version_flag():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "ablscope 0.1.0" in result.output


def test_no_args_shows_help():
    result = runner.invoke(app, [])
    assert "Find the OpenEdge project" in result.output


def test_debug_flag(tmp_path):
    """--debug flag should be accepted and not error."""
    result = runner.invoke(app, ["--debug", "projects", "--workspace", str(tmp_path)])
    assert result.exit_code == 0
