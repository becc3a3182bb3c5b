"""Tests for the command-line interface."""

import json

import pytest
from typer.testing import CliRunner

from codeoutline import __version__
from codeoutline.cli import CLIArgumentError, app, parse_options
from codeoutline.formatter import OutputFormat


runner = CliRunner()


@pytest.fixture
def project(tmp_path, monkeypatch):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.ts").write_text(
        "class App {\n  start() {\n    setTimeout(() => {}, 10);\n  }\n}\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CODE_OUTLINE_FORMAT", raising=False)
    return tmp_path


def test_parse_options():
    """Test valid option values."""
    options = parse_options("json", "5", named_only=True)
    assert options.format is OutputFormat.JSON
    assert options.depth == 5
    assert options.named_only is True
    assert options.llmtext is False


def test_parse_options_llmtext_overrides_format():
    """Test --llmtext wins over --format."""
    options = parse_options("yaml", "Infinity", llmtext=True)
    assert options.format is OutputFormat.LLMTEXT
    assert options.depth is None
    assert options.llmtext is True


def test_parse_options_invalid_format():
    """Test invalid formats raise CLIArgumentError."""
    with pytest.raises(CLIArgumentError, match="^Invalid format 'invalid'"):
        parse_options("invalid", "Infinity")


def test_parse_options_invalid_depth():
    """Test invalid depths raise CLIArgumentError."""
    with pytest.raises(CLIArgumentError, match="Invalid depth"):
        parse_options("json", "0")


def test_cli_ascii(project):
    """Test the default ASCII output."""
    result = runner.invoke(app, ["src/**/*.ts"])

    assert result.exit_code == 0
    assert "app.ts" in result.stdout
    assert "class App [L1-5]" in result.stdout
    assert "method start [L2-4]" in result.stdout
    assert "<anonymous>" not in result.stdout


def test_cli_all_flag(project):
    """Test --all keeps anonymous constructs."""
    result = runner.invoke(app, ["src/**/*.ts", "--all"])

    assert result.exit_code == 0
    assert "function <anonymous>" in result.stdout


def test_cli_json_depth(project):
    """Test JSON output with a depth limit."""
    result = runner.invoke(app, ["src/**/*.ts", "--format", "json", "--depth", "1"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    cls = data[0]["outline"]["children"][0]
    assert cls["name"] == "App"
    assert "children" not in cls


def test_cli_llmtext(project):
    """Test --llmtext overrides --format."""
    result = runner.invoke(app, ["src/**/*.ts", "-f", "yaml", "--llmtext"])

    assert result.exit_code == 0
    assert result.stdout.startswith("Code outline.")


def test_cli_format_from_env(project, monkeypatch):
    """Test CODE_OUTLINE_FORMAT sets the default format."""
    monkeypatch.setenv("CODE_OUTLINE_FORMAT", "json")
    result = runner.invoke(app, ["src/**/*.ts"])

    assert result.exit_code == 0
    assert json.loads(result.stdout)[0]["outline"]["kind"] == "program"


def test_cli_missing_pattern(project):
    """Test a missing pattern is an argument error."""
    result = runner.invoke(app, [])

    assert result.exit_code == 1
    assert "Error: No file pattern provided" in result.output


def test_cli_invalid_depth(project):
    """Test an invalid depth is an argument error."""
    result = runner.invoke(app, ["src/**/*.ts", "--depth", "0"])

    assert result.exit_code == 1
    assert "Invalid depth" in result.output


def test_cli_invalid_format(project):
    """Test an invalid format is an argument error."""
    result = runner.invoke(app, ["src/**/*.ts", "--format", "xml"])

    assert result.exit_code == 1
    assert "Invalid format" in result.output
    assert result.output.count("Invalid format") == 1


def test_cli_no_files(project):
    """Test an empty glob exits with an error."""
    result = runner.invoke(app, ["nothing/**/*.js"])

    assert result.exit_code == 1
    assert "No files found matching pattern" in result.output


def test_cli_version():
    """Test --version prints and exits."""
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout
