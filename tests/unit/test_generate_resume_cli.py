"""Unit tests for the generate_resume.py commands that need no browser."""

import importlib.util
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

SCRIPT_PATH = Path(__file__).parents[2] / "scripts" / "generate_resume.py"

runner = CliRunner()


@pytest.fixture
def cli(tmp_path, monkeypatch):
    """The CLI module with logs and outputs redirected to tmp_path."""
    spec = importlib.util.spec_from_file_location("generate_resume", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
    monkeypatch.setattr(module, "OUTPUT_PATH", tmp_path / "results")
    yield module
    logger.remove()
    logger.add(sys.stderr)


@pytest.mark.unit
def test_templates_command_logs_to_session_dir(cli, tmp_path):
    result = runner.invoke(cli.app, ["templates"])

    assert result.exit_code == 0
    assert "* template1" in result.output
    log_files = list((tmp_path / "logs").glob("templates_*/template.log"))
    assert len(log_files) == 1
    assert "Templates loaded" in log_files[0].read_text()


@pytest.mark.unit
def test_print_command_logs_to_session_dir(cli, tmp_path, monkeypatch):
    """print opens the rendered document and logs under the run directory."""
    opened = []
    monkeypatch.setattr(cli, "print_fallback", opened.append)
    data_path = tmp_path / "ann.json"
    data_path.write_text('{"personalInfo": {"name": "Ann Lee"}}', encoding="utf-8")

    result = runner.invoke(cli.app, ["print", str(data_path)])

    assert result.exit_code == 0
    assert "Ann Lee" in opened[0]
    assert list((tmp_path / "logs").glob("print_*/template.log"))


@pytest.mark.unit
def test_render_json_null_exits_cleanly(cli, tmp_path):
    """A JSON null resume is reported as missing data, not a traceback."""
    data_path = tmp_path / "empty.json"
    data_path.write_text("null", encoding="utf-8")

    result = runner.invoke(cli.app, ["render", str(data_path)])

    assert result.exit_code == 1
    assert not isinstance(result.exception, AttributeError)
    assert not (tmp_path / "results" / "empty.html").exists()
