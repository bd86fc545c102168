"""
Tests for the command-line interface
"""
import json

import pytest
from click.testing import CliRunner

from api.v1.dependencies import get_statement_store, get_analysis_backend
from cli import cli
from config import settings


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "STORAGE_BACKEND", "local")
    monkeypatch.setattr(settings, "LOCAL_STORAGE_PATH", str(tmp_path / "storage"))
    monkeypatch.setattr(settings, "ANALYSIS_BACKEND", "mock")
    get_statement_store.cache_clear()
    get_analysis_backend.cache_clear()

    yield CliRunner()

    get_statement_store.cache_clear()
    get_analysis_backend.cache_clear()


@pytest.fixture
def statement_file(tmp_path, sample_statement_payload):
    path = tmp_path / "january.json"
    path.write_text(json.dumps(sample_statement_payload), encoding="utf-8")
    return str(path)


class TestCli:
    """Test load/show/ask/clear commands."""

    def test_load_and_show(self, runner, statement_file):
        result = runner.invoke(cli, ["load", statement_file])
        assert result.exit_code == 0
        assert "Loaded january.json (3 transactions)" in result.output

        result = runner.invoke(cli, ["show"])
        assert result.exit_code == 0
        assert "135.25" in result.output

    def test_ask(self, runner, statement_file):
        runner.invoke(cli, ["load", statement_file])

        result = runner.invoke(cli, ["ask", "How is my income?"])

        assert result.exit_code == 0
        assert "3000.00" in result.output
        assert "Consider diversifying income sources" in result.output

    def test_ask_without_statement(self, runner):
        result = runner.invoke(cli, ["ask", "budget help"])

        assert result.exit_code == 1
        assert "No statement loaded" in result.output

    def test_load_unsupported_file(self, runner, tmp_path):
        path = tmp_path / "statement.xlsx"
        path.write_bytes(b"data")

        result = runner.invoke(cli, ["load", str(path)])

        assert result.exit_code == 1
        assert "Unsupported file type" in result.output

    def test_clear(self, runner, statement_file):
        runner.invoke(cli, ["load", statement_file])

        result = runner.invoke(cli, ["clear"])
        assert result.exit_code == 0

        assert runner.invoke(cli, ["show"]).exit_code == 1

    def test_load_non_object_rows(self, runner, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text('{"rows": ["x"], "total": 1}', encoding="utf-8")

        result = runner.invoke(cli, ["load", str(path)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error:" in result.output

    def test_show_with_corrupt_saved_statement(self, runner, tmp_path):
        storage = tmp_path / "storage"
        storage.mkdir()
        (storage / "current_statement.json").write_text('{"rows": [1], "total": 1}', encoding="utf-8")

        result = runner.invoke(cli, ["show"])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "corrupt" in result.output
