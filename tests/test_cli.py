"""
Unit tests for CLI commands.

Tests cover:
- validate command
- run command
- states command
"""

import json
import textwrap

from typer.testing import CliRunner

from uitransition.cli.app import app

runner = CliRunner()

SCENARIO = """
name: cli-demo
transition:
  in: false
  timeout: 5
  entered_hint: shown
timeline:
  - at: 0
    in: true
"""


def _scenario_file(tmp_path, body: str = SCENARIO):
    fp = tmp_path / "demo.yaml"
    fp.write_text(textwrap.dedent(body), encoding="utf-8")
    return fp


class TestValidateCommand:
    def test_validate_success(self, tmp_path):
        _scenario_file(tmp_path)

        result = runner.invoke(app, ["validate", str(tmp_path)])

        assert result.exit_code == 0
        assert "Loaded 1 scenario(s)" in result.stdout

    def test_validate_missing_path(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "Path not found" in result.stdout

    def test_validate_empty_folder(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path)])

        assert result.exit_code == 1
        assert "No scenarios found" in result.stdout

    def test_validate_invalid_timeout(self, tmp_path):
        _scenario_file(tmp_path, "transition:\n  timeout: -3\n")

        result = runner.invoke(app, ["validate", str(tmp_path)])

        assert result.exit_code == 1
        assert "Failed to load scenario" in result.stdout


class TestRunCommand:
    def test_run_json(self, tmp_path):
        fp = _scenario_file(tmp_path)

        result = runner.invoke(app, ["run", str(fp), "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["scenario"] == "cli-demo"
        assert payload["final_state"] == "entered"
        assert payload["final_hint"] == "shown"
        assert [entry["event"] for entry in payload["trace"]] == [
            "init",
            "update",
            "on_enter",
            "on_entering",
            "on_entered",
        ]

    def test_run_table(self, tmp_path):
        fp = _scenario_file(tmp_path)

        result = runner.invoke(app, ["run", str(fp)])

        assert result.exit_code == 0
        assert "Final state: entered" in result.stdout


def test_states_lists_all_states():
    result = runner.invoke(app, ["states"])

    assert result.exit_code == 0
    for name in ("unmounted", "exited", "entering", "entered", "exiting"):
        assert name in result.stdout
