"""Tests for recourse.cli — command smoke tests via CliRunner."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from recourse import __version__
from recourse.cli.app import app

runner = CliRunner()


class TestRootApp:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert f"recourse {__version__}" in result.stdout

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "walkthrough" in result.output
        assert "divide" in result.output

    def test_bad_log_level(self):
        result = runner.invoke(app, ["--log-level", "chatty", "divide", "1", "1"])
        assert result.exit_code != 0

    def test_malformed_env_setting(self, monkeypatch):
        monkeypatch.setenv("RECOURSE_FALLBACK", "abc")
        result = runner.invoke(app, ["divide", "1", "1"])
        assert result.exit_code == 2
        assert isinstance(result.exception, SystemExit)
        assert "configuration" in result.output


class TestWalkthroughCommand:
    def test_prints_transcript(self):
        result = runner.invoke(app, ["walkthrough"])
        assert result.exit_code == 0
        assert "Success: 5" in result.stdout
        assert "Final Result: 10" in result.stdout
        assert "Computed Fallback: -1" in result.stdout
        assert 'Mapped Error Result: Err("Custom error: Division by zero")' in result.stdout

    def test_fallback_option(self):
        result = runner.invoke(app, ["walkthrough", "--fallback", "7"])
        assert result.exit_code == 0
        assert "Computed Fallback: 7" in result.stdout

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("RECOURSE_MULTIPLIER", "4")
        result = runner.invoke(app, ["walkthrough"])
        assert result.exit_code == 0
        assert "Mapped Value Result: Ok(20)" in result.stdout

    def test_chained_overflow_exits_nonzero(self):
        result = runner.invoke(app, ["walkthrough", "--multiplier", str(2**62)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Error" in result.output
        assert "Integer overflow on multiplication" in result.output

    def test_chained_overflow_is_logged(self):
        result = runner.invoke(
            app, ["--json-logs", "walkthrough", "--multiplier", str(2**62)]
        )
        assert isinstance(result.exception, SystemExit)
        assert "walkthrough_stopped" in result.output

    def test_out_of_range_multiplier(self):
        result = runner.invoke(app, ["walkthrough", "--multiplier", str(2**63)])
        assert result.exit_code == 2
        assert isinstance(result.exception, SystemExit)
        assert "VALIDATION" in result.output

    def test_out_of_range_multiplier_from_env(self, monkeypatch):
        monkeypatch.setenv("RECOURSE_MULTIPLIER", str(2**63))
        result = runner.invoke(app, ["walkthrough"])
        assert result.exit_code == 2
        assert isinstance(result.exception, SystemExit)


class TestDivideCommand:
    def test_success(self):
        result = runner.invoke(app, ["divide", "10", "2"])
        assert result.exit_code == 0
        assert "outcome: Ok(5)" in result.stdout
        assert "value: 5" in result.stdout

    def test_failure_is_not_an_error_exit(self):
        result = runner.invoke(app, ["divide", "10", "0"])
        assert result.exit_code == 0
        assert "outcome: Err(Division by zero)" in result.stdout
        assert "value: -1" in result.stdout

    def test_failure_logged_at_info(self):
        result = runner.invoke(app, ["--log-level", "INFO", "--json-logs", "divide", "10", "0"])
        assert result.exit_code == 0
        assert result.exception is None
        assert "outcome: Err(Division by zero)" in result.output
        assert "division_failed" in result.output

    def test_custom_fallback(self):
        result = runner.invoke(app, ["divide", "10", "0", "--fallback", "0"])
        assert "value: 0" in result.stdout

    def test_negative_operands(self):
        result = runner.invoke(app, ["divide", "--", "-7", "2"])
        assert result.exit_code == 0
        assert "outcome: Ok(-3)" in result.stdout

    def test_json(self):
        result = runner.invoke(app, ["divide", "10", "0", "--json"])
        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["ok"] is False
        assert payload["error"]["code"] == "DIVIDE_BY_ZERO"
        assert payload["value_or_fallback"] == -1

    def test_out_of_range_operand(self):
        result = runner.invoke(app, ["divide", str(2**63), "1"])
        assert result.exit_code == 2
