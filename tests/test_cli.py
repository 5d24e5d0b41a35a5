"""Tests for the command line interface."""

import json

import pytest

from salary_tracker.cli import SalaryTrackerCli


@pytest.fixture
def cli():
    return SalaryTrackerCli()


class TestCalcCommand:
    def test_calc_text(self, cli, capsys):
        assert cli.run(["calc", "--total", "5000", "--advance", "2000"]) == 0
        out = capsys.readouterr().out
        assert "Partially Paid" in out
        assert "3,000.00" in out
        assert "40.00%" in out

    def test_calc_json(self, cli, capsys):
        assert cli.run(["calc", "--total", "3000", "--advance", "1000", "--json"]) == 0
        payload = json.loads(capsys.readouterr().out)
        assert payload["remainingSalaryPayable"] == 2000
        assert payload["paymentStatus"] == "Partially Paid"
        assert payload["advancePercentage"] == 33.33

    def test_calc_rejects_advance_over_total(self, cli, capsys):
        assert cli.run(["calc", "--total", "3000", "--advance", "5000"]) == 1
        assert "ADVANCE_EXCEEDS_TOTAL" in capsys.readouterr().err

    def test_calc_rejects_non_numeric(self, cli):
        with pytest.raises(SystemExit):
            cli.run(["calc", "--total", "abc", "--advance", "0"])


class TestPreviewCommand:
    def test_preview_valid(self, cli, capsys):
        assert cli.run(["preview", "--total", "4000", "--advance", "4000"]) == 0
        assert "Paid" in capsys.readouterr().out

    def test_preview_invalid(self, cli, capsys):
        assert cli.run(["preview", "--total", "3000", "--advance", "5000"]) == 2
        assert "Invalid - Advance exceeds total" in capsys.readouterr().out


def test_no_command_prints_help(cli, capsys):
    assert cli.run([]) == 1
    assert "usage" in capsys.readouterr().out
