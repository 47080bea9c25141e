"""Tests for the demonstration driver."""

import json
import logging
import pytest
from ringguard.demo import main, run_demo, SAMPLE_CELLS, RESULT_LABEL


class TestDemoDriver:
    """Test command-line behavior of the demonstration."""

    def test_default_run(self, capsys):
        """No arguments: labeled sample result and exit status 0."""
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.strip() == "Maximum lights that can remain working: 4"

    def test_sample_cells(self):
        """Built-in sample is the ten-light ring."""
        assert SAMPLE_CELLS == [1, 1, 0, 1, 1, 1, 0, 1, 1, 1]

    @pytest.mark.parametrize("text,expected", [
        ("1111", 4),
        ("0000", 0),
        ("1,0,1,1,1", 3),
    ])
    def test_custom_cells(self, capsys, text, expected):
        """--cells evaluates the given ring."""
        assert main(["--cells", text]) == 0
        assert capsys.readouterr().out.strip() == f"{RESULT_LABEL}: {expected}"

    def test_spread_rate_flag(self, capsys):
        """--spread-rate changes the answer."""
        assert main(["--spread-rate", "1"]) == 0
        assert capsys.readouterr().out.strip() == f"{RESULT_LABEL}: 5"

    def test_json_output(self, capsys):
        """--json prints the full plan."""
        assert main(["--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["survivors"] == 4
        assert data["days_elapsed"] == 2

    def test_plan_logging(self, capsys, caplog):
        """--plan logs each defense step."""
        caplog.set_level(logging.INFO)
        assert main(["--plan"]) == 0
        assert "gap 5: remaining=5 -> stabilized" in caplog.text
        assert "gap 3: remaining=-1 -> skipped" in caplog.text

    @pytest.mark.parametrize("argv", [["--cells", "1021"], ["--spread-rate", "-1"]])
    def test_invalid_input_exit_code(self, capsys, caplog, argv):
        """Validation errors are logged and give exit status 1."""
        assert main(argv) == 1
        assert "Demonstration failed" in caplog.text
        assert capsys.readouterr().out == ""

    def test_run_demo_returns_plan(self):
        """run_demo exposes the plan for programmatic use."""
        plan = run_demo([0, 1, 1, 1])
        assert plan.survivors == 2
