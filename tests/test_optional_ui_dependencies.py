"""Regression tests for running without Rich.

Bootstrap commands, the harness and the table commands must all fall
back to plain ``print`` output when Rich cannot be imported.
"""

from __future__ import annotations

import pytest

from realtype.cli import exit_codes, harness
from realtype.cli.app import main
from realtype.cli.console import get_rich_console
from realtype.exceptions import EnvironmentError


class _BadRepr:
    def __repr__(self) -> str:
        raise RuntimeError("no repr")


@pytest.mark.usefixtures("without_rich")
class TestWithoutRich:
    def test_rich_console_raises_environment_error(self) -> None:
        with pytest.raises(EnvironmentError, match="rich is not installed"):
            get_rich_console()

    def test_help_works(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_version_works(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_harness_plain_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        report = harness.HarnessReport()
        report.test_block("plain")
        report.test("passes", 1, 1)
        report.test("fails", [1, 2], [1, 3])

        out = capsys.readouterr().out
        assert out.splitlines() == [
            "# plain",
            "",
            "  [OK] passes",
            "  ",
            "  [FAIL] fails",
            "  Expected:",
            "  [1, 3]",
            "  Actual:",
            "  [1, 2]",
            "  ",
        ]

    def test_selfcheck_works(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["selfcheck"]) == exit_codes.SUCCESS
        assert "[OK] Boolean" in capsys.readouterr().out

    def test_classify_plain_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["classify", "[null, 1]"]) == exit_codes.SUCCESS

        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "realtype classify"
        assert lines[2].split() == ["Value", "Type", "Real", "type"]
        assert lines[4].split() == ["None", "object", "null"]
        assert lines[5].split() == ["1", "number", "number"]

    def test_count_plain_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["count", "[true, false]"]) == exit_codes.SUCCESS

        lines = capsys.readouterr().out.splitlines()
        assert lines[-1].split() == ["boolean", "2"]

    def test_failing_repr_is_reported(self, capsys: pytest.CaptureFixture[str]) -> None:
        report = harness.HarnessReport()

        assert report.test("bad", _BadRepr(), 1) is False

        out = capsys.readouterr().out
        assert "Actual:" in out
        assert "<repr-error 'no repr'>" in out
