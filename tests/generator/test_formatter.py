# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the gofmt wrapper."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from fixturegen.generator.formatter import GOFMT_TIMEOUT_SECONDS, FormatterError, format_source, run_gofmt

# ###############
# Helpers
# ###############

_SOURCE = "package fixtures\nfunc  X() {}\n"


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> MagicMock:
    result = MagicMock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


# ###############
# run_gofmt
# ###############


class TestRunGofmt:
    def test_returns_formatted_stdout(self) -> None:
        with patch("subprocess.run", return_value=_completed(stdout="package fixtures\n")) as mock_run:
            assert run_gofmt(_SOURCE) == "package fixtures\n"
        mock_run.assert_called_once_with(
            ["gofmt"],
            input=_SOURCE,
            capture_output=True,
            text=True,
            timeout=GOFMT_TIMEOUT_SECONDS,
        )

    def test_missing_executable(self) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError("gofmt")):
            with pytest.raises(FormatterError, match="not found"):
                run_gofmt(_SOURCE)

    def test_timeout(self) -> None:
        with patch("subprocess.run", side_effect=subprocess.TimeoutExpired(["gofmt"], GOFMT_TIMEOUT_SECONDS)):
            with pytest.raises(FormatterError, match="timed out"):
                run_gofmt(_SOURCE)

    def test_non_zero_exit_reports_stderr(self) -> None:
        with patch("subprocess.run", return_value=_completed(returncode=2, stderr="<standard input>:2:1: expected\n")):
            with pytest.raises(FormatterError, match="expected"):
                run_gofmt(_SOURCE)


# ###############
# format_source
# ###############


class TestFormatSource:
    def test_formatted_on_success(self) -> None:
        with patch("subprocess.run", return_value=_completed(stdout="formatted\n")):
            assert format_source(_SOURCE) == "formatted\n"

    def test_unchanged_when_gofmt_missing(self) -> None:
        with patch("subprocess.run", side_effect=FileNotFoundError("gofmt")):
            assert format_source(_SOURCE) == _SOURCE

    def test_unchanged_when_gofmt_rejects_source(self) -> None:
        with patch("subprocess.run", return_value=_completed(returncode=2, stderr="syntax error")):
            assert format_source(_SOURCE) == _SOURCE
