# Copyright 2026 Fixturegen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Best-effort formatting of generated Go source through ``gofmt``."""

import subprocess

# ###############
# Public Interface
# ###############

GOFMT_TIMEOUT_SECONDS = 10


class FormatterError(Exception):
    """Raised when gofmt is unavailable, times out, or rejects the source."""


def format_source(source: str) -> str:
    """Return *source* formatted by gofmt, or unchanged if formatting fails."""
    try:
        return run_gofmt(source)
    except FormatterError:
        return source


def run_gofmt(source: str) -> str:
    """Format *source* with gofmt.

    Raises:
        FormatterError: If gofmt is not found on PATH, times out, or exits
            with a non-zero code (usually a syntax error in *source*).
    """
    try:
        result = subprocess.run(
            ["gofmt"],
            input=source,
            capture_output=True,
            text=True,
            timeout=GOFMT_TIMEOUT_SECONDS,
        )
    except FileNotFoundError as exc:
        raise FormatterError("gofmt executable not found on PATH") from exc
    except subprocess.TimeoutExpired as exc:
        raise FormatterError("gofmt timed out") from exc
    if result.returncode != 0:
        raise FormatterError(f"gofmt: {result.stderr.strip()}")
    return result.stdout
