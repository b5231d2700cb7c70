"""Plain-text diagnostics for failed checks.

Diagnostic lines carry raw command output, so they are written with
``typer.echo`` and reach stdout unchanged (Rich would expand tabs).
Everything else goes through the Rich console.
"""

from __future__ import annotations

import typer
from rich.console import Console

from versioncheck.models.reports import CheckResult, CheckStatus

SUCCESS_LINE = "Versions OK"

console = Console(highlight=False, soft_wrap=True, emoji=False)


def format_diagnostic(result: CheckResult) -> list[str]:
    """Return the diagnostic lines for *result*; empty when it passed."""
    name = result.tool.name
    if result.status is CheckStatus.EXECUTION_ERROR:
        return [f"Error executing command for {name}: {result.error}"]
    if result.status is CheckStatus.NO_VERSION:
        return [
            f"{name}: No version found in output",
            f"Command output: {result.output}",
        ]
    if result.status is CheckStatus.MISMATCH:
        return [
            f"{name} version mismatch: Expected '{result.tool.expect}', "
            f"got '{result.extracted}'",
            f"Command output: {result.output}",
        ]
    return []


def print_result(result: CheckResult) -> None:
    for line in format_diagnostic(result):
        typer.echo(line, color=True)


def print_success() -> None:
    console.print(SUCCESS_LINE, markup=False)


def print_config_error(error: Exception) -> None:
    console.print(f"Failed to read config file: {error}", markup=False)
