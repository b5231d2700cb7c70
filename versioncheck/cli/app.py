"""Main Typer application — the ``versioncheck`` command.

Entry point: ``versioncheck`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from versioncheck import __description__, __version__
from versioncheck.cli.output import (
    console,
    print_config_error,
    print_result,
    print_success,
)
from versioncheck.config import CheckerSettings
from versioncheck.core.config_loader import load_tools_config
from versioncheck.core.runner import CheckRunner
from versioncheck.exceptions import ConfigError

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="versioncheck",
    help=__description__,
    rich_markup_mode="rich",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"versioncheck {__version__}", markup=False)
        raise typer.Exit()


@app.command()
def check_cmd(
    config_file: Path = typer.Option(
        None,
        "--config",
        "-c",
        help="Tools file to check (default is ./config.yaml).",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the versioncheck version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Check the versions of installed software.

    Every tool in the configuration file is probed with its command, and
    the version found in the output is compared with the expected one.
    Exits with status 1 if any tool fails or the file cannot be read.
    """
    settings = CheckerSettings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    path = config_file or settings.config_path
    try:
        tools_config = load_tools_config(path)
    except ConfigError as exc:
        print_config_error(exc)
        raise typer.Exit(code=1)

    runner = CheckRunner(shell=settings.shell, timeout=settings.command_timeout)
    report = runner.run(tools_config.tools, on_result=print_result)

    if not report.passed:
        raise typer.Exit(code=report.exit_code)
    print_success()


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
