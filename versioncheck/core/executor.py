"""Command execution — run a version probe through the shell.

Output is captured as a single stream (stderr merged into stdout) because
many tools print their version on stderr.
"""

from __future__ import annotations

import logging
import subprocess

from versioncheck.exceptions import CommandExecutionError

logger = logging.getLogger(__name__)


def run_command(
    command: str,
    *,
    shell: str = "sh",
    timeout: float | None = None,
) -> str:
    """Run *command* via ``<shell> -c`` and return its trimmed combined output.

    Raises
    ------
    CommandExecutionError
        If the shell cannot be started, the command exits non-zero, or the
        optional *timeout* expires.
    """
    logger.debug("Running %r with %s", command, shell)
    try:
        completed = subprocess.run(
            [shell, "-c", command],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as exc:
        raise CommandExecutionError(
            f"command timed out after {exc.timeout:g}s"
        ) from exc
    except OSError as exc:
        raise CommandExecutionError(f"cannot start {shell}: {exc}") from exc

    if completed.returncode != 0:
        logger.info(
            "Command %r exited with status %d", command, completed.returncode
        )
        raise CommandExecutionError(
            f"exit status {completed.returncode}",
            returncode=completed.returncode,
        )

    return completed.stdout.strip()
