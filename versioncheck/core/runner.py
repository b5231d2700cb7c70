"""CheckRunner — evaluates every configured tool, one after another.

A check never stops the run: execution errors, missing versions and
mismatches are recorded on the result and the next tool is evaluated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from versioncheck.core.comparator import versions_match
from versioncheck.core.executor import run_command
from versioncheck.core.extractor import extract_version
from versioncheck.exceptions import CommandExecutionError
from versioncheck.models.reports import CheckResult, CheckStatus, RunReport
from versioncheck.models.tools import ToolSpec

logger = logging.getLogger(__name__)

CommandExecutor = Callable[[str], str]


class CheckRunner:
    """Runs version checks sequentially and aggregates a RunReport.

    Usage
    -----
    >>> runner = CheckRunner(shell="sh")
    >>> report = runner.run(config.tools)
    >>> report.exit_code
    0
    """

    def __init__(
        self,
        *,
        shell: str = "sh",
        timeout: float | None = None,
        executor: CommandExecutor | None = None,
    ) -> None:
        self._shell = shell
        self._timeout = timeout
        self._executor = executor or self._run_in_shell

    def _run_in_shell(self, command: str) -> str:
        return run_command(command, shell=self._shell, timeout=self._timeout)

    # ------------------------------------------------------------------
    # Single check
    # ------------------------------------------------------------------

    def check(self, tool: ToolSpec) -> CheckResult:
        """Run one tool's command, extract its version and compare."""
        try:
            output = self._executor(tool.command)
        except CommandExecutionError as exc:
            logger.info("Check %s could not run: %s", tool.name, exc)
            return CheckResult(
                tool=tool, status=CheckStatus.EXECUTION_ERROR, error=str(exc)
            )

        extracted = extract_version(tool.command, output)
        if not extracted:
            return CheckResult(tool=tool, status=CheckStatus.NO_VERSION, output=output)

        status = (
            CheckStatus.PASSED
            if versions_match(extracted, tool.expect)
            else CheckStatus.MISMATCH
        )
        logger.debug(
            "Check %s: expected %s, got %s -> %s",
            tool.name, tool.expect, extracted, status.value,
        )
        return CheckResult(
            tool=tool, status=status, output=output, extracted=extracted
        )

    # ------------------------------------------------------------------
    # Whole run
    # ------------------------------------------------------------------

    def run(
        self,
        tools: Iterable[ToolSpec],
        *,
        on_result: Callable[[CheckResult], None] | None = None,
    ) -> RunReport:
        """Evaluate every tool in order.

        *on_result* is called after each check completes, before the next
        command starts, so callers can report progress as it happens.
        """
        results: list[CheckResult] = []
        for tool in tools:
            result = self.check(tool)
            results.append(result)
            if on_result is not None:
                on_result(result)

        report = RunReport(results=results)
        logger.info(
            "Checked %d tool(s), %d failed",
            len(report.results), len(report.failures),
        )
        return report
