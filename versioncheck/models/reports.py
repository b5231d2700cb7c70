"""Check result models — outputs of a version check run."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from versioncheck.models.tools import ToolSpec


class CheckStatus(str, Enum):
    """Outcome of evaluating one ToolSpec."""

    PASSED = "passed"
    EXECUTION_ERROR = "execution_error"  # command failed or could not start
    NO_VERSION = "no_version"  # command ran, nothing version-like in output
    MISMATCH = "mismatch"


class CheckResult(BaseModel):
    """Result of a single check."""

    model_config = ConfigDict(frozen=True)

    tool: ToolSpec
    status: CheckStatus
    output: str = ""  # trimmed combined stdout+stderr
    extracted: str = ""
    error: str = ""  # execution error detail, if any

    @property
    def passed(self) -> bool:
        return self.status is CheckStatus.PASSED


class RunReport(BaseModel):
    """Aggregate of every check in a run, in declaration order."""

    model_config = ConfigDict(frozen=True)

    results: list[CheckResult] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        """True when every check passed (and trivially for zero checks)."""
        return all(result.passed for result in self.results)

    @property
    def failures(self) -> list[CheckResult]:
        return [result for result in self.results if not result.passed]

    @property
    def exit_code(self) -> int:
        return 0 if self.passed else 1
