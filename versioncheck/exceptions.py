"""Exception types raised by versioncheck."""

from __future__ import annotations


class VersionCheckError(RuntimeError):
    """Base class for all versioncheck errors."""


class ConfigError(VersionCheckError):
    """Raised when the tools file is missing, unreadable, or malformed.

    Fatal: no checks are run once this is raised.
    """


class CommandExecutionError(VersionCheckError):
    """Raised when a version probe command cannot be run or fails."""

    def __init__(self, message: str, *, returncode: int | None = None) -> None:
        super().__init__(message)
        self.returncode = returncode
