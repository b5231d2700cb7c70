"""versioncheck data models — all Pydantic v2, all frozen (immutable)."""

from versioncheck.models.reports import CheckResult, CheckStatus, RunReport
from versioncheck.models.tools import ToolsConfig, ToolSpec

__all__ = [
    # tools
    "ToolSpec",
    "ToolsConfig",
    # reports
    "CheckStatus",
    "CheckResult",
    "RunReport",
]
