"""Runtime settings, env-driven.

Reads from a .env file and VERSIONCHECK_* environment variables.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class CheckerSettings(BaseSettings):
    """Settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export VERSIONCHECK_CONFIG_PATH=/etc/versioncheck/tools.yaml
        export VERSIONCHECK_LOG_LEVEL=DEBUG
        export VERSIONCHECK_COMMAND_TIMEOUT=10
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="VERSIONCHECK_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Default tools file when --config is not given
    config_path: Path = Path("config.yaml")

    log_level: str = "WARNING"

    # Commands run as `<shell> -c <command>`
    shell: str = "sh"
    command_timeout: float | None = None  # seconds; None means wait forever

