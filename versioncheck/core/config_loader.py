"""Load the tools file (YAML) into a validated ToolsConfig."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from versioncheck.exceptions import ConfigError
from versioncheck.models.tools import ToolsConfig

logger = logging.getLogger(__name__)


def load_tools_config(path: Path) -> ToolsConfig:
    """Read and validate the tools file at *path*.

    Scalars are kept as their literal text, so an unquoted ``expect: 1.20``
    stays ``"1.20"``.  An empty document is an empty tool list.  Any problem
    reading, parsing, or validating the file is reported as
    :class:`ConfigError`.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc

    try:
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML in {path}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: root must be a mapping with a 'tools' list")

    try:
        config = ToolsConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"invalid tools definition in {path}: {exc}") from exc

    logger.info("Loaded %d tool(s) from %s", len(config.tools), path)
    return config
