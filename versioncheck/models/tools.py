"""Tool manifest models — what to probe and which version to expect."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

_NULL_SCALARS = ("", "~", "null", "Null", "NULL")


class ToolSpec(BaseModel):
    """A single configured check.

    ``name`` is a display label only and need not be unique.  ``expect`` is
    plain data (a dotted version string), never a pattern.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    command: str
    expect: str = Field(min_length=1)


class ToolsConfig(BaseModel):
    """The whole tools file: a single ``tools`` list."""

    model_config = ConfigDict(frozen=True)

    tools: list[ToolSpec] = Field(default_factory=list)

    @field_validator("tools", mode="before")
    @classmethod
    def _empty_tools(cls, value: Any) -> Any:
        # Scalars load as raw text, so an empty `tools:` arrives as a string.
        return [] if value is None or value in _NULL_SCALARS else value
