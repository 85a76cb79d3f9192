"""
Design token IR types.

A token file holds collections; a collection groups categories; a category
maps variable names to definitions. Each definition carries an optional type
tag and one raw value per mode. Only the first mode is emitted, so the IR
keeps the modes as an ordered list of pairs rather than a mapping.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TokenType(StrEnum):
    """Declared token types with special formatting."""

    NUMBER = "number"
    COLOR = "color"
    DIMENSION = "dimension"


class ModeValue(BaseModel):
    """Raw value of a variable under one mode."""

    model_config = ConfigDict(frozen=True)

    mode: str
    value: Any = None


class VariableDefinition(BaseModel):
    """A named design value with an optional type tag and mode-keyed values."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: str | None = Field(default=None, description="Declared type, compared case-insensitively")
    values: list[ModeValue] = Field(default_factory=list, description="Values in source order")

    @classmethod
    def from_raw(cls, name: str, raw: Mapping[str, Any]) -> VariableDefinition:
        """Build a definition from a raw JSON object whose ``values`` is a mapping."""
        raw_type = raw.get("type")
        return cls(
            name=name,
            type=raw_type if isinstance(raw_type, str) else None,
            values=[
                ModeValue(mode=str(mode), value=value) for mode, value in raw["values"].items()
            ],
        )

    @property
    def modes(self) -> list[str]:
        return [entry.mode for entry in self.values]

    @property
    def default_mode(self) -> str | None:
        """The first declared mode, or None when no mode is declared."""
        return self.values[0].mode if self.values else None

    @property
    def default_value(self) -> Any:
        return self.values[0].value if self.values else None


class CollectionResult(BaseModel):
    """Flattened output of one collection run."""

    model_config = ConfigDict(frozen=True)

    variables: dict[str, str] = Field(
        default_factory=dict, description="Generated variable name -> formatted value"
    )
    mode_counts: dict[str, int] = Field(
        default_factory=dict, description="Mode name -> number of variables declaring it"
    )
    documents: int = Field(default=0, description="Documents walked, including skipped ones")
    skipped: int = Field(default=0, description="Units dropped by structural checks")

    @property
    def variable_count(self) -> int:
        return len(self.variables)
