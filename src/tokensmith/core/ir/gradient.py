"""
Gradient IR types.

A parsed linear gradient: its angle, the color of each stop, stop locations
normalized into [0, 1], and the start/end points of the gradient line on a
unit square.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GradientPoint(BaseModel):
    """A point on the unit square, origin at the top-left corner."""

    model_config = ConfigDict(frozen=True)

    x: float
    y: float


class GradientResult(BaseModel):
    """Normalized representation of one linear-gradient string."""

    model_config = ConfigDict(frozen=True)

    angle: float = Field(default=0.0, description="Direction in degrees, clockwise from up")
    colors: list[str] = Field(default_factory=list, description="Stop colors in source order")
    locations: list[float] = Field(
        default_factory=list, description="Stop locations normalized into [0, 1]"
    )
    start: GradientPoint = Field(default_factory=lambda: GradientPoint(x=0.5, y=0.0))
    end: GradientPoint = Field(default_factory=lambda: GradientPoint(x=0.5, y=1.0))

    def to_react_native(self) -> dict[str, Any]:
        """Props for a React Native ``LinearGradient`` component."""
        return {
            "colors": list(self.colors),
            "locations": list(self.locations),
            "start": self.start.model_dump(),
            "end": self.end.model_dump(),
        }
