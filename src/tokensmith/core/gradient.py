"""
Linear-gradient string parsing.

Turns a CSS ``linear-gradient(...)`` description into the data a native
gradient view needs: stop colors, stop locations normalized into [0, 1],
and start/end points derived from the angle.

Only six-digit hex stops followed by a space and a percentage are
recognized (``#00FFA3 -17.71%``). Other color syntaxes yield no stops.
"""

from __future__ import annotations

import math
import re

from .ir.gradient import GradientPoint, GradientResult

_ANGLE = re.compile(r"(\d+)deg")
_COLOR_STOP = re.compile(r"#[A-Fa-f0-9]{6} [-+\d.]+%")
# Longest leading decimal number of a stop position
_NUMBER_PREFIX = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)")


def parse_angle(text: str) -> float:
    """First ``<digits>deg`` in the text as degrees, or 0."""
    match = _ANGLE.search(text)
    return float(match.group(1)) if match else 0.0


def parse_color_stops(text: str) -> list[tuple[str, float]]:
    """Extract ``(color, raw_location)`` pairs in source order.

    Raw locations are the percentages divided by 100 and may fall outside
    [0, 1]. A stop whose position has no leading number (``#FFFFFF -%``) is
    dropped whole, color included, so colors and locations stay paired.
    """
    stops: list[tuple[str, float]] = []
    for token in _COLOR_STOP.findall(text):
        color, position = token.split(" ", 1)
        number = _NUMBER_PREFIX.match(position.rstrip("%"))
        if number is None:
            continue
        stops.append((color, float(number.group(0)) / 100))
    return stops


def normalize_locations(locations: list[float]) -> list[float]:
    """Rescale locations linearly so the smallest is 0 and the largest is 1.

    When every location is the same, each becomes 0.5.
    """
    if not locations:
        return []
    low = min(locations)
    span = max(locations) - low
    if span == 0:
        return [0.5 for _ in locations]
    return [(location - low) / span for location in locations]


def angle_to_point(angle: float) -> GradientPoint:
    """Point on the unit square for a direction clockwise from up.

    0 degrees is top-center ``(0.5, 0)``; 90 degrees is right-center.
    """
    radians = math.radians(angle)
    return GradientPoint(x=0.5 + math.sin(radians) / 2, y=0.5 - math.cos(radians) / 2)


def parse_gradient(text: str) -> GradientResult:
    """Parse a linear-gradient description.

    Args:
        text: e.g. ``"linear-gradient(256deg, #00FFA3 -17.71%, #3F3FFF 68.62%)"``

    Returns:
        GradientResult; never raises for malformed text.
    """
    angle = parse_angle(text)
    stops = parse_color_stops(text)

    return GradientResult(
        angle=angle,
        colors=[color for color, _ in stops],
        locations=normalize_locations([location for _, location in stops]),
        start=angle_to_point(angle),
        end=angle_to_point(angle + 180),
    )
