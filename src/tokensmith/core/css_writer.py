"""
Stylesheet serialization for collected design tokens.

Output layout:

    /* Auto-generated CSS variables - based on design tokens */
    /* Generated at: 2026-10-19T08:30:00.123Z */

    :root {
      --sia-core-spacing-base-unit: 8px;
    }

    /* Mode usage:
     * light: 1 variables
     */
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from .ir.tokens import CollectionResult

HEADER_MARKER = "Auto-generated CSS variables - based on design tokens"
GENERATED_MARKER = "Generated at"
MODE_MARKER = "Mode usage"
COUNT_LABEL = "variables"


def format_timestamp(moment: datetime) -> str:
    """ISO 8601 UTC timestamp with millisecond precision and a ``Z`` suffix.

    Naive datetimes are taken to be UTC already.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    stamp = moment.astimezone(UTC).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def render_stylesheet(result: CollectionResult, generated_at: datetime | None = None) -> str:
    """Render collected variables and mode statistics as CSS text.

    Args:
        result: Collected variables and mode counts.
        generated_at: Timestamp for the header; defaults to now.

    Returns:
        Complete stylesheet text ending with a newline.
    """
    moment = generated_at or datetime.now(UTC)

    lines = [
        f"/* {HEADER_MARKER} */",
        f"/* {GENERATED_MARKER}: {format_timestamp(moment)} */",
        "",
        ":root {",
    ]
    lines.extend(f"  {name}: {value};" for name, value in result.variables.items())
    lines.append("}")
    lines.append("")
    lines.append(f"/* {MODE_MARKER}:")
    lines.extend(f" * {mode}: {count} {COUNT_LABEL}" for mode, count in result.mode_counts.items())
    lines.append(" */")

    return "\n".join(lines) + "\n"


def write_stylesheet(content: str, output_path: Path) -> Path:
    """Write stylesheet text, creating parent directories as needed.

    Returns:
        Path to the written file.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(content, encoding="utf-8")
    return output_path
