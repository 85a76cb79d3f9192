"""
Project configuration loaded from tokensmith.toml.

Example:

    [tokensmith]
    tokens_dir = "design/tokens"
    output = "build/variables.css"
    prefix = "acme"
    unit = "px"

Relative paths resolve against the directory holding the config file.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

from .errors import ConfigError, ErrorContext
from .formatting import DEFAULT_UNIT
from .naming import DEFAULT_PREFIX

CONFIG_FILE = "tokensmith.toml"


@dataclass
class TokensmithConfig:
    """Settings for one generation run."""

    tokens_dir: Path = field(default_factory=lambda: Path("tokens"))
    output: Path = field(default_factory=lambda: Path("output") / "variables.css")
    prefix: str = DEFAULT_PREFIX
    unit: str = DEFAULT_UNIT

    def with_overrides(self, **overrides: Any) -> "TokensmithConfig":
        """Copy with every non-None override applied (CLI options win)."""
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


def _require_str(section: dict[str, Any], key: str, path: Path) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(
            f"'{key}' must be a string, got {type(value).__name__}", ErrorContext(file=path)
        )
    return value


def load_config(path: Path) -> TokensmithConfig:
    """Load tokensmith.toml.

    Args:
        path: Config file path. A missing file yields the defaults, with
            relative paths resolved against its directory.

    Raises:
        ConfigError: On unreadable files, invalid TOML, or wrongly typed values.
    """
    base = path.parent
    defaults = TokensmithConfig()
    if not path.exists():
        return replace(
            defaults, tokens_dir=base / defaults.tokens_dir, output=base / defaults.output
        )

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config: {e}", ErrorContext(file=path)) from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}", ErrorContext(file=path)) from e

    section = data.get("tokensmith", {})
    if not isinstance(section, dict):
        raise ConfigError("[tokensmith] must be a table", ErrorContext(file=path))

    # Only absent keys fall back to defaults; empty strings are kept as given,
    # the same as with_overrides treats command-line options.
    tokens_dir = _require_str(section, "tokens_dir", path)
    output = _require_str(section, "output", path)
    prefix = _require_str(section, "prefix", path)
    unit = _require_str(section, "unit", path)

    return TokensmithConfig(
        tokens_dir=base / (defaults.tokens_dir if tokens_dir is None else tokens_dir),
        output=base / (defaults.output if output is None else output),
        prefix=defaults.prefix if prefix is None else prefix,
        unit=defaults.unit if unit is None else unit,
    )
