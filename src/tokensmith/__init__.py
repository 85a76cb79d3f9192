"""
tokensmith - design tokens to CSS custom properties.

Flattens JSON design-token files into a stylesheet of CSS variables, and
parses linear-gradient strings into native gradient props.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.errors import ConfigError, DocumentError, GenerationError, TokensmithError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "TokensmithError",
    "DocumentError",
    "ConfigError",
    "GenerationError",
]
