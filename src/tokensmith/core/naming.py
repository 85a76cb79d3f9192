"""
Naming rules for generated CSS custom properties.

The kebab-case rule is deliberately narrow: it splits only at a lowercase
letter directly followed by an uppercase letter, and at whitespace. Runs of
capitals, digits and existing punctuation pass through untouched
(``"HTTPCode"`` becomes ``"httpcode"``, ``"size2X"`` stays ``"size2x"``).
"""

from __future__ import annotations

import re

DEFAULT_PREFIX = "sia"

_CASE_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_WHITESPACE = re.compile(r"\s+")


def kebab_case(value: str) -> str:
    """Convert a token name segment to kebab-case.

    Args:
        value: Collection, category or variable name.

    Returns:
        Lowercased name with hyphens at case boundaries and whitespace runs.
    """
    hyphenated = _CASE_BOUNDARY.sub(r"\1-\2", value)
    hyphenated = _WHITESPACE.sub("-", hyphenated)
    return hyphenated.lower()


def build_variable_name(prefix: str, collection: str, category: str, name: str) -> str:
    """Build the custom property name ``--<prefix>-<collection>-<category>-<name>``.

    The prefix is used verbatim; the other three segments are kebab-cased.
    """
    segments = [prefix, kebab_case(collection), kebab_case(category), kebab_case(name)]
    return "--" + "-".join(segments)
