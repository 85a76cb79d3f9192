"""
Token collection: flatten token documents into CSS custom properties.

Walks documents -> collections -> categories -> variables. Every structural
problem skips only the offending unit and is logged as a warning; nothing in
here raises for malformed input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .formatting import DEFAULT_UNIT, format_css_value
from .ir.tokens import CollectionResult, VariableDefinition
from .naming import DEFAULT_PREFIX, build_variable_name

logger = logging.getLogger(__name__)


class TokenCollector:
    """Collect generated variables and mode statistics from token documents."""

    def __init__(self, prefix: str = DEFAULT_PREFIX, unit: str = DEFAULT_UNIT):
        """
        Initialize the collector.

        Args:
            prefix: First segment of every generated variable name
            unit: Length unit appended to number and dimension values
        """
        self.prefix = prefix
        self.unit = unit
        self._variables: dict[str, str] = {}
        self._mode_counts: dict[str, int] = {}
        self._documents = 0
        self._skipped = 0

    def collect(self, documents: Iterable[Any]) -> CollectionResult:
        """Walk every document and return the accumulated result.

        Each call starts from an empty state. Later entries overwrite earlier
        ones with the same generated name.
        """
        self._variables = {}
        self._mode_counts = {}
        self._documents = 0
        self._skipped = 0

        for document in documents:
            self.add_document(document)

        return self.result()

    def result(self) -> CollectionResult:
        """Snapshot of everything collected so far."""
        return CollectionResult(
            variables=dict(self._variables),
            mode_counts=dict(self._mode_counts),
            documents=self._documents,
            skipped=self._skipped,
        )

    def add_document(self, document: Any, source: str = "<document>") -> None:
        """Add one token document to the running result."""
        self._documents += 1

        collections = document.get("collections") if isinstance(document, Mapping) else None
        if not isinstance(collections, list):
            self._skip("Document %s has no collections list, skipping", source)
            return

        for collection in collections:
            self._add_collection(collection)

    def _add_collection(self, collection: Any) -> None:
        if not isinstance(collection, Mapping):
            self._skip("Collection entry is not an object, skipping")
            return

        name = collection.get("name")
        variables = collection.get("variables")
        if not isinstance(variables, Mapping):
            self._skip('Collection "%s" has no variables object, skipping', name)
            return
        if not isinstance(name, str):
            self._skip("Collection without a name, skipping")
            return

        for category, category_variables in variables.items():
            if not isinstance(category_variables, Mapping):
                self._skip('Category "%s" is not an object, skipping', category)
                continue
            for variable_name, raw in category_variables.items():
                self._add_variable(name, category, variable_name, raw)

    def _add_variable(self, collection: str, category: str, variable_name: str, raw: Any) -> None:
        if not isinstance(raw, Mapping) or not isinstance(raw.get("values"), Mapping):
            self._skip('Variable "%s" has no values object, skipping', variable_name)
            return

        definition = VariableDefinition.from_raw(variable_name, raw)
        if definition.default_mode is None:
            self._skip('Variable "%s" declares no modes, skipping', variable_name)
            return

        # Statistics cover every declared mode, even if its value is unusable
        for mode in definition.modes:
            self._mode_counts[mode] = self._mode_counts.get(mode, 0) + 1

        value = definition.default_value
        if value is None:
            self._skip(
                'Variable "%s" has no value for mode "%s", skipping',
                variable_name,
                definition.default_mode,
            )
            return

        var_name = build_variable_name(self.prefix, collection, category, variable_name)
        self._variables[var_name] = format_css_value(value, definition.type, self.unit)

    def _skip(self, message: str, *args: Any) -> None:
        self._skipped += 1
        logger.warning(message, *args)


def collect(
    documents: Iterable[Any],
    prefix: str = DEFAULT_PREFIX,
    unit: str = DEFAULT_UNIT,
) -> CollectionResult:
    """Collect generated variables from token documents.

    Args:
        documents: Parsed token documents (JSON-shaped mappings).
        prefix: First segment of every generated variable name.
        unit: Length unit appended to number and dimension values.

    Returns:
        CollectionResult with variables in first-insertion order.
    """
    return TokenCollector(prefix=prefix, unit=unit).collect(documents)
