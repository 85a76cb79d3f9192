"""
Stylesheet generation pipeline.

discover token files -> parse each file -> collect variables -> render CSS
-> write the output file.

Per-file and per-token problems are logged and skipped. Failures of the run
as a whole raise GenerationError; the output file is left untouched unless
the write itself was reached.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from .collector import TokenCollector
from .css_writer import render_stylesheet, write_stylesheet
from .errors import GenerationError
from .ir.tokens import CollectionResult
from .loader import discover_token_files, load_documents
from .manifest import TokensmithConfig

logger = logging.getLogger(__name__)


@dataclass
class GenerationReport:
    """Outcome of one generation run."""

    output_path: Path | None = None
    source_files: list[Path] = field(default_factory=list)
    failed_files: list[Path] = field(default_factory=list)
    result: CollectionResult = field(default_factory=CollectionResult)

    @property
    def written(self) -> bool:
        return self.output_path is not None

    @property
    def variable_count(self) -> int:
        return self.result.variable_count


def generate_css_variables(
    config: TokensmithConfig,
    generated_at: datetime | None = None,
) -> GenerationReport:
    """Run the whole pipeline for one configuration.

    Args:
        config: Token directory, output path, prefix and unit.
        generated_at: Header timestamp; defaults to now.

    Returns:
        GenerationReport. ``written`` is False when no token files were found.

    Raises:
        GenerationError: If the tokens directory is missing or the output
            cannot be written.
    """
    tokens_dir = config.tokens_dir
    if not tokens_dir.is_dir():
        raise GenerationError(f"Tokens directory not found: {tokens_dir}")

    try:
        config.output.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GenerationError(f"Cannot create output directory {config.output.parent}: {e}") from e

    try:
        files = discover_token_files(tokens_dir)
    except OSError as e:
        raise GenerationError(f"Cannot list tokens directory {tokens_dir}: {e}") from e

    report = GenerationReport(source_files=files)
    if not files:
        logger.warning("No JSON files found in %s", tokens_dir)
        return report

    documents = load_documents(files)
    loaded = {path for path, _ in documents}
    report.failed_files = [path for path in files if path not in loaded]

    collector = TokenCollector(prefix=config.prefix, unit=config.unit)
    for path, document in documents:
        collector.add_document(document, source=path.name)
    report.result = collector.result()

    content = render_stylesheet(report.result, generated_at)
    try:
        report.output_path = write_stylesheet(content, config.output)
    except OSError as e:
        raise GenerationError(f"Cannot write stylesheet {config.output}: {e}") from e

    logger.info(
        "Generated %d variables from %d files into %s",
        report.variable_count,
        len(files),
        report.output_path,
    )
    return report
