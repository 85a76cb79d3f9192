"""
Token file discovery and parsing.

A token directory holds one JSON document per ``*.json`` file. Hidden files
are ignored. A file that cannot be read or parsed is reported and left out;
it never aborts the rest of the batch.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from .errors import DocumentError, make_document_error

logger = logging.getLogger(__name__)

TOKEN_FILE_SUFFIX = ".json"


def discover_token_files(tokens_dir: Path) -> list[Path]:
    """List token files in a directory, sorted by file name.

    Args:
        tokens_dir: Directory to scan (not recursive).

    Returns:
        Paths of ``*.json`` files whose names do not start with ``.``.
    """
    return sorted(
        path
        for path in tokens_dir.iterdir()
        if path.is_file()
        and path.name.endswith(TOKEN_FILE_SUFFIX)
        and not path.name.startswith(".")
    )


def load_document(path: Path) -> Any:
    """Read and parse one token file.

    Raises:
        DocumentError: If the file cannot be read or is not valid JSON.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise make_document_error(f"Cannot read token file: {e}", path) from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise make_document_error(f"Invalid JSON: {e.msg}", path, e.lineno, e.colno) from e
    except (ValueError, RecursionError) as e:
        # Oversized integer literals and very deep nesting
        raise make_document_error(f"Cannot decode JSON: {e}", path) from e


def load_documents(paths: Iterable[Path]) -> list[tuple[Path, Any]]:
    """Parse every token file, dropping the ones that fail.

    Returns:
        ``(path, document)`` pairs in input order.
    """
    documents: list[tuple[Path, Any]] = []
    for path in paths:
        try:
            documents.append((path, load_document(path)))
        except DocumentError as e:
            logger.error("Failed to process token file %s: %s", path.name, e)
            continue
        logger.debug("Loaded token file %s", path.name)
    return documents
