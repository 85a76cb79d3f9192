"""
Error types for token loading, configuration, and stylesheet generation.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class TokensmithError(Exception):
    """Base exception for all tokensmith errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}: {self.message}"
        return self.message


class DocumentError(TokensmithError):
    """
    Raised when a token file cannot be turned into a document.

    Examples:
    - File cannot be read
    - Invalid JSON syntax
    """

    pass


class ConfigError(TokensmithError):
    """
    Raised when tokensmith.toml cannot be loaded.

    Examples:
    - Invalid TOML syntax
    - A setting with the wrong type
    """

    pass


class GenerationError(TokensmithError):
    """
    Raised when a generation run fails as a whole.

    Examples:
    - Tokens directory does not exist
    - Output directory cannot be created
    - Stylesheet cannot be written
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error in a source file.

    Attributes:
        file: Path to the file where the error occurred
        line: Line number (1-indexed), if known
        column: Column number (1-indexed), if known
    """

    file: Path
    line: int | None = None
    column: int | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "tokens/core.json:10:5"
        """
        location = str(self.file)
        if self.line is not None:
            location += f":{self.line}"
            if self.column is not None:
                location += f":{self.column}"
        return location


def make_document_error(
    message: str,
    file: Path,
    line: int | None = None,
    column: int | None = None,
) -> DocumentError:
    """
    Helper to create a DocumentError with context.

    Args:
        message: Error description
        file: Token file path
        line: Optional line number (1-indexed)
        column: Optional column number (1-indexed)

    Returns:
        DocumentError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column)
    return DocumentError(message, context)
