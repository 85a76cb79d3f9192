"""Core tokensmith functionality: token collection, formatting, stylesheet output, gradient parsing."""

from . import ir
from .collector import TokenCollector, collect
from .css_writer import render_stylesheet, write_stylesheet
from .errors import (
    ConfigError,
    DocumentError,
    ErrorContext,
    GenerationError,
    TokensmithError,
)
from .formatting import format_css_value
from .generator import GenerationReport, generate_css_variables
from .gradient import parse_gradient
from .loader import discover_token_files, load_document, load_documents
from .manifest import TokensmithConfig, load_config
from .naming import build_variable_name, kebab_case

__all__ = [
    "ir",
    "TokensmithError",
    "DocumentError",
    "ConfigError",
    "GenerationError",
    "ErrorContext",
    "TokenCollector",
    "collect",
    "format_css_value",
    "kebab_case",
    "build_variable_name",
    "render_stylesheet",
    "write_stylesheet",
    "discover_token_files",
    "load_document",
    "load_documents",
    "TokensmithConfig",
    "load_config",
    "GenerationReport",
    "generate_css_variables",
    "parse_gradient",
]
