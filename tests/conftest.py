"""Shared pytest fixtures for tokensmith tests."""

import json
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def core_document() -> dict[str, Any]:
    """Return a token document with one collection, one category, one variable."""
    return {
        "collections": [
            {
                "name": "Core",
                "variables": {
                    "Spacing": {
                        "baseUnit": {"type": "number", "values": {"light": 8}},
                    },
                },
            }
        ]
    }


@pytest.fixture
def theme_document() -> dict[str, Any]:
    """Return a token document with several categories and two modes."""
    return {
        "collections": [
            {
                "name": "Brand Theme",
                "variables": {
                    "colorBase": {
                        "primary": {
                            "type": "COLOR",
                            "values": {"light": "3F3FFF", "dark": "#0100F2"},
                        },
                        "surface": {"type": "color", "values": {"dark": "#000000"}},
                    },
                    "Radius": {
                        "cardCorner": {"type": "dimension", "values": {"light": "12"}},
                        "pill": {"values": {"light": 999}},
                    },
                    "Font Family": {
                        "body": {"type": "string", "values": {"light": "Inter, sans-serif"}},
                    },
                },
            }
        ]
    }


@pytest.fixture
def tokens_dir(tmp_path: Path) -> Path:
    """Return an empty tokens directory."""
    path = tmp_path / "tokens"
    path.mkdir()
    return path


@pytest.fixture
def write_tokens(tokens_dir: Path):
    """Return a helper that writes a JSON document into the tokens directory."""

    def _write(name: str, document: Any) -> Path:
        path = tokens_dir / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
