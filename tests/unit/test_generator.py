"""Tests for token file loading, configuration and the generation pipeline."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

import pytest

# =============================================================================
# Loader
# =============================================================================


class TestTokenLoader:
    """Test token file discovery and parsing."""

    def test_discover_filters_and_sorts(self, tokens_dir: Path, write_tokens):
        from tokensmith.core.loader import discover_token_files

        write_tokens("b.json", {})
        write_tokens("a.json", {})
        write_tokens(".hidden.json", {})
        (tokens_dir / "notes.txt").write_text("ignored")
        (tokens_dir / "nested.json").mkdir()

        files = discover_token_files(tokens_dir)
        assert [path.name for path in files] == ["a.json", "b.json"]

    def test_load_document(self, write_tokens, core_document):
        from tokensmith.core.loader import load_document

        path = write_tokens("core.json", core_document)
        assert load_document(path) == core_document

    def test_load_invalid_json(self, tokens_dir: Path):
        from tokensmith.core.errors import DocumentError
        from tokensmith.core.loader import load_document

        path = tokens_dir / "broken.json"
        path.write_text('{\n  "collections": [\n}')

        with pytest.raises(DocumentError) as exc_info:
            load_document(path)

        assert exc_info.value.context is not None
        assert exc_info.value.context.file == path
        assert exc_info.value.context.line == 3
        assert "broken.json:3:" in str(exc_info.value)

    def test_load_oversized_integer(self, tokens_dir: Path):
        from tokensmith.core.errors import DocumentError
        from tokensmith.core.loader import load_document

        path = tokens_dir / "huge.json"
        path.write_text('{"collections": [], "n": ' + "9" * 5000 + "}")

        with pytest.raises(DocumentError, match="Cannot decode JSON"):
            load_document(path)

    def test_load_deeply_nested(self, tokens_dir: Path):
        from tokensmith.core.errors import DocumentError
        from tokensmith.core.loader import load_document

        path = tokens_dir / "deep.json"
        path.write_text("[" * 100000 + "]" * 100000)

        with pytest.raises(DocumentError):
            load_document(path)

    def test_load_invalid_utf8(self, tokens_dir: Path):
        from tokensmith.core.errors import DocumentError
        from tokensmith.core.loader import load_document

        path = tokens_dir / "latin1.json"
        path.write_bytes(b'{"collections": [], "name": "\xff\xfe"}')

        with pytest.raises(DocumentError, match="Cannot read token file"):
            load_document(path)

    def test_load_documents_skips_failures(self, tokens_dir: Path, write_tokens, caplog):
        from tokensmith.core.loader import load_documents

        good = write_tokens("good.json", {"collections": []})
        bad = tokens_dir / "bad.json"
        bad.write_text("not json")

        with caplog.at_level(logging.ERROR, logger="tokensmith.core.loader"):
            documents = load_documents([bad, good])

        assert documents == [(good, {"collections": []})]
        assert "bad.json" in caplog.text


# =============================================================================
# Configuration
# =============================================================================


class TestConfig:
    """Test tokensmith.toml loading."""

    def test_missing_file_uses_defaults(self, tmp_path: Path):
        from tokensmith.core.manifest import load_config

        config = load_config(tmp_path / "tokensmith.toml")
        assert config.tokens_dir == tmp_path / "tokens"
        assert config.output == tmp_path / "output" / "variables.css"
        assert config.prefix == "sia"
        assert config.unit == "px"

    def test_load_values(self, tmp_path: Path):
        from tokensmith.core.manifest import load_config

        path = tmp_path / "tokensmith.toml"
        path.write_text(
            """
[tokensmith]
tokens_dir = "design/tokens"
output = "build/vars.css"
prefix = "acme"
unit = "rem"
"""
        )
        config = load_config(path)
        assert config.tokens_dir == tmp_path / "design" / "tokens"
        assert config.output == tmp_path / "build" / "vars.css"
        assert config.prefix == "acme"
        assert config.unit == "rem"

    def test_partial_values(self, tmp_path: Path):
        from tokensmith.core.manifest import load_config

        path = tmp_path / "tokensmith.toml"
        path.write_text('[tokensmith]\nprefix = "ds"\n')
        config = load_config(path)
        assert config.prefix == "ds"
        assert config.tokens_dir == tmp_path / "tokens"

    def test_invalid_toml(self, tmp_path: Path):
        from tokensmith.core.errors import ConfigError
        from tokensmith.core.manifest import load_config

        path = tmp_path / "tokensmith.toml"
        path.write_text("[tokensmith\nprefix = ")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_wrong_type(self, tmp_path: Path):
        from tokensmith.core.errors import ConfigError
        from tokensmith.core.manifest import load_config

        path = tmp_path / "tokensmith.toml"
        path.write_text("[tokensmith]\nprefix = 3\n")
        with pytest.raises(ConfigError, match="'prefix' must be a string"):
            load_config(path)

    def test_with_overrides_ignores_none(self):
        from tokensmith.core.manifest import TokensmithConfig

        config = TokensmithConfig().with_overrides(prefix="x", unit=None)
        assert config.prefix == "x"
        assert config.unit == "px"

    def test_empty_prefix_kept_from_file_and_override(self, tmp_path: Path):
        from tokensmith.core.manifest import load_config

        path = tmp_path / "tokensmith.toml"
        path.write_text('[tokensmith]\nprefix = ""\n')

        from_file = load_config(path)
        from_override = load_config(tmp_path / "absent.toml").with_overrides(prefix="")
        assert from_file.prefix == ""
        assert from_override.prefix == ""


# =============================================================================
# Pipeline
# =============================================================================


class TestGenerateCssVariables:
    """Test the end-to-end generation pipeline."""

    def _config(self, tokens_dir: Path, tmp_path: Path, **kwargs):
        from tokensmith.core.manifest import TokensmithConfig

        return TokensmithConfig(
            tokens_dir=tokens_dir, output=tmp_path / "output" / "variables.css", **kwargs
        )

    def test_generates_stylesheet(
        self, tmp_path: Path, tokens_dir: Path, write_tokens, core_document
    ):
        from tokensmith.core.generator import generate_css_variables

        write_tokens("core.json", core_document)
        config = self._config(tokens_dir, tmp_path)

        report = generate_css_variables(config, datetime(2026, 10, 19, tzinfo=UTC))

        assert report.written
        assert report.output_path == config.output
        assert report.variable_count == 1
        assert report.result.mode_counts == {"light": 1}
        css = config.output.read_text(encoding="utf-8")
        assert "  --sia-core-spacing-base-unit: 8px;\n" in css
        assert " * light: 1 variables\n" in css
        assert "2026-10-19T00:00:00.000Z" in css

    def test_files_processed_in_name_order(
        self, tmp_path: Path, tokens_dir: Path, write_tokens, core_document
    ):
        from tokensmith.core.generator import generate_css_variables

        later = {
            "collections": [
                {"name": "Core", "variables": {"Spacing": {"baseUnit": {"values": {"light": 12}}}}}
            ]
        }
        write_tokens("b-override.json", later)
        write_tokens("a-core.json", core_document)

        report = generate_css_variables(self._config(tokens_dir, tmp_path))
        assert report.result.variables == {"--sia-core-spacing-base-unit": "12px"}
        assert report.result.mode_counts == {"light": 2}

    def test_bad_file_does_not_abort(
        self, tmp_path: Path, tokens_dir: Path, write_tokens, core_document
    ):
        from tokensmith.core.generator import generate_css_variables

        write_tokens("core.json", core_document)
        (tokens_dir / "broken.json").write_text("{")

        report = generate_css_variables(self._config(tokens_dir, tmp_path))
        assert report.written
        assert report.variable_count == 1
        assert [path.name for path in report.failed_files] == ["broken.json"]
        assert len(report.source_files) == 2

    def test_prefix_from_config(
        self, tmp_path: Path, tokens_dir: Path, write_tokens, core_document
    ):
        from tokensmith.core.generator import generate_css_variables

        write_tokens("core.json", core_document)
        report = generate_css_variables(self._config(tokens_dir, tmp_path, prefix="acme"))
        assert list(report.result.variables) == ["--acme-core-spacing-base-unit"]

    def test_no_files_writes_nothing(self, tmp_path: Path, tokens_dir: Path, caplog):
        from tokensmith.core.generator import generate_css_variables

        config = self._config(tokens_dir, tmp_path)
        with caplog.at_level(logging.WARNING, logger="tokensmith.core.generator"):
            report = generate_css_variables(config)

        assert not report.written
        assert not config.output.exists()
        assert "No JSON files found" in caplog.text

    def test_missing_tokens_dir(self, tmp_path: Path):
        from tokensmith.core.errors import GenerationError
        from tokensmith.core.generator import generate_css_variables

        config = self._config(tmp_path / "missing", tmp_path)
        with pytest.raises(GenerationError, match="Tokens directory not found"):
            generate_css_variables(config)
        assert not config.output.exists()

    def test_unwritable_output(
        self, tmp_path: Path, tokens_dir: Path, write_tokens, core_document
    ):
        from tokensmith.core.errors import GenerationError
        from tokensmith.core.generator import generate_css_variables
        from tokensmith.core.manifest import TokensmithConfig

        write_tokens("core.json", core_document)
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        config = TokensmithConfig(tokens_dir=tokens_dir, output=blocker / "variables.css")

        with pytest.raises(GenerationError, match="Cannot create output directory"):
            generate_css_variables(config)

    def test_write_failure(self, tmp_path: Path, tokens_dir: Path, write_tokens, core_document):
        from tokensmith.core.errors import GenerationError
        from tokensmith.core.generator import generate_css_variables

        write_tokens("core.json", core_document)
        config = self._config(tokens_dir, tmp_path)
        config.output.mkdir(parents=True)

        with pytest.raises(GenerationError, match="Cannot write stylesheet"):
            generate_css_variables(config)
        assert config.output.is_dir()

    @pytest.mark.parametrize(
        "content",
        [
            '{"collections": [], "n": ' + "9" * 5000 + "}",
            "[" * 100000 + "]" * 100000,
        ],
        ids=["oversized-integer", "deep-nesting"],
    )
    def test_undecodable_file_does_not_abort(
        self, tmp_path: Path, tokens_dir: Path, write_tokens, core_document, content
    ):
        from tokensmith.core.generator import generate_css_variables

        (tokens_dir / "a.json").write_text(content)
        write_tokens("b.json", core_document)

        report = generate_css_variables(self._config(tokens_dir, tmp_path))
        assert report.written
        assert report.result.variables == {"--sia-core-spacing-base-unit": "8px"}
        assert [path.name for path in report.failed_files] == ["a.json"]

    def test_invalid_utf8_file_does_not_abort(
        self, tmp_path: Path, tokens_dir: Path, write_tokens, core_document
    ):
        from tokensmith.core.generator import generate_css_variables

        (tokens_dir / "a.json").write_bytes(b"\xff\xfe\x00{")
        write_tokens("b.json", core_document)

        report = generate_css_variables(self._config(tokens_dir, tmp_path))
        assert report.variable_count == 1
        assert [path.name for path in report.failed_files] == ["a.json"]
