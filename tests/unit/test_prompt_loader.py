"""Tests for extraction instruction and JSON schema loading."""

import json
from pathlib import Path

import pytest

from structextract.config.exceptions import ConfigurationError
from structextract.extraction.prompt_loader import load_instructions, load_json_schema


class TestLoadInstructions:
    def test_loads_default_instructions(self) -> None:
        text = load_instructions()
        assert "基礎柱形設計例" in text
        assert "Ⅰゾーンの場合" in text
        assert "(SD345)" in text

    def test_loads_custom_instructions(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Read the schedule", encoding="utf-8")
        assert load_instructions(custom) == "Read the schedule"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ConfigurationError, match="Failed to load extraction instructions"):
            load_instructions(Path("/nonexistent/file.txt"))


class TestLoadJsonSchema:
    def test_default_schema_requires_four_string_fields(self) -> None:
        schema = json.loads(load_json_schema())
        items = schema["properties"]["records"]["items"]
        assert set(items["required"]) == {
            "columnType", "columnDimensions", "mainReinforcement", "hoopReinforcement",
        }
        assert all(prop["type"] == "string" for prop in items["properties"].values())
        assert items["additionalProperties"] is False

    def test_loads_custom_schema(self, tmp_path: Path) -> None:
        custom = tmp_path / "schema.json"
        custom.write_text('{"type": "array"}')
        assert load_json_schema(custom) == '{"type": "array"}'

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(ConfigurationError, match="Failed to load extraction schema"):
            load_json_schema(Path("/nonexistent/schema.json"))
