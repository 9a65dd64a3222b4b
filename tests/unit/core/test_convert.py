"""Unit tests for core/convert.py"""

import pytest
import yaml

from mdforge.core.convert import convert, supported_routes
from mdforge.core.models import Document, Format
from mdforge.errors import InvalidInput, UnsupportedConversion


def test_convert_identity_returns_same_object():
    content = "# Test"
    assert convert(content, "markdown", "markdown") is content


def test_convert_identity_skips_validation():
    assert convert("{broken", "json", "json") == "{broken"


def test_convert_identity_with_enum_and_string():
    content = "a: 1"
    assert convert(content, Format.yaml, "yaml") is content


def test_convert_markdown_to_json_returns_document():
    result = convert("# Test", "markdown", "json")
    assert isinstance(result, Document)
    assert result.content[0].text == "Test"


def test_convert_markdown_to_yaml():
    result = convert("# Test", "markdown", "yaml")
    assert isinstance(result, str)
    assert yaml.safe_load(result)["content"][0]["id"] == "test"


def test_convert_markdown_to_json_string():
    result = convert("# Test", "markdown", "json-string")
    assert isinstance(result, str)
    assert '"type": "heading"' in result


def test_convert_markdown_forwards_parse_options():
    result = convert("```\nx", "markdown", "json", flush_unterminated=True)
    assert result.content[0].content == ["x"]


@pytest.mark.parametrize("source", ["json", "json-string"])
def test_convert_json_to_yaml(source):
    assert convert('{"key": "value"}', source, "yaml") == "key: value\n"


def test_convert_json_string_to_json_parses():
    assert convert('{"data": "test"}', "json-string", "json") == {"data": "test"}


def test_convert_json_string_to_json_passes_values_through():
    value = {"data": "test"}
    assert convert(value, Format.json_string, Format.json) is value


def test_convert_json_to_yaml_invalid():
    with pytest.raises(InvalidInput, match="Invalid JSON"):
        convert("{invalid json}", "json", "yaml")


def test_convert_yaml_to_json_returns_value():
    assert convert("key: value", "yaml", "json") == {"key": "value"}


def test_convert_yaml_to_json_string():
    assert convert("key: value", "yaml", "json-string") == '{\n  "key": "value"\n}'


def test_convert_yaml_invalid():
    with pytest.raises(InvalidInput, match="Invalid YAML"):
        convert("key: [unclosed", "yaml", "json")


def test_convert_auto_detects_markdown():
    result = convert("# Heading", None, "json")
    assert isinstance(result, Document)


def test_convert_auto_detects_empty_source_string():
    assert convert('{"a": 1}', "", "yaml") == "a: 1\n"


def test_convert_unsupported():
    with pytest.raises(UnsupportedConversion, match="Conversion from unknown to other not supported") as exc_info:
        convert("content", "unknown", "other")
    assert exc_info.value.source == "unknown"
    assert exc_info.value.target == "other"


def test_convert_unsupported_is_value_error():
    with pytest.raises(ValueError):
        convert("content", "yaml", "markdown")


def test_convert_detected_text_is_unsupported():
    with pytest.raises(UnsupportedConversion, match="text to json"):
        convert("plain words", None, "json")


def test_supported_routes():
    routes = supported_routes()
    assert ("markdown", "yaml") in routes
    assert ("yaml", "json-string") in routes
    assert ("json", "markdown") not in routes


def test_convert_yaml_date_key_to_json_string():
    assert convert("2024-01-01: x", "yaml", "json-string") == '{\n  "2024-01-01": "x"\n}'


def test_convert_deeply_nested_json_string_to_json():
    with pytest.raises(InvalidInput, match="Invalid JSON"):
        convert("[" * 100000 + "]" * 100000, "json-string", "json")
