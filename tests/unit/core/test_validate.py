"""Unit tests for core/validate.py"""

import pytest

from mdforge.core.validate import validate_json, validate_yaml


def test_validate_json_valid():
    result = validate_json('{"name": "test", "value": 123}')
    assert result.valid is True
    assert result.message == "Valid JSON"


@pytest.mark.parametrize("text", ["{}", "[]", "null", '"s"'])
def test_validate_json_accepts_minimal_documents(text):
    assert validate_json(text).valid is True


@pytest.mark.parametrize("text", [
    "{invalid json}",
    '{"a":1,}',
    '{"name": "test",}',
    "[1, 2,]",
    "{'single': 'quotes'}",
    "[NaN]",
    "",
])
def test_validate_json_rejects(text):
    result = validate_json(text)
    assert result.valid is False
    assert result.message


def test_validate_json_non_string():
    result = validate_json(None)
    assert result.valid is False
    assert "Expected a string" in result.message


def test_validate_yaml_valid():
    result = validate_yaml("name: test\nvalue: 123")
    assert result.valid is True
    assert result.message == "Valid YAML"


@pytest.mark.parametrize("text", ["key: [unclosed", "a: b: c", "\tkey: tab-indented"])
def test_validate_yaml_rejects(text):
    result = validate_yaml(text)
    assert result.valid is False
    assert isinstance(result.message, str) and result.message


def test_validate_yaml_non_string():
    assert validate_yaml(123).valid is False


DEEP_JSON = "[" * 100000 + "]" * 100000


def test_validate_json_deeply_nested_reports_invalid():
    """Nesting past the interpreter's recursion limit is reported, not raised."""
    result = validate_json(DEEP_JSON)
    assert result.valid is False
    assert result.message


def test_validate_yaml_deeply_nested_reports_invalid():
    result = validate_yaml("a: " + "[" * 5000 + "]" * 5000)
    assert result.valid is False
    assert result.message
