"""Unit tests for core/models.py"""

import pytest
from pydantic import ValidationError

from mdforge.core.models import Document, HeadingBlock, ListBlock, ListType, RuleBlock
from mdforge.core.parse import parse


def test_document_to_dict_shape():
    doc = parse("# Title\n- a\n---")
    assert doc.to_dict() == {
        "metadata": {},
        "content": [
            {"type": "heading", "level": 1, "text": "Title", "id": "title"},
            {"type": "list", "listType": "unordered", "items": ["a"]},
            {"type": "hr"},
        ],
        "raw": "# Title\n- a\n---",
    }


def test_document_validates_from_dict():
    """The discriminated union rebuilds typed blocks from serialized data."""
    doc = Document.model_validate({
        "content": [
            {"type": "list", "listType": "ordered", "items": ["x"]},
            {"type": "hr"},
        ],
        "raw": "1. x\n---",
    })
    assert doc.content == [ListBlock(list_type=ListType.ordered, items=["x"]), RuleBlock()]


def test_document_is_frozen():
    doc = parse("text")
    with pytest.raises(ValidationError):
        doc.raw = "changed"


def test_heading_level_bounds():
    with pytest.raises(ValidationError):
        HeadingBlock(level=7, text="x", id="x")


def test_unknown_block_type_rejected():
    with pytest.raises(ValidationError):
        Document.model_validate({"content": [{"type": "table"}]})
