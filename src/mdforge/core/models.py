"""Typed block and document models produced by the markdown parser"""

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Format(str, Enum):
    """Content formats understood by the detector and the conversion dispatcher"""
    json = "json"
    json_string = "json-string"     # pretty-printed JSON text rather than a parsed value
    yaml = "yaml"
    markdown = "markdown"
    text = "text"


class ListType(str, Enum):
    ordered = "ordered"
    unordered = "unordered"


class _Block(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class HeadingBlock(_Block):
    """An ATX heading; `id` is an anchor slug derived from `text`."""
    type: Literal["heading"] = "heading"
    level: int = Field(..., ge=1, le=6)
    text: str
    id: str


class ListBlock(_Block):
    """A run of same-type list items merged into one block."""
    type: Literal["list"] = "list"
    list_type: ListType = Field(..., alias="listType")
    items: list[str] = Field(default_factory=list)


class CodeBlock(_Block):
    """Fenced code; `content` holds the raw lines between the fences."""
    type: Literal["code"] = "code"
    language: str = "text"
    content: list[str] = Field(default_factory=list)


class RuleBlock(_Block):
    type: Literal["hr"] = "hr"


class BlockquoteBlock(_Block):
    type: Literal["blockquote"] = "blockquote"
    text: str


class ParagraphBlock(_Block):
    type: Literal["paragraph"] = "paragraph"
    text: str


Block = Annotated[
    Union[HeadingBlock, ListBlock, CodeBlock, RuleBlock, BlockquoteBlock, ParagraphBlock],
    Field(discriminator="type"),
]


class Document(BaseModel):
    """Parse result: ordered blocks plus the verbatim source they came from."""
    model_config = ConfigDict(frozen=True)

    metadata: dict[str, Any] = Field(default_factory=dict)     # reserved for frontmatter
    content:  list[Block]    = Field(default_factory=list)
    raw:      str            = ""

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-compatible dict using the public field names (e.g. listType)."""
        return self.model_dump(by_alias=True, mode="json")


class ValidationResult(BaseModel):
    """Outcome of a well-formedness check; failures are data, not exceptions."""
    valid: bool
    message: str
