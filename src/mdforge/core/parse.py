"""Line-oriented markdown block parser: raw text -> Document"""

import logging
import re
from dataclasses import dataclass, field
from functools import reduce
from typing import Optional, Union

from mdforge.core.models import (
    Block,
    BlockquoteBlock,
    CodeBlock,
    Document,
    HeadingBlock,
    ListBlock,
    ListType,
    ParagraphBlock,
    RuleBlock,
)
from mdforge.core.utils.slug import slugify


logger = logging.getLogger(__name__)

FENCE = '```'
DEFAULT_LANGUAGE = 'text'

HEADING_RE    = re.compile(r'^(#{1,6})\s+(.+)$')
UNORDERED_RE  = re.compile(r'^\s*[-*+]\s+(.+)$')
ORDERED_RE    = re.compile(r'^\s*[0-9]+\.\s+(.+)$')
RULE_RE       = re.compile(r'^\s*(-{3,}|\*{3,}|_{3,})\s*$')
BLOCKQUOTE_RE = re.compile(r'^>\s+(.+)$')


@dataclass
class OpenCode:
    """A fenced code block whose closing fence has not been seen yet."""
    language: str
    lines: list[str] = field(default_factory=list)

    def close(self) -> CodeBlock:
        return CodeBlock(language=self.language, content=self.lines)


@dataclass
class OpenList:
    """List accumulator; it already holds its slot in ParseState.content."""
    list_type: ListType
    items: list[str] = field(default_factory=list)

    def close(self) -> ListBlock:
        return ListBlock(list_type=self.list_type, items=self.items)


@dataclass
class ParseState:
    """Running state of the single forward pass over source lines."""
    content:        list[Union[Block, OpenList]] = field(default_factory=list)
    code:           Optional[OpenCode] = None
    open_list:      Optional[OpenList] = None
    last_was_list:  bool = False
    blank_run:      int = 0

    def close_list(self) -> None:
        self.open_list = None
        self.last_was_list = False


def match_list_item(line: str) -> Optional[tuple[ListType, str]]:
    """Return (list_type, item_text) for a list line, else None."""
    if m := UNORDERED_RE.match(line):
        return ListType.unordered, m.group(1)
    if m := ORDERED_RE.match(line):
        return ListType.ordered, m.group(1)
    return None


def _add_list_item(state: ParseState, list_type: ListType, text: str) -> None:
    if state.open_list is None or state.open_list.list_type != list_type:
        state.open_list = OpenList(list_type=list_type)
        state.content.append(state.open_list)
    state.open_list.items.append(text)
    state.last_was_list = True


def step(state: ParseState, line: str) -> ParseState:
    """Consume one source line, updating and returning state."""
    if state.code is None and not line.strip():
        state.blank_run += 1
        if state.blank_run >= 2:
            state.close_list()
        return state
    state.blank_run = 0

    if line.startswith(FENCE):
        if state.code is None:
            state.code = OpenCode(language=line[len(FENCE):].strip() or DEFAULT_LANGUAGE)
        else:
            state.content.append(state.code.close())
            state.code = None
        return state

    if state.code is not None:
        state.code.lines.append(line)
        return state

    if m := HEADING_RE.match(line):
        text = m.group(2)
        state.content.append(HeadingBlock(level=len(m.group(1)), text=text, id=slugify(text)))
        state.close_list()
        return state

    if item := match_list_item(line):
        _add_list_item(state, *item)
        return state

    # A single non-list line directly after an item keeps the list open.
    if not state.last_was_list:
        state.open_list = None
    state.last_was_list = False

    if RULE_RE.match(line):
        state.content.append(RuleBlock())
    elif m := BLOCKQUOTE_RE.match(line):
        state.content.append(BlockquoteBlock(text=m.group(1)))
    else:
        state.content.append(ParagraphBlock(text=line.strip()))
    return state


def split_lines(text: str) -> list[str]:
    """Split on LF, dropping a trailing CR so CRLF input parses like LF input."""
    return [line[:-1] if line.endswith('\r') else line for line in text.split('\n')]


def parse(text: Optional[str], *, flush_unterminated: bool = False) -> Document:
    """Parse markdown text into a Document.

    None is treated as an empty string. A code fence still open at end of
    input is dropped unless flush_unterminated is set, in which case its
    collected lines are emitted as a final CodeBlock.
    """
    raw = text if text is not None else ''
    state = reduce(step, split_lines(raw), ParseState())

    if state.code is not None:
        if flush_unterminated:
            state.content.append(state.code.close())
        else:
            logger.debug("Dropping unterminated %s code block (%d lines)",
                         state.code.language, len(state.code.lines))

    content = [b.close() if isinstance(b, OpenList) else b for b in state.content]
    logger.debug("Parsed %d block(s) from %d char(s)", len(content), len(raw))
    return Document(metadata={}, content=content, raw=raw)
