"""Tidy-up pass for markdown extracted from office/PDF documents"""

import re


BULLET_GLYPHS = '•·○●▪▫◦‣⁃'

_EXCESS_BLANKS_RE = re.compile(r'\n{3,}')
_GLUED_HEADING_RE = re.compile(r'(?<=[^\n#])(#{1,6} )')
_BULLET_RE = re.compile(f'^[{BULLET_GLYPHS}]')
_NUMBERED_RE = re.compile(r'^(\d+)[.)]')
_MULTI_SPACE_RE = re.compile(r' {2,}')


def _normalize_line(line: str) -> str:
    """Rewrite glyph bullets as '- item' and '1)' numbering as '1.'."""
    stripped = line.strip()
    if _BULLET_RE.match(stripped):
        return '- ' + stripped[1:].strip()
    if _NUMBERED_RE.match(stripped):
        return _NUMBERED_RE.sub(r'\1.', stripped, count=1)
    return line


def clean_markdown(markdown: str) -> str:
    """Normalize loosely formatted markdown so the block parser reads it well.

    Collapses blank-line runs, splits headings glued onto preceding text,
    normalizes bullets and numbering, squeezes repeated spaces, and strips
    trailing whitespace.
    """
    markdown = _EXCESS_BLANKS_RE.sub('\n\n', markdown)
    markdown = _GLUED_HEADING_RE.sub(r'\n\n\1', markdown)
    markdown = '\n'.join(_normalize_line(line) for line in markdown.split('\n'))
    markdown = _MULTI_SPACE_RE.sub(' ', markdown)
    return '\n'.join(line.rstrip() for line in markdown.split('\n')).strip()
