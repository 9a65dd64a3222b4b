"""Anchor slug generation for heading ids"""

import re


_NON_WORD_RE = re.compile(r'[^\w]+', re.ASCII)


def slugify(text: str) -> str:
    """Lowercase text and collapse each run of non-word characters to one hyphen.

    Leading/trailing hyphens are kept and equal slugs are not de-duplicated,
    so two headings with the same text share an id.
    """
    return _NON_WORD_RE.sub('-', text.lower())
