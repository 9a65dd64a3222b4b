"""Content-type sniffing: classify text as json, yaml, markdown, or plain text"""

import logging
import re

import yaml

from mdforge.core.models import Format
from mdforge.core.parse import HEADING_RE, ORDERED_RE, UNORDERED_RE
from mdforge.core.serialize import loads_strict


logger = logging.getLogger(__name__)

YAML_KEY_RE = re.compile(r'^[\w-]+:\s*.+$', re.MULTILINE)
_PAIRS = {'{': '}', '[': ']'}


def looks_balanced(text: str) -> bool:
    """Cheap structural check: brackets nest correctly and every string is closed.

    Characters inside double-quoted strings are ignored and backslash escapes
    are honoured, so '{"a": "}"}' is balanced.
    """
    stack: list[str] = []
    in_string = False
    escaped = False
    for ch in text:
        if in_string:
            if escaped:
                escaped = False
            elif ch == '\\':
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch in _PAIRS:
            stack.append(_PAIRS[ch])
        elif ch in ('}', ']'):
            if not stack or stack.pop() != ch:
                return False
    return not stack and not in_string


def _is_json(trimmed: str) -> bool:
    wrapped = (trimmed[0], trimmed[-1]) in (('{', '}'), ('[', ']'))
    if not wrapped or not looks_balanced(trimmed):
        return False
    try:
        loads_strict(trimmed)
    except (ValueError, RecursionError) as e:
        logger.debug("JSON trial parse failed: %s", e)
        return False
    return True


def _is_yaml(trimmed: str) -> bool:
    if trimmed[0] in _PAIRS or not YAML_KEY_RE.search(trimmed):
        return False
    try:
        yaml.safe_load(trimmed)
    except (yaml.YAMLError, RecursionError) as e:
        logger.debug("YAML trial parse failed: %s", e)
        return False
    return True


def _is_markdown(trimmed: str) -> bool:
    return any(
        HEADING_RE.match(line) or UNORDERED_RE.match(line) or ORDERED_RE.match(line)
        for line in trimmed.splitlines()
    )


def detect(content: str) -> Format:
    """Return the most likely Format of content; first successful check wins."""
    trimmed = (content or '').strip()
    if not trimmed:
        return Format.text
    if _is_json(trimmed):
        return Format.json
    if _is_yaml(trimmed):
        return Format.yaml
    if _is_markdown(trimmed):
        return Format.markdown
    return Format.text
