"""Conversion dispatcher: route (content, source, target) through parse/serialize"""

import logging
from typing import Any, Callable, Optional, Union

from mdforge.core.detect import detect
from mdforge.core.models import Format
from mdforge.core.parse import parse
from mdforge.core.serialize import (
    from_yaml,
    load_yaml,
    loads_strict,
    markdown_to_json,
    markdown_to_yaml,
    to_yaml,
)
from mdforge.errors import InvalidInput, UnsupportedConversion


logger = logging.getLogger(__name__)


def _json_value(content: Any) -> Any:
    """Parse a JSON string; values already in memory pass through unchanged."""
    if not isinstance(content, str):
        return content
    try:
        return loads_strict(content)
    except (ValueError, RecursionError) as e:
        raise InvalidInput(f"Invalid JSON: {e}") from e


ROUTES: dict[tuple[str, str], Callable[[Any], Any]] = {
    ("markdown", "json"):           parse,
    ("markdown", "yaml"):           markdown_to_yaml,
    ("markdown", "json-string"):    markdown_to_json,
    ("json", "yaml"):               to_yaml,
    ("json-string", "yaml"):        to_yaml,
    ("json-string", "json"):        _json_value,
    ("yaml", "json"):               load_yaml,
    ("yaml", "json-string"):        from_yaml,
}


def _name(fmt: Union[str, Format, None]) -> Optional[str]:
    return fmt.value if isinstance(fmt, Format) else fmt


def supported_routes() -> list[tuple[str, str]]:
    """All (source, target) pairs convert() can handle besides the identity."""
    return list(ROUTES)


def convert(
    content: Any,
    source: Union[str, Format, None],
    target: Union[str, Format],
    **parse_options: Any,
    ) -> Any:
    """Convert content from source format to target format.

    An empty source is auto-detected. When source equals target the content
    is returned untouched. Returns a Document for markdown -> json, a parsed
    value for json/yaml -> json, and a string for every other route.

    Raises UnsupportedConversion for pairs outside the route table and
    InvalidInput for malformed JSON/YAML input. parse_options (e.g.
    flush_unterminated) are forwarded to the parser on markdown routes.
    """
    source, target = _name(source), _name(target)
    if not source:
        source = detect(content).value
        logger.debug("Auto-detected source format: %s", source)

    if source == target:
        return content

    route = ROUTES.get((source, target))
    if route is None:
        raise UnsupportedConversion(source, target)
    logger.debug("Converting %s -> %s via %s", source, target, route.__name__)
    if source == Format.markdown.value:
        return route(content, **parse_options)
    return route(content)
