"""JSON/YAML serialization helpers built on PyYAML and the stdlib json module"""

import base64
import json
from datetime import date, datetime
from typing import Any

import yaml
from pydantic import BaseModel

from mdforge.core.parse import parse
from mdforge.errors import InvalidInput


JSON_INDENT = 2
YAML_INDENT = 2


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that writes shared objects out in full instead of as &anchors."""

    def ignore_aliases(self, data: Any) -> bool:
        return True


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON literal: {name}")


def loads_strict(text: str) -> Any:
    """json.loads that rejects the NaN/Infinity extensions Python accepts by default."""
    return json.loads(text, parse_constant=_reject_constant)


def _json_default(obj: Any) -> Any:
    """Fallback encoder for values PyYAML can produce but json cannot."""
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True, mode="json")
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    if isinstance(obj, bytes):
        return base64.b64encode(obj).decode("ascii")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


_JSON_KEY_TYPES = (str, int, float, bool, type(None))


def _json_key(key: Any) -> Any:
    if isinstance(key, _JSON_KEY_TYPES):
        return key
    if isinstance(key, (datetime, date)):
        return key.isoformat()
    return str(key)


def _stringify_keys(value: Any) -> Any:
    """Rewrite mapping keys json cannot encode (dates, tuples) as strings, recursively."""
    if isinstance(value, dict):
        return {_json_key(k): _stringify_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_stringify_keys(v) for v in value]
    return value


def _plain(value: Any) -> Any:
    """Reduce models to plain dicts so the safe dumper can represent them."""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, mode="json")
    return value


def pretty_print_json(value: Any) -> str:
    """Return value as 2-space indented JSON, keeping non-ASCII text as-is."""
    return json.dumps(value, indent=JSON_INDENT, ensure_ascii=False, default=_json_default)


def dump_yaml(value: Any) -> str:
    """Serialize a value as block-style YAML: 2-space indent, no wrapping, no aliases."""
    return yaml.dump(
        _plain(value),
        Dumper=_NoAliasDumper,
        indent=YAML_INDENT,
        width=float("inf"),
        default_flow_style=False,
        allow_unicode=True,
        sort_keys=False,
    )


def to_yaml(value: Any) -> str:
    """Convert a JSON string (or an in-memory value) to YAML.

    Raises InvalidInput when a string argument is not strict JSON.
    """
    if isinstance(value, str):
        try:
            value = loads_strict(value)
        except (ValueError, RecursionError) as e:
            raise InvalidInput(f"Invalid JSON: {e}") from e
    return dump_yaml(value)


def load_yaml(text: str) -> Any:
    """yaml.safe_load with YAML errors wrapped as InvalidInput."""
    try:
        return yaml.safe_load(text)
    except (yaml.YAMLError, RecursionError) as e:
        raise InvalidInput(f"Invalid YAML: {e}") from e


def from_yaml(text: str) -> str:
    """Convert a YAML string to pretty-printed JSON text."""
    value = load_yaml(text)
    try:
        return pretty_print_json(_stringify_keys(value))
    except (TypeError, ValueError, RecursionError) as e:
        raise InvalidInput(f"Invalid YAML: {e}") from e


def markdown_to_json(markdown: str, **parse_options: Any) -> str:
    """Parse markdown and return the Document as pretty-printed JSON text."""
    return pretty_print_json(parse(markdown, **parse_options).to_dict())


def markdown_to_yaml(markdown: str, **parse_options: Any) -> str:
    """Parse markdown and return the Document as YAML."""
    return dump_yaml(parse(markdown, **parse_options).to_dict())
