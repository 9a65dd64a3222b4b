"""Well-formedness checks that report problems as data instead of raising"""

import yaml

from mdforge.core.models import ValidationResult
from mdforge.core.serialize import loads_strict


def validate_json(text: str) -> ValidationResult:
    """Strictly parse text as JSON (no trailing commas, no NaN/Infinity)."""
    if not isinstance(text, str):
        return ValidationResult(valid=False, message=f"Expected a string, got {type(text).__name__}")
    try:
        loads_strict(text)
    except (ValueError, RecursionError) as e:
        return ValidationResult(valid=False, message=str(e))
    return ValidationResult(valid=True, message="Valid JSON")


def validate_yaml(text: str) -> ValidationResult:
    if not isinstance(text, str):
        return ValidationResult(valid=False, message=f"Expected a string, got {type(text).__name__}")
    try:
        yaml.safe_load(text)
    except (yaml.YAMLError, RecursionError) as e:
        return ValidationResult(valid=False, message=str(e))
    return ValidationResult(valid=True, message="Valid YAML")
