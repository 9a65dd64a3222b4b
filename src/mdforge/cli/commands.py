"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Any, List, Optional

import typer

from mdforge.config import Settings, load_config
from mdforge.core.cleanup import clean_markdown
from mdforge.core.convert import convert
from mdforge.core.detect import detect
from mdforge.core.models import Format
from mdforge.core.serialize import pretty_print_json
from mdforge.core.validate import validate_json, validate_yaml
from mdforge.errors import ConversionError


logger = logging.getLogger(__name__)

EXTENSIONS = {
    Format.json.value:        ".json",
    Format.json_string.value: ".json",
    Format.yaml.value:        ".yml",
    Format.markdown.value:    ".md",
}
VALIDATORS = {Format.json.value: validate_json, Format.yaml.value: validate_yaml}
SUFFIX_FORMATS = {".json": Format.json.value, ".yml": Format.yaml.value, ".yaml": Format.yaml.value}


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {path}", e)


def _render(result: Any) -> str:
    """Strings pass through; Documents and parsed values become pretty JSON."""
    return result if isinstance(result, str) else pretty_print_json(result)


def _run(text: str, source: Optional[str], target: str, settings: Settings) -> str:
    """Detect, optionally clean, convert, and render one input."""
    source = source or detect(text).value
    if settings.clean_markdown and source == Format.markdown.value:
        text = clean_markdown(text)
    result = convert(text, source, target, flush_unterminated=settings.flush_unterminated)
    return _render(result)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Markdown -> structured document -> JSON/YAML converter."""
    settings = _settings()
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


def convert_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Input file")],
    to: Annotated[Optional[str], typer.Option("--to", help="Target format: json, json-string, yaml, markdown")] = None,
    source: Annotated[Optional[str], typer.Option("--from", help="Source format; detected when omitted")] = None,
    out: Annotated[Optional[Path], typer.Option("--out", "-o", help="Write result to this file instead of stdout")] = None,
    clean: Annotated[Optional[bool], typer.Option("--clean/--no-clean", help="Tidy markdown before parsing")] = None,
    ):
    """Convert a single file and print or write the result."""
    settings = _settings(overrides={"clean_markdown": clean})
    target = to or settings.output_format
    try:
        output = _run(_read(path), source, target, settings)
    except ConversionError as e:
        _fail(f"Cannot convert {path}", e)

    if out is None:
        typer.echo(output)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(output, encoding="utf-8")
    typer.echo(f"  {path} -> {out}")


def batch_cmd(
    paths: Annotated[List[Path], typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown files")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    to: Annotated[Optional[str], typer.Option("--to", help="Target format: json, yaml, markdown")] = None,
    clean: Annotated[Optional[bool], typer.Option("--clean/--no-clean", help="Tidy markdown before parsing")] = None,
    ):
    """Convert many markdown files; failures are reported per file."""
    settings = _settings(overrides={"output_dir": out, "output_format": to, "clean_markdown": clean})
    output_dir = Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    target = settings.output_format
    extension = EXTENSIONS.get(target, f".{target}")

    converted = 0
    failed = 0
    for path in paths:
        dest = output_dir / f"{path.stem}{extension}"
        try:
            text = path.read_text(encoding="utf-8")
            dest.write_text(_run(text, Format.markdown.value, target, settings), encoding="utf-8")
        except (ConversionError, OSError, UnicodeDecodeError) as e:
            logger.debug("Batch conversion of %s failed", path, exc_info=True)
            typer.echo(f"  failed: {path} ({e})", err=True)
            failed += 1
            continue
        typer.echo(f"  {path} -> {dest}")
        converted += 1

    typer.echo(f"Batch conversion complete - {converted}/{len(paths)} files converted successfully.")
    if failed:
        raise typer.Exit(1)


def detect_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Input file")],
    ):
    """Print the detected content type of a file."""
    typer.echo(detect(_read(path)).value)


def validate_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="File to check")],
    fmt: Annotated[Optional[str], typer.Option("--format", help="json or yaml; inferred from suffix when omitted")] = None,
    ):
    """Check that a JSON or YAML file is well-formed."""
    text = _read(path)
    fmt = fmt or SUFFIX_FORMATS.get(path.suffix.lower()) or detect(text).value
    validator = VALIDATORS.get(fmt)
    if validator is None:
        _fail(f"Cannot validate {path} as {fmt}; use --format json or --format yaml")

    result = validator(text)
    typer.echo(result.message)
    if not result.valid:
        raise typer.Exit(1)
