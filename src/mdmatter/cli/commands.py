"""CLI command implementations"""

import json
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
import yaml

from mdmatter.config import Settings, load_config
from mdmatter.core.models import Document
from mdmatter.core.normalize import strip_bom
from mdmatter.core.parse import discover_files
from mdmatter.errors import MatterError
from mdmatter.matter import detect_language, has_front_matter, read
from mdmatter.util.logging import configure_logging, get_logger


logger = get_logger(__name__)


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


def _read_text(path: Path) -> str:
    try:
        return strip_bom(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        _fail(f"Cannot read {path}", e)


def _doc_json(doc: Document) -> dict[str, Any]:
    return {
        "path": str(doc.path) if doc.path else None,
        "language": doc.language,
        "is_empty": doc.is_empty,
        "data": doc.data,
        "excerpt": doc.excerpt,
        "content": doc.content,
    }


def _assignments(pairs: list[str]) -> dict[str, Any]:
    """Parse KEY=VALUE pairs; values are typed as YAML scalars (plain strings if not YAML)."""
    data: dict[str, Any] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise typer.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--set")
        try:
            data[key.strip()] = yaml.safe_load(value)
        except yaml.YAMLError:
            data[key.strip()] = value
    return data


def main_callback(
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="debug, info, warning, error")] = None,
    ):
    """Front matter extraction and stringification."""
    configure_logging(log_level or _settings().log_level)


def parse_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to parse")],
    language: Annotated[Optional[str], typer.Option("--language", help="Force an engine, ignoring inline tags")] = None,
    delimiters: Annotated[Optional[str], typer.Option("--delimiters", help="Front matter delimiter")] = None,
    excerpt: Annotated[Optional[bool], typer.Option("--excerpt/--no-excerpt", help="Extract an excerpt")] = None,
    separator: Annotated[Optional[str], typer.Option("--excerpt-separator", help="Excerpt separator")] = None,
    unsafe_eval: Annotated[Optional[bool], typer.Option("--unsafe-eval", help="Evaluate javascript blocks as code")] = None,
    ):
    """Print front matter, excerpt and content as JSON (a list for directories)."""
    settings = _settings(overrides={
        "delimiters": delimiters, "excerpt": excerpt,
        "excerpt_separator": separator, "unsafe_eval": unsafe_eval,
    })
    options = settings.to_options(language)
    root = Path(path)
    if not root.exists():
        _fail(f"No such file or directory: {path}")

    results = []
    for p in discover_files(root):
        try:
            results.append(_doc_json(read(p, options)))
        except (MatterError, OSError, ValueError) as e:
            _fail(f"Failed to parse {p}", e)
        logger.info("Parsed %s", p)

    out = results[0] if root.is_file() else results
    typer.echo(json.dumps(out, indent=2, ensure_ascii=False, default=str))


def stringify_cmd(
    path: Annotated[str, typer.Argument(help="File to update")],
    values: Annotated[Optional[list[str]], typer.Option("--set", help="KEY=VALUE to merge into front matter")] = None,
    language: Annotated[Optional[str], typer.Option("--language", help="Engine used to write the front matter")] = None,
    write: Annotated[bool, typer.Option("--write", help="Rewrite the file instead of printing")] = False,
    ):
    """Merge values into a file's front matter and emit the result."""
    settings = _settings()
    options = settings.to_options()
    data = _assignments(values or [])
    try:
        doc = read(path, options)
        if language:
            options = settings.to_options(language)
        text = doc.stringify(data, options)
    except (MatterError, OSError, ValueError) as e:
        _fail(f"Failed to stringify {path}", e)

    if write:
        Path(path).write_text(text, encoding="utf-8")
        typer.echo(f"Updated {path}")
    else:
        typer.echo(text, nl=False)


def check_cmd(
    path: Annotated[str, typer.Argument(help="File to check")],
    ):
    """Exit 0 if the file starts with front matter, 1 otherwise."""
    options = _settings().to_options()
    if has_front_matter(_read_text(Path(path)), options):
        typer.echo("yes")
    else:
        typer.echo("no")
        raise typer.Exit(1)


def language_cmd(
    path: Annotated[str, typer.Argument(help="File to inspect")],
    ):
    """Print the inline language tag after the opening delimiter, if any."""
    options = _settings().to_options()
    text = _read_text(Path(path))
    if has_front_matter(text, options):
        tag = detect_language(text, options)
        if tag.name:
            typer.echo(tag.name)
