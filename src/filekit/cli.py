"""CLI commands using Typer."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any

import typer
import yaml
from rich.console import Console

from filekit import __version__
from filekit.console import Reporter
from filekit.context import create_context
from filekit.errors import FileKitError
from filekit.models import FileInfo

app = typer.Typer(
    name="filekit",
    help="Normalize paths and run basic filesystem operations",
    no_args_is_help=True,
)

console = Console()
reporter = Reporter(console)

# Permission, setuid, setgid and sticky bits
MAX_MODE = 0o7777


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"filekit v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", help="Log filesystem calls")
    ] = False,
) -> None:
    """Normalize paths and run basic filesystem operations."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# ============================================================================
# Path Commands
# ============================================================================


@app.command("normalize")
def normalize(
    path: Annotated[str, typer.Argument(help="Path to normalize")],
    _context=None,
) -> None:
    """Print the normalized form of a path."""
    ctx = _context or create_context()
    console.print(ctx.file(path).path, markup=False, highlight=False)


@app.command("info")
def info(
    path: Annotated[str, typer.Argument(help="Path to describe")],
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON")] = False,
    _context=None,
) -> None:
    """Describe a path: name, parent, existence."""
    ctx = _context or create_context()
    file_info = FileInfo.from_file(ctx.file(path))

    if as_json:
        console.print_json(file_info.model_dump_json(by_alias=True))
    else:
        reporter.show_file_info(file_info)


# ============================================================================
# Filesystem Commands
# ============================================================================


@app.command("ls")
def list_directory(
    path: Annotated[str, typer.Argument(help="Directory to list")],
    _context=None,
) -> None:
    """List the contents of a directory."""
    ctx = _context or create_context()

    try:
        entries = ctx.file(path).list_contents()
    except FileKitError as e:
        reporter.show_error(str(e))
        raise typer.Exit(1) from e
    except OSError as e:
        reporter.show_error(f"Cannot list {path}: {e}")
        raise typer.Exit(1) from e

    reporter.show_entries(entries)


def _parse_mode(mode: str | None) -> dict[str, Any] | None:
    """Parse an octal mode string into directory attributes.

    Raises:
        ValueError: If mode is not octal or has bits outside 0o7777.
    """
    if mode is None:
        return None
    value = int(mode, 8)
    if not 0 <= value <= MAX_MODE:
        raise ValueError(f"mode out of range: {mode}")
    return {"mode": value}


@app.command("mkdir")
def make_directory(
    path: Annotated[str, typer.Argument(help="Directory to create")],
    parents: Annotated[
        bool, typer.Option("--parents", "-p", help="Create missing parent directories")
    ] = False,
    mode: Annotated[
        str | None, typer.Option("--mode", "-m", help="Permission bits in octal, e.g. 755")
    ] = None,
    _context=None,
) -> None:
    """Create a directory."""
    ctx = _context or create_context()
    file = ctx.file(path)

    try:
        attributes = _parse_mode(mode)
        created = file.create_directory(parents=parents, attributes=attributes)
    except ValueError as e:
        reporter.show_error(f"Invalid mode: {mode}")
        raise typer.Exit(1) from e
    except OSError as e:
        reporter.show_error(f"Cannot create {file.path}: {e}")
        raise typer.Exit(1) from e

    if created:
        reporter.show_success(f"Created {file.path}")
    else:
        reporter.show_warning(f"{file.path} already exists")


def _load_document(source: Path) -> dict[str, Any]:
    """Load a mapping from a JSON or YAML file.

    Args:
        source: File with a .json, .yaml or .yml extension.

    Returns:
        Loaded mapping.

    Raises:
        ValueError: If the document cannot be parsed or is not a mapping.
        OSError: If the file cannot be read.
    """
    text = source.read_text()
    try:
        if source.suffix.lower() in (".yaml", ".yml"):
            data = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Cannot parse {source}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"{source} does not contain a mapping")
    return data


@app.command("write")
def write_plist(
    target: Annotated[str, typer.Argument(help="Property list file to write")],
    source: Annotated[Path, typer.Argument(help="JSON or YAML file holding a mapping")],
    _context=None,
) -> None:
    """Write a JSON or YAML mapping as a property list."""
    ctx = _context or create_context()
    file = ctx.file(target)

    try:
        data = _load_document(source)
    except ValueError as e:
        reporter.show_error(str(e))
        raise typer.Exit(1) from e
    except OSError as e:
        reporter.show_error(f"Cannot read {source}: {e}")
        raise typer.Exit(1) from e

    try:
        file.write(data)
    except TypeError as e:
        reporter.show_error(f"Cannot encode {source} as a property list: {e}")
        raise typer.Exit(1) from e
    except OSError as e:
        reporter.show_error(f"Cannot write {file.path}: {e}")
        raise typer.Exit(1) from e

    reporter.show_success(f"Wrote {len(data)} keys to {file.path}")


if __name__ == "__main__":
    app()
