"""[Layer: Presentation] Typer CLI Commands."""

from importlib.metadata import PackageNotFoundError, version as get_package_version
from pathlib import Path
from typing import Optional

import typer

from extrakeys.config import get_settings
from extrakeys.core.aliases import resolve_alias
from extrakeys.core.glyphs import display, display_matrix, normalize_style
from extrakeys.core.preferences import ReloadReport, TerminalPreferences


def _get_version() -> str:
    """Get version from package metadata (single source of truth: pyproject.toml)."""
    try:
        return get_package_version("extrakeys")
    except PackageNotFoundError:
        return "0.0.0-dev"


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"extrakeys {_get_version()}")
        raise typer.Exit()


app = typer.Typer(
    name="extrakeys",
    help="Inspect and validate the extra-keys row and keyboard shortcuts.",
)

PathArgument = typer.Argument(
    None,
    exists=True,
    dir_okay=False,
    help="Properties file (defaults to ~/.termux/termux.properties)",
)


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Extra-keys configuration tools."""


def _load(path: Optional[Path]) -> tuple[TerminalPreferences, ReloadReport]:
    """Reload preferences from ``path`` or the configured location."""
    settings = get_settings()
    prefs = TerminalPreferences()
    report = prefs.reload_from_file(
        path=path or settings.properties_path,
        home=settings.home,
    )
    return prefs, report


def _echo_errors(report: ReloadReport) -> None:
    for message in report.errors:
        typer.echo(message, err=True)


def _resolve_style(style: Optional[str], prefs: TerminalPreferences) -> str:
    override = style or get_settings().style_override
    return normalize_style(override) if override else prefs.extra_keys_style


@app.command()
def show(
    path: Optional[Path] = PathArgument,
    style: Optional[str] = typer.Option(
        None,
        "--style",
        "-s",
        help="Glyph style (default, arrows-only, arrows-all, all, none)",
    ),
) -> None:
    """Print the extra-keys rows as they would be displayed."""
    prefs, report = _load(path)
    _echo_errors(report)
    for row in display_matrix(_resolve_style(style, prefs), prefs.extra_keys):
        typer.echo(" ".join(row))
    if not report.ok:
        raise typer.Exit(1)


@app.command()
def check(path: Optional[Path] = PathArgument) -> None:
    """Validate the properties file."""
    _, report = _load(path)
    if report.ok:
        typer.echo("OK")
        return
    _echo_errors(report)
    raise typer.Exit(1)


@app.command()
def shortcuts(path: Optional[Path] = PathArgument) -> None:
    """List bound keyboard shortcuts."""
    prefs, report = _load(path)
    _echo_errors(report)
    bound = sorted(prefs.shortcuts, key=lambda s: s.action)
    if not bound:
        typer.echo("No keyboard shortcuts bound.")
        return
    for shortcut in bound:
        typer.echo(f"  {shortcut.label:<10} {shortcut.action.name}")


@app.command()
def glyph(
    token: str = typer.Argument(..., help="Key identifier, e.g. LEFT or PAGE_UP"),
    style: str = typer.Option("default", "--style", "-s", help="Glyph style"),
) -> None:
    """Print the glyph shown for a key identifier."""
    typer.echo(display(normalize_style(style), resolve_alias(token)))


@app.command(name="version")
def version_cmd() -> None:
    """Show version."""
    typer.echo(f"extrakeys {_get_version()}")
