"""Command-line interface for dock-prefs."""

import sys
from pathlib import Path
from typing import Optional

import typer

from dock_prefs import __version__
from dock_prefs.config import Config, load_config, save_example_config
from dock_prefs.errors import DockPreferencesError
from dock_prefs.loader import load
from dock_prefs.models import DockApp, DockPreferences
from dock_prefs.output.render import render_human, render_json
from dock_prefs.util.logger import configure_logging

app = typer.Typer(
    help="Inspect the macOS Dock preferences (com.apple.dock.plist).",
    add_completion=False,
)

PlistOption = typer.Option(
    None,
    "--plist",
    help="Read this plist instead of ~/Library/Preferences/com.apple.dock.plist",
)
ConfigOption = typer.Option(
    None,
    "--config",
    help="Path to configuration file (default: ~/.dock-prefs.yaml)",
)


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        print(f"dock-prefs version {__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log debug messages to stderr",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    ctx.obj = {"verbose": verbose}


def _setup(ctx: typer.Context, config_file: Optional[Path]) -> Config:
    """Load configuration and install logging for a command."""
    try:
        config = load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        print("Continuing with default settings...", file=sys.stderr)
        config = Config()

    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    configure_logging("DEBUG" if verbose else config.log_level)
    return config


def _load_or_exit(plist: Optional[Path], config: Config) -> DockPreferences:
    try:
        return load(plist or config.plist_path)
    except DockPreferencesError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(3)


def _find_app(prefs: DockPreferences, bundle_id: str) -> DockApp:
    for dock_app in (*prefs.persistent_apps, *prefs.recent_apps):
        if dock_app.bundle_identifier == bundle_id:
            return dock_app
    print(f"Error: No Dock item with bundle identifier '{bundle_id}'", file=sys.stderr)
    sys.exit(2)


@app.command()
def show(
    ctx: typer.Context,
    json: bool = typer.Option(
        False,
        "--json",
        help="Output preferences in JSON format"
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        help="Write output to file instead of stdout"
    ),
    plist: Optional[Path] = PlistOption,
    config_file: Optional[Path] = ConfigOption,
    generate_config: Optional[Path] = typer.Option(
        None,
        "--generate-config",
        help="Generate example configuration file at specified path and exit"
    ),
) -> None:
    """
    Show the Dock preferences.

    Examples:
        dock-prefs show                          # Tables on stdout
        dock-prefs show --json --out dock.json   # Save JSON
        dock-prefs show --plist ./copy.plist     # Read another file
        dock-prefs show --generate-config ~/.dock-prefs.yaml
    """
    if generate_config:
        try:
            save_example_config(generate_config)
        except OSError as e:
            print(f"Error generating config: {e}", file=sys.stderr)
            sys.exit(2)
        print(f"✓ Example configuration saved to {generate_config}", file=sys.stderr)
        sys.exit(0)

    config = _setup(ctx, config_file)
    prefs = _load_or_exit(plist, config)

    if json:
        output = render_json(prefs, indent=config.json_indent)
    else:
        output = render_human(
            prefs,
            show_empty_sections=config.show_empty_sections,
            trash_unknown_as_empty=config.trash_unknown_as_empty,
        )

    if out:
        if not out.parent.exists():
            print(f"Error: Directory does not exist: {out.parent}", file=sys.stderr)
            sys.exit(2)
        out.write_text(output)
        print(f"✓ Output written to {out}", file=sys.stderr)
    else:
        print(output)


@app.command("open-settings")
def open_settings(
    ctx: typer.Context,
    plist: Optional[Path] = PlistOption,
    config_file: Optional[Path] = ConfigOption,
) -> None:
    """Open the Dock pane in System Settings."""
    config = _setup(ctx, config_file)
    _load_or_exit(plist, config).open_dock_preferences()


@app.command()
def launch(
    ctx: typer.Context,
    bundle_id: str = typer.Argument(..., help="Bundle identifier of a Dock app"),
    plist: Optional[Path] = PlistOption,
    config_file: Optional[Path] = ConfigOption,
) -> None:
    """Launch an app from the Dock."""
    config = _setup(ctx, config_file)
    _find_app(_load_or_exit(plist, config), bundle_id).launch()


@app.command("quit")
def quit_app(
    ctx: typer.Context,
    bundle_id: str = typer.Argument(..., help="Bundle identifier of a Dock app"),
    plist: Optional[Path] = PlistOption,
    config_file: Optional[Path] = ConfigOption,
) -> None:
    """Quit a running app that appears in the Dock."""
    config = _setup(ctx, config_file)
    _find_app(_load_or_exit(plist, config), bundle_id).terminate()


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
