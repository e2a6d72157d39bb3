"""Output rendering for Dock preferences."""

import json
from io import StringIO

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from dock_prefs.models import DockApp, DockFile, DockPreferences, TrashState


def render_human(
    prefs: DockPreferences,
    show_empty_sections: bool = True,
    trash_unknown_as_empty: bool = True,
) -> str:
    """
    Render Dock preferences in human-readable format using Rich.

    Args:
        prefs: Preferences to render
        show_empty_sections: Print a table even when a list is empty
        trash_unknown_as_empty: Show an unreported Trash state as "Empty"

    Returns:
        Formatted string suitable for terminal display
    """
    output_buffer = StringIO()
    console = Console(file=output_buffer, width=120, force_terminal=True)

    console.print()
    header_text = Text()
    header_text.append("Dock Preferences", style="bold cyan")
    console.print(Panel(header_text, border_style="cyan", box=box.ROUNDED))

    general = Table.grid(padding=(0, 2))
    general.add_column(style="bold cyan", justify="right")
    general.add_column(style="white")

    general.add_row("Show Recents:", _yes_no(prefs.show_recents))
    general.add_row("Autohide Dock:", _yes_no(prefs.autohide))
    general.add_row("Process Indicators:", _yes_no(prefs.shows_process_indicators))
    general.add_row("Minimize Effect:", prefs.minimize_effect.value.capitalize())
    general.add_row("Orientation:", prefs.orientation.value.capitalize())
    general.add_row("Trash:", _trash_label(prefs.trash_state, trash_unknown_as_empty))

    console.print(Panel(general, title="[bold]General[/bold]", border_style="blue", box=box.ROUNDED, padding=(0, 1)))
    console.print()

    _render_apps(console, "Persistent Apps", prefs.persistent_apps, show_empty_sections)
    # Recent apps are only meaningful when the Dock shows them
    if prefs.show_recents:
        _render_apps(console, "Recent Apps", prefs.recent_apps, show_empty_sections)
    _render_files(console, prefs.files, show_empty_sections)

    return output_buffer.getvalue()


def _render_apps(console: Console, title: str, apps: tuple[DockApp, ...], show_empty: bool) -> None:
    if not apps and not show_empty:
        return

    table = Table(
        title=f"[bold white]{title}[/bold white] [dim]({len(apps)})[/dim]",
        show_header=True,
        header_style="bold cyan",
        box=box.ROUNDED,
        border_style="blue",
        row_styles=["", "dim"],
    )
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("Label", style="bold")
    table.add_column("Bundle Identifier", style="cyan")
    table.add_column("Beta", no_wrap=True)
    table.add_column("Path", max_width=60, style="dim", overflow="ellipsis")

    for idx, app in enumerate(apps, 1):
        table.add_row(
            str(idx),
            app.file_label,
            app.bundle_identifier,
            "[yellow]beta[/yellow]" if app.is_beta else "",
            app.file_path,
        )

    console.print(table)
    console.print()


def _render_files(console: Console, files: tuple[DockFile, ...], show_empty: bool) -> None:
    if not files and not show_empty:
        return

    table = Table(
        title=f"[bold white]Files & Folders[/bold white] [dim]({len(files)})[/dim]",
        show_header=True,
        header_style="bold cyan",
        box=box.ROUNDED,
        border_style="blue",
    )
    table.add_column("#", justify="right", style="dim", no_wrap=True)
    table.add_column("Label", style="bold")
    table.add_column("Path", max_width=80, style="dim", overflow="ellipsis")

    for idx, dock_file in enumerate(files, 1):
        table.add_row(str(idx), dock_file.file_label, dock_file.file_path)

    console.print(table)
    console.print()


def _yes_no(value: bool) -> str:
    return "[green]Yes[/green]" if value else "[dim]No[/dim]"


def _trash_label(state: TrashState, unknown_as_empty: bool) -> str:
    if state == TrashState.UNKNOWN and unknown_as_empty:
        state = TrashState.EMPTY
    if state == TrashState.FULL:
        return "[bold yellow]Full[/bold yellow]"
    elif state == TrashState.EMPTY:
        return "Empty"
    return "[dim]Unknown[/dim]"


def render_json(prefs: DockPreferences, indent: int = 2) -> str:
    """
    Render Dock preferences as JSON.

    Field names are the Python attribute names; derived values
    (``file_url``, ``file_path``, ``trash_state``) are included.

    Returns:
        JSON string with sorted keys
    """
    prefs_dict = prefs.model_dump(mode="json")
    return json.dumps(prefs_dict, sort_keys=True, indent=indent)
