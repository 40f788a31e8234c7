"""
Inspect command - preview how a spreadsheet would be imported.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cardledger.application.notifications import Severity
from cardledger.application.workspace import LedgerWorkspace
from cardledger.interface.cli.formatters import RegisterFormatter
from ._common import RegisterChoice, load_settings

logger = logging.getLogger(__name__)

console = Console()


def inspect_command(
    path: Path = typer.Argument(..., help="Spreadsheet to inspect (.xlsx or .xls)."),
    register: RegisterChoice = typer.Option(
        RegisterChoice.RECIPIENTS,
        "--register",
        "-r",
        help="Register the spreadsheet belongs to.",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Directory holding ledger_settings.json (defaults to ./config).",
    ),
    all_rows: bool = typer.Option(False, "--all", "-a", help="Also show blank padding rows."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
):
    """
    Import a spreadsheet into a fresh workspace and show the resulting table.

    Exits with code 1 when the file is empty or cannot be read.
    """
    settings = load_settings(console, config_dir, verbose)

    messages: list[tuple[str, Severity]] = []
    workspace = LedgerWorkspace(settings, notify=lambda message, severity: messages.append((message, severity)))
    workspace.switch_to(register.to_register())

    imported = workspace.import_file(path)
    for message, severity in messages:
        color = "green" if severity is Severity.SUCCESS else "red"
        console.print(f"[{color}]{message}[/{color}]")

    if not imported:
        raise typer.Exit(1)

    store = workspace.store()
    layout = workspace.current_layout
    formatter = RegisterFormatter(workspace.translator, console)
    formatter.display_register(layout, store.rows, only_filled=not all_rows)

    filled = sum(1 for row in store if layout.is_meaningful(row))
    console.print(f"[dim]Filled rows: {filled} / total rows: {len(store)}[/dim]")
