"""
Shell command - interactive editing of the registers.
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.prompt import Confirm

from cardledger.application.notifications import CompositeSink, LoggingSink, ToastNotifier
from cardledger.application.workspace import LedgerWorkspace
from cardledger.infrastructure.i18n import Translator
from cardledger.interface.cli.formatters import RegisterFormatter
from cardledger.interface.cli.session import LedgerSession
from ._common import RegisterChoice, load_settings

logger = logging.getLogger(__name__)

console = Console()


def shell_command(
    register: Optional[RegisterChoice] = typer.Option(
        None,
        "--register",
        "-r",
        help="Register to open first (defaults to the configured one).",
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Directory holding ledger_settings.json (defaults to ./config).",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
):
    """
    Open an interactive session over both registers.

    Nothing is saved between sessions; use [bold]export[/bold] to keep your data.
    """
    settings = load_settings(console, config_dir, verbose)

    translator = Translator(
        settings.language,
        heading_font=settings.heading_font,
        content_font=settings.content_font,
    )
    formatter = RegisterFormatter(translator, console)
    toast = ToastNotifier(settings.toast_duration_seconds, on_show=formatter.show_toast)

    workspace = LedgerWorkspace(
        settings,
        notify=CompositeSink(toast, LoggingSink()),
        confirm=lambda message: Confirm.ask(message, console=console, default=False),
    )
    if register is not None:
        workspace.switch_to(register.to_register())

    logger.info("Starting session on register %s", workspace.current_register.value)
    LedgerSession(workspace, formatter, console).run()
