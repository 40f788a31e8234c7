"""
Shared option handling for cardledger commands.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from cardledger.domain.config import LedgerSettings
from cardledger.domain.models import Register
from cardledger.infrastructure.config import ConfigManager
from cardledger.infrastructure.logging_config import setup_logging

logger = logging.getLogger(__name__)


class RegisterChoice(str, Enum):
    """Register names accepted on the command line."""
    RECIPIENTS = "recipients"
    ACTIVE = "active"

    def to_register(self) -> Register:
        if self is RegisterChoice.ACTIVE:
            return Register.ACTIVE_CARDS
        return Register.RECIPIENTS


def load_settings(console: Console, config_dir: Optional[Path], verbose: bool) -> LedgerSettings:
    """
    Load settings and configure logging for a command.

    Raises:
        typer.Exit: If the settings file is invalid
    """
    try:
        settings = ConfigManager(config_dir).load_settings()
    except ValueError as e:
        setup_logging(logging.INFO)
        logger.error("Invalid settings: %s", e)
        console.print(f"[red]❌ Error:[/red] {e}")
        raise typer.Exit(1)

    level = logging.DEBUG if verbose else settings.log_level_number
    setup_logging(level, settings.log_file)
    return settings
