"""
Register formatters for the terminal.

Renders register rows as rich tables and notifications as toasts,
keeping display logic out of the session and command code.
"""

import logging
from typing import Iterable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from cardledger.application.notifications import Notification, Severity
from cardledger.domain.models import Row
from cardledger.domain.registers import ColumnKind, RegisterLayout
from cardledger.infrastructure.i18n import Translator

logger = logging.getLogger(__name__)


class RegisterFormatter:
    """
    Formatter for register tables and toasts.
    """

    def __init__(self, translator: Translator, console: Optional[Console] = None):
        self.translator = translator
        self.console = console or Console()

    def build_table(self, layout: RegisterLayout, rows: Iterable[Row], only_filled: bool = False) -> Table:
        """
        Build a rich table for a register.

        The first column is the row id (what the shell commands take), the
        remaining columns follow the register layout.

        Args:
            layout: Register layout
            rows: Rows to render
            only_filled: Skip rows without any meaningful field
        """
        table = Table(title=self.translator.title(layout.title_key), show_lines=False)
        table.add_column("ID", style="dim", no_wrap=True)
        for col in layout.columns:
            style = "bold" if col.kind is ColumnKind.SEQUENCE else None
            table.add_column(self.translator.header(col.key), style=style)

        position = 0
        for row in rows:
            if only_filled and not layout.is_meaningful(row):
                continue
            position += 1
            cells = [str(row.id)]
            for col in layout.columns:
                if col.kind is ColumnKind.SEQUENCE:
                    cells.append(str(position))
                elif col.kind is ColumnKind.ATTACHMENT:
                    cells.append(escape(row.attachment.name) if row.attachment else "[dim]-[/dim]")
                else:
                    cells.append(escape(row.get_field(col.field)))
            table.add_row(*cells)

        return table

    def display_register(self, layout: RegisterLayout, rows: Iterable[Row], only_filled: bool = False) -> None:
        self.console.print(self.build_table(layout, rows, only_filled=only_filled))

    def show_toast(self, notification: Notification) -> None:
        """Print a notification as a colored panel."""
        if notification.severity is Severity.SUCCESS:
            title = self.translator.message("toast_success")
            style = "green"
            icon = "✅"
        else:
            title = self.translator.message("toast_error")
            style = "red"
            icon = "⚠️"
        self.console.print(
            Panel(f"{icon} {escape(notification.message)}", title=title, border_style=style, expand=False)
        )
