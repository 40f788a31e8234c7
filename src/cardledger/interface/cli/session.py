"""
Interactive ledger session.

A line-oriented editor over a LedgerWorkspace. Each input line is one
user event (edit, add, delete, import, export, print); events are
handled one at a time and the current register is re-rendered on demand.
"""

from __future__ import annotations

import logging
import shlex
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from cardledger.application.workspace import LedgerWorkspace
from cardledger.domain.errors import CardLedgerError
from cardledger.domain.models import Attachment, Register
from cardledger.domain.registers import parse_field
from cardledger.interface.cli.formatters import RegisterFormatter

logger = logging.getLogger(__name__)

HELP_TEXT = """\
Commands
  list                     show the current register
  tab [recipients|active]  switch register (toggles without argument)
  add                      append a blank row
  set ID FIELD VALUE       edit a field (e.g. set 12 card_number 7781)
  attach ID PATH           attach a file (.jpg .jpeg .png .pdf .doc .docx .xls .xlsx)
  detach ID                remove a row's attachment
  delete ID                delete a row (asks for confirmation)
  export [DIR]             export filled rows to a spreadsheet
  import PATH              replace the register from a spreadsheet (.xlsx .xls)
  print [DIR]              write a print-ready sheet
  help                     show this help
  quit                     leave (all data is discarded)
"""

REGISTER_ALIASES = {
    "recipients": Register.RECIPIENTS,
    "active": Register.ACTIVE_CARDS,
}


class LedgerSession:
    """
    Read-eval loop over a workspace.

    Usage:
        session = LedgerSession(workspace, formatter)
        session.run()
    """

    def __init__(
        self,
        workspace: LedgerWorkspace,
        formatter: RegisterFormatter,
        console: Optional[Console] = None,
        read_line: Optional[Callable[[str], str]] = None,
    ):
        self.workspace = workspace
        self.formatter = formatter
        self.console = console or formatter.console
        self._read_line = read_line or self.console.input
        self._running = False

    def run(self) -> None:
        """Process input lines until quit or end of input."""
        self._running = True
        self.console.print(HELP_TEXT, markup=False)
        self.show()

        while self._running:
            try:
                line = self._read_line(f"[bold cyan]{self.workspace.current_register.value}>[/bold cyan] ")
            except (EOFError, KeyboardInterrupt):
                break
            self.handle(line)

        logger.info("Session ended")

    def handle(self, line: str) -> None:
        """Handle one input line; errors are reported and the session continues."""
        try:
            parts = shlex.split(line)
        except ValueError as e:
            self._error(f"Cannot parse input: {e}")
            return
        if not parts:
            return

        command, args = parts[0].lower(), parts[1:]
        try:
            self._dispatch(command, args)
        except (ValueError, CardLedgerError) as e:
            self._error(str(e))

    def show(self) -> None:
        self.formatter.display_register(self.workspace.current_layout, self.workspace.store().rows)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def _dispatch(self, command: str, args: list[str]) -> None:
        store = self.workspace.store()
        match command:
            case "help" | "?":
                self.console.print(HELP_TEXT, markup=False)
            case "list" | "ls":
                self.show()
            case "tab":
                self._switch(args)
            case "add":
                row = store.add_row()
                self.console.print(f"Row id: {row.id}")
            case "set":
                self._require(args, 3, "set ID FIELD VALUE")
                field = parse_field(self.workspace.current_register, args[1])
                row_id = self._row_id(args[0])
                if not store.update_field(row_id, field, " ".join(args[2:])):
                    self._error(f"No row with id {row_id}")
            case "attach":
                self._require(args, 2, "attach ID PATH")
                row_id = self._row_id(args[0])
                if not store.set_attachment(row_id, Attachment.from_path(args[1])):
                    self._error(f"No row with id {row_id}")
            case "detach":
                self._require(args, 1, "detach ID")
                row_id = self._row_id(args[0])
                if not store.set_attachment(row_id, None):
                    self._error(f"No row with id {row_id}")
            case "delete" | "rm":
                self._require(args, 1, "delete ID")
                row_id = self._row_id(args[0])
                if row_id not in store:
                    self._error(f"No row with id {row_id}")
                else:
                    store.delete_row(row_id)
            case "export":
                path = self.workspace.export(args[0] if args else None)
                if path:
                    self.console.print(f"[green]{path}[/green]")
            case "import":
                self._require(args, 1, "import PATH")
                if self.workspace.import_file(args[0]):
                    self.show()
            case "print":
                path = self.workspace.print_sheet(args[0] if args else None)
                if path:
                    self.console.print(
                        f"[green]{path}[/green] ({self.workspace.print_orientation.value})"
                    )
            case "quit" | "exit" | "q":
                self._running = False
            case _:
                self._error(f"Unknown command: {command} (type 'help')")

    def _switch(self, args: list[str]) -> None:
        if args:
            register = REGISTER_ALIASES.get(args[0].lower())
            if register is None:
                raise ValueError(f"Unknown register '{args[0]}' (recipients or active)")
        elif self.workspace.current_register is Register.RECIPIENTS:
            register = Register.ACTIVE_CARDS
        else:
            register = Register.RECIPIENTS
        self.workspace.switch_to(register)
        self.show()

    @staticmethod
    def _require(args: list[str], count: int, usage: str) -> None:
        if len(args) < count:
            raise ValueError(f"Usage: {usage}")

    @staticmethod
    def _row_id(text: str) -> int:
        try:
            return int(text)
        except ValueError:
            raise ValueError(f"Row id must be a number, got '{text}'") from None

    def _error(self, message: str) -> None:
        self.console.print(f"[red]❌ {escape(message)}[/red]")
