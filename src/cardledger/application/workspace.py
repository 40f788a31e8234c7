"""
Ledger Workspace - application root of a cardledger session.

Owns one TableStore per register, the currently selected register (tab),
and the export / import / print handlers. Handlers catch every failure
at the operation boundary, log it, and turn it into one notification;
nothing raised by a spreadsheet collaborator reaches the caller.

Typical session:
    workspace = LedgerWorkspace(settings, notify=toast, confirm=ask_user)
    workspace.switch_to(Register.ACTIVE_CARDS)
    row = workspace.store().add_row()
    workspace.store().update_field(row.id, ActiveCardField.CARD_NUMBER, "7781")
    workspace.export()                      # output/Active_Cards.xlsx
    workspace.import_file("cards.xlsx")     # replaces the active-cards rows
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from cardledger.application.export_mapper import ExportMapper
from cardledger.application.import_reconciler import ImportReconciler
from cardledger.application.notifications import LoggingSink, NotificationSink, Severity
from cardledger.application.table_store import ConfirmPrompt, TableStore
from cardledger.domain.artifact import Record
from cardledger.domain.config import LedgerSettings
from cardledger.domain.errors import CardLedgerError
from cardledger.domain.models import Register
from cardledger.domain.registers import LAYOUTS, PageOrientation, RegisterLayout, get_layout
from cardledger.infrastructure.excel import WorkbookReader, WorkbookWriter
from cardledger.infrastructure.i18n import Translator

logger = logging.getLogger(__name__)


def _decline(_message: str) -> bool:
    return False


class LedgerWorkspace:
    """
    Both registers plus the operations a user triggers on them.
    """

    def __init__(
        self,
        settings: LedgerSettings | None = None,
        notify: NotificationSink | None = None,
        confirm: ConfirmPrompt = _decline,
        writer: WorkbookWriter | None = None,
        reader: WorkbookReader | None = None,
    ) -> None:
        """
        Initialize the workspace.

        Args:
            settings: Session settings (defaults if omitted)
            notify: Sink for user-facing notifications (logged if omitted)
            confirm: Yes/no prompt for destructive actions; declines by default
            writer: Spreadsheet writer collaborator
            reader: Spreadsheet reader collaborator
        """
        self.settings = settings or LedgerSettings()
        self.translator = Translator(
            self.settings.language,
            heading_font=self.settings.heading_font,
            content_font=self.settings.content_font,
        )
        self.notify: NotificationSink = notify or LoggingSink()
        self.writer = writer or WorkbookWriter(self.translator)
        self.reader = reader or WorkbookReader()
        self.exporter = ExportMapper(self.translator)
        self.reconciler = ImportReconciler(self.translator, self.settings.min_rows)

        self._stores: dict[Register, TableStore] = {
            register: TableStore.with_blank_rows(
                layout,
                self.settings.min_rows,
                self.notify,
                confirm=confirm,
                translator=self.translator,
            )
            for register, layout in LAYOUTS.items()
        }
        self._current = self.settings.default_register

    # ------------------------------------------------------------------
    # Tabs
    # ------------------------------------------------------------------

    @property
    def current_register(self) -> Register:
        return self._current

    @property
    def current_layout(self) -> RegisterLayout:
        return get_layout(self._current)

    def switch_to(self, register: Register) -> None:
        """Select the register that later operations act on."""
        if register is not self._current:
            logger.debug("Switched to register %s", register.value)
        self._current = register

    def store(self, register: Register | None = None) -> TableStore:
        """Store of a register (the current one by default)."""
        return self._stores[register or self._current]

    @property
    def print_orientation(self) -> PageOrientation:
        """Page orientation used when printing the current register."""
        return self.current_layout.orientation

    # ------------------------------------------------------------------
    # Export / print
    # ------------------------------------------------------------------

    def export(self, output_dir: Path | str | None = None) -> Path | None:
        """
        Export the current register to a spreadsheet.

        Returns:
            Path of the written file, or None if the export failed
        """
        layout = self.current_layout
        target_dir = Path(output_dir) if output_dir is not None else self.settings.output_dir
        try:
            artifact = self.exporter.build(layout, self.store().rows)
            path = self.writer.write(artifact, target_dir)
        except Exception as e:
            logger.error("Export Error (%s): %s", layout.register.value, e)
            self.notify(self.translator.message("export_failed"), Severity.ERROR)
            return None

        self.notify(self.translator.message("export_success"), Severity.SUCCESS)
        return path

    def print_sheet(self, output_dir: Path | str | None = None) -> Path | None:
        """
        Write a print-ready workbook of the current register.

        Returns:
            Path of the written file, or None if writing failed
        """
        layout = self.current_layout
        target_dir = Path(output_dir) if output_dir is not None else self.settings.output_dir
        try:
            artifact = self.exporter.build_print(layout, self.store().rows)
            path = self.writer.write(artifact, target_dir)
        except Exception as e:
            logger.error("Print Error (%s): %s", layout.register.value, e)
            self.notify(self.translator.message("export_failed"), Severity.ERROR)
            return None

        logger.info("Print sheet (%s) written to %s", layout.orientation.value, path)
        self.notify(self.translator.message("print_success"), Severity.SUCCESS)
        return path

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_file(self, path: Path | str) -> bool:
        """
        Import a spreadsheet into the current register.

        Returns:
            True if the register was replaced
        """
        register = self._current
        try:
            records = self.reader.read_records(path)
        except Exception as e:
            return self._import_failed(path, e)
        return self._apply_import(register, records)

    async def import_file_async(self, path: Path | str) -> bool:
        """
        Import a spreadsheet, reading the file in a worker thread.

        The target register is fixed when the call is made. Edits made to
        that register while the file is being read are overwritten when the
        import completes.
        """
        register = self._current
        try:
            records = await asyncio.to_thread(self.reader.read_records, path)
        except Exception as e:
            return self._import_failed(path, e)
        return self._apply_import(register, records)

    def _apply_import(self, register: Register, records: list[Record]) -> bool:
        try:
            return self.reconciler.apply(self.store(register), records, self.notify)
        except CardLedgerError as e:
            return self._import_failed("<records>", e)

    def _import_failed(self, path: Path | str, error: Exception) -> bool:
        logger.error("Error reading file %s: %s", path, error)
        self.notify(self.translator.message("import_failed"), Severity.ERROR)
        return False
