"""
Tests for LedgerWorkspace: tabs, export/import/print handlers, failure
notifications and the async import.
"""

import asyncio
import threading

from openpyxl import load_workbook

from cardledger.application.notifications import Severity
from cardledger.application.workspace import LedgerWorkspace
from cardledger.domain import (
    ActiveCardField,
    Attachment,
    PageOrientation,
    RecipientField,
    Register,
    SpreadsheetReadError,
    SpreadsheetWriteError,
)
from cardledger.infrastructure.excel import WorkbookReader


class TestTabs:

    def test_defaults(self, workspace):
        assert workspace.current_register is Register.RECIPIENTS
        assert len(workspace.store(Register.RECIPIENTS)) == 15
        assert len(workspace.store(Register.ACTIVE_CARDS)) == 15

    def test_operations_target_current_tab(self, workspace):
        workspace.switch_to(Register.ACTIVE_CARDS)
        workspace.store().add_row()

        assert len(workspace.store(Register.ACTIVE_CARDS)) == 16
        assert len(workspace.store(Register.RECIPIENTS)) == 15

    def test_print_orientation_follows_tab(self, workspace):
        assert workspace.print_orientation is PageOrientation.LANDSCAPE
        workspace.switch_to(Register.ACTIVE_CARDS)
        assert workspace.print_orientation is PageOrientation.PORTRAIT


class TestExport:

    def test_export_writes_filled_rows(self, workspace, sink, settings):
        store = workspace.store()
        store.update_field(2, RecipientField.RECIPIENT_NAME, "خالد")
        store.update_field(5, RecipientField.CARD_CODE, "only-code")

        path = workspace.export()

        assert path == settings.output_dir / "Recipients_List.xlsx"
        ws = load_workbook(path).active
        assert ws.max_row == 2
        assert ws["B2"].value == "خالد"
        assert sink.last == ("تم تصدير الملف بنجاح", Severity.SUCCESS)

    def test_export_to_explicit_dir(self, workspace, tmp_path):
        workspace.switch_to(Register.ACTIVE_CARDS)
        path = workspace.export(tmp_path / "elsewhere")
        assert path == tmp_path / "elsewhere" / "Active_Cards.xlsx"

    def test_export_failure_notifies(self, settings, sink):
        class FailingWriter:
            def write(self, artifact, output_dir):
                raise SpreadsheetWriteError("disk full")

        workspace = LedgerWorkspace(settings, notify=sink, writer=FailingWriter())
        assert workspace.export() is None
        assert sink.last == ("حدث خطأ أثناء التصدير", Severity.ERROR)

    def test_print_sheet(self, workspace, sink):
        workspace.switch_to(Register.ACTIVE_CARDS)
        path = workspace.print_sheet()

        assert path.name == "Active_Cards_Print.xlsx"
        assert load_workbook(path).active.page_setup.orientation == "portrait"
        assert sink.last == ("تم تجهيز ملف الطباعة بنجاح", Severity.SUCCESS)


class TestImport:

    def test_export_then_import_roundtrip(self, workspace, sink):
        store = workspace.store()
        store.update_field(1, RecipientField.RECIPIENT_NAME, "منى")
        store.update_field(1, RecipientField.RECEIPT_DATE, "2025-04-02")
        store.update_field(1, RecipientField.CARD_NUMBER, "900")
        store.set_attachment(1, Attachment("id.png"))
        store.update_field(3, RecipientField.NOTES, "ملاحظة")
        path = workspace.export()

        assert workspace.import_file(path) is True

        rows = workspace.store().rows
        assert len(rows) == 15
        assert rows[0].recipient_name == "منى"
        assert rows[0].receipt_date == "2025-04-02"
        assert rows[0].card_number == "900"
        assert rows[0].attachment is None
        assert rows[1].notes == "ملاحظة"
        assert sink.last == ("تم استيراد البيانات بنجاح", Severity.SUCCESS)

    def test_import_targets_current_register_only(self, workspace, make_sheet):
        path = make_sheet("cards.xlsx", [["نوع البطاقة", "رقم البطاقة"], ["زائر", 12345]])
        workspace.switch_to(Register.ACTIVE_CARDS)

        assert workspace.import_file(path) is True
        assert workspace.store().rows[0].card_number == "12345"
        assert all(not row.recipient_name for row in workspace.store(Register.RECIPIENTS))

    def test_empty_file_keeps_rows(self, workspace, sink, make_sheet):
        workspace.store().update_field(1, RecipientField.NOTES, "stay")
        before = workspace.store().rows
        path = make_sheet("empty.xlsx", [["اسم المستلم"]])

        assert workspace.import_file(path) is False
        assert workspace.store().rows == before
        assert sink.last == ("الملف فارغ أو لا يحتوي على بيانات صالحة", Severity.ERROR)

    def test_unreadable_file_notifies(self, workspace, sink, tmp_path):
        path = tmp_path / "broken.xlsx"
        path.write_bytes(b"garbage")
        before = workspace.store().rows

        assert workspace.import_file(path) is False
        assert workspace.store().rows == before
        assert sink.last == ("حدث خطأ أثناء قراءة الملف. تأكد من صحة التنسيق.", Severity.ERROR)

    def test_async_import(self, workspace, make_sheet):
        path = make_sheet("async.xlsx", [["اسم المستلم"], ["سلمى"]])
        assert asyncio.run(workspace.import_file_async(path)) is True
        assert workspace.store().rows[0].recipient_name == "سلمى"

    def test_async_import_keeps_register_of_call_and_overwrites_edits(self, settings, sink, make_sheet):
        path = make_sheet("cards.xlsx", [["نوع البطاقة"], ["مقاول"]])
        reading = threading.Event()
        release = threading.Event()

        class SlowReader(WorkbookReader):
            def read_records(self, p):
                reading.set()
                release.wait(5)
                return super().read_records(p)

        workspace = LedgerWorkspace(settings, notify=sink, reader=SlowReader())
        workspace.switch_to(Register.ACTIVE_CARDS)

        async def scenario():
            task = asyncio.create_task(workspace.import_file_async(path))
            while not reading.is_set():
                await asyncio.sleep(0.01)
            # Edits and tab switches while the file is being read
            workspace.store().update_field(1, ActiveCardField.NOTES, "edited meanwhile")
            workspace.switch_to(Register.RECIPIENTS)
            release.set()
            return await task

        assert asyncio.run(scenario()) is True

        cards = workspace.store(Register.ACTIVE_CARDS).rows
        assert cards[0].card_type == "مقاول"
        assert all(row.notes != "edited meanwhile" for row in cards)
        assert all(not row.recipient_name for row in workspace.store(Register.RECIPIENTS))

    def test_async_read_failure(self, settings, sink, tmp_path):
        class FailingReader:
            def read_records(self, path):
                raise SpreadsheetReadError("bad")

        workspace = LedgerWorkspace(settings, notify=sink, reader=FailingReader())
        assert asyncio.run(workspace.import_file_async(tmp_path / "x.xlsx")) is False
        assert sink.last[1] is Severity.ERROR
