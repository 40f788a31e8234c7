"""
Tests for the workbook writer and reader against real files on tmp_path.
"""

import pytest
from openpyxl import Workbook, load_workbook

from cardledger.application.export_mapper import ExportMapper
from cardledger.application.import_reconciler import ImportReconciler
from cardledger.domain import (
    ACTIVE_CARDS_LAYOUT,
    RECIPIENTS_LAYOUT,
    ActiveCardRow,
    IdGenerator,
    RecipientRow,
    SpreadsheetReadError,
    SpreadsheetWriteError,
    TabularArtifact,
)
from cardledger.infrastructure.excel import WorkbookReader, WorkbookWriter
from cardledger.infrastructure.i18n import Translator

AR = Translator("ar")


def export_active(tmp_path, rows):
    artifact = ExportMapper(AR).build(ACTIVE_CARDS_LAYOUT, rows)
    return WorkbookWriter(AR).write(artifact, tmp_path)


class TestWorkbookWriter:

    def test_export_file_layout(self, tmp_path):
        path = export_active(tmp_path, [ActiveCardRow(id=9, card_type="زائر", card_number="100")])

        assert path == tmp_path / "Active_Cards.xlsx"
        wb = load_workbook(path)
        ws = wb.active

        assert ws.title == "Sheet1"
        assert ws.sheet_view.rightToLeft is True
        assert [c.value for c in ws[1]] == ["م", "نوع البطاقة", "رقم البطاقة", "كود البطاقة", "اسم المرفق", "الملاحظات"]
        assert [c.value for c in ws[2]][:3] == [1, "زائر", "100"]
        assert ws["E2"].value == "لا يوجد"
        assert ws.column_dimensions["B"].width == 30
        assert ws.column_dimensions["F"].width == 60

    def test_creates_output_dir(self, tmp_path):
        target = tmp_path / "nested" / "out"
        path = export_active(target, [])
        assert path.exists()

    def test_no_temp_files_left(self, tmp_path):
        export_active(tmp_path, [ActiveCardRow(id=1, notes="n")])
        assert sorted(p.name for p in tmp_path.iterdir()) == ["Active_Cards.xlsx"]

    def test_ltr_sheet_for_english(self, tmp_path):
        en = Translator("en")
        artifact = ExportMapper(en).build(ACTIVE_CARDS_LAYOUT, [])
        path = WorkbookWriter(en).write(artifact, tmp_path)
        assert not load_workbook(path).active.sheet_view.rightToLeft

    def test_print_sheet_has_title_and_orientation(self, tmp_path):
        artifact = ExportMapper(AR).build_print(RECIPIENTS_LAYOUT, [RecipientRow(id=1), RecipientRow(id=2)])
        path = WorkbookWriter(AR).write(artifact, tmp_path)

        ws = load_workbook(path).active
        assert path.name == "Recipients_List_Print.xlsx"
        assert ws["A1"].value == "المستلمين"
        assert ws["A2"].value == "م"
        assert ws.page_setup.orientation == "landscape"
        assert ws.max_row == 4

    def test_failed_save_keeps_previous_file(self, tmp_path, monkeypatch):
        path = export_active(tmp_path, [ActiveCardRow(id=1, notes="first")])

        def broken_save(self, filename):
            raise OSError("disk full")

        monkeypatch.setattr(Workbook, "save", broken_save)
        with pytest.raises(SpreadsheetWriteError):
            export_active(tmp_path, [ActiveCardRow(id=1, notes="second")])
        monkeypatch.undo()

        assert load_workbook(path).active["F2"].value == "first"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["Active_Cards.xlsx"]


class TestWorkbookReader:

    def test_roundtrip_records(self, tmp_path):
        path = export_active(tmp_path, [ActiveCardRow(id=1, card_type="زائر", card_number="77")])
        records = WorkbookReader().read_records(path)

        assert records == [
            {"م": 1, "نوع البطاقة": "زائر", "رقم البطاقة": "77", "اسم المرفق": "لا يوجد"}
        ]

    def test_blank_rows_skipped(self, make_sheet):
        path = make_sheet("gaps.xlsx", [["الملاحظات"], ["a"], [None], ["b"]])
        assert WorkbookReader().read_records(path) == [{"الملاحظات": "a"}, {"الملاحظات": "b"}]

    def test_header_only_sheet_is_empty(self, make_sheet):
        path = make_sheet("headers.xlsx", [["م", "الملاحظات"]])
        assert WorkbookReader().read_records(path) == []

    def test_numbers_kept_raw(self, make_sheet):
        path = make_sheet("numbers.xlsx", [["رقم البطاقة"], [12345]])
        assert WorkbookReader().read_records(path) == [{"رقم البطاقة": 12345}]

    def test_unsupported_suffix(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a,b\n1,2\n", encoding="utf-8")
        with pytest.raises(SpreadsheetReadError):
            WorkbookReader().read_records(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SpreadsheetReadError):
            WorkbookReader().read_records(tmp_path / "missing.xlsx")

    @pytest.mark.parametrize("suffix", [".xlsx", ".xls"])
    def test_corrupt_content(self, tmp_path, suffix):
        path = tmp_path / f"corrupt{suffix}"
        path.write_bytes(b"this is not a workbook")
        with pytest.raises(SpreadsheetReadError):
            WorkbookReader().read_records(path)

    def test_artifact_rows_follow_header_order(self):
        artifact = TabularArtifact(headers=["a", "b"], records=[{"b": 2, "a": 1}, {"a": 3}])
        assert artifact.rows() == [[1, 2], [3, None]]


class TestLegacyXlsImport:
    """Legacy .xls files go through pandas and xlrd."""

    @pytest.fixture
    def xls_path(self, tmp_path):
        xlwt = pytest.importorskip("xlwt")

        book = xlwt.Workbook(encoding="utf-8")
        sheet = book.add_sheet("Sheet1")
        rows = {
            0: ["م", "نوع البطاقة", "رقم البطاقة", "كود البطاقة", "الملاحظات"],
            1: [1, "زائر", 12345, 7, None],
            # row 2 left blank
            3: [2, "مقاول", 678, None, "بوابة 3"],
        }
        for row_idx, values in rows.items():
            for col_idx, value in enumerate(values):
                if value is not None:
                    sheet.write(row_idx, col_idx, value)

        path = tmp_path / "legacy.xls"
        book.save(str(path))
        return path

    def test_reads_records_and_skips_blank_rows(self, xls_path):
        records = WorkbookReader().read_records(xls_path)

        assert len(records) == 2
        assert records[0]["نوع البطاقة"] == "زائر"
        assert records[0]["رقم البطاقة"] == 12345
        assert "الملاحظات" not in records[0]
        assert "كود البطاقة" not in records[1]
        assert records[1]["الملاحظات"] == "بوابة 3"

    def test_reconciled_rows(self, xls_path):
        records = WorkbookReader().read_records(xls_path)
        rows = ImportReconciler(AR).build_rows(ACTIVE_CARDS_LAYOUT, records, IdGenerator())

        assert len(rows) == 15
        assert (rows[0].card_type, rows[0].card_number, rows[0].card_code) == ("زائر", "12345", "7")
        assert rows[1].card_number == "678"
        assert rows[1].card_code == ""
