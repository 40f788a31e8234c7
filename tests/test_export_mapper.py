"""
Tests for ExportMapper: filtering, renumbering, headers and print artifacts.
"""

from cardledger.application.export_mapper import ExportMapper
from cardledger.domain import (
    ACTIVE_CARDS_LAYOUT,
    RECIPIENTS_LAYOUT,
    ActiveCardRow,
    Attachment,
    PageOrientation,
    RecipientRow,
)
from cardledger.infrastructure.i18n import Translator

RECIPIENT_HEADERS = [
    "م",
    "اسم المستلم",
    "الادارة",
    "تاريخ الاستلام",
    "نوع البطاقة",
    "رقم البطاقة",
    "كود البطاقة",
    "مدة البطاقة",
    "اسم المرفق",
    "الملاحظات",
]

ACTIVE_HEADERS = ["م", "نوع البطاقة", "رقم البطاقة", "كود البطاقة", "اسم المرفق", "الملاحظات"]


def mapper():
    return ExportMapper(Translator("ar"))


class TestHeaders:

    def test_recipient_headers(self):
        assert mapper().headers(RECIPIENTS_LAYOUT) == RECIPIENT_HEADERS

    def test_active_headers(self):
        assert mapper().headers(ACTIVE_CARDS_LAYOUT) == ACTIVE_HEADERS


class TestExportFilter:

    def test_only_filled_rows_exported_and_renumbered(self):
        rows = [
            RecipientRow(id=10),
            RecipientRow(id=11, recipient_name="أحمد"),
            RecipientRow(id=12),
            RecipientRow(id=13, card_number="555"),
        ]
        artifact = mapper().build(RECIPIENTS_LAYOUT, rows)

        assert len(artifact) == 2
        assert [record["م"] for record in artifact.records] == [1, 2]
        assert artifact.records[0]["اسم المستلم"] == "أحمد"
        assert artifact.records[1]["رقم البطاقة"] == "555"

    def test_recipient_non_meaningful_fields_do_not_keep_row(self):
        rows = [
            RecipientRow(id=1, card_code="X1"),
            RecipientRow(id=2, duration="6"),
            RecipientRow(id=3, receipt_date="2025-02-01"),
        ]
        assert len(mapper().build(RECIPIENTS_LAYOUT, rows)) == 0

    def test_active_card_code_keeps_row(self):
        artifact = mapper().build(ACTIVE_CARDS_LAYOUT, [ActiveCardRow(id=1, card_code="Z")])
        assert len(artifact) == 1

    def test_attachment_alone_does_not_keep_row(self):
        row = ActiveCardRow(id=1, attachment=Attachment("a.png"))
        assert len(mapper().build(ACTIVE_CARDS_LAYOUT, [row])) == 0

    def test_attachment_placeholder(self):
        rows = [
            ActiveCardRow(id=1, card_type="زائر"),
            ActiveCardRow(id=2, card_type="مقاول", attachment=Attachment("scan.pdf")),
        ]
        artifact = mapper().build(ACTIVE_CARDS_LAYOUT, rows)

        assert artifact.records[0]["اسم المرفق"] == "لا يوجد"
        assert artifact.records[1]["اسم المرفق"] == "scan.pdf"

    def test_every_header_present_in_record(self):
        artifact = mapper().build(RECIPIENTS_LAYOUT, [RecipientRow(id=1, notes="n")])
        assert list(artifact.records[0]) == RECIPIENT_HEADERS


class TestArtifactHints:

    def test_export_hints(self):
        artifact = mapper().build(ACTIVE_CARDS_LAYOUT, [])

        assert artifact.column_widths == [5, 30, 30, 25, 25, 60]
        assert artifact.right_to_left is True
        assert artifact.file_name == "Active_Cards.xlsx"
        assert artifact.sheet_name == "Sheet1"
        assert artifact.orientation is None

    def test_recipients_file_name(self):
        assert mapper().build(RECIPIENTS_LAYOUT, []).file_name == "Recipients_List.xlsx"

    def test_english_is_left_to_right(self):
        artifact = ExportMapper(Translator("en")).build(ACTIVE_CARDS_LAYOUT, [])
        assert artifact.right_to_left is False
        assert artifact.headers[1] == "Card Type"


class TestPrintArtifact:

    def test_print_keeps_blank_rows(self):
        rows = [RecipientRow(id=1), RecipientRow(id=2, recipient_name="ليلى")]
        artifact = mapper().build_print(RECIPIENTS_LAYOUT, rows)

        assert len(artifact) == 2
        assert artifact.orientation is PageOrientation.LANDSCAPE
        assert artifact.file_name == "Recipients_List_Print.xlsx"
        assert artifact.title

    def test_active_print_is_portrait(self):
        artifact = mapper().build_print(ACTIVE_CARDS_LAYOUT, [ActiveCardRow(id=1)])
        assert artifact.orientation is PageOrientation.PORTRAIT
