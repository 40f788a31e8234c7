"""
Register layouts.

Describes, per register, the spreadsheet columns (in order, with width
hints), the fields that make a row worth exporting, the export file name,
the print orientation and how a blank row looks.

Column headers are stored as English keys; the i18n layer turns them
into the localized header text written to and read from spreadsheets.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from cardledger.domain.models import (
    ActiveCardField,
    ActiveCardRow,
    RecipientField,
    RecipientRow,
    Register,
    Row,
    RowField,
)


class ColumnKind(Enum):
    """What a spreadsheet column carries."""
    SEQUENCE = "sequence"      # 1-based position in the exported set
    FIELD = "field"            # one text field of the row
    ATTACHMENT = "attachment"  # attachment display name


class PageOrientation(Enum):
    """Print page orientation (values match openpyxl page setup)."""
    PORTRAIT = "portrait"
    LANDSCAPE = "landscape"


@dataclass(frozen=True)
class ColumnSpec:
    """
    One spreadsheet column of a register.

    Attributes:
        key: English header key (translated by the i18n layer)
        width: Column width in characters
        kind: What the column carries
        field: Row field for FIELD columns
    """
    key: str
    width: int
    kind: ColumnKind = ColumnKind.FIELD
    field: RowField | None = None


@dataclass(frozen=True)
class RegisterLayout:
    """Static description of one register."""
    register: Register
    title_key: str
    columns: tuple[ColumnSpec, ...]
    meaningful_fields: tuple[RowField, ...]
    export_file_name: str
    print_file_name: str
    orientation: PageOrientation
    blank_row: Callable[[int], Row]

    @property
    def field_columns(self) -> tuple[ColumnSpec, ...]:
        """Columns that map onto a row field."""
        return tuple(col for col in self.columns if col.kind is ColumnKind.FIELD)

    @property
    def column_widths(self) -> list[int]:
        return [col.width for col in self.columns]

    def is_meaningful(self, row: Row) -> bool:
        """True if at least one meaningful field of the row is non-empty."""
        return any(row.get_field(field) for field in self.meaningful_fields)


# ============================================================================
# Active Cards
# ============================================================================

SEQUENCE_COLUMN_KEY = "No."
ATTACHMENT_COLUMN_KEY = "Attachment Name"

ACTIVE_CARDS_LAYOUT = RegisterLayout(
    register=Register.ACTIVE_CARDS,
    title_key="Active Cards",
    columns=(
        ColumnSpec(SEQUENCE_COLUMN_KEY, 5, ColumnKind.SEQUENCE),
        ColumnSpec("Card Type", 30, field=ActiveCardField.CARD_TYPE),
        ColumnSpec("Card Number", 30, field=ActiveCardField.CARD_NUMBER),
        ColumnSpec("Card Code", 25, field=ActiveCardField.CARD_CODE),
        ColumnSpec(ATTACHMENT_COLUMN_KEY, 25, ColumnKind.ATTACHMENT),
        ColumnSpec("Notes", 60, field=ActiveCardField.NOTES),
    ),
    meaningful_fields=(
        ActiveCardField.CARD_TYPE,
        ActiveCardField.CARD_NUMBER,
        ActiveCardField.CARD_CODE,
        ActiveCardField.NOTES,
    ),
    export_file_name="Active_Cards.xlsx",
    print_file_name="Active_Cards_Print.xlsx",
    orientation=PageOrientation.PORTRAIT,
    blank_row=lambda row_id: ActiveCardRow(id=row_id),
)


# ============================================================================
# Recipients
# ============================================================================

# card_code, duration and receipt_date do not keep a recipient row in an
# export on their own.
RECIPIENTS_LAYOUT = RegisterLayout(
    register=Register.RECIPIENTS,
    title_key="Recipients",
    columns=(
        ColumnSpec(SEQUENCE_COLUMN_KEY, 5, ColumnKind.SEQUENCE),
        ColumnSpec("Recipient Name", 35, field=RecipientField.RECIPIENT_NAME),
        ColumnSpec("Department", 25, field=RecipientField.DEPARTMENT),
        ColumnSpec("Receipt Date", 15, field=RecipientField.RECEIPT_DATE),
        ColumnSpec("Card Type", 15, field=RecipientField.CARD_TYPE),
        ColumnSpec("Card Number", 20, field=RecipientField.CARD_NUMBER),
        ColumnSpec("Card Code", 15, field=RecipientField.CARD_CODE),
        ColumnSpec("Card Duration", 15, field=RecipientField.DURATION),
        ColumnSpec(ATTACHMENT_COLUMN_KEY, 20, ColumnKind.ATTACHMENT),
        ColumnSpec("Notes", 50, field=RecipientField.NOTES),
    ),
    meaningful_fields=(
        RecipientField.RECIPIENT_NAME,
        RecipientField.DEPARTMENT,
        RecipientField.CARD_TYPE,
        RecipientField.CARD_NUMBER,
        RecipientField.NOTES,
    ),
    export_file_name="Recipients_List.xlsx",
    print_file_name="Recipients_List_Print.xlsx",
    orientation=PageOrientation.LANDSCAPE,
    blank_row=lambda row_id: RecipientRow(id=row_id),
)


LAYOUTS: dict[Register, RegisterLayout] = {
    Register.ACTIVE_CARDS: ACTIVE_CARDS_LAYOUT,
    Register.RECIPIENTS: RECIPIENTS_LAYOUT,
}


def get_layout(register: Register) -> RegisterLayout:
    """Look up the layout of a register."""
    return LAYOUTS[register]


def parse_field(register: Register, name: str) -> RowField:
    """
    Resolve a field name typed by a user into the register's field enum.

    Accepts the enum value (``card_number``) or member name (``CARD_NUMBER``).

    Raises:
        ValueError: If the register has no such field
    """
    enum_type = ActiveCardField if register is Register.ACTIVE_CARDS else RecipientField
    cleaned = name.strip()
    for member in enum_type:
        if cleaned in (member.value, member.name):
            return member
    valid = ", ".join(member.value for member in enum_type)
    raise ValueError(f"Unknown field '{name}' for {register.value}; expected one of: {valid}")
