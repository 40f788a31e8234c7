"""
Domain layer for cardledger.

Row entities, register layouts, id generation and domain errors.
Pure data and rules, no I/O.
"""

from cardledger.domain.artifact import Record, TabularArtifact
from cardledger.domain.errors import (
    CardLedgerError,
    DuplicateRowIdError,
    SpreadsheetReadError,
    SpreadsheetWriteError,
    UnsupportedAttachmentError,
)
from cardledger.domain.ids import IdGenerator
from cardledger.domain.models import (
    ATTACHMENT_EXTENSIONS,
    ActiveCardField,
    ActiveCardRow,
    Attachment,
    RecipientField,
    RecipientRow,
    Register,
    Row,
    RowField,
)
from cardledger.domain.registers import (
    ACTIVE_CARDS_LAYOUT,
    RECIPIENTS_LAYOUT,
    ColumnKind,
    ColumnSpec,
    PageOrientation,
    RegisterLayout,
    get_layout,
    parse_field,
)

__all__ = [
    "ACTIVE_CARDS_LAYOUT",
    "ATTACHMENT_EXTENSIONS",
    "ActiveCardField",
    "ActiveCardRow",
    "Attachment",
    "CardLedgerError",
    "ColumnKind",
    "ColumnSpec",
    "DuplicateRowIdError",
    "IdGenerator",
    "PageOrientation",
    "RECIPIENTS_LAYOUT",
    "RecipientField",
    "RecipientRow",
    "Register",
    "Record",
    "RegisterLayout",
    "Row",
    "RowField",
    "SpreadsheetReadError",
    "SpreadsheetWriteError",
    "TabularArtifact",
    "UnsupportedAttachmentError",
    "get_layout",
    "parse_field",
]
