"""
Domain models for cardledger.

This module contains the row entities of the two registers:
- Active cards (ActiveCardRow)
- Recipients of visitor cards (RecipientRow)

Rows are immutable. Editing a field produces a new row with the same id,
so a store can swap rows without sharing mutable state with its callers.
Field names are closed enums per row type; ``with_field`` dispatches on
them explicitly instead of looking attributes up by name.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Union

from cardledger.domain.errors import UnsupportedAttachmentError


# ============================================================================
# Enumerations
# ============================================================================

class Register(Enum):
    """The two independent tables of the application."""
    ACTIVE_CARDS = "active"
    RECIPIENTS = "recipients"


class ActiveCardField(Enum):
    """Editable text fields of an active-card row."""
    CARD_TYPE = "card_type"
    CARD_NUMBER = "card_number"
    CARD_CODE = "card_code"
    NOTES = "notes"


class RecipientField(Enum):
    """Editable text fields of a recipient row."""
    RECIPIENT_NAME = "recipient_name"
    DEPARTMENT = "department"
    RECEIPT_DATE = "receipt_date"
    CARD_TYPE = "card_type"
    CARD_NUMBER = "card_number"
    CARD_CODE = "card_code"
    DURATION = "duration"
    NOTES = "notes"


# File types the attachment picker accepts
ATTACHMENT_EXTENSIONS: tuple[str, ...] = (
    ".jpg", ".jpeg", ".png", ".pdf", ".doc", ".docx", ".xls", ".xlsx",
)


# ============================================================================
# Attachment
# ============================================================================

@dataclass(frozen=True)
class Attachment:
    """
    A locally selected file attached to a row.

    Attributes:
        name: Display name of the file (what ends up in exports)
        path: Local path of the file, if known
    """
    name: str
    path: Path | None = None

    @classmethod
    def from_path(cls, path: str | Path) -> Attachment:
        """
        Build an attachment from a local file path.

        Raises:
            UnsupportedAttachmentError: If the extension is not accepted
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in ATTACHMENT_EXTENSIONS:
            raise UnsupportedAttachmentError(path.name, suffix)
        return cls(name=path.name, path=path)


# ============================================================================
# Rows
# ============================================================================

@dataclass(frozen=True)
class ActiveCardRow:
    """One line of the active-cards register."""
    id: int
    card_type: str = ""
    card_number: str = ""
    card_code: str = ""
    attachment: Attachment | None = None
    notes: str = ""

    def with_field(self, field: ActiveCardField, value: str) -> ActiveCardRow:
        """Return a copy with one text field replaced."""
        match field:
            case ActiveCardField.CARD_TYPE:
                return replace(self, card_type=value)
            case ActiveCardField.CARD_NUMBER:
                return replace(self, card_number=value)
            case ActiveCardField.CARD_CODE:
                return replace(self, card_code=value)
            case ActiveCardField.NOTES:
                return replace(self, notes=value)
        raise ValueError(f"Not an active-card field: {field!r}")

    def get_field(self, field: ActiveCardField) -> str:
        """Read one text field."""
        match field:
            case ActiveCardField.CARD_TYPE:
                return self.card_type
            case ActiveCardField.CARD_NUMBER:
                return self.card_number
            case ActiveCardField.CARD_CODE:
                return self.card_code
            case ActiveCardField.NOTES:
                return self.notes
        raise ValueError(f"Not an active-card field: {field!r}")

    def with_attachment(self, attachment: Attachment | None) -> ActiveCardRow:
        return replace(self, attachment=attachment)


@dataclass(frozen=True)
class RecipientRow:
    """One line of the recipients register."""
    id: int
    recipient_name: str = ""
    department: str = ""
    receipt_date: str = ""  # YYYY-MM-DD or empty
    card_type: str = ""
    card_number: str = ""
    card_code: str = ""
    duration: str = ""
    attachment: Attachment | None = None
    notes: str = ""

    def with_field(self, field: RecipientField, value: str) -> RecipientRow:
        """Return a copy with one text field replaced."""
        match field:
            case RecipientField.RECIPIENT_NAME:
                return replace(self, recipient_name=value)
            case RecipientField.DEPARTMENT:
                return replace(self, department=value)
            case RecipientField.RECEIPT_DATE:
                return replace(self, receipt_date=value)
            case RecipientField.CARD_TYPE:
                return replace(self, card_type=value)
            case RecipientField.CARD_NUMBER:
                return replace(self, card_number=value)
            case RecipientField.CARD_CODE:
                return replace(self, card_code=value)
            case RecipientField.DURATION:
                return replace(self, duration=value)
            case RecipientField.NOTES:
                return replace(self, notes=value)
        raise ValueError(f"Not a recipient field: {field!r}")

    def get_field(self, field: RecipientField) -> str:
        """Read one text field."""
        match field:
            case RecipientField.RECIPIENT_NAME:
                return self.recipient_name
            case RecipientField.DEPARTMENT:
                return self.department
            case RecipientField.RECEIPT_DATE:
                return self.receipt_date
            case RecipientField.CARD_TYPE:
                return self.card_type
            case RecipientField.CARD_NUMBER:
                return self.card_number
            case RecipientField.CARD_CODE:
                return self.card_code
            case RecipientField.DURATION:
                return self.duration
            case RecipientField.NOTES:
                return self.notes
        raise ValueError(f"Not a recipient field: {field!r}")

    def with_attachment(self, attachment: Attachment | None) -> RecipientRow:
        return replace(self, attachment=attachment)


Row = Union[ActiveCardRow, RecipientRow]
RowField = Union[ActiveCardField, RecipientField]
