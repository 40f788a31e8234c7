"""
Domain exceptions for cardledger.

Infrastructure wraps library and OS errors into these types so the
application layer can catch them at the operation boundary.
"""

from __future__ import annotations


class CardLedgerError(Exception):
    """Base class for all cardledger errors."""


class SpreadsheetReadError(CardLedgerError):
    """A spreadsheet could not be opened or parsed."""


class SpreadsheetWriteError(CardLedgerError):
    """A spreadsheet could not be written to disk."""


class UnsupportedAttachmentError(CardLedgerError):
    """The selected file type is not accepted as a row attachment."""

    def __init__(self, name: str, suffix: str) -> None:
        super().__init__(f"Unsupported attachment type '{suffix}' for file: {name}")
        self.name = name
        self.suffix = suffix


class DuplicateRowIdError(CardLedgerError):
    """A row collection contains the same id more than once."""

    def __init__(self, row_id: int) -> None:
        super().__init__(f"Duplicate row id: {row_id}")
        self.row_id = row_id
