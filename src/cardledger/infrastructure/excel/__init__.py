"""
Excel Package.

Spreadsheet collaborators of the ledger:

Usage:
    from cardledger.infrastructure.excel import WorkbookReader, WorkbookWriter

    path = WorkbookWriter().write(artifact, "output")
    records = WorkbookReader().read_records(path)

Modules:
    writer.py - Styled, atomically saved .xlsx output
    reader.py - First-sheet records from .xlsx / .xls
"""

from cardledger.infrastructure.excel.reader import IMPORT_EXTENSIONS, WorkbookReader
from cardledger.infrastructure.excel.writer import WorkbookWriter

__all__ = [
    "IMPORT_EXTENSIONS",
    "WorkbookReader",
    "WorkbookWriter",
]
