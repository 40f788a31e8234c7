"""
Workbook Reader.

Reads the first sheet of a workbook into header-keyed records:
    - Row 1 holds the headers
    - Each later row becomes {header: value} for its non-empty cells
    - Rows without any value are skipped

.xlsx files go through openpyxl; legacy .xls files through pandas (xlrd).
Every failure surfaces as SpreadsheetReadError.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any, BinaryIO, Iterable

import pandas as pd
from openpyxl import load_workbook

from cardledger.domain.artifact import Record
from cardledger.domain.errors import SpreadsheetReadError

__all__ = ["WorkbookReader", "IMPORT_EXTENSIONS"]

logger = logging.getLogger(__name__)

IMPORT_EXTENSIONS: tuple[str, ...] = (".xlsx", ".xls")


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and value == ""


def _records_from_rows(rows: Iterable[Iterable[Any]]) -> list[Record]:
    """Convert raw value rows (first = headers) into records."""
    iterator = iter(rows)
    try:
        header_row = next(iterator)
    except StopIteration:
        return []

    headers = [str(h).strip() if h is not None else None for h in header_row]
    records: list[Record] = []

    for values in iterator:
        record: Record = {}
        for header, value in zip(headers, values):
            if not header or _is_blank(value):
                continue
            record[header] = value
        if record:
            records.append(record)

    return records


class WorkbookReader:
    """
    Reads spreadsheet files into records.

    Usage:
        records = WorkbookReader().read_records("Recipients_List.xlsx")
    """

    def read_records(self, path: Path | str) -> list[Record]:
        """
        Read the first sheet of a workbook file.

        Raises:
            SpreadsheetReadError: If the file type is not accepted or the
                file cannot be parsed
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in IMPORT_EXTENSIONS:
            raise SpreadsheetReadError(f"Unsupported spreadsheet type '{suffix}': {path.name}")

        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            logger.error("Cannot open %s: %s", path, e)
            raise SpreadsheetReadError(f"Cannot open {path}: {e}") from e

        records = self.read_bytes(data, suffix)
        logger.info("Read %d records from %s", len(records), path)
        return records

    def read_bytes(self, data: bytes, suffix: str = ".xlsx") -> list[Record]:
        """
        Read the first sheet of a workbook held in memory.

        Args:
            data: Raw file content
            suffix: File extension telling which parser to use

        Raises:
            SpreadsheetReadError: If the content cannot be parsed
        """
        buffer = io.BytesIO(data)
        try:
            if suffix.lower() == ".xls":
                return self._read_xls(buffer)
            return self._read_xlsx(buffer)
        except SpreadsheetReadError:
            raise
        except Exception as e:
            logger.error("Failed to parse spreadsheet: %s", e)
            raise SpreadsheetReadError(f"Invalid spreadsheet content: {e}") from e

    def _read_xlsx(self, buffer: BinaryIO) -> list[Record]:
        wb = load_workbook(buffer, read_only=True, data_only=True)
        try:
            if not wb.worksheets:
                return []
            ws = wb.worksheets[0]
            logger.debug("Reading sheet '%s'", ws.title)
            return _records_from_rows(ws.iter_rows(values_only=True))
        finally:
            wb.close()

    def _read_xls(self, buffer: BinaryIO) -> list[Record]:
        df = pd.read_excel(buffer, sheet_name=0, header=None, dtype=object)
        df = df.astype(object).where(pd.notna(df), None)
        return _records_from_rows(df.itertuples(index=False, name=None))
