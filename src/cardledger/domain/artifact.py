"""
Tabular artifact exchanged with the spreadsheet layer.

The export side builds one from a register; the reader produces the
``records`` part from a workbook. Presentation hints travel with the
data and are applied by the writer unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from cardledger.domain.registers import PageOrientation

Record = dict[str, Any]


@dataclass
class TabularArtifact:
    """
    Ordered named columns plus ordered records.

    Attributes:
        headers: Column header texts, in order
        records: One mapping of header -> cell value per data row
        column_widths: Width hint per column, in header order
        right_to_left: Whether the sheet reads right to left
        file_name: Target file name (e.g. Active_Cards.xlsx)
        sheet_name: Worksheet title
        title: Optional banner text above the header row (print sheets)
        orientation: Page orientation for printing, if any
    """
    headers: list[str]
    records: list[Record] = field(default_factory=list)
    column_widths: list[int] = field(default_factory=list)
    right_to_left: bool = True
    file_name: str = "Sheet.xlsx"
    sheet_name: str = "Sheet1"
    title: str | None = None
    orientation: PageOrientation | None = None

    def __len__(self) -> int:
        return len(self.records)

    def rows(self) -> list[list[Any]]:
        """Records as value lists in header order (missing keys -> None)."""
        return [[record.get(header) for header in self.headers] for record in self.records]
