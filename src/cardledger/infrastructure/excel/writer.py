"""
Workbook Writer.

Turns a TabularArtifact into a styled .xlsx file:
    - Optional navy title banner (print sheets)
    - Slate header row with the localized headers
    - Bordered data cells with the language font
    - Column widths and sheet direction from the artifact hints
    - Page setup (orientation, fit to width, repeated header) when the
      artifact carries an orientation

The workbook is saved to a temporary file next to the target and renamed
into place, so a failed save never leaves a half-written register behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from cardledger.domain.artifact import TabularArtifact
from cardledger.domain.errors import SpreadsheetWriteError
from cardledger.infrastructure.excel_styles import (
    Alignments,
    Borders,
    Fills,
    Fonts,
    apply_header_row,
    freeze_panes,
    with_font_name,
)
from cardledger.infrastructure.i18n import Translator
from cardledger.infrastructure.i18n.rtl_excel import apply_rtl_to_row, apply_rtl_to_worksheet

__all__ = ["WorkbookWriter"]

logger = logging.getLogger(__name__)


class WorkbookWriter:
    """
    Writes register artifacts with openpyxl.

    Usage:
        writer = WorkbookWriter(Translator("ar"))
        path = writer.write(artifact, Path("output"))
    """

    def __init__(self, translator: Translator | None = None) -> None:
        self.translator = translator or Translator()

    def write(self, artifact: TabularArtifact, output_dir: Path | str) -> Path:
        """
        Write an artifact to ``output_dir / artifact.file_name``.

        Returns:
            Path of the saved workbook

        Raises:
            SpreadsheetWriteError: If the workbook cannot be built or saved
        """
        output_dir = Path(output_dir)
        target = output_dir / artifact.file_name

        try:
            wb = self.build_workbook(artifact)
            output_dir.mkdir(parents=True, exist_ok=True)
            self._save_atomic(wb, target)
        except SpreadsheetWriteError:
            raise
        except Exception as e:
            logger.error("Failed to write workbook %s: %s", target, e)
            raise SpreadsheetWriteError(f"Could not write {target}: {e}") from e

        logger.info("Wrote %d records to %s", len(artifact), target)
        return target

    def build_workbook(self, artifact: TabularArtifact) -> Workbook:
        """Build the in-memory workbook for an artifact."""
        wb = Workbook()
        ws = wb.active
        ws.title = artifact.sheet_name

        header_row = 1
        if artifact.title:
            self._write_title(ws, artifact.title, len(artifact.headers))
            header_row = 2

        apply_header_row(
            ws,
            artifact.headers,
            artifact.column_widths,
            row=header_row,
            font_name=self.translator.heading_font,
        )
        if artifact.right_to_left:
            apply_rtl_to_row(ws, header_row, self.translator, is_header=True)

        data_font = with_font_name(Fonts.DATA, self.translator.content_font)
        sequence_font = with_font_name(Fonts.SEQUENCE, self.translator.content_font)
        placeholder_font = with_font_name(Fonts.PLACEHOLDER, self.translator.content_font)
        placeholder = self.translator.message("no_attachment")

        for offset, values in enumerate(artifact.rows(), start=1):
            row_idx = header_row + offset
            for col_idx, value in enumerate(values, start=1):
                cell = ws.cell(row=row_idx, column=col_idx, value=value)
                cell.border = Borders.GRID
                if col_idx == 1:
                    # First column is the sequence number
                    cell.font = sequence_font
                    cell.fill = Fills.SEQUENCE
                    cell.alignment = Alignments.CENTER
                else:
                    cell.font = placeholder_font if value == placeholder else data_font
                    cell.alignment = Alignments.RIGHT_WRAP if artifact.right_to_left else Alignments.CENTER_WRAP

        apply_rtl_to_worksheet(ws, artifact.right_to_left)
        freeze_panes(ws, row=header_row + 1)

        if artifact.orientation is not None:
            self._apply_page_setup(ws, artifact, header_row)

        return wb

    def _write_title(self, ws: Worksheet, title: str, column_count: int) -> None:
        last_col = get_column_letter(max(column_count, 1))
        ws.merge_cells(f"A1:{last_col}1")
        cell = ws["A1"]
        cell.value = title
        cell.font = with_font_name(Fonts.TITLE, self.translator.heading_font)
        cell.fill = Fills.TITLE
        cell.alignment = Alignments.CENTER
        cell.border = Borders.TITLE
        ws.row_dimensions[1].height = 32

    def _apply_page_setup(self, ws: Worksheet, artifact: TabularArtifact, header_row: int) -> None:
        ws.page_setup.orientation = artifact.orientation.value
        ws.page_setup.paperSize = ws.PAPERSIZE_A4
        ws.page_setup.fitToWidth = 1
        ws.page_setup.fitToHeight = False
        ws.sheet_properties.pageSetUpPr.fitToPage = True
        ws.print_options.horizontalCentered = True
        ws.print_title_rows = f"{header_row}:{header_row}"
        logger.debug("Page setup: %s, header row %d", artifact.orientation.value, header_row)

    def _save_atomic(self, wb: Workbook, target: Path) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.stem}.", suffix=".tmp", dir=target.parent
        )
        os.close(fd)
        tmp_path = Path(tmp_name)
        try:
            wb.save(tmp_path)
            os.replace(tmp_path, target)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
