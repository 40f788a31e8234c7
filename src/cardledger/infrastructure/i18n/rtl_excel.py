"""
RTL (Right-to-Left) Excel Support.

Utilities for right-to-left register sheets:
- Sheet direction
- Cell alignment
- Font application
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from openpyxl.styles import Alignment, Font
from openpyxl.worksheet.worksheet import Worksheet

from cardledger.infrastructure.i18n.translator import Translator

if TYPE_CHECKING:
    from openpyxl.cell import Cell

logger = logging.getLogger(__name__)


def apply_rtl_to_worksheet(ws: Worksheet, right_to_left: bool) -> None:
    """
    Set the sheet view direction.

    Args:
        ws: Worksheet to modify
        right_to_left: Whether the sheet reads right to left
    """
    if not right_to_left:
        return

    ws.sheet_view.rightToLeft = True
    logger.debug("Applied RTL to sheet: %s", ws.title)


def apply_rtl_to_cell(
    cell: Cell,
    translator: Translator,
    is_header: bool = False,
) -> None:
    """
    Apply RTL alignment and the language font to a cell.

    Args:
        cell: Cell to style
        translator: Translator with font config
        is_header: Whether this is a header cell (uses heading font)
    """
    if not translator.is_rtl:
        return

    font_name = translator.heading_font if is_header else translator.content_font

    current_align = cell.alignment or Alignment()
    cell.alignment = Alignment(
        horizontal=current_align.horizontal or "right",
        vertical=current_align.vertical or "center",
        wrap_text=current_align.wrap_text,
        readingOrder=2,  # right-to-left
    )

    current_font = cell.font or Font()
    cell.font = Font(
        name=font_name,
        size=current_font.size,
        bold=current_font.bold,
        italic=current_font.italic,
        color=current_font.color,
    )


def apply_rtl_to_row(
    ws: Worksheet,
    row: int,
    translator: Translator,
    is_header: bool = False,
) -> None:
    """
    Apply RTL styling to every populated cell of a row.

    Args:
        ws: Worksheet
        row: Row number (1-indexed)
        translator: Translator with font config
        is_header: Whether the row is the header row
    """
    if not translator.is_rtl:
        return

    for cell in ws[row]:
        if cell.value is not None:
            apply_rtl_to_cell(cell, translator, is_header=is_header)
