"""
Excel styling configuration and utilities.

Gives exported and printed registers the look of the paper forms:
- Navy/slate color palette with a gold accent
- Font, fill, border and alignment presets
- Header row, width and pane helpers
"""

from __future__ import annotations

from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet


# ============================================================================
# Color Palette
# ============================================================================


class Colors:
    """Register color palette (hex codes without #)."""

    TITLE_BG = "091526"  # Deep navy banner
    TITLE_TEXT = "FFFFFF"
    ACCENT = "EAB308"  # Gold underline
    HEADER_BG = "334155"  # Slate header row
    HEADER_TEXT = "FFFFFF"
    SEQUENCE_BG = "334155"
    GRID = "091526"
    EMPTY_TEXT = "9CA3AF"  # Gray for "none" placeholders


# ============================================================================
# Fonts
# ============================================================================


class Fonts:
    """Font presets (the name is replaced by the language font)."""

    TITLE = Font(name="Arial", size=16, bold=True, color=Colors.TITLE_TEXT)
    HEADER = Font(name="Arial", size=11, bold=True, color=Colors.HEADER_TEXT)
    SEQUENCE = Font(name="Arial", size=10, bold=True, color=Colors.HEADER_TEXT)
    DATA = Font(name="Arial", size=10)
    PLACEHOLDER = Font(name="Arial", size=10, italic=True, color=Colors.EMPTY_TEXT)


# ============================================================================
# Fills (Backgrounds)
# ============================================================================


class Fills:
    """Background fill patterns."""

    TITLE = PatternFill(
        start_color=Colors.TITLE_BG, end_color=Colors.TITLE_BG, fill_type="solid"
    )
    HEADER = PatternFill(
        start_color=Colors.HEADER_BG, end_color=Colors.HEADER_BG, fill_type="solid"
    )
    SEQUENCE = PatternFill(
        start_color=Colors.SEQUENCE_BG, end_color=Colors.SEQUENCE_BG, fill_type="solid"
    )


# ============================================================================
# Borders
# ============================================================================


class Borders:
    """Border styles."""

    GRID = Border(
        left=Side(style="thin", color=Colors.GRID),
        right=Side(style="thin", color=Colors.GRID),
        top=Side(style="thin", color=Colors.GRID),
        bottom=Side(style="thin", color=Colors.GRID),
    )

    TITLE = Border(bottom=Side(style="thick", color=Colors.ACCENT))


# ============================================================================
# Alignments
# ============================================================================


class Alignments:
    """Text alignment definitions."""

    CENTER = Alignment(horizontal="center", vertical="center", wrap_text=False)
    CENTER_WRAP = Alignment(horizontal="center", vertical="center", wrap_text=True)
    RIGHT_WRAP = Alignment(horizontal="right", vertical="center", wrap_text=True)


# ============================================================================
# Helper Functions
# ============================================================================


def with_font_name(font: Font, name: str) -> Font:
    """Copy a font preset with another typeface."""
    return Font(
        name=name,
        size=font.size,
        bold=font.bold,
        italic=font.italic,
        color=font.color,
    )


def apply_header_row(
    ws: Worksheet,
    headers: list[str],
    widths: list[int],
    row: int = 1,
    font_name: str | None = None,
) -> None:
    """
    Write and style a header row, and set column widths.

    Args:
        ws: Worksheet
        headers: Header texts in column order
        widths: Column widths in characters (same order as headers)
        row: Row number (1-indexed)
        font_name: Typeface override for the header font
    """
    font = with_font_name(Fonts.HEADER, font_name) if font_name else Fonts.HEADER
    for col_idx, header in enumerate(headers, start=1):
        cell = ws.cell(row=row, column=col_idx)
        cell.value = header
        cell.font = font
        cell.fill = Fills.HEADER
        cell.alignment = Alignments.CENTER_WRAP
        cell.border = Borders.GRID

    set_column_widths(ws, widths)


def set_column_widths(ws: Worksheet, widths: list[int]) -> None:
    """Set column widths (in characters) from column A onwards."""
    for col_idx, width in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(col_idx)].width = width


def freeze_panes(ws: Worksheet, row: int = 2, col: int = 1) -> None:
    """
    Freeze panes in a worksheet.

    Args:
        ws: Worksheet
        row: First unfrozen row (freeze rows above)
        col: First unfrozen column (freeze columns to the left)
    """
    ws.freeze_panes = ws.cell(row=row, column=col)
