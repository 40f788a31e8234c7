"""
Export Mapper - register rows to a tabular artifact.

Keeps rows with at least one meaningful field filled in, renumbers them
from 1, and projects every field onto its localized column header.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable

from cardledger.domain.artifact import Record, TabularArtifact
from cardledger.domain.models import Row
from cardledger.domain.registers import ColumnKind, RegisterLayout
from cardledger.infrastructure.i18n import Translator

logger = logging.getLogger(__name__)


class ExportMapper:
    """
    Builds export and print artifacts for a register.

    Usage:
        artifact = ExportMapper(Translator("ar")).build(RECIPIENTS_LAYOUT, store.rows)
    """

    def __init__(self, translator: Translator | None = None) -> None:
        self.translator = translator or Translator()

    def headers(self, layout: RegisterLayout) -> list[str]:
        """Localized header texts in column order."""
        return [self.translator.header(col.key) for col in layout.columns]

    def build(self, layout: RegisterLayout, rows: Iterable[Row]) -> TabularArtifact:
        """
        Build the export artifact of a register.

        Rows without any meaningful field are left out; the sequence column
        is the 1-based position within the exported rows.
        """
        kept = [row for row in rows if layout.is_meaningful(row)]
        records = [self._record(layout, row, position) for position, row in enumerate(kept, start=1)]

        logger.debug(
            "%s: exporting %d records", layout.register.value, len(records)
        )
        return TabularArtifact(
            headers=self.headers(layout),
            records=records,
            column_widths=layout.column_widths,
            right_to_left=self.translator.is_rtl,
            file_name=layout.export_file_name,
        )

    def build_print(self, layout: RegisterLayout, rows: Iterable[Row]) -> TabularArtifact:
        """
        Build the print artifact of a register.

        Unlike exports, every row is printed (blank lines included) so the
        sheet looks like the paper register, under a title banner and with
        the register's page orientation.
        """
        records = [self._record(layout, row, position) for position, row in enumerate(rows, start=1)]
        return TabularArtifact(
            headers=self.headers(layout),
            records=records,
            column_widths=layout.column_widths,
            right_to_left=self.translator.is_rtl,
            file_name=layout.print_file_name,
            title=self.translator.title(layout.title_key),
            orientation=layout.orientation,
        )

    def _record(self, layout: RegisterLayout, row: Row, position: int) -> Record:
        record: Record = {}
        for col in layout.columns:
            record[self.translator.header(col.key)] = self._cell_value(col.kind, col.field, row, position)
        return record

    def _cell_value(self, kind: ColumnKind, field, row: Row, position: int) -> Any:
        match kind:
            case ColumnKind.SEQUENCE:
                return position
            case ColumnKind.ATTACHMENT:
                if row.attachment is not None:
                    return row.attachment.name
                return self.translator.message("no_attachment")
            case ColumnKind.FIELD:
                return row.get_field(field)
        raise ValueError(f"Unknown column kind: {kind!r}")
