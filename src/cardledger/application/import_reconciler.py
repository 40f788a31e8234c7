"""
Import Reconciler - header-keyed records back into register rows.

Rules:
    - Each record becomes one row; headers are matched against the
      register's localized headers (English keys are accepted too) and
      unknown headers are ignored
    - Missing or falsy cells become empty strings
    - Every cell is coerced to text explicitly per target field (spreadsheet
      libraries hand back numbers and dates for cells that look like them);
      only the receipt date is cut down to YYYY-MM-DD
    - When a sheet has both the localized and the English header of a
      field, the localized column wins
    - Attachments never survive an import
    - All ids of one import come from a single reserved block: record i
      gets base + i, padding rows continue the sequence
    - Short imports are padded with blank rows up to the minimum row count;
      long imports are never truncated
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from cardledger.application.notifications import NotificationSink, Severity
from cardledger.application.table_store import TableStore
from cardledger.domain.artifact import Record
from cardledger.domain.ids import IdGenerator
from cardledger.domain.models import RecipientField, Row, RowField
from cardledger.domain.registers import RegisterLayout
from cardledger.infrastructure.i18n import Translator

logger = logging.getLogger(__name__)

DEFAULT_MIN_ROWS = 15


def coerce_cell(value: Any, field: RowField | None = None) -> str:
    """
    Convert a spreadsheet cell value to the text stored in a row field.

    Dates and datetimes are cut to YYYY-MM-DD only for the receipt date;
    every other field keeps the full value as text.

    Examples:
        >>> coerce_cell(12345)
        '12345'
        >>> coerce_cell(12345.0)
        '12345'
        >>> coerce_cell(datetime(2025, 3, 1, 14, 30), RecipientField.RECEIPT_DATE)
        '2025-03-01'
        >>> coerce_cell(datetime(2025, 3, 1, 14, 30))
        '2025-03-01 14:30:00'
        >>> coerce_cell(None)
        ''
    """
    if not value:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, (datetime, date)):
        if field is RecipientField.RECEIPT_DATE:
            return value.strftime("%Y-%m-%d")
        if isinstance(value, datetime):
            return value.isoformat(sep=" ")
        return value.isoformat()
    if isinstance(value, time):
        return value.isoformat()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Decimal) and value == value.to_integral_value():
        return str(int(value))
    return str(value)


class ImportReconciler:
    """
    Rebuilds a register from imported records.

    Usage:
        reconciler = ImportReconciler(Translator("ar"), min_rows=15)
        rows = reconciler.build_rows(RECIPIENTS_LAYOUT, records, store.ids)
    """

    def __init__(self, translator: Translator | None = None, min_rows: int = DEFAULT_MIN_ROWS) -> None:
        self.translator = translator or Translator()
        self.min_rows = min_rows

    def build_rows(
        self,
        layout: RegisterLayout,
        records: list[Record],
        ids: IdGenerator,
    ) -> list[Row]:
        """
        Map records to rows and pad to the minimum row count.

        Args:
            layout: Layout of the target register
            records: Imported records (header text -> cell value)
            ids: Id generator of the target register

        Returns:
            The full replacement row list
        """
        total = max(len(records), self.min_rows)
        base = ids.reserve(total)

        header_to_field = self._header_lookup(layout)
        localized = {self.translator.header(col.key) for col in layout.field_columns}
        rows: list[Row] = []

        for index, record in enumerate(records):
            row = layout.blank_row(base + index)
            values = self._field_values(record, header_to_field, localized)
            for col in layout.field_columns:
                row = row.with_field(col.field, coerce_cell(values.get(col.field), col.field))
            rows.append(row)

        for index in range(len(records), total):
            rows.append(layout.blank_row(base + index))

        logger.debug(
            "%s: %d imported rows, %d padding rows",
            layout.register.value,
            len(records),
            total - len(records),
        )
        return rows

    def apply(self, store: TableStore, records: list[Record], notify: NotificationSink) -> bool:
        """
        Replace a store's rows with imported records.

        An empty record list leaves the store untouched.

        Returns:
            True if the store was replaced
        """
        if not records:
            logger.warning("%s: import contained no records", store.layout.register.value)
            notify(self.translator.message("import_empty"), Severity.ERROR)
            return False

        rows = self.build_rows(store.layout, records, store.ids)
        store.replace_all(rows)
        logger.info("%s: imported %d records", store.layout.register.value, len(records))
        notify(self.translator.message("import_success"), Severity.SUCCESS)
        return True

    def _header_lookup(self, layout: RegisterLayout) -> dict[str, RowField]:
        """Map every accepted header text of the layout to its field."""
        field_by_key = {col.key: col.field for col in layout.field_columns}
        lookup = self.translator.header_keys(list(field_by_key))
        return {header: field_by_key[key] for header, key in lookup.items()}

    @staticmethod
    def _field_values(
        record: Record,
        header_to_field: dict[str, RowField],
        localized: set[str],
    ) -> dict[RowField, Any]:
        """Pick one value per field; a localized header beats any other spelling."""
        values: dict[RowField, Any] = {}
        from_localized: set[RowField] = set()

        for header, value in record.items():
            text = str(header).strip()
            field = header_to_field.get(text)
            if field is None:
                continue
            is_localized = text in localized
            if field in values and (field in from_localized or not is_localized):
                logger.debug("Duplicate column '%s' for %s ignored", text, field.value)
                continue
            values[field] = value
            if is_localized:
                from_localized.add(field)
        return values
