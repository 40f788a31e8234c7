"""
Table State Store - the ordered row collection of one register.

The store is the single source of truth a view renders from. Rows keep
insertion order; every mutation swaps in a new tuple, so snapshots taken
by callers (exports, renderers) never change underneath them.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator

from cardledger.application.notifications import NotificationSink, Severity
from cardledger.domain.errors import DuplicateRowIdError
from cardledger.domain.ids import IdGenerator
from cardledger.domain.models import Attachment, Row, RowField
from cardledger.domain.registers import RegisterLayout
from cardledger.infrastructure.i18n import Translator

logger = logging.getLogger(__name__)

ConfirmPrompt = Callable[[str], bool]


def _always_confirm(_message: str) -> bool:
    return True


class TableStore:
    """
    Rows of one register plus add/update/delete/replace operations.

    Usage:
        store = TableStore(RECIPIENTS_LAYOUT, notify=toast, confirm=ask_user)
        row = store.add_row()
        store.update_field(row.id, RecipientField.RECIPIENT_NAME, "سارة")
    """

    def __init__(
        self,
        layout: RegisterLayout,
        notify: NotificationSink,
        confirm: ConfirmPrompt = _always_confirm,
        translator: Translator | None = None,
        ids: IdGenerator | None = None,
        initial_rows: Iterable[Row] = (),
    ) -> None:
        """
        Initialize the store.

        Args:
            layout: Register layout (blank-row factory, fields)
            notify: Sink for user-facing notifications
            confirm: Yes/no prompt used before deleting a row
            translator: Source of message texts
            ids: Id generator; a fresh one is created if omitted
            initial_rows: Starting rows (ids must be unique)
        """
        self.layout = layout
        self._notify = notify
        self._confirm = confirm
        self._t = translator or Translator()
        self.ids = ids or IdGenerator()
        self._rows: tuple[Row, ...] = ()
        self._change_callbacks: list[Callable[[], None]] = []

        rows = tuple(initial_rows)
        if rows:
            self._check_unique(rows)
            self._rows = rows
            self.ids.observe(max(row.id for row in rows))

    @classmethod
    def with_blank_rows(
        cls,
        layout: RegisterLayout,
        count: int,
        notify: NotificationSink,
        **kwargs,
    ) -> TableStore:
        """Create a store pre-filled with ``count`` blank rows numbered 1..count."""
        rows = [layout.blank_row(row_id) for row_id in range(1, count + 1)]
        return cls(layout, notify, initial_rows=rows, **kwargs)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def rows(self) -> tuple[Row, ...]:
        """Snapshot of the rows in order."""
        return self._rows

    def get(self, row_id: int) -> Row | None:
        for row in self._rows:
            if row.id == row_id:
                return row
        return None

    def __contains__(self, row_id: object) -> bool:
        return any(row.id == row_id for row in self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def on_change(self, callback: Callable[[], None]) -> None:
        """Register a callback run after every mutation."""
        self._change_callbacks.append(callback)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_row(self) -> Row:
        """Append a blank row with a fresh id."""
        row = self.layout.blank_row(self.ids.next_id())
        self._rows = self._rows + (row,)
        logger.debug("%s: added row %d", self.layout.register.value, row.id)
        self._notify_change()
        self._notify(self._t.message("row_added"), Severity.SUCCESS)
        return row

    def update_field(self, row_id: int, field: RowField, value: str) -> bool:
        """
        Replace one text field of a row.

        Returns:
            True if a row with that id exists and was updated
        """
        return self._replace_row(row_id, lambda row: row.with_field(field, value))

    def set_attachment(self, row_id: int, attachment: Attachment | None) -> bool:
        """
        Attach a file to a row, or clear it with None.

        Returns:
            True if a row with that id exists and was updated
        """
        return self._replace_row(row_id, lambda row: row.with_attachment(attachment))

    def delete_row(self, row_id: int) -> bool:
        """
        Remove a row after the user confirms.

        Returns:
            True if the row was removed; False if it does not exist or the
            user declined
        """
        if row_id not in self:
            logger.debug("%s: delete of unknown row %d ignored", self.layout.register.value, row_id)
            return False

        if not self._confirm(self._t.message("confirm_delete")):
            logger.debug("%s: delete of row %d declined", self.layout.register.value, row_id)
            return False

        self._rows = tuple(row for row in self._rows if row.id != row_id)
        logger.debug("%s: deleted row %d", self.layout.register.value, row_id)
        self._notify_change()
        # Destructive actions use the error styling
        self._notify(self._t.message("row_deleted"), Severity.ERROR)
        return True

    def replace_all(self, rows: Iterable[Row]) -> None:
        """
        Swap the whole collection in one step.

        Raises:
            DuplicateRowIdError: If two incoming rows share an id
        """
        new_rows = tuple(rows)
        self._check_unique(new_rows)
        self._rows = new_rows
        if new_rows:
            self.ids.observe(max(row.id for row in new_rows))
        logger.debug("%s: replaced with %d rows", self.layout.register.value, len(new_rows))
        self._notify_change()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _replace_row(self, row_id: int, change: Callable[[Row], Row]) -> bool:
        for index, row in enumerate(self._rows):
            if row.id == row_id:
                self._rows = self._rows[:index] + (change(row),) + self._rows[index + 1:]
                self._notify_change()
                return True
        return False

    @staticmethod
    def _check_unique(rows: tuple[Row, ...]) -> None:
        seen: set[int] = set()
        for row in rows:
            if row.id in seen:
                raise DuplicateRowIdError(row.id)
            seen.add(row.id)

    def _notify_change(self) -> None:
        for callback in self._change_callbacks:
            try:
                callback()
            except Exception as e:
                logger.error("Change listener failed: %s", e)
