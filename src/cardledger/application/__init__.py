"""
Application layer for cardledger.

Table stores, reconciliation (export mapping and import), notifications
and the workspace that ties them to the spreadsheet collaborators.
"""

from cardledger.application.export_mapper import ExportMapper
from cardledger.application.import_reconciler import ImportReconciler, coerce_cell
from cardledger.application.notifications import (
    CompositeSink,
    LoggingSink,
    Notification,
    NotificationSink,
    Severity,
    ToastNotifier,
)
from cardledger.application.table_store import TableStore
from cardledger.application.workspace import LedgerWorkspace

__all__ = [
    "CompositeSink",
    "ExportMapper",
    "ImportReconciler",
    "LedgerWorkspace",
    "LoggingSink",
    "Notification",
    "NotificationSink",
    "Severity",
    "TableStore",
    "ToastNotifier",
    "coerce_cell",
]
