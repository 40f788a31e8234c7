"""
cardledger - Visitor card registers.

Keeps the "recipients of visitor cards" and "active cards" registers,
exports them to right-to-left Arabic spreadsheets, re-imports edited
spreadsheets, and produces print-ready sheets.

Usage:
    # CLI
    cardledger shell

    # Programmatic
    from cardledger.application.workspace import LedgerWorkspace

    workspace = LedgerWorkspace()
    workspace.import_file("Recipients_List.xlsx")
    workspace.export("output")
"""

__version__ = "0.1.0"
__author__ = "cardledger Team"

from cardledger.application.workspace import LedgerWorkspace

__all__ = ["LedgerWorkspace", "__version__"]
