"""
Infrastructure layer for cardledger.

Spreadsheet I/O (openpyxl, pandas), i18n, settings persistence and
logging setup.
"""
