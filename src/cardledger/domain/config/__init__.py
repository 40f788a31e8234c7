"""
Configuration domain package.

This package contains the settings model for a cardledger session.
"""

from .settings import LedgerSettings

__all__ = [
    "LedgerSettings",
]
