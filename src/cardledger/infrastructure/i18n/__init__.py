"""
Internationalization (i18n) Package.

Provides the Arabic headers, register titles and messages of the ledger,
with English fallbacks.

Usage:
    from cardledger.infrastructure.i18n import Translator

    t = Translator("ar")
    t.header("Card Type")  # Returns "نوع البطاقة"
"""

from cardledger.infrastructure.i18n.translator import (
    Translator,
    SUPPORTED_LANGUAGES,
)

__all__ = [
    "Translator",
    "SUPPORTED_LANGUAGES",
]
