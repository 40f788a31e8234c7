"""
Translator - Main i18n interface.

Provides unified access to headers, register titles and messages.
Arabic is the primary language; English falls back to the keys.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from cardledger.infrastructure.i18n.headers import LEDGER_HEADERS, REGISTER_TITLES
from cardledger.infrastructure.i18n.messages import ARABIC_MESSAGES, ENGLISH_MESSAGES

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("ar", "en")


@dataclass
class FontConfig:
    """Font configuration for a language."""

    heading_font: str
    content_font: str
    is_rtl: bool


FONT_CONFIGS = {
    "ar": FontConfig(
        heading_font="Arial",
        content_font="Arial",
        is_rtl=True,
    ),
    "en": FontConfig(
        heading_font="Calibri",
        content_font="Calibri",
        is_rtl=False,
    ),
}


class Translator:
    """
    Unified translator for i18n.

    Usage:
        t = Translator("ar")
        t.header("Card Number")   # "رقم البطاقة"
        t.message("row_added")    # "تم إضافة صف جديد بنجاح"
    """

    def __init__(
        self,
        lang: str = "ar",
        heading_font: str | None = None,
        content_font: str | None = None,
    ) -> None:
        """Initialize translator for given language, optionally overriding fonts."""
        if lang not in SUPPORTED_LANGUAGES:
            logger.warning("Unsupported language '%s', falling back to 'ar'", lang)
            lang = "ar"

        self.lang = lang
        base = FONT_CONFIGS[lang]
        self.font_config = FontConfig(
            heading_font=heading_font or base.heading_font,
            content_font=content_font or base.content_font,
            is_rtl=base.is_rtl,
        )
        self._is_arabic = lang == "ar"

    @property
    def is_rtl(self) -> bool:
        """Whether this language is right-to-left."""
        return self.font_config.is_rtl

    @property
    def heading_font(self) -> str:
        return self.font_config.heading_font

    @property
    def content_font(self) -> str:
        return self.font_config.content_font

    def header(self, key: str) -> str:
        """Translate column header."""
        if not self._is_arabic:
            return key
        return LEDGER_HEADERS.get(key, key)

    def title(self, key: str) -> str:
        """Translate register title."""
        if not self._is_arabic:
            return key
        return REGISTER_TITLES.get(key, key)

    def message(self, key: str) -> str:
        """Get a user-facing message by id."""
        table = ARABIC_MESSAGES if self._is_arabic else ENGLISH_MESSAGES
        return table.get(key, key)

    def header_keys(self, keys: list[str]) -> dict[str, str]:
        """
        Build a lookup from spreadsheet header text to header key.

        Both the localized header and the English key resolve, so files
        written in either language can be read back.

        Args:
            keys: Header keys of a register layout

        Returns:
            Dict of {header text: header key}
        """
        lookup: dict[str, str] = {}
        for key in keys:
            lookup[key] = key
            lookup[LEDGER_HEADERS.get(key, key)] = key
            lookup[self.header(key)] = key
        return lookup
