"""
Ledger settings domain model.

Controls table sizing, notification lifetime, output location, language,
fonts and logging for a cardledger session.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from cardledger.domain.models import Register


class LedgerSettings(BaseModel):
    """
    Settings for a cardledger session.

    Every field has a default, so an absent config file yields a usable
    configuration.
    """

    model_config = ConfigDict(extra="ignore")

    min_rows: int = Field(
        default=15,
        description="Minimum row count of a register after an import",
        ge=1,
        le=500
    )

    toast_duration_seconds: float = Field(
        default=3.0,
        description="How long a notification stays visible",
        gt=0
    )

    output_dir: Path = Field(
        default=Path("output"),
        description="Directory exported and print-ready workbooks are written to"
    )

    default_register: Register = Field(
        default=Register.RECIPIENTS,
        description="Register shown when a session starts"
    )

    language: str = Field(
        default="ar",
        description="Language of spreadsheet headers and messages ('ar' or 'en')"
    )

    heading_font: str = Field(default="Arial", description="Font for header cells")
    content_font: str = Field(default="Arial", description="Font for data cells")

    log_level: str = Field(default="INFO", description="Console log level name")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Accept only standard logging level names."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator('language')
    @classmethod
    def validate_language(cls, v: str) -> str:
        lang = v.strip().lower()
        if lang not in ("ar", "en"):
            raise ValueError(f"Unsupported language: {v}")
        return lang

    @property
    def log_level_number(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level)
