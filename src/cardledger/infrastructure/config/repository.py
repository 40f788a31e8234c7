"""
Configuration repository for loading the settings file.

This module provides the infrastructure layer for configuration persistence.
It handles file I/O operations and basic validation.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from cardledger.domain.config import LedgerSettings

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "ledger_settings"


class ConfigRepository:
    """
    Repository for configuration file operations.

    Reads ``<config_dir>/ledger_settings.json``. A missing file is not an
    error: the defaults of LedgerSettings apply.
    """

    def __init__(self, config_dir: Path):
        """
        Initialize the config repository.

        Args:
            config_dir: Base directory for configuration files
        """
        self.config_dir = Path(config_dir)

    @property
    def settings_path(self) -> Path:
        return self.config_dir / f"{SETTINGS_FILENAME}.json"

    def load_json_file(self, filename: str) -> Dict[str, Any]:
        """
        Load a JSON file.

        Args:
            filename: Name of the file to load (without extension)

        Returns:
            Parsed JSON data as dictionary

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file cannot be parsed or is not an object
        """
        json_path = self.config_dir / f"{filename}.json"
        if not json_path.exists():
            raise FileNotFoundError(f"Config file '{filename}.json' not found in {self.config_dir}")

        try:
            with open(json_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("Failed to parse JSON file %s: %s", json_path, e)
            raise ValueError(f"Invalid JSON in {json_path}") from e

        if not isinstance(data, dict):
            raise ValueError(f"{json_path} must contain a JSON object")
        return data

    def load_settings(self) -> LedgerSettings:
        """
        Load ledger settings.

        Returns:
            Parsed LedgerSettings (defaults if the file does not exist)

        Raises:
            ValueError: If the file exists but cannot be parsed or validated
        """
        if not self.settings_path.exists():
            logger.debug("No settings file at %s, using defaults", self.settings_path)
            return LedgerSettings()

        data = self.load_json_file(SETTINGS_FILENAME)
        try:
            return LedgerSettings(**data)
        except ValidationError as e:
            logger.error("Failed to validate settings: %s", e)
            raise ValueError(f"Invalid ledger settings: {e}") from e

