"""
Configuration manager.

Caches the settings loaded through ConfigRepository so the CLI and the
workspace share one instance per session.
"""

import logging
from pathlib import Path
from typing import Optional

from cardledger.domain.config import LedgerSettings
from cardledger.infrastructure.config.repository import ConfigRepository

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    High-level access to the ledger settings.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize the config manager.

        Args:
            config_dir: Base directory for configuration files.
                       Defaults to 'config' subdirectory of current working directory.
        """
        if config_dir is None:
            config_dir = Path.cwd() / "config"

        self.config_dir = Path(config_dir)
        self.repository = ConfigRepository(self.config_dir)
        self._settings: Optional[LedgerSettings] = None

    def load_settings(self, force_reload: bool = False) -> LedgerSettings:
        """
        Load ledger settings.

        Args:
            force_reload: Whether to force reload from disk

        Raises:
            ValueError: If the settings file is invalid
        """
        if self._settings is None or force_reload:
            logger.info("Loading ledger settings from %s", self.config_dir)
            self._settings = self.repository.load_settings()
            logger.debug(
                "Settings: min_rows=%d language=%s output_dir=%s",
                self._settings.min_rows,
                self._settings.language,
                self._settings.output_dir,
            )

        return self._settings
