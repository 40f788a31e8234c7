"""Settings persistence (JSON file under the config directory)."""

from cardledger.infrastructure.config.manager import ConfigManager
from cardledger.infrastructure.config.repository import ConfigRepository, SETTINGS_FILENAME

__all__ = ["ConfigManager", "ConfigRepository", "SETTINGS_FILENAME"]
