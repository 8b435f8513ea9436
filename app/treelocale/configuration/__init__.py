"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    LocalizationSettings: Localization section (for testing)
"""

from treelocale.configuration.i18n import LocalizationSettings
from treelocale.configuration.settings import Settings, settings

__all__ = ["Settings", "LocalizationSettings", "settings"]
