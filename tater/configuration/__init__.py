"""Configuration module - public API.

Exports:
    settings: Singleton Settings instance
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Message store defaults

Example:
    ```python
    from tater.configuration import settings

    log_level = settings.LOG_LEVEL
    default_locale = settings.i18n.locale
    ```
"""

from tater.configuration.i18n import I18nSettings
from tater.configuration.settings import Settings

settings = Settings()

__all__ = ["Settings", "I18nSettings", "settings"]
