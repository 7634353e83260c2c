"""Message store settings."""

from typing import Optional

from pydantic import Field

from tater.configuration.base import LibrarySettings


class I18nSettings(LibrarySettings):
    """Defaults used when building a Tater instance from the environment.

    Environment Variables:
        TATER_PATH: Directory scanned for YAML and Python message sources
        TATER_LOCALE: Initial active locale (e.g. "en")
        TATER_CASCADE: Whether lookups cascade by default (default: False)

    Example:
        ```python
        from tater.configuration import settings

        if settings.i18n.path:
            tater = Tater(path=settings.i18n.path, locale=settings.i18n.locale)
        ```
    """

    path: Optional[str] = Field(
        default=None,
        alias="TATER_PATH",
        description="Directory to load message sources from",
    )
    locale: Optional[str] = Field(
        default=None,
        alias="TATER_LOCALE",
        description="Initial active locale",
    )
    cascade: bool = Field(
        default=False,
        alias="TATER_CASCADE",
        description="Cascade lookups by default",
    )
