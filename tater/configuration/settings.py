"""Tater configuration settings - main aggregator."""

from pydantic import Field

from tater.configuration.base import LibrarySettings
from tater.configuration.i18n import I18nSettings


class Settings(LibrarySettings):
    """Tater configuration settings.

    Environment Variables:
        LOG_LEVEL: Logging level used by configure_logging (default: INFO)
        LOG_JSON: Render logs as JSON instead of console output (default: False)

    Example:
        ```python
        from tater.configuration import settings

        if settings.LOG_JSON:
            ...
        ```
    """

    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = Field(
        default=False,
        description="Render logs as JSON lines",
    )

    i18n: I18nSettings

    def __init__(self, **kwargs):
        if "i18n" not in kwargs:
            kwargs["i18n"] = I18nSettings()
        super().__init__(**kwargs)
