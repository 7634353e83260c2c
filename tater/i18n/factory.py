"""Factory functions for creating Tater instances from settings."""

from collections.abc import Mapping
from typing import Optional

import structlog

from tater.configuration import I18nSettings, settings as default_settings
from tater.i18n.translator import Tater

logger = structlog.get_logger()


def create_tater(
    i18n_settings: Optional[I18nSettings] = None,
    messages: Optional[Mapping] = None,
) -> Tater:
    """Create and configure a Tater instance.

    Args:
        i18n_settings: Settings to build from (default: the global settings,
            i.e. TATER_PATH, TATER_LOCALE and TATER_CASCADE).
        messages: Optional mapping merged after the directory sources.

    Returns:
        Tater: Configured instance

    Raises:
        FileNotFoundError: If TATER_PATH does not exist

    Usage:
        # From the environment
        tater = create_tater()

        # With explicit settings
        tater = create_tater(I18nSettings(TATER_PATH="locales", TATER_LOCALE="fr"))
    """
    config = i18n_settings or default_settings.i18n

    tater = Tater(
        cascade=config.cascade,
        locale=config.locale,
        messages=messages,
        path=config.path,
    )

    logger.info(
        "tater_created",
        path=config.path,
        locale=tater.locale,
        cascade=tater.cascades(),
        locale_count=len(tater.available),
    )
    return tater
