"""Tater - a small internationalization and localization library.

Example:
    from tater import Tater

    tater = Tater(path="locales", locale="en")
    tater.translate("greeting", name="Ada")
"""

from tater.i18n import (
    MissingInterpolationArgument,
    MissingLocalizationFormat,
    Tater,
    TaterError,
    UnLocalizableObject,
    create_tater,
)

__version__ = "3.0.0"

__all__ = [
    "Tater",
    "create_tater",
    "TaterError",
    "MissingLocalizationFormat",
    "MissingInterpolationArgument",
    "UnLocalizableObject",
]
