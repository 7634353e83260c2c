"""Exceptions raised by the i18n system.

Lookup misses are not errors: ``lookup`` returns ``None`` and ``translate``
falls back to a default or a descriptive failure string. These exceptions
cover formatting configuration and bad input only.
"""

from typing import Any


class TaterError(Exception):
    """Base exception for all tater errors.

    Example:
        try:
            tater.localize(value)
        except TaterError as e:
            logger.error("localization_failed", error=str(e))
    """

    pass


class MissingLocalizationFormat(TaterError, ValueError):
    """Raised when a formatting value is neither passed nor loaded.

    Example:
        >>> tater.localize(1000)  # no numeric.delimiter for the locale
        Traceback (most recent call last):
        ...
        MissingLocalizationFormat: Numeric localization delimiter ('numeric.delimiter') ...
    """

    def __init__(self, key: str, message: str):
        self.key = key
        super().__init__(message)


class UnLocalizableObject(TaterError, TypeError):
    """Raised when ``localize`` receives a value it has no renderer for."""

    def __init__(self, obj: Any):
        self.object_type = type(obj)
        super().__init__(
            f"The object class {self.object_type.__name__} cannot be localized by Tater."
        )


class MissingInterpolationArgument(TaterError, KeyError):
    """Raised when a placeholder references a name absent from the options."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Missing interpolation argument: {self.key}"
