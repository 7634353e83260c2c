"""Locale-aware rendering of numbers, dates and sequences.

Every renderer reads its configuration (delimiters, connectors, day and
month names, format patterns) from the message tree through the key
resolver, unless the caller passes an override.
"""

import datetime
import re
from decimal import Decimal
from typing import Any, Optional, Sequence

from tater.i18n.errors import MissingLocalizationFormat, UnLocalizableObject
from tater.i18n.resolvers import KeyResolver
from tater.i18n.utils import string_from_numeric

DEFAULT_FORMAT = "default"
DEFAULT_PRECISION = 2
DELIMITING_REGEX = re.compile(r"(\d)(?=(\d\d\d)+(?!\d))")
# "%%" is matched first so escaped percents never start a token
SUBSTITUTION_REGEX = re.compile(r"%(?:(%)|(\^?)([aAbBpP]))")

# token -> (message key, index attribute); upper-case ``^`` variants share these
_NAME_TABLES = {
    "a": ("date.abbreviated_days", "weekday"),
    "A": ("date.days", "weekday"),
    "b": ("date.abbreviated_months", "month"),
    "B": ("date.months", "month"),
}


class Localizer:
    """Renders values as locale-appropriate strings.

    Supported options:
        format: Key (under ``<type>.formats``) or literal strftime pattern for
            dates and times.
        locale: Locale to read configuration from instead of the active one.
        delimiter / separator / precision: Numeric rendering overrides.
        two_words_connector / words_connector / last_word_connector:
            Sequence rendering overrides.
    """

    def __init__(self, resolver: KeyResolver):
        self.resolver = resolver

    def localize(self, obj: Any, **options: Any) -> Any:
        """Localize a string, number, date, time or sequence of strings.

        Raises:
            MissingLocalizationFormat: If required configuration is missing.
            UnLocalizableObject: If ``obj`` is of an unsupported kind.
        """
        if isinstance(obj, str):
            return obj
        if isinstance(obj, bool):
            raise UnLocalizableObject(obj)
        if isinstance(obj, (int, float, Decimal)):
            return self.localize_numeric(obj, **options)
        if isinstance(obj, (datetime.date, datetime.time)):
            return self.localize_datetime(obj, **options)
        if isinstance(obj, (list, tuple)):
            return self.localize_array(obj, **options)
        raise UnLocalizableObject(obj)

    def localize_array(self, obj: Sequence[Any], **options: Any) -> Any:
        """Join a sequence into a sentence, e.g. ``"a, b, and c"``."""
        locale = options.get("locale")

        if len(obj) == 0:
            return ""
        if len(obj) == 1:
            return obj[0]
        if len(obj) == 2:
            two_words_connector = self._option_or_lookup(
                options, "two_words_connector", "array.two_words_connector", locale
            )
            if two_words_connector is None:
                raise MissingLocalizationFormat(
                    "array.two_words_connector",
                    "Sentence localization connector ('array.two_words_connector') "
                    "missing or not passed as option two_words_connector",
                )
            return f"{obj[0]}{two_words_connector}{obj[1]}"

        last_word_connector = self._option_or_lookup(
            options, "last_word_connector", "array.last_word_connector", locale
        )
        words_connector = self._option_or_lookup(
            options, "words_connector", "array.words_connector", locale
        )

        if last_word_connector is None:
            raise MissingLocalizationFormat(
                "array.last_word_connector",
                "Sentence localization connector ('array.last_word_connector') "
                "missing or not passed as option last_word_connector",
            )
        if words_connector is None:
            raise MissingLocalizationFormat(
                "array.words_connector",
                "Sentence localization connector ('array.words_connector') "
                "missing or not passed as option words_connector",
            )

        head = str(words_connector).join(str(item) for item in obj[:-1])
        return f"{head}{last_word_connector}{obj[-1]}"

    def localize_datetime(self, obj: Any, **options: Any) -> str:
        """Render a date, datetime or time with a named or literal format."""
        frmt = options.get("format")
        if frmt is None:
            frmt = DEFAULT_FORMAT
        locale = options.get("locale")

        pattern = self.resolver.lookup(
            f"{type(obj).__name__.lower()}.formats.{frmt}", locale=locale
        )
        if not isinstance(pattern, str):
            pattern = str(frmt)

        def _substitute(match: re.Match) -> str:
            if match.group(1):
                return match.group(0)
            upcase, token = match.group(2), match.group(3)

            if token in ("p", "P"):
                if not hasattr(obj, "hour"):
                    return match.group(0)
                key = "time.am" if obj.hour < 12 else "time.pm"
                name = str(self._require(key, locale))
                return name.upper() if token == "p" or upcase else name.lower()

            key, attribute = _NAME_TABLES[token]
            if not hasattr(obj, attribute):
                return match.group(0)

            if attribute == "weekday":
                # Sunday first, as in strftime's %w
                index = obj.isoweekday() % 7
            else:
                index = obj.month - 1

            names = self._require(key, locale)
            try:
                name = str(names[index])
            except (IndexError, KeyError, TypeError) as e:
                raise MissingLocalizationFormat(
                    key, f"Date localization names ('{key}') have no entry {index}"
                ) from e
            return name.upper() if upcase else name

        rendered = SUBSTITUTION_REGEX.sub(_substitute, pattern)

        if "%" in rendered:
            return obj.strftime(rendered)
        return rendered

    def localize_numeric(self, obj: Any, **options: Any) -> str:
        """Render a number with locale delimiter, separator and precision."""
        locale = options.get("locale")
        delimiter = self._option_or_lookup(options, "delimiter", "numeric.delimiter", locale)
        separator = self._option_or_lookup(options, "separator", "numeric.separator", locale)
        precision = options.get("precision")
        if precision is None:
            precision = DEFAULT_PRECISION

        if delimiter is None:
            raise MissingLocalizationFormat(
                "numeric.delimiter",
                "Numeric localization delimiter ('numeric.delimiter') "
                "missing or not passed as option delimiter",
            )
        if separator is None:
            raise MissingLocalizationFormat(
                "numeric.separator",
                "Numeric localization separator ('numeric.separator') "
                "missing or not passed as option separator",
            )

        integer = string_from_numeric(obj)
        fraction: Optional[str] = None
        if not isinstance(obj, int):
            integer, _, fraction = integer.partition(".")

        integer = DELIMITING_REGEX.sub(lambda match: f"{match.group(1)}{delimiter}", integer)

        if precision == 0 or not fraction:
            return integer
        return f"{integer}{separator}{fraction.ljust(precision, '0')[:precision]}"

    def _option_or_lookup(
        self, options: dict, name: str, key: str, locale: Optional[Any]
    ) -> Any:
        value = options.get(name)
        if value is None:
            value = self.resolver.lookup(key, locale=locale)
        return value

    def _require(self, key: str, locale: Optional[Any]) -> Any:
        value = self.resolver.lookup(key, locale=locale)
        if value is None:
            raise MissingLocalizationFormat(
                key, f"Date localization value ('{key}') missing for this locale"
            )
        return value
