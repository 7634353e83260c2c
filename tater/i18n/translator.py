"""Tater: the internationalization and localization facade.

Combines the message store, locale directory, key resolver, interpolator
and localizer behind one object.

Usage:
    tater = Tater(locale="en", messages={"en": {"hi": "Hello, %{name}!"}})
    tater.translate("hi", name="Ada")  # "Hello, Ada!"
    tater.localize(1234.5, delimiter=",", separator=".")  # "1,234.50"
"""

import itertools
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from tater.i18n.interpolation import interpolate
from tater.i18n.loader import DirectoryMessageLoader, MessageLoader, PathLike
from tater.i18n.localizer import Localizer
from tater.i18n.models import MessageKind, strip_reserved
from tater.i18n.resolvers import KeyResolver, LocaleDirectory
from tater.i18n.store import MessageStore
from tater.logging import get_module_logger

logger = get_module_logger()

LOOKUP_FAILED = "Tater lookup failed: {locale}.{key}"


class Tater:
    """Service for looking up, translating and localizing messages.

    Attributes:
        loader: MessageLoader used for directory sources.
        store: MessageStore holding the frozen message tree.
        directory: LocaleDirectory tracking available and active locales.
        resolver: KeyResolver performing cached key path lookups.
        localizer: Localizer rendering numbers, dates and sequences.
    """

    def __init__(
        self,
        cascade: bool = False,
        locale: Optional[str] = None,
        messages: Optional[Mapping] = None,
        path: Optional[PathLike] = None,
        loader: Optional[MessageLoader] = None,
    ):
        """Initialize Tater.

        Args:
            cascade: Whether lookups cascade by default.
            locale: The initial active locale.
            messages: A mapping of messages ready to be loaded in.
            path: A directory to search for YAML or Python message sources.
            loader: Loader for directory sources (default: YAML, then Python).
        """
        self.loader = loader or DirectoryMessageLoader()
        self.store = MessageStore()
        self.directory = LocaleDirectory(self.store, locale=locale)
        self.resolver = KeyResolver(self.store, self.directory, cascade=cascade)
        self.localizer = Localizer(self.resolver)

        self.load(path=path, messages=messages)

    def __repr__(self) -> str:
        return (
            f"<Tater:{id(self)} cascade={self.cascades()} "
            f"locale={self.locale!r} available={self.available}>"
        )

    @property
    def messages(self) -> Mapping:
        """The read-only message tree."""
        return self.store.messages

    @property
    def available(self) -> List[str]:
        """Sorted locale codes found in the loaded messages."""
        return self.directory.available

    def is_available(self, locale: Any) -> bool:
        """Is this locale available in the current set of messages?"""
        return self.directory.is_available(locale)

    @property
    def locale(self) -> Optional[str]:
        """The active locale."""
        return self.directory.locale

    @locale.setter
    def locale(self, locale: Any) -> None:
        # Unavailable locales are ignored
        self.directory.locale = locale

    def cascades(self) -> bool:
        """Do lookups cascade by default?"""
        return self.resolver.cascade

    def load(
        self,
        path: Optional[PathLike] = None,
        messages: Optional[Mapping] = None,
    ) -> None:
        """Load messages from a directory, a mapping, or both.

        Directory sources are merged first, the mapping last. Loading clears
        the lookup cache and refreshes the available locales. Read and parse
        errors propagate and leave the current messages untouched.

        Args:
            path: A directory to search for YAML or Python message sources.
            messages: A mapping of messages ready to be loaded in.
        """
        if path is None and messages is None:
            return

        sources: Iterable[Mapping] = ()
        if path is not None:
            sources = self.loader.iter_sources(path)
        if messages is not None:
            sources = itertools.chain(sources, (messages,))

        self.store.load(sources)
        self.directory.refresh()
        self.resolver.clear_cache()

    def lookup(
        self,
        key: str,
        locale: Optional[Any] = None,
        cascade: Optional[bool] = None,
    ) -> Any:
        """Look up a key in the messages, using the active locale or an override.

        Example:
            >>> tater = Tater(locale="en", messages={"en": {"greeting": {"world": "Hello, world!"}}})
            >>> tater.lookup("greeting.world")
            'Hello, world!'

        Args:
            key: The period-separated key path to look for.
            locale: A locale to use instead of the active one, if any.
            cascade: Forcibly set the cascade option for this lookup.

        Returns:
            Anything stored in the messages (string, callable, tuple,
            mapping), or None when nothing is found.
        """
        return self.resolver.lookup(key, locale=locale, cascade=cascade)

    def includes(
        self,
        key: str,
        locale: Optional[Any] = None,
        locales: Optional[Iterable[Any]] = None,
        cascade: Optional[bool] = None,
    ) -> bool:
        """Check that there's a message at the given key path.

        Args:
            key: The period-separated key path.
            locale: A specific locale to look within.
            locales: Locales to look within, in order (a single code may be
                passed as a string); takes precedence over ``locale``. The
                active locale is tried last.
            cascade: Should this lookup cascade or not.
        """
        message, _ = self._find(key, locale=locale, locales=locales, cascade=cascade)
        return message is not None

    def translate(self, key: str, /, **options: Any) -> Any:
        """Translate a key path and interpolation arguments into a string.

        Example:
            >>> Tater(locale="en", messages={"en": {"hi": "Hello"}}).translate("hi")
            'Hello'

        Args:
            key: The period-separated key path.
            **options: Interpolation arguments plus the reserved options
                ``cascade``, ``default``, ``locale`` and ``locales`` (an
                ordered list of locales; takes precedence over ``locale`` and
                is followed by the active locale).

        Returns:
            The interpolated string, the result of a callable message, the
            ``default`` option, or a lookup failure message.
        """
        message, label = self._find(
            key,
            locale=options.get("locale"),
            locales=options.get("locales"),
            cascade=options.get("cascade"),
        )

        kind = MessageKind.classify(message)
        if kind is MessageKind.CALLABLE:
            return message(key, strip_reserved(options))
        if kind is MessageKind.TEXT:
            return interpolate(message, strip_reserved(options))

        if options.get("default") is not None:
            return options["default"]

        logger.debug("translation_not_found", key=key, locale=label, kind=kind)
        return LOOKUP_FAILED.format(locale="" if label is None else label, key=key)

    t = translate

    def localize(self, obj: Any, **options: Any) -> Any:
        """Localize a string, number, date, time or sequence of strings.

        Args:
            obj: The object to localize.
            **options: ``format``, ``locale``, ``delimiter``, ``separator``,
                ``precision``, ``two_words_connector``, ``words_connector``
                and ``last_word_connector``.

        Returns:
            A localized version of the object passed in.

        Raises:
            MissingLocalizationFormat: If required configuration is missing.
            UnLocalizableObject: If ``obj`` cannot be localized.
        """
        return self.localizer.localize(obj, **options)

    l = localize  # noqa: E741

    def _find(self, key, locale=None, locales=None, cascade=None):
        if locales is not None:
            candidates = self.directory.candidates(locales)
            return self.resolver.lookup_first(key, candidates, cascade=cascade), candidates

        message = self.resolver.lookup(key, locale=locale, cascade=cascade)
        return message, locale if locale is not None else self.locale
