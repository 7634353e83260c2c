"""Locale tracking and key path resolution.

Provides the locale directory (which locales are loaded and which one is
active) and the key resolver (dotted-path lookups with optional cascading
and a resolution cache).
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

import structlog

from tater.i18n.models import CacheKey
from tater.i18n.store import MessageStore

logger = structlog.get_logger(component="i18n.resolver")

SEPARATOR = "."

_MISS = object()


class LocaleDirectory:
    """Tracks the available locales and the active locale.

    Available locales are exactly the top-level keys of the message tree and
    are recomputed by ``refresh`` after every load.
    """

    def __init__(self, store: MessageStore, locale: Optional[str] = None):
        self.store = store
        self._locale = locale
        self._available: List[str] = []
        self.refresh()

    def refresh(self) -> None:
        """Recompute the available locales from the message tree."""
        self._available = self.store.locales()

    @property
    def available(self) -> List[str]:
        """Sorted list of locale codes found in the loaded messages."""
        return list(self._available)

    def is_available(self, locale: Any) -> bool:
        """Is this locale available in the current set of messages?"""
        return str(locale) in self._available

    @property
    def locale(self) -> Optional[str]:
        """The active locale."""
        return self._locale

    @locale.setter
    def locale(self, candidate: Any) -> None:
        code = str(candidate)
        if self.is_available(code):
            self._locale = code
        else:
            logger.warning(
                "locale_unavailable",
                requested_locale=code,
                active_locale=self._locale,
                available=self._available,
            )

    def candidates(self, locales: Iterable[Any]) -> List[str]:
        """Return ``locales`` as strings with the active locale appended.

        The active locale is appended only when set and not already present.
        A bare string is treated as a single locale. The caller's iterable
        is never modified.
        """
        if isinstance(locales, str):
            locales = [locales]
        result = [str(locale) for locale in locales]
        if self._locale and self._locale not in result:
            result.append(self._locale)
        return result


class KeyResolver:
    """Resolves dotted key paths against the message tree.

    Cascading lookups relax a missing path by dropping scope segments from
    the right while keeping the leaf: ``a.b.c.d`` is tried as ``a.b.d``,
    then ``a.d``, then ``d``.

    Every result, including a miss, is cached per (locale, cascade, key)
    until ``clear_cache`` is called.
    """

    def __init__(self, store: MessageStore, directory: LocaleDirectory, cascade: bool = False):
        self.store = store
        self.directory = directory
        self.cascade = cascade
        self._cache: Dict[CacheKey, Any] = {}

    def clear_cache(self) -> None:
        """Drop every cached resolution."""
        self._cache.clear()

    def lookup(
        self,
        key: str,
        locale: Optional[Any] = None,
        cascade: Optional[bool] = None,
    ) -> Any:
        """Look up a key path in the given or active locale.

        Args:
            key: The period-separated key path.
            locale: A locale to use instead of the active one, if any.
            cascade: Forcibly set cascading for this lookup.

        Returns:
            Whatever is stored at the path (string, callable, tuple or
            mapping), or None when nothing is found.
        """
        code = self.directory.locale if locale is None else str(locale)
        if code is None or not self.directory.is_available(code):
            return None

        cascades = self.cascade if cascade is None else bool(cascade)

        cache_key = CacheKey(locale=code, cascade=cascades, key=key)
        message = self._cache.get(cache_key, _MISS)
        if message is _MISS:
            message = self._resolve(code, key, cascades)
            self._cache[cache_key] = message
        return message

    def lookup_first(
        self,
        key: str,
        locales: Iterable[str],
        cascade: Optional[bool] = None,
    ) -> Any:
        """Return the first value found for ``key`` across ``locales``."""
        for locale in locales:
            message = self.lookup(key, locale=locale, cascade=cascade)
            if message is not None:
                return message
        return None

    def _resolve(self, locale: Optional[str], key: str, cascade: bool) -> Any:
        root = self.store.messages.get(locale) if locale is not None else None
        if root is None:
            return None

        path = key.split(SEPARATOR)
        message = _dig(root, path)

        if message is None and cascade:
            while len(path) > 1:
                del path[-2]
                message = _dig(root, path)
                if message is not None:
                    break

        return message


def _dig(node: Any, path: List[str]) -> Any:
    for segment in path:
        if not isinstance(node, Mapping):
            return None
        node = node.get(segment)
        if node is None:
            return None
    return node
