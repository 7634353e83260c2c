"""i18n system - message lookup, translation and localization.

Main components:
- store: MessageStore holding the frozen message tree
- loader: MessageLoader, YAMLMessageLoader, PythonMessageLoader
- resolvers: LocaleDirectory and KeyResolver (cascading, cached lookups)
- interpolation: named placeholder substitution
- localizer: numeric, date/time and sequence rendering
- translator: the Tater facade
"""

from tater.i18n.errors import (
    MissingInterpolationArgument,
    MissingLocalizationFormat,
    TaterError,
    UnLocalizableObject,
)
from tater.i18n.factory import create_tater
from tater.i18n.interpolation import interpolate
from tater.i18n.loader import (
    DirectoryMessageLoader,
    MessageLoader,
    PythonMessageLoader,
    YAMLMessageLoader,
)
from tater.i18n.localizer import Localizer
from tater.i18n.models import CacheKey, MessageKind
from tater.i18n.resolvers import KeyResolver, LocaleDirectory
from tater.i18n.store import MessageStore
from tater.i18n.translator import Tater

__all__ = [
    "Tater",
    "create_tater",
    "interpolate",
    "MessageStore",
    "MessageLoader",
    "YAMLMessageLoader",
    "PythonMessageLoader",
    "DirectoryMessageLoader",
    "KeyResolver",
    "LocaleDirectory",
    "Localizer",
    "MessageKind",
    "CacheKey",
    "TaterError",
    "MissingLocalizationFormat",
    "MissingInterpolationArgument",
    "UnLocalizableObject",
]
