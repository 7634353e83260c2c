"""Message models for the i18n system.

Defines the value kinds a message tree can hold, the resolution cache key,
and the reserved option names.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Union

MessageCallable = Callable[[str, Dict[str, Any]], str]
MessageValue = Union[str, MessageCallable, Sequence[Any], Mapping[str, Any]]

# Option names consumed by tater itself; everything else is interpolation data.
RESERVED_OPTIONS = frozenset(
    {
        "cascade",
        "default",
        "delimiter",
        "format",
        "last_word_connector",
        "locale",
        "locales",
        "precision",
        "separator",
        "two_words_connector",
        "words_connector",
    }
)


class MessageKind(str, Enum):
    """Kinds of value a key path can resolve to."""

    TEXT = "text"
    CALLABLE = "callable"
    LIST = "list"
    NESTED = "nested"

    @classmethod
    def classify(cls, value: Any) -> Optional["MessageKind"]:
        """Return the kind of a resolved value.

        Args:
            value: Value returned by a lookup.

        Returns:
            Matching MessageKind, or None for absent or unsupported values.
        """
        if value is None:
            return None
        if isinstance(value, str):
            return cls.TEXT
        if isinstance(value, Mapping):
            return cls.NESTED
        if isinstance(value, (list, tuple)):
            return cls.LIST
        if callable(value):
            return cls.CALLABLE
        return None


@dataclass(frozen=True)
class CacheKey:
    """Key of a resolution cache entry.

    Frozen to ensure hashability.

    Attributes:
        locale: Locale the lookup ran against.
        cascade: Whether the lookup cascaded.
        key: Dot-separated key path.
    """

    locale: Optional[str]
    cascade: bool
    key: str


def strip_reserved(options: Mapping[str, Any]) -> Dict[str, Any]:
    """Drop reserved option names, keeping interpolation arguments."""
    return {name: value for name, value in options.items() if name not in RESERVED_OPTIONS}
