"""Message store holding the frozen, merged message tree."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Iterable, List

from tater.i18n.utils import deep_freeze, deep_merge, deep_stringify_keys
from tater.logging import get_module_logger

logger = get_module_logger()


class MessageStore:
    """Immutable-after-load mapping of locale -> key -> value.

    Every load merges its sources over the current tree into a new tree,
    freezes it and swaps it in, so values handed out earlier are never
    modified by later loads.

    Attributes:
        messages: The current read-only message tree.
    """

    def __init__(self):
        self.messages: Mapping[str, Any] = MappingProxyType({})

    def load(self, sources: Iterable[Mapping]) -> int:
        """Merge message sources into the tree.

        Sources are merged in order; later sources win on scalar conflicts
        and nested mappings are merged recursively.

        Args:
            sources: Nested mappings of the message tree shape.

        Returns:
            Number of sources merged.
        """
        merged: Mapping = self.messages
        count = 0
        for source in sources:
            merged = deep_merge(merged, deep_stringify_keys(source))
            count += 1

        if count:
            self.messages = deep_freeze(merged)
            logger.info(
                "messages_loaded",
                source_count=count,
                locale_count=len(self.messages),
            )
        return count

    def locales(self) -> List[str]:
        """Return the sorted top-level keys of the tree."""
        return sorted(str(key) for key in self.messages)
