"""Resource container: one light, sensor, group or the gateway config."""

import logging
from typing import Iterator, Optional

from clock import Clock, default_clock
from datatypes import DataType
from descriptors import INVALID_STRING, find_descriptor
from resource_item import ResourceItem

logger = logging.getLogger(__name__)


class Resource:
    """An ordered set of resource items, at most one per suffix.

    Items keep insertion order until one is removed; removal moves the last
    item into the freed slot.
    """

    def __init__(self, prefix: str, clock: Optional[Clock] = None):
        self._prefix = prefix
        self._clock = clock or default_clock
        self._items: list[ResourceItem] = []

    def __repr__(self) -> str:
        return f"<Resource {self._prefix} items={len(self._items)}>"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ResourceItem]:
        return iter(list(self._items))

    @property
    def prefix(self) -> str:
        return self._prefix

    def add_item(self, type: DataType, suffix: str) -> Optional[ResourceItem]:
        """Add the item for ``suffix`` or return the one already present.

        Returns None when ``(type, suffix)`` is not in the descriptor table.
        """
        existing = self.item(suffix)
        if existing is not None:
            return existing

        descr = find_descriptor(suffix, type)
        if descr is None:
            logger.error(
                "Unknown resource item",
                extra={"fields": {"prefix": self._prefix, "type": getattr(type, "value", type), "suffix": suffix}},
            )
            return None

        new_item = ResourceItem(descr, self._clock)
        self._items.append(new_item)
        return new_item

    def remove_item(self, suffix: str) -> bool:
        for i, it in enumerate(self._items):
            if it.descriptor.suffix != suffix:
                continue
            last = self._items.pop()
            if i < len(self._items):
                self._items[i] = last
            return True
        return False

    def item(self, suffix: str) -> Optional[ResourceItem]:
        for it in self._items:
            if it.descriptor.suffix == suffix:
                return it
        return None

    def item_for_index(self, index: int) -> Optional[ResourceItem]:
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def item_count(self) -> int:
        return len(self._items)

    def to_bool(self, suffix: str) -> bool:
        it = self.item(suffix)
        return it.to_bool() if it is not None else False

    def to_number(self, suffix: str) -> int:
        it = self.item(suffix)
        return it.to_number() if it is not None else 0

    def to_string(self, suffix: str) -> str:
        it = self.item(suffix)
        return it.to_string() if it is not None else INVALID_STRING

    def copy(self) -> "Resource":
        """Independent copy, items included."""
        other = Resource(self._prefix, self._clock)
        other._items = [it.copy() for it in self._items]
        return other

    __copy__ = copy
