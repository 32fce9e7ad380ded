"""A single live attribute value owned by a resource."""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Optional

from clock import Clock, datetime_to_msecs, default_clock, format_iso_time, parse_iso_time
from datatypes import INT64_MAX, INT64_MIN, DataType
from descriptors import INVALID_STRING, ResourceItemDescriptor
from suffixes import STATE_LAST_UPDATED

logger = logging.getLogger(__name__)

_FALSE_STRINGS = ("", "0", "false")


def _round_half_away(value: float) -> int:
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def _coerce_int(value: Any) -> Optional[int]:
    """Integer view of a variant, None if it has none."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return _round_half_away(value)
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            return None
    return None


def _coerce_bool(value: Any) -> Optional[bool]:
    if isinstance(value, (bool, int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return None


def _coerce_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return None


class ResourceItem:
    """Current value of one attribute plus its change bookkeeping.

    ``last_set`` moves on every accepted write, ``last_changed`` only when the
    stored value actually differs. Both are ``None`` until the item is first
    set, and again after it is cleared with a ``None`` variant.

    Setters never raise: a rejected value returns False and leaves the item
    untouched.
    """

    def __init__(self, descriptor: ResourceItemDescriptor, clock: Optional[Clock] = None):
        self._descriptor = descriptor
        self._clock = clock or default_clock
        self._num = 0
        self._num_prev = 0
        self._str: Optional[str] = "" if descriptor.type.is_textual else None
        self._last_set: Optional[datetime] = None
        self._last_changed: Optional[datetime] = None
        self._is_public = True
        self._rules_involved: list[int] = []

    def __repr__(self) -> str:
        return f"<ResourceItem {self._descriptor.suffix}={self.to_variant()!r}>"

    @property
    def descriptor(self) -> ResourceItemDescriptor:
        return self._descriptor

    @property
    def last_set(self) -> Optional[datetime]:
        return self._last_set

    @property
    def last_changed(self) -> Optional[datetime]:
        return self._last_changed

    @property
    def is_public(self) -> bool:
        """False keeps the item out of public API responses."""
        return self._is_public

    @is_public.setter
    def is_public(self, value: bool) -> None:
        self._is_public = bool(value)

    def _zone(self):
        # lastupdated is always UTC, other times follow the clock's zone
        if self._descriptor.suffix == STATE_LAST_UPDATED:
            return timezone.utc
        return self._clock.zone

    # Readers

    def to_number(self) -> int:
        return self._num

    def to_number_previous(self) -> int:
        return self._num_prev

    def to_bool(self) -> bool:
        return self._num != 0

    def to_string(self) -> str:
        if self._str is not None:
            return self._str
        if self._descriptor.type.is_time:
            return format_iso_time(self._num, self._zone())
        return INVALID_STRING

    def to_variant(self) -> Any:
        """Value for the REST layer, None if the item was never set."""
        if self._last_set is None:
            return None

        data_type = self._descriptor.type
        if data_type.is_textual or data_type.is_time:
            return self.to_string()
        if data_type.is_bool:
            return bool(self._num)
        return float(self._num)

    # Writers

    def _store_number(self, value: int) -> bool:
        self._last_set = self._clock.now()
        self._num_prev = self._num
        if self._num != value:
            self._num = value
            self._last_changed = self._last_set
        return True

    def _store_string(self, value: str) -> bool:
        self._last_set = self._clock.now()
        if self._str != value:
            self._str = value
            self._last_changed = self._last_set
        return True

    def _accepts(self, value: int) -> bool:
        if not INT64_MIN <= value <= INT64_MAX:
            logger.debug("%s: %d does not fit in 64 bits", self._descriptor.suffix, value)
            return False
        if not self._descriptor.in_range(value):
            logger.debug(
                "%s: %d outside valid range %d..%d",
                self._descriptor.suffix,
                value,
                self._descriptor.valid_min,
                self._descriptor.valid_max,
            )
            return False
        return True

    def _is_valid_time_pattern(self, text: str) -> bool:
        # TODO: check recurring/interval syntax (W127/T08:00:00, PT00:10:00, R05/PT...)
        return True

    def set_number(self, value: int) -> bool:
        """Store a numeric value, subject to the descriptor's valid range."""
        if isinstance(value, bool):
            value = int(value)
        if not isinstance(value, int) or self._descriptor.type.is_textual:
            return False
        if not self._accepts(value):
            return False
        return self._store_number(value)

    def set_string(self, value: str) -> bool:
        """Store text on a String/TimePattern item, or parse it for a Time item."""
        if not isinstance(value, str):
            return False
        if self._str is not None:
            return self._store_string(value)
        if self._descriptor.type.is_time:
            msecs = parse_iso_time(value, self._zone())
            if msecs is None:
                return False
            return self._store_number(msecs)
        return False

    def set_value(self, value: Any) -> bool:
        """Store a loosely typed value as delivered by the REST layer.

        ``None`` clears both timestamps so the item reads as never set.
        """
        if value is None:
            self._last_set = None
            self._last_changed = None
            return True

        data_type = self._descriptor.type

        if data_type.is_textual:
            text = _coerce_str(value)
            if text is None:
                return False
            if data_type is DataType.TIME_PATTERN and not self._is_valid_time_pattern(text):
                return False
            return self._store_string(text)

        if data_type.is_bool:
            flag = _coerce_bool(value)
            if flag is None:
                return False
            return self._store_number(int(flag))

        if data_type.is_time:
            if isinstance(value, str):
                return self.set_string(value)
            if isinstance(value, datetime):
                try:
                    msecs = datetime_to_msecs(value, self._zone())
                except (OverflowError, OSError):
                    return False
                return self._store_number(msecs)
            return False

        number = _coerce_int(value)
        if number is None or not self._accepts(number):
            return False
        return self._store_number(number)

    def set_time_stamps(self, timestamp: Optional[datetime]) -> None:
        """Force both timestamps, e.g. when restoring persisted state."""
        self._last_set = timestamp
        self._last_changed = timestamp

    # Rules

    def in_rule(self, rule_handle: int) -> None:
        """Mark the item as read by a rule."""
        if rule_handle not in self._rules_involved:
            self._rules_involved.append(rule_handle)

    def rules_involved(self) -> list[int]:
        return list(self._rules_involved)

    def copy(self) -> "ResourceItem":
        other = ResourceItem(self._descriptor, self._clock)
        other._num = self._num
        other._num_prev = self._num_prev
        other._str = self._str
        other._last_set = self._last_set
        other._last_changed = self._last_changed
        other._is_public = self._is_public
        other._rules_involved = list(self._rules_involved)
        return other

    __copy__ = copy
