"""Process-wide table of every attribute a resource may expose.

The table is built once by ``init_resource_descriptors()`` at startup and is
read-only afterwards. Each entry maps an attribute suffix to its data type and
optional valid range.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import suffixes as s
from datatypes import DataType

logger = logging.getLogger(__name__)

# Returned by string accessors when there is no textual value
INVALID_STRING = ""


@dataclass(frozen=True)
class ResourceItemDescriptor:
    """Schema entry for one attribute suffix."""

    type: DataType
    suffix: str
    valid_range: Optional[Tuple[int, int]] = None

    @classmethod
    def with_bounds(cls, type: DataType, suffix: str, valid_min: int = 0, valid_max: int = 0):
        """Build a descriptor where ``0, 0`` means no range."""
        if valid_min == 0 and valid_max == 0:
            return cls(type, suffix)
        return cls(type, suffix, (valid_min, valid_max))

    @property
    def has_range(self) -> bool:
        return self.valid_range is not None

    @property
    def valid_min(self) -> int:
        return self.valid_range[0] if self.valid_range else 0

    @property
    def valid_max(self) -> int:
        return self.valid_range[1] if self.valid_range else 0

    def in_range(self, value: int) -> bool:
        if self.valid_range is None:
            return True
        return self.valid_range[0] <= value <= self.valid_range[1]


_prefixes: list[str] = []
_descriptors: list[ResourceItemDescriptor] = []

# (type, suffix, min, max) in lookup order
_CANONICAL_TABLE = [
    (DataType.STRING, s.ATTR_NAME),
    (DataType.STRING, s.ATTR_MANUFACTURER_NAME),
    (DataType.STRING, s.ATTR_MODEL_ID),
    (DataType.STRING, s.ATTR_TYPE),
    (DataType.STRING, s.ATTR_CLASS),
    (DataType.STRING, s.ATTR_UNIQUE_ID),
    (DataType.STRING, s.ATTR_SW_VERSION),

    (DataType.BOOL, s.STATE_ALARM),
    (DataType.STRING, s.STATE_ALERT),
    (DataType.BOOL, s.STATE_ALL_ON),
    (DataType.BOOL, s.STATE_ANY_ON),
    (DataType.UINT8, s.STATE_BRI),
    (DataType.INT32, s.STATE_BUTTON_EVENT),
    (DataType.BOOL, s.STATE_CARBON_MONOXIDE),
    (DataType.STRING, s.STATE_COLOR_MODE),
    (DataType.UINT64, s.STATE_CONSUMPTION),
    (DataType.UINT16, s.STATE_CURRENT),
    (DataType.UINT16, s.STATE_CT),
    (DataType.BOOL, s.STATE_DARK),
    (DataType.BOOL, s.STATE_DAYLIGHT),
    (DataType.STRING, s.STATE_EFFECT),
    (DataType.BOOL, s.STATE_FIRE),
    (DataType.BOOL, s.STATE_FLAG),
    (DataType.UINT16, s.STATE_HUE),
    (DataType.UINT16, s.STATE_HUMIDITY, 0, 10000),
    (DataType.TIME, s.STATE_LAST_UPDATED),
    (DataType.UINT16, s.STATE_LIGHT_LEVEL, 0, 0xFFFE),
    (DataType.BOOL, s.STATE_LOW_BATTERY),
    (DataType.UINT32, s.STATE_LUX),
    (DataType.BOOL, s.STATE_ON),
    (DataType.BOOL, s.STATE_OPEN),
    (DataType.INT16, s.STATE_ORIENTATION_X),
    (DataType.INT16, s.STATE_ORIENTATION_Y),
    (DataType.INT16, s.STATE_ORIENTATION_Z),
    (DataType.BOOL, s.STATE_PRESENCE),
    (DataType.INT16, s.STATE_PRESSURE, 0, 32767),
    (DataType.INT16, s.STATE_POWER),
    (DataType.BOOL, s.STATE_REACHABLE),
    (DataType.UINT8, s.STATE_SAT),
    (DataType.STRING, s.ACTION_SCENE),
    (DataType.UINT8, s.STATE_SPEED, 0, 6),
    (DataType.INT32, s.STATE_STATUS),
    (DataType.BOOL, s.STATE_TAMPERED),
    (DataType.INT16, s.STATE_TEMPERATURE, -27315, 32767),
    (DataType.UINT16, s.STATE_TILT_ANGLE),
    (DataType.UINT8, s.STATE_VALVE),
    (DataType.BOOL, s.STATE_VIBRATION),
    (DataType.UINT16, s.STATE_VIBRATION_STRENGTH),
    (DataType.UINT16, s.STATE_VOLTAGE),
    (DataType.BOOL, s.STATE_WATER),
    (DataType.UINT16, s.STATE_X),
    (DataType.UINT16, s.STATE_Y),

    (DataType.STRING, s.CONFIG_ALERT),
    (DataType.UINT8, s.CONFIG_BATTERY, 0, 100),
    (DataType.UINT16, s.CONFIG_COLOR_CAPABILITIES),
    (DataType.UINT16, s.CONFIG_CT_MIN),
    (DataType.UINT16, s.CONFIG_CT_MAX),
    (DataType.BOOL, s.CONFIG_CONFIGURED),
    (DataType.UINT16, s.CONFIG_DELAY),
    (DataType.BOOL, s.CONFIG_DISPLAY_FLIPPED),
    (DataType.UINT16, s.CONFIG_DURATION),
    (DataType.STRING, s.CONFIG_GROUP),
    (DataType.INT16, s.CONFIG_HEAT_SETPOINT, 500, 3000),
    (DataType.UINT32, s.CONFIG_HOST_FLAGS),
    (DataType.UINT32, s.CONFIG_ID),
    (DataType.STRING, s.CONFIG_LAT),
    (DataType.BOOL, s.CONFIG_LED_INDICATION),
    (DataType.TIME, s.CONFIG_LOCAL_TIME),
    (DataType.BOOL, s.CONFIG_LOCKED),
    (DataType.STRING, s.CONFIG_LONG),
    (DataType.UINT8, s.CONFIG_LEVEL_MIN),
    (DataType.STRING, s.CONFIG_MODE),
    (DataType.INT16, s.CONFIG_OFFSET, -500, 500),
    (DataType.BOOL, s.CONFIG_ON),
    (DataType.UINT8, s.CONFIG_PENDING),
    (DataType.UINT32, s.CONFIG_POWERUP),
    (DataType.UINT8, s.CONFIG_POWER_ON_LEVEL),
    (DataType.UINT16, s.CONFIG_POWER_ON_CT),
    (DataType.BOOL, s.CONFIG_REACHABLE),
    (DataType.STRING, s.CONFIG_SCHEDULER),
    (DataType.BOOL, s.CONFIG_SCHEDULER_ON),
    (DataType.UINT8, s.CONFIG_SENSITIVITY),
    (DataType.UINT8, s.CONFIG_SENSITIVITY_MAX),
    (DataType.INT8, s.CONFIG_SUNRISE_OFFSET, -120, 120),
    (DataType.INT8, s.CONFIG_SUNSET_OFFSET, -120, 120),
    (DataType.INT16, s.CONFIG_TEMPERATURE, -27315, 32767),
    (DataType.UINT16, s.CONFIG_THOLD_DARK, 0, 0xFFFE),
    (DataType.UINT16, s.CONFIG_THOLD_OFFSET, 1, 0xFFFE),
    (DataType.STRING, s.CONFIG_URL),
    (DataType.BOOL, s.CONFIG_USERTEST),
    (DataType.UINT8, s.CONFIG_WINDOW_COVERING_TYPE),
    (DataType.UINT8, s.CONFIG_UBISYS_J1_MODE),
    (DataType.UINT8, s.CONFIG_UBISYS_J1_WINDOW_COVERING_TYPE),
    (DataType.UINT8, s.CONFIG_UBISYS_J1_CONFIGURATION_AND_STATUS),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_INSTALLED_OPEN_LIMIT_LIFT),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_INSTALLED_CLOSED_LIMIT_LIFT),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_INSTALLED_OPEN_LIMIT_TILT),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_INSTALLED_CLOSED_LIMIT_TILT),
    (DataType.UINT8, s.CONFIG_UBISYS_J1_TURNAROUND_GUARD_TIME),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_LIFT_TO_TILT_TRANSITION_STEPS),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_TOTAL_STEPS),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_LIFT_TO_TILT_TRANSITION_STEPS2),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_TOTAL_STEPS2),
    (DataType.UINT8, s.CONFIG_UBISYS_J1_ADDITIONAL_STEPS),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_INACTIVE_POWER_THRESHOLD),
    (DataType.UINT16, s.CONFIG_UBISYS_J1_STARTUP_STEPS),
]


def check_schema(descriptors) -> None:
    """Raise ValueError if suffixes are not unique or one ends with another.

    Lookup by path tail is first-hit, so no suffix may be a string-suffix of
    another one.
    """
    seen: set[str] = set()
    for descr in descriptors:
        if descr.suffix in seen:
            raise ValueError(f"Duplicate resource item suffix '{descr.suffix}'")
        seen.add(descr.suffix)

    for a in seen:
        for b in seen:
            if a != b and a.endswith(b):
                raise ValueError(f"Resource item suffix '{a}' ends with '{b}'")


def init_resource_descriptors() -> None:
    """Clear and rebuild the prefix list and descriptor table.

    Call once at startup before any resource is created. Re-calling rebuilds
    the same table; descriptors handed out earlier stay valid since they are
    immutable values.
    """
    _prefixes.clear()
    _descriptors.clear()

    _prefixes.extend(s.RESOURCE_PREFIXES)
    _descriptors.extend(ResourceItemDescriptor.with_bounds(*entry) for entry in _CANONICAL_TABLE)
    check_schema(_descriptors)

    logger.info(
        "Resource descriptors initialised",
        extra={"fields": {"descriptors": len(_descriptors), "prefixes": len(_prefixes)}},
    )


def resource_descriptors() -> tuple[ResourceItemDescriptor, ...]:
    """Snapshot of the descriptor table in lookup order."""
    return tuple(_descriptors)


def get_resource_item_descriptor(key: str) -> Optional[ResourceItemDescriptor]:
    """Find the first descriptor whose suffix ``key`` ends with.

    ``key`` may be a bare suffix (``state/bri``) or a full resource path
    (``/lights/3/state/bri``).
    """
    for descr in _descriptors:
        if key.endswith(descr.suffix):
            return descr
    return None


def find_descriptor(suffix: str, type: DataType) -> Optional[ResourceItemDescriptor]:
    """Exact ``(suffix, type)`` match."""
    for descr in _descriptors:
        if descr.suffix == suffix and descr.type == type:
            return descr
    return None


def get_resource_prefix(path: str) -> Optional[str]:
    """Map the category head of a path to its canonical prefix.

    Accepts bare categories (``lights``), resource paths (``/lights/3/state/on``)
    and full API paths (``/api/<apikey>/sensors/1``).
    """
    parts = [p for p in path.split("/") if p]
    if len(parts) >= 3 and parts[0] == "api":
        parts = parts[2:]
    if not parts:
        return None

    head = "/" + parts[0]
    for prefix in _prefixes:
        if prefix == head:
            return prefix
    return None
