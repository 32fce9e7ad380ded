"""Closed catalog of attribute data types."""

from enum import Enum


class DataType(str, Enum):
    BOOL = "bool"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    REAL = "real"
    STRING = "string"
    TIME = "time"
    TIME_PATTERN = "timepattern"

    @property
    def is_textual(self) -> bool:
        """String and TimePattern values are stored as text."""
        return self in (DataType.STRING, DataType.TIME_PATTERN)

    @property
    def is_time(self) -> bool:
        return self is DataType.TIME

    @property
    def is_bool(self) -> bool:
        return self is DataType.BOOL

    @property
    def is_numeric(self) -> bool:
        """Integer and real types, the ones rendered as numbers."""
        return not (self.is_textual or self.is_time or self.is_bool)


# Values are held as signed 64-bit integers
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
