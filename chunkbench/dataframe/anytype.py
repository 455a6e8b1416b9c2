"""Dynamically typed scalar values and helpers that relate them to data types."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .types import DataType, DateUnit, IntervalUnit, PrimitiveType, TimeUnit, TypeKind


class AnyKind(Enum):
    """The variant of an :class:`AnyValue`."""

    NULL = "Null"
    BOOLEAN = "Boolean"
    UINT8 = "UInt8"
    UINT16 = "UInt16"
    UINT32 = "UInt32"
    UINT64 = "UInt64"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    DATE32 = "Date32"
    DATE64 = "Date64"
    TIME64 = "Time64"
    TIME32 = "Time32"
    DURATION = "Duration"
    TIMESTAMP = "TimeStamp"
    INTERVAL_DAY_TIME = "IntervalDayTime"
    INTERVAL_YEAR_MONTH = "IntervalYearMonth"


_INT_RANGES = {
    AnyKind.UINT8: (0, 2**8 - 1),
    AnyKind.UINT16: (0, 2**16 - 1),
    AnyKind.UINT32: (0, 2**32 - 1),
    AnyKind.UINT64: (0, 2**64 - 1),
    AnyKind.INT8: (-(2**7), 2**7 - 1),
    AnyKind.INT16: (-(2**15), 2**15 - 1),
    AnyKind.INT32: (-(2**31), 2**31 - 1),
    AnyKind.INT64: (-(2**63), 2**63 - 1),
    AnyKind.DATE32: (-(2**31), 2**31 - 1),
    AnyKind.DATE64: (-(2**63), 2**63 - 1),
    AnyKind.TIME32: (-(2**31), 2**31 - 1),
    AnyKind.TIME64: (-(2**63), 2**63 - 1),
    AnyKind.DURATION: (-(2**63), 2**63 - 1),
    AnyKind.TIMESTAMP: (-(2**63), 2**63 - 1),
    AnyKind.INTERVAL_DAY_TIME: (-(2**63), 2**63 - 1),
    AnyKind.INTERVAL_YEAR_MONTH: (-(2**31), 2**31 - 1),
}

_WITH_UNIT = {AnyKind.TIME32, AnyKind.TIME64, AnyKind.DURATION, AnyKind.TIMESTAMP}


@dataclass(eq=False)
class AnyValue:
    """A single value of any supported type; the default is null."""

    kind: AnyKind = AnyKind.NULL
    value: Any = None
    unit: TimeUnit | None = None

    def _key(self) -> tuple:
        return (self.kind, repr(self.value), self.unit)

    def __eq__(self, other: object) -> bool:
        # Compared by rendered form, so NaN equals NaN.
        if not isinstance(other, AnyValue):
            return NotImplemented
        return self._key() == other._key()

    __hash__ = None  # type: ignore[assignment]

    def to_string(self) -> str:
        """Human-readable rendering of the value."""
        if self.kind is AnyKind.NULL:
            return "null"
        if self.kind is AnyKind.BOOLEAN:
            return "true" if self.value else "false"
        if self.kind in (AnyKind.FLOAT32, AnyKind.FLOAT64):
            if math.isnan(self.value):
                return "NaN"
            return f"{self.value:.3f}"
        if self.kind in _WITH_UNIT:
            return f"{self.value}({self.unit.value})"
        return str(self.value)

    def to_num(self) -> float:
        """The value as a float; null is zero and booleans are zero or one."""
        if self.kind is AnyKind.NULL:
            return 0.0
        if self.kind is AnyKind.BOOLEAN:
            return 1.0 if self.value else 0.0
        return float(self.value)


_TYPE_NAMES = {
    DataType.NULL: "null",
    DataType.BOOLEAN: "bool",
    DataType.UINT8: "u8",
    DataType.UINT16: "u16",
    DataType.UINT32: "u32",
    DataType.UINT64: "u64",
    DataType.INT8: "i8",
    DataType.INT16: "i16",
    DataType.INT32: "i32",
    DataType.INT64: "i64",
    DataType.FLOAT32: "f32",
    DataType.FLOAT64: "f64",
    DataType.date32(): "date32",
    DataType.date64(): "date64",
    DataType.time32(TimeUnit.SECOND): "time64(s)",
    DataType.time32(TimeUnit.MILLISECOND): "time64(ms)",
    DataType.time64(TimeUnit.NANOSECOND): "time64(ns)",
    DataType.time64(TimeUnit.MICROSECOND): "time64(μs)",
    DataType.duration(TimeUnit.NANOSECOND): "duration(ns)",
    DataType.duration(TimeUnit.MICROSECOND): "duration(μs)",
    DataType.duration(TimeUnit.MILLISECOND): "duration(ms)",
    DataType.duration(TimeUnit.SECOND): "duration(s)",
    DataType.interval(IntervalUnit.DAY_TIME): "interval(daytime)",
    DataType.interval(IntervalUnit.YEAR_MONTH): "interval(year-month)",
}

_TIMESTAMP_NAMES = {
    TimeUnit.NANOSECOND: "timestamp(ns)",
    TimeUnit.MICROSECOND: "timestamp(μs)",
    TimeUnit.MILLISECOND: "timestamp(ms)",
    TimeUnit.SECOND: "timestamp(s)",
}


def to_str(data_type: DataType) -> str:
    """Short name of a data type; time zones of timestamps are ignored."""
    if data_type.kind is TypeKind.TIMESTAMP and data_type.unit in _TIMESTAMP_NAMES:
        return _TIMESTAMP_NAMES[data_type.unit]
    try:
        return _TYPE_NAMES[data_type]
    except KeyError:
        raise NotImplementedError(f"{data_type!r} not implemented") from None


_SIMPLE_KINDS = {
    DataType.BOOLEAN: AnyKind.BOOLEAN,
    DataType.UINT8: AnyKind.UINT8,
    DataType.UINT16: AnyKind.UINT16,
    DataType.UINT32: AnyKind.UINT32,
    DataType.UINT64: AnyKind.UINT64,
    DataType.INT8: AnyKind.INT8,
    DataType.INT16: AnyKind.INT16,
    DataType.INT32: AnyKind.INT32,
    DataType.INT64: AnyKind.INT64,
    DataType.FLOAT32: AnyKind.FLOAT32,
    DataType.FLOAT64: AnyKind.FLOAT64,
    DataType.date32(): AnyKind.DATE32,
    DataType.date64(): AnyKind.DATE64,
    DataType.interval(IntervalUnit.DAY_TIME): AnyKind.INTERVAL_DAY_TIME,
    DataType.interval(IntervalUnit.YEAR_MONTH): AnyKind.INTERVAL_YEAR_MONTH,
}

_TIME32_UNITS = {TimeUnit.SECOND, TimeUnit.MILLISECOND}
_TIME64_UNITS = {TimeUnit.NANOSECOND, TimeUnit.MICROSECOND}


def _kind_and_unit(data_type: DataType) -> tuple[AnyKind, TimeUnit | None]:
    kind = _SIMPLE_KINDS.get(data_type)
    if kind is not None:
        return kind, None
    if data_type.kind is TypeKind.TIME32 and data_type.unit in _TIME32_UNITS:
        return AnyKind.TIME32, data_type.unit
    if data_type.kind is TypeKind.TIME64 and data_type.unit in _TIME64_UNITS:
        return AnyKind.TIME64, data_type.unit
    if data_type.kind is TypeKind.DURATION and isinstance(data_type.unit, TimeUnit):
        return AnyKind.DURATION, data_type.unit
    if data_type.kind is TypeKind.TIMESTAMP and isinstance(data_type.unit, TimeUnit):
        return AnyKind.TIMESTAMP, data_type.unit
    raise NotImplementedError("not implemented")


def _coerce(kind: AnyKind, value: Any) -> Any:
    if kind is AnyKind.BOOLEAN:
        if isinstance(value, str):
            if value not in ("true", "false"):
                raise ValueError(f"invalid boolean {value!r}")
            return value == "true"
        return bool(value)
    if kind is AnyKind.FLOAT64:
        return float(value)
    if kind is AnyKind.FLOAT32:
        return struct.unpack("<f", struct.pack("<f", float(value)))[0]
    number = int(value)
    low, high = _INT_RANGES[kind]
    if not low <= number <= high:
        raise ValueError(f"{number} out of range for {kind.value}")
    return number


def from_data_type(data_type: DataType, value: Any) -> AnyValue:
    """Wrap ``value`` as the :class:`AnyValue` variant matching ``data_type``."""
    kind, unit = _kind_and_unit(data_type)
    return AnyValue(kind, _coerce(kind, value), unit)


def is_numeric(primitive: PrimitiveType) -> bool:
    """Whether the primitive type takes part in numeric aggregation."""
    return primitive is not PrimitiveType.BOOLEAN


def is_integer(primitive: PrimitiveType) -> bool:
    """Whether the primitive type is stored as an integer."""
    return primitive not in (
        PrimitiveType.BOOLEAN,
        PrimitiveType.FLOAT32,
        PrimitiveType.FLOAT64,
    )