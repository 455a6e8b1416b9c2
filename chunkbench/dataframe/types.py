"""Logical data types, primitive storage types and column fields."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union


class TimeUnit(Enum):
    """An absolute length of time."""

    SECOND = "Second"
    MILLISECOND = "Millisecond"
    MICROSECOND = "Microsecond"
    NANOSECOND = "Nanosecond"


class DateUnit(Enum):
    """Resolution of a date value."""

    DAY = "Day"
    MILLISECOND = "Millisecond"


class IntervalUnit(Enum):
    """Resolution of a calendar interval."""

    YEAR_MONTH = "YearMonth"
    DAY_TIME = "DayTime"


class TypeKind(Enum):
    """The variant of a :class:`DataType`."""

    NULL = "Null"
    BOOLEAN = "Boolean"
    INT8 = "Int8"
    INT16 = "Int16"
    INT32 = "Int32"
    INT64 = "Int64"
    UINT8 = "UInt8"
    UINT16 = "UInt16"
    UINT32 = "UInt32"
    UINT64 = "UInt64"
    FLOAT16 = "Float16"
    FLOAT32 = "Float32"
    FLOAT64 = "Float64"
    TIMESTAMP = "Timestamp"
    DATE32 = "Date32"
    DATE64 = "Date64"
    TIME32 = "Time32"
    TIME64 = "Time64"
    DURATION = "Duration"
    INTERVAL = "Interval"
    BINARY = "Binary"
    FIXED_SIZE_BINARY = "FixedSizeBinary"
    LARGE_BINARY = "LargeBinary"
    UTF8 = "Utf8"
    LARGE_UTF8 = "LargeUtf8"
    LIST = "List"
    FIXED_SIZE_LIST = "FixedSizeList"
    LARGE_LIST = "LargeList"
    DICTIONARY = "Dictionary"


Unit = Union[TimeUnit, DateUnit, IntervalUnit]


@dataclass(frozen=True)
class DataType:
    """A logical data type, possibly parametrised by a unit, size or inner types."""

    kind: TypeKind
    unit: Unit | None = None
    timezone: str | None = None
    size: int | None = None
    inner: DataType | None = None
    value: DataType | None = None

    NULL: ClassVar[DataType]
    BOOLEAN: ClassVar[DataType]
    INT8: ClassVar[DataType]
    INT16: ClassVar[DataType]
    INT32: ClassVar[DataType]
    INT64: ClassVar[DataType]
    UINT8: ClassVar[DataType]
    UINT16: ClassVar[DataType]
    UINT32: ClassVar[DataType]
    UINT64: ClassVar[DataType]
    FLOAT16: ClassVar[DataType]
    FLOAT32: ClassVar[DataType]
    FLOAT64: ClassVar[DataType]
    BINARY: ClassVar[DataType]
    LARGE_BINARY: ClassVar[DataType]
    UTF8: ClassVar[DataType]
    LARGE_UTF8: ClassVar[DataType]

    @classmethod
    def timestamp(cls, unit: TimeUnit, timezone: str | None = None) -> DataType:
        return cls(TypeKind.TIMESTAMP, unit=unit, timezone=timezone)

    @classmethod
    def date32(cls) -> DataType:
        return cls(TypeKind.DATE32, unit=DateUnit.DAY)

    @classmethod
    def date64(cls) -> DataType:
        return cls(TypeKind.DATE64, unit=DateUnit.MILLISECOND)

    @classmethod
    def time32(cls, unit: TimeUnit) -> DataType:
        return cls(TypeKind.TIME32, unit=unit)

    @classmethod
    def time64(cls, unit: TimeUnit) -> DataType:
        return cls(TypeKind.TIME64, unit=unit)

    @classmethod
    def duration(cls, unit: TimeUnit) -> DataType:
        return cls(TypeKind.DURATION, unit=unit)

    @classmethod
    def interval(cls, unit: IntervalUnit) -> DataType:
        return cls(TypeKind.INTERVAL, unit=unit)


for _kind in (
    TypeKind.NULL,
    TypeKind.BOOLEAN,
    TypeKind.INT8,
    TypeKind.INT16,
    TypeKind.INT32,
    TypeKind.INT64,
    TypeKind.UINT8,
    TypeKind.UINT16,
    TypeKind.UINT32,
    TypeKind.UINT64,
    TypeKind.FLOAT16,
    TypeKind.FLOAT32,
    TypeKind.FLOAT64,
    TypeKind.BINARY,
    TypeKind.LARGE_BINARY,
    TypeKind.UTF8,
    TypeKind.LARGE_UTF8,
):
    setattr(DataType, _kind.name, DataType(_kind))
del _kind


class PrimitiveType(Enum):
    """Fixed-width storage types with their data type, bit width, default and struct code."""

    BOOLEAN = (DataType(TypeKind.BOOLEAN), 8, False, "?")
    INT8 = (DataType(TypeKind.INT8), 8, 0, "b")
    INT16 = (DataType(TypeKind.INT16), 16, 0, "h")
    INT32 = (DataType(TypeKind.INT32), 32, 0, "i")
    INT64 = (DataType(TypeKind.INT64), 64, 0, "q")
    UINT8 = (DataType(TypeKind.UINT8), 8, 0, "B")
    UINT16 = (DataType(TypeKind.UINT16), 16, 0, "H")
    UINT32 = (DataType(TypeKind.UINT32), 32, 0, "I")
    UINT64 = (DataType(TypeKind.UINT64), 64, 0, "Q")
    FLOAT32 = (DataType(TypeKind.FLOAT32), 32, 0.0, "f")
    FLOAT64 = (DataType(TypeKind.FLOAT64), 64, 0.0, "d")
    TIMESTAMP_SECOND = (DataType.timestamp(TimeUnit.SECOND), 64, 0, "q")
    TIMESTAMP_MILLISECOND = (DataType.timestamp(TimeUnit.MILLISECOND), 64, 0, "q")
    TIMESTAMP_MICROSECOND = (DataType.timestamp(TimeUnit.MICROSECOND), 64, 0, "q")
    TIMESTAMP_NANOSECOND = (DataType.timestamp(TimeUnit.NANOSECOND), 64, 0, "q")
    DATE32 = (DataType.date32(), 32, 0, "i")
    DATE64 = (DataType.date64(), 64, 0, "q")
    TIME32_SECOND = (DataType.time32(TimeUnit.SECOND), 32, 0, "i")
    TIME32_MILLISECOND = (DataType.time32(TimeUnit.MILLISECOND), 32, 0, "i")
    TIME64_MICROSECOND = (DataType.time64(TimeUnit.MICROSECOND), 64, 0, "q")
    TIME64_NANOSECOND = (DataType.time64(TimeUnit.NANOSECOND), 64, 0, "q")
    INTERVAL_YEAR_MONTH = (DataType.interval(IntervalUnit.YEAR_MONTH), 32, 0, "i")
    INTERVAL_DAY_TIME = (DataType.interval(IntervalUnit.DAY_TIME), 64, 0, "q")
    DURATION_SECOND = (DataType.duration(TimeUnit.SECOND), 64, 0, "q")
    DURATION_MILLISECOND = (DataType.duration(TimeUnit.MILLISECOND), 64, 0, "q")
    DURATION_MICROSECOND = (DataType.duration(TimeUnit.MICROSECOND), 64, 0, "q")
    DURATION_NANOSECOND = (DataType.duration(TimeUnit.NANOSECOND), 64, 0, "q")

    def __init__(self, data_type: DataType, bit_width: int, default_value, fmt: str):
        self.data_type = data_type
        self.bit_width = bit_width
        self.default_value = default_value
        self.fmt = fmt

    @property
    def element_size(self) -> int:
        """Bytes taken by one stored value."""
        return max(1, self.bit_width // 8)


_BY_DATA_TYPE = {member.data_type: member for member in PrimitiveType}


def primitive_for(data_type: DataType) -> PrimitiveType:
    """Return the primitive storage type for a data type; timestamps ignore the time zone."""
    key = data_type
    if data_type.kind is TypeKind.TIMESTAMP and data_type.timezone is not None:
        key = DataType.timestamp(data_type.unit)
    try:
        return _BY_DATA_TYPE[key]
    except KeyError:
        raise NotImplementedError(f"{data_type!r} not implemented") from None


@dataclass
class Field:
    """A named, typed column description."""

    name: str
    data_type: DataType
    nullable: bool
    dict_id: int = field(default=0)
    dict_is_ordered: bool = field(default=False)

    @classmethod
    def new_dict(
        cls,
        name: str,
        data_type: DataType,
        nullable: bool,
        dict_id: int,
        dict_is_ordered: bool,
    ) -> Field:
        return cls(name, data_type, nullable, dict_id, dict_is_ordered)

    def rename(self, name: str) -> None:
        self.name = name