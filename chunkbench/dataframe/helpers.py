"""Byte conversions, float decomposition and small concurrency helpers."""

from __future__ import annotations

import operator
import struct
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, Iterable, TypeVar

from .types import DataType

A = TypeVar("A")
B = TypeVar("B")

_UNKNOWN_CAPACITY = 1024


def integer_decode(val: float) -> tuple[int, int, int]:
    """Split a float into (mantissa, exponent, sign) so it can serve as a hash key."""
    (bits,) = struct.unpack("<Q", struct.pack("<d", val))
    sign = 1 if bits >> 63 == 0 else -1
    exponent = (bits >> 52) & 0x7FF
    fraction = bits & 0xFFFFFFFFFFFFF
    mantissa = fraction << 1 if exponent == 0 else fraction | 0x10000000000000
    return mantissa, exponent - (1023 + 52), sign


def floating_encode_f64(mantissa: int, exponent: int, sign: int) -> float:
    """Rebuild a float from the parts produced by :func:`integer_decode`."""
    return float(sign) * float(mantissa) * 2.0 ** float(exponent)


def exec_concurrent(block_a: Callable[[], A], block_b: Callable[[], B]) -> tuple[A, B]:
    """Run two callables on separate threads and return both results."""
    with ThreadPoolExecutor(max_workers=2) as pool:
        left = pool.submit(block_a)
        right = pool.submit(block_b)
        return left.result(), right.result()


def get_iter_capacity(iterator: Iterable[Any]) -> int:
    """Estimate how many items an iterable will produce."""
    try:
        return len(iterator)  # type: ignore[arg-type]
    except TypeError:
        pass
    hint = operator.length_hint(iterator, 0)
    return hint if hint else _UNKNOWN_CAPACITY


def _from_le(data: bytes, width: int) -> int:
    if len(data) != width:
        raise ValueError(f"expected {width} bytes, got {len(data)}")
    return int.from_bytes(bytes(data), "little")


def bytes_to_u16(data: bytes) -> int:
    return _from_le(data, 2)


def bytes_to_u32(data: bytes) -> int:
    return _from_le(data, 4)


def bytes_to_u64(data: bytes) -> int:
    return _from_le(data, 8)


def u16_to_bytes(val: int) -> bytes:
    return val.to_bytes(2, "little")


def u32_to_bytes(val: int) -> bytes:
    return val.to_bytes(4, "little")


def u64_to_bytes(val: int) -> bytes:
    return val.to_bytes(8, "little")


_SIZES = {
    DataType.BOOLEAN: 1,
    DataType.INT8: 1,
    DataType.INT16: 2,
    DataType.INT32: 4,
    DataType.INT64: 8,
    DataType.UINT8: 1,
    DataType.UINT16: 2,
    DataType.UINT32: 4,
    DataType.UINT64: 8,
    DataType.FLOAT32: 4,
    DataType.FLOAT64: 8,
}


def datatype_size(data_type: DataType) -> int:
    """Bytes taken by one value of a plain numeric or boolean type."""
    try:
        return _SIZES[data_type]
    except KeyError:
        raise NotImplementedError("not implemented!") from None