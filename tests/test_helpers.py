import pytest

from chunkbench.dataframe.helpers import (
    bytes_to_u16,
    bytes_to_u32,
    bytes_to_u64,
    datatype_size,
    exec_concurrent,
    floating_encode_f64,
    get_iter_capacity,
    integer_decode,
    u16_to_bytes,
    u32_to_bytes,
    u64_to_bytes,
)
from chunkbench.dataframe.types import DataType, TimeUnit, primitive_for


@pytest.mark.parametrize("value", [1.0, -2.5, 0.0, 3.141592653589793, 1e300, -7e-300])
def test_integer_decode_round_trip(value):
    assert floating_encode_f64(*integer_decode(value)) == value


def test_integer_decode_sign():
    mantissa, exponent, sign = integer_decode(2.5)
    neg_mantissa, neg_exponent, neg_sign = integer_decode(-2.5)
    assert (neg_mantissa, neg_exponent) == (mantissa, exponent)
    assert neg_sign == -sign


def test_integer_decode_distinguishes_values():
    assert integer_decode(0.1) != integer_decode(0.2) and integer_decode(0.1) == integer_decode(0.1)


def test_exec_concurrent_results():
    assert exec_concurrent(lambda: "a", lambda: [1, 2]) == ("a", [1, 2])


def test_exec_concurrent_propagates():
    def boom():
        raise KeyError("boom")

    with pytest.raises(KeyError):
        exec_concurrent(lambda: 1, boom)


def test_get_iter_capacity():
    assert get_iter_capacity([1, 2, 3]) == 3
    assert get_iter_capacity(iter(range(5))) == 5
    assert get_iter_capacity(x for x in range(3)) == 1024


@pytest.mark.parametrize(
    "encode, decode, value",
    [
        (u16_to_bytes, bytes_to_u16, 0xBEEF),
        (u32_to_bytes, bytes_to_u32, 0xDEADBEEF),
        (u64_to_bytes, bytes_to_u64, 2**64 - 1),
        (u64_to_bytes, bytes_to_u64, 0),
    ],
)
def test_byte_round_trip(encode, decode, value):
    assert decode(encode(value)) == value


def test_little_endian():
    assert u16_to_bytes(0x0102) == b"\x02\x01"
    assert bytes_to_u32(b"\x01\x00\x00\x00") == 1


def test_widths():
    assert len(u32_to_bytes(5)) == 4
    assert len(u64_to_bytes(5)) == 8


def test_wrong_length():
    with pytest.raises(ValueError):
        bytes_to_u16(b"\x01")
    with pytest.raises(ValueError):
        bytes_to_u64(b"\x00" * 4)


def test_overflow():
    with pytest.raises(OverflowError):
        u16_to_bytes(2**16)


@pytest.mark.parametrize(
    "data_type",
    [
        DataType.INT8,
        DataType.INT16,
        DataType.INT32,
        DataType.INT64,
        DataType.UINT8,
        DataType.UINT16,
        DataType.UINT32,
        DataType.UINT64,
        DataType.FLOAT32,
        DataType.FLOAT64,
        DataType.BOOLEAN,
    ],
)
def test_datatype_size_matches_bit_width(data_type):
    assert datatype_size(data_type) == primitive_for(data_type).bit_width // 8


def test_datatype_size_unsupported():
    with pytest.raises(NotImplementedError):
        datatype_size(DataType.duration(TimeUnit.SECOND))