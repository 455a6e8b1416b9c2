import pytest

from chunkbench.dataframe import errors
from chunkbench.dataframe.errors import (
    ChunkMismatch,
    DataTypeMismatch,
    FrameError,
    NoData,
    NotFound,
)


def test_default_messages():
    assert str(NotFound()) == "Not found"
    assert str(DataTypeMismatch()) == "Data types don't match"
    assert str(ChunkMismatch()) == "Chunk don't match"
    assert str(NoData()) == "Such empty..."


def test_custom_message_on_base():
    assert str(FrameError("something odd")) == "something odd"


def test_custom_message_overrides_default():
    assert str(NotFound("column v9")) == "column v9"


@pytest.mark.parametrize(
    "cls",
    [
        errors.SelfArrowError,
        errors.InvalidOperation,
        errors.ChunkMismatch,
        errors.DataTypeMismatch,
        errors.NotFound,
        errors.LengthMismatch,
        errors.NoSelection,
        errors.OutOfBounds,
        errors.NoSlice,
        errors.NoData,
        errors.MemoryNotAligned,
    ],
)
def test_all_caught_as_frame_error(cls):
    with pytest.raises(FrameError) as info:
        raise cls()
    assert str(info.value) == cls.default_message