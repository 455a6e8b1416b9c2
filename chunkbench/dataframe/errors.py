"""Errors raised by the data frame code."""

from __future__ import annotations


class FrameError(Exception):
    """Base error; carries a free-form message when raised directly."""

    default_message = "frame error"

    def __init__(self, message: str | None = None):
        super().__init__(message if message is not None else self.default_message)


class SelfArrowError(FrameError):
    default_message = "SelfArrow Error"


class InvalidOperation(FrameError):
    default_message = "Invalid operation"


class ChunkMismatch(FrameError):
    default_message = "Chunk don't match"


class DataTypeMismatch(FrameError):
    default_message = "Data types don't match"


class NotFound(FrameError):
    default_message = "Not found"


class LengthMismatch(FrameError):
    default_message = "Lengths don't match"


class NoSelection(FrameError):
    default_message = "No selection was made"


class OutOfBounds(FrameError):
    default_message = "Out of bounds"


class NoSlice(FrameError):
    default_message = "Not contiguous or null values"


class NoData(FrameError):
    default_message = "Such empty..."


class MemoryNotAligned(FrameError):
    default_message = "Memory should be 64 byte aligned"