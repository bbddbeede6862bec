"""Exceptions raised by textgen containers and models."""


class TextgenError(Exception):
    """Base class for textgen errors."""


class IndexOutOfRange(TextgenError, IndexError):
    """Index lies outside the valid bound for the operation."""

    def __init__(self, index: int, size: int):
        super().__init__(f"index {index} out of range for size {size}")
        self.index = index
        self.size = size


class InvalidArgument(TextgenError, ValueError):
    """A value was required but None was given."""


class CapacityExceeded(TextgenError, OverflowError):
    """The container already holds the maximum number of elements."""
