"""
Error types raised by Huffman compression and decompression.
"""
from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure a compress/decompress call can report."""

    INVALID_MAGIC = "invalid_magic"
    MALFORMED_HEADER = "malformed_header"
    CORRUPT_DATA = "corrupt_data"
    IO_FAILURE = "io_failure"


class HuffException(Exception):
    """
    Base class for all Huffman processing errors.
    The kind attribute tells callers which failure occurred.
    """

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidMagic(HuffException):
    """The leading 32 bits do not match the format's magic number."""

    kind = ErrorKind.INVALID_MAGIC

    def __init__(self, found: int) -> None:
        super().__init__(f"illegal header starts with {found:#010x}")
        self.found = found


class MalformedHeader(HuffException):
    """The serialized tree is truncated or does not follow the header grammar."""

    kind = ErrorKind.MALFORMED_HEADER


class CorruptData(HuffException):
    """The encoded data ends before the end-of-stream code or walks off the tree."""

    kind = ErrorKind.CORRUPT_DATA


class IOFailure(HuffException):
    """The underlying stream failed to read or write."""

    kind = ErrorKind.IO_FAILURE
