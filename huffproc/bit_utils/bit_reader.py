from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import ba2int

from huffproc.errors import IOFailure


class BitReader:
    """
    A class for reading bits from a binary stream, most significant bit first.
    The whole stream is loaded into a bitarray so it can be rewound and
    scanned again.
    """

    EOF = -1

    def __init__(self, stream: BinaryIO) -> None:
        """
        Initialize BitReader by reading the entire stream into a bitarray.

        Args:
            stream: Binary stream opened for reading

        Raises:
            IOFailure: If the stream cannot be read
        """
        self.bits = bitarray(endian="big")
        try:
            self.bits.frombytes(stream.read())
        except OSError as e:
            raise IOFailure(f"Error reading input stream: {e}") from e
        self.pos = 0
        self.bits_read = 0
        self.closed = False

    def read_bits(self, n: int) -> int:
        """
        Read n bits in MSB-first order and return them as an integer.

        Args:
            n: Number of bits to read

        Returns:
            The value as an integer, or BitReader.EOF if fewer than
            n bits remain

        Raises:
            ValueError: If the reader is closed or n is not positive
        """
        if self.closed:
            raise ValueError("Read from a closed BitReader")
        if n <= 0:
            raise ValueError("Number of bits must be positive")
        if self.pos + n > len(self.bits):
            return self.EOF
        val = ba2int(self.bits[self.pos : self.pos + n])
        self.pos += n
        self.bits_read += n
        return val

    def reset(self) -> None:
        """Rewind to the first bit of the stream."""
        if self.closed:
            raise ValueError("Reset of a closed BitReader")
        self.pos = 0

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "BitReader":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
