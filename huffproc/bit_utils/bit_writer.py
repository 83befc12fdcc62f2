from typing import BinaryIO

from bitarray import bitarray
from bitarray.util import int2ba

from huffproc.errors import IOFailure


class BitWriter:
    """
    A class for writing bits to a binary stream, most significant bit first.
    Bits are collected in a bitarray and complete bytes are drained to the
    stream as the buffer fills. Closing pads the last byte with zero bits.
    """

    DRAIN_BITS = 8 * 8192

    def __init__(self, stream: BinaryIO) -> None:
        """
        Initialize a new BitWriter over a binary stream.

        Args:
            stream: Binary stream opened for writing
        """
        self.stream = stream
        self.bits = bitarray(endian="big")
        self.bits_written = 0
        self.closed = False

    def write_bits(self, length: int, value: int) -> None:
        """
        Write the low length bits of value in MSB-first order.

        Args:
            length: Number of bits to write
            value: Integer value to write

        Raises:
            ValueError: If length is negative or the writer is closed
        """
        if self.closed:
            raise ValueError("Write to a closed BitWriter")
        if length < 0:
            raise ValueError("Length cannot be negative")
        if length == 0:
            return
        self.bits.extend(int2ba(value & ((1 << length) - 1), length=length, endian="big"))
        self.bits_written += length
        self._drain()

    def write_code(self, code: str) -> None:
        """
        Write a code given as a string of '0' and '1' characters.
        An empty code writes nothing.
        """
        if self.closed:
            raise ValueError("Write to a closed BitWriter")
        if not code:
            return
        self.bits.extend(code)
        self.bits_written += len(code)
        self._drain()

    def _drain(self) -> None:
        if len(self.bits) < self.DRAIN_BITS:
            return
        whole = len(self.bits) - len(self.bits) % 8
        self._write_out(self.bits[:whole].tobytes())
        del self.bits[:whole]

    def _write_out(self, data: bytes) -> None:
        try:
            self.stream.write(data)
        except OSError as e:
            raise IOFailure(f"Error writing output stream: {e}") from e

    def close(self) -> None:
        """
        Pad the final partial byte with zero bits, write the remaining
        buffer and flush the stream. Calling close again does nothing.
        """
        if self.closed:
            return
        self.closed = True
        # tobytes() pads the final byte with zeros
        if self.bits:
            self._write_out(self.bits.tobytes())
            self.bits.clear()
        try:
            self.stream.flush()
        except OSError as e:
            raise IOFailure(f"Error flushing output stream: {e}") from e

    def __enter__(self) -> "BitWriter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
