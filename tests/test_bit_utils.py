import io

import pytest

from huffproc.bit_utils.bit_reader import BitReader
from huffproc.bit_utils.bit_writer import BitWriter
from huffproc.errors import ErrorKind, IOFailure


class FailingStream(io.BytesIO):
    def read(self, *args):
        raise OSError("disk on fire")

    def write(self, data):
        raise OSError("disk on fire")


def test_read_bits_msb_first():
    reader = BitReader(io.BytesIO(b"\xa5\x0f"))
    assert reader.read_bits(4) == 0xA
    assert reader.read_bits(8) == 0x50
    assert reader.read_bits(4) == 0xF
    assert reader.bits_read == 16


def test_read_past_end_returns_eof_and_keeps_position():
    reader = BitReader(io.BytesIO(b"\xa5\x0f"))
    reader.read_bits(12)
    assert reader.read_bits(8) == BitReader.EOF
    assert reader.read_bits(4) == 0xF
    assert reader.read_bits(1) == BitReader.EOF


def test_reset_rewinds_but_keeps_counting():
    reader = BitReader(io.BytesIO(b"\xa5\x0f"))
    reader.read_bits(16)
    reader.reset()
    assert reader.read_bits(16) == 0xA50F
    assert reader.bits_read == 32


def test_empty_stream_is_immediately_exhausted():
    reader = BitReader(io.BytesIO(b""))
    assert reader.read_bits(1) == BitReader.EOF


def test_reader_rejects_bad_use():
    reader = BitReader(io.BytesIO(b"\x00"))
    with pytest.raises(ValueError):
        reader.read_bits(0)
    reader.close()
    with pytest.raises(ValueError):
        reader.read_bits(1)


def test_reader_wraps_os_errors():
    with pytest.raises(IOFailure) as excinfo:
        BitReader(FailingStream())
    assert excinfo.value.kind is ErrorKind.IO_FAILURE


def test_writer_pads_last_byte_on_close():
    out = io.BytesIO()
    with BitWriter(out) as writer:
        writer.write_bits(3, 0b101)
        writer.write_code("11")
        writer.write_code("")
        writer.write_bits(0, 1)
    assert out.getvalue() == b"\xb8"
    assert writer.bits_written == 5


def test_writer_masks_value_to_length():
    out = io.BytesIO()
    with BitWriter(out) as writer:
        writer.write_bits(4, 0x1F3)
    assert out.getvalue() == b"\x30"


def test_writer_closes_once():
    out = io.BytesIO()
    writer = BitWriter(out)
    writer.write_bits(9, 256)
    writer.close()
    writer.close()
    assert out.getvalue() == b"\x80\x00"
    with pytest.raises(ValueError):
        writer.write_bits(1, 1)


def test_writer_rejects_negative_length():
    with BitWriter(io.BytesIO()) as writer:
        with pytest.raises(ValueError):
            writer.write_bits(-1, 0)


def test_writer_drains_whole_bytes():
    out = io.BytesIO()
    writer = BitWriter(out)
    writer.DRAIN_BITS = 16
    for value in (0x41, 0x42, 0x43):
        writer.write_bits(8, value)
    assert out.getvalue() == b"AB"
    writer.close()
    assert out.getvalue() == b"ABC"


def test_writer_wraps_os_errors():
    writer = BitWriter(FailingStream())
    writer.write_bits(8, 0x41)
    with pytest.raises(IOFailure):
        writer.close()
