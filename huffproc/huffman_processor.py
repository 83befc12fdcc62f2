"""
Huffman compression with the coding tree stored in the file header,
so no separate dictionary is needed to decompress.

Compressed layout: 32-bit magic number, preorder tree header, one code
per input byte, then the code of PSEUDO_EOF. Bits after PSEUDO_EOF are
padding.
"""
from typing import BinaryIO, Callable, Optional

from huffproc.bit_utils.bit_reader import BitReader
from huffproc.bit_utils.bit_writer import BitWriter
from huffproc.compressor_ABC import Compressor
from huffproc.errors import CorruptData, InvalidMagic
from huffproc.frequency import ALPH_SIZE, BITS_PER_WORD, PSEUDO_EOF, count_frequencies
from huffproc.header import read_header, write_header
from huffproc.huffman_tree import (
    DEBUG_HIGH,
    DEBUG_LOW,
    HuffmanNode,
    make_codings_from_tree,
    make_tree_from_counts,
)

BITS_PER_INT = 32
HUFF_NUMBER = 0xFACE8200
HUFF_TREE = HUFF_NUMBER | 1

DEBUG_NONE = 0

__all__ = [
    "ALPH_SIZE",
    "BITS_PER_INT",
    "BITS_PER_WORD",
    "DEBUG_HIGH",
    "DEBUG_LOW",
    "DEBUG_NONE",
    "HUFF_NUMBER",
    "HUFF_TREE",
    "PSEUDO_EOF",
    "HuffProcessor",
]


class HuffProcessor(Compressor):
    """
    Compresses and decompresses byte streams with Huffman coding.
    The process is lossless: decompress(compress(data)) == data.
    """

    def __init__(self, debug: int = DEBUG_NONE, log: Optional[Callable[[str], None]] = None) -> None:
        """
        Args:
            debug: Debug level, DEBUG_LOW prints codes and a summary,
                DEBUG_HIGH also prints counts and header leaves
            log: Callable receiving debug lines, print by default
        """
        self.debug = debug
        self.log = log or print

    def compress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Compress input_stream into output_stream.

        Args:
            input_stream: Binary stream with the data to compress
            output_stream: Binary stream receiving the compressed data

        Returns:
            Bits read and written, for logging
        """
        with BitReader(input_stream) as reader, BitWriter(output_stream) as writer:
            counts = count_frequencies(reader)
            reader.reset()
            root = make_tree_from_counts(counts, self.debug, self.log)
            codings = make_codings_from_tree(root, self.debug, self.log)

            writer.write_bits(BITS_PER_INT, HUFF_TREE)
            write_header(root, writer, self.debug, self.log)
            self._write_compressed_bits(codings, reader, writer)

        info = f"Huffman compress: {reader.bits_read} bits read, {writer.bits_written} bits written"
        if self.debug >= DEBUG_LOW:
            self.log(info)
        return info

    @staticmethod
    def _write_compressed_bits(codings: dict[int, str], reader: BitReader, writer: BitWriter) -> None:
        """
        Write the code of every 8-bit chunk followed by the code of PSEUDO_EOF.
        """
        while True:
            chunk = reader.read_bits(BITS_PER_WORD)
            if chunk == BitReader.EOF:
                break
            writer.write_code(codings[chunk])
        # empty when PSEUDO_EOF is the only leaf
        writer.write_code(codings[PSEUDO_EOF])

    def decompress(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        """
        Decompress input_stream into output_stream.

        Args:
            input_stream: Binary stream with data written by compress
            output_stream: Binary stream receiving the original data

        Returns:
            Bits read and written, for logging

        Raises:
            InvalidMagic: If the stream does not start with HUFF_TREE
            MalformedHeader: If the tree header cannot be read
            CorruptData: If the data ends before PSEUDO_EOF
        """
        with BitReader(input_stream) as reader, BitWriter(output_stream) as writer:
            bits = reader.read_bits(BITS_PER_INT)
            if bits != HUFF_TREE:
                raise InvalidMagic(bits)

            root = read_header(reader, self.debug, self.log)
            self._read_compressed_bits(root, reader, writer)

        info = f"Huffman decompress: {reader.bits_read} bits read, {writer.bits_written} bits written"
        if self.debug >= DEBUG_LOW:
            self.log(info)
        return info

    def _read_compressed_bits(self, root: HuffmanNode, reader: BitReader, writer: BitWriter) -> None:
        """
        Follow root-to-leaf paths through the tree, writing every leaf value
        reached until the PSEUDO_EOF leaf.
        """
        if root.is_leaf():
            # only PSEUDO_EOF was encoded, with a zero-length code
            if root.value != PSEUDO_EOF:
                raise CorruptData(f"bad input, single leaf {root.value} never reaches PSEUDO_EOF")
            return

        current = root
        while True:
            bit = reader.read_bits(1)
            if bit == BitReader.EOF:
                raise CorruptData("bad input, no PSEUDO_EOF")
            current = current.right if bit else current.left
            if current is None:
                raise CorruptData("bad input, code leads outside the tree")

            if current.is_leaf():
                if self.debug >= DEBUG_HIGH:
                    self.log(f"decoded {current.value}")
                if current.value == PSEUDO_EOF:
                    break
                writer.write_bits(BITS_PER_WORD, current.value)
                current = root
