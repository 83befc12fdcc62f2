"""
Serialization of a Huffman tree into the compressed file header.

The tree is written in preorder: bit 0 marks an internal node and is
followed by its left and right subtrees, bit 1 marks a leaf and is
followed by the leaf's symbol in a 9-bit field.
"""
from typing import Callable, Optional

from huffproc.bit_utils.bit_reader import BitReader
from huffproc.bit_utils.bit_writer import BitWriter
from huffproc.errors import MalformedHeader
from huffproc.frequency import BITS_PER_WORD, PSEUDO_EOF
from huffproc.huffman_tree import DEBUG_HIGH, HuffmanNode

LEAF_BITS = BITS_PER_WORD + 1
# 257 leaves can never need more internal levels than this
MAX_DEPTH = PSEUDO_EOF


def write_header(
    root: HuffmanNode,
    writer: BitWriter,
    debug: int = 0,
    log: Optional[Callable[[str], None]] = None,
) -> None:
    """
    Write the tree to the beginning of the compressed stream.

    Args:
        root: Root of the Huffman tree
        writer: BitWriter for the compressed stream
        debug: Debug level, DEBUG_HIGH prints every leaf written
        log: Callable receiving debug lines
    """
    log = log or print
    if root.is_leaf():
        writer.write_bits(1, 1)
        writer.write_bits(LEAF_BITS, root.value)
        if debug >= DEBUG_HIGH:
            log(f"wrote leaf for tree {root.value}")
        return
    writer.write_bits(1, 0)
    write_header(root.left, writer, debug, log)
    write_header(root.right, writer, debug, log)


def read_header(
    reader: BitReader,
    debug: int = 0,
    log: Optional[Callable[[str], None]] = None,
    depth: int = 0,
) -> HuffmanNode:
    """
    Read the tree written by write_header. Internal nodes get weight 0.

    Args:
        reader: BitReader positioned at the start of the header
        debug: Debug level, DEBUG_HIGH prints every leaf read
        log: Callable receiving debug lines

    Returns:
        Root of the reconstructed tree

    Raises:
        MalformedHeader: If the header is truncated, nests deeper than
            any valid tree or holds a symbol outside 0..256
    """
    log = log or print
    bit = reader.read_bits(1)
    if bit == BitReader.EOF:
        raise MalformedHeader("bad input, header ends before the tree is complete")

    if bit == 0:
        if depth >= MAX_DEPTH:
            raise MalformedHeader(f"bad input, tree nests deeper than {MAX_DEPTH} levels")
        left = read_header(reader, debug, log, depth + 1)
        right = read_header(reader, debug, log, depth + 1)
        return HuffmanNode(0, 0, left, right)

    value = reader.read_bits(LEAF_BITS)
    if value == BitReader.EOF:
        raise MalformedHeader("bad input, header ends inside a leaf value")
    if value > PSEUDO_EOF:
        raise MalformedHeader(f"bad input, leaf value {value} is not a symbol")
    if debug >= DEBUG_HIGH:
        log(f"read leaf for tree {value}")
    return HuffmanNode(value, 0)
