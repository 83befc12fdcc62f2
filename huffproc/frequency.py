"""
Frequency analysis of 8-bit chunks for Huffman coding.
"""
from huffproc.bit_utils.bit_reader import BitReader

BITS_PER_WORD = 8
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE


def count_frequencies(reader: BitReader) -> list[int]:
    """
    Function counts occurrences of every 8-bit chunk in the stream.

    The reader is consumed to its end and is not rewound.

    :param reader: BitReader positioned where counting should start
    :return: list of 257 counts, the last one being the single
        occurrence of PSEUDO_EOF
    """
    freqs = [0] * (ALPH_SIZE + 1)
    while True:
        chunk = reader.read_bits(BITS_PER_WORD)
        if chunk == BitReader.EOF:
            break
        freqs[chunk] += 1

    freqs[PSEUDO_EOF] = 1
    return freqs
