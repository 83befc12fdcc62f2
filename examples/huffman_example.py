"""
Example script compressing a file with Huffman coding and restoring it.
"""

import os
import sys
from pathlib import Path

# Add the parent directory to Python path
sys.path.append(str(Path(__file__).parent.parent))

from huffproc.huffman_processor import DEBUG_LOW, HuffProcessor


def main():
    input_path = sys.argv[1] if len(sys.argv) > 1 else "input.txt"
    compressed_path = f"{input_path}.hf"
    decompressed_path = f"{input_path}.unhf"

    if not os.path.exists(input_path):
        print(f"Input file not found: {input_path}")
        return 1

    print(f"\nCompressing {input_path} to {compressed_path}")
    print(HuffProcessor.compress_file(input_path, compressed_path))

    original_size = os.path.getsize(input_path)
    compressed_size = os.path.getsize(compressed_path)
    print(f"Original size: {original_size} bytes")
    print(f"Compressed size: {compressed_size} bytes")
    if compressed_size:
        print(f"Compression ratio: {original_size / compressed_size:.2f}x")

    print(f"\nDecompressing {compressed_path} to {decompressed_path}")
    print(HuffProcessor.decompress_file(compressed_path, decompressed_path, debug=DEBUG_LOW))

    with open(input_path, "rb") as orig, open(decompressed_path, "rb") as restored:
        if orig.read() == restored.read():
            print("✅ Files match")
            return 0
    print("❌ Files don't match")
    return 1


if __name__ == "__main__":
    sys.exit(main())
