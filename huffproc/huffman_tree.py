"""
Huffman tree construction and prefix code generation
"""
import heapq
from typing import Callable, Optional

DEBUG_LOW = 1
DEBUG_HIGH = 4


class HuffmanNode:
    """
    Class object for Node in Huffman's Tree
    """

    def __init__(self, value: int, weight: int, left=None, right=None):
        """
        Function initializes the structure of a node.

        :param value: symbol held by a leaf, 0 for internal nodes
        :param weight: int, combined frequency of the symbols under this node
        :param left: subtree reached with bit 0
        :param right: subtree reached with bit 1
        """
        self.value = value
        self.weight = weight
        self.left = left
        self.right = right

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __eq__(self, other):
        # weights are not part of the serialized shape
        if not isinstance(other, HuffmanNode):
            return NotImplemented
        if self.is_leaf() or other.is_leaf():
            return self.is_leaf() and other.is_leaf() and self.value == other.value
        return self.left == other.left and self.right == other.right

    __hash__ = None

    def __repr__(self):
        if self.is_leaf():
            return f"HuffmanNode({self.value}, {self.weight})"
        return f"HuffmanNode(weight={self.weight}, left={self.left!r}, right={self.right!r})"


def make_tree_from_counts(
    freqs: list[int], debug: int = 0, log: Optional[Callable[[str], None]] = None
) -> HuffmanNode:
    """
    Function builds Huffman Tree from symbol counts.

    Nodes are ordered by weight, then by a sequence number: leaves are
    numbered in ascending symbol order and every merged node gets the
    next number, so equal weights always leave the queue in the same order.

    :param freqs: list of counts indexed by symbol
    :param debug: debug level, DEBUG_HIGH prints every non-zero count
    :param log: callable receiving debug lines
    :return: HuffmanNode, root of the tree
    """
    log = log or print
    queue = []
    sequence = 0
    for symbol, count in enumerate(freqs):
        if count == 0:
            continue
        queue.append((count, sequence, HuffmanNode(symbol, count)))
        sequence += 1
        if debug >= DEBUG_HIGH:
            log(f"chunk {symbol} occurs {count} times")

    if not queue:
        raise ValueError("Cannot build a tree without any symbols")

    heapq.heapify(queue)
    while len(queue) > 1:
        # left smallest node
        l_weight, _, left = heapq.heappop(queue)
        # right smallest node
        r_weight, _, right = heapq.heappop(queue)

        merged = HuffmanNode(0, l_weight + r_weight, left, right)
        heapq.heappush(queue, (merged.weight, sequence, merged))
        sequence += 1

    return queue[0][2]


def make_codings_from_tree(
    root: HuffmanNode, debug: int = 0, log: Optional[Callable[[str], None]] = None
) -> dict[int, str]:
    """
    Function generates the code of every leaf symbol, a string of
    '0' (left) and '1' (right) steps from the root.

    A tree that is a single leaf gives that leaf the empty code.

    :param root: root of the Huffman tree
    :param debug: debug level, DEBUG_LOW prints every code
    :param log: callable receiving debug lines
    :return: dict, mapping symbol to code
    """
    log = log or print
    codes = {}

    def do_trails(node: HuffmanNode, path: str) -> None:
        if node.is_leaf():
            codes[node.value] = path
            if debug >= DEBUG_LOW:
                log(f"encoding for {node.value} is {path}")
            return
        do_trails(node.left, path + "0")
        do_trails(node.right, path + "1")

    do_trails(root, "")
    return codes
