"""
tree.py

Huffman tree construction by repeated merging of the two lightest nodes.
"""


import heapq
from typing import Iterator, List, Tuple

from .errors import EmptyDistributionError
from .models import HuffmanNode, FrequencyMap


def build_tree(frequencies: FrequencyMap) -> HuffmanNode:
    """
    Build a Huffman tree from a frequency map.

    Candidates are kept in a min-heap keyed on (weight, creation order). Leaves
    are created in the iteration order of the frequency map and every merged
    node gets the next order number, so among equal weights the oldest node is
    taken first. The first node taken becomes the left child.

    Args:
        frequencies (FrequencyMap): Non-empty mapping from symbol to weight.

    Returns:
        HuffmanNode: The root of the tree.

    Raises:
        EmptyDistributionError: If the frequency map is empty.
    """
    if len(frequencies) == 0:
        raise EmptyDistributionError("Cannot build a Huffman tree from an empty distribution")

    heap: List[Tuple[int, int, HuffmanNode]] = [
        (weight, order, HuffmanNode.leaf(sym, weight))
        for order, (sym, weight) in enumerate(frequencies.items())
    ]
    heapq.heapify(heap)
    order = len(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanNode.merge(left, right)
        heapq.heappush(heap, (merged.weight, order, merged))
        order += 1
    return heap[0][2]


def iter_leaves(root: HuffmanNode) -> Iterator[Tuple[HuffmanNode, int]]:
    """Yield (leaf, depth) pairs from left to right."""
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        if node.is_leaf:
            yield node, depth
        else:
            stack.append((node.right, depth + 1))
            stack.append((node.left, depth + 1))


def tree_depth(root: HuffmanNode) -> int:
    return max(depth for _, depth in iter_leaves(root))


def weighted_path_length(root: HuffmanNode) -> int:
    """Sum of weight x depth over all leaves. A single-leaf tree has length 0."""
    return sum(leaf.weight * depth for leaf, depth in iter_leaves(root))
