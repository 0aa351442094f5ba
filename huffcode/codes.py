"""
codes.py

Codeword assignment from a Huffman tree.
"""


from typing import Dict, Iterable, Optional

from .models import HuffmanNode, CodeTable
from .settings import HuffmanCodeSettings, BIT_ZERO, BIT_ONE


def assign_codes(root: Optional[HuffmanNode], settings: Optional[HuffmanCodeSettings] = None) -> CodeTable:
    """
    Assign a codeword to every leaf of the tree.

    Descending to the left child appends '0', to the right child '1'. The
    only leaf of a single-leaf tree gets the reserved single symbol codeword.

    Args:
        root (Optional[HuffmanNode]): The tree root, None for an empty distribution.
        settings (Optional[HuffmanCodeSettings]): Settings, defaults are used if None.

    Returns:
        CodeTable: The codeword of every symbol in the tree.
    """
    if settings is None:
        settings = HuffmanCodeSettings()
    if root is None:
        return CodeTable()
    if root.is_leaf:
        return CodeTable({root.symbol: settings.single_symbol_codeword})

    codes: Dict[str, str] = {}
    def build_codes(node: HuffmanNode, code: str) -> None:
        if node.is_leaf:
            codes[node.symbol] = code
        else:
            build_codes(node.left, code + BIT_ZERO)
            build_codes(node.right, code + BIT_ONE)
    build_codes(root, "")
    return CodeTable(codes)


def codewords_are_unique(codewords: Iterable[str]) -> bool:
    codewords = list(codewords)
    return len(set(codewords)) == len(codewords)


def is_prefix_code(codewords: Iterable[str]) -> bool:
    """
    Check that no codeword is a prefix of a different codeword.

    After sorting, a codeword that prefixes any other also prefixes its
    immediate successor.
    """
    ordered = sorted(codewords)
    for current, following in zip(ordered, ordered[1:]):
        if current != following and following.startswith(current):
            return False
    return True
