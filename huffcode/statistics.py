"""
statistics.py

Compression statistics of a Huffman code.
"""


import numpy as np
from typing import List, Optional

from .models import FrequencyMap, CodeTable, SymbolFrequency
from .settings import HuffmanCodeSettings


class CodeStatistics:
    """
    Measures a code table against the distribution it was built from.

    Lengths are codeword lengths, so the only symbol of a single-leaf tree
    counts one bit per occurrence.
    """

    def __init__(self, frequencies: FrequencyMap, code_table: CodeTable, settings: Optional[HuffmanCodeSettings] = None) -> None:
        if settings is None:
            settings = HuffmanCodeSettings()
        self.settings = settings
        self.symbols = list(frequencies)
        self.weights = np.array([frequencies[sym] for sym in self.symbols], dtype=np.int64)
        self.lengths = np.array([len(code_table.get_codeword(sym)) for sym in self.symbols], dtype=np.int64)

    @property
    def total_symbols(self) -> int:
        return int(self.weights.sum())

    @property
    def weighted_path_length(self) -> int:
        """Total number of bits needed to encode the distribution."""
        return int(np.dot(self.weights, self.lengths))

    @property
    def average_code_length(self) -> float:
        total = self.total_symbols
        if total == 0:
            return 0.0
        return self.weighted_path_length / total

    @property
    def entropy(self) -> float:
        """Shannon entropy of the distribution in bits per symbol."""
        total = self.total_symbols
        if total == 0:
            return 0.0
        probs = self.weights / total
        # a single symbol gives -0.0
        return float(-np.sum(probs * np.log2(probs))) + 0.0

    @property
    def efficiency(self) -> float:
        average = self.average_code_length
        if average == 0:
            return 0.0
        return self.entropy / average

    @property
    def compression_ratio(self) -> float:
        """Encoded bits over the bits of the uncompressed symbols."""
        original_bits = self.total_symbols * self.settings.bits_per_symbol
        if original_bits == 0:
            return 0.0
        return self.weighted_path_length / original_bits

    def symbol_frequencies(self) -> List[SymbolFrequency]:
        """Symbols and their frequencies, most frequent first."""
        order = np.argsort(-self.weights, kind="stable")
        return [SymbolFrequency(self.symbols[i], int(self.weights[i])) for i in order]
