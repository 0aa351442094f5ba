"""
frequency.py

Symbol frequency analysis.
"""


import numbers
from collections import defaultdict
from types import MappingProxyType
from typing import Iterable, Mapping

from .models import Symbol, FrequencyMap
from .validators import validate_symbol


def count_frequencies(symbols: Iterable[Symbol]) -> FrequencyMap:
    """
    Count the occurrences of each symbol.

    Args:
        symbols (Iterable[Symbol]): The input symbols, e.g. a string.

    Returns:
        FrequencyMap: Read-only mapping from symbol to count, in order of first occurrence.
    """
    freq_dict = defaultdict(int)
    for sym in symbols:
        freq_dict[sym] += 1
    return MappingProxyType(dict(freq_dict))


def frequencies_from_mapping(mapping: Mapping[Symbol, int]) -> FrequencyMap:
    """
    Build a frequency map from an explicit symbol to count mapping.

    Symbols with a zero count are left out.

    Raises:
        ValueError: If a key is not a single character or a count is not a non-negative integer.
    """
    freq_dict = {}
    for sym, count in mapping.items():
        validate_symbol(sym)
        if not isinstance(count, numbers.Integral) or isinstance(count, bool) or count < 0:
            raise ValueError(f"Frequency of {sym!r} must be a non-negative integer")
        if count > 0:
            freq_dict[sym] = int(count)
    return MappingProxyType(freq_dict)
