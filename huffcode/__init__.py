"""
huffcode: A Python library for static Huffman coding of text.
"""

from .codec import HuffmanCode

from .codes import (
    assign_codes,
    codewords_are_unique,
    is_prefix_code,
)

from .errors import (
    HuffmanCodeError,
    UnknownSymbolError,
    MalformedBitstringError,
    EmptyDistributionError,
)

from .frequency import (
    count_frequencies,
    frequencies_from_mapping,
)

from .models import (
    Symbol,
    FrequencyMap,
    HuffmanNode,
    SymbolFrequency,
    CodeTable,
)

from .tree import (
    build_tree,
    iter_leaves,
    tree_depth,
    weighted_path_length,
)

from .statistics import CodeStatistics

from .settings import HuffmanCodeSettings

from .logger import (
    Logger,
    Log,
    LogLevel,
    TreeConstructionLog,
    CodingLog,
    DecodingLog,
    ErrorLog,
    CodingProgressStep,
)

# Validators
from .validators import *

__all__ = [

    "HuffmanCode",

    "assign_codes",
    "codewords_are_unique",
    "is_prefix_code",

    "HuffmanCodeError",
    "UnknownSymbolError",
    "MalformedBitstringError",
    "EmptyDistributionError",

    "count_frequencies",
    "frequencies_from_mapping",

    "Symbol",
    "FrequencyMap",
    "HuffmanNode",
    "SymbolFrequency",
    "CodeTable",

    "build_tree",
    "iter_leaves",
    "tree_depth",
    "weighted_path_length",

    "CodeStatistics",
    "HuffmanCodeSettings",

    "Logger",
    "Log",
    "LogLevel",
    "TreeConstructionLog",
    "CodingLog",
    "DecodingLog",
    "ErrorLog",
    "CodingProgressStep",
]
