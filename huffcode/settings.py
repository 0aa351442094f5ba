"""
settings.py

Configuration for huffcode.
"""


BIT_ZERO = "0"
BIT_ONE = "1"

# Codeword given to the only symbol of a single-leaf tree.
SINGLE_SYMBOL_CODEWORD = BIT_ZERO

# Size of an uncompressed symbol, used for compression ratios.
BITS_PER_SYMBOL = 8


class HuffmanCodeSettings:
    """
    Settings for building a Huffman code.
    """

    def __init__(self, single_symbol_codeword: str = SINGLE_SYMBOL_CODEWORD, bits_per_symbol: int = BITS_PER_SYMBOL) -> None:
        if single_symbol_codeword not in (BIT_ZERO, BIT_ONE):
            raise ValueError("Single symbol codeword must be '0' or '1'")
        if not isinstance(bits_per_symbol, int) or isinstance(bits_per_symbol, bool) or bits_per_symbol <= 0:
            raise ValueError("Bits per symbol must be a positive integer")
        self.single_symbol_codeword: str = single_symbol_codeword
        self.bits_per_symbol: int = bits_per_symbol
