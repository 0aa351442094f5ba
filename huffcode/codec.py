"""
codec.py

Static Huffman codec over the characters of a text.

"""


from typing import List, Mapping, Optional

from .codes import assign_codes
from .errors import UnknownSymbolError, MalformedBitstringError
from .frequency import count_frequencies, frequencies_from_mapping
from .logger import Logger, TreeConstructionLog, CodingLog, DecodingLog, ErrorLog, CodingProgressStep
from .models import HuffmanNode, CodeTable, FrequencyMap
from .settings import HuffmanCodeSettings, BIT_ZERO
from .statistics import CodeStatistics
from .tree import build_tree, tree_depth
from .validators import validate_type, validate_bitstring


class HuffmanCode:
    """
    A Huffman code built from the symbol frequencies of a text.

    The tree and code table are fixed at construction. An empty text gives a
    codec with no tree and an empty table which only encodes and decodes the
    empty string.

    Encoding and decoding do not change the codec, but an attached logger
    counts progress and must not be shared between threads.
    """

    def __init__(self, data: str, logger: Optional[Logger] = None, settings: Optional[HuffmanCodeSettings] = None) -> None:
        validate_type(data, "Data", str)
        self._data = data
        self._build(count_frequencies(data), logger, settings)

    @classmethod
    def from_frequencies(cls, frequencies: Mapping[str, int], logger: Optional[Logger] = None,
                         settings: Optional[HuffmanCodeSettings] = None) -> 'HuffmanCode':
        """
        Build a codec from an explicit symbol to count mapping.

        Args:
            frequencies (Mapping[str, int]): Count of every symbol.
            logger (Optional[Logger]): Logger instance for logging.
            settings (Optional[HuffmanCodeSettings]): Code settings.

        Returns:
            HuffmanCode: A codec whose stored text is empty.
        """
        code = cls.__new__(cls)
        code._data = ""
        code._build(frequencies_from_mapping(frequencies), logger, settings)
        return code

    def _build(self, frequencies: FrequencyMap, logger: Optional[Logger], settings: Optional[HuffmanCodeSettings]) -> None:
        if settings is not None:
            validate_type(settings, "Settings", HuffmanCodeSettings)
        else:
            settings = HuffmanCodeSettings()
        self.logger: Optional[Logger] = logger
        self.settings: HuffmanCodeSettings = settings
        self._frequencies = frequencies
        self._root: Optional[HuffmanNode] = build_tree(frequencies) if len(frequencies) > 0 else None
        self._code_table = assign_codes(self._root, settings)

        if self.logger is not None:
            depth = tree_depth(self._root) if self._root is not None else 0
            self.logger.log(TreeConstructionLog(len(frequencies), depth))

    @property
    def data(self) -> str:
        return self._data

    @property
    def root(self) -> Optional[HuffmanNode]:
        return self._root

    @property
    def code_table(self) -> CodeTable:
        return self._code_table

    @property
    def frequencies(self) -> FrequencyMap:
        return self._frequencies

    def encode(self, s: str) -> str:
        """
        Encode a text as a bitstring.

        Args:
            s (str): The text to encode.

        Returns:
            str: The concatenated codewords of the symbols of s.

        Raises:
            UnknownSymbolError: If s holds a symbol without a codeword.
            ValueError: If s is not a str.
        """
        try:
            validate_type(s, "Text", str)
        except ValueError as e:
            self._raise(e)
        if self.logger is not None:
            self.logger.reset_progress()

        encoded: List[str] = []
        for position, sym in enumerate(s):
            if not self._code_table.contains(sym):
                self._raise(UnknownSymbolError(sym, position))
            encoded.append(self._code_table.get_codeword(sym))
            if self.logger is not None:
                self.logger.log(CodingProgressStep("Encoding symbols", len(s)))

        bits = "".join(encoded)
        if self.logger is not None:
            self.logger.log(CodingLog(len(s), len(bits)))
        return bits

    def decode(self, bits: str) -> str:
        """
        Decode a bitstring produced by encode.

        Walks the tree from the root, left on '0' and right on '1', emitting
        a symbol and returning to the root at every leaf.

        Args:
            bits (str): A string of '0' and '1' characters.

        Returns:
            str: The decoded text.

        Raises:
            MalformedBitstringError: If bits holds other characters or does not end on a symbol boundary.
        """
        try:
            validate_bitstring(bits)
        except ValueError as e:
            self._raise(e)

        if self._root is None:
            if bits:
                self._raise(MalformedBitstringError("Cannot decode bits without a code table", 0))
            decoded = ""
        elif self._root.is_leaf:
            decoded = self._decode_single_symbol(bits)
        else:
            decoded = self._decode_tree(bits)

        if self.logger is not None:
            self.logger.log(DecodingLog(len(bits), len(decoded)))
        return decoded

    def _decode_single_symbol(self, bits: str) -> str:
        codeword = self.settings.single_symbol_codeword
        for position, bit in enumerate(bits):
            if bit != codeword:
                self._raise(MalformedBitstringError(f"Bit {bit!r} at position {position} is not a codeword", position))
        return self._root.symbol * len(bits)

    def _decode_tree(self, bits: str) -> str:
        decoded: List[str] = []
        node = self._root
        symbol_start = 0
        for position, bit in enumerate(bits):
            node = node.left if bit == BIT_ZERO else node.right
            if node.is_leaf:
                decoded.append(node.symbol)
                node = self._root
                symbol_start = position + 1
        if node is not self._root:
            self._raise(MalformedBitstringError(
                f"Bitstring ends inside a codeword starting at position {symbol_start}", symbol_start))
        return "".join(decoded)

    def statistics(self) -> CodeStatistics:
        return CodeStatistics(self._frequencies, self._code_table, self.settings)

    def _raise(self, error: Exception) -> None:
        if self.logger is not None:
            self.logger.log(ErrorLog(error))
        raise error
