"""
models.py

The shared objects used in huffcode.

"""


from types import MappingProxyType
from typing import Optional, Iterator, Iterable, List, Dict, Mapping, Tuple

# A symbol is a single character of the input text.
Symbol = str

# Read-only mapping from symbol to occurrence count.
FrequencyMap = Mapping[Symbol, int]


class HuffmanNode:
    """
    A node of a Huffman tree.

    Leaves carry a symbol and no children. Internal nodes carry no symbol and
    exactly two children whose weights sum to the node's weight.
    """
    def __init__(self, weight: int, symbol: Optional[Symbol] = None,
                 left: Optional['HuffmanNode'] = None, right: Optional['HuffmanNode'] = None) -> None:
        if symbol is None and (left is None or right is None):
            raise ValueError("Internal node must have two children")
        if symbol is not None and (left is not None or right is not None):
            raise ValueError("Leaf node cannot have children")
        self.weight: int = weight
        self.symbol: Optional[Symbol] = symbol
        self.left: Optional[HuffmanNode] = left
        self.right: Optional[HuffmanNode] = right

    @classmethod
    def leaf(cls, symbol: Symbol, weight: int) -> 'HuffmanNode':
        return cls(weight, symbol=symbol)

    @classmethod
    def merge(cls, left: 'HuffmanNode', right: 'HuffmanNode') -> 'HuffmanNode':
        return cls(left.weight + right.weight, left=left, right=right)

    @property
    def is_leaf(self) -> bool:
        return self.symbol is not None

    def __repr__(self) -> str:
        if self.is_leaf:
            return f"HuffmanNode({self.symbol!r}, {self.weight})"
        return f"HuffmanNode({self.weight}, left={self.left!r}, right={self.right!r})"


class SymbolFrequency:
    """
    Represents a symbol together with its frequency.
    """
    def __init__(self, symbol: Symbol, frequency: int) -> None:
        self.symbol: Symbol = symbol
        self.frequency: int = frequency

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SymbolFrequency):
            return self.symbol == other.symbol and self.frequency == other.frequency
        return False

    def __str__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"

    def __repr__(self) -> str:
        return f"[{self.symbol!r}, {self.frequency}]"


class CodeTable:
    """
    Read-only mapping from each symbol to its codeword.
    """
    def __init__(self, codes: Optional[Mapping[Symbol, str]] = None) -> None:
        self._codes: Mapping[Symbol, str] = MappingProxyType(dict(codes or {}))

    def get_codeword(self, symbol: Symbol) -> str:
        """
        Get the codeword of a symbol.

        Args:
            symbol (Symbol): The symbol to look up.

        Returns:
            str: The codeword as a string of '0' and '1'.

        Raises:
            KeyError: If the symbol has no codeword.
        """
        return self._codes[symbol]

    def contains(self, symbol: Symbol) -> bool:
        """
        Check if the symbol has a codeword.

        Args:
            symbol (Symbol): The symbol to check.

        Returns:
            bool: True if present, False otherwise.
        """
        return symbol in self._codes

    def get_size(self) -> int:
        """
        Get the number of symbols in the table.

        Returns:
            int: Number of symbols.
        """
        return len(self._codes)

    def codewords(self) -> List[str]:
        return list(self._codes.values())

    def items(self) -> Iterable[Tuple[Symbol, str]]:
        return self._codes.items()

    def as_dict(self) -> Dict[Symbol, str]:
        return dict(self._codes)

    def __getitem__(self, symbol: Symbol) -> str:
        return self._codes[symbol]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._codes

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __eq__(self, other: object) -> bool:
        """
        Compare this table with another for equality.

        Args:
            other (object): Another CodeTable instance.

        Returns:
            bool: True if both map the same symbols to the same codewords.
        """
        if not isinstance(other, CodeTable):
            return False
        return dict(self._codes) == dict(other._codes)

    def __str__(self) -> str:
        entries = ", ".join(f"{symbol!r}: {code}" for symbol, code in self._codes.items())
        return f"CodeTable({{{entries}}})"

    def __repr__(self) -> str:
        return self.__str__()
