"""
errors.py

Exceptions raised by huffcode.
"""


from typing import Optional


class HuffmanCodeError(ValueError):
    """Base class for huffcode errors."""


class UnknownSymbolError(HuffmanCodeError, KeyError):
    """
    Raised when encoding a symbol that has no codeword.
    """
    def __init__(self, symbol: str, position: Optional[int] = None) -> None:
        self.symbol = symbol
        self.position = position
        if position is None:
            message = f"Symbol {symbol!r} is not in the code table"
        else:
            message = f"Symbol {symbol!r} at position {position} is not in the code table"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would quote the message
        return str(self.args[0])


class MalformedBitstringError(HuffmanCodeError):
    """
    Raised when a bitstring cannot be decoded.
    """
    def __init__(self, message: str, position: Optional[int] = None) -> None:
        self.position = position
        super().__init__(message)


class EmptyDistributionError(HuffmanCodeError):
    """Raised when a tree is requested for an empty frequency map."""
