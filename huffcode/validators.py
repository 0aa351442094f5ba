"""
validators.py

Shared codes for input validation in huffcode.
"""


from typing import Any

from .errors import MalformedBitstringError
from .settings import BIT_ZERO, BIT_ONE


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_symbol(symbol: Any) -> None:
    """Validate that symbol is a single character."""
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"Symbol must be a single character, got {symbol!r}")


def validate_bitstring(bits: str) -> None:
    """Validate that bits only holds '0' and '1' characters."""
    validate_type(bits, "Bitstring", str)
    for position, bit in enumerate(bits):
        if bit != BIT_ZERO and bit != BIT_ONE:
            raise MalformedBitstringError(f"Invalid bit {bit!r} at position {position}", position)
