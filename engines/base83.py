"""Base-83 integer encoding used by the hash string."""

from utils.constants import BASE83_ALPHABET
from models.errors import InvalidSymbol

_INDEX = {char: i for i, char in enumerate(BASE83_ALPHABET)}


def encode(value: int, length: int) -> str:
    """Encode a non-negative integer as exactly `length` base-83 digits, most significant first."""
    value = int(value)
    if value < 0:
        raise ValueError(f"Cannot base-83 encode negative value {value}")
    if length < 1:
        raise ValueError(f"Length must be >= 1, got {length}")

    digits = []
    for i in range(1, length + 1):
        digit = (value // 83 ** (length - i)) % 83
        digits.append(BASE83_ALPHABET[digit])
    return "".join(digits)


def decode(text: str) -> int:
    """Decode a base-83 string back to an integer."""
    value = 0
    for position, char in enumerate(text):
        index = _INDEX.get(char)
        if index is None:
            raise InvalidSymbol(char, position)
        value = value * 83 + index
    return value


def is_valid(text: str) -> bool:
    return all(char in _INDEX for char in text)
