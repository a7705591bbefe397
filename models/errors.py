"""Codec exceptions, shared by engines, models and utils."""


class BlurHashError(Exception):
    """Base class for codec errors."""


class InvalidComponentRange(BlurHashError, ValueError):
    """Component count outside [1, 9]."""


class MalformedHash(BlurHashError, ValueError):
    """Hash string with the wrong length or foreign characters."""


class InvalidSymbol(MalformedHash):
    """Character outside the base-83 alphabet."""

    def __init__(self, symbol: str, position: int):
        super().__init__(f"Invalid base-83 character {symbol!r} at position {position}")
        self.symbol = symbol
        self.position = position


class ThreadFailure(BlurHashError, RuntimeError):
    """A transform worker did not complete normally."""


class ImageIOError(BlurHashError, OSError):
    """Image file could not be read or written."""
