class CoordinateParseError(ValueError):
    """Base exception for coordinate decoding failures."""


class NoMatchError(CoordinateParseError):
    """Raised when the input does not have the expected shape."""


class OutOfRangeError(CoordinateParseError):
    """Raised when a value was decoded but is outside of its valid range."""
