"""Exceptions raised by chromalite."""


class ColorError(ValueError):
    """Base class for invalid color input."""


class FormatError(ColorError):
    """Hex string has an invalid length (not 3 or 6 digits after ``#``)."""


class ParseError(ColorError):
    """Hex string has a valid length but contains non-hex characters."""


class RangeError(ColorError):
    """Numeric channel or percentage lies outside its allowed range."""
