"""Error kinds raised by the conversion engine."""


class SchemeError(Exception):
    """Base class for every failure of a single conversion."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message


class UnsupportedFormat(SchemeError):
    """Unknown format tag, or no decoder/encoder exists for it."""


class InvalidFormat(SchemeError):
    """Input text does not match the structure expected by its format."""


class EncodingFailure(SchemeError):
    """Input bytes could not be decoded as text."""
