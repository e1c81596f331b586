"""
Exception classes for bigtext.
"""

from typing import Any, Optional


class BigTextError(Exception):
    """Base exception class for bigtext."""
    pass


class GlyphSourceError(BigTextError):
    """Raised when a glyph definition source cannot be turned into a table."""
    pass


class MalformedSource(GlyphSourceError):
    """Raised when a glyph source is not an object of string arrays."""
    pass


class InvalidKey(GlyphSourceError):
    """Raised when a glyph source key does not name a character."""

    def __init__(self, key: str, message: Optional[str] = None):
        self.key = key
        super().__init__(message or f"Invalid glyph key: {key!r}")


class InvalidRowValue(GlyphSourceError):
    """Raised when a glyph row is not a string."""

    def __init__(self, key: str, index: int, value: Any):
        self.key = key
        self.index = index
        self.value = value
        super().__init__(
            f"Row {index} of glyph {key!r} must be a string, "
            f"got {type(value).__name__}"
        )


class SinkWriteFailure(BigTextError):
    """Raised when the output sink rejects a write during rendering."""
    pass


class UnknownCharset(BigTextError):
    """Raised when a named character set does not exist."""

    def __init__(self, name: str, choices=()):
        self.name = name
        self.choices = tuple(choices)
        message = f"Unknown charset: {name}"
        if self.choices:
            message += f" (choose from {', '.join(self.choices)})"
        super().__init__(message)


class ConfigError(BigTextError):
    """Raised when there is a configuration error."""
    pass
