"""
Error types for Mindmark.

Every failure raised by the conversion core derives from ConversionError and
carries a ``kind`` tag so callers can report it without inspecting internals.
"""

from pathlib import Path
from typing import Optional, Union


class ConversionError(Exception):
    """
    Base class for all conversion failures.
    """

    kind = "ConversionError"

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None


class MissingPayloadError(ConversionError):
    """The archive has no locatable content.json entry."""

    kind = "MissingPayload"

    def __init__(self, path: Union[str, Path], reason: str = "content.json not found in archive"):
        super().__init__(f"{reason}: {path}", path)
        self.reason = reason


class MalformedPayloadError(ConversionError):
    """The content.json entry exists but cannot be extracted or decoded."""

    kind = "MalformedPayload"

    def __init__(self, path: Union[str, Path], detail: str):
        super().__init__(f"content.json in {path} is malformed: {detail}", path)
        self.detail = detail


class InvalidFormatError(ConversionError):
    """The decoded payload or the requested render mode is unusable."""

    kind = "InvalidFormat"


class SourceReadError(ConversionError):
    """The source archive could not be read from disk."""

    kind = "IOError"

    def __init__(self, path: Union[str, Path], detail: str):
        super().__init__(f"Cannot read {path}: {detail}", path)
        self.detail = detail
