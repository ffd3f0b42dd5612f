"""Data models for Mindmark."""

from .outline import Document, RenderMode, Sheet, Topic
from .results import ConversionResult, ConversionStatus

__all__ = [
    "Document",
    "RenderMode",
    "Sheet",
    "Topic",
    "ConversionResult",
    "ConversionStatus"
]
