"""
Mindmark: XMind to Markdown converter.

Converts zipped mind-map documents into Markdown, as nested headings or as
indented bullet lists, one file or a whole directory at a time.
"""

__version__ = "0.1.0"
__author__ = "Mindmark Project"

# Import main components
from .exceptions import (
    ConversionError,
    InvalidFormatError,
    MalformedPayloadError,
    MissingPayloadError,
    SourceReadError,
)
from .models import Document, Sheet, Topic, RenderMode, ConversionResult, ConversionStatus
from .importers import BaseImporter, XMindImporter, read_xmind_content
from .renderers import xmind_to_markdown
from .converter import convert_file, convert_xmind_to_markdown
from .batch import BatchRunner, ConversionReporter, collect_xmind_files

__all__ = [
    "ConversionError",
    "InvalidFormatError",
    "MalformedPayloadError",
    "MissingPayloadError",
    "SourceReadError",
    "Document",
    "Sheet",
    "Topic",
    "RenderMode",
    "ConversionResult",
    "ConversionStatus",
    "BaseImporter",
    "XMindImporter",
    "read_xmind_content",
    "xmind_to_markdown",
    "convert_file",
    "convert_xmind_to_markdown",
    "BatchRunner",
    "ConversionReporter",
    "collect_xmind_files"
]
