"""Outline importers for supported source formats."""

from .base import BaseImporter
from .xmind import XMindImporter, read_xmind_content

__all__ = ["BaseImporter", "XMindImporter", "read_xmind_content"]
