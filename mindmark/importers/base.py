"""
Base importer interface for Mindmark.

This module defines the abstract interface that all outline importers must implement.
"""

from abc import ABC, abstractmethod
from typing import Any

from ..models import Document


class BaseImporter(ABC):
    """
    Abstract base class for all outline importers.

    Each importer reads one source document and exposes both the raw decoded
    payload and the normalized Document built from it.
    """

    @abstractmethod
    def read_content(self) -> Any:
        """
        Read and decode the source payload without validating its structure.

        Returns:
            The decoded payload as-is
        """
        pass

    def get_document(self) -> Document:
        """
        Read the source and normalize it into a Document.

        Returns:
            The normalized Document

        Raises:
            InvalidFormatError: If the payload is not a non-empty list of sheets
        """
        return Document.from_payload(self.read_content())
