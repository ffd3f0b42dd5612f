"""
XMind importer for Mindmark.

An .xmind file is a zip archive whose outline lives in a single content.json
entry. This importer opens the archive, locates that entry and decodes it.
"""

import json
import zipfile
import zlib
from pathlib import Path
from typing import Any, Union

from ..exceptions import MalformedPayloadError, MissingPayloadError, SourceReadError
from .base import BaseImporter

CONTENT_ENTRY = "content.json"


class XMindImporter(BaseImporter):
    """
    Importer for zipped XMind documents.
    """

    def __init__(self, xmind_path: Union[str, Path]):
        """
        Initialize the importer.

        Args:
            xmind_path: Path to the .xmind archive
        """
        self.xmind_path = Path(xmind_path)

    def read_content(self) -> Any:
        """
        Read content.json from the archive and decode it.

        Returns:
            The decoded JSON value, unvalidated

        Raises:
            SourceReadError: If the file cannot be read
            MissingPayloadError: If the file is not a zip archive or lacks content.json
            MalformedPayloadError: If content.json is not valid UTF-8 JSON
        """
        raw = self._read_entry()

        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise MalformedPayloadError(self.xmind_path, str(e)) from e

        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedPayloadError(self.xmind_path, str(e)) from e

    def _read_entry(self) -> bytes:
        try:
            archive = zipfile.ZipFile(self.xmind_path)
        except zipfile.BadZipFile as e:
            raise MissingPayloadError(self.xmind_path, f"not a zip archive ({e})") from e
        except OSError as e:
            raise SourceReadError(self.xmind_path, e.strerror or str(e)) from e

        with archive:
            if CONTENT_ENTRY not in archive.namelist():
                raise MissingPayloadError(self.xmind_path)
            # Present but unextractable: bad CRC, truncated or corrupt deflate
            # data, encryption or an unsupported compression method.
            try:
                return archive.read(CONTENT_ENTRY)
            except (zipfile.BadZipFile, zlib.error, EOFError, RuntimeError, NotImplementedError) as e:
                raise MalformedPayloadError(self.xmind_path, f"cannot extract {CONTENT_ENTRY}: {e}") from e
            except OSError as e:
                raise SourceReadError(self.xmind_path, e.strerror or str(e)) from e


def read_xmind_content(xmind_path: Union[str, Path]) -> Any:
    """Read and decode content.json from an .xmind archive."""
    return XMindImporter(xmind_path).read_content()
