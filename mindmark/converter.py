"""
Conversion pipeline for Mindmark.

Composes the XMind importer with the Markdown renderer, and writes the result
to disk for callers that want a file rather than a string.
"""

from pathlib import Path
from typing import Optional, Union

from .exceptions import MalformedPayloadError
from .importers import XMindImporter
from .models import RenderMode
from .renderers import resolve_mode, xmind_to_markdown


def convert_xmind_to_markdown(xmind_path: Union[str, Path],
                              mode: Optional[Union[str, RenderMode]] = None) -> str:
    """
    Read an .xmind archive and render it as Markdown.

    Args:
        xmind_path: Path to the .xmind archive
        mode: "heading" (default) or "list"

    Returns:
        The Markdown text

    Raises:
        ConversionError: Any of MissingPayloadError, MalformedPayloadError,
            InvalidFormatError or SourceReadError
    """
    render_mode = resolve_mode(mode)
    content = XMindImporter(xmind_path).read_content()
    return xmind_to_markdown(content, render_mode)


def convert_file(xmind_path: Union[str, Path], output_path: Union[str, Path],
                 mode: Optional[Union[str, RenderMode]] = None) -> Path:
    """
    Convert an .xmind archive and write the Markdown to output_path.

    The output directory is created if it doesn't exist.

    Args:
        xmind_path: Path to the .xmind archive
        output_path: Destination Markdown file
        mode: "heading" (default) or "list"

    Returns:
        The path written to
    """
    markdown = convert_xmind_to_markdown(xmind_path, mode)

    # Encoded before opening so a lone surrogate never leaves a partial file.
    try:
        data = markdown.encode('utf-8')
    except UnicodeEncodeError as e:
        raise MalformedPayloadError(xmind_path, f"text cannot be written as UTF-8: {e}") from e

    file_path = Path(output_path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with open(file_path, 'wb') as f:
        f.write(data)

    return file_path
