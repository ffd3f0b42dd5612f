"""
Source discovery for batch conversion.
"""

from pathlib import Path
from typing import List, Union


def collect_xmind_files(root: Union[str, Path], extension: str = ".xmind") -> List[Path]:
    """
    Recursively collect every file under root with the given extension.

    Args:
        root: Directory to search
        extension: File extension to match, including the dot

    Returns:
        Matching paths, sorted

    Raises:
        NotADirectoryError: If root is not a directory
    """
    root_path = Path(root)
    if not root_path.is_dir():
        raise NotADirectoryError(f"Not a directory: {root_path}")

    return sorted(
        path for path in root_path.rglob(f"*{extension}")
        if path.is_file() and path.suffix == extension
    )


def get_markdown_output_path(source: Union[str, Path], root: Union[str, Path],
                             output_dir: Union[str, Path], extension: str = ".md") -> Path:
    """
    Determine where the Markdown for a source archive is written.

    The source's position relative to root is kept, so archives with the same
    name in different folders never share an output file.

    Args:
        source: The source archive
        root: The directory the archive was discovered under
        output_dir: Directory receiving Markdown files
        extension: Output file extension

    Returns:
        The destination path
    """
    source_path = Path(source)
    try:
        relative_parent = source_path.parent.relative_to(root)
    except ValueError:
        relative_parent = Path()

    return Path(output_dir) / relative_parent / f"{source_path.stem}{extension}"
