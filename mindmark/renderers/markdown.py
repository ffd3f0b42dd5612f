"""
Markdown renderer for Mindmark.

Turns a normalized outline into Markdown, either as nested headings or as an
indented bullet list. Sheets are joined with horizontal rules; multi-sheet
documents get one level-1 heading per titled sheet.
"""

from typing import Any, List, Optional, Union

from ..exceptions import InvalidFormatError
from ..models import Document, RenderMode, Sheet, Topic

MAX_HEADING_LEVEL = 6
SHEET_SEPARATOR = "\n---\n\n"


def resolve_mode(mode: Optional[Union[str, RenderMode]] = None) -> RenderMode:
    """
    Turn a caller-supplied mode into a RenderMode.

    Args:
        mode: "heading", "list", a RenderMode, or None for the default

    Returns:
        The resolved RenderMode (HEADING when mode is None)

    Raises:
        InvalidFormatError: If mode is any other value
    """
    if mode is None:
        return RenderMode.HEADING
    if isinstance(mode, RenderMode):
        return mode
    try:
        return RenderMode(mode)
    except ValueError:
        raise InvalidFormatError(
            f"Unknown render mode {mode!r}; expected 'heading' or 'list'"
        ) from None


def format_topic_line(title: str, level: int, mode: RenderMode) -> str:
    """Render a single topic line at the given depth."""
    if mode == RenderMode.HEADING:
        return f"{'#' * min(level, MAX_HEADING_LEVEL)} {title}\n\n"
    return f"{'  ' * max(0, level - 1)}- {title}\n"


def topic_to_markdown(topic: Topic, level: int = 1,
                      mode: Optional[Union[str, RenderMode]] = None) -> str:
    """
    Render a topic and all of its descendants, depth-first pre-order.

    Args:
        topic: The topic to render
        level: Depth of the topic (1 for a root rendered on its own)
        mode: Render mode; defaults to heading

    Returns:
        Markdown text
    """
    render_mode = resolve_mode(mode)
    parts: List[str] = []

    stack = [(topic, level)]
    while stack:
        node, depth = stack.pop()
        parts.append(format_topic_line(node.title, depth, render_mode))
        for child in reversed(node.children):
            stack.append((child, depth + 1))

    return "".join(parts)


def sheet_to_markdown(sheet: Sheet, with_title: bool,
                      mode: Optional[Union[str, RenderMode]] = None) -> str:
    """
    Render one sheet.

    Args:
        sheet: The sheet to render
        with_title: Emit the sheet title as a level-1 heading and shift the
            root topic down one level (only when the title is non-empty)
        mode: Render mode; defaults to heading

    Returns:
        Markdown text for the sheet
    """
    render_mode = resolve_mode(mode)

    if with_title and sheet.title:
        markdown = f"# {sheet.title}\n\n"
        root_level = 2
    else:
        markdown = ""
        root_level = 1

    if sheet.root_topic is not None:
        markdown += topic_to_markdown(sheet.root_topic, root_level, render_mode)

    return markdown


def document_to_markdown(document: Document,
                         mode: Optional[Union[str, RenderMode]] = None) -> str:
    """
    Render every sheet of a document, separated by horizontal rules.
    """
    render_mode = resolve_mode(mode)
    multi_sheet = len(document.sheets) > 1

    parts: List[str] = []
    for index, sheet in enumerate(document.sheets):
        if index > 0:
            parts.append(SHEET_SEPARATOR)
        parts.append(sheet_to_markdown(sheet, multi_sheet, render_mode))

    return "".join(parts)


def xmind_to_markdown(content: Any, mode: Optional[Union[str, RenderMode]] = None) -> str:
    """
    Convert decoded XMind content into Markdown.

    Args:
        content: A decoded content.json value or an already built Document
        mode: "heading" (default) or "list"

    Returns:
        Markdown text

    Raises:
        InvalidFormatError: If content is not a non-empty list of sheets or
            mode is not a recognized value
    """
    render_mode = resolve_mode(mode)
    document = content if isinstance(content, Document) else Document.from_payload(content)
    return document_to_markdown(document, render_mode)
