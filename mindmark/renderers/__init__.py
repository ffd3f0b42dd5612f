"""Markdown renderers for normalized outlines."""

from .markdown import (
    document_to_markdown,
    resolve_mode,
    sheet_to_markdown,
    topic_to_markdown,
    xmind_to_markdown,
)

__all__ = [
    "document_to_markdown",
    "resolve_mode",
    "sheet_to_markdown",
    "topic_to_markdown",
    "xmind_to_markdown"
]
