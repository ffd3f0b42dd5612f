"""
Outline data models for Mindmark.

This module defines the typed tree that every decoded mind-map payload is
normalized into before rendering. Titles are always strings and children are
always lists, so the renderers never need to branch on missing values.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..exceptions import InvalidFormatError


class RenderMode(str, Enum):
    """Markdown rendering strategy."""

    HEADING = "heading"
    LIST = "list"


class Topic(BaseModel):
    """
    A single node of the outline tree.
    """

    title: str = Field(
        default="",
        description="The topic text; missing or non-string titles become an empty string"
    )

    children: List['Topic'] = Field(
        default_factory=list,
        description="Attached child topics in visual order"
    )

    @field_validator("title", mode="before")
    @classmethod
    def _normalize_title(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


class Sheet(BaseModel):
    """
    One canvas of a mind-map document.
    """

    title: str = Field(
        default="",
        description="Optional display title of the canvas"
    )

    root_topic: Optional[Topic] = Field(
        default=None,
        description="The central topic of the canvas, if present"
    )

    @field_validator("title", mode="before")
    @classmethod
    def _normalize_title(cls, value: Any) -> str:
        return value if isinstance(value, str) else ""


class Document(BaseModel):
    """
    The full outline: an ordered, non-empty list of sheets.
    """

    sheets: List[Sheet] = Field(
        ...,
        min_length=1,
        description="Sheets in canvas order"
    )

    @classmethod
    def from_payload(cls, content: Any) -> "Document":
        """
        Build a Document from a decoded content.json value.

        Args:
            content: The decoded JSON value, expected to be a list of sheet objects

        Returns:
            The normalized Document

        Raises:
            InvalidFormatError: If content is not a non-empty list
        """
        if not isinstance(content, (list, tuple)) or len(content) == 0:
            raise InvalidFormatError("Invalid XMind content: expected a non-empty list of sheets")

        sheets = []
        for raw_sheet in content:
            if not isinstance(raw_sheet, Mapping):
                sheets.append(Sheet())
                continue
            sheets.append(Sheet(
                title=raw_sheet.get("title"),
                root_topic=_build_topic_tree(raw_sheet.get("rootTopic")),
            ))

        return cls(sheets=sheets)


def _attached_children(raw_topic: Mapping) -> List[Mapping]:
    children = raw_topic.get("children")
    if not isinstance(children, Mapping):
        return []
    attached = children.get("attached")
    if not isinstance(attached, list):
        return []
    return [child for child in attached if isinstance(child, Mapping)]


def _build_topic_tree(raw_root: Any) -> Optional[Topic]:
    # Built with an explicit stack; nesting depth comes straight from the file.
    if not isinstance(raw_root, Mapping):
        return None

    root = Topic(title=raw_root.get("title"))
    pending = [(raw_root, root)]
    while pending:
        raw_topic, topic = pending.pop()
        for raw_child in _attached_children(raw_topic):
            child = Topic(title=raw_child.get("title"))
            topic.children.append(child)
            pending.append((raw_child, child))

    return root


# Enable forward references for self-referencing model
Topic.model_rebuild()
