"""
Conversion outcome models for Mindmark.

This module defines the per-file result records collected by the batch runner
and rendered in the final report.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class ConversionStatus(str, Enum):
    """Outcome of converting one archive."""

    SUCCESS = "success"
    FAILED = "failed"


class ConversionResult(BaseModel):
    """
    Represents the outcome of converting a single archive.
    """

    source_path: str = Field(
        ...,
        description="Path of the source archive"
    )

    name: str = Field(
        ...,
        description="Display name of the archive (file stem)"
    )

    output_path: str = Field(
        ...,
        description="Path the Markdown output is (or would have been) written to"
    )

    status: ConversionStatus = Field(
        ...,
        description="Whether the conversion succeeded"
    )

    file_size: Optional[int] = Field(
        None,
        description="Size of the source archive in bytes"
    )

    elapsed_ms: Optional[int] = Field(
        None,
        description="Wall-clock conversion time in milliseconds"
    )

    error_kind: Optional[str] = Field(
        None,
        description="Error tag (MissingPayload, MalformedPayload, InvalidFormat, IOError)"
    )

    error_message: Optional[str] = Field(
        None,
        description="Human-readable failure message"
    )

    @property
    def succeeded(self) -> bool:
        return self.status == ConversionStatus.SUCCESS
