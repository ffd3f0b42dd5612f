"""Batch conversion: discovery, bounded-concurrency runner and reporting."""

from .discovery import collect_xmind_files, get_markdown_output_path
from .report import ConversionReporter
from .runner import BatchRunner

__all__ = ["collect_xmind_files", "get_markdown_output_path", "ConversionReporter", "BatchRunner"]
