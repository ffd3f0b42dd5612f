"""
Batch runner for Mindmark.

This module converts many archives with a bounded worker pool. Each file is an
independent task: a failure is recorded as a ConversionResult and never stops
the remaining conversions.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Tuple, Union

from ..config import config
from ..converter import convert_file
from ..exceptions import ConversionError
from ..models import ConversionResult, ConversionStatus, RenderMode
from ..renderers import resolve_mode
from .discovery import get_markdown_output_path

ProgressCallback = Callable[[ConversionResult], None]


class BatchRunner:
    """
    Converts a selection of archives with at most ``max_workers`` running at once.
    """

    def __init__(self, mode: Optional[Union[str, RenderMode]] = None,
                 max_workers: Optional[int] = None,
                 output_dir: Optional[Union[str, Path]] = None,
                 output_extension: Optional[str] = None,
                 progress_callback: Optional[ProgressCallback] = None):
        """
        Initialize the batch runner.

        Args:
            mode: Render mode for every file (defaults to heading)
            max_workers: Concurrency cap (defaults to config value)
            output_dir: Directory receiving Markdown files (defaults to config value)
            output_extension: Extension of generated files (defaults to config value)
            progress_callback: Called with each result as soon as its file finishes

        Raises:
            InvalidFormatError: If mode is not a recognized value
            ValueError: If max_workers is less than 1
        """
        self.mode = resolve_mode(mode)
        self.max_workers = max_workers if max_workers is not None else config.max_workers
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
        self.output_dir = Path(output_dir if output_dir is not None else config.output_directory)
        self.output_extension = output_extension or config.output_extension
        self.progress_callback = progress_callback

    def plan(self, sources: Sequence[Union[str, Path]],
             root: Union[str, Path]) -> List[Tuple[Path, Path]]:
        """
        Pair every source with its destination path.
        """
        return [
            (Path(source), get_markdown_output_path(source, root, self.output_dir, self.output_extension))
            for source in sources
        ]

    def run(self, sources: Sequence[Union[str, Path]],
            root: Union[str, Path]) -> List[ConversionResult]:
        """
        Convert every source archive.

        Args:
            sources: Archives to convert
            root: Directory the archives were discovered under

        Returns:
            One result per source, in the order the sources were given
        """
        jobs = self.plan(sources, root)
        if not jobs:
            return []

        logging.debug(f"Converting {len(jobs)} file(s) in {self.mode.value} mode "
                      f"with up to {self.max_workers} worker(s)")

        results: List[Optional[ConversionResult]] = [None] * len(jobs)
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self.convert_one, source, output_path): index
                for index, (source, output_path) in enumerate(jobs)
            }
            for future in as_completed(futures):
                result = future.result()
                results[futures[future]] = result
                if self.progress_callback is not None:
                    self.progress_callback(result)

        succeeded = sum(1 for result in results if result.succeeded)
        logging.debug(f"Batch completed: {succeeded} succeeded, {len(results) - succeeded} failed")
        return results

    def convert_one(self, source: Path, output_path: Path) -> ConversionResult:
        """
        Convert a single archive and record the outcome.

        Never raises: every failure is returned as a failed result so the
        remaining files keep converting.
        """
        start_time = time.perf_counter()
        file_size = None

        try:
            file_size = source.stat().st_size
            convert_file(source, output_path, self.mode)
        except ConversionError as e:
            return self._failure(source, output_path, e.kind, e.message, file_size, start_time)
        except OSError as e:
            return self._failure(source, output_path, "IOError", str(e), file_size, start_time)
        except Exception as e:
            logging.error(f"Unexpected error converting {source}: {e}", exc_info=True)
            return self._failure(source, output_path, type(e).__name__, str(e), file_size, start_time)

        elapsed_ms = int((time.perf_counter() - start_time) * 1000)
        logging.debug(f"Converted {source} -> {output_path} in {elapsed_ms} ms")
        return ConversionResult(
            source_path=str(source),
            name=source.stem,
            output_path=str(output_path),
            status=ConversionStatus.SUCCESS,
            file_size=file_size,
            elapsed_ms=elapsed_ms,
        )

    @staticmethod
    def _failure(source: Path, output_path: Path, kind: str, message: str,
                 file_size: Optional[int], start_time: float) -> ConversionResult:
        logging.debug(f"Failed {source}: [{kind}] {message}")
        return ConversionResult(
            source_path=str(source),
            name=source.stem,
            output_path=str(output_path),
            status=ConversionStatus.FAILED,
            file_size=file_size,
            elapsed_ms=int((time.perf_counter() - start_time) * 1000),
            error_kind=kind,
            error_message=message,
        )
