#!/usr/bin/env python3
"""
Mindmark - XMind to Markdown Converter

Main entry point for Mindmark. Asks for a directory, lets the user pick which
.xmind files to convert and in which style, converts them with a bounded
worker pool and prints a per-file report.
"""

import logging
import sys
import argparse
from pathlib import Path
from typing import List, Optional

from mindmark import __version__
from mindmark.batch import BatchRunner, ConversionReporter, collect_xmind_files
from mindmark.config import config
from mindmark.exceptions import InvalidFormatError
from mindmark.models import ConversionResult, RenderMode
from mindmark.renderers import resolve_mode

MODE_CHOICES = {
    "1": RenderMode.HEADING,
    "2": RenderMode.LIST,
}


def setup_logging():
    """Configure logging for the application."""
    # Root logger already configured: basicConfig would ignore new handlers
    if logging.getLogger().handlers:
        return

    level = getattr(logging, config.get("logging.level", "INFO").upper())
    format_str = config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    error_handler = logging.FileHandler(config.error_log_filename, encoding='utf-8')
    error_handler.setLevel(logging.ERROR)

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
            logging.FileHandler(config.log_filename, encoding='utf-8'),
            error_handler
        ]
    )


def prompt_directory(default: str) -> Path:
    """
    Ask for the directory to search until an existing one is given.

    Args:
        default: Directory used when the answer is empty

    Returns:
        The chosen directory
    """
    while True:
        answer = input(f"Directory to process [{default}]: ").strip() or default
        path = Path(answer).expanduser()
        if path.is_dir():
            return path
        print("Please enter a valid directory path.")


def parse_selection(answer: str, count: int) -> List[int]:
    """
    Parse a file selection such as "1,3-5" into zero-based indices.

    "0" or "all" selects every file. Numbers are 1-based as displayed.

    Args:
        answer: The user's input
        count: Number of files on offer

    Returns:
        Sorted, de-duplicated zero-based indices

    Raises:
        ValueError: If the selection is empty, malformed or out of range
    """
    tokens = [token.strip() for token in answer.replace(" ", ",").split(",") if token.strip()]
    if not tokens:
        raise ValueError("You must select at least one file.")

    if any(token.lower() in ("0", "all") for token in tokens):
        return list(range(count))

    selected = set()
    for token in tokens:
        if "-" in token:
            start_text, _, end_text = token.partition("-")
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError(f"Invalid range: {token}")
            numbers = range(start, end + 1)
        else:
            numbers = [int(token)]

        for number in numbers:
            if not 1 <= number <= count:
                raise ValueError(f"No file numbered {number}")
            selected.add(number - 1)

    return sorted(selected)


def prompt_file_selection(files: List[Path], root: Path) -> List[Path]:
    """
    Show the discovered files and ask which to convert.

    Args:
        files: Discovered archives
        root: Directory they were discovered under

    Returns:
        The selected archives
    """
    print("\n  0. All files")
    for number, path in enumerate(files, 1):
        print(f"{number:>3}. {path.relative_to(root)}")

    while True:
        answer = input("\nFiles to convert (e.g. 1,3-5 or 0 for all): ")
        try:
            return [files[index] for index in parse_selection(answer, len(files))]
        except ValueError as e:
            print(f"Invalid selection: {e}")


def prompt_mode(default: RenderMode) -> RenderMode:
    """
    Ask for the rendering mode.

    Returns:
        The chosen RenderMode; an empty answer keeps the default
    """
    print("\nConversion mode:")
    print("  1. Heading mode (nested # headings)")
    print("  2. List mode (indented - bullets)")

    default_choice = "1" if default == RenderMode.HEADING else "2"
    while True:
        answer = input(f"Choose mode [{default_choice}]: ").strip().lower() or default_choice
        if answer in MODE_CHOICES:
            return MODE_CHOICES[answer]
        if answer in (mode.value for mode in RenderMode):
            return RenderMode(answer)
        print("Please enter 1 or 2")


def run_conversion(files: List[Path], root: Path, mode: RenderMode,
                   output_dir: Optional[str] = None, workers: Optional[int] = None,
                   show_progress: bool = True) -> List[ConversionResult]:
    """
    Convert the selected files and print the results table.

    Args:
        files: Archives to convert
        root: Directory they were discovered under
        mode: Rendering mode
        output_dir: Destination directory (defaults to config value)
        workers: Concurrency cap (defaults to config value)
        show_progress: Draw the progress bar

    Returns:
        One result per file
    """
    reporter = ConversionReporter(show_progress=show_progress)
    runner = BatchRunner(
        mode=mode,
        max_workers=workers,
        output_dir=output_dir,
        progress_callback=reporter.advance
    )

    logging.info(f"Converting {len(files)} file(s) in {mode.value} mode into {runner.output_dir}")
    with reporter.track(len(files)):
        results = runner.run(files, root)

    failures = [result for result in results if not result.succeeded]
    for result in failures:
        logging.error(f"Error processing file {result.source_path}: "
                      f"[{result.error_kind}] {result.error_message}")

    reporter.print_table(results)
    logging.info(f"Conversion completed. {len(results) - len(failures)} succeeded, {len(failures)} failed.")
    return results


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Mindmark - convert XMind files to Markdown",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py                                   # Fully interactive
  python main.py --dir ./maps                      # Pick files from ./maps
  python main.py --dir ./maps --all --mode list    # Convert everything as bullet lists
  python main.py --dir ./maps --all --output-dir ./notes --workers 2
        """
    )

    parser.add_argument(
        "--dir",
        type=str,
        help="Directory to search for .xmind files (prompted if omitted)"
    )

    parser.add_argument(
        "--all",
        action="store_true",
        help="Convert every file found without asking"
    )

    parser.add_argument(
        "--mode",
        type=str,
        help="Conversion mode: heading or list (prompted if omitted)"
    )

    parser.add_argument(
        "--output-dir",
        type=str,
        help="Directory for generated Markdown files (default from config)"
    )

    parser.add_argument(
        "--workers",
        type=int,
        help="Maximum number of files converted at once (default from config)"
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to a YAML configuration file (default: config.yaml)"
    )

    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Do not draw the progress bar"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Mindmark {__version__}"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_arguments(argv)

    if args.config:
        config.config_path = Path(args.config)
        config.reload()

    setup_logging()

    try:
        mode = resolve_mode(args.mode) if args.mode is not None else None

        if args.dir:
            root = Path(args.dir).expanduser()
            if not root.is_dir():
                logging.error(f"Not a directory: {root}")
                return 2
        else:
            root = prompt_directory(config.input_directory)

        files = collect_xmind_files(root, config.source_extension)
        if not files:
            logging.info(f"No {config.source_extension} files found in {root}")
            return 0

        logging.info(f"Found {len(files)} {config.source_extension} file(s) in {root}")

        selected = files if args.all else prompt_file_selection(files, root)
        if mode is None:
            mode = prompt_mode(resolve_mode(config.default_mode))

        results = run_conversion(
            selected,
            root,
            mode,
            output_dir=args.output_dir,
            workers=args.workers,
            show_progress=not args.no_progress
        )

    except InvalidFormatError as e:
        logging.error(str(e))
        return 2

    except ValueError as e:
        logging.error(f"Invalid settings: {e}")
        return 2

    except (KeyboardInterrupt, EOFError):
        logging.info("Conversion interrupted by user")
        print("\nConversion interrupted.")
        return 130

    return 0 if all(result.succeeded for result in results) else 1


if __name__ == "__main__":
    sys.exit(main())
