"""Command-line interface for the notemark note converter.

Converts an editor JSON document to Markdown, HTML or plain text.

Examples
--------
Convert a note to Markdown on stdout::

    $ notemark note.json --title "Meeting notes"

Produce a standalone HTML page::

    $ notemark note.json --to html --out note.html

Export into a directory, naming the file after the title::

    $ notemark note.json --to html --title "Q3 plan" --export-dir ./exports

Read from stdin and render with Rich::

    $ cat note.json | notemark - --rich

"""

import argparse
import logging
import os
import sys

from notemark import __version__
from notemark.cli.config import build_options_from_config, load_config_with_priority
from notemark.constants import CONFIG_ENV_VAR
from notemark.exceptions import (
    FileError,
    FormatError,
    NotemarkError,
    OutputWriteError,
    ParsingError,
    ValidationError,
)
from notemark.logging_utils import configure_logging

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2
EXIT_FILE_ERROR = 3
EXIT_PARSING_ERROR = 4

__all__ = [
    "main",
    "create_parser",
    "get_exit_code_for_exception",
    "EXIT_SUCCESS",
    "EXIT_ERROR",
    "EXIT_VALIDATION_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_PARSING_ERROR",
]


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``notemark`` command."""
    parser = argparse.ArgumentParser(
        prog="notemark",
        description="Convert rich-text note documents (editor JSON) to Markdown, HTML or plain text.",
    )
    parser.add_argument("input", help="Note document as a JSON file, or '-' to read from stdin")
    parser.add_argument(
        "--to",
        choices=["markdown", "html", "text"],
        default="markdown",
        help="Output format (default: markdown)",
    )
    parser.add_argument("--title", help="Note title, rendered as a top-level heading")
    parser.add_argument(
        "--no-styles",
        action="store_true",
        help="For HTML output, emit a fragment without the document wrapper and stylesheet",
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument("--out", "-o", help="Write output to this file instead of stdout")
    output_group.add_argument(
        "--export-dir",
        help="Write output into this directory, naming the file after the title",
    )
    parser.add_argument("--rich", action="store_true", help="Render terminal output with Rich formatting")

    parser.add_argument(
        "--config",
        help=f"Configuration file (.toml, .yaml, .json). Defaults to ${CONFIG_ENV_VAR} or auto-discovery",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    ``--trace`` takes precedence over ``--verbose``, which only applies
    when ``--log-level`` was left at its default.
    """
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, FormatError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileError, OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    return EXIT_ERROR


def main(args: list[str] | None = None) -> int:
    """Execute the ``notemark`` command and return its exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    if parsed_args.rich and (parsed_args.out or parsed_args.export_dir):
        logger.warning("--rich only affects terminal output; ignoring it")

    try:
        config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        options = build_options_from_config(config)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    # Imported here so that --help and --version stay fast
    from notemark.cli.processors import process_input

    try:
        process_input(parsed_args, options)
    except (NotemarkError, OSError) as e:
        exit_code = get_exit_code_for_exception(e)
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return exit_code

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
