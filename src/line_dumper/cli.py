"""Command-line interface for line-dumper."""

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import BinaryIO, NoReturn

from line_dumper.dump import dump_file
from line_dumper.errors import LineDumperError, UsageError
from line_dumper.reader.chunks import parse_buffer_size

logger = logging.getLogger(__name__)

DEFAULT_PROG = "line-dumper"

# Program name plus filename and buffer_size.
EXPECTED_ARGC = 3


class UsageParser(argparse.ArgumentParser):
    """Argument parser that raises UsageError instead of exiting."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure logging to write to stderr."""
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser(prog: str = DEFAULT_PROG) -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = UsageParser(
        prog=prog,
        description="Print a file to stdout using line-bounded reads of a fixed buffer size.",
        add_help=False,
    )

    parser.add_argument(
        "filename",
        help="Path to the file to print",
    )

    # Kept as text so invalid values surface as a buffer size error, not a usage error.
    parser.add_argument(
        "buffer_size",
        help="Read buffer size in bytes; each read returns at most buffer_size - 1 bytes",
    )

    return parser


def usage_line(prog: str) -> str:
    return f"Usage: {prog} <filename> <buffer_size>"


def _report(out: BinaryIO, message: str) -> None:
    out.write(f"{message}\n".encode())
    out.flush()


def run(argv: Sequence[str], stdout: BinaryIO | None = None) -> int:
    """
    Run one invocation and return its exit code.

    argv[0] is the program name and is echoed unchanged in the usage line.
    Exactly two more arguments are required; they are always taken as
    filename and buffer_size, even when they start with a dash. Usage,
    error and file output all go to stdout, which defaults to the process
    standard output.
    """
    if stdout is None:
        sys.stdout.flush()
        stdout = sys.stdout.buffer

    prog = argv[0] if argv else DEFAULT_PROG

    if len(argv) != EXPECTED_ARGC:
        logger.debug("Expected 2 arguments, got %d", max(len(argv) - 1, 0))
        _report(stdout, usage_line(prog))
        return 1

    configure_logging()
    parser = create_parser(prog)

    try:
        # "--" keeps dash-prefixed filenames from being read as options.
        args = parser.parse_args(["--", *argv[1:]])
        buffer_size = parse_buffer_size(args.buffer_size)
        dump_file(args.filename, buffer_size, stdout)
    except UsageError as exc:
        logger.debug("Argument error: %s", exc)
        _report(stdout, usage_line(prog))
        return 1
    except LineDumperError as exc:
        _report(stdout, f"Error: {exc}")
        return 1

    return 0


def main() -> int:
    """Entry point for CLI."""
    return run(sys.argv)


if __name__ == "__main__":
    sys.exit(main())
