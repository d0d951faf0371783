"""Command-line entry points for MIME type <-> extension lookup.

Usage:
    mime-to-ext <mime-type|extension>
    mime-to-ext-full <mime-type|extension>

An argument containing "/" is looked up as a MIME type, anything else as an
extension. Unknown input prints "?".

Exit status:
    0  result printed (``mime-to-ext`` also uses 0 for "?")
    1  missing argument
    2  unknown MIME type or extension (``mime-to-ext-full`` only)
"""

import os
import sys
from typing import TextIO

from dotenv import load_dotenv

from src.logging import configure_logging, get_logger
from src.mime_to_ext import UsageError, get_database

logger = get_logger(__name__)

UNKNOWN = "?"

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_UNKNOWN = 2


def usage(prog: str) -> str:
    """Build the usage line for a program name."""
    return f"usage: {prog} <mime-type|extension>"


def lookup(arg: str, all_extensions: bool = False) -> str | None:
    """
    Look up a MIME type or extension.

    Args:
        arg: MIME type (contains "/") or extension.
        all_extensions: For a MIME type, return every extension joined by
            ", " instead of only the preferred one.

    Returns:
        The text to print, or None if nothing is known about ``arg``.
    """
    db = get_database()
    if "/" not in arg:
        return db.extension_to_mime(arg)

    if not all_extensions:
        return db.mime_to_preferred_extension(arg)

    extensions = db.mime_to_extensions(arg)
    if not extensions:
        return None
    return ", ".join(extensions)


def _first_argument(argv: list[str], prog: str) -> str:
    if not argv:
        raise UsageError(usage(prog))
    if len(argv) > 1:
        logger.debug(f"Ignoring extra arguments: {argv[1:]}")
    return argv[0]


def run(
    argv: list[str],
    prog: str = "mime-to-ext",
    all_extensions: bool = False,
    strict_exit: bool = False,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """
    Run a lookup for command-line arguments.

    Args:
        argv: Arguments without the program name.
        prog: Program name shown in the usage line.
        all_extensions: Print every extension for a MIME type.
        strict_exit: Exit with EXIT_UNKNOWN when the lookup misses.
        stdout: Output stream (defaults to sys.stdout).
        stderr: Error stream (defaults to sys.stderr).

    Returns:
        Process exit code.
    """
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        arg = _first_argument(argv, prog)
    except UsageError as e:
        print(e.message, file=stderr)
        return EXIT_USAGE

    if not get_database().is_available():
        logger.warning("MIME database unavailable, every lookup will miss")

    result = lookup(arg, all_extensions=all_extensions)
    if result is None:
        print(UNKNOWN, file=stdout)
        return EXIT_UNKNOWN if strict_exit else EXIT_OK

    print(result, file=stdout)
    return EXIT_OK


def _setup() -> None:
    load_dotenv()
    configure_logging(os.getenv("LOG_LEVEL", "WARNING"))


def main() -> None:
    """Print the preferred extension or the MIME type."""
    _setup()
    sys.exit(run(sys.argv[1:], prog="mime-to-ext"))


def main_full() -> None:
    """Print every extension or the MIME type; exit 2 on unknown input."""
    _setup()
    sys.exit(run(sys.argv[1:], prog="mime-to-ext-full", all_extensions=True, strict_exit=True))


if __name__ == "__main__":
    main()
