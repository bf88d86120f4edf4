"""
Command dispatcher for the ``mini`` program.

``run`` is the single entry used both for process arguments and for every line
typed in the interactive shell.
"""

import argparse
import logging
import sys
from typing import Callable, Optional, Sequence

from mini_cli import __version__
from mini_cli.commands import EXIT_IO_ERROR, EXIT_OK, list_directory, show_file
from mini_cli.config.settings import get_settings
from mini_cli.container import container
from mini_cli.exceptions import ConfigurationError
from mini_cli.shell import InteractiveShell

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mini",
        description="A very tiny CLI program",
        epilog=(
            "Optional settings MINI_LOG_LEVEL, MINI_ENCODING and MINI_PROMPT are read "
            "from the environment or from a .env file in the current directory or a parent."
        ),
    )
    parser.add_argument(
        "--version", action="version", version=f"mini {__version__}"
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    ls_parser = subparsers.add_parser(
        "ls",
        help="List files in a directory (default: current directory)",
        description="List files in a directory (default: current directory)",
    )
    ls_parser.add_argument(
        "dir",
        nargs="?",
        default=".",
        metavar="DIR",
        help="Directory to list (default is current directory)",
    )

    show_parser = subparsers.add_parser(
        "show",
        help="Show the contents of a file",
        description="Show the contents of a file",
    )
    show_parser.add_argument("file", metavar="FILE", help="File to display")

    subparsers.add_parser(
        "shell",
        help="Interactive mode (type commands like 'ls', 'show file', 'exit')",
        description="Interactive mode (type commands like 'ls', 'show file', 'exit')",
    )
    return parser


def _run_shell(args: argparse.Namespace) -> int:
    shell = InteractiveShell(run, prompt=get_settings().prompt)
    return shell.run()


_HANDLERS: dict[str, Callable[[argparse.Namespace], int]] = {
    "ls": lambda args: list_directory(args.dir),
    "show": lambda args: show_file(args.file),
    "shell": _run_shell,
}


def _exit_code(code: object) -> int:
    # SystemExit.code may be None, an int or a message
    if code is None:
        return EXIT_OK
    if isinstance(code, int):
        return code
    return EXIT_IO_ERROR


def run(argv: Sequence[str]) -> int:
    """Parse ``argv`` and run the selected subcommand, returning its exit status."""
    parser = build_parser()
    try:
        args = parser.parse_args(list(argv))
    except SystemExit as e:
        # --help, --version and usage errors all end up here
        return _exit_code(e.code)

    if args.command is None:
        parser.print_help()
        return EXIT_OK

    logger.debug(f"Running command: {args.command}")
    return _HANDLERS[args.command](args)


def main(argv: Optional[list[str]] = None) -> int:
    """Process entry point."""
    try:
        settings = get_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    container.configure(encoding=settings.encoding)
    return run(sys.argv[1:] if argv is None else argv)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
