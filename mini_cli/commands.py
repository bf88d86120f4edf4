"""
Subcommand handlers: each one runs a use case and maps the outcome to an exit status.
"""

import os
import sys
from typing import Optional

from mini_cli.container import DependencyContainer, container as default_container
from mini_cli.exceptions import FileRepositoryError, MissingFileError

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_NOT_FOUND = 2


def list_directory(
    directory: str = ".", container: Optional[DependencyContainer] = None
) -> int:
    """Print the name of each entry in ``directory``, one per line, unsorted."""
    uc = (container or default_container).get_list_files_use_case()
    try:
        files = uc.execute(directory)
    except FileRepositoryError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    _write_names([file.name for file in files])
    return EXIT_OK


def _write_names(names: list[str]) -> None:
    # Names undecodable in the filesystem encoding carry surrogates; emit their original bytes
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        for name in names:
            print(name)
        return

    sys.stdout.flush()
    for name in names:
        buffer.write(os.fsencode(name) + b"\n")
    buffer.flush()


def show_file(path: str, container: Optional[DependencyContainer] = None) -> int:
    """Write the contents of ``path`` to stdout exactly as stored."""
    uc = (container or default_container).get_show_file_use_case()
    try:
        contents = uc.execute(path)
    except MissingFileError:
        print(f"Error: file not found: {path}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except FileRepositoryError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    sys.stdout.write(contents)
    sys.stdout.flush()
    return EXIT_OK
