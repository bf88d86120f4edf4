"""
Local file system adapter implementation for file operations.
"""

import logging
import os

from typing_extensions import override

from mini_cli.entities.file import File
from mini_cli.exceptions import FileRepositoryError
from mini_cli.ports.files.file_repository_port import FileRepositoryPort


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(self, logger: logging.Logger | None = None, encoding: str = "utf-8"):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            encoding: Text encoding used when reading files
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._encoding = encoding

    @override
    def list_entries(self, directory: str) -> list[File]:
        """
        List the immediate entries of a directory.

        No existence check is made up front; whatever ``os.scandir`` reports
        (missing path, not a directory, permission denied) is surfaced.

        Args:
            directory: Path to the directory to list

        Returns:
            List of File entities in the order the filesystem yields them

        Raises:
            FileRepositoryError: If enumeration fails
        """
        try:
            with os.scandir(directory) as it:
                files = [File(entry.path) for entry in it]
        except OSError as e:
            raise FileRepositoryError(str(e))

        self._logger.debug(f"Enumerated {len(files)} entries in {directory}")
        return files

    @override
    def exists(self, path: str) -> bool:
        return os.path.exists(path)

    @override
    def read_text(self, path: str) -> str:
        """
        Read a whole file as text.

        Args:
            path: Path to the file to read

        Returns:
            The exact file contents; line endings are left untouched

        Raises:
            FileRepositoryError: If the file cannot be opened, read or decoded
        """
        try:
            with open(path, encoding=self._encoding, newline="") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FileRepositoryError(str(e))
