"""
Use case for reading a file's contents.
"""

import logging
from typing import Optional

from mini_cli.exceptions import FileRepositoryError, MissingFileError
from mini_cli.ports.files.file_repository_port import FileRepositoryPort


class ShowFileUseCase:
    """Use case for reading the whole contents of a file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Read a file after checking that it exists.

        Args:
            path: Path to the file

        Returns:
            The file contents, unmodified

        Raises:
            MissingFileError: If nothing exists at the path
            FileRepositoryError: If the file exists but cannot be read
        """
        self._logger.info(f"Reading file: {path}")
        if not self._file_repository.exists(path):
            self._logger.info(f"File not found: {path}")
            raise MissingFileError(path)

        try:
            contents = self._file_repository.read_text(path)
        except FileRepositoryError as e:
            self._logger.info(f"Reading failed: {e}")
            raise
        except Exception as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileRepositoryError(str(e))

        self._logger.info(f"Read {len(contents)} characters")
        return contents
