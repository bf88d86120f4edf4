"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from mini_cli.entities.file import File
from mini_cli.exceptions import FileRepositoryError
from mini_cli.ports.files.file_repository_port import FileRepositoryPort


class ListFilesUseCase:
    """Use case for listing the entries of a directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, directory: str = ".") -> list[File]:
        """
        List the immediate entries of a directory.

        Args:
            directory: Path to the directory to list, the current one by default

        Returns:
            List of File entities in enumeration order

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._logger.info(f"Listing entries in directory: {directory}")
            files = self._file_repository.list_entries(directory)
            self._logger.info(f"Found {len(files)} entries")
            return files
        except FileRepositoryError as e:
            self._logger.info(f"Listing failed: {e}")
            raise
        except Exception as e:
            self._logger.error(f"Error listing entries: {e}")
            raise FileRepositoryError(str(e))
