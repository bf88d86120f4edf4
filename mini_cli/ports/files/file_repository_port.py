"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod

from mini_cli.entities.file import File


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def list_entries(self, directory: str) -> list[File]:
        """
        List the immediate entries of a directory, in enumeration order.

        Args:
            directory: Path to the directory to list

        Returns:
            List of File entities, not sorted

        Raises:
            FileRepositoryError: If enumeration fails
        """
        pass

    @abstractmethod
    def exists(self, path: str) -> bool:
        """
        Check whether a path exists.

        Args:
            path: Path to check

        Returns:
            True if something exists at the path, False otherwise
        """
        pass

    @abstractmethod
    def read_text(self, path: str) -> str:
        """
        Read a whole file as text, without newline translation.

        Args:
            path: Path to the file to read

        Returns:
            The file contents

        Raises:
            FileRepositoryError: If the file cannot be read or decoded
        """
        pass
