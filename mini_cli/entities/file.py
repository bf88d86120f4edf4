"""
File domain entity.
"""

import os

from mini_cli.exceptions import FileRepositoryError


class File:
    """
    File system entry entity (file or directory) as seen in a directory listing.
    """

    def __init__(self, path: str):
        """
        Initialize the File entity.

        Args:
            path: Path to the entry, as joined from the listed directory

        Raises:
            FileRepositoryError: If path is not a non-empty string
        """
        if not path or not isinstance(path, str):
            raise FileRepositoryError("Path must be a non-empty string")

        self.path = path
        self.name = self._find_file_name()

    def _find_file_name(self) -> str:
        """Extract the base name from the path."""
        return os.path.basename(os.path.normpath(self.path))
