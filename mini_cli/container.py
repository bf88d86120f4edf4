"""
Dependency injection container for managing application dependencies.
"""

import logging

from mini_cli.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from mini_cli.ports.files.file_repository_port import FileRepositoryPort
from mini_cli.use_cases.files.list_files import ListFilesUseCase
from mini_cli.use_cases.files.show_file import ShowFileUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, encoding: str = "utf-8"):
        self._instances = {}
        self._encoding = encoding
        self._logger = logging.getLogger(__name__)

    def configure(self, encoding: str) -> None:
        """Apply settings; already-built instances are dropped."""
        self._encoding = encoding
        self.reset()

    def get_file_repository(self) -> FileRepositoryPort:
        """
        Get file repository adapter instance.

        Returns:
            FileRepositoryPort implementation
        """
        if "file_repository" not in self._instances:
            self._instances["file_repository"] = LocalFileSystemAdapter(
                self._logger, encoding=self._encoding
            )
        return self._instances["file_repository"]

    def get_list_files_use_case(self) -> ListFilesUseCase:
        """
        Get list files use case with injected dependencies.

        Returns:
            Configured ListFilesUseCase
        """
        if "list_files_use_case" not in self._instances:
            file_repository = self.get_file_repository()
            self._instances["list_files_use_case"] = ListFilesUseCase(file_repository)
        return self._instances["list_files_use_case"]

    def get_show_file_use_case(self) -> ShowFileUseCase:
        """
        Get show file use case with injected dependencies.

        Returns:
            Configured ShowFileUseCase
        """
        if "show_file_use_case" not in self._instances:
            file_repository = self.get_file_repository()
            self._instances["show_file_use_case"] = ShowFileUseCase(file_repository)
        return self._instances["show_file_use_case"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
