"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class FileRepositoryError(BaseAppError):
    """Exception raised for file repository errors."""

    pass


class MissingFileError(FileRepositoryError):
    """Exception raised when a requested file does not exist."""

    def __init__(self, path: str):
        super().__init__(f"file not found: {path}")
        self.path = path


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass
