"""
Tests for the ShowFileUseCase.
"""

import pytest
from unittest.mock import MagicMock

from mini_cli.exceptions import FileRepositoryError, MissingFileError
from mini_cli.ports.files.file_repository_port import FileRepositoryPort
from mini_cli.use_cases.files.show_file import ShowFileUseCase


@pytest.fixture
def mock_repository():
    repository = MagicMock(spec=FileRepositoryPort)
    repository.exists.return_value = True
    return repository


class TestShowFileUseCase:
    """Test cases for the ShowFileUseCase."""

    def test_execute_success(self, mock_repository, mock_logger):
        mock_repository.read_text.return_value = "line one\nline two"

        use_case = ShowFileUseCase(mock_repository, mock_logger)
        result = use_case.execute("notes.txt")

        assert result == "line one\nline two"
        mock_repository.exists.assert_called_once_with("notes.txt")
        mock_repository.read_text.assert_called_once_with("notes.txt")
        mock_logger.info.assert_any_call("Reading file: notes.txt")

    def test_execute_missing_file(self, mock_repository, mock_logger):
        mock_repository.exists.return_value = False

        use_case = ShowFileUseCase(mock_repository, mock_logger)

        with pytest.raises(MissingFileError, match="file not found: gone.txt") as exc_info:
            use_case.execute("gone.txt")

        assert exc_info.value.path == "gone.txt"
        mock_repository.read_text.assert_not_called()

    def test_missing_file_is_a_repository_error(self):
        assert issubclass(MissingFileError, FileRepositoryError)

    def test_execute_read_error(self, mock_repository, mock_logger):
        mock_repository.read_text.side_effect = FileRepositoryError("Permission denied")

        use_case = ShowFileUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="Permission denied") as exc_info:
            use_case.execute("locked.txt")

        assert not isinstance(exc_info.value, MissingFileError)
        mock_logger.error.assert_not_called()

    def test_execute_unexpected_error(self, mock_repository, mock_logger):
        mock_repository.read_text.side_effect = RuntimeError("disk on fire")

        use_case = ShowFileUseCase(mock_repository, mock_logger)

        with pytest.raises(FileRepositoryError, match="disk on fire"):
            use_case.execute("notes.txt")

        mock_logger.error.assert_called_once_with("Error reading file: disk on fire")
