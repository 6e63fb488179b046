"""
Shared fixtures for core module tests.

This module provides reusable pytest fixtures for testing core functionality,
including source tree builders, mock factories and common test objects.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from core.models import BundleRequest
from models import SortOption
from ui.progress_display import NoOpProgressDisplay


@pytest.fixture
def project_root(tmp_path):
    """Create a temporary project root for testing."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def make_tree(project_root):
    """Factory that writes files under the project root from a {relative path: content} mapping."""

    def _factory(files: dict[str, str]) -> Path:
        for relative, content in files.items():
            file_path = project_root / relative
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with file_path.open("w", encoding="utf-8", newline="") as f:
                f.write(content)
        return project_root

    return _factory


@pytest.fixture
def request_factory(project_root):
    """Factory for BundleRequest instances writing into the project root."""

    def _factory(
        languages=("all",),
        sort=SortOption.NAME,
        remove_empty_lines=False,
        include_source_note=False,
        author=None,
        output_name="bundle.txt",
    ) -> BundleRequest:
        return BundleRequest(
            output=project_root / output_name,
            languages=tuple(languages),
            sort=sort,
            remove_empty_lines=remove_empty_lines,
            include_source_note=include_source_note,
            author=author,
        )

    return _factory


@pytest.fixture
def progress_display():
    """Progress display for testing."""
    return NoOpProgressDisplay()


@pytest.fixture
def tracking_progress_display():
    """Progress display that tracks calls for testing."""
    mock = MagicMock()
    mock.calls = []

    def make_tracker(method_name):
        def tracker(*args, **kwargs):
            if method_name == "update":
                mock.calls.append(
                    (method_name, kwargs.get("advance"), kwargs.get("description"))
                )
            else:
                mock.calls.append((method_name, *args))

        return tracker

    mock.on_start = make_tracker("start")
    mock.on_update = make_tracker("update")
    mock.on_complete = make_tracker("complete")
    mock.__enter__ = MagicMock(return_value=mock)
    mock.__exit__ = MagicMock(return_value=None)

    return mock


@pytest.fixture
def mock_file_reader_factory():
    """Factory for creating MockFileReader instances with file content mappings."""

    def _factory(file_contents: dict[str, str]):
        """
        Create a MockFileReader configured with file content mappings.

        Args:
            file_contents: Dictionary mapping file names to their content.

        Returns:
            MockFileReader instance configured to return content based on file name.
        """
        from core.file_io import MockFileReader

        def read_file_side_effect(path: Path) -> str:
            return file_contents.get(path.name, "")

        return MockFileReader(read_file_fn=read_file_side_effect)

    return _factory
