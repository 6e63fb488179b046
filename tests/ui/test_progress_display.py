"""
Comprehensive tests for the progress_display module using pytest.

Tests cover:
- RichProgressDisplay: context manager, on_start, on_update, on_complete, error cases
- NoOpProgressDisplay: basic functionality (no-op behavior)

Note: RichProgressDisplay tests use mocks to avoid creating actual Rich UI components.
"""

from unittest.mock import MagicMock

import pytest

from ui.progress import ProgressState
from ui.progress_display import NoOpProgressDisplay, RichProgressDisplay


@pytest.fixture
def mock_progress(mocker):
    progress = MagicMock()
    mocker.patch("ui.progress_display.create_progress", return_value=progress)
    return progress


# ============================================================================
# Tests for RichProgressDisplay
# ============================================================================


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_enter_creates_progress(mock_progress):
    """__enter__ should create and enter the progress instance."""
    display = RichProgressDisplay()

    with display as rpd:
        assert rpd is display
        assert display._progress is mock_progress
        mock_progress.__enter__.assert_called_once()

    mock_progress.__exit__.assert_called_once_with(None, None, None)


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_exit_without_progress():
    """__exit__ should do nothing when the display was never entered."""
    RichProgressDisplay().__exit__(None, None, None)


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_exit_marks_task_failed(mocker, mock_progress):
    """An exception in the block should flag the task as stopped in red."""
    mocker.patch("ui.progress_display.create_task", return_value=7)
    mock_update = mocker.patch("ui.progress_display.update_progress")

    with pytest.raises(RuntimeError):
        with RichProgressDisplay() as display:
            display.on_start("Bundling 2 files...", total=2)
            raise RuntimeError("read failed")

    mock_update.assert_called_once_with(
        mock_progress, 7, ProgressState.ERROR, description="Bundling stopped"
    )
    exc_type = mock_progress.__exit__.call_args.args[0]
    assert exc_type is RuntimeError


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_exit_error_before_start(mocker, mock_progress):
    """Without a task there is nothing to mark as failed."""
    mock_update = mocker.patch("ui.progress_display.update_progress")

    with pytest.raises(RuntimeError):
        with RichProgressDisplay():
            raise RuntimeError("boom")

    mock_update.assert_not_called()


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_start(mocker, mock_progress):
    """on_start should create a task with description and total."""
    mock_create_task = mocker.patch("ui.progress_display.create_task", return_value=3)

    display = RichProgressDisplay()
    with display:
        display.on_start("Bundling 5 files...", total=5)

    mock_create_task.assert_called_once_with(
        mock_progress, "Bundling 5 files...", total=5
    )
    assert display._task == 3


@pytest.mark.unit
@pytest.mark.parametrize(
    "call",
    [
        lambda d: d.on_start("x", total=1),
        lambda d: d.on_update(advance=1),
        lambda d: d.on_complete("done", completed=1),
    ],
)
def test_rich_progress_display_requires_context_manager(call):
    with pytest.raises(RuntimeError, match="must be used as a context manager"):
        call(RichProgressDisplay())


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_update(mocker, mock_progress):
    mocker.patch("ui.progress_display.create_task", return_value=1)
    mock_update = mocker.patch("ui.progress_display.update_progress")

    with RichProgressDisplay() as display:
        display.on_start("Bundling", total=2)
        display.on_update(advance=1, description="Bundled a.py")

    mock_update.assert_called_once_with(
        mock_progress, 1, advance=1, description="Bundled a.py"
    )


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_update_requires_arguments(mocker, mock_progress):
    mocker.patch("ui.progress_display.create_task", return_value=1)

    with RichProgressDisplay() as display:
        display.on_start("Bundling", total=2)
        with pytest.raises(ValueError, match="At least one of"):
            display.on_update()


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_update_before_start(mock_progress):
    with RichProgressDisplay() as display:
        with pytest.raises(RuntimeError, match=r"on_start\(\) must be called before on_update"):
            display.on_update(advance=1)


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_complete(mocker, mock_progress):
    mocker.patch("ui.progress_display.create_task", return_value=1)
    mock_update = mocker.patch("ui.progress_display.update_progress")

    with RichProgressDisplay() as display:
        display.on_start("Bundling", total=2)
        display.on_complete("✅ Bundled 2 files.", completed=2)

    mock_update.assert_called_once_with(
        mock_progress,
        1,
        ProgressState.COMPLETE,
        completed=2,
        description="✅ Bundled 2 files.",
    )


@pytest.mark.unit
@pytest.mark.mock
def test_rich_progress_display_on_complete_before_start(mock_progress):
    with RichProgressDisplay() as display:
        with pytest.raises(RuntimeError, match="before on_complete"):
            display.on_complete("done", completed=0)


@pytest.mark.unit
def test_rich_progress_display_real_progress():
    """A full lifecycle against a real Rich Progress should not raise."""
    with RichProgressDisplay() as display:
        display.on_start("Bundling 1 files...", total=1)
        display.on_update(advance=1, description="Bundled [weird].py")
        display.on_complete("✅ Bundled 1 files.", completed=1)

    assert display._progress.tasks[0].completed == 1


# ============================================================================
# Tests for NoOpProgressDisplay
# ============================================================================


@pytest.mark.unit
def test_noop_progress_display_full_lifecycle():
    with NoOpProgressDisplay() as display:
        assert isinstance(display, NoOpProgressDisplay)
        display.on_start("Bundling", total=None)
        display.on_update(advance=1)
        display.on_update(description="x")
        display.on_complete("done", completed=1)
