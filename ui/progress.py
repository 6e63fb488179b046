"""
Progress bar creation and styling using Rich.

This module builds the progress bar shown while a bundle is being written.
Task descriptions are wrapped in Rich markup whose color reflects the state of
the task (writing, done, failed).
"""

from enum import StrEnum
from typing import Optional

from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)


class ProgressState(StrEnum):
    """
    Color used for a task description in each state.

    Attributes:
        IN_PROGRESS: Magenta while files are being bundled.
        COMPLETE: Green once the bundle has been written.
        ERROR: Red when bundling stopped on an error.
    """

    IN_PROGRESS = "magenta"
    COMPLETE = "green"
    ERROR = "red"


def styled(description: str, state: ProgressState) -> str:
    """Wrap a description in the markup color of the given state."""
    return f"[{state}]{escape(description)}"


def create_progress() -> Progress:
    """
    Create a Rich Progress instance with the standard bundle columns.

    Returns:
        Progress: Spinner, description, bar, "n/total" counter and elapsed time.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
    )


def create_task(progress: Progress, description: str, total: Optional[int]) -> TaskID:
    """Add an in-progress task to the progress instance."""
    return progress.add_task(
        styled(description, ProgressState.IN_PROGRESS), total=total
    )


def update_progress(
    progress: Progress,
    task: TaskID,
    progress_state: Optional[ProgressState] = None,
    total: Optional[float] = None,
    completed: Optional[float] = None,
    advance: Optional[float] = None,
    description: Optional[str] = None,
) -> None:
    """
    Update a task's counters and, optionally, its description.

    Rich treats a `description=None` keyword as "clear the description", so the
    keyword is only passed when a new description is supplied.

    Args:
        progress: The Rich Progress instance containing the task.
        task: The identifier of the task to update.
        progress_state: State used to color the new description. Defaults to
            IN_PROGRESS when a description is given without a state.
        total: New total, or None to keep the current one.
        completed: Absolute number of completed items.
        advance: Number of items to advance by.
        description: New description text.

    Raises:
        ValueError: If a state is given without a description.
    """
    if progress_state is not None and description is None:
        raise ValueError("progress_state requires a description to style.")

    if description is None:
        progress.update(task, total=total, completed=completed, advance=advance)
        return

    progress.update(
        task,
        total=total,
        completed=completed,
        advance=advance,
        description=styled(description, progress_state or ProgressState.IN_PROGRESS),
    )
