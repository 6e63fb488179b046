"""
Progress reporting protocol for decoupling UI from the bundling pipeline.

The assembler reports its progress through `ProgressDisplay`, so the same code
drives a Rich progress bar on the terminal and a silent no-op in tests.
"""

from types import TracebackType
from typing import Protocol

from rich.progress import Progress, TaskID
from ui.progress import (
    ProgressState,
    create_progress,
    create_task,
    update_progress,
)


class ProgressDisplay(Protocol):
    """
    Receiver of bundling progress.

    Used as a context manager around one bundle. Inside it the assembler
    calls `on_start` once with the file count, `on_update` after each file
    and `on_complete` once all files are written. `on_complete` is skipped
    when a file fails; the exception then reaches `__exit__`.
    """

    def __enter__(self) -> "ProgressDisplay": ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...

    def on_start(self, description: str, total: int | None) -> None:
        """
        Begin a task.

        Args:
            description: Text shown next to the bar.
            total: Number of files to bundle, or None if unknown.
        """

    def on_update(
        self, *, advance: int | None = None, description: str | None = None
    ) -> None:
        """
        Advance the counter, replace the description, or both.

        Args:
            advance: Number of items processed since the last update.
            description: New description text.
        """

    def on_complete(self, description: str, completed: int) -> None:
        """
        Show the task as finished.

        Args:
            description: Closing text shown next to the bar.
            completed: Number of files bundled.
        """


class RichProgressDisplay:
    """
    Rich UI implementation of ProgressDisplay.

    If the `with` block exits with an exception, the current task is marked as
    failed before the progress bar is closed.
    """

    def __init__(self) -> None:
        self._progress: Progress | None = None
        self._task: TaskID | None = None

    def __enter__(self) -> "RichProgressDisplay":
        self._progress = create_progress()
        self._progress.__enter__()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        if not self._progress:
            return
        if exc_type is not None and self._task is not None:
            update_progress(
                self._progress,
                self._task,
                ProgressState.ERROR,
                description="Bundling stopped",
            )
        self._progress.__exit__(exc_type, exc_val, exc_tb)

    def _require_progress(self) -> Progress:
        if not self._progress:
            raise RuntimeError(
                "RichProgressDisplay must be used as a context manager. "
                "Use: with RichProgressDisplay() as rpd:"
            )
        return self._progress

    def _require_task(self, caller: str) -> TaskID:
        if self._task is None:
            raise RuntimeError(f"on_start() must be called before {caller}()")
        return self._task

    def on_start(self, description: str, total: int | None) -> None:
        """
        Create the task in the Rich progress bar.

        Raises:
            RuntimeError: If not used as a context manager.
        """
        progress = self._require_progress()
        self._task = create_task(progress, description, total=total)

    def on_update(
        self, *, advance: int | None = None, description: str | None = None
    ) -> None:
        """
        Update the running task.

        Raises:
            RuntimeError: If not used as a context manager or if on_start()
                was not called first.
            ValueError: If neither advance nor description is provided.
        """
        progress = self._require_progress()
        task = self._require_task("on_update")

        if advance is None and description is None:
            raise ValueError(
                "At least one of 'advance' or 'description' must be provided to on_update()"
            )

        update_progress(progress, task, advance=advance, description=description)

    def on_complete(self, description: str, completed: int) -> None:
        """
        Show the task as finished.

        Raises:
            RuntimeError: If not used as a context manager or if on_start()
                was not called first.
        """
        progress = self._require_progress()
        task = self._require_task("on_complete")

        update_progress(
            progress,
            task,
            ProgressState.COMPLETE,
            completed=completed,
            description=description,
        )


class NoOpProgressDisplay:
    """Silent ProgressDisplay, used by tests and when no terminal output is wanted."""

    def __enter__(self) -> "NoOpProgressDisplay":
        return self

    def __exit__(self, *args) -> None:
        pass

    def on_start(self, description: str, total: int | None) -> None:
        pass

    def on_update(
        self, *, advance: int | None = None, description: str | None = None
    ) -> None:
        pass

    def on_complete(self, description: str, completed: int) -> None:
        pass
