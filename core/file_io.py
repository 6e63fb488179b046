from contextlib import AbstractContextManager, contextmanager
import io
import os
from pathlib import Path
from typing import IO, Callable, Generator, Protocol

from core.exceptions import (
    FileReadError,
    FileWriteError,
    InvalidFilePathError,
)


class FileReader(Protocol):
    """
    Source of file contents for the bundler.

    The assembler only ever asks for whole files, so one method is enough;
    tests swap in `MockFileReader` to avoid touching the disk.
    """

    def read_file(self, file_path: Path) -> str:
        """Return the whole text of `file_path`, line endings untouched."""


class FileWriter(Protocol):
    """
    Destination of a bundle or a response file.

    `write_file` is used for small one-shot files, `open_atomic` for the
    bundle, which is streamed and must never be left half written.
    """

    def write_file(self, data: str, mode: str = "w") -> None:
        """Write `data` in one go ("w" truncates, "a" appends)."""

    def open_atomic(self) -> AbstractContextManager[IO[str]]:
        """
        Open a text stream whose content replaces the file only on success.
        """


class FilesystemFileReader:

    def read_file(self, file_path: Path) -> str:
        """
        Read the full text content of a file as UTF-8.

        A leading byte order mark is dropped and invalid UTF-8 sequences are
        silently ignored (errors="ignore"). Line endings are returned exactly
        as stored on disk.

        Args:
            file_path: The path to the file to read.

        Returns:
            The file content as a string.

        Raises:
            FileReadError: If the file does not exist or an I/O error occurs
                while reading it.
        """
        try:
            with file_path.open(
                "r", encoding="utf-8-sig", errors="ignore", newline=""
            ) as f:
                return f.read()
        except OSError as e:
            raise FileReadError(
                message=f"Failed to read file: {file_path}",
                file_path=str(file_path),
                original_exception=e,
            ) from e


class FilesystemFileWriter:
    def __init__(self, file_path: Path | None = None):
        self.file_path = file_path

    @classmethod
    def from_path(cls, file_path: Path) -> "FilesystemFileWriter":
        """
        Build a writer for an output location after checking it is usable.

        Args:
            file_path: Bundle or response file to produce.

        Returns:
            FilesystemFileWriter: Writer bound to `file_path`.

        Raises:
            InvalidFilePathError: If the containing directory is missing or
                read-only, or if `file_path` names a directory.
        """
        parent = file_path.parent
        if not parent.is_dir():
            raise InvalidFilePathError(
                message=f"Parent directory does not exist: {parent}",
                file_path=str(file_path),
            )
        if not os.access(parent, os.W_OK):
            raise InvalidFilePathError(
                message=f"Parent directory is not writable: {parent}",
                file_path=str(file_path),
            )
        if file_path.is_dir():
            raise InvalidFilePathError(
                message=f"Output path is a directory: {file_path}",
                file_path=str(file_path),
            )

        return cls(file_path)

    @property
    def temp_path(self) -> Path:
        """Sibling path that receives the content until it is committed."""
        if self.file_path is None:
            raise InvalidFilePathError("Writer has no target path; use from_path().")
        return self.file_path.with_name(f".{self.file_path.name}.tmp")

    def write_file(self, data: str, mode: str = "w") -> None:
        """
        Write `data` straight to the target, without a temp file.

        Used for response files, which are tiny and written in one call.

        Raises:
            InvalidFilePathError: If the writer has no target path.
            FileWriteError: If the OS refuses the write.
        """
        if self.file_path is None:
            raise InvalidFilePathError("Writer has no target path; use from_path().")

        try:
            with open(self.file_path, mode, encoding="utf-8", newline="") as f:
                f.write(data)
        except OSError as e:
            raise FileWriteError(
                message=f"Failed to write to file: {self.file_path}",
                file_path=str(self.file_path),
                original_exception=e,
            ) from e

    @contextmanager
    def open_atomic(self) -> Generator[IO[str], None, None]:
        """
        Open a text stream that replaces the target file when the block succeeds.

        Content is written to a hidden sibling temp file. When the `with` block
        exits normally the temp file is moved over the target in a single
        `os.replace`. When it raises, the temp file is removed, the target is
        left as it was, and the exception propagates.

        Yields:
            IO[str]: Text stream opened with newline="" so callers control
            line endings.

        Raises:
            InvalidFilePathError: If the writer has no target path.
            FileWriteError: If the temp file cannot be created, written or
                moved into place.
        """
        if self.file_path is None:
            raise InvalidFilePathError("Writer has no target path; use from_path().")

        temp_path = self.temp_path
        try:
            stream = open(temp_path, "w", encoding="utf-8", newline="")
        except OSError as e:
            raise FileWriteError(
                message=f"Failed to create temporary output file: {temp_path}",
                file_path=str(temp_path),
                original_exception=e,
            ) from e

        try:
            with stream:
                yield stream
            os.replace(temp_path, self.file_path)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise FileWriteError(
                message=f"Failed to write to file: {self.file_path}",
                file_path=str(self.file_path),
                original_exception=e,
            ) from e
        except BaseException:
            temp_path.unlink(missing_ok=True)
            raise


class MockFileReader:
    """
    In-memory FileReader for tests.

    Args:
        return_value: Content returned for every path. Wins over `read_file_fn`.
        read_file_fn: Called with the path to produce its content, or to raise.

    With neither set, every file reads as empty. The paths asked for are kept
    in `read_file_calls`, in order.
    """

    def __init__(
        self,
        return_value: str | None = None,
        read_file_fn: Callable[[Path], str] | None = None,
    ):
        self.return_value = return_value
        self.read_file_fn = read_file_fn
        self.read_file_calls: list[Path] = []

    def read_file(self, file_path: Path) -> str:
        self.read_file_calls.append(file_path)
        if self.return_value is not None:
            return self.return_value
        return self.read_file_fn(file_path) if self.read_file_fn else ""


class MockFileWriter:
    """
    In-memory FileWriter for tests.

    Keeps everything in memory. `written_data` holds the committed content:
    for `open_atomic` it is only updated when the block exits normally, which
    mirrors the filesystem writer leaving the target untouched on failure.
    """

    def __init__(self, file_path: Path | None = None):
        self.file_path = file_path or Path("bundle.txt")
        self.write_file_calls: list[tuple[str, str]] = []
        self.open_atomic_calls = 0
        self.written_data: str = ""

    def write_file(self, data: str, mode: str = "w") -> None:
        self.write_file_calls.append((data, mode))
        self.written_data = data if mode == "w" else self.written_data + data

    @contextmanager
    def open_atomic(self) -> Generator[IO[str], None, None]:
        self.open_atomic_calls += 1
        buffer = io.StringIO(newline="")
        yield buffer
        self.written_data = buffer.getvalue()
