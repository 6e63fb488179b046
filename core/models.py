"""
Core data models for the bundling pipeline.

This module defines the request and result objects that flow through a bundle
operation, and the answers collected when recording a response file.
"""

from dataclasses import dataclass, field
from pathlib import Path

from models import SortOption


@dataclass(frozen=True)
class BundleRequest:
    """
    Parameters of a single bundle operation.

    Attributes:
        output: Path of the bundle file to produce. Its parent directory is the
            scan root.
        languages: Requested language identifiers (may contain "all").
        sort: Ordering applied to the discovered files.
        remove_empty_lines: Drop exactly-empty lines from every file's content.
        include_source_note: Precede each file with a "#### Source: ... ####" line.
        author: Optional name written in the creator header.
    """

    output: Path
    languages: tuple[str, ...]
    sort: SortOption = SortOption.NAME
    remove_empty_lines: bool = False
    include_source_note: bool = False
    author: str | None = None

    @property
    def root(self) -> Path:
        """Directory that is scanned for source files."""
        return self.output.parent


@dataclass
class BundleResult:
    output: Path
    files: list[Path] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        return len(self.files)


@dataclass(frozen=True)
class ResponseFileOptions:
    """
    Answers collected by the create-rsp prompt sequence.

    Attributes:
        name: Base name of the response file (".rsp" is appended).
        output: Value recorded for --output.
        languages: Values recorded for --language.
        note: Value recorded for --note.
        sort: Value recorded for --sort.
        remove_empty_lines: Value recorded for --remove-empty-lines.
        author: Value recorded for --author (may be empty).
    """

    name: str
    output: str
    languages: tuple[str, ...]
    note: bool = False
    sort: SortOption = SortOption.NAME
    remove_empty_lines: bool = False
    author: str = ""
