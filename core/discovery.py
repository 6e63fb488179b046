"""
Source file discovery.

This module walks the scan root and applies two sieves to every file found:

1. **Language sieve**: the file's extension must belong to one of the
   requested languages.
2. **Exclusion sieve**: the full path must not contain any of the excluded
   directory fragments (build output, IDE and VCS metadata, build
   configuration). The check is a plain substring test on the path string,
   so a fragment anywhere in the path, including above the root, excludes
   the file.

Directory entries are visited in sorted order, which makes the discovery order
identical across runs and platforms.
"""

import os
from pathlib import Path
from typing import Generator

from constants import EXCLUDED_PATH_FRAGMENTS
from core.exceptions import DiscoveryError
from core.languages import matches_extension
from utils import debug


def walk_files(root: Path) -> Generator[Path, None, None]:
    """
    Recursively yield every file under the root directory.

    Args:
        root: Directory to enumerate.

    Yields:
        Path: Path of each file, built by joining the root with the relative
        location of the file.

    Raises:
        DiscoveryError: If the root or one of its sub-directories cannot be
            listed (missing directory, permission denied).
    """

    def on_error(error: OSError) -> None:
        raise DiscoveryError(
            message=f"Failed to list directory: {error.filename}",
            root=root,
            original_exception=error,
        ) from error

    for dir_path, dir_names, file_names in os.walk(root, onerror=on_error):
        # os.walk honours in-place edits of dir_names, this fixes the visit order
        dir_names.sort()
        for file_name in sorted(file_names):
            yield Path(dir_path) / file_name


def is_excluded(path: Path) -> bool:
    """
    Check whether the path lies under an excluded directory.

    Args:
        path: File path to check. Absolute paths give the most faithful
            result since fragments are matched against the whole string.

    Returns:
        bool: True if any excluded fragment occurs in the path string.
    """
    path_str = str(path)
    return any(fragment in path_str for fragment in EXCLUDED_PATH_FRAGMENTS)


def discover_files(
    root: Path,
    extensions: frozenset[str],
    exclude: Path | None = None,
) -> list[Path]:
    """
    Collect the source files under the root that should be bundled.

    Args:
        root: Scan root directory.
        extensions: Lower-case extensions (with leading dot) to keep.
        exclude: Optional file that must never be picked up, normally the
            bundle output itself.

    Returns:
        list[Path]: Matching files in discovery order.

    Raises:
        DiscoveryError: If the root is not a directory or cannot be walked.
    """
    if not root.is_dir():
        raise DiscoveryError(
            message=f"Scan root is not a directory: {root}",
            root=root,
        )

    excluded_output = exclude.resolve() if exclude is not None else None

    discovered: list[Path] = []
    for file_path in walk_files(root):
        if not matches_extension(file_path, extensions):
            continue
        if is_excluded(file_path):
            debug(f"Skipping excluded path {file_path}")
            continue
        if excluded_output is not None and file_path.resolve() == excluded_output:
            debug(f"Skipping bundle output {file_path}")
            continue
        discovered.append(file_path)

    return discovered
