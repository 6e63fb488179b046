"""
Ordering of discovered files before assembly.
"""

from pathlib import Path
from typing import Callable, Iterable

from models import SortOption


def _by_name(path: Path) -> tuple[str, str]:
    return path.name, str(path).casefold()


def _by_type(path: Path) -> tuple[str, str]:
    return path.suffix.lower(), str(path).casefold()


SORT_KEYS: dict[SortOption, Callable[[Path], tuple[str, str]]] = {
    SortOption.NAME: _by_name,
    SortOption.TYPE: _by_type,
}


def sort_files(files: Iterable[Path], sort: SortOption) -> list[Path]:
    """
    Return the files in bundle order.

    `SortOption.NAME` compares base names, `SortOption.TYPE` compares
    lower-cased extensions. Both use ordinal string comparison and break ties
    on the case-folded full path, so the result does not depend on the order
    the filesystem returned the entries in.

    Args:
        files: Discovered files.
        sort: Requested ordering.

    Returns:
        list[Path]: A new sorted list.
    """
    return sorted(files, key=SORT_KEYS[SortOption(sort)])
