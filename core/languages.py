"""
Language identifier to file extension resolution.

Identifiers are matched case-insensitively against the fixed table in
`constants.LANGUAGE_EXTENSIONS`. Unknown identifiers resolve to no extensions
rather than raising, so a typo simply selects nothing.
"""

from pathlib import Path
from typing import Iterable

from constants import ALL_LANGUAGES, LANGUAGE_EXTENSIONS


def all_extensions() -> frozenset[str]:
    """Return the union of every extension in the language table."""
    return frozenset().union(*LANGUAGE_EXTENSIONS.values())


def resolve_extensions(language: str) -> frozenset[str]:
    """
    Return the extensions mapped to a single language identifier.

    Args:
        language: Language identifier such as "python" or "C++". The sentinel
            "all" selects every mapped extension.

    Returns:
        A frozen set of lower-case extensions including the leading dot. Empty
        when the identifier is not in the table.
    """
    normalized = language.strip().lower()
    if normalized == ALL_LANGUAGES:
        return all_extensions()
    return LANGUAGE_EXTENSIONS.get(normalized, frozenset())


def resolve_requested_extensions(languages: Iterable[str]) -> frozenset[str]:
    """
    Return the union of extensions for several language identifiers.

    Args:
        languages: Requested identifiers. If any of them is "all", the whole
            table is selected.

    Returns:
        A frozen set of lower-case extensions.
    """
    extensions: set[str] = set()
    for language in languages:
        extensions |= resolve_extensions(language)
    return frozenset(extensions)


def matches_extension(path: Path, extensions: frozenset[str]) -> bool:
    """Check whether the path's suffix is one of the extensions, ignoring case."""
    return path.suffix.lower() in extensions
