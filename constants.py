"""
Application-wide constants and configuration mappings.

This module defines the static configuration used throughout the codebundle CLI.
It includes the language-to-extension table used by discovery, the directory
fragments that are never scanned, and the literal templates that make up the
layout of a bundle file.
"""

import os
from types import MappingProxyType
from typing import Final, Mapping


# Sentinel language identifier selecting every extension in LANGUAGE_EXTENSIONS.
ALL_LANGUAGES: Final[str] = "all"

# Fixed language table. Keys are lower-case language identifiers, values the
# file extensions (with the leading dot) that belong to the language.
# Lookups against this table are case-insensitive on both sides.
LANGUAGE_EXTENSIONS: Final[Mapping[str, frozenset[str]]] = MappingProxyType(
    {
        "java": frozenset({".java"}),
        "c#": frozenset({".cs"}),
        "c++": frozenset({".cpp", ".h"}),
        "c": frozenset({".c", ".h"}),
        "python": frozenset({".py"}),
    }
)

# Values accepted by the --language option. Membership is case-sensitive.
# "c" is resolvable through the table but is not offered on the command line.
CLI_LANGUAGE_CHOICES: Final[tuple[str, ...]] = ("c#", "java", "python", "c++", "all")

# Directory names whose contents are never bundled: build output, IDE and
# version-control metadata, build configuration.
EXCLUDED_DIR_NAMES: Final[tuple[str, ...]] = (
    "bin",
    "obj",
    ".vs",
    ".git",
    "Debug",
    "Properties",
)

# Fragments matched as plain substrings of the full file path.
EXCLUDED_PATH_FRAGMENTS: Final[tuple[str, ...]] = tuple(
    f"{os.sep}{name}{os.sep}" for name in EXCLUDED_DIR_NAMES
)

SEPARATOR_WIDTH: Final[int] = 50
SEPARATOR_LINE: Final[str] = "-" * SEPARATOR_WIDTH

CREATOR_HEADER_TEMPLATE: Final[str] = "----File Creator: {author}----"
SOURCE_NOTE_TEMPLATE: Final[str] = "#### Source: {path} ####"

RESPONSE_FILE_SUFFIX: Final[str] = ".rsp"
RESPONSE_FILE_PREFIX: Final[str] = "@"
