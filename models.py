"""
Type definitions shared across the codebundle CLI application.

This module contains enums used both by the command-line layer and by the
core bundling pipeline.
"""

from enum import StrEnum


class SortOption(StrEnum):
    """
    Ordering applied to discovered files before they are bundled.

    The enum values are the literal strings accepted by the `--sort` option
    and written into response files.

    Attributes:
        NAME: Order by base file name.
        TYPE: Order by lower-cased file extension.
    """

    NAME = "name"
    TYPE = "type"
