"""
General utility functions for the CLI application.
"""

from rich.console import Console

console: Console = Console()

_verbose = False


def set_verbose(enabled: bool) -> None:
    """Turn debug output on or off for the rest of the process."""
    global _verbose
    _verbose = enabled


def is_verbose() -> bool:
    return _verbose


def debug(
    *values: object,
    sep: str = " ",
    end: str = "\n",
) -> None:
    """
    Print a debug message with orange formatting when verbose output is enabled.

    Args:
        *values: Variable number of objects to print. All values are converted to strings.
        sep: Separator string between values. Defaults to a single space.
        end: String appended after the last value. Defaults to newline.
    """
    if not _verbose:
        return

    message = sep.join(str(v) for v in values)

    # markup=False: paths may contain [brackets]
    console.print(f"DEBUG: {message}", end=end, style="orange1", markup=False)
