"""
Bundle file assembly.

Layout of a bundle, every line terminated with `os.linesep`:

    ----File Creator: <author>----        (only when an author is given)
                                          (blank line after the header)
    #### Source: <relative path> ####     (only when source notes are on)
    <file content>
    --------------------------------------------------   (50 dashes)
    ... repeated for every file ...
"""

import os
from pathlib import Path
from typing import IO
from urllib.parse import unquote

from constants import CREATOR_HEADER_TEMPLATE, SEPARATOR_LINE, SOURCE_NOTE_TEMPLATE
from core.file_io import FileReader
from core.models import BundleRequest
from ui.progress_display import ProgressDisplay


def remove_empty_lines(content: str) -> str:
    """
    Drop the lines of the content that are exactly empty.

    The content is split on the platform newline and empty segments are
    discarded. Lines made of whitespace only are not empty and are kept.

    Args:
        content: Text of a source file.

    Returns:
        str: The remaining lines joined with the platform newline.
    """
    return os.linesep.join(line for line in content.split(os.linesep) if line != "")


def relative_source_path(path: Path, root: Path) -> str:
    """
    Return the path of a bundled file relative to the scan root.

    The path uses forward slashes and percent-escapes are decoded.
    """
    return unquote(path.relative_to(root).as_posix())


def creator_header(author: str) -> str:
    return CREATOR_HEADER_TEMPLATE.format(author=author)


def source_note(relative_path: str) -> str:
    return SOURCE_NOTE_TEMPLATE.format(path=relative_path)


def _write_line(stream: IO[str], text: str = "") -> None:
    stream.write(f"{text}{os.linesep}")


def write_bundle(
    stream: IO[str],
    files: list[Path],
    request: BundleRequest,
    reader: FileReader,
    progress_display: ProgressDisplay,
) -> None:
    """
    Write the bundle for the ordered files into an open text stream.

    There is no per-file error isolation: the first file that cannot be read
    stops the assembly and the reader's exception propagates.

    Args:
        stream: Destination stream, opened with newline="".
        files: Files in bundle order, located under `request.root`.
        request: Bundle options (author, source notes, empty line removal).
        reader: Reader used to load each file's content.
        progress_display: Receives one update per bundled file.

    Raises:
        FileReadError: If a source file cannot be read.
        OSError: If writing to the stream fails.
    """
    if request.author is not None:
        _write_line(stream, creator_header(request.author))
        _write_line(stream)

    with progress_display as pd:
        pd.on_start(f"Bundling {len(files)} files...", total=len(files))

        for file_path in files:
            relative_path = relative_source_path(file_path, request.root)

            content = reader.read_file(file_path)
            if request.remove_empty_lines:
                content = remove_empty_lines(content)

            if request.include_source_note:
                _write_line(stream, source_note(relative_path))
            _write_line(stream, content)
            _write_line(stream, SEPARATOR_LINE)

            pd.on_update(advance=1, description=f"Bundled {relative_path}")

        pd.on_complete(f"✅ Bundled {len(files)} files.", completed=len(files))
