"""
Bundle pipeline orchestration.

A bundle runs three stages in sequence:

1.  **Discovery**: walk the directory holding the output file and keep the
    files whose extension belongs to a requested language and whose path is
    not under an excluded directory.
2.  **Ordering**: sort by base name or by extension.
3.  **Assembly**: write creator header, source notes, contents and separators
    into the output file.

The output file is written atomically: a failure at any stage leaves no
partial bundle behind and the error propagates to the caller.
"""

from pathlib import Path

from rich import print as pr
from rich.markup import escape

from core.assembly import write_bundle
from core.discovery import discover_files
from core.file_io import FileReader, FileWriter, FilesystemFileReader, FilesystemFileWriter
from core.languages import resolve_requested_extensions
from core.models import BundleRequest, BundleResult
from core.sorting import sort_files
from ui.progress_display import ProgressDisplay, RichProgressDisplay
from utils import debug


def bundle(
    request: BundleRequest,
    reader: FileReader | None = None,
    progress_display: ProgressDisplay | None = None,
    writer: FileWriter | None = None,
) -> BundleResult:
    """
    Discover, order and concatenate the requested source files.

    Args:
        request: Bundle options. `request.output` should be absolute so the
            scan root and the output exclusion are unambiguous.
        reader: Optional file reader. Defaults to `FilesystemFileReader`.
        progress_display: Optional progress display. Defaults to
            `RichProgressDisplay`; pass `NoOpProgressDisplay()` in tests.
        writer: Optional writer for the output file. Defaults to a
            `FilesystemFileWriter` validated against `request.output`.

    Returns:
        BundleResult: The output path and the files that were bundled, in order.

    Raises:
        InvalidFilePathError: If the output location is not usable.
        DiscoveryError: If the scan root cannot be enumerated.
        FileReadError: If a source file cannot be read.
        FileWriteError: If the output cannot be written.
    """
    file_reader = reader if reader is not None else FilesystemFileReader()
    file_writer = (
        writer if writer is not None else FilesystemFileWriter.from_path(request.output)
    )
    display = progress_display if progress_display is not None else RichProgressDisplay()

    extensions = resolve_requested_extensions(request.languages)
    debug(f"Languages {list(request.languages)} resolved to {sorted(extensions)}")

    pr(f"\n[bold magenta]🔍 Scanning {escape(str(request.root))}...[/bold magenta]")
    discovered = discover_files(request.root, extensions, exclude=request.output)
    ordered = sort_files(discovered, request.sort)
    for file_path in ordered:
        debug(f"Bundling {file_path}")

    if not ordered:
        pr("[yellow]⚠ Warning:[/yellow] No matching source files were found.")

    with file_writer.open_atomic() as stream:
        write_bundle(stream, ordered, request, file_reader, display)

    return BundleResult(output=Path(request.output), files=ordered)
