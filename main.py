"""
codebundle CLI Entry Point.

This module implements the command-line interface for codebundle, a tool that
collects the source files of a project into a single text file. It exposes two
commands:

1.  **bundle**: Scans the directory that will hold the output file, keeps the
    files of the requested languages (skipping build output, IDE and VCS
    metadata directories), orders them by name or by type and concatenates
    them, optionally with a creator header, per-file source notes and with
    empty lines removed.
2.  **create-rsp**: Asks for each bundle option interactively and records the
    answers in a `<name>.rsp` response file in the current directory.

Response files are replayed by passing `@<file>.rsp` anywhere on the command
line.

Usage:
    $ python main.py bundle --output out/bundle.txt --language python java --note
    $ python main.py create-rsp
    $ python main.py bundle @my-options.rsp

Dependencies:
    - Typer: CLI argument parsing and app structure.
    - Rich: Terminal UI, colors, and progress visualization.
    - Inquirer: Interactive terminal user prompts.
"""

from pathlib import Path
import sys
from typing import Annotated

import typer
from rich import print as pr
from rich.markup import escape

from constants import CLI_LANGUAGE_CHOICES
from core.bundler import bundle
from core.exceptions import DiscoveryError, FileIOError, ResponseFileError
from core.models import BundleRequest
from core.response_file import expand_response_files, write_response_file
from models import SortOption
from ui.prompts import prompt_response_file_options
from utils import set_verbose

app = typer.Typer(
    help="Bundle the source files of a project into a single file.",
    no_args_is_help=True,
)


@app.callback()
def cli(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print debug details while running."),
    ] = False,
):
    """Bundle the source files of a project into a single file."""
    set_verbose(verbose)


@app.command(
    "bundle",
    context_settings={"allow_extra_args": True},
)
def bundle_command(
    ctx: typer.Context,
    output: Annotated[
        Path,
        typer.Option(
            "--output",
            "--o",
            dir_okay=False,
            resolve_path=True,  # The scan root is the output's parent directory
            help="File path and name of the bundle.",
        ),
    ],
    language: Annotated[
        list[str],
        typer.Option(
            "--language",
            "--lng",
            help=f"Languages of files to add: {', '.join(CLI_LANGUAGE_CHOICES)}. "
            "Accepts several values after one flag.",
        ),
    ],
    note: Annotated[
        bool, typer.Option("--note", "--nt", help="Add a code source note.")
    ] = False,
    sort: Annotated[
        SortOption,
        typer.Option(
            "--sort", "--srt", help="Sort the code files by file-name or code-kind."
        ),
    ] = SortOption.NAME,
    remove_empty_lines: Annotated[
        bool,
        typer.Option("--remove-empty-lines", "--rmvel", help="Remove empty lines."),
    ] = False,
    author: Annotated[
        str | None,
        typer.Option("--author", "--athr", help="Add the author name to the file."),
    ] = None,
):
    """
    Bundle the code files found next to the output file into it.

    Values following `--language` that are not options themselves arrive as
    extra arguments and are treated as additional languages, so both
    `--language python java` and `--language python --language java` work.

    Raises:
        typer.BadParameter: If a language is not one of the accepted values.
        typer.Exit: With code 1 if the bundle could not be written.
    """
    languages = validate_languages([*language, *ctx.args])

    request = BundleRequest(
        output=output,
        languages=languages,
        sort=sort,
        remove_empty_lines=remove_empty_lines,
        include_source_note=note,
        author=author,
    )

    try:
        result = bundle(request)
    except FileIOError as e:
        print_file_io_err(e)
    except DiscoveryError as e:
        print_discovery_err(e)
    except Exception as e:  # noqa: BLE001
        # Catch-all for any unexpected errors - ensures users always see
        # a friendly message instead of a raw Python stack trace
        print_unexpected_err(e)
    else:
        pr(
            f"\n[green]✅ Bundled {result.file_count} files into "
            f"[bold]{escape(str(result.output))}[/bold][/green]"
        )


@app.command("create-rsp")
def create_rsp_command():
    """
    Create a response file by answering a prompt for each bundle option.

    Raises:
        typer.Exit: With code 1 if the prompts are cancelled or the file
            cannot be written.
    """
    options = prompt_response_file_options()

    try:
        rsp_path = write_response_file(options, Path.cwd())
    except FileIOError as e:
        print_file_io_err(e)
    else:
        pr(
            f"\n[green]Response file '{escape(str(rsp_path))}' has been created successfully![/green]"
        )
        pr(f"Replay it with: [italic]codebundle bundle @{escape(rsp_path.name)}[/italic]")


def validate_languages(values: list[str]) -> tuple[str, ...]:
    """
    Check the requested languages against the accepted values.

    Membership is case-sensitive, matching the values listed in the help.

    Args:
        values: Languages collected from the command line.

    Returns:
        tuple[str, ...]: The same languages, in order.

    Raises:
        typer.BadParameter: If any value is not accepted.
    """
    invalid = [value for value in values if value not in CLI_LANGUAGE_CHOICES]
    if invalid:
        raise typer.BadParameter(
            f"{', '.join(repr(v) for v in invalid)} is not one of "
            f"{', '.join(repr(c) for c in CLI_LANGUAGE_CHOICES)}.",
            param_hint="'--language' / '--lng'",
        )
    return tuple(values)


def print_file_io_err(e: FileIOError) -> None:
    """
    Displays a user-friendly error message for file I/O operation failures.

    Prints formatted error messages to inform the user about file read/write
    issues, including the file path and the underlying cause.

    Args:
        e (FileIOError): The exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    report_file_io_err(e)
    raise typer.Exit(code=1) from e


def report_file_io_err(e: FileIOError) -> None:
    pr("❌ [bold red]File I/O Error[/bold red]")
    pr(f"Error while creating the file: {escape(e.message)}")
    if e.file_path:
        pr(f"File path: [yellow]{escape(e.file_path)}[/yellow]")

    pr("\n[yellow]Quick Fix:[/yellow] Check file permissions and available disk space.")
    if e.original_exception:
        pr(f"\nTechnical details: {escape(str(e.original_exception))}")


def print_discovery_err(e: DiscoveryError) -> None:
    """
    Displays a user-friendly error message when the scan root cannot be read.

    Args:
        e (DiscoveryError): The exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Scan Error[/bold red]")
    pr(f"Error while creating the file: {escape(e.message)}")
    if e.root:
        pr(f"Scan root: [yellow]{escape(str(e.root))}[/yellow]")
    if e.original_exception:
        pr(f"\nTechnical details: {escape(str(e.original_exception))}")

    raise typer.Exit(code=1) from e


def print_unexpected_err(e: Exception) -> None:
    """
    Displays a user-friendly error message for unexpected errors.

    Args:
        e (Exception): The unexpected exception that was raised.

    Raises:
        typer.Exit: Always raises with exit code 1 to terminate the application.
    """
    pr("❌ [bold red]Unexpected Error[/bold red]")
    pr("Error while creating the file.")
    pr(f"\n[yellow]Error Type:[/yellow] {type(e).__name__}")
    pr(f"[yellow]Error Message:[/yellow] {escape(str(e))}")

    pr("\n--- PLEASE REPORT THIS ---")
    if e.__cause__:
        pr(f"Caused by: {escape(str(e.__cause__))}")

    raise typer.Exit(code=1) from e


def run() -> None:
    """Console script entry point: expands @response files, then runs the app."""
    try:
        args = expand_response_files(sys.argv[1:])
    except ResponseFileError as e:
        report_file_io_err(e)
        raise SystemExit(1) from e

    app(args=args, prog_name="codebundle")


if __name__ == "__main__":
    run()
