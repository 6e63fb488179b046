"""
Response files: recording bundle options and replaying them.

A response file is plain text with one option per line, written by the
`create-rsp` command:

    --output <path>
    --language <lang> [<lang> ...]
    --note <True|False>
    --sort <name|type>
    --remove-empty-lines <True|False>
    --author <name>

Passing `@<file>.rsp` on the command line replaces the token with the options
recorded in the file. Boolean options are recorded with an explicit value and
replayed as a bare flag when true.
"""

import os
from pathlib import Path

from constants import RESPONSE_FILE_PREFIX, RESPONSE_FILE_SUFFIX
from core.exceptions import FileReadError, ResponseFileError
from core.file_io import FileReader, FilesystemFileReader, FilesystemFileWriter
from core.models import ResponseFileOptions

BOOLEAN_FLAGS = frozenset({"--note", "--nt", "--remove-empty-lines", "--rmvel"})
MULTI_VALUE_FLAGS = frozenset({"--language", "--lng"})


def render_response_file(options: ResponseFileOptions) -> str:
    """
    Serialize recorded answers into response file text.

    Args:
        options: Answers collected from the user.

    Returns:
        str: One `--flag value` line per option, joined with the platform newline.
    """
    lines = [
        f"--output {options.output}",
        f"--language {' '.join(options.languages)}",
        f"--note {options.note}",
        f"--sort {options.sort}",
        f"--remove-empty-lines {options.remove_empty_lines}",
        f"--author {options.author}",
    ]
    return os.linesep.join(lines)


def response_file_path(name: str, directory: Path) -> Path:
    return directory / f"{name}{RESPONSE_FILE_SUFFIX}"


def write_response_file(options: ResponseFileOptions, directory: Path) -> Path:
    """
    Write the response file for the recorded answers.

    Args:
        options: Answers collected from the user.
        directory: Directory receiving `<options.name>.rsp`.

    Returns:
        Path: Location of the written file.

    Raises:
        InvalidFilePathError: If the directory is missing or not writable.
        FileWriteError: If writing fails.
    """
    file_path = response_file_path(options.name, directory)
    writer = FilesystemFileWriter.from_path(file_path)
    writer.write_file(render_response_file(options))
    return file_path


def parse_response_file(text: str) -> list[str]:
    """
    Turn response file text into command-line tokens.

    Each non-blank line that does not start with "#" is one option: the first
    whitespace-separated word is the flag and the rest of the line its value.

    - Language flags split their value into one token per language.
    - Boolean flags become the bare flag when the value is missing or "true"
      (any case) and are dropped otherwise.
    - Other flags are dropped when their value is empty, so a recorded empty
      author does not turn into a header.
    - A line that does not start with "-" is passed through as a single token.

    Args:
        text: Content of a response file.

    Returns:
        list[str]: Tokens ready to be spliced into argv.
    """
    tokens: list[str] = []
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue

        flag, *rest = line.split(maxsplit=1)
        value = rest[0].strip() if rest else ""

        if not flag.startswith("-"):
            tokens.append(line)
        elif flag in BOOLEAN_FLAGS:
            if not value or value.lower() == "true":
                tokens.append(flag)
        elif flag in MULTI_VALUE_FLAGS:
            if value:
                tokens.append(flag)
                tokens.extend(value.split())
        elif value:
            tokens.extend([flag, value])

    return tokens


def expand_response_files(
    argv: list[str], reader: FileReader | None = None
) -> list[str]:
    """
    Replace every `@<path>` token in argv with the options recorded in that file.

    Args:
        argv: Command-line arguments, without the program name.
        reader: Optional file reader. Defaults to `FilesystemFileReader`.

    Returns:
        list[str]: The expanded arguments. Tokens without the prefix are kept as-is.

    Raises:
        ResponseFileError: If a referenced file cannot be read.
    """
    file_reader = reader if reader is not None else FilesystemFileReader()

    expanded: list[str] = []
    for token in argv:
        if not token.startswith(RESPONSE_FILE_PREFIX) or token == RESPONSE_FILE_PREFIX:
            expanded.append(token)
            continue

        path = Path(token[len(RESPONSE_FILE_PREFIX) :])
        if not path.is_file():
            raise ResponseFileError(
                message=f"Response file not found: {path}",
                file_path=str(path),
            )
        try:
            text = file_reader.read_file(path)
        except FileReadError as e:
            raise ResponseFileError(
                message=f"Failed to load response file: {path}",
                file_path=str(path),
                original_exception=e,
            ) from e
        expanded.extend(parse_response_file(text))

    return expanded
