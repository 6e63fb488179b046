"""
Interactive user prompts for the codebundle CLI application.

This module drives the `create-rsp` flow: a fixed, linear sequence of
questions whose answers are recorded into a response file. There is no
validation and no re-prompting; yes/no questions count as "yes" only for
a literal "Y" (any case).

The module uses the `inquirer` library for the prompts and `rich` for
formatted terminal output.
"""

from typing import Any, Callable

import inquirer  # type: ignore
from inquirer.themes import GreenPassion  # type: ignore
from rich import print as pr
import typer

from core.models import ResponseFileOptions
from models import SortOption


def is_yes(answer: str | None) -> bool:
    """Return True only for a literal "Y" answer, ignoring case."""
    return (answer or "").strip().lower() == "y"


def build_response_file_questions() -> list[Any]:
    """
    Build the ordered list of create-rsp questions.

    Returns:
        list: inquirer questions, asked in this order: response file name,
        output path, languages, source note, sort, empty line removal, author.
    """
    return [
        inquirer.Text("name", message="Response file name (without .rsp)"),
        inquirer.Text("output", message="File path and name for --output option"),
        inquirer.Text(
            "languages",
            message="Languages for --language option (separated by space)",
        ),
        inquirer.Text("note", message="Add code source note (--note option)? (Y/N)"),
        inquirer.List(
            "sort",
            message="Sort code files by file-name or code-kind (--sort option)",
            choices=list(SortOption),
            default=SortOption.NAME,
        ),
        inquirer.Text(
            "remove_empty_lines",
            message="Remove empty lines (--remove-empty-lines option)? (Y/N)",
        ),
        inquirer.Text("author", message="Author name (--author option)"),
    ]


def answers_to_options(answers: dict[str, Any]) -> ResponseFileOptions:
    """
    Convert raw prompt answers into response file options.

    Args:
        answers: Mapping returned by `inquirer.prompt`.

    Returns:
        ResponseFileOptions: The recorded options. The sort answer falls back
        to "name" unless it is "type" (any case).
    """
    sort_answer = str(answers.get("sort") or "").strip().lower()
    return ResponseFileOptions(
        name=(answers.get("name") or "").strip(),
        output=(answers.get("output") or "").strip(),
        languages=tuple((answers.get("languages") or "").split()),
        note=is_yes(answers.get("note")),
        sort=SortOption.TYPE if sort_answer == SortOption.TYPE else SortOption.NAME,
        remove_empty_lines=is_yes(answers.get("remove_empty_lines")),
        author=(answers.get("author") or "").strip(),
    )


def prompt_response_file_options(
    prompt: Callable[..., dict[str, Any] | None] | None = None,
) -> ResponseFileOptions:
    """
    Ask the create-rsp questions and return the recorded options.

    Args:
        prompt: Optional prompt function with the `inquirer.prompt` signature,
            injected by tests. Defaults to `inquirer.prompt`.

    Returns:
        ResponseFileOptions: The answers.

    Raises:
        typer.Exit: With code 1 if the user cancels the prompts.
    """
    ask = prompt if prompt is not None else inquirer.prompt

    pr("\n[bold green]Welcome to the create-rsp command![/bold green]")
    pr("Please provide the desired values for each command option:\n")

    answers = ask(build_response_file_questions(), theme=GreenPassion())

    if not answers:
        pr("\n[yellow]Cancelled, no response file was written.[/yellow]")
        raise typer.Exit(code=1)

    return answers_to_options(answers)
