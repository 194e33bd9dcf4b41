"""Interactive prompts for bakkutteh."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Protocol

import typer

from bakkutteh._constants import ENV_ASSIGNMENT_OPERATOR, ENV_QUOTE_CHARS
from bakkutteh.errors import UserCancelledError

from .output import console, print_error

# Returns an error message, or None when the input is valid.
Validator = Callable[[str], str | None]


class Prompter(Protocol):
    """What the dispatcher needs from an interactive front end."""

    def select(self, message: str, choices: Sequence[str]) -> str: ...

    def confirm(self, message: str, default: bool = False) -> bool: ...

    def text(
        self, message: str, default: str | None = None, validator: Validator | None = None
    ) -> str: ...

    def info(self, message: str) -> None: ...


class ConsolePrompter:
    """Prompter reading from the terminal.

    Ctrl-C or end of input at any prompt raises UserCancelledError.
    """

    def select(self, message: str, choices: Sequence[str]) -> str:
        if not choices:
            raise ValueError("Nothing to select from")

        console.print(f"[bold]{message}[/bold]")
        for i, choice in enumerate(choices, 1):
            console.print(f"  [cyan]{i}[/cyan]. {choice}")

        while True:
            try:
                index = typer.prompt("Number", default=1, type=int)
            except typer.Abort:
                raise UserCancelledError("Operation cancelled")  # noqa: B904
            if 1 <= index <= len(choices):
                return choices[index - 1]
            print_error(f"Choose a number between 1 and {len(choices)}")

    def confirm(self, message: str, default: bool = False) -> bool:
        try:
            return typer.confirm(message, default=default)
        except typer.Abort:
            raise UserCancelledError("Operation cancelled")  # noqa: B904

    def text(
        self, message: str, default: str | None = None, validator: Validator | None = None
    ) -> str:
        while True:
            try:
                value = typer.prompt(message, default=default, type=str)
            except typer.Abort:
                raise UserCancelledError("Operation cancelled")  # noqa: B904
            error = validator(value) if validator else None
            if error is None:
                return value
            print_error(error)

    def info(self, message: str) -> None:
        console.print(message)


def validate_env_assignment(value: str) -> str | None:
    """Check an additional env input of the form ``KEY=VALUE``."""
    parts = value.split(ENV_ASSIGNMENT_OPERATOR)
    if len(parts) != 2 or not parts[0].strip():
        return "Environment variable should respect the format: ENV_NAME=VALUE"
    return None


def parse_env_assignment(value: str) -> tuple[str, str]:
    """Split ``KEY=VALUE`` and strip quote characters from the value."""
    key, _, raw = value.partition(ENV_ASSIGNMENT_OPERATOR)
    for quote in ENV_QUOTE_CHARS:
        raw = raw.replace(quote, "")
    return key.strip(), raw


def number_validator(label: str) -> Validator:
    """Validator accepting numbers only."""

    def _validate(value: str) -> str | None:
        try:
            float(value)
        except ValueError:
            return f"{label} should contain only numbers"
        return None

    return _validate
