"""Shared error handling for hbslcli."""

import sys
from typing import NoReturn

import typer


class HbslError(Exception):
    """Base exception for CLI operations."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        self.message = message
        self.exit_code = exit_code
        super().__init__(message)


class UsageError(HbslError):
    """Bad combination of arguments or an invalid config file."""

    def __init__(self, message: str) -> None:
        super().__init__(message, exit_code=2)


class InputError(HbslError):
    """Raised when the template cannot be read."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to read input: {message}", exit_code=1)


class OutputError(HbslError):
    """Raised when the transpiled output cannot be written."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Failed to write output: {message}", exit_code=1)


def exit_with_error(message: str, exit_code: int = 1) -> NoReturn:
    """Exit the program with an error message."""
    typer.secho(f"Error: {message}", err=True, fg=typer.colors.RED)
    sys.exit(exit_code)


def handle_error(error: Exception) -> NoReturn:
    """Handle and exit on CLI errors."""
    if isinstance(error, HbslError):
        exit_with_error(error.message, error.exit_code)
    else:
        # Unexpected error
        typer.echo(f"Unexpected error: {error}", err=True)
        sys.exit(1)
