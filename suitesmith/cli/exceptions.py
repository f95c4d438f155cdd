# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""CLI-specific exception hierarchy.

Library errors are translated into these at the command boundary so every
failure reaches the user with a message, optional hints and an exit code.
"""

from .constants import ExitCode


class CLIError(Exception):
    """Base exception for all CLI-related errors.

    Attributes:
        message: Main error message
        details: Optional list of additional detail lines
        exit_code: Suggested exit code for this error type (class attribute)
    """

    exit_code: int = ExitCode.USAGE

    def __init__(self, message: str, details: list[str] | None = None):
        self.message = message
        self.details = details or []
        super().__init__(message)

    def format_for_console(self) -> str:
        """Format error message for console output."""
        lines = [f"[red]Error:[/red] {self.message}"]
        if self.details:
            lines.append("")
            for detail in self.details:
                lines.append(f"  • {detail}")
        return "\n".join(lines)


class ConfigurationError(CLIError):
    """Configuration or manifest problems."""

    exit_code = ExitCode.CONFIG


class ValidationError(CLIError):
    """Input validation errors."""

    exit_code = ExitCode.DATAERR


class OutputError(CLIError):
    """Generated files could not be read or written."""

    exit_code = ExitCode.IOERR
