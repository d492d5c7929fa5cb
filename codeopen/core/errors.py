"""CLI error handling with actionable hints.

Provides consistent error formatting and common error factory functions
for all codeopen CLI commands.
"""

from typing import NoReturn

import click


class CodeOpenCliError(click.ClickException):
    """CLI error with actionable hint for users.

    Attributes:
        message: The primary error message.
        hint: Optional actionable suggestion for the user.

    Example:
        raise CodeOpenCliError(
            "No supported editor found",
            hint="Install VSCodium and make sure 'codium' is on PATH",
        )
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        """Initialize the error with message and optional hint.

        Args:
            message: The primary error message.
            hint: Optional actionable suggestion for the user.
        """
        super().__init__(message)
        self.hint = hint

    def format_message(self) -> str:
        """Format the error message with hint if present.

        Returns:
            Formatted error message, with hint on a new line if provided.
        """
        msg = self.message
        if self.hint:
            msg += f"\nHint: {self.hint}"
        return msg


def editor_not_found_error(path_or_command: str) -> NoReturn:
    """Raise error when a requested editor could not be discovered.

    Args:
        path_or_command: The command name or path the user asked for.

    Raises:
        CodeOpenCliError: Always raises with a discovery hint.
    """
    raise CodeOpenCliError(
        f"No supported editor matches '{path_or_command}'",
        hint="Run 'codeopen list' to see which editors were detected",
    )


def file_not_found_error(path: str) -> NoReturn:
    """Raise error when the file to open does not exist.

    Raises:
        CodeOpenCliError: Always raises with path context.
    """
    raise CodeOpenCliError(
        f"File not found: {path}",
        hint="Verify the file path and try again",
    )
