"""Diagnostic sink port.

Launch failures are reported through an injected sink instead of a
module-level logger.
"""

from typing import Protocol


class DiagnosticSink(Protocol):
    """Protocol for receiving user-relevant diagnostic messages."""

    def info(self, message: str) -> None:
        """Report an informational message."""
        ...

    def warning(self, message: str) -> None:
        """Report a recoverable problem."""
        ...

    def error(self, message: str) -> None:
        """Report a failed user action."""
        ...
