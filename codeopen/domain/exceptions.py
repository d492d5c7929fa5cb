"""Domain exceptions for codeopen.

These exceptions represent discovery and launch errors that callers may
want to handle. They should be caught at the application boundary (CLI,
host plugin) and converted to appropriate user-facing messages.
"""


class CodeOpenDomainError(Exception):
    """Base exception for all domain errors.

    Attributes:
        message: User-facing error message.
        hint: Optional actionable suggestion.
    """

    def __init__(self, message: str, hint: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.hint = hint


class DiscoveryProviderError(CodeOpenDomainError):
    """Raised by a discovery provider for a recoverable enumeration failure.

    The registry isolates these at the provider boundary.
    """

    pass

