"""Domain value objects for editor discovery.

Immutable values produced while probing candidate editors: parsed versions,
probe outcomes and the failure kinds that distinguish them.
"""

from dataclasses import dataclass, field
from enum import Enum


class ProbeFailure(Enum):
    """Why a probe or version parse did not produce a usable result."""

    NOT_FOUND = "not_found"
    TIMEOUT = "timeout"
    NON_ZERO_EXIT = "non_zero_exit"
    SPAWN_ERROR = "spawn_error"
    PARSE_ERROR = "parse_error"


@dataclass(frozen=True, order=True)
class Version:
    """Dotted numeric editor version.

    Ordering and equality only consider the numeric components; the
    prerelease tag is informational.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number (0 when the editor reports only two parts).
        prerelease: Optional tag following a dash (e.g., "insider").

    Raises:
        ValueError: If any numeric component is negative.
    """

    major: int
    minor: int
    patch: int = 0
    prerelease: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        """Validate version components."""
        if self.major < 0 or self.minor < 0 or self.patch < 0:
            raise ValueError(
                f"Version components cannot be negative, "
                f"got {self.major}.{self.minor}.{self.patch}"
            )

    @property
    def is_unknown(self) -> bool:
        """True for the 0.0.0 sentinel (editor found, version not determined)."""
        return (self.major, self.minor, self.patch) == (0, 0, 0)

    def __str__(self) -> str:
        base = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            return f"{base}-{self.prerelease}"
        return base


UNKNOWN_VERSION = Version(0, 0, 0)


@dataclass(frozen=True)
class ProbeResult:
    """Outcome of one bounded, non-interactive spawn of a candidate command.

    Attributes:
        succeeded: True only when the process exited with code 0 in time.
        exit_code: Process exit code, or None if it never ran to completion.
        raw_output: Decoded standard output, or None if nothing was captured.
        failure: Failure kind when succeeded is False, otherwise None.
        error_output: Decoded standard error, if any was captured.
    """

    succeeded: bool
    exit_code: int | None = None
    raw_output: str | None = None
    failure: ProbeFailure | None = None
    error_output: str | None = None

    @classmethod
    def success(cls, raw_output: str, error_output: str | None = None) -> "ProbeResult":
        """Create a successful result (exit code 0)."""
        return cls(
            succeeded=True,
            exit_code=0,
            raw_output=raw_output,
            error_output=error_output,
        )

    @classmethod
    def failed(
        cls,
        failure: ProbeFailure,
        exit_code: int | None = None,
        raw_output: str | None = None,
        error_output: str | None = None,
    ) -> "ProbeResult":
        """Create a failed result carrying its failure kind."""
        return cls(
            succeeded=False,
            exit_code=exit_code,
            raw_output=raw_output,
            failure=failure,
            error_output=error_output,
        )


@dataclass(frozen=True)
class ParsedVersion:
    """A parsed version plus the reason the sentinel was used, if it was."""

    version: Version
    failure: ProbeFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None
