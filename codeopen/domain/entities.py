"""Core domain entities for codeopen.

Installations are the records handed to callers after discovery; profiles
describe which command names identify an editor family.
"""

from dataclasses import dataclass, field
from typing import Any

from codeopen.domain.value_objects import UNKNOWN_VERSION, Version


@dataclass(frozen=True)
class Installation:
    """A discovered, usable editor binary plus its metadata.

    Installations are immutable values; callers receive copies and never
    share mutable discovery state through them.

    Attributes:
        display_name: Human-readable label (e.g., "Void Editor").
        command: Executable name or absolute path used to invoke the editor.
        version: Parsed version, or the 0.0.0 sentinel when unknown.
        is_prerelease: Whether the installation is a prerelease build.
        provider: Short name of the provider that discovered it.

    Raises:
        ValueError: If command is empty.
    """

    display_name: str
    command: str
    version: Version = UNKNOWN_VERSION
    is_prerelease: bool = False
    provider: str = ""

    def __post_init__(self) -> None:
        """Validate installation fields."""
        if not self.command or not self.command.strip():
            raise ValueError("Installation command cannot be empty")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {
            "display_name": self.display_name,
            "command": self.command,
            "version": str(self.version),
            "version_known": not self.version.is_unknown,
            "is_prerelease": self.is_prerelease,
            "provider": self.provider,
        }


@dataclass(frozen=True)
class EditorProfile:
    """Describes how to find one editor family on PATH.

    Attributes:
        name: Display name (e.g., "VSCodium").
        short_name: Machine identifier used in config and CLI output.
        candidates: Command names to probe, in priority order.

    Raises:
        ValueError: If short_name is empty or no candidates are given.
    """

    name: str
    short_name: str
    candidates: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate profile fields."""
        if not self.short_name:
            raise ValueError("EditorProfile short_name cannot be empty")
        if not self.candidates:
            raise ValueError(f"EditorProfile '{self.short_name}' needs at least one candidate")

    def matches_name(self, command: str) -> bool:
        """Check whether a bare command name is one of this profile's candidates."""
        lowered = command.lower()
        return any(candidate.lower() == lowered for candidate in self.candidates)


@dataclass(frozen=True)
class FilePosition:
    """A location to open: file plus optional line/column.

    A line of 0 or less means "no specific line".
    """

    file_path: str
    line: int = 0
    column: int = 0
