"""Command probe port interface.

Defines the interface for spawning a candidate executable non-interactively
and reporting whether it behaved like an installed editor.
"""

from collections.abc import Sequence
from typing import Protocol

from codeopen.domain.value_objects import ProbeResult


class CommandProbe(Protocol):
    """Protocol for bounded, non-interactive command probes."""

    def probe(self, command: str, args: Sequence[str], timeout: float) -> ProbeResult:
        """Run a command and capture its output.

        Args:
            command: Executable name (resolved via PATH) or absolute path.
            args: Arguments to pass, typically a version flag.
            timeout: Maximum seconds to wait before killing the process.

        Returns:
            ProbeResult describing the outcome. Implementations must never
            raise; every failure is reported through ProbeResult.failure.
        """
        ...
