"""Discovery provider port interface.

A discovery provider is a pluggable source of zero or more Installation
records. The registry composes providers in priority order; new editor
backends register a new implementation instead of being hard-wired.
"""

from collections.abc import Iterator
from typing import Protocol

from codeopen.domain.entities import Installation


class DiscoveryProvider(Protocol):
    """Protocol for editor discovery providers."""

    @property
    def name(self) -> str:
        """Short identifier used in logs and CLI output."""
        ...

    def probe(self) -> bool:
        """Resolve this provider's editor command, probing if needed.

        Returns:
            True if an installation is available.
        """
        ...

    def try_match(self, path_or_command: str) -> Installation | None:
        """Return an Installation if the path or command belongs to this provider.

        Args:
            path_or_command: Absolute executable path or bare command name.

        Returns:
            The matching Installation, or None if this provider does not
            recognise it or it is not usable.

        Raises:
            OSError, DiscoveryProviderError: Recoverable failures; the
                registry treats them as a non-match.
        """
        ...

    def list_all(self) -> Iterator[Installation]:
        """Yield every installation this provider can find.

        Raises:
            OSError, DiscoveryProviderError: Recoverable failures; the
                registry discards the remaining results of this provider.
        """
        ...

    def reset(self) -> None:
        """Forget any cached discovery state."""
        ...
