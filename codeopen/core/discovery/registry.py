"""Registry composing discovery providers in priority order.

The registry is the failure boundary between providers: a provider that
raises a recoverable error while enumerating or matching is skipped, and
its siblings still run.
"""

import logging
from collections.abc import Iterable, Iterator

from codeopen.domain.entities import Installation
from codeopen.domain.exceptions import DiscoveryProviderError
from codeopen.ports.discovery import DiscoveryProvider
from codeopen.ports.progress import ProgressCallback

logger = logging.getLogger(__name__)

# Errors a provider may raise without aborting discovery as a whole.
RECOVERABLE_ERRORS: tuple[type[Exception], ...] = (OSError, DiscoveryProviderError)


class DiscoveryRegistry:
    """Ordered collection of discovery providers.

    Usage::

        registry = DiscoveryRegistry([cursor_provider, void_provider])
        for installation in registry.list_installations():
            print(installation.display_name, installation.version)
    """

    def __init__(self, providers: Iterable[DiscoveryProvider] = ()) -> None:
        self._providers: list[DiscoveryProvider] = list(providers)

    @property
    def providers(self) -> tuple[DiscoveryProvider, ...]:
        """Registered providers in priority order."""
        return tuple(self._providers)

    def register(self, provider: DiscoveryProvider, priority: int | None = None) -> None:
        """Register a provider.

        Args:
            provider: Provider to add.
            priority: Index to insert at (0 = highest priority). Appends
                when None.
        """
        if priority is None:
            self._providers.append(provider)
        else:
            self._providers.insert(priority, provider)
        logger.debug("Registered discovery provider '%s'", provider.name)

    def initialize(self, progress: ProgressCallback | None = None) -> list[str]:
        """Probe every provider up front.

        Args:
            progress: Optional callback notified once per provider.

        Returns:
            Names of the providers that found an installation.
        """
        found: list[str] = []
        if progress:
            progress.on_start(len(self._providers), "Probing editors")
        for index, provider in enumerate(self._providers, start=1):
            if progress:
                progress.on_progress(index, provider.name)
            try:
                if provider.probe():
                    found.append(provider.name)
            except RECOVERABLE_ERRORS:
                logger.warning(
                    "Discovery provider '%s' failed to probe", provider.name, exc_info=True
                )
        if progress:
            progress.on_complete()
        return found

    def list_installations(self) -> Iterator[Installation]:
        """Yield installations from every provider, in priority order.

        The generator is lazy and can be restarted by calling this method
        again. If a provider raises a recoverable error partway through, its
        remaining results are discarded (the ones already yielded stay valid)
        and the next provider is tried.

        Yields:
            Installation records.
        """
        for provider in list(self._providers):
            try:
                yield from provider.list_all()
            except RECOVERABLE_ERRORS:
                logger.warning(
                    "Discovery provider '%s' failed while listing installations",
                    provider.name,
                    exc_info=True,
                )

    def try_discover(self, path_or_command: str) -> Installation | None:
        """Return the first provider match for an executable path or name.

        Args:
            path_or_command: Absolute executable path or bare command name.

        Returns:
            The first matching Installation, or None.
        """
        for provider in list(self._providers):
            try:
                installation = provider.try_match(path_or_command)
            except RECOVERABLE_ERRORS:
                logger.warning(
                    "Discovery provider '%s' failed to match '%s'",
                    provider.name,
                    path_or_command,
                    exc_info=True,
                )
                continue
            if installation is not None:
                return installation
        return None

    def reset(self) -> None:
        """Reset cached discovery state in every provider."""
        for provider in self._providers:
            provider.reset()
