"""Factory classes for discovery and launch wiring.

This module centralizes the creation of providers, the registry and the
launcher, keeping the CLI layer (and host applications) free from direct
adapter imports.
"""

from __future__ import annotations

import logging
from importlib.metadata import entry_points
from typing import TYPE_CHECKING

from codeopen.adapters.config.toml_config_provider import TomlConfigProvider
from codeopen.adapters.discovery.command_provider import CommandProbeProvider
from codeopen.adapters.discovery.profiles import resolve_profiles
from codeopen.adapters.editor import SubprocessEditorLauncher
from codeopen.adapters.probe.subprocess_probe import SubprocessCommandProbe
from codeopen.core.discovery.cache import InstallationCache
from codeopen.core.discovery.registry import DiscoveryRegistry

if TYPE_CHECKING:
    from codeopen.domain.config import CodeOpenConfig
    from codeopen.ports.config import ConfigProvider
    from codeopen.ports.diagnostics import DiagnosticSink
    from codeopen.ports.discovery import DiscoveryProvider
    from codeopen.ports.probe import CommandProbe

logger = logging.getLogger(__name__)

PROVIDER_ENTRY_POINT_GROUP = "codeopen.providers"


def load_entry_point_providers(
    group: str = PROVIDER_ENTRY_POINT_GROUP,
) -> list[DiscoveryProvider]:
    """Load third-party discovery providers from installed packages.

    Each entry point must resolve to a zero-argument callable returning a
    DiscoveryProvider. Plugins that fail to load are logged and skipped.

    Args:
        group: Entry-point group to scan.

    Returns:
        Providers in entry-point order.
    """
    providers: list[DiscoveryProvider] = []
    for entry_point in entry_points(group=group):
        try:
            factory = entry_point.load()
            providers.append(factory())
        except Exception:
            logger.warning(
                "Failed to load discovery provider plugin '%s'",
                entry_point.name,
                exc_info=True,
            )
    return providers


class ConfigFactory:
    """Factory for creating config providers."""

    def create_config_provider(self) -> ConfigProvider:
        return TomlConfigProvider()


class DiscoveryFactory:
    """Factory for the discovery registry and editor launcher.

    Args:
        config: CodeOpenConfig with discovery and launch settings.
        probe: CommandProbe shared by all built-in providers.
    """

    def __init__(
        self,
        config: CodeOpenConfig,
        probe: CommandProbe | None = None,
    ) -> None:
        self._config = config
        self._probe = probe or SubprocessCommandProbe()

    def create_providers(self) -> list[DiscoveryProvider]:
        """Create one CommandProbeProvider per configured profile.

        Each provider owns a separate InstallationCache, so resolving one
        editor never affects another. The last provider also accepts
        absolute paths whose executable name matches no candidate.

        Raises:
            ValueError: If the config names an unknown provider.
        """
        discovery = self._config.discovery
        profiles = resolve_profiles(discovery.providers, self._config.editors)
        last = len(profiles) - 1
        return [
            CommandProbeProvider(
                profile,
                InstallationCache(
                    self._probe,
                    timeout=discovery.probe_timeout,
                    version_args=(discovery.version_flag,),
                ),
                match_any_path=index == last,
            )
            for index, profile in enumerate(profiles)
        ]

    def create_registry(self) -> DiscoveryRegistry:
        """Create a registry with built-in providers, then plugin providers."""
        registry = DiscoveryRegistry(self.create_providers())
        if self._config.discovery.load_plugins:
            for provider in load_entry_point_providers():
                registry.register(provider)
        return registry

    def create_launcher(
        self, diagnostics: DiagnosticSink | None = None
    ) -> SubprocessEditorLauncher:
        """Create the editor launcher configured from [launch]."""
        return SubprocessEditorLauncher(
            diagnostics=diagnostics,
            goto_flag=self._config.launch.goto_flag,
            open_project_folder=self._config.launch.open_project_folder,
        )
