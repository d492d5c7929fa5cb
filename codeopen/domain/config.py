"""Config domain models for codeopen.

Configuration is stored in config.toml (global and per-project) and holds
user preferences for editor discovery and launching. This module defines
the domain models that represent validated configuration state.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from codeopen.domain.entities import EditorProfile

DEFAULT_PROVIDERS: tuple[str, ...] = ("cursor", "vscodium", "void")


@dataclass(frozen=True)
class DiscoveryConfig:
    """Configuration for editor discovery.

    Attributes:
        probe_timeout: Seconds to wait for `<command> --version` before killing it
        version_flag: Argument passed to candidates when probing
        providers: Built-in provider short names, in priority order
        load_plugins: Whether to load providers from the codeopen.providers
                      entry-point group

    Raises:
        ValueError: If probe_timeout is not a positive number, version_flag is
            empty or providers is not a list of names.
    """

    probe_timeout: float = 2.0
    version_flag: str = "--version"
    providers: list[str] = field(default_factory=lambda: list(DEFAULT_PROVIDERS))
    load_plugins: bool = True

    def __post_init__(self) -> None:
        """Validate discovery config after initialization."""
        if isinstance(self.probe_timeout, bool) or not isinstance(
            self.probe_timeout, (int, float)
        ):
            raise ValueError(f"probe_timeout must be a number, got {self.probe_timeout!r}")
        if self.probe_timeout <= 0:
            raise ValueError(f"probe_timeout must be positive, got {self.probe_timeout}")
        if not isinstance(self.version_flag, str) or not self.version_flag:
            raise ValueError("version_flag cannot be empty")
        if not isinstance(self.providers, list) or not all(
            isinstance(name, str) for name in self.providers
        ):
            raise ValueError(f"providers must be a list of names, got {self.providers!r}")


@dataclass(frozen=True)
class LaunchConfig:
    """Configuration for launching the editor.

    Attributes:
        goto_flag: Flag preceding the path:line:column target
        open_project_folder: Pass the project folder ahead of the file

    Raises:
        ValueError: If goto_flag is empty.
    """

    goto_flag: str = "--goto"
    open_project_folder: bool = True

    def __post_init__(self) -> None:
        """Validate launch config after initialization."""
        if not isinstance(self.goto_flag, str) or not self.goto_flag:
            raise ValueError("goto_flag cannot be empty")


@dataclass(frozen=True)
class CodeOpenConfig:
    """Complete codeopen configuration.

    Attributes:
        discovery: Discovery configuration
        launch: Launch configuration
        editors: Custom editor profiles keyed by short name
    """

    discovery: DiscoveryConfig = field(default_factory=DiscoveryConfig)
    launch: LaunchConfig = field(default_factory=LaunchConfig)
    editors: dict[str, EditorProfile] = field(default_factory=dict)

    @staticmethod
    def default() -> "CodeOpenConfig":
        """Create a config with all default values."""
        return CodeOpenConfig(
            discovery=DiscoveryConfig(),
            launch=LaunchConfig(),
            editors={},
        )

    @staticmethod
    def from_partial(base: "CodeOpenConfig", data: dict[str, Any]) -> "CodeOpenConfig":
        """Overlay raw TOML data onto an existing config.

        Sections are merged key by key; values absent from data keep the
        base value. Each section is re-validated.

        Args:
            base: Config to start from
            data: Parsed TOML data (may contain any subset of sections)

        Returns:
            New CodeOpenConfig with overrides applied

        Raises:
            ValueError: If a section contains invalid values or unknown keys.
        """
        discovery_data = _table(data, "discovery")
        launch_data = _table(data, "launch")
        try:
            discovery = replace(base.discovery, **discovery_data)
            launch = replace(base.launch, **launch_data)
        except TypeError as e:
            raise ValueError(f"Unknown config key: {e}") from e

        editors = dict(base.editors)
        for short_name, section in _table(data, "editors").items():
            if not isinstance(section, dict):
                raise ValueError(f"[editors.{short_name}] must be a table")
            name = section.get("name", short_name)
            if not isinstance(name, str):
                raise ValueError(f"[editors.{short_name}] name must be a string")
            candidates = section.get("candidates", [])
            if isinstance(candidates, str):
                candidates = [candidates]
            if not isinstance(candidates, list) or not all(
                isinstance(candidate, str) for candidate in candidates
            ):
                raise ValueError(
                    f"[editors.{short_name}] candidates must be a list of command names"
                )
            editors[short_name] = EditorProfile(
                name=name,
                short_name=short_name,
                candidates=tuple(candidates),
            )

        return CodeOpenConfig(discovery=discovery, launch=launch, editors=editors)


def _table(data: dict[str, Any], key: str) -> dict[str, Any]:
    """Return data[key] as a table, or an empty one when absent.

    Raises:
        ValueError: If the value is present but not a table.
    """
    value = data.get(key, {})
    if not isinstance(value, dict):
        raise ValueError(f"[{key}] must be a table, got {type(value).__name__}")
    return value
