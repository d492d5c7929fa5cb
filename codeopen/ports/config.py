"""Configuration provider port.

Defines the interface for loading and accessing application configuration.
"""

from pathlib import Path
from typing import Protocol

from codeopen.domain.config import CodeOpenConfig


class ConfigProvider(Protocol):
    """Protocol for loading and providing configuration."""

    def load(self, project_dir: Path | None = None) -> CodeOpenConfig:
        """Load configuration for a project.

        Args:
            project_dir: Directory containing .codeopen/config.toml, or None
                to load global configuration only.

        Returns:
            CodeOpenConfig instance with loaded or default values

        Note:
            Implementations should gracefully fall back to defaults
            if config file is missing or invalid.
        """
        ...
