"""Use case for opening a file position in a discovered editor.

Picks an installation (explicitly requested, or the first one discovered)
and hands it to the launcher. Like the other use cases, it reports failure
through the response instead of raising.
"""

import logging
from dataclasses import dataclass

from codeopen.core.discovery.registry import DiscoveryRegistry
from codeopen.domain.entities import FilePosition, Installation
from codeopen.ports.editor import EditorLauncher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenRequest:
    """Request to open a file position.

    Attributes:
        file_path: File to open.
        line: 1-based line; 0 opens the bare file.
        column: 1-based column.
        project_folder: Optional project folder to open alongside the file.
        editor: Optional editor command or absolute path to use instead of
                the first discovered installation.
    """

    file_path: str
    line: int = 0
    column: int = 0
    project_folder: str | None = None
    editor: str | None = None


@dataclass(frozen=True)
class OpenResponse:
    """Result of an open request.

    Attributes:
        success: Whether the editor was launched.
        installation: Installation used (None if none was found).
        error: Error message if unsuccessful.
        hint: Optional actionable suggestion.
    """

    success: bool
    installation: Installation | None = None
    error: str | None = None
    hint: str | None = None

    @classmethod
    def create_success(cls, installation: Installation) -> "OpenResponse":
        return cls(success=True, installation=installation)

    @classmethod
    def create_error(
        cls,
        message: str,
        hint: str | None = None,
        installation: Installation | None = None,
    ) -> "OpenResponse":
        return cls(success=False, installation=installation, error=message, hint=hint)


class OpenFileUseCase:
    """Open a file in the preferred (or first available) editor.

    Args:
        registry: Registry used to find installations.
        launcher: Launcher used to spawn the editor.
    """

    def __init__(self, registry: DiscoveryRegistry, launcher: EditorLauncher) -> None:
        self._registry = registry
        self._launcher = launcher

    def select_installation(self, editor: str | None = None) -> Installation | None:
        """Pick the installation to launch.

        Args:
            editor: Command name or absolute path requested by the user.

        Returns:
            Matching installation, the first discovered one when editor is
            None, or None if nothing is available.
        """
        if editor:
            return self._registry.try_discover(editor)
        return next(iter(self._registry.list_installations()), None)

    def execute(self, request: OpenRequest) -> OpenResponse:
        """Open the requested file position.

        Args:
            request: What to open and, optionally, with which editor.

        Returns:
            OpenResponse describing the outcome.
        """
        installation = self.select_installation(request.editor)
        if installation is None:
            if request.editor:
                return OpenResponse.create_error(
                    f"Editor '{request.editor}' was not found or did not respond",
                    hint="Pass a supported command name (e.g. 'code', 'codium', 'cursor') "
                    "or an absolute path to the editor executable",
                )
            return OpenResponse.create_error(
                "No supported editor found",
                hint="Install Void, VSCodium or Cursor and make sure its command is on PATH",
            )

        position = FilePosition(request.file_path, request.line, request.column)
        logger.info(
            "Opening %s with %s (%s)",
            request.file_path,
            installation.display_name,
            installation.command,
        )
        if not self._launcher.open_installation(
            installation, position, request.project_folder
        ):
            return OpenResponse.create_error(
                f"Failed to launch {installation.display_name}",
                hint="Run with --verbose for details",
                installation=installation,
            )
        return OpenResponse.create_success(installation)
