"""Editor launcher port interface.

Defines the interface for opening files in an external editor, allowing
different implementations for different platforms or testing.
"""

from typing import Protocol

from codeopen.domain.entities import FilePosition, Installation


class EditorLauncher(Protocol):
    """Protocol for launching an editor at a file position.

    Launching is fire-and-forget: implementations spawn the editor and
    return without waiting for it.
    """

    def open(
        self,
        command: str,
        file_path: str,
        line: int = 0,
        column: int = 0,
        project_folder: str | None = None,
    ) -> bool:
        """Open a file in the editor.

        Args:
            command: Editor executable name or absolute path.
            file_path: File to open.
            line: 1-based line to jump to; 0 or less opens the bare file.
            column: 1-based column, used only when line > 0.
            project_folder: Optional folder to open as project context.

        Returns:
            True if the editor process was spawned. Failures are reported
            through a diagnostic sink and never raised.
        """
        ...

    def open_installation(
        self,
        installation: Installation,
        position: FilePosition,
        project_folder: str | None = None,
    ) -> bool:
        """Open a file position in a discovered installation."""
        ...
