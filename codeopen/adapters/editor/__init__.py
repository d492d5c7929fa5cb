"""Editor adapter for opening files in external editors.

Provides the EditorLauncher implementation using subprocess, with support
for the VS Code-style goto convention (`--goto path:line:column`) and for
opening a project folder alongside the file.
"""

import logging
import os
import subprocess
import sys
from collections.abc import Callable

from codeopen.adapters.diagnostics.logging_sink import LoggingDiagnosticSink
from codeopen.adapters.probe.subprocess_probe import resolve_executable
from codeopen.domain.entities import FilePosition, Installation
from codeopen.ports.diagnostics import DiagnosticSink

logger = logging.getLogger(__name__)


def get_preferred_editor() -> str | None:
    """Get the user's explicitly chosen editor command, if any.

    Reads $CODEOPEN_EDITOR. $VISUAL and $EDITOR are not consulted.

    Returns:
        The editor command or path, or None when unset or empty.
    """
    return os.environ.get("CODEOPEN_EDITOR") or None


def build_launch_args(
    command: str,
    file_path: str,
    line: int = 0,
    column: int = 0,
    project_folder: str | None = None,
    goto_flag: str = "--goto",
) -> list[str]:
    """Build the editor command line.

    Args:
        command: Editor executable name or path.
        file_path: File to open.
        line: 1-based line; 0 or less opens the bare file.
        column: 1-based column, passed through unchanged.
        project_folder: Folder prepended as project context when it exists.
        goto_flag: Flag introducing the path:line:column target.

    Returns:
        Argument list for subprocess.Popen().
    """
    if line > 0:
        target = [goto_flag, f"{file_path}:{line}:{column}"]
    else:
        target = [file_path]

    args = [command]
    if project_folder and os.path.isdir(project_folder):
        args.append(project_folder)
    args.extend(target)
    return args


class SubprocessEditorLauncher:
    """EditorLauncher implementation that spawns the editor detached.

    The editor is an interactive GUI process: the launcher does not wait for
    it or capture its output. Spawned handles are kept until reap() sees
    them exit.

    Args:
        diagnostics: Sink receiving launch failure messages.
        goto_flag: Flag introducing the path:line:column target.
        open_project_folder: Whether to pass the project folder argument.
        spawn: Process factory, subprocess.Popen by default.
    """

    def __init__(
        self,
        diagnostics: DiagnosticSink | None = None,
        goto_flag: str = "--goto",
        open_project_folder: bool = True,
        spawn: Callable[..., subprocess.Popen] | None = None,
    ) -> None:
        self._diagnostics = diagnostics or LoggingDiagnosticSink()
        self._goto_flag = goto_flag
        self._open_project_folder = open_project_folder
        self._spawn = spawn or subprocess.Popen
        self._launched: list[subprocess.Popen] = []

    @property
    def launched(self) -> tuple[subprocess.Popen, ...]:
        """Handles of spawned editors not yet seen to exit."""
        return tuple(self._launched)

    def reap(self) -> int:
        """Poll spawned editors and forget the ones that have exited.

        Returns:
            Number of spawned editors still running.
        """
        self._launched = [process for process in self._launched if process.poll() is None]
        return len(self._launched)

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
            True if the editor process was spawned, False otherwise.
        """
        if not command or not command.strip():
            self._diagnostics.error("Editor command is not set; cannot open files")
            return False

        folder = project_folder if self._open_project_folder else None
        args = build_launch_args(
            command, file_path, line, column, folder, goto_flag=self._goto_flag
        )
        # Windows launchers are .cmd shims that Popen cannot find by bare name
        args[0] = resolve_executable(command) or command

        self.reap()
        try:
            process = self._spawn(args, **self._detach_kwargs())
        except (OSError, ValueError) as e:
            self._diagnostics.error(f"Error opening {file_path} with '{command}': {e}")
            return False

        self._launched.append(process)
        logger.debug("Launched editor (pid %s): %s", getattr(process, "pid", None), args)
        return True

    def open_installation(
        self,
        installation: Installation,
        position: FilePosition,
        project_folder: str | None = None,
    ) -> bool:
        """Open a file position in a discovered installation."""
        return self.open(
            installation.command,
            position.file_path,
            position.line,
            position.column,
            project_folder,
        )

    def _detach_kwargs(self) -> dict:
        """Popen keyword arguments that detach the editor from this process."""
        kwargs: dict = {
            "stdin": subprocess.DEVNULL,
            "stdout": subprocess.DEVNULL,
            "stderr": subprocess.DEVNULL,
            "close_fds": True,
        }
        if sys.platform == "win32":
            kwargs["creationflags"] = getattr(subprocess, "DETACHED_PROCESS", 0) | getattr(
                subprocess, "CREATE_NEW_PROCESS_GROUP", 0
            )
        else:
            kwargs["start_new_session"] = True
        return kwargs
