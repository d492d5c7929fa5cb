"""Command probe adapter using subprocess.

Spawns candidate editors with captured output and a hard timeout. Every
failure mode is folded into a ProbeResult; probe() never raises.
"""

import contextlib
import logging
import os
import shutil
import subprocess
import sys
from collections.abc import Sequence

import psutil

from codeopen.adapters.probe.timeouts import ProbeTimeouts
from codeopen.domain.value_objects import ProbeFailure, ProbeResult

logger = logging.getLogger(__name__)


def resolve_executable(command: str) -> str | None:
    """Resolve a command to the path that will actually be executed.

    Absolute paths bypass PATH lookup and are returned unchanged. Bare
    names are looked up with shutil.which, which honours PATHEXT so that
    Windows launcher shims (code.cmd) are found.

    Args:
        command: Executable name or path.

    Returns:
        Path to execute, or None if a bare name is not on PATH.
    """
    if os.path.isabs(command):
        return command
    return shutil.which(command)


def _decode(data: bytes | None) -> str | None:
    if data is None:
        return None
    return data.decode("utf-8", errors="replace")


class SubprocessCommandProbe:
    """CommandProbe implementation backed by subprocess.Popen."""

    def __init__(self, kill_wait: float = ProbeTimeouts.KILL_WAIT) -> None:
        """Initialize the probe.

        Args:
            kill_wait: Seconds to wait for a killed probe to be reaped.
        """
        self._kill_wait = kill_wait

    def probe(self, command: str, args: Sequence[str], timeout: float) -> ProbeResult:
        """Run a command with captured output and a bounded timeout.

        Args:
            command: Executable name (resolved via PATH) or absolute path.
            args: Arguments to pass, typically ["--version"].
            timeout: Maximum seconds to wait before killing the process.

        Returns:
            ProbeResult describing the outcome. Never raises.
        """
        if not command or not command.strip():
            return ProbeResult.failed(ProbeFailure.NOT_FOUND)

        executable = resolve_executable(command)
        if executable is None:
            logger.debug("Probe: '%s' not found on PATH", command)
            return ProbeResult.failed(ProbeFailure.NOT_FOUND)

        cmd = [executable, *args]
        try:
            process = self._spawn(cmd)
        except FileNotFoundError:
            logger.debug("Probe: '%s' does not exist", executable)
            return ProbeResult.failed(ProbeFailure.NOT_FOUND)
        except (OSError, ValueError) as e:
            # PermissionError, exec format errors, embedded null bytes
            logger.debug("Probe: failed to start '%s': %s", executable, e)
            return ProbeResult.failed(ProbeFailure.SPAWN_ERROR, error_output=str(e))

        try:
            stdout, stderr = process.communicate(timeout=timeout)
        except subprocess.TimeoutExpired:
            logger.debug("Probe: '%s' timed out after %.1fs, killing", executable, timeout)
            self._kill_tree(process)
            return ProbeResult.failed(ProbeFailure.TIMEOUT)
        except OSError as e:
            logger.debug("Probe: I/O error while waiting for '%s': %s", executable, e)
            self._kill_tree(process)
            return ProbeResult.failed(ProbeFailure.SPAWN_ERROR, error_output=str(e))

        raw_output = _decode(stdout)
        error_output = _decode(stderr)

        if process.returncode != 0:
            logger.debug(
                "Probe: '%s' exited with code %s", executable, process.returncode
            )
            return ProbeResult.failed(
                ProbeFailure.NON_ZERO_EXIT,
                exit_code=process.returncode,
                raw_output=raw_output,
                error_output=error_output,
            )

        logger.debug("Probe: '%s' succeeded", executable)
        return ProbeResult.success(raw_output or "", error_output=error_output)

    def _spawn(self, cmd: list[str]) -> subprocess.Popen:
        """Spawn the probe process with captured output and no console."""
        kwargs: dict = {}
        if sys.platform == "win32":
            kwargs["creationflags"] = getattr(subprocess, "CREATE_NO_WINDOW", 0)

        return subprocess.Popen(
            cmd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            **kwargs,
        )

    def _kill_tree(self, process: subprocess.Popen) -> None:
        """Kill a probe process and any children it forked, then reap it.

        Editor launchers are often shell scripts that exec or fork the real
        binary; killing only the direct child would leave the helper holding
        our pipes open.

        Args:
            process: The timed-out probe process
        """
        try:
            children = psutil.Process(process.pid).children(recursive=True)
        except psutil.Error:
            children = []

        for child in children:
            with contextlib.suppress(psutil.Error):
                child.kill()

        with contextlib.suppress(OSError):
            process.kill()

        try:
            process.communicate(timeout=self._kill_wait)
        except (subprocess.TimeoutExpired, OSError):
            logger.warning("Probe process %s did not exit after kill", process.pid)
            for stream in (process.stdout, process.stderr):
                if stream is not None:
                    with contextlib.suppress(OSError):
                        stream.close()

        if children:
            psutil.wait_procs(children, timeout=self._kill_wait)
