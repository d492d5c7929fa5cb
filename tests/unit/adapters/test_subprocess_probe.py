"""Unit tests for SubprocessCommandProbe.

Real processes are spawned with the current interpreter so the tests do not
depend on any editor being installed.
"""

import subprocess
import sys
import time
from unittest.mock import patch

import pytest

from codeopen.adapters.probe.subprocess_probe import (
    SubprocessCommandProbe,
    resolve_executable,
)
from codeopen.domain.value_objects import ProbeFailure


@pytest.fixture
def probe() -> SubprocessCommandProbe:
    return SubprocessCommandProbe(kill_wait=2.0)


class TestResolveExecutable:
    """Tests for resolve_executable()."""

    def test_absolute_path_is_returned_unchanged(self) -> None:
        assert resolve_executable(sys.executable) == sys.executable

    def test_missing_bare_name(self) -> None:
        assert resolve_executable("codeopen-no-such-editor-xyz") is None


class TestProbe:
    """Tests for probe()."""

    def test_missing_command_is_not_found_quickly(
        self, probe: SubprocessCommandProbe
    ) -> None:
        started = time.monotonic()

        result = probe.probe("codeopen-no-such-editor-xyz", ["--version"], timeout=5.0)

        assert not result.succeeded
        assert result.failure is ProbeFailure.NOT_FOUND
        assert time.monotonic() - started < 2.0

    def test_missing_absolute_path_is_not_found(
        self, probe: SubprocessCommandProbe, tmp_path
    ) -> None:
        result = probe.probe(str(tmp_path / "voideditor"), ["--version"], timeout=5.0)

        assert result.failure is ProbeFailure.NOT_FOUND

    def test_empty_command(self, probe: SubprocessCommandProbe) -> None:
        assert probe.probe("", ["--version"], timeout=1.0).failure is ProbeFailure.NOT_FOUND

    def test_captures_stdout_on_success(self, probe: SubprocessCommandProbe) -> None:
        result = probe.probe(
            sys.executable, ["-c", "print('1.85.1'); print('abc'); print('x64')"], timeout=10.0
        )

        assert result.succeeded
        assert result.exit_code == 0
        assert result.raw_output.splitlines() == ["1.85.1", "abc", "x64"]

    def test_non_zero_exit(self, probe: SubprocessCommandProbe) -> None:
        result = probe.probe(
            sys.executable,
            ["-c", "import sys; sys.stderr.write('bad flag'); sys.exit(3)"],
            timeout=10.0,
        )

        assert not result.succeeded
        assert result.failure is ProbeFailure.NON_ZERO_EXIT
        assert result.exit_code == 3
        assert "bad flag" in result.error_output

    def test_timeout_kills_process(self, probe: SubprocessCommandProbe) -> None:
        started = time.monotonic()

        result = probe.probe(
            sys.executable, ["-c", "import time; time.sleep(30)"], timeout=0.5
        )

        assert not result.succeeded
        assert result.failure is ProbeFailure.TIMEOUT
        assert time.monotonic() - started < 10.0

    def test_does_not_read_stdin(self, probe: SubprocessCommandProbe) -> None:
        """A candidate waiting for input sees EOF instead of hanging."""
        result = probe.probe(
            sys.executable,
            ["-c", "import sys; print(repr(sys.stdin.read()))"],
            timeout=10.0,
        )

        assert result.succeeded
        assert result.raw_output.strip() == "''"

    def test_permission_error_is_spawn_error(self, probe: SubprocessCommandProbe) -> None:
        with patch(
            "codeopen.adapters.probe.subprocess_probe.subprocess.Popen",
            side_effect=PermissionError("denied"),
        ):
            result = probe.probe(sys.executable, ["--version"], timeout=1.0)

        assert result.failure is ProbeFailure.SPAWN_ERROR
        assert "denied" in result.error_output

    def test_vanished_binary_is_not_found(self, probe: SubprocessCommandProbe) -> None:
        with patch(
            "codeopen.adapters.probe.subprocess_probe.subprocess.Popen",
            side_effect=FileNotFoundError("gone"),
        ):
            result = probe.probe(sys.executable, ["--version"], timeout=1.0)

        assert result.failure is ProbeFailure.NOT_FOUND

    def test_popen_uses_pipes_and_devnull_stdin(self, probe: SubprocessCommandProbe) -> None:
        with patch(
            "codeopen.adapters.probe.subprocess_probe.subprocess.Popen"
        ) as mock_popen:
            process = mock_popen.return_value
            process.communicate.return_value = (b"1.0.0\n", b"")
            process.returncode = 0

            result = probe.probe(sys.executable, ["--version"], timeout=3.0)

        assert result.succeeded
        args, kwargs = mock_popen.call_args
        assert args[0] == [sys.executable, "--version"]
        assert kwargs["stdin"] == subprocess.DEVNULL
        assert kwargs["stdout"] == subprocess.PIPE
        assert kwargs["stderr"] == subprocess.PIPE
        process.communicate.assert_called_once_with(timeout=3.0)
