"""In-memory test doubles for probes and discovery providers."""

from collections.abc import Iterator, Sequence

from codeopen.domain.entities import Installation
from codeopen.domain.value_objects import ProbeFailure, ProbeResult


class FakeProbe:
    """CommandProbe double returning canned results per command.

    Commands without a canned result report NOT_FOUND. Every call is
    recorded in `calls` as (command, args, timeout).
    """

    def __init__(self, results: dict[str, ProbeResult] | None = None) -> None:
        self.results = dict(results or {})
        self.calls: list[tuple[str, tuple[str, ...], float]] = []

    def probe(self, command: str, args: Sequence[str], timeout: float) -> ProbeResult:
        self.calls.append((command, tuple(args), timeout))
        return self.results.get(command, ProbeResult.failed(ProbeFailure.NOT_FOUND))

    def probed_commands(self) -> list[str]:
        return [command for command, _, _ in self.calls]


def installed(version_output: str = "1.85.1\nabc123\nx64\n") -> ProbeResult:
    """Canned successful `--version` result."""
    return ProbeResult.success(version_output)


class StaticProvider:
    """DiscoveryProvider double yielding fixed installations.

    If `fail_after` is set, list_all() raises `error` after yielding that
    many installations. try_match() raises `error` when `fail_match` is set.
    """

    def __init__(
        self,
        name: str,
        installations: list[Installation] | None = None,
        fail_after: int | None = None,
        fail_match: bool = False,
        error: Exception | None = None,
    ) -> None:
        self._name = name
        self.installations = list(installations or [])
        self.fail_after = fail_after
        self.fail_match = fail_match
        self.error = error or OSError("permission denied")
        self.probe_calls = 0
        self.reset_calls = 0

    @property
    def name(self) -> str:
        return self._name

    def probe(self) -> bool:
        self.probe_calls += 1
        return bool(self.installations)

    def list_all(self) -> Iterator[Installation]:
        for index, installation in enumerate(self.installations):
            if self.fail_after is not None and index >= self.fail_after:
                raise self.error
            yield installation
        if self.fail_after is not None and self.fail_after >= len(self.installations):
            raise self.error

    def try_match(self, path_or_command: str) -> Installation | None:
        if self.fail_match:
            raise self.error
        for installation in self.installations:
            if installation.command == path_or_command:
                return installation
        return None

    def reset(self) -> None:
        self.reset_calls += 1
