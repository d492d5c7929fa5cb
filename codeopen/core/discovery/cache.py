"""Memoized editor command resolution.

InstallationCache owns a DiscoveryState and resolves an ordered list of
candidate commands to the first one that answers `--version`. Once a
command is resolved it is returned without probing again until reset().

The cache is not synchronized. Applications that resolve from several
threads must serialize access themselves.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from codeopen.adapters.probe.timeouts import ProbeTimeouts
from codeopen.domain.value_objects import ProbeResult
from codeopen.ports.probe import CommandProbe

logger = logging.getLogger(__name__)


@dataclass
class DiscoveryState:
    """Mutable discovery state owned by an InstallationCache.

    Attributes:
        resolved_command: Command that last probed successfully, if any.
        resolved_output: Standard output of that successful probe.
        untried: Candidates not yet probed in the current pass.
    """

    resolved_command: str | None = None
    resolved_output: str | None = None
    untried: list[str] = field(default_factory=list)

    def reset(self) -> None:
        """Return to the empty, never-probed state."""
        self.resolved_command = None
        self.resolved_output = None
        self.untried = []


class InstallationCache:
    """Resolves candidate commands at most once per process (until reset).

    Args:
        probe: CommandProbe used to test candidates.
        timeout: Seconds allowed for each `--version` probe.
        version_args: Arguments used to query the version.
        state: Optional pre-built state; a fresh one is created otherwise.
    """

    def __init__(
        self,
        probe: CommandProbe,
        timeout: float = ProbeTimeouts.VERSION_QUERY,
        version_args: Sequence[str] = ("--version",),
        state: DiscoveryState | None = None,
    ) -> None:
        self._probe = probe
        self._timeout = timeout
        self._version_args = tuple(version_args)
        self._state = state if state is not None else DiscoveryState()

    @property
    def state(self) -> DiscoveryState:
        return self._state

    @property
    def resolved_command(self) -> str | None:
        return self._state.resolved_command

    @property
    def resolved_output(self) -> str | None:
        return self._state.resolved_output

    def resolve_command(self, candidates: Sequence[str]) -> str | None:
        """Return the first candidate that answers the version query.

        Candidates are probed strictly in order; once one succeeds the rest
        are never probed. A previously resolved command is returned
        immediately. If every candidate fails, None is returned and the next
        call starts a fresh pass.

        Args:
            candidates: Command names or paths, in priority order.

        Returns:
            The resolved command, or None if no candidate is available.
        """
        if self._state.resolved_command is not None:
            return self._state.resolved_command

        self._state.untried = list(candidates)
        while self._state.untried:
            candidate = self._state.untried.pop(0)
            result = self.probe_command(candidate)
            if result.succeeded:
                self._state.resolved_command = candidate
                self._state.resolved_output = result.raw_output
                self._state.untried = []
                logger.info("Found editor command: %s", candidate)
                return candidate
            logger.debug("Candidate '%s' unavailable (%s)", candidate, result.failure)

        logger.debug("No editor command found among %s", list(candidates))
        return None

    def probe_command(self, command: str) -> ProbeResult:
        """Probe a single command without touching the cached state."""
        return self._probe.probe(command, self._version_args, self._timeout)

    def reset(self) -> None:
        """Forget the resolved command so the next call probes again."""
        self._state.reset()
