"""Discovery provider that finds an editor by probing its commands.

Matching rules for try_match():

1. Absolute paths always win. A path whose executable name is one of the
   profile's candidates is probed directly; the cache is neither consulted
   nor updated. A provider created with match_any_path=True probes every
   absolute path this way, whatever its executable name.
2. Bare names resolve through the cache. A candidate name returns whatever
   command the cache resolved for this profile, probing only if nothing is
   cached yet.
3. Anything else (relative paths, other editors' names) is not a match.
"""

import logging
import os
from collections.abc import Iterator

from codeopen.core.discovery.cache import InstallationCache
from codeopen.core.version_parser import parse_version
from codeopen.domain.entities import EditorProfile, Installation

logger = logging.getLogger(__name__)

_EXECUTABLE_SUFFIXES = (".exe", ".cmd", ".bat")


def executable_stem(path: str) -> str:
    """Return the executable name of a path without Windows launcher suffixes.

    Case is preserved; callers compare case-insensitively.
    """
    name = os.path.basename(path.rstrip("/\\"))
    root, ext = os.path.splitext(name)
    if ext.lower() in _EXECUTABLE_SUFFIXES:
        return root
    return name


def _is_bare_name(command: str) -> bool:
    return os.sep not in command and not (os.altsep and os.altsep in command)


class CommandProbeProvider:
    """DiscoveryProvider for one EditorProfile, backed by an InstallationCache.

    Args:
        profile: Editor profile listing candidate commands.
        cache: Cache owning this provider's discovery state.
        match_any_path: Accept any absolute path that answers the version
            query, not only paths named after a candidate.
    """

    def __init__(
        self,
        profile: EditorProfile,
        cache: InstallationCache,
        match_any_path: bool = False,
    ) -> None:
        self._profile = profile
        self._cache = cache
        self._match_any_path = match_any_path

    @property
    def name(self) -> str:
        return self._profile.short_name

    @property
    def profile(self) -> EditorProfile:
        return self._profile

    @property
    def cache(self) -> InstallationCache:
        return self._cache

    @property
    def match_any_path(self) -> bool:
        return self._match_any_path

    def probe(self) -> bool:
        """Resolve the profile's command; True if one is installed."""
        return self._cache.resolve_command(self._profile.candidates) is not None

    def list_all(self) -> Iterator[Installation]:
        """Yield the installation for the resolved command, if any.

        The version comes from the output cached by the successful probe, so
        listing never spawns a second process.
        """
        command = self._cache.resolve_command(self._profile.candidates)
        if command is None:
            return
        yield self._build_installation(
            self._profile.name, command, self._cache.resolved_output
        )

    def try_match(self, path_or_command: str) -> Installation | None:
        """Match an absolute path or bare command name to this profile.

        Args:
            path_or_command: Absolute executable path or bare command name.

        Returns:
            Installation if it belongs to this profile and is usable.
        """
        if not path_or_command or not path_or_command.strip():
            return None

        if os.path.isabs(path_or_command):
            return self._match_absolute_path(path_or_command)

        if not _is_bare_name(path_or_command):
            logger.debug("Ignoring relative path '%s'", path_or_command)
            return None

        if not self._profile.matches_name(path_or_command):
            return None

        command = self._cache.resolve_command(self._profile.candidates)
        if command is None:
            return None
        return self._build_installation(
            self._profile.name, command, self._cache.resolved_output
        )

    def reset(self) -> None:
        self._cache.reset()

    def _match_absolute_path(self, path: str) -> Installation | None:
        stem = executable_stem(path)
        if not stem or not (self._match_any_path or self._profile.matches_name(stem)):
            return None

        result = self._cache.probe_command(path)
        if not result.succeeded:
            logger.debug("'%s' did not answer the version query (%s)", path, result.failure)
            return None

        return self._build_installation(
            f"{self._profile.name} ({stem})", path, result.raw_output
        )

    def _build_installation(
        self, display_name: str, command: str, raw_output: str | None
    ) -> Installation:
        version = parse_version(raw_output)
        return Installation(
            display_name=display_name,
            command=command,
            version=version,
            is_prerelease=version.prerelease is not None,
            provider=self._profile.short_name,
        )
