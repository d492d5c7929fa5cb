"""Parse editor `--version` output into a Version.

VS Code-family editors print the version on the first line, followed by a
commit hash and architecture:

    1.85.1
    0ee08df0cf4527e40edc9aa28f4b5bd38bbff2b2
    arm64

The version is advisory, so parsing never fails: anything unparseable
yields the 0.0.0 sentinel.
"""

import logging
import re

from codeopen.domain.value_objects import (
    UNKNOWN_VERSION,
    ParsedVersion,
    ProbeFailure,
    Version,
)

logger = logging.getLogger(__name__)

# major.minor[.patch][-prerelease]
_VERSION_RE = re.compile(
    r"^(?P<major>\d+)\.(?P<minor>\d+)(?:\.(?P<patch>\d+))?"
    r"(?:-(?P<prerelease>[0-9A-Za-z][0-9A-Za-z.-]*))?$"
)


def _first_non_empty_line(raw_output: str) -> str | None:
    """Return the first non-empty line, stripped, or None.

    Only zero-length lines are skipped. A line holding nothing but
    whitespace is still the first line and fails to parse.
    """
    for line in raw_output.splitlines():
        if line:
            return line.strip()
    return None


def parse_version_output(raw_output: str | None) -> ParsedVersion:
    """Parse probe output, reporting whether the sentinel was substituted.

    Args:
        raw_output: Standard output of `<command> --version`.

    Returns:
        ParsedVersion with the parsed version, or the sentinel plus
        ProbeFailure.PARSE_ERROR.
    """
    if not raw_output:
        return ParsedVersion(UNKNOWN_VERSION, ProbeFailure.PARSE_ERROR)

    first_line = _first_non_empty_line(raw_output)
    if first_line is None:
        return ParsedVersion(UNKNOWN_VERSION, ProbeFailure.PARSE_ERROR)

    match = _VERSION_RE.match(first_line)
    if match is None:
        logger.debug("Unrecognised version line: %r", first_line)
        return ParsedVersion(UNKNOWN_VERSION, ProbeFailure.PARSE_ERROR)

    try:
        version = Version(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch") or 0),
            prerelease=match.group("prerelease"),
        )
    except ValueError:
        return ParsedVersion(UNKNOWN_VERSION, ProbeFailure.PARSE_ERROR)

    return ParsedVersion(version)


def parse_version(raw_output: str | None) -> Version:
    """Parse probe output into a Version, falling back to 0.0.0.

    Args:
        raw_output: Standard output of `<command> --version`.

    Returns:
        Parsed Version, or UNKNOWN_VERSION if the output is malformed.
    """
    return parse_version_output(raw_output).version
