"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from codeopen.core.discovery.cache import InstallationCache
from codeopen.domain.entities import EditorProfile
from tests.helpers import FakeProbe

# ============================================================================
# Environment Isolation
# ============================================================================
# The global config path and the preferred editor come from the environment.
# Point them at the test's temp directory so a developer's own config never
# leaks into results.


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Redirect the global config directory and clear $CODEOPEN_EDITOR.

    Returns:
        Directory used as XDG_CONFIG_HOME / APPDATA.
    """
    config_home = tmp_path / "config-home"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.setenv("APPDATA", str(config_home))
    monkeypatch.delenv("CODEOPEN_EDITOR", raising=False)
    return config_home


# ============================================================================
# Discovery Fixtures
# ============================================================================


@pytest.fixture
def fake_probe() -> FakeProbe:
    """Probe with no installed commands; tests add canned results."""
    return FakeProbe()


@pytest.fixture
def void_profile() -> EditorProfile:
    """Profile mirroring the built-in Void Editor entry."""
    return EditorProfile(
        name="Void Editor",
        short_name="void",
        candidates=("voideditor", "code"),
    )


@pytest.fixture
def cache(fake_probe: FakeProbe) -> InstallationCache:
    """InstallationCache wired to the fake probe."""
    return InstallationCache(fake_probe, timeout=1.5)
