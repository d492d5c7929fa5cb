"""Unit tests for DiscoveryRegistry."""

from unittest.mock import Mock

import pytest

from codeopen.core.discovery.registry import DiscoveryRegistry
from codeopen.domain.entities import Installation
from codeopen.domain.exceptions import DiscoveryProviderError
from tests.helpers import StaticProvider


def _installation(command: str) -> Installation:
    return Installation(display_name=command.title(), command=command)


class TestListInstallations:
    """Tests for list_installations()."""

    def test_yields_in_provider_order(self) -> None:
        registry = DiscoveryRegistry(
            [
                StaticProvider("a", [_installation("a1"), _installation("a2")]),
                StaticProvider("b", [_installation("b1")]),
            ]
        )

        commands = [i.command for i in registry.list_installations()]

        assert commands == ["a1", "a2", "b1"]

    def test_failing_provider_does_not_hide_siblings(self) -> None:
        """Results yielded before the failure are kept; later providers still run."""
        failing = StaticProvider(
            "a", [_installation("a1"), _installation("a2")], fail_after=2
        )
        healthy = StaticProvider("b", [_installation("b1")])
        registry = DiscoveryRegistry([failing, healthy])

        commands = [i.command for i in registry.list_installations()]

        assert commands == ["a1", "a2", "b1"]

    def test_failure_midway_discards_remaining_results(self) -> None:
        failing = StaticProvider(
            "a", [_installation("a1"), _installation("a2")], fail_after=1
        )
        registry = DiscoveryRegistry([failing, StaticProvider("b", [_installation("b1")])])

        assert [i.command for i in registry.list_installations()] == ["a1", "b1"]

    def test_provider_error_is_recoverable(self) -> None:
        failing = StaticProvider(
            "a", fail_after=0, error=DiscoveryProviderError("registry unreadable")
        )
        registry = DiscoveryRegistry([failing, StaticProvider("b", [_installation("b1")])])

        assert [i.command for i in registry.list_installations()] == ["b1"]

    def test_unexpected_errors_propagate(self) -> None:
        failing = StaticProvider("a", fail_after=0, error=KeyError("bug"))
        registry = DiscoveryRegistry([failing])

        with pytest.raises(KeyError):
            list(registry.list_installations())

    def test_logs_failing_provider(self, caplog: pytest.LogCaptureFixture) -> None:
        registry = DiscoveryRegistry([StaticProvider("broken", fail_after=0)])

        list(registry.list_installations())

        assert "broken" in caplog.text

    def test_is_lazy_and_restartable(self) -> None:
        provider = StaticProvider("a", [_installation("a1"), _installation("a2")])
        registry = DiscoveryRegistry([provider])

        first = next(registry.list_installations())
        everything = list(registry.list_installations())

        assert first.command == "a1"
        assert [i.command for i in everything] == ["a1", "a2"]

    def test_empty_registry(self) -> None:
        assert list(DiscoveryRegistry().list_installations()) == []


class TestTryDiscover:
    """Tests for try_discover()."""

    def test_returns_first_match(self) -> None:
        registry = DiscoveryRegistry(
            [
                StaticProvider("a", [_installation("code")]),
                StaticProvider("b", [Installation(display_name="Other", command="code")]),
            ]
        )

        installation = registry.try_discover("code")

        assert installation is not None
        assert installation.display_name == "Code"

    def test_skips_failing_provider(self) -> None:
        registry = DiscoveryRegistry(
            [
                StaticProvider("a", fail_match=True),
                StaticProvider("b", [_installation("codium")]),
            ]
        )

        installation = registry.try_discover("codium")

        assert installation is not None
        assert installation.command == "codium"

    def test_no_match_returns_none(self) -> None:
        registry = DiscoveryRegistry([StaticProvider("a", [_installation("cursor")])])
        assert registry.try_discover("zed") is None


class TestRegistration:
    """Tests for register() and providers."""

    def test_register_appends_by_default(self) -> None:
        registry = DiscoveryRegistry([StaticProvider("a")])
        registry.register(StaticProvider("b"))

        assert [p.name for p in registry.providers] == ["a", "b"]

    def test_register_with_priority_inserts(self) -> None:
        registry = DiscoveryRegistry([StaticProvider("a"), StaticProvider("b")])
        registry.register(StaticProvider("first"), priority=0)

        assert [p.name for p in registry.providers] == ["first", "a", "b"]


class TestInitialize:
    """Tests for initialize()."""

    def test_reports_found_providers(self) -> None:
        registry = DiscoveryRegistry(
            [StaticProvider("a", [_installation("a1")]), StaticProvider("b")]
        )

        assert registry.initialize() == ["a"]

    def test_notifies_progress_callback(self) -> None:
        registry = DiscoveryRegistry([StaticProvider("a"), StaticProvider("b")])
        progress = Mock()

        registry.initialize(progress=progress)

        progress.on_start.assert_called_once_with(2, "Probing editors")
        assert [c.args for c in progress.on_progress.call_args_list] == [(1, "a"), (2, "b")]
        progress.on_complete.assert_called_once()

    def test_probe_failure_is_isolated(self) -> None:
        broken = Mock()
        broken.name = "broken"
        broken.probe.side_effect = OSError("denied")
        registry = DiscoveryRegistry([broken, StaticProvider("b", [_installation("b1")])])

        assert registry.initialize() == ["b"]


def test_reset_resets_every_provider() -> None:
    providers = [StaticProvider("a"), StaticProvider("b")]
    registry = DiscoveryRegistry(providers)

    registry.reset()

    assert [p.reset_calls for p in providers] == [1, 1]
