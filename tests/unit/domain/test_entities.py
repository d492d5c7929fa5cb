"""Unit tests for domain entities."""

import dataclasses

import pytest

from codeopen.domain.entities import EditorProfile, FilePosition, Installation
from codeopen.domain.value_objects import UNKNOWN_VERSION, Version


class TestInstallation:
    """Tests for Installation."""

    def test_defaults_to_unknown_version(self) -> None:
        installation = Installation(display_name="VSCodium", command="codium")
        assert installation.version == UNKNOWN_VERSION
        assert installation.is_prerelease is False

    @pytest.mark.parametrize("command", ["", "   "])
    def test_rejects_empty_command(self, command: str) -> None:
        with pytest.raises(ValueError, match="command cannot be empty"):
            Installation(display_name="VSCodium", command=command)

    def test_is_immutable(self) -> None:
        installation = Installation(display_name="Cursor", command="cursor")
        with pytest.raises(dataclasses.FrozenInstanceError):
            installation.command = "other"  # type: ignore[misc]

    def test_to_dict(self) -> None:
        installation = Installation(
            display_name="Void Editor",
            command="/opt/void/bin/voideditor",
            version=Version(1, 99, 3),
            provider="void",
        )

        assert installation.to_dict() == {
            "display_name": "Void Editor",
            "command": "/opt/void/bin/voideditor",
            "version": "1.99.3",
            "version_known": True,
            "is_prerelease": False,
            "provider": "void",
        }

    def test_to_dict_marks_unknown_version(self) -> None:
        data = Installation(display_name="Cursor", command="cursor").to_dict()
        assert data["version"] == "0.0.0"
        assert data["version_known"] is False


class TestEditorProfile:
    """Tests for EditorProfile."""

    def test_matches_candidate_case_insensitively(self) -> None:
        profile = EditorProfile("VSCodium", "vscodium", ("codium", "vscodium"))
        assert profile.matches_name("CODIUM")
        assert profile.matches_name("vscodium")
        assert not profile.matches_name("code")

    def test_requires_candidates(self) -> None:
        with pytest.raises(ValueError, match="at least one candidate"):
            EditorProfile("Empty", "empty", ())

    def test_requires_short_name(self) -> None:
        with pytest.raises(ValueError, match="short_name cannot be empty"):
            EditorProfile("Nameless", "", ("x",))


def test_file_position_defaults_to_no_line() -> None:
    position = FilePosition("/tmp/a.py")
    assert position.line == 0
    assert position.column == 0
