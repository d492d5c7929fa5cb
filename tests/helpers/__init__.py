"""Test helper utilities for the codeopen test suite."""

from tests.helpers.cli_assertions import (
    assert_command_failed,
    assert_command_success,
    assert_output_contains,
)
from tests.helpers.fakes import FakeProbe, StaticProvider, installed

__all__ = [
    "assert_command_success",
    "assert_command_failed",
    "assert_output_contains",
    "FakeProbe",
    "StaticProvider",
    "installed",
]
