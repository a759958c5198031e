"""Smoke tests: verify package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are distinct and agree with argparse.
"""

from __future__ import annotations

import argparse

import pytest

from depshell import __version__
from depshell.cli import exit_codes
from depshell.exceptions import (
    DepshellError,
    EnvironmentError,
    InvalidDependencyIdError,
    ProjectFormatError,
    ProjectNotFoundError,
    ProjectStoreError,
    PromptCancelledError,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_string(self) -> None:
        assert isinstance(__version__, str)

    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidDependencyIdError,
            ProjectStoreError,
            ProjectNotFoundError,
            ProjectFormatError,
            PromptCancelledError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[DepshellError]
    ) -> None:
        assert issubclass(exc_class, DepshellError)

    @pytest.mark.parametrize("exc_class", [ProjectNotFoundError, ProjectFormatError])
    def test_project_errors_share_store_base(
        self, exc_class: type[DepshellError]
    ) -> None:
        assert issubclass(exc_class, ProjectStoreError)

    def test_hint_is_stored(self) -> None:
        err = DepshellError("boom", hint="try this")
        assert str(err) == "boom"
        assert err.hint == "try this"

    def test_hint_defaults_to_none(self) -> None:
        assert DepshellError("boom").hint is None


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_ok_is_zero(self) -> None:
        assert exit_codes.OK == 0

    def test_usage_error_matches_argparse(self) -> None:
        parser = argparse.ArgumentParser()
        with pytest.raises(SystemExit) as exc_info:
            parser.error("bad usage")
        assert exc_info.value.code == exit_codes.USAGE_ERROR

    def test_interrupted_is_130(self) -> None:
        assert exit_codes.INTERRUPTED == 130

    def test_outcomes_are_distinct(self) -> None:
        codes = [
            exit_codes.OK,
            exit_codes.COMMAND_FAILED,
            exit_codes.USAGE_ERROR,
            exit_codes.CRASHED,
            exit_codes.INTERRUPTED,
        ]
        assert len(set(codes)) == len(codes)
