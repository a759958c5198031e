"""Tests for domain models and identifier parsing (core/models.py)."""

from __future__ import annotations

import dataclasses

import pytest

from depshell.core.models import Dependency, ScopeType, parse_dependency_id
from depshell.exceptions import InvalidDependencyIdError


# ---------------------------------------------------------------------------
# ScopeType
# ---------------------------------------------------------------------------

class TestScopeType:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("compile", ScopeType.COMPILE),
            ("TEST", ScopeType.TEST),
            (" Provided ", ScopeType.PROVIDED),
            ("runtime", ScopeType.RUNTIME),
            ("system", ScopeType.SYSTEM),
            ("other", ScopeType.OTHER),
        ],
    )
    def test_parse_is_case_insensitive(self, raw: str, expected: ScopeType) -> None:
        assert ScopeType.parse(raw) is expected

    def test_unknown_scope_raises_with_hint(self) -> None:
        with pytest.raises(InvalidDependencyIdError) as exc_info:
            ScopeType.parse("import-ish")
        assert exc_info.value.hint is not None
        assert "compile" in exc_info.value.hint


# ---------------------------------------------------------------------------
# Dependency
# ---------------------------------------------------------------------------

class TestDependency:
    def test_is_frozen(self) -> None:
        dep = Dependency("g", "a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            dep.version = "1.0"  # type: ignore[misc]

    def test_key_ignores_version_and_scope(self) -> None:
        one = Dependency("g", "a", "1.0", ScopeType.TEST)
        two = Dependency("g", "a", "2.0", ScopeType.RUNTIME, "pom")
        assert one.key == two.key == ("g", "a")
        assert one.same_as(two)

    def test_different_artifact_is_not_same(self) -> None:
        assert not Dependency("g", "a").same_as(Dependency("g", "b"))

    def test_str_drops_trailing_absent_segments(self) -> None:
        assert str(Dependency("g", "a")) == "g:a"
        assert str(Dependency("g", "a", "1.0")) == "g:a:1.0"

    def test_str_keeps_inner_gaps(self) -> None:
        assert str(Dependency("g", "a", scope=ScopeType.TEST)) == "g:a::test"
        assert str(Dependency("g", "a", packaging="war")) == "g:a:::war"


# ---------------------------------------------------------------------------
# parse_dependency_id
# ---------------------------------------------------------------------------

class TestParseDependencyId:
    def test_group_and_artifact_only(self) -> None:
        dep = parse_dependency_id("org.jboss.seam.forge:forge-api")
        assert dep == Dependency("org.jboss.seam.forge", "forge-api")

    def test_full_identifier(self) -> None:
        dep = parse_dependency_id("org.example:lib:1.2.3:test:jar")
        assert dep.group_id == "org.example"
        assert dep.artifact_id == "lib"
        assert dep.version == "1.2.3"
        assert dep.scope is ScopeType.TEST
        assert dep.packaging == "jar"

    def test_empty_segments_are_absent(self) -> None:
        dep = parse_dependency_id("g:a::provided")
        assert dep.version is None
        assert dep.scope is ScopeType.PROVIDED
        assert dep.packaging is None

    def test_whitespace_is_trimmed(self) -> None:
        assert parse_dependency_id("  g : a : 1.0 ") == Dependency("g", "a", "1.0")

    def test_round_trips_through_str(self) -> None:
        text = "org.example:lib:1.0:runtime:pom"
        assert str(parse_dependency_id(text)) == text

    @pytest.mark.parametrize(
        "text",
        ["", "justgroup", "g:a:1:compile:jar:extra", ":a:1.0", "g::1.0", "g:a:1.0:bogus"],
    )
    def test_malformed_identifiers_raise(self, text: str) -> None:
        with pytest.raises(InvalidDependencyIdError):
            parse_dependency_id(text)
