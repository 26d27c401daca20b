"""Tests for auto_bump.tree."""

from __future__ import annotations

import pytest

from auto_bump.tree import Scope


class TestScope:
    def test_add_and_get(self) -> None:
        scope = Scope()
        child = object()
        scope.add("a", child)
        assert scope.get("a") is child
        assert scope.get("missing") is None

    def test_iterates_in_registration_order(self) -> None:
        scope = Scope()
        for name in ["c", "a", "b"]:
            scope.add(name, name.upper())
        assert list(scope) == ["C", "A", "B"]
        assert len(scope) == 3

    def test_duplicate_id(self) -> None:
        scope = Scope("jobs")
        scope.add("a", 1)
        with pytest.raises(ValueError, match="'a' in scope 'jobs'"):
            scope.add("a", 2)
        assert scope.get("a") == 1

    def test_empty_id(self) -> None:
        with pytest.raises(ValueError):
            Scope().add("", 1)

    def test_children_is_a_copy(self) -> None:
        scope = Scope()
        scope.add("a", 1)
        children = scope.children
        children["b"] = 2
        assert scope.get("b") is None
