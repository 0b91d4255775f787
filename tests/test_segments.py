"""Tests for PathKind and Segments."""

from __future__ import annotations

import pickle

import pytest

from uri_components._errors import InvalidFlag
from uri_components._segments import PathKind, Segments, check_kind


class TestPathKind:
    """SEG-001: two-variant kind flag."""

    @pytest.mark.contract("SEG-001")
    def test_members(self) -> None:
        assert {k.name for k in PathKind} == {"ABSOLUTE", "RELATIVE"}

    @pytest.mark.contract("SEG-001")
    def test_check_kind_accepts_members(self) -> None:
        assert check_kind(PathKind.ABSOLUTE) is PathKind.ABSOLUTE

    @pytest.mark.contract("SEG-001")
    def test_check_kind_rejects_raw_values(self) -> None:
        with pytest.raises(InvalidFlag):
            check_kind("absolute")


class TestSegments:
    """SEG-002: ordered immutable sequence with a kind."""

    @pytest.mark.contract("SEG-002")
    def test_sequence_behaviour(self) -> None:
        s = Segments(["a", "b", ""], PathKind.ABSOLUTE)
        assert len(s) == 3
        assert list(s) == ["a", "b", ""]
        assert "b" in s
        assert s.items == ("a", "b", "")
        assert s.kind is PathKind.ABSOLUTE

    @pytest.mark.contract("SEG-002")
    def test_default_kind_is_relative(self) -> None:
        assert Segments(["a"]).kind is PathKind.RELATIVE

    @pytest.mark.contract("SEG-002")
    def test_invalid_kind(self) -> None:
        with pytest.raises(InvalidFlag):
            Segments(["a"], 1)  # type: ignore[arg-type]

    @pytest.mark.contract("SEG-002")
    def test_get(self) -> None:
        s = Segments(["a", "b", "c"])
        assert s.get(0) == "a"
        assert s.get(-1) == "c"
        assert s.get(-3) == "a"
        assert s.get(3) is None
        assert s.get(-4, "x") == "x"

    @pytest.mark.contract("SEG-002")
    def test_indexes(self) -> None:
        s = Segments(["a", "b", "c", "b"])
        assert s.indexes() == [0, 1, 2, 3]
        assert s.indexes("b") == [1, 3]

    @pytest.mark.contract("SEG-002")
    def test_equality_includes_kind(self) -> None:
        assert Segments(["a"]) == Segments(["a"], PathKind.RELATIVE)
        assert Segments(["a"]) != Segments(["a"], PathKind.ABSOLUTE)
        assert hash(Segments(["a"])) == hash(Segments(("a",)))

    @pytest.mark.contract("SEG-002")
    def test_immutable(self) -> None:
        s = Segments(["a"])
        with pytest.raises(AttributeError, match="immutable"):
            s._items = ()  # type: ignore[misc]

    @pytest.mark.contract("SEG-002")
    def test_pickle(self) -> None:
        s = Segments(["a", ""], PathKind.ABSOLUTE)
        assert pickle.loads(pickle.dumps(s)) == s
