"""Tests for infrastructure/analyzers/context.py."""

import pytest

from luadump.domain.model.member_kind import MemberKind
from luadump.infrastructure.analyzers.context import ExtractorState


class TestExtractorState:
    """Tests for ExtractorState accumulator."""

    def test_empty_base_name_raises(self) -> None:
        with pytest.raises(ValueError, match="base_name"):
            ExtractorState("")

    def test_record(self) -> None:
        state = ExtractorState("M")
        state.record("a", MemberKind.VALUE)
        assert state.members == {"a": MemberKind.VALUE}

    def test_record_overwrites(self) -> None:
        state = ExtractorState("M")
        state.record("a", MemberKind.VALUE)
        state.record("a", MemberKind.METHOD)
        assert state.members == {"a": MemberKind.METHOD}

    def test_record_empty_name_raises(self) -> None:
        with pytest.raises(ValueError, match="member name"):
            ExtractorState("M").record("", MemberKind.VALUE)

    def test_merge_overwrites_existing(self) -> None:
        state = ExtractorState("M")
        state.record("a", MemberKind.FUNCTION)
        state.merge({"a": MemberKind.VALUE, "b": MemberKind.FUNCTION})
        assert state.members == {"a": MemberKind.VALUE, "b": MemberKind.FUNCTION}

    def test_freeze_sorts(self) -> None:
        state = ExtractorState("M")
        state.record("z", MemberKind.VALUE)
        state.record("a", MemberKind.VALUE)
        assert list(state.freeze()) == ["a", "z"]

    def test_freeze_is_snapshot(self) -> None:
        state = ExtractorState("M")
        state.record("a", MemberKind.VALUE)
        shape = state.freeze()
        state.record("b", MemberKind.VALUE)
        assert list(shape) == ["a"]
