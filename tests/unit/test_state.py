#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_state.py
"""Unit tests for per-conversion writer state."""

import pytest

from docwriters.ast import Plain, Str
from docwriters.renderers.state import WriterState, list_level, tag_mode


@pytest.mark.unit
class TestWriterState:
    """Tests for the state collections."""

    def test_fresh_state_is_empty(self) -> None:
        state = WriterState()
        assert state.notes == []
        assert state.links == []
        assert state.images == []
        assert not state.math_used
        assert not state.notes_seen
        assert state.list_markers == ""
        assert not state.use_tags

    def test_add_note_numbers_from_one(self) -> None:
        state = WriterState()
        assert state.add_note([Plain(content=[Str("a")])]) == 1
        assert state.add_note([]) == 2
        assert len(state.notes) == 2

    def test_find_link(self) -> None:
        state = WriterState()
        state.links.append(([Str("x")], ("http://a.com", "")))
        assert state.find_link([Str("x")]) == ("http://a.com", "")
        assert state.find_link([Str("y")]) is None

    def test_find_image_returns_latest(self) -> None:
        state = WriterState()
        state.images.append(([Str("a")], ("1.png", "", None)))
        state.images.append(([Str("a")], ("2.png", "", "http://t")))
        assert state.find_image([Str("a")]) == ("2.png", "", "http://t")

    def test_states_are_independent(self) -> None:
        first = WriterState()
        first.add_note([])
        assert WriterState().notes == []


@pytest.mark.unit
class TestScopedGuards:
    """Tests for tag mode and list level guards."""

    def test_tag_mode_restores(self) -> None:
        state = WriterState()
        with tag_mode(state):
            assert state.use_tags
            with tag_mode(state, enabled=False):
                assert not state.use_tags
            assert state.use_tags
        assert not state.use_tags

    def test_tag_mode_restores_on_error(self) -> None:
        state = WriterState()
        with pytest.raises(RuntimeError):
            with tag_mode(state):
                raise RuntimeError("boom")
        assert not state.use_tags

    def test_list_level_stack(self) -> None:
        state = WriterState()
        with list_level(state, "*"):
            with list_level(state, "#"):
                assert state.list_markers == "*#"
            assert state.list_markers == "*"
        assert state.list_markers == ""
