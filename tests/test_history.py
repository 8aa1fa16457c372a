"""Tests for undo history."""

import pytest

from cycle_tracker.models.card import Card
from cycle_tracker.models.cycle_state import CycleState
from cycle_tracker.models.history import History, Snapshot


@pytest.fixture
def state():
    s = CycleState()
    s.add_card(Card(name="Knight"))
    s.add_card(Card(name="Archers"))
    return s


@pytest.fixture
def history(state):
    h = History()
    h.seed(state)
    return h


class TestHistory:
    """Tests for History class."""

    def test_empty_history(self):
        """Test an unseeded history cannot undo."""
        h = History()
        assert len(h) == 0
        assert h.latest is None
        assert h.undo() is None

    def test_seed(self, history, state):
        """Test seeding records exactly one entry."""
        assert len(history) == 1
        assert history.latest == Snapshot.of(state)
        assert not history.can_undo

    def test_seed_clears(self, history, state):
        """Test seeding again drops older entries."""
        history.record(state)
        history.record(state)
        history.seed(state)
        assert len(history) == 1

    def test_record_appends(self, history, state):
        """Test recording grows the log."""
        state.play_from_hand(Card(name="Knight"))
        snapshot = history.record(state)

        assert len(history) == 2
        assert history.latest is snapshot
        assert snapshot.cards_played == 1

    def test_snapshot_detached_from_state(self, history, state):
        """Test later plays do not change recorded containers."""
        recorded = history.latest
        state.play_from_hand(Card(name="Knight"))

        assert recorded.active_hand[0].name == "Knight"
        assert recorded.cards_played == 0

    def test_undo_is_inverse(self, history, state):
        """Test op, record, undo restores the previous state."""
        before = Snapshot.of(state)

        assert state.play_from_hand(Card(name="Archers"))
        history.record(state)

        snapshot = history.undo()
        assert snapshot is not None
        state.restore(snapshot)

        assert Snapshot.of(state) == before
        assert len(history) == 1

    def test_undo_steps_back_one_at_a_time(self, history, state):
        """Test multiple undos walk back through the log."""
        first = Snapshot.of(state)
        state.play_from_hand(Card(name="Knight"))
        history.record(state)
        second = Snapshot.of(state)
        state.play_from_hand(Card(name="Archers"))
        history.record(state)

        state.restore(history.undo())
        assert Snapshot.of(state) == second
        state.restore(history.undo())
        assert Snapshot.of(state) == first

    def test_undo_seed_only_is_idempotent(self, history, state):
        """Test undo with only the seed never mutates and always fails."""
        before = Snapshot.of(state)
        for _ in range(5):
            assert history.undo() is None
            assert len(history) == 1
        assert Snapshot.of(state) == before

    def test_cards_shared_with_state(self, history, state):
        """Test snapshots share Card instances with the live state."""
        knight = state.active_hand[0]
        assert history.latest.active_hand[0] is knight
