"""Tests for card models."""

import pytest

from cycle_tracker.models.card import (
    DECK_SIZE,
    HAND_SIZE,
    Card,
    CardSlots,
    Rarity,
)


def evolution(name: str, current: int, maximum: int) -> Card:
    card = Card(name=name, is_evolution=True)
    card.set_evolution_details(current, maximum)
    return card


class TestCard:
    """Tests for Card class."""

    def test_create_card(self):
        """Test creating a normal card."""
        card = Card(name="Knight", icon="icons/knight.png", rarity=Rarity.COMMON)
        assert card.name == "Knight"
        assert card.icon == "icons/knight.png"
        assert not card.is_evolution
        assert not card.is_champion

    def test_non_evolution_cycle_accessors(self):
        """Test that non-evolution cards report -1 for cycles."""
        card = Card(name="Knight")
        card.set_evolution_details(1, 2)  # ignored

        assert card.current_cycle == -1
        assert card.max_cycle == -1
        assert card.cycle_label() == ""

    def test_increase_cycle_non_evolution(self):
        """Test that increase_cycle does nothing for non-evolution cards."""
        card = Card(name="Knight")
        card.increase_cycle()
        assert card.current_cycle == -1

    def test_increase_cycle(self):
        """Test advancing the evolution counter."""
        card = evolution("Knight (Evolution)", 0, 2)

        card.increase_cycle()
        assert card.current_cycle == 1
        card.increase_cycle()
        assert card.current_cycle == 2
        card.increase_cycle()
        assert card.current_cycle == 0

    @pytest.mark.parametrize("maximum", [0, 1, 2, 5])
    @pytest.mark.parametrize("start", [0, 1])
    def test_cycle_wraps_around(self, maximum, start):
        """Test that max_cycle + 1 increases return to the start."""
        start = min(start, maximum)
        card = evolution("Skeletons (Evolution)", start, maximum)

        for _ in range(maximum + 1):
            card.increase_cycle()

        assert card.current_cycle == start

    def test_lightning_wraps_to_zero(self):
        """Test evolution with max 1 at 1 goes back to 0."""
        card = evolution("Lightning", 1, 1)
        card.increase_cycle()
        assert card.current_cycle == 0

    def test_cycle_label(self):
        """Test current/max label."""
        card = evolution("Archers (Evolution)", 1, 2)
        assert card.cycle_label() == "1/2"

    def test_frozen_identity(self):
        """Test that identity fields cannot be changed."""
        card = Card(name="Knight")
        with pytest.raises(Exception):
            card.name = "Giant"


class TestCardEquality:
    """Tests for name-based card equality."""

    def test_equal_by_name_only(self):
        """Test that rarity and flags are ignored."""
        a = Card(name="Knight", rarity=Rarity.COMMON)
        b = Card(name="Knight", rarity=Rarity.LEGENDARY, is_champion=True)
        assert a.equals(b)
        assert a == b

    def test_cycle_state_ignored(self):
        """Test that an advanced evolution card equals its catalog entry."""
        played = evolution("Knight (Evolution)", 2, 2)
        fresh = evolution("Knight (Evolution)", 0, 2)
        assert played == fresh

    def test_case_sensitive(self):
        """Test that names are compared exactly."""
        assert Card(name="Knight") != Card(name="knight")

    def test_reflexive_symmetric_transitive(self):
        """Test equivalence relation laws."""
        a = Card(name="Knight", icon="a")
        b = Card(name="Knight", icon="b")
        c = Card(name="Knight", icon="c")

        assert a == a
        assert (a == b) == (b == a)
        assert a == b and b == c and a == c

    def test_not_equal_to_none(self):
        """Test comparison with an empty slot."""
        assert not Card(name="Knight").equals(None)
        assert Card(name="Knight") != None  # noqa: E711

    def test_hashable_by_name(self):
        """Test that same-name cards collapse in a set."""
        cards = {Card(name="Knight"), Card(name="Knight", icon="x"), Card(name="Giant")}
        assert len(cards) == 2


class TestCardSlots:
    """Tests for CardSlots class."""

    @pytest.fixture
    def knight(self):
        return Card(name="Knight")

    @pytest.fixture
    def giant(self):
        return Card(name="Giant")

    def test_empty_slots(self):
        """Test new container is all empty."""
        slots = CardSlots(HAND_SIZE)
        assert len(slots) == 4
        assert slots.count() == 0
        assert slots.contains(None)
        assert slots.first_empty() == 0

    def test_deck_size(self):
        """Test deck-sized container."""
        assert len(CardSlots(DECK_SIZE)) == 8

    def test_push_back(self, knight):
        """Test appending grows the container."""
        slots = CardSlots(4)
        slots.push_back(knight)
        assert len(slots) == 5
        assert slots[4] is knight

    def test_pop_front(self, knight):
        """Test removing the first slot."""
        slots = CardSlots(slots=[knight, None, None])
        assert slots.pop_front() is knight
        assert len(slots) == 2

    def test_pop_front_empty_slot(self):
        """Test popping an empty first slot returns None."""
        slots = CardSlots(4)
        assert slots.pop_front() is None
        assert len(slots) == 3

    def test_pop_front_no_slots(self):
        """Test popping from a zero-length container."""
        slots = CardSlots(0)
        assert slots.pop_front() is None
        assert len(slots) == 0

    def test_insert_at(self, knight, giant):
        """Test insertion shifts later slots right."""
        slots = CardSlots(slots=[knight, None])
        slots.insert_at(1, giant)
        assert slots.cards() == [knight, giant, None]

    def test_contains(self, knight, giant):
        """Test membership by name and empty-slot query."""
        slots = CardSlots(slots=[knight, None])
        assert slots.contains(Card(name="Knight", icon="other"))
        assert not slots.contains(giant)
        assert slots.contains(None)

        full = CardSlots(slots=[knight, giant])
        assert not full.contains(None)

    def test_remove_by_identity(self, knight, giant):
        """Test removal closes the gap and returns the index."""
        slots = CardSlots(slots=[None, knight, giant, None])
        index = slots.remove_by_identity(Card(name="Knight"))

        assert index == 1
        assert len(slots) == 3
        assert slots.cards() == [None, giant, None]

    def test_remove_missing(self, knight, giant):
        """Test removing an absent card."""
        slots = CardSlots(slots=[knight, None])
        assert slots.remove_by_identity(giant) == -1
        assert len(slots) == 2

    def test_replace_at(self, knight):
        """Test overwriting keeps the length."""
        slots = CardSlots(4)
        slots.replace_at(2, knight)
        assert len(slots) == 4
        assert slots[2] is knight
        assert slots.first_empty() == 0

    def test_snapshot_is_independent(self, knight, giant):
        """Test that snapshots copy slots but share cards."""
        slots = CardSlots(slots=[knight, None])
        copy = slots.snapshot()
        copy.replace_at(1, giant)

        assert slots.cards() == [knight, None]
        assert copy[0] is knight

    def test_equality(self, knight):
        """Test slot-wise equality."""
        a = CardSlots(slots=[knight, None])
        b = CardSlots(slots=[Card(name="Knight"), None])
        c = CardSlots(slots=[None, knight])
        d = CardSlots(slots=[knight, None, None])

        assert a == b
        assert a != c
        assert a != d

    def test_str(self, knight):
        """Test string representation."""
        assert str(CardSlots(slots=[knight, None])) == "[Knight, _]"
