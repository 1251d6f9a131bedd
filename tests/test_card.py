"""Tests for card models."""

import random
from collections import Counter

import pytest

from memory_game.models.card import (
    DEFAULT_SYMBOLS,
    Card,
    Deck,
    build_deck,
    fisher_yates_shuffle,
)


class TestCard:
    """Tests for Card class."""

    def test_new_card_is_face_down(self):
        """Test that a new card starts face down and unmatched."""
        card = Card(id=0, symbol="A")
        assert not card.face_up
        assert not card.matched
        assert card.is_selectable

    def test_not_selectable_when_face_up_or_matched(self):
        """Test selectability after flipping and matching."""
        card = Card(id=0, symbol="A")
        card.face_up = True
        assert not card.is_selectable

        card.matched = True
        assert not card.is_selectable

    def test_card_string(self):
        """Test card string representation."""
        card = Card(id=3, symbol="the-shining")
        assert str(card) == "?"
        card.face_up = True
        assert str(card) == "the-shining"
        card.matched = True
        assert str(card) == "[the-shining]"


class TestShuffle:
    """Tests for fisher_yates_shuffle."""

    def test_is_permutation(self):
        """Test that shuffling keeps the same multiset."""
        items = list("AABBCCDDEE")
        shuffled = fisher_yates_shuffle(list(items), random.Random(1))
        assert Counter(shuffled) == Counter(items)

    def test_in_place(self):
        """Test that the same list is returned."""
        items = [1, 2, 3, 4]
        assert fisher_yates_shuffle(items, random.Random(0)) is items

    def test_seeded_is_reproducible(self):
        """Test that a fixed seed gives a fixed order."""
        a = fisher_yates_shuffle(list(range(20)), random.Random(42))
        b = fisher_yates_shuffle(list(range(20)), random.Random(42))
        assert a == b

    def test_different_seeds_differ(self):
        """Test that different seeds usually give different orders."""
        a = fisher_yates_shuffle(list(range(20)), random.Random(1))
        b = fisher_yates_shuffle(list(range(20)), random.Random(2))
        assert a != b

    @pytest.mark.parametrize("items", [[], ["only"]])
    def test_short_sequences(self, items):
        """Test that empty and single-item sequences are untouched."""
        assert fisher_yates_shuffle(list(items), random.Random(0)) == items

    def test_every_position_reachable(self):
        """Test that the first element can land anywhere."""
        rng = random.Random(7)
        landed = set()
        for _ in range(500):
            landed.add(fisher_yates_shuffle([0, 1, 2, 3], rng).index(0))
        assert landed == {0, 1, 2, 3}


class TestDeck:
    """Tests for Deck and build_deck."""

    def test_build_unshuffled(self):
        """Test deck order without shuffling."""
        deck = build_deck(["A", "B"], shuffle=False)
        assert deck.symbols() == ["A", "B", "A", "B"]
        assert [c.id for c in deck] == [0, 1, 2, 3]
        assert deck.number_of_pairs == 2

    def test_build_default_symbols(self):
        """Test each default symbol appears exactly twice."""
        deck = build_deck(DEFAULT_SYMBOLS, random.Random(0))
        assert len(deck) == 10
        assert set(Counter(deck.symbols()).values()) == {2}

    def test_ids_follow_positions_after_shuffle(self):
        """Test that ids are assigned after shuffling."""
        deck = build_deck(DEFAULT_SYMBOLS, random.Random(3))
        assert [c.id for c in deck] == list(range(10))

    def test_build_seeded_reproducible(self):
        """Test the same seed deals the same layout."""
        a = build_deck(DEFAULT_SYMBOLS, random.Random(99))
        b = build_deck(DEFAULT_SYMBOLS, random.Random(99))
        assert a.symbols() == b.symbols()

    def test_build_rejects_empty(self):
        """Test that an empty symbol list is rejected."""
        with pytest.raises(ValueError):
            build_deck([])

    def test_build_rejects_duplicates(self):
        """Test that repeated symbols are rejected."""
        with pytest.raises(ValueError):
            build_deck(["A", "A"])

    def test_deck_rejects_unpaired_symbol(self):
        """Test that a symbol appearing once is rejected."""
        with pytest.raises(ValueError):
            Deck([Card(id=0, symbol="A"), Card(id=1, symbol="A"), Card(id=2, symbol="B")])

    def test_get(self):
        """Test lookup by id."""
        deck = build_deck(["A", "B"], shuffle=False)
        assert deck.get(2).symbol == "A"
        assert deck.get(99) is None

    def test_matched_count(self):
        """Test counting matched cards."""
        deck = build_deck(["A", "B"], shuffle=False)
        assert deck.matched_count() == 0
        deck.get(0).matched = True
        deck.get(2).matched = True
        assert deck.matched_count() == 2

    def test_empty_deck(self):
        """Test that an empty deck is allowed before dealing."""
        deck = Deck()
        assert len(deck) == 0
        assert deck.number_of_pairs == 0
