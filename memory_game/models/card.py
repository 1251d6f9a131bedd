"""Card and Deck models."""

import random
from collections import Counter
from typing import Iterator, MutableSequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

# Card faces of the default deck (one entry per pair)
DEFAULT_SYMBOLS = [
    "a-space-odyssey",
    "a-clockwork-orange",
    "barry-lyndon",
    "dr-strangelove",
    "the-shining",
]


class Card(BaseModel):
    """Single memory card.

    `symbol` is the matching key. It is independent of however the
    presentation layer chooses to draw the card.
    """

    id: int
    symbol: str
    face_up: bool = False
    matched: bool = False

    @property
    def is_selectable(self) -> bool:
        """Check if the card can be flipped by the player."""
        return not self.face_up and not self.matched

    def __str__(self) -> str:
        if self.matched:
            return f"[{self.symbol}]"
        if self.face_up:
            return self.symbol
        return "?"


def fisher_yates_shuffle(
    items: MutableSequence[T],
    rng: random.Random | None = None,
) -> MutableSequence[T]:
    """Shuffle a sequence in place.

    For i from len-1 down to 1, swap element i with a uniformly random
    element j in [0, i].

    Args:
        items: Sequence to shuffle.
        rng: Random source (unseeded if not provided).

    Returns:
        The same sequence, shuffled.
    """
    rng = rng or random.Random()
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items


class Deck:
    """Ordered sequence of cards where every symbol appears exactly twice."""

    def __init__(self, cards: list[Card] | None = None):
        """Initialize deck.

        Args:
            cards: Cards in board order.

        Raises:
            ValueError: If a symbol does not appear exactly twice.
        """
        self._cards: list[Card] = list(cards) if cards else []
        counts = Counter(c.symbol for c in self._cards)
        bad = sorted(s for s, n in counts.items() if n != 2)
        if bad:
            raise ValueError(f"Every symbol must appear exactly twice: {bad}")

    @property
    def number_of_pairs(self) -> int:
        """Get number of pairs in the deck."""
        return len(self._cards) // 2

    def get(self, card_id: int) -> Card | None:
        """Get a card by id, or None if there is no such card."""
        for card in self._cards:
            if card.id == card_id:
                return card
        return None

    def symbols(self) -> list[str]:
        """Get symbols in board order."""
        return [c.symbol for c in self._cards]

    def matched_count(self) -> int:
        """Get number of matched cards."""
        return sum(1 for c in self._cards if c.matched)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __str__(self) -> str:
        return " ".join(str(c) for c in self._cards)

    def __repr__(self) -> str:
        return f"Deck({self.symbols()!r})"


def build_deck(
    symbols: list[str],
    rng: random.Random | None = None,
    shuffle: bool = True,
) -> Deck:
    """Create a deck holding two cards for each symbol.

    Card ids are assigned after shuffling, so id equals board position.

    Args:
        symbols: One entry per pair. Must be non-empty and unique.
        rng: Random source used for the shuffle.
        shuffle: If False, cards keep the order symbols + symbols.

    Returns:
        New Deck with all cards face down.

    Raises:
        ValueError: If symbols is empty or contains duplicates.
    """
    if not symbols:
        raise ValueError("At least one pair is required")
    if len(set(symbols)) != len(symbols):
        raise ValueError("Symbols must be unique")

    faces = list(symbols) + list(symbols)
    if shuffle:
        fisher_yates_shuffle(faces, rng)
    return Deck([Card(id=i, symbol=s) for i, s in enumerate(faces)])
