"""Hands and the dealer that slices a shuffled deck into them."""

from dataclasses import dataclass, field
from random import Random
from typing import Iterator, Sequence

from config import SimulationConfig, config as app_config
from deck_sim.cards import Card
from deck_sim.deck import generate_shuffled_deck
from deck_sim.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass
class Hand:
    """A player's held cards, always sorted ascending by deck index."""

    cards: list[Card] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.cards = sorted(self.cards)

    def discard_at(self, position: int) -> Card:
        """Remove and return the card at a position (no search by value)."""
        if not 0 <= position < len(self.cards):
            raise IndexError(
                f"Discard position {position} out of range for {len(self.cards)} cards"
            )
        return self.cards.pop(position)

    def snapshot(self) -> tuple[Card, ...]:
        """Return an immutable copy of the current contents."""
        return tuple(self.cards)

    @property
    def is_empty(self) -> bool:
        """Check if every card has been discarded."""
        return not self.cards

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __getitem__(self, position: int) -> Card:
        return self.cards[position]

    def __str__(self) -> str:
        return " ".join(str(card) for card in self.cards)

    def __repr__(self) -> str:
        return f"Hand({self.cards!r})"


def deal_hands(
    deck: Sequence[Card],
    num_hands: int = 4,
    hand_size: int = 13,
) -> list[Hand]:
    """
    Split a deck into contiguous groups and sort each one.

    Hand i receives deck[i * hand_size:(i + 1) * hand_size].

    Args:
        deck: Shuffled cards to deal from
        num_hands: Number of hands to deal
        hand_size: Cards per hand

    Returns:
        Independent hands sharing no storage with the deck or each other
    """
    if num_hands < 1 or hand_size < 1:
        raise ValueError("num_hands and hand_size must be positive")
    needed = num_hands * hand_size
    if len(deck) < needed:
        raise ValueError(f"Need {needed} cards to deal, got {len(deck)}")

    hands = [
        Hand(list(deck[i * hand_size:(i + 1) * hand_size]))
        for i in range(num_hands)
    ]
    logger.debug("Dealt %d hands of %d cards", num_hands, hand_size)
    return hands


def generate_random_hands(
    rng: Random | None = None,
    config: SimulationConfig | None = None,
) -> list[Hand]:
    """Shuffle a fresh deck and deal it into sorted hands (4 x 13 by default)."""
    config = config or app_config.simulation
    deck = generate_shuffled_deck(rng, config.shuffle_method)
    return deal_hands(deck, config.num_hands, config.hand_size)
