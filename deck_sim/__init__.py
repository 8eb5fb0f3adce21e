"""Deck, deal and random-discard simulation - no I/O, no UI."""

from deck_sim.cards import Card, Rank, Suit
from deck_sim.deck import (
    DECK,
    SUIT_PARTITION,
    ShuffleMethod,
    canonical_deck,
    generate_shuffled_deck,
    suit_partition,
)
from deck_sim.hand import Hand, deal_hands, generate_random_hands
from deck_sim.game import GameTrace, RandomDiscardGame, Round, play_randomly
from deck_sim.naming import to_name

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "DECK",
    "SUIT_PARTITION",
    "ShuffleMethod",
    "canonical_deck",
    "generate_shuffled_deck",
    "suit_partition",
    "Hand",
    "deal_hands",
    "generate_random_hands",
    "GameTrace",
    "RandomDiscardGame",
    "Round",
    "play_randomly",
    "to_name",
]
