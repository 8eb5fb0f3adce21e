"""Round snapshots and the game trace that collects them."""

from dataclasses import dataclass
from typing import Iterator

from deck_sim.cards import Card

HandSnapshot = tuple[Card, ...]


@dataclass(frozen=True)
class Round:
    """
    The four hands as they stood after one round.

    Round 0 is the initial deal and has no discards. For later rounds,
    ``discards[i]`` is the card hand ``i`` gave up in that round.
    """

    number: int
    hands: tuple[HandSnapshot, ...]
    discards: tuple[Card, ...] = ()

    @property
    def cards_per_hand(self) -> int:
        """Return the size shared by every hand in this round."""
        return len(self.hands[0]) if self.hands else 0

    @property
    def is_final(self) -> bool:
        """Check if every hand is empty."""
        return all(not hand for hand in self.hands)

    def __len__(self) -> int:
        return len(self.hands)

    def __iter__(self) -> Iterator[HandSnapshot]:
        return iter(self.hands)

    def __getitem__(self, hand_index: int) -> HandSnapshot:
        return self.hands[hand_index]

    def __str__(self) -> str:
        hands = " | ".join(" ".join(str(card) for card in hand) or "-" for hand in self.hands)
        return f"Round {self.number}: {hands}"


@dataclass(frozen=True)
class GameTrace:
    """Ordered rounds of one simulation: the deal, then one per discard round."""

    rounds: tuple[Round, ...]

    @property
    def initial_hands(self) -> tuple[HandSnapshot, ...]:
        """Return the hands as dealt."""
        return self.rounds[0].hands

    @property
    def final_hands(self) -> tuple[HandSnapshot, ...]:
        """Return the hands after the last recorded round."""
        return self.rounds[-1].hands

    def discards_for(self, hand_index: int) -> list[Card]:
        """Return the cards a hand discarded, in discard order."""
        return [rnd.discards[hand_index] for rnd in self.rounds[1:]]

    def __len__(self) -> int:
        return len(self.rounds)

    def __iter__(self) -> Iterator[Round]:
        return iter(self.rounds)

    def __getitem__(self, number: int) -> Round:
        return self.rounds[number]
