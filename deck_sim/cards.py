"""Suit, Rank, and Card - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering


class Suit(Enum):
    """Card suits, valued by their ordinal in the canonical deck."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Return the suit symbol."""
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class Rank(Enum):
    """Card ranks, valued by their ordinal from deuce (0) to ace (12)."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        """Return the one-character rank label ("X" for ten)."""
        return _RANK_LABELS[self.value]


_RANK_LABELS = "23456789XJQKA"


@total_ordering
@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card, ordered by its deck index."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.index < other.index

    @property
    def index(self) -> int:
        """Return the position of this card in the canonical deck (0-51)."""
        return 13 * self.suit.value + self.rank.value

    @property
    def name(self) -> str:
        """Return the display name, e.g. 'X♥'."""
        return f"{self.rank}{self.suit}"

    @staticmethod
    def compare(a: "Card", b: "Card") -> int:
        """Three-way comparison by deck index."""
        return a.index - b.index

    @classmethod
    def from_ordinals(cls, rank: int, suit: int) -> "Card":
        """Create a card from a rank ordinal (0-12) and suit ordinal (0-3)."""
        return cls(Rank(rank), Suit(suit))

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'X♣', 'XC', '10h', 'AS'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {label: Rank(i) for i, label in enumerate(_RANK_LABELS)}
        rank_map["T"] = Rank.TEN
        rank_map["10"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])
