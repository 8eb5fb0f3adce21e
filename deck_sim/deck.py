"""The canonical 52-card deck and the shuffler."""

from enum import Enum
from operator import itemgetter
from random import Random

from config import config
from deck_sim.cards import Card, Rank, Suit
from deck_sim.logging_utils import get_logger

logger = get_logger(__name__)

CARDS_PER_SUIT = len(Rank)
DECK_SIZE = len(Suit) * CARDS_PER_SUIT


class ShuffleMethod(str, Enum):
    """Available shuffle algorithms."""

    RANDOM_KEY = "random_key"
    FISHER_YATES = "fisher_yates"


def _build_deck() -> tuple[Card, ...]:
    """Build the deck suit-major, rank-minor: all clubs 2..A, then diamonds..."""
    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)


# Built once at import, never mutated
DECK: tuple[Card, ...] = _build_deck()

SUIT_PARTITION: tuple[tuple[Card, ...], ...] = tuple(
    DECK[start:start + CARDS_PER_SUIT] for start in range(0, DECK_SIZE, CARDS_PER_SUIT)
)

_rng = Random(config.simulation.seed)


def canonical_deck() -> tuple[Card, ...]:
    """Return the shared, read-only canonical deck."""
    return DECK


def suit_partition() -> tuple[tuple[Card, ...], ...]:
    """Return the canonical deck split into its four 13-card suits."""
    return SUIT_PARTITION


def default_rng() -> Random:
    """Return the process-wide random generator."""
    return _rng


def reseed(seed: int | None) -> None:
    """Re-seed the process-wide random generator (None uses OS entropy)."""
    _rng.seed(seed)


def generate_shuffled_deck(
    rng: Random | None = None,
    method: ShuffleMethod | str | None = None,
) -> list[Card]:
    """
    Return a new list holding the 52 canonical cards in random order.

    Args:
        rng: Random number generator (defaults to the process-wide one)
        method: Shuffle algorithm (defaults to the configured one)

    Returns:
        A fresh list; the canonical deck is left untouched
    """
    rng = rng or _rng
    method = ShuffleMethod(method or config.simulation.shuffle_method)

    if method is ShuffleMethod.RANDOM_KEY:
        keyed = [(rng.random(), card) for card in DECK]
        keyed.sort(key=itemgetter(0))
        cards = [card for _, card in keyed]
    else:
        cards = list(DECK)
        rng.shuffle(cards)

    logger.debug("Shuffled deck using %s", method.value)
    return cards
