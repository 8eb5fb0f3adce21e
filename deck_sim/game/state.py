"""Game and hand state enumerations."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: WAITING_TO_DEAL → DISCARDING → COMPLETE
    """

    # Nothing dealt yet
    WAITING_TO_DEAL = auto()

    # Hands dealt, discard rounds in progress
    DISCARDING = auto()

    # Every hand is empty
    COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.WAITING_TO_DEAL: [GameState.DISCARDING],
    GameState.DISCARDING: [GameState.DISCARDING, GameState.COMPLETE],
    GameState.COMPLETE: [],  # Terminal state
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])


class HandState(Enum):
    """Per-hand states: FULL → PARTIAL (n cards) → EMPTY, one card per round."""

    FULL = auto()
    PARTIAL = auto()
    EMPTY = auto()

    def __str__(self) -> str:
        return self.name.title()


def hand_state(cards_held: int, hand_size: int = 13) -> HandState:
    """Classify a hand by how many of its dealt cards remain."""
    if not 0 <= cards_held <= hand_size:
        raise ValueError(f"A hand of {hand_size} cannot hold {cards_held} cards")
    if cards_held == 0:
        return HandState.EMPTY
    if cards_held == hand_size:
        return HandState.FULL
    return HandState.PARTIAL
