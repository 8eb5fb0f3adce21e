"""Random-discard game engine with state machine."""

from random import Random
from typing import Callable, Sequence

from transitions import Machine

from config import SimulationConfig, config as app_config
from deck_sim.cards import Card
from deck_sim.deck import default_rng
from deck_sim.hand import Hand, generate_random_hands
from deck_sim.game.events import EventEmitter, EventType, GameEvent
from deck_sim.game.state import GameState, HandState, hand_state
from deck_sim.game.trace import GameTrace, Round
from deck_sim.logging_utils import get_logger

logger = get_logger(__name__)


class RandomDiscardGame:
    """
    Deal hands, then discard one random card from every hand per round.

    There is no notion of a legal play: each hand gives up the card at a
    uniformly random position, in hand order, all drawing
    from the same generator. A snapshot of every hand is recorded after the
    deal and after each round, so a default game yields 14 rounds.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_discarding", "source": "waiting_to_deal", "dest": "discarding"},
        {"trigger": "continue_discarding", "source": "discarding", "dest": "discarding"},
        {"trigger": "finish_discarding", "source": "discarding", "dest": "complete"},
    ]

    def __init__(
        self,
        config: SimulationConfig | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            config: Hand count, hand size and shuffle method (uses defaults if not provided)
            rng: Random number generator for reproducible games
        """
        self.config = config or app_config.simulation
        self._rng = rng or default_rng()
        self._hands: list[Hand] = []
        self._rounds: list[Round] = []
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="waiting_to_deal",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def deal(self, hands: Sequence[Sequence[Card]] | None = None) -> Round | None:
        """
        Deal the hands and record round 0.

        Args:
            hands: Hands to start from instead of a random deal

        Returns:
            The initial round, or None if cards were already dealt
        """
        if self.state != GameState.WAITING_TO_DEAL:
            self._invalid_action("Cards already dealt")
            return None

        if hands is None:
            self._hands = generate_random_hands(self._rng, self.config)
        else:
            self._hands = self._hands_from(hands)

        self.events.emit_new(
            EventType.GAME_STARTED,
            num_hands=self.config.num_hands,
            hand_size=self.config.hand_size,
        )
        logger.info(
            "Game started: %d hands of %d cards",
            self.config.num_hands,
            self.config.hand_size,
        )

        initial = self._record_round()
        self.events.emit_new(
            EventType.HANDS_DEALT,
            hands=[str(hand) for hand in self._hands],
        )
        self.start_discarding()  # Trigger state transition
        return initial

    def _hands_from(self, hands: Sequence[Sequence[Card]]) -> list[Hand]:
        """Validate caller-supplied hands and copy them into sorted Hands."""
        if len(hands) != self.config.num_hands:
            raise ValueError(f"Expected {self.config.num_hands} hands, got {len(hands)}")

        seen: set[Card] = set()
        for cards in hands:
            if len(cards) != self.config.hand_size:
                raise ValueError(
                    f"Each hand must hold {self.config.hand_size} cards, got {len(cards)}"
                )
            if seen.intersection(cards) or len(set(cards)) != len(cards):
                raise ValueError("Hands must not share cards")
            seen.update(cards)

        return [Hand(list(cards)) for cards in hands]

    def discard_round(self) -> Round | None:
        """
        Discard one random card from every hand.

        Returns:
            The recorded round, or None if no round can be played
        """
        if self.state != GameState.DISCARDING:
            self._invalid_action("No hands to discard from")
            return None

        cards_left = self.config.hand_size - self.rounds_played
        discards: list[Card] = []

        for index, hand in enumerate(self._hands):
            card = hand.discard_at(self._rng.randrange(cards_left))
            discards.append(card)
            self.events.emit_new(
                EventType.CARD_DISCARDED,
                hand_index=index,
                card=str(card),
                cards_left=len(hand),
            )
            logger.debug("Hand %d discarded %s", index, card)

        played = self._record_round(tuple(discards))
        self.events.emit_new(EventType.ROUND_ENDED, round_number=played.number)

        if played.is_final:
            self.finish_discarding()
            self.events.emit_new(EventType.GAME_ENDED, rounds=len(self._rounds))
            logger.info("Game complete after %d rounds", self.rounds_played)
        else:
            self.continue_discarding()

        return played

    def play(self, hands: Sequence[Sequence[Card]] | None = None) -> GameTrace | None:
        """
        Deal and discard until every hand is empty.

        Returns:
            The full trace, or None if this game was already dealt
        """
        if self.deal(hands) is None:
            return None
        while self.state == GameState.DISCARDING:
            self.discard_round()
        return self.trace

    def _record_round(self, discards: tuple[Card, ...] = ()) -> Round:
        """Snapshot every hand as the next round."""
        snapshot = Round(
            number=len(self._rounds),
            hands=tuple(hand.snapshot() for hand in self._hands),
            discards=discards,
        )
        self._rounds.append(snapshot)
        return snapshot

    def _invalid_action(self, message: str) -> None:
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=message,
            state=self.state.name,
        )
        logger.warning("%s (state: %s)", message, self.state)

    @property
    def trace(self) -> GameTrace:
        """Return the rounds recorded so far."""
        return GameTrace(tuple(self._rounds))

    @property
    def rounds_played(self) -> int:
        """Return the number of discard rounds completed."""
        return max(len(self._rounds) - 1, 0)

    @property
    def is_complete(self) -> bool:
        """Check if every hand has been emptied."""
        return self.state == GameState.COMPLETE

    @property
    def hands(self) -> tuple[tuple[Card, ...], ...]:
        """Return snapshots of the current hands."""
        return tuple(hand.snapshot() for hand in self._hands)

    @property
    def hand_states(self) -> list[HandState]:
        """Return where each hand stands in its Full → Empty progression."""
        return [hand_state(len(hand), self.config.hand_size) for hand in self._hands]


def play_randomly(
    rng: Random | None = None,
    config: SimulationConfig | None = None,
) -> GameTrace:
    """
    Run one random-discard game from a fresh shuffle.

    Returns:
        hand_size + 1 rounds; round k holds hands of hand_size - k cards
    """
    trace = RandomDiscardGame(config=config, rng=rng).play()
    assert trace is not None  # a new game is always dealable
    return trace
