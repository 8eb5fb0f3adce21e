"""Tests for state enumerations and the event emitter."""

import pytest

from deck_sim.game.events import EventEmitter, EventType, GameEvent
from deck_sim.game.state import (
    GameState,
    HandState,
    hand_state,
    is_valid_transition,
)


class TestGameState:
    """Tests for GameState transitions."""

    def test_forward_transitions(self):
        """Test the normal flow is allowed."""
        assert is_valid_transition(GameState.WAITING_TO_DEAL, GameState.DISCARDING)
        assert is_valid_transition(GameState.DISCARDING, GameState.DISCARDING)
        assert is_valid_transition(GameState.DISCARDING, GameState.COMPLETE)

    def test_complete_is_terminal(self):
        """Test nothing leaves the complete state."""
        for state in GameState:
            assert not is_valid_transition(GameState.COMPLETE, state)

    def test_cannot_skip_dealing(self):
        """Test the game cannot complete before dealing."""
        assert not is_valid_transition(GameState.WAITING_TO_DEAL, GameState.COMPLETE)

    def test_str(self):
        assert str(GameState.WAITING_TO_DEAL) == "Waiting To Deal"


class TestHandState:
    """Tests for hand_state."""

    def test_progression(self):
        """Test Full(13) through HasN to Empty(0)."""
        assert hand_state(13) == HandState.FULL
        for held in range(1, 13):
            assert hand_state(held) == HandState.PARTIAL
        assert hand_state(0) == HandState.EMPTY

    def test_custom_hand_size(self):
        assert hand_state(5, hand_size=5) == HandState.FULL

    def test_out_of_range_raises(self):
        with pytest.raises(ValueError):
            hand_state(14)
        with pytest.raises(ValueError):
            hand_state(-1)


class TestEventEmitter:
    """Tests for EventEmitter."""

    def test_typed_and_catch_all_handlers(self):
        """Test handlers receive their events."""
        emitter = EventEmitter()
        typed, everything = [], []
        emitter.subscribe(typed.append, EventType.ROUND_ENDED)
        emitter.subscribe(everything.append)

        emitter.emit_new(EventType.GAME_STARTED)
        emitter.emit_new(EventType.ROUND_ENDED, round_number=1)

        assert [event.event_type for event in typed] == [EventType.ROUND_ENDED]
        assert len(everything) == 2
        assert typed[0].data == {"round_number": 1}

    def test_unsubscribe(self):
        """Test removed handlers stop receiving events."""
        emitter = EventEmitter()
        received = []
        emitter.subscribe(received.append, EventType.GAME_ENDED)
        emitter.unsubscribe(received.append, EventType.GAME_ENDED)
        emitter.unsubscribe(received.append, EventType.GAME_STARTED)
        emitter.emit_new(EventType.GAME_ENDED)
        assert received == []

    def test_history(self):
        """Test history is a copy and can be cleared."""
        emitter = EventEmitter()
        emitter.emit(GameEvent(EventType.HANDS_DEALT))
        history = emitter.history
        history.clear()
        assert len(emitter.history) == 1
        emitter.clear_history()
        assert emitter.history == []

    def test_event_str(self):
        event = GameEvent(EventType.CARD_DISCARDED, {"card": "X♥"})
        assert str(event) == "CARD_DISCARDED: {'card': 'X♥'}"
