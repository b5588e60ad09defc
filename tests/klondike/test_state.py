"""Tests for game lifecycle states and transitions."""

from klondike.game import GameState, Solitaire
from klondike.game.state import TRANSITIONS, is_valid_transition


class TestGameState:
    """Tests for lifecycle transitions."""

    def test_valid_transitions(self):
        assert is_valid_transition(GameState.NOT_STARTED, GameState.IN_PROGRESS)
        assert is_valid_transition(GameState.IN_PROGRESS, GameState.IN_PROGRESS)
        assert is_valid_transition(GameState.IN_PROGRESS, GameState.WON)
        assert is_valid_transition(GameState.WON, GameState.IN_PROGRESS)

    def test_invalid_transitions(self):
        assert not is_valid_transition(GameState.IN_PROGRESS, GameState.NOT_STARTED)
        assert not is_valid_transition(GameState.WON, GameState.NOT_STARTED)
        assert not is_valid_transition(GameState.WON, GameState.WON)

    def test_machine_uses_shared_table(self):
        """Test the engine's state machine is built from the same table."""
        assert Solitaire.TRANSITIONS is TRANSITIONS
        assert Solitaire.STATES == [s.machine_name for s in GameState]

    def test_str(self):
        assert str(GameState.IN_PROGRESS) == "In Progress"
        assert GameState.NOT_STARTED.machine_name == "not_started"
