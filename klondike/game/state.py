"""Game lifecycle enumeration and transition table."""

from enum import Enum, auto
from typing import Any


class GameState(Enum):
    """
    Game lifecycle states.

    Flow: NOT_STARTED → IN_PROGRESS → WON
    """

    # Engine built, no deal yet
    NOT_STARTED = auto()

    # Tableau dealt, moves being played
    IN_PROGRESS = auto()

    # All four foundations complete
    WON = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def machine_name(self) -> str:
        """Return the state name used by the state machine."""
        return self.name.lower()


# State machine transitions, in the format transitions.Machine expects
TRANSITIONS: list[dict[str, Any]] = [
    {"trigger": "deal", "source": "*", "dest": "in_progress"},
    {"trigger": "win", "source": ["not_started", "in_progress"], "dest": "won"},
    # A card taken back off a complete foundation reopens the game
    {"trigger": "reopen", "source": "won", "dest": "in_progress"},
]


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if some trigger leads from from_state to to_state
    """
    for transition in TRANSITIONS:
        source = transition["source"]
        if source == "*":
            sources = [s.machine_name for s in GameState]
        elif isinstance(source, str):
            sources = [source]
        else:
            sources = source
        if from_state.machine_name in sources and transition["dest"] == to_state.machine_name:
            return True
    return False
