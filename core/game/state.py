"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → RESOLVED
    (PLAYER_TURN → RESOLVED directly when the player busts)
    """

    # Cards being dealt
    DEALING = auto()

    # Player decides hit or stand
    PLAYER_TURN = auto()

    # Dealer draws to 17
    DEALER_TURN = auto()

    # Outcome decided; the game cannot be played again
    RESOLVED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.DEALING: [GameState.PLAYER_TURN],
    GameState.PLAYER_TURN: [GameState.DEALER_TURN, GameState.RESOLVED],  # RESOLVED on bust
    GameState.DEALER_TURN: [GameState.RESOLVED],
    GameState.RESOLVED: [],  # Terminal state
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
