"""Round state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round state machine states.

    Flow: DEALING → PLAYER_TURN → DEALER_TURN → RESOLVING → ROUND_COMPLETE
    """

    # Initial two cards each
    DEALING = auto()

    # Player draws until the heuristic stops
    PLAYER_TURN = auto()

    # Dealer draws to its standing total
    DEALER_TURN = auto()

    # Comparing final scores
    RESOLVING = auto()

    # Outcome reported
    ROUND_COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

