"""
Constants for the three-sided board game and its search agents.

This module defines the sides of the game, the default search parameters
used by the agents, and the reward sentinels used by Monte Carlo playouts.
"""
import sys
from enum import Enum
from typing import Dict, Final, Tuple


class Colour(Enum):
    """Enum representing the three sides, in turn order."""
    BLUE = 0
    GREEN = 1
    RED = 2

    def next(self) -> 'Colour':
        """Get the side that moves after this one."""
        members = list(Colour)
        return members[(members.index(self) + 1) % len(members)]


# Sides in the order they move
TURN_ORDER: Final[Tuple[Colour, ...]] = (Colour.BLUE, Colour.GREEN, Colour.RED)

# Display names for sides (for pretty printing)
COLOUR_STYLES: Final[Dict[Colour, str]] = {
    Colour.BLUE: "bold blue",
    Colour.GREEN: "bold green",
    Colour.RED: "bold red",
}


# Search defaults
DEFAULT_PARANOID_DEPTH: Final[int] = 3
DEFAULT_MCTS_TIME_LIMIT: Final[float] = 5.0  # seconds per decision
DEFAULT_PLAYOUT_DEPTH: Final[int] = 10  # random plies per simulation

# Rewards reported by a playout that ends with a decided game
WIN_REWARD: Final[float] = sys.float_info.max
LOSS_REWARD: Final[float] = -sys.float_info.max
