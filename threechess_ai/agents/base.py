"""
Base class for game-playing agents.

Every agent is handed a game state when it is its turn and answers with a
move for the side to move. Agents never modify the state they are given.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from threechess_ai.core.state import Move, StateView


class Agent(ABC):
    """
    Abstract base class for all agents.

    This class defines the common interface that all agents must implement.
    """

    def __init__(self, name: str = "Agent"):
        self.name = name
        # Statistics from the most recent decision
        self.last_stats: Dict[str, Any] = {}

    @abstractmethod
    def choose_move(self, state: StateView) -> Optional[Move]:
        """
        Choose a move for the side to move.

        Args:
            state: Current game state (not modified)

        Returns:
            The chosen move, or None if the agent has no move to offer
        """
        pass

    def on_game_end(self, final_state: StateView) -> None:
        """
        Show the agent the final position of a game.

        Agents that learn from finished games can override this.

        Args:
            final_state: The state at the end of the game
        """
        pass

    def get_move_callback(self) -> Callable[[StateView], Optional[Move]]:
        """
        Get a callback function for choosing moves.

        Returns:
            Callback function that takes a game state and returns a move
        """
        return lambda state: self.choose_move(state)

    def __str__(self) -> str:
        return self.name
