"""
Random agent, a baseline for comparison with the search agents.
"""
import random
from typing import Optional

from threechess_ai.agents.base import Agent
from threechess_ai.core.moves import enumerate_moves
from threechess_ai.core.state import Move, StateView


class RandomAgent(Agent):
    """
    Agent that selects moves uniformly at random.
    """

    def __init__(self, name: str = "RandomAgent", seed: Optional[int] = None):
        """
        Initialize the random agent.

        Args:
            name: Name of the agent
            seed: Optional seed for a private random generator
        """
        super().__init__(name)
        self.rng = random.Random(seed)

    def choose_move(self, state: StateView) -> Optional[Move]:
        moves = enumerate_moves(state)
        if not moves:
            return None
        return self.rng.choice(moves)
