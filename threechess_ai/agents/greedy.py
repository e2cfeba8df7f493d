"""
Greedy agent with one ply of lookahead.

The agent tries every legal move on a copy of the state and keeps the move
whose resulting position scores best for the side that moved.
"""
import logging
from typing import Optional

from threechess_ai.agents.base import Agent
from threechess_ai.core.moves import apply_to_clone, enumerate_moves
from threechess_ai.core.state import Move, StateView

logger = logging.getLogger(__name__)


class GreedyAgent(Agent):
    """
    Agent that picks the move with the best immediate score.

    The running best score starts at zero and a candidate replaces the best
    move when it scores at least as well, so ties go to the candidate
    examined last. If every candidate scores below zero no move is chosen.
    """

    def __init__(self, name: str = "GreedyAgent"):
        super().__init__(name)

    def choose_move(self, state: StateView) -> Optional[Move]:
        """
        Choose the move with the highest resulting score.

        Args:
            state: Current game state (not modified)

        Returns:
            Best scoring move, or None if no candidate reaches zero
        """
        me = state.turn
        best_move: Optional[Move] = None
        best_score = 0
        examined = 0

        for move in enumerate_moves(state):
            result = apply_to_clone(state, move)
            if result is None:
                continue
            examined += 1

            move_score = result.score(me)
            if best_score <= move_score:
                best_score = move_score
                best_move = move

        self.last_stats = {"candidates": examined, "best_score": best_score}
        if best_move is None:
            logger.debug("%s found no move scoring at least zero", self.name)
        return best_move
