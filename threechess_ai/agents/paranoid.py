"""
Paranoid search agent.

Paranoid search extends minimax to games with more than two sides by
assuming every other side plays against us. All opponents are merged into
a single minimizing adversary, which lets the search use alpha-beta pruning
even though opponents actually move independently.

Algorithm:
- Levels where we are to move maximize, every other level minimizes
- Leaves are scored as (N-1) * our score minus the sum of the other
  sides' scores; with three sides, 2*mine - opp1 - opp2
- A branch is cut off once beta <= alpha
"""
import logging
import math
import time
from typing import Optional

from threechess_ai.agents.base import Agent
from threechess_ai.core.constants import Colour, DEFAULT_PARANOID_DEPTH
from threechess_ai.core.moves import apply_to_clone, enumerate_moves
from threechess_ai.core.state import Move, StateView

logger = logging.getLogger(__name__)


def paranoid_score(state: StateView, me: Colour) -> int:
    """
    Score a position assuming every other side is against us.

    Args:
        state: Position to score
        me: Side the search is playing for

    Returns:
        Our score weighted by the number of opponents, minus their scores
    """
    opponents = [colour for colour in state.colours if colour != me]
    return len(opponents) * state.score(me) - sum(state.score(colour) for colour in opponents)


class ParanoidAgent(Agent):
    """
    Agent using depth-limited paranoid minimax with alpha-beta pruning.
    """

    def __init__(
        self,
        depth: int = DEFAULT_PARANOID_DEPTH,
        name: str = "ParanoidAgent",
        use_pruning: bool = True,
    ):
        """
        Initialize a paranoid agent.

        Args:
            depth: Number of plies searched below each root move
            name: Name of the agent
            use_pruning: Whether to cut off branches with alpha-beta
        """
        if depth < 0:
            raise ValueError("depth must be non-negative")
        super().__init__(name)
        self.depth = depth
        self.use_pruning = use_pruning
        self.nodes_searched = 0

    def choose_move(self, state: StateView) -> Optional[Move]:
        """
        Choose the move with the best paranoid value.

        The first move wins ties. Returns None if there is no legal move.

        Args:
            state: Current game state (not modified)

        Returns:
            Best move, or None
        """
        me = state.turn
        self.nodes_searched = 0
        start_time = time.time()

        best_move: Optional[Move] = None
        best_value = -math.inf
        root_values = {}

        for move in enumerate_moves(state):
            child = apply_to_clone(state, move)
            if child is None:
                continue
            value = self.minimax(child, self.depth, -math.inf, math.inf, me)
            if value is None:
                continue
            root_values[str(move)] = value
            if value > best_value:
                best_value = value
                best_move = move

        self.last_stats = {
            "depth": self.depth,
            "nodes_searched": self.nodes_searched,
            "best_value": best_value if best_move is not None else None,
            "move_values": root_values,
            "time_elapsed": time.time() - start_time,
        }
        logger.debug(
            "%s chose %s (value %s, %d nodes)",
            self.name, best_move, best_value, self.nodes_searched
        )
        return best_move

    def minimax(
        self,
        state: StateView,
        depth: int,
        alpha: float,
        beta: float,
        me: Colour,
    ) -> Optional[float]:
        """
        Evaluate a position with paranoid minimax.

        Args:
            state: Position to evaluate, owned by this call
            depth: Remaining plies to search
            alpha: Best value the maximizer can already guarantee
            beta: Best value the minimizer can already guarantee
            me: Side the search is playing for

        Returns:
            Paranoid value of the position, or None if no move below it
            could be evaluated
        """
        self.nodes_searched += 1

        if depth == 0 or state.game_over:
            return paranoid_score(state, me)

        moves = enumerate_moves(state)
        if not moves:
            # Stalemated side: nothing left to search below this position
            return paranoid_score(state, me)

        maximizing = state.turn == me
        best: Optional[float] = None

        for move in moves:
            child = apply_to_clone(state, move)
            if child is None:
                continue
            value = self.minimax(child, depth - 1, alpha, beta, me)
            if value is None:
                continue

            if maximizing:
                best = value if best is None else max(best, value)
                alpha = max(alpha, value)
            else:
                best = value if best is None else min(best, value)
                beta = min(beta, value)

            if self.use_pruning and beta <= alpha:
                break

        return best
