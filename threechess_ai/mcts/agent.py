"""
Monte Carlo Tree Search Agent.

This module provides the MCTSAgent class, a ready-to-use player that runs
time-bounded UCT search to choose its moves. The agent can be configured
with different parameters and keeps statistics about its last search.
"""
from typing import Any, Dict, List, Optional, Tuple
import json
import random
import time

from threechess_ai.agents.base import Agent
from threechess_ai.core.moves import enumerate_moves
from threechess_ai.core.state import Move, StateView
from threechess_ai.mcts.config import MCTSConfig
from threechess_ai.mcts.node import MCTSNode
from threechess_ai.mcts.search import (
    build_tree, select_final_move, get_action_statistics, get_principal_variation
)


class MCTSAgent(Agent):
    """
    Monte Carlo Tree Search agent.

    A fresh tree is grown for every decision; nothing is carried over
    between calls apart from statistics kept for reporting.
    """

    def __init__(
        self,
        config: Optional[MCTSConfig] = None,
        name: str = "MctsAgent",
        verbose: bool = False
    ):
        """
        Initialize an MCTS agent.

        Args:
            config: MCTS configuration parameters
            name: Name of the agent
            verbose: Whether to print detailed information after each search
        """
        super().__init__(name)
        self.config = config or MCTSConfig()
        self.verbose = verbose
        self.rng = random.Random(self.config.seed)

        # History of all moves and their statistics
        self.move_history: List[Tuple[Move, Dict[str, Any]]] = []

        # Root node of the last search
        self.last_root: Optional[MCTSNode] = None

    def choose_move(self, state: StateView) -> Optional[Move]:
        """
        Choose a move using Monte Carlo Tree Search.

        Args:
            state: Current game state (not modified)

        Returns:
            Selected move, or None if the game is over or no move is legal
        """
        start_time = time.time()

        if state.game_over:
            self.last_stats = {"iterations": 0, "terminal": True}
            self.last_root = None
            return None

        valid_moves = enumerate_moves(state)
        if not valid_moves:
            self.last_stats = {"iterations": 0, "no_moves": True}
            self.last_root = None
            return None

        # If there's only one valid move, no need to search
        if len(valid_moves) == 1:
            self.last_stats = {"iterations": 0, "forced_move": True}
            self.last_root = None
            return valid_moves[0]

        root, stats = build_tree(state, self.config, self.rng, start_time=start_time)
        move = select_final_move(root, stats, self.rng)

        self.last_root = root
        self.last_stats = stats
        self.move_history.append((move, stats))

        if self.verbose:
            self._print_search_info(move, stats)

        return move

    def _print_search_info(self, move: Move, stats: Dict[str, Any]) -> None:
        """
        Print information about the search.

        Args:
            move: Selected move
            stats: Search statistics
        """
        print(f"\n{self.name} selected: {move}")
        print(f"Iterations: {stats['iterations']}")
        print(f"Time: {stats['time_elapsed']:.3f}s ({stats['iterations_per_second']:.1f} it/s)")
        print(f"Nodes: {stats['node_count']}")
        print(f"Max depth: {stats['max_depth']}")

        if stats['action_visits']:
            print("\nTop moves:")
            moves_by_visits = sorted(
                stats['action_visits'].items(),
                key=lambda x: x[1],
                reverse=True
            )
            for i, (move_str, visits) in enumerate(moves_by_visits[:5]):
                value = stats['action_rewards'].get(move_str, 0.0)
                print(f"{i+1}. {move_str} - {visits} visits, {value:.3g} value")

    def get_search_stats(self) -> Dict[str, Any]:
        """
        Get statistics from the most recent search.

        Returns:
            Dictionary of search statistics
        """
        return self.last_stats

    def get_principal_variation(self) -> List[Tuple[Move, float]]:
        """
        Get the principal variation (most visited path) from the last search.

        Returns:
            List of (move, value) pairs representing the principal variation
        """
        if self.last_root is None:
            return []

        return get_principal_variation(self.last_root)

    def get_action_statistics(self) -> Dict[str, Dict[str, float]]:
        """
        Get statistics for all moves from the last search.

        Returns:
            Dictionary mapping move strings to statistics
        """
        if self.last_root is None:
            return {}

        return get_action_statistics(self.last_root)

    def reset_statistics(self) -> None:
        """Reset all statistics."""
        self.last_stats = {}
        self.move_history = []
        self.last_root = None

    def save_statistics(self, filename: str) -> None:
        """
        Save statistics to a file.

        Args:
            filename: Name of the file to save to
        """
        history = []
        for move, stats in self.move_history:
            history.append({
                "move": str(move),
                "stats": {k: v for k, v in stats.items() if not isinstance(v, dict)}
            })

        data = {
            "agent_name": self.name,
            "config": self.config.to_dict(),
            "history": history,
            "total_moves": len(self.move_history)
        }

        with open(filename, 'w') as f:
            json.dump(data, f, indent=2)

    def __str__(self) -> str:
        return self.name
