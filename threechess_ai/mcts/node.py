"""
Monte Carlo Tree Search Node.

This module defines the MCTSNode class which represents a node in the MCTS tree.
Each node owns a game state, statistics (visits, reward), and its child nodes.
The parent link is only used to walk back up the tree during backpropagation.
"""
from __future__ import annotations
from typing import List, Optional
import math
import random

from threechess_ai.core.moves import apply_to_clone, enumerate_moves
from threechess_ai.core.state import Move, StateView
from threechess_ai.mcts.config import MCTSConfig


class MCTSNode:
    """
    A node in the Monte Carlo Tree Search.

    Each node represents a game state and tracks statistics about
    simulations that pass through it, including visit count and rewards.
    Rewards are always measured from the point of view of the side that
    started the search.
    """

    def __init__(
        self,
        state: StateView,
        parent: Optional['MCTSNode'] = None,
        move: Optional[Move] = None,
        config: Optional[MCTSConfig] = None,
    ):
        """
        Initialize an MCTS node.

        Args:
            state: The game state this node represents (owned by the node)
            parent: The parent node (None for root)
            move: The move that led to this state (None for root)
            config: MCTS configuration parameters
        """
        self.state = state
        self.parent = parent
        self.move = move
        self.config = config or MCTSConfig()

        # Node statistics
        self.visits = 0
        self.total_reward = 0.0
        self.children: List[MCTSNode] = []

    @property
    def depth(self) -> int:
        """Number of moves between the root and this node."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def is_terminal(self) -> bool:
        """
        Check if this node represents a finished game.

        Returns:
            True if the game is over, False otherwise
        """
        return self.state.game_over

    def is_expanded(self) -> bool:
        return bool(self.children)

    def average_reward(self) -> float:
        """
        Mean reward over all visits.

        Win and loss rewards are the largest finite floats, so a second
        decided playout saturates the sum to an infinity that no later
        result can undo.
        """
        if self.visits == 0:
            return 0.0
        return self.total_reward / self.visits

    def ucb_score(self, child: 'MCTSNode') -> float:
        """
        Calculate the UCB1 score for a child node.

        UCB1 = average_reward + exploration_weight * sqrt(ln(parent_visits) / child_visits)

        Args:
            child: Child node to calculate score for

        Returns:
            UCB1 score
        """
        # If the child has never been visited, treat it as having infinite value
        if child.visits == 0:
            return MCTSConfig.INFINITE_VALUE

        exploitation = child.average_reward()
        exploration = math.sqrt(math.log(self.visits) / child.visits)
        return exploitation + self.config.exploration_weight * exploration

    def select_child(self) -> 'MCTSNode':
        """
        Select the child with the highest UCB1 score.

        The first child wins ties, so unvisited children are tried in order.

        Returns:
            Selected child node
        """
        if not self.children:
            raise ValueError("Cannot select child from node with no children")

        return max(self.children, key=self.ucb_score)

    def expand(self) -> List['MCTSNode']:
        """
        Expand the node with one child per legal move.

        Each child owns its own copy of the state with the move applied.
        Moves whose copy could not be produced are left out.

        Returns:
            The new child nodes (empty for a finished game or when no move is legal)
        """
        if self.children or self.is_terminal():
            return self.children

        for move in enumerate_moves(self.state):
            child_state = apply_to_clone(self.state, move)
            if child_state is None:
                continue
            self.children.append(
                MCTSNode(state=child_state, parent=self, move=move, config=self.config)
            )

        return self.children

    def tree_policy(self, rng: random.Random) -> 'MCTSNode':
        """
        Execute the tree policy to select a node for simulation.

        This combines the selection and expansion phases of MCTS: descend by
        UCB1 while the current node has children, then expand the node reached
        and step into one of its new children at random. A finished game is
        returned as is.

        Args:
            rng: Random generator used to pick among new children

        Returns:
            Selected node
        """
        current = self

        while current.children:
            current = current.select_child()

        if not current.is_terminal():
            children = current.expand()
            if children:
                current = rng.choice(children)

        return current

    def update(self, result: float) -> None:
        """
        Record one simulation result.

        Args:
            result: Reward of the simulation, from the searching side's view
        """
        self.visits += 1
        self.total_reward += result

    def best_move(self) -> Optional[Move]:
        """
        Get the best move from this node based on visit counts.

        This is called at the root node to determine the final move.

        Returns:
            The move of the most visited child, or None if no children
        """
        if not self.children:
            return None

        # The most visited child is more robust than the best average reward
        best_child = max(self.children, key=lambda c: c.visits)
        return best_child.move

    def __str__(self) -> str:
        return (f"MCTSNode(move={self.move}, "
                f"visits={self.visits}, "
                f"reward={self.total_reward:.2f}, "
                f"children={len(self.children)})")
