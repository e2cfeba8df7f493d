"""
Monte Carlo Tree Search (MCTS) implementation.

This package provides a time-bounded UCT agent. The MCTS algorithm works by:

1. Selection: Starting from the root node, select child nodes using UCB1 until
   reaching a node without children.
2. Expansion: Create one child per legal move and step into one at random.
3. Simulation: From that node, play random moves for a few plies.
4. Backpropagation: Update the statistics of all nodes in the path with the result.

When the time budget is spent, the most visited root move is played.
"""

from threechess_ai.mcts.node import MCTSNode
from threechess_ai.mcts.agent import MCTSAgent
from threechess_ai.mcts.search import (
    mcts_search,
    build_tree,
    select_node,
    simulate_game,
    backpropagate,
    select_final_move
)
from threechess_ai.mcts.config import MCTSConfig

__all__ = [
    'MCTSAgent',
    'MCTSNode',
    'MCTSConfig',
    'mcts_search',
    'build_tree',
    'select_node',
    'simulate_game',
    'backpropagate',
    'select_final_move'
]
