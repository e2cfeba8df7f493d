"""
Game-playing agents.

- Agent: common interface (name, choose_move, on_game_end)
- RandomAgent: uniform random baseline
- GreedyAgent: one ply of lookahead on the heuristic score
- ParanoidAgent: depth-limited paranoid minimax with alpha-beta pruning

The Monte Carlo agent lives in ``threechess_ai.mcts``.
"""

from threechess_ai.agents.base import Agent
from threechess_ai.agents.random_agent import RandomAgent
from threechess_ai.agents.greedy import GreedyAgent
from threechess_ai.agents.paranoid import ParanoidAgent, paranoid_score

__all__ = [
    'Agent',
    'RandomAgent',
    'GreedyAgent',
    'ParanoidAgent',
    'paranoid_score',
]
