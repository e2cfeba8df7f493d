"""
Three Chess AI - search agents for a three-sided board game.

This package provides move enumeration, a greedy agent, paranoid minimax
with alpha-beta pruning, and time-bounded Monte Carlo Tree Search, all
working against a small game-state contract. A reference board is included.
"""

__version__ = "0.1.0"
__author__ = "Three Chess AI Team"

# Make key components available at package level
from threechess_ai.core.constants import Colour
from threechess_ai.core.state import StateView, Move, IllegalMoveError, CloneFailure
from threechess_ai.core.board import ThreeSideBoard, create_board
from threechess_ai.agents import Agent, RandomAgent, GreedyAgent, ParanoidAgent
from threechess_ai.mcts import MCTSAgent, MCTSConfig

# Version info as a tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split('.')))
