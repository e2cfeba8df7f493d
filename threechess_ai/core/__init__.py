"""
Three Chess AI Core Package

This package contains everything the search agents share:
- The StateView contract and move type
- Move enumeration and safe state transitions
- A reference three-sided board implementing the contract
- Constants and enums

All core components can be imported directly from this package.
"""

# State contract
from threechess_ai.core.state import (
    StateView, Move,
    SearchStateError, IllegalMoveError, CloneFailure
)

# Moves
from threechess_ai.core.moves import enumerate_moves, clone_state, apply_to_clone

# Reference board
from threechess_ai.core.board import (
    ThreeSideBoard, Position, Piece, PieceKind,
    create_board, starting_pieces
)

# Constants
from threechess_ai.core.constants import (
    Colour, TURN_ORDER,
    DEFAULT_PARANOID_DEPTH, DEFAULT_MCTS_TIME_LIMIT, DEFAULT_PLAYOUT_DEPTH,
    WIN_REWARD, LOSS_REWARD
)

__all__ = [
    # State
    'StateView', 'Move',
    'SearchStateError', 'IllegalMoveError', 'CloneFailure',

    # Moves
    'enumerate_moves', 'clone_state', 'apply_to_clone',

    # Board
    'ThreeSideBoard', 'Position', 'Piece', 'PieceKind',
    'create_board', 'starting_pieces',

    # Constants
    'Colour', 'TURN_ORDER',
    'DEFAULT_PARANOID_DEPTH', 'DEFAULT_MCTS_TIME_LIMIT', 'DEFAULT_PLAYOUT_DEPTH',
    'WIN_REWARD', 'LOSS_REWARD'
]
