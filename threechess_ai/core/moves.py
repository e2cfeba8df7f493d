"""
Move enumeration and safe state transitions for search.

Search agents enumerate moves on states they own, then explore each move on
a private copy. A copy or move that fails after the move was validated is a
broken rules engine, not a caller error: the helpers here log it and report
the branch as unavailable instead of raising.
"""
from __future__ import annotations
import logging
from typing import List, Optional

from threechess_ai.core.state import CloneFailure, IllegalMoveError, Move, StateView

logger = logging.getLogger(__name__)


def enumerate_moves(state: StateView) -> List[Move]:
    """
    Get all legal moves for the side to move.

    Pieces are visited in position-space order (outer loop) and destinations
    in position-space order (inner loop), so the result is deterministic for
    a given state. The state is not modified.

    Args:
        state: Game state to enumerate

    Returns:
        List of distinct legal moves, empty if the side to move has none
    """
    positions = list(state.positions)
    pieces = state.get_positions(state.turn)

    moves: List[Move] = []
    seen = set()
    for start in positions:
        if start not in pieces:
            continue
        for end in positions:
            candidate = Move(start, end)
            if candidate not in seen and state.is_legal_move(start, end):
                seen.add(candidate)
                moves.append(candidate)
    return moves


def clone_state(state: StateView) -> Optional[StateView]:
    """
    Copy a state, returning None if the copy could not be made.

    Args:
        state: State to copy

    Returns:
        Independent copy of the state, or None
    """
    try:
        return state.clone()
    except CloneFailure as exc:
        logger.warning("Could not clone state, skipping branch: %s", exc)
        return None


def apply_to_clone(state: StateView, move: Move) -> Optional[StateView]:
    """
    Apply a move to a private copy of a state.

    The original state is never modified. A failure to copy or to apply
    the move is logged and the branch is reported as unavailable.

    Args:
        state: State to copy
        move: Move to apply to the copy

    Returns:
        The resulting state, or None if the branch must be skipped
    """
    child = clone_state(state)
    if child is None:
        return None

    try:
        child.move(move.start, move.end)
    except IllegalMoveError as exc:
        # The move passed is_legal_move, so this should not happen
        logger.warning("Pre-validated move %s was rejected, skipping branch: %s", move, exc)
        return None
    return child
