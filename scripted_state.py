"""
Scripted game state used by the tests.

A ``ScriptedState`` walks an explicit game tree built with ``node``, so tests
can pin down exactly which moves exist, how each position scores, and where
the game ends. It implements the StateView contract.
"""
from typing import Dict, List, Optional, Set, Tuple

from threechess_ai.core.constants import Colour, TURN_ORDER
from threechess_ai.core.state import CloneFailure, IllegalMoveError, Move


class ScriptNode:
    def __init__(self, turn, scores, children, game_over, winner, loser):
        self.turn = turn
        self.scores = scores
        self.children: Dict[Move, 'ScriptNode'] = children
        self.game_over = game_over
        self.winner = winner
        self.loser = loser


def node(
    turn: Colour = Colour.BLUE,
    scores: Optional[Dict[Colour, int]] = None,
    children: Optional[List[Tuple[int, int, ScriptNode]]] = None,
    game_over: bool = False,
    winner: Optional[Colour] = None,
    loser: Optional[Colour] = None,
) -> ScriptNode:
    """Build a position. ``children`` lists (start, end, resulting position)."""
    return ScriptNode(
        turn,
        dict(scores or {}),
        {Move(start, end): child for start, end, child in (children or [])},
        game_over,
        winner,
        loser,
    )


def leaf(turn: Colour, blue: int = 0, green: int = 0, red: int = 0, **kwargs) -> ScriptNode:
    """Build a position without moves from per-side scores."""
    scores = {Colour.BLUE: blue, Colour.GREEN: green, Colour.RED: red}
    return node(turn=turn, scores=scores, **kwargs)


def _collect_positions(root: ScriptNode) -> List[int]:
    seen: Set[int] = set()
    stack = [root]
    while stack:
        current = stack.pop()
        for move, child in current.children.items():
            seen.update(move)
            stack.append(child)
    return sorted(seen)


class ScriptedState:
    """StateView over an explicit game tree."""

    def __init__(self, root: ScriptNode, broken_moves=(), fail_clone: bool = False):
        """
        Args:
            root: Position to start from
            broken_moves: Moves reported legal that raise IllegalMoveError when played
            fail_clone: Whether clone() raises CloneFailure
        """
        self.current = root
        self.broken_moves = {Move(*m) for m in broken_moves}
        self.fail_clone = fail_clone
        self._positions = _collect_positions(root)
        self.moves_played: List[Move] = []

    @property
    def turn(self) -> Colour:
        return self.current.turn

    @property
    def colours(self):
        return TURN_ORDER

    @property
    def positions(self):
        return self._positions

    def get_positions(self, colour: Colour) -> Set[int]:
        if colour != self.current.turn:
            return set()
        return {move.start for move in self.current.children}

    def is_legal_move(self, start, end) -> bool:
        return Move(start, end) in self.current.children

    def move(self, start, end) -> None:
        played = Move(start, end)
        if played in self.broken_moves or played not in self.current.children:
            raise IllegalMoveError(start, end)
        self.current = self.current.children[played]
        self.moves_played.append(played)

    def clone(self) -> 'ScriptedState':
        if self.fail_clone:
            raise CloneFailure("clone disabled")
        copy = ScriptedState.__new__(ScriptedState)
        copy.current = self.current
        copy.broken_moves = set(self.broken_moves)
        copy.fail_clone = self.fail_clone
        copy._positions = self._positions
        copy.moves_played = list(self.moves_played)
        return copy

    @property
    def game_over(self) -> bool:
        return self.current.game_over

    @property
    def winner(self) -> Optional[Colour]:
        return self.current.winner

    @property
    def loser(self) -> Optional[Colour]:
        return self.current.loser

    def score(self, colour: Colour) -> int:
        return self.current.scores.get(colour, 0)
