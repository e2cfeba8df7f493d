"""
Reference three-sided board game.

This module provides a compact rules engine implementing the ``StateView``
contract, so the search agents can be played and tested end to end. Three
sides share a 7x7 board. Kings and soldiers step one square in any
direction, knights jump in an L. Capturing a king ends the game: the
capturing side wins and the captured side loses. A game that reaches its
ply limit ends without a winner.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, NamedTuple, Optional, Set, Tuple
import copy

from threechess_ai.core.constants import Colour, TURN_ORDER
from threechess_ai.core.state import CloneFailure, IllegalMoveError, Move

BOARD_SIZE = 7
DEFAULT_MAX_PLIES = 300

FILES = "abcdefg"


class Position(NamedTuple):
    """A square on the board."""
    row: int
    col: int

    def __str__(self) -> str:
        return f"{FILES[self.col]}{self.row + 1}"

    @classmethod
    def parse(cls, text: str) -> 'Position':
        """Parse a square name such as ``d1``."""
        text = text.strip().lower()
        if len(text) < 2 or text[0] not in FILES or not text[1:].isdigit():
            raise ValueError(f"Invalid square: {text!r}")
        pos = cls(int(text[1:]) - 1, FILES.index(text[0]))
        if not on_board(pos):
            raise ValueError(f"Square off the board: {text!r}")
        return pos


def on_board(pos: Position) -> bool:
    return 0 <= pos.row < BOARD_SIZE and 0 <= pos.col < BOARD_SIZE


# Every square, row by row
ALL_POSITIONS: Tuple[Position, ...] = tuple(
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
POSITION_SET = frozenset(ALL_POSITIONS)


class PieceKind(Enum):
    """Enum representing the kinds of piece, valued by material."""
    KING = 10
    KNIGHT = 3
    SOLDIER = 1

    @property
    def symbol(self) -> str:
        return self.name[0] if self is not PieceKind.KNIGHT else "N"


@dataclass(frozen=True)
class Piece:
    colour: Colour
    kind: PieceKind

    @property
    def value(self) -> int:
        return self.kind.value

    def __str__(self) -> str:
        return f"{self.colour.name[0]}{self.kind.symbol}"


STEP_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]
KNIGHT_OFFSETS = [(1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2)]

# Starting layout: BLUE at the bottom, GREEN and RED in the top corners
STARTING_LAYOUT: Dict[Colour, Dict[PieceKind, List[Tuple[int, int]]]] = {
    Colour.BLUE: {
        PieceKind.KING: [(0, 3)],
        PieceKind.KNIGHT: [(0, 2), (0, 4)],
        PieceKind.SOLDIER: [(1, 2), (1, 3), (1, 4)],
    },
    Colour.GREEN: {
        PieceKind.KING: [(6, 0)],
        PieceKind.KNIGHT: [(5, 0), (6, 1)],
        PieceKind.SOLDIER: [(4, 0), (5, 1), (6, 2)],
    },
    Colour.RED: {
        PieceKind.KING: [(6, 6)],
        PieceKind.KNIGHT: [(5, 6), (6, 5)],
        PieceKind.SOLDIER: [(4, 6), (5, 5), (6, 4)],
    },
}


def starting_pieces() -> Dict[Position, Piece]:
    """Get the piece placement for a new game."""
    pieces = {}
    for colour, kinds in STARTING_LAYOUT.items():
        for kind, squares in kinds.items():
            for row, col in squares:
                pieces[Position(row, col)] = Piece(colour, kind)
    return pieces


class ThreeSideBoard:
    """
    Complete state of a three-sided game.

    The board tracks piece placement, the side to move, material captured by
    each side, and the end-of-game result.
    """

    def __init__(
        self,
        pieces: Optional[Mapping[Position, Piece]] = None,
        turn: Colour = Colour.BLUE,
        max_plies: int = DEFAULT_MAX_PLIES,
    ):
        """
        Initialize a board.

        Args:
            pieces: Piece placement (None for the starting layout)
            turn: Side to move
            max_plies: Number of moves after which the game ends undecided
        """
        if max_plies <= 0:
            raise ValueError("max_plies must be positive")

        self._pieces: Dict[Position, Piece] = dict(starting_pieces() if pieces is None else pieces)
        for pos in self._pieces:
            if not on_board(pos):
                raise ValueError(f"Piece placed off the board at {pos!r}")

        self._turn = turn
        self.max_plies = max_plies
        self.ply = 0
        self.captured: Dict[Colour, int] = {colour: 0 for colour in TURN_ORDER}
        self.history: List[Move] = []
        self._game_over = False
        self._winner: Optional[Colour] = None
        self._loser: Optional[Colour] = None

    @property
    def turn(self) -> Colour:
        return self._turn

    @property
    def colours(self) -> Tuple[Colour, ...]:
        return TURN_ORDER

    @property
    def positions(self) -> Tuple[Position, ...]:
        return ALL_POSITIONS

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def winner(self) -> Optional[Colour]:
        return self._winner

    @property
    def loser(self) -> Optional[Colour]:
        return self._loser

    def piece_at(self, pos: Position) -> Optional[Piece]:
        return self._pieces.get(pos)

    def get_positions(self, colour: Colour) -> Set[Position]:
        return {pos for pos, piece in self._pieces.items() if piece.colour == colour}

    def is_legal_move(self, start: Position, end: Position) -> bool:
        """
        Check whether a move is legal for the side to move.

        Args:
            start: Square of the piece to move
            end: Destination square

        Returns:
            True if the move is legal, False otherwise
        """
        if self._game_over:
            return False
        if end not in POSITION_SET:
            return False

        piece = self._pieces.get(start)
        if piece is None or piece.colour != self._turn:
            return False

        target = self._pieces.get(end)
        if target is not None and target.colour == piece.colour:
            return False

        offset = (end[0] - start[0], end[1] - start[1])
        if piece.kind is PieceKind.KNIGHT:
            return offset in KNIGHT_OFFSETS
        return offset in STEP_OFFSETS

    def move(self, start: Position, end: Position) -> None:
        """
        Apply a move for the side to move and pass the turn on.

        Args:
            start: Square of the piece to move
            end: Destination square

        Raises:
            IllegalMoveError: If the move is not legal in this position
        """
        if not self.is_legal_move(start, end):
            reason = "game is over" if self._game_over else "illegal move"
            raise IllegalMoveError(start, end, reason)

        start, end = Position(*start), Position(*end)
        piece = self._pieces.pop(start)
        target = self._pieces.get(end)
        self._pieces[end] = piece
        self.history.append(Move(start, end))
        self.ply += 1

        if target is not None:
            self.captured[piece.colour] += target.value
            if target.kind is PieceKind.KING:
                self._end_game(winner=piece.colour, loser=target.colour)

        if not self._game_over and self.ply >= self.max_plies:
            self._end_game(winner=None, loser=None)

        self._turn = self._turn.next()

    def _end_game(self, winner: Optional[Colour], loser: Optional[Colour]) -> None:
        self._game_over = True
        self._winner = winner
        self._loser = loser

    def material(self, colour: Colour) -> int:
        """Total value of the pieces ``colour`` still has on the board."""
        return sum(piece.value for piece in self._pieces.values() if piece.colour == colour)

    def score(self, colour: Colour) -> int:
        """
        Heuristic value of the position for a side.

        Material still on the board plus the value of the pieces the side
        has captured.
        """
        return self.material(colour) + self.captured[colour]

    def clone(self) -> 'ThreeSideBoard':
        """
        Create a deep copy of the board.

        Returns:
            Copy of the board

        Raises:
            CloneFailure: If the board could not be copied
        """
        try:
            return copy.deepcopy(self)
        except (copy.Error, RecursionError) as exc:
            raise CloneFailure(str(exc)) from exc

    def __str__(self) -> str:
        rows = []
        for row in reversed(range(BOARD_SIZE)):
            cells = []
            for col in range(BOARD_SIZE):
                piece = self._pieces.get(Position(row, col))
                cells.append(str(piece) if piece else " .")
            rows.append(f"{row + 1} " + " ".join(cells))
        rows.append("   " + "  ".join(FILES))
        return "\n".join(rows)


def create_board(max_plies: int = DEFAULT_MAX_PLIES) -> ThreeSideBoard:
    """
    Create a board in the starting position.

    Args:
        max_plies: Number of moves after which the game ends undecided

    Returns:
        ThreeSideBoard object
    """
    return ThreeSideBoard(max_plies=max_plies)
