"""
Game state contract consumed by the search agents.

The agents never look inside a game. Everything they need is reached through
the ``StateView`` protocol below: whose turn it is, where pieces are, which
moves are legal, a heuristic score, end-of-game information, and the ability
to take an independent copy of the position.
"""
from __future__ import annotations
from typing import Any, Hashable, Iterable, NamedTuple, Optional, Protocol, Set, Tuple, runtime_checkable

from threechess_ai.core.constants import Colour


class SearchStateError(Exception):
    """Base class for failures raised by a game state during search."""


class IllegalMoveError(SearchStateError):
    """Raised when a move fails legality at the time it is applied."""

    def __init__(self, start: Any, end: Any, reason: str = "illegal move"):
        super().__init__(f"{reason}: {start} -> {end}")
        self.start = start
        self.end = end


class CloneFailure(SearchStateError):
    """Raised when a deep copy of a game state could not be produced."""


class Move(NamedTuple):
    """A move, expressed as the start and end position of a piece."""
    start: Hashable
    end: Hashable

    def __str__(self) -> str:
        return f"{self.start}->{self.end}"


@runtime_checkable
class StateView(Protocol):
    """
    A clonable snapshot of a game, as seen by a search agent.

    ``move`` is the only state transition: it applies a move for the side
    to move, advances ``turn``, and may end the game.
    """

    @property
    def turn(self) -> Colour:
        """The side to move."""
        ...

    @property
    def colours(self) -> Tuple[Colour, ...]:
        """All sides of the game in turn order."""
        ...

    @property
    def positions(self) -> Iterable[Hashable]:
        """The fixed position space of the game, in a stable order."""
        ...

    def get_positions(self, colour: Colour) -> Set[Hashable]:
        """Positions occupied by pieces of ``colour``."""
        ...

    def is_legal_move(self, start: Hashable, end: Hashable) -> bool:
        """Whether moving from ``start`` to ``end`` is legal for the side to move."""
        ...

    def move(self, start: Hashable, end: Hashable) -> None:
        """Apply a move in place. Raises IllegalMoveError if it is not legal."""
        ...

    def clone(self) -> 'StateView':
        """Independent deep copy. Raises CloneFailure if one cannot be made."""
        ...

    @property
    def game_over(self) -> bool:
        ...

    @property
    def winner(self) -> Optional[Colour]:
        ...

    @property
    def loser(self) -> Optional[Colour]:
        ...

    def score(self, colour: Colour) -> int:
        """Heuristic evaluation of the position for ``colour``."""
        ...
