"""
Configuration for Monte Carlo Tree Search (MCTS).

This module defines the configuration parameters for the MCTS algorithm,
including the time budget, exploration constant, and playout depth.
"""
from dataclasses import dataclass, fields
from typing import Optional, ClassVar
import math

from threechess_ai.core.constants import DEFAULT_MCTS_TIME_LIMIT, DEFAULT_PLAYOUT_DEPTH


@dataclass
class MCTSConfig:
    """
    Configuration parameters for Monte Carlo Tree Search.

    This class defines all tunable parameters for the MCTS algorithm,
    with validation and sensible defaults.
    """
    # Search parameters
    time_limit: float = DEFAULT_MCTS_TIME_LIMIT
    """Wall-clock budget in seconds per decision, measured from call entry"""

    iterations: Optional[int] = None
    """Optional cap on the number of iterations (None = run until time is up)"""

    exploration_weight: float = math.sqrt(2)
    """UCB1 exploration parameter (default is sqrt(2))"""

    playout_depth: int = DEFAULT_PLAYOUT_DEPTH
    """Maximum number of random plies per simulation"""

    seed: Optional[int] = None
    """Seed for the search's random generator (None = unseeded)"""

    # Constants
    INFINITE_VALUE: ClassVar[float] = float('inf')
    """Value representing infinity in the algorithm"""

    def __post_init__(self):
        """Validate configuration parameters."""
        if self.time_limit <= 0:
            raise ValueError("time_limit must be positive")

        if self.iterations is not None and self.iterations <= 0:
            raise ValueError("iterations must be positive or None")

        if self.exploration_weight < 0:
            raise ValueError("exploration_weight must be non-negative")

        if self.playout_depth < 0:
            raise ValueError("playout_depth must be non-negative")

    @classmethod
    def default(cls) -> 'MCTSConfig':
        """
        Get the default configuration.

        Returns:
            Default MCTSConfig object
        """
        return cls()

    @classmethod
    def fast(cls) -> 'MCTSConfig':
        """
        Get a configuration for quick decisions.

        Returns:
            Fast MCTSConfig object
        """
        return cls(time_limit=0.5)

    @classmethod
    def from_dict(cls, config_dict: dict) -> 'MCTSConfig':
        """
        Create a configuration from a dictionary.

        Args:
            config_dict: Dictionary of configuration parameters

        Returns:
            MCTSConfig object
        """
        # Filter out any keys that aren't valid parameters
        names = {f.name for f in fields(cls)}
        valid_params = {k: v for k, v in config_dict.items() if k in names}
        return cls(**valid_params)

    def to_dict(self) -> dict:
        """
        Convert the configuration to a dictionary.

        Returns:
            Dictionary of configuration parameters
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __str__(self) -> str:
        params = ", ".join(f"{name}={value}" for name, value in self.to_dict().items())
        return f"MCTSConfig({params})"
