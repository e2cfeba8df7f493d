"""
Monte Carlo Tree Search (MCTS) algorithm.

This module implements the core MCTS algorithm with the four standard phases:
1. Selection: Traverse the tree by UCB1 to find a promising node
2. Expansion: Add one child per legal move and step into one at random
3. Simulation: Run a short random playout to estimate the node's value
4. Backpropagation: Update statistics up the tree

Iterations repeat until the time budget runs out. The budget is only checked
between iterations, so an iteration that has started always completes.
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional, Tuple
import logging
import random
import time
from collections import defaultdict

from threechess_ai.core.constants import Colour, LOSS_REWARD, WIN_REWARD
from threechess_ai.core.moves import clone_state, enumerate_moves
from threechess_ai.core.state import IllegalMoveError, Move, StateView
from threechess_ai.mcts.config import MCTSConfig
from threechess_ai.mcts.node import MCTSNode

logger = logging.getLogger(__name__)


def mcts_search(
    state: StateView,
    config: Optional[MCTSConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tuple[Optional[Move], Dict[str, Any]]:
    """
    Run Monte Carlo Tree Search to find the best move for the side to move.

    Args:
        state: Current game state (not modified)
        config: MCTS configuration parameters
        rng: Random generator (None = one seeded from the config)

    Returns:
        Tuple of (best move or None if the game is over, search statistics)
    """
    if rng is None:
        rng = random.Random(config.seed if config else None)
    root, stats = build_tree(state, config, rng)
    return select_final_move(root, stats, rng), stats


def build_tree(
    state: StateView,
    config: Optional[MCTSConfig] = None,
    rng: Optional[random.Random] = None,
    start_time: Optional[float] = None,
) -> Tuple[MCTSNode, Dict[str, Any]]:
    """
    Grow a search tree from a state until the budget is used up.

    Args:
        state: Root game state (not modified)
        config: MCTS configuration parameters
        rng: Random generator (None = one seeded from the config)
        start_time: When the decision started (None = now)

    Returns:
        Tuple of (root node, search statistics)
    """
    if config is None:
        config = MCTSConfig()
    if rng is None:
        rng = random.Random(config.seed)
    if start_time is None:
        start_time = time.time()

    # Rewards are measured for the side to move at the root
    me = state.turn
    root = MCTSNode(state=state, config=config)
    deadline = start_time + config.time_limit

    stats: Dict[str, Any] = {
        "iterations": 0,
        "max_depth": 0,
        "total_simulation_steps": 0,
        "time_elapsed": 0.0,
        "node_count": 1,
        "action_visits": defaultdict(int),
        "action_rewards": defaultdict(float),
    }

    while time.time() < deadline:
        if config.iterations is not None and stats["iterations"] >= config.iterations:
            break

        # 1. Selection & Expansion: Find a node to simulate from
        selected_node = select_node(root, rng)

        # 2. Simulation: Run a playout from the selected node
        reward, steps = simulate_game(selected_node, me, config, rng)

        # 3. Backpropagation: Update statistics up the tree
        backpropagate(selected_node, reward)

        stats["iterations"] += 1
        stats["total_simulation_steps"] += steps
        stats["max_depth"] = max(stats["max_depth"], selected_node.depth)

    for child in root.children:
        action_str = str(child.move)
        stats["action_visits"][action_str] = child.visits
        if child.visits > 0:
            stats["action_rewards"][action_str] = child.average_reward()

    stats["node_count"] = count_nodes(root)
    stats["time_elapsed"] = time.time() - start_time
    stats["iterations_per_second"] = stats["iterations"] / max(0.001, stats["time_elapsed"])
    stats["average_simulation_steps"] = stats["total_simulation_steps"] / max(1, stats["iterations"])

    logger.debug(
        "MCTS for %s: %d iterations, %d nodes in %.3fs",
        me.name, stats["iterations"], stats["node_count"], stats["time_elapsed"]
    )
    return root, stats


def select_final_move(
    root: MCTSNode,
    stats: Dict[str, Any],
    rng: Optional[random.Random] = None,
) -> Optional[Move]:
    """
    Pick the move to play once the search is over.

    The most visited root child wins. If the root was never expanded
    because the budget ran out first, a random legal move is played instead.
    A finished game has no move and gives None.

    Args:
        root: Root node of the search tree
        stats: Search statistics, updated when the fallback is used
        rng: Random generator for the fallback move

    Returns:
        Move to play, or None
    """
    best_move = root.best_move()
    if best_move is None and not root.is_terminal():
        valid_moves = enumerate_moves(root.state)
        if valid_moves:
            best_move = (rng or random).choice(valid_moves)
            stats["used_fallback"] = True
    return best_move


def select_node(root: MCTSNode, rng: random.Random) -> MCTSNode:
    """
    Select a node for simulation.

    This function implements the selection and expansion phases of MCTS.

    Args:
        root: Root node of the MCTS tree
        rng: Random generator used during expansion

    Returns:
        Node selected for simulation
    """
    return root.tree_policy(rng)


def evaluate_state(state: StateView, me: Colour) -> float:
    """
    Score the end of a playout for the searching side.

    Args:
        state: Position reached by the playout
        me: Side the search is playing for

    Returns:
        WIN_REWARD if we won, LOSS_REWARD if we lost, else our heuristic score
    """
    if state.winner == me:
        return WIN_REWARD
    if state.loser == me:
        return LOSS_REWARD
    return float(state.score(me))


def simulate_game(
    node: MCTSNode,
    me: Colour,
    config: MCTSConfig,
    rng: random.Random,
) -> Tuple[float, int]:
    """
    Run a random playout from a node to estimate its value.

    The playout works on a private copy, so the node's state is untouched.
    It stops after ``config.playout_depth`` plies, when the game ends, or
    when the side to move has no legal move.

    Args:
        node: Node to simulate from
        me: Side the search is playing for
        config: MCTS configuration parameters
        rng: Random generator for move choice

    Returns:
        Tuple of (reward, number of plies played)
    """
    # If the node is terminal, no need to simulate
    if node.is_terminal():
        return evaluate_state(node.state, me), 0

    state = clone_state(node.state)
    if state is None:
        return evaluate_state(node.state, me), 0

    steps = 0
    while not state.game_over and steps < config.playout_depth:
        valid_moves = enumerate_moves(state)
        if not valid_moves:
            break

        move = rng.choice(valid_moves)
        try:
            state.move(move.start, move.end)
        except IllegalMoveError as exc:
            logger.warning("Playout move %s was rejected, ending playout: %s", move, exc)
            break

        steps += 1

    return evaluate_state(state, me), steps


def backpropagate(node: MCTSNode, result: float) -> None:
    """
    Update statistics up the tree.

    The same reward is added at every level, from the simulated node up to
    and including the root.

    Args:
        node: Node to start backpropagation from
        result: Simulation result
    """
    current = node
    while current is not None:
        current.update(result)
        current = current.parent


def count_nodes(node: MCTSNode) -> int:
    """
    Count the total number of nodes in the tree.

    Args:
        node: Root node of the tree

    Returns:
        Total number of nodes
    """
    count = 0
    stack = [node]
    while stack:
        current = stack.pop()
        count += 1
        stack.extend(current.children)
    return count


def get_principal_variation(root: MCTSNode, max_depth: int = 10) -> List[Tuple[Move, float]]:
    """
    Get the principal variation (most visited path) from the root.

    This is useful for analysis and debugging.

    Args:
        root: Root node of the MCTS tree
        max_depth: Maximum depth to explore

    Returns:
        List of (move, average reward) pairs along the most visited path
    """
    result = []
    current = root
    depth = 0

    while current.children and depth < max_depth:
        best_child = max(current.children, key=lambda c: c.visits)
        if best_child.visits == 0:
            break

        result.append((best_child.move, best_child.average_reward()))
        current = best_child
        depth += 1

    return result


def get_action_statistics(root: MCTSNode) -> Dict[str, Dict[str, float]]:
    """
    Get statistics for all moves from the root.

    This is useful for analysis and debugging.

    Args:
        root: Root node of the MCTS tree

    Returns:
        Dictionary mapping move strings to statistics
    """
    result = {}

    for child in root.children:
        result[str(child.move)] = {
            "visits": child.visits,
            "reward": child.total_reward,
            "value": child.average_reward(),
            "exploration": root.ucb_score(child),
        }

    return result
