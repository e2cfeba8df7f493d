#!/usr/bin/env python
"""
Tests for the paranoid minimax agent.
"""
import random
import unittest

from threechess_ai.agents.paranoid import ParanoidAgent, paranoid_score
from threechess_ai.core.board import Piece, PieceKind, Position, ThreeSideBoard
from threechess_ai.core.constants import Colour
from threechess_ai.core.moves import apply_to_clone, enumerate_moves
from threechess_ai.core.state import Move

from scripted_state import ScriptedState, leaf, node

B, G, R = Colour.BLUE, Colour.GREEN, Colour.RED


def score_of(n, me):
    others = [c for c in (B, G, R) if c != me]
    return 2 * n.scores.get(me, 0) - sum(n.scores.get(c, 0) for c in others)


def brute_minimax(n, depth, me):
    """Plain paranoid minimax over a scripted tree, no pruning."""
    if depth == 0 or n.game_over or not n.children:
        return score_of(n, me)
    values = [brute_minimax(child, depth - 1, me) for child in n.children.values()]
    return max(values) if n.turn == me else min(values)


def random_tree(rng, depth, turn, branching=3):
    scores = {c: rng.randint(-5, 10) for c in (B, G, R)}
    if depth == 0:
        return node(turn=turn, scores=scores)
    children = [
        (k, k + 10, random_tree(rng, depth - 1, turn.next(), branching))
        for k in range(rng.randint(1, branching))
    ]
    return node(turn=turn, scores=scores, children=children)


def small_board():
    """A sparse position that keeps depth-2 searches quick."""
    pieces = {
        Position(0, 3): Piece(B, PieceKind.KING),
        Position(1, 3): Piece(B, PieceKind.KNIGHT),
        Position(6, 0): Piece(G, PieceKind.KING),
        Position(4, 1): Piece(G, PieceKind.SOLDIER),
        Position(6, 6): Piece(R, PieceKind.KING),
        Position(3, 4): Piece(R, PieceKind.SOLDIER),
    }
    return ThreeSideBoard(pieces)


class TestParanoidScore(unittest.TestCase):
    """Test case for the paranoid evaluation."""

    def test_three_sides(self):
        state = ScriptedState(leaf(B, blue=7, green=3, red=5))
        self.assertEqual(paranoid_score(state, B), 2 * 7 - 3 - 5)
        self.assertEqual(paranoid_score(state, G), 2 * 3 - 7 - 5)

    def test_board(self):
        board = small_board()
        self.assertEqual(paranoid_score(board, B), 2 * 13 - 11 - 11)


class TestParanoidAgent(unittest.TestCase):
    """Test case for the paranoid agent."""

    def test_defaults(self):
        agent = ParanoidAgent()
        self.assertEqual(agent.depth, 3)
        self.assertEqual(str(agent), "ParanoidAgent")
        with self.assertRaises(ValueError):
            ParanoidAgent(depth=-1)

    def test_depth_zero_maximizes_paranoid_score(self):
        # Child positions still have moves; depth 0 scores them directly
        deeper = [(9, 19, leaf(R, blue=100))]
        root = node(turn=B, children=[
            (1, 2, leaf(G, blue=4, green=1, red=1, children=deeper)),   # 6
            (1, 3, leaf(G, blue=5, green=0, red=3, children=deeper)),   # 7
            (4, 5, leaf(G, blue=9, green=8, red=8, children=deeper)),   # 2
        ])
        agent = ParanoidAgent(depth=0)
        self.assertEqual(agent.choose_move(ScriptedState(root)), Move(1, 3))
        self.assertEqual(agent.last_stats["best_value"], 7)

    def test_opponents_minimize(self):
        root = node(turn=B, children=[
            # looks best for us but GREEN can punish it
            (1, 2, node(turn=G, children=[
                (5, 6, leaf(R, blue=10)),
                (5, 7, leaf(R, blue=0, green=6)),
            ])),
            (1, 3, node(turn=G, children=[
                (5, 6, leaf(R, blue=2)),
                (5, 7, leaf(R, blue=3)),
            ])),
        ])
        agent = ParanoidAgent(depth=1)
        self.assertEqual(agent.choose_move(ScriptedState(root)), Move(1, 3))
        self.assertEqual(agent.last_stats["best_value"], 4)

    def test_first_move_wins_ties(self):
        root = node(turn=B, children=[
            (1, 2, leaf(G, blue=3)),
            (1, 3, leaf(G, blue=3)),
        ])
        self.assertEqual(ParanoidAgent(depth=2).choose_move(ScriptedState(root)), Move(1, 2))

    def test_terminal_state_gives_no_move(self):
        state = ScriptedState(leaf(B, blue=5, game_over=True, winner=G, loser=B))
        self.assertIsNone(ParanoidAgent().choose_move(state))

    def test_terminal_child_is_not_searched(self):
        root = node(turn=B, children=[
            (1, 2, leaf(G, blue=20, game_over=True, winner=B, loser=G,
                        children=[(5, 6, leaf(R, blue=-100))])),
            (1, 3, leaf(G, blue=1)),
        ])
        self.assertEqual(ParanoidAgent(depth=3).choose_move(ScriptedState(root)), Move(1, 2))

    def test_rejected_branch_is_skipped(self):
        root = node(turn=B, children=[(1, 2, leaf(G, blue=9)), (1, 3, leaf(G, blue=2))])
        state = ScriptedState(root, broken_moves=[(1, 2)])
        with self.assertLogs("threechess_ai.core.moves", level="WARNING"):
            self.assertEqual(ParanoidAgent(depth=1).choose_move(state), Move(1, 3))

    def test_failed_subtree_is_ignored(self):
        # Every move below 1->3 is rejected, so that root move has no value
        root = node(turn=B, children=[
            (1, 2, node(turn=G, children=[(5, 6, leaf(R, blue=5))])),
            (1, 3, node(turn=G, children=[(7, 8, leaf(R, blue=50))])),
        ])
        state = ScriptedState(root, broken_moves=[(7, 8)])
        agent = ParanoidAgent(depth=2)
        with self.assertLogs("threechess_ai.core.moves", level="WARNING"):
            self.assertEqual(agent.choose_move(state), Move(1, 2))
        self.assertEqual(agent.last_stats["move_values"], {"1->2": 10})

    def test_all_subtrees_failed_gives_no_move(self):
        root = node(turn=B, children=[(1, 2, node(turn=G, children=[(7, 8, leaf(R, blue=50))]))])
        state = ScriptedState(root, broken_moves=[(7, 8)])
        with self.assertLogs("threechess_ai.core.moves", level="WARNING"):
            self.assertIsNone(ParanoidAgent(depth=2).choose_move(state))

    def test_matches_plain_minimax(self):
        for seed in range(20):
            rng = random.Random(seed)
            tree = random_tree(rng, depth=4, turn=B)
            depth = 2
            expected = {
                str(move): brute_minimax(child, depth, B)
                for move, child in tree.children.items()
            }

            agent = ParanoidAgent(depth=depth)
            move = agent.choose_move(ScriptedState(tree))

            self.assertEqual(agent.last_stats["move_values"], expected)
            best = max(expected.values())
            first_best = next(m for m, c in tree.children.items() if expected[str(m)] == best)
            self.assertEqual(move, first_best)

    def test_pruning_does_not_change_result(self):
        pruned_fewer = False
        for seed in range(20):
            tree = random_tree(random.Random(seed), depth=4, turn=B)
            pruned = ParanoidAgent(depth=3)
            plain = ParanoidAgent(depth=3, use_pruning=False)

            self.assertEqual(pruned.choose_move(ScriptedState(tree)), plain.choose_move(ScriptedState(tree)))
            self.assertEqual(pruned.last_stats["move_values"], plain.last_stats["move_values"])
            self.assertLessEqual(pruned.nodes_searched, plain.nodes_searched)
            pruned_fewer = pruned_fewer or pruned.nodes_searched < plain.nodes_searched
        self.assertTrue(pruned_fewer)

    def test_pruning_on_board(self):
        board = small_board()
        pruned = ParanoidAgent(depth=2)
        plain = ParanoidAgent(depth=2, use_pruning=False)
        move = pruned.choose_move(board)
        self.assertEqual(move, plain.choose_move(board))
        self.assertEqual(pruned.last_stats["move_values"], plain.last_stats["move_values"])
        self.assertIn(move, enumerate_moves(board))

    def test_depth_zero_on_board(self):
        board = small_board()
        values = {m: paranoid_score(apply_to_clone(board, m), B) for m in enumerate_moves(board)}
        best = max(values.values())
        expected = next(m for m, v in values.items() if v == best)
        self.assertEqual(ParanoidAgent(depth=0).choose_move(board), expected)

    def test_deterministic_and_untouched(self):
        board = small_board()
        agent = ParanoidAgent(depth=1)
        first = agent.choose_move(board)
        self.assertEqual(agent.choose_move(board), first)
        self.assertEqual(board.history, [])
        self.assertEqual(board.turn, B)


if __name__ == "__main__":
    unittest.main()
