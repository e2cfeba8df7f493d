#!/usr/bin/env python
"""
Tests for the greedy agent.
"""
import unittest

from threechess_ai.agents.greedy import GreedyAgent
from threechess_ai.core.board import create_board
from threechess_ai.core.constants import Colour
from threechess_ai.core.moves import enumerate_moves
from threechess_ai.core.state import Move

from scripted_state import ScriptedState, leaf, node

G = Colour.GREEN


class TestGreedyAgent(unittest.TestCase):
    """Test case for the greedy agent."""

    def setUp(self):
        self.agent = GreedyAgent()

    def test_name(self):
        self.assertEqual(str(self.agent), "GreedyAgent")
        self.assertEqual(GreedyAgent(name="Greedy Test").name, "Greedy Test")

    def test_single_positive_move(self):
        root = node(children=[
            (1, 2, leaf(G, blue=0)),
            (1, 3, leaf(G, blue=5)),
            (4, 5, leaf(G, blue=-2)),
        ])
        self.assertEqual(self.agent.choose_move(ScriptedState(root)), Move(1, 3))

    def test_ties_go_to_last_candidate(self):
        root = node(children=[
            (1, 2, leaf(G, blue=4)),
            (1, 3, leaf(G, blue=4)),
            (4, 5, leaf(G, blue=1)),
        ])
        self.assertEqual(self.agent.choose_move(ScriptedState(root)), Move(1, 3))

    def test_zero_score_is_accepted(self):
        root = node(children=[(1, 2, leaf(G, blue=-1)), (1, 3, leaf(G, blue=0))])
        self.assertEqual(self.agent.choose_move(ScriptedState(root)), Move(1, 3))

    def test_all_negative_gives_no_move(self):
        root = node(children=[(1, 2, leaf(G, blue=-1)), (1, 3, leaf(G, blue=-7))])
        self.assertIsNone(self.agent.choose_move(ScriptedState(root)))
        self.assertEqual(self.agent.last_stats["candidates"], 2)

    def test_scores_for_side_that_moved(self):
        # GREEN's score is high after 1->2 but only BLUE's score counts
        root = node(children=[(1, 2, leaf(G, blue=1, green=50)), (1, 3, leaf(G, blue=2))])
        self.assertEqual(self.agent.choose_move(ScriptedState(root)), Move(1, 3))

    def test_no_moves(self):
        self.assertIsNone(self.agent.choose_move(ScriptedState(leaf(Colour.BLUE, game_over=True))))

    def test_rejected_candidate_is_skipped(self):
        root = node(children=[(1, 2, leaf(G, blue=9)), (1, 3, leaf(G, blue=2))])
        state = ScriptedState(root, broken_moves=[(1, 2)])
        with self.assertLogs("threechess_ai.core.moves", level="WARNING"):
            self.assertEqual(self.agent.choose_move(state), Move(1, 3))
        self.assertEqual(self.agent.last_stats["candidates"], 1)

    def test_board_deterministic_and_untouched(self):
        board = create_board()
        first = self.agent.choose_move(board)
        second = self.agent.choose_move(board)
        self.assertEqual(first, second)
        self.assertIn(first, enumerate_moves(board))
        self.assertEqual(board.history, [])
        self.assertEqual(board.turn, Colour.BLUE)


if __name__ == "__main__":
    unittest.main()
