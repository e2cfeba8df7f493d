#!/usr/bin/env python
"""
Tests for the agent interface, the random baseline and the game driver.
"""
import unittest

from threechess_ai.agents import Agent, GreedyAgent, ParanoidAgent, RandomAgent
from threechess_ai.core.board import create_board
from threechess_ai.core.constants import Colour
from threechess_ai.core.moves import enumerate_moves
from threechess_ai.mcts import MCTSAgent, MCTSConfig

from play_game import play_game
from scripted_state import ScriptedState, leaf


class RecordingAgent(RandomAgent):
    """Random agent that remembers the final position it was shown."""

    def __init__(self, seed):
        super().__init__(name="Recorder", seed=seed)
        self.final_state = None

    def on_game_end(self, final_state):
        self.final_state = final_state


class TestAgentInterface(unittest.TestCase):
    """Test case for the common agent interface."""

    def test_all_agents_are_agents(self):
        for agent in (RandomAgent(), GreedyAgent(), ParanoidAgent(), MCTSAgent()):
            self.assertIsInstance(agent, Agent)
            self.assertEqual(str(agent), agent.name)
            # default game-end hook does nothing
            self.assertIsNone(agent.on_game_end(create_board()))

    def test_move_callback(self):
        agent = RandomAgent(seed=1)
        board = create_board()
        self.assertIn(agent.get_move_callback()(board), enumerate_moves(board))

    def test_cannot_instantiate_base(self):
        with self.assertRaises(TypeError):
            Agent()


class TestRandomAgent(unittest.TestCase):
    """Test case for the random baseline."""

    def test_seeded_choice_is_repeatable(self):
        board = create_board()
        self.assertEqual(RandomAgent(seed=3).choose_move(board), RandomAgent(seed=3).choose_move(board))

    def test_no_moves(self):
        self.assertIsNone(RandomAgent().choose_move(ScriptedState(leaf(Colour.BLUE, game_over=True))))


class TestPlayGame(unittest.TestCase):
    """Test case for the command-line driver's game loop."""

    def test_random_game_runs_to_the_end(self):
        agents = {colour: RecordingAgent(seed=i) for i, colour in enumerate(Colour)}
        board = play_game(agents, max_plies=60)
        self.assertTrue(board.game_over)
        self.assertLessEqual(board.ply, 60)
        for agent in agents.values():
            self.assertIs(agent.final_state, board)
        if board.winner is not None:
            self.assertNotEqual(board.winner, board.loser)

    def test_search_agents_play_legal_moves(self):
        agents = {
            Colour.BLUE: GreedyAgent(),
            Colour.GREEN: ParanoidAgent(depth=0),
            Colour.RED: MCTSAgent(MCTSConfig(time_limit=60.0, iterations=10, seed=2)),
        }
        board = play_game(agents, max_plies=9)
        self.assertTrue(board.game_over)
        self.assertLessEqual(board.ply, 9)
        self.assertEqual(len(board.history), board.ply)


if __name__ == "__main__":
    unittest.main()
