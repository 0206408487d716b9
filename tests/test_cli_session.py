import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock
from bowling.core.config import GameConfig
from UI.cli import main, play_session
from UI.console import ScriptedConsole


class TestCliSession(unittest.TestCase):
    """
    End-to-end sessions driven through a scripted console:
      - profiles are collected with validation,
      - a game is played and its final scores printed,
      - one block per game is appended to the score file and echoed on request.
    """

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "scores.txt")
        self.cfg = GameConfig(scores_path=self.path)

    def tearDown(self):
        self._tmp.cleanup()

    def test_perfect_game_saved_and_viewed(self):
        script = ["1", "Ann", "Annie", "30"] + ["10"] * 12 + ["y", "n"]
        console = ScriptedConsole(script)
        players = play_session(console, self.cfg)
        self.assertEqual(console.lines_read, len(script))
        self.assertEqual(players[0].high_score, 300)
        out = console.output
        self.assertIn("Game Over! Final Scores:", [line.strip() for line in out])
        self.assertIn("Ann (Annie) - Age 30: 300", out)
        self.assertIn("STRIKE!", out)
        self.assertIn("\n--- Saved Scores ---", out)
        with open(self.path, encoding="utf-8") as f:
            saved = f.read().splitlines()
        self.assertEqual(len(saved), 3)
        self.assertTrue(saved[0].startswith("Game played on "))
        self.assertEqual(saved[1], "Ann (Annie) - High Score: 300")
        self.assertEqual(saved[2], "-" * 30)
        self.assertIn(saved[1], out)
        # strike frames show no running score; only the finished tenth frame does
        score_lines = [line for line in out if line.startswith("Ann's current score:")]
        self.assertEqual(score_lines, ["Ann's current score: 300"])
        self.assertIn(" | ".join(["X"] * 9 + ["X X X"]), out)

    def test_running_score_and_frame_marks(self):
        script = ["1", "Ann", "Annie", "30", "7", "3", "0", "10", "4", "0"] + ["0"] * 14 + ["n", "n"]
        console = ScriptedConsole(script)
        players = play_session(console, self.cfg)
        # spare(10+0) + spare(10+4) + 4
        self.assertEqual(players[0].high_score, 28)
        out = console.output
        self.assertIn("Ann's current score: 0", out)
        self.assertIn("Ann's current score: 10", out)
        self.assertIn("Ann's current score: 28", out)
        self.assertIn("7 / | - /", out)
        self.assertIn("7 / | - / | 4 -", out)

    def test_invalid_profile_input_reprompts(self):
        script = ["5", "1", "", "Bo", "B", "9", "abc", "20"] + ["0"] * 20 + ["n", "n"]
        console = ScriptedConsole(script)
        players = play_session(console, self.cfg)
        self.assertEqual(players[0].age, 20)
        self.assertEqual(console.output.count("Invalid input. Enter a number between 1 and 4:"), 1)
        self.assertEqual(console.output.count("Invalid input. Enter a number between 10 and 100:"), 2)
        self.assertNotIn("\n--- Saved Scores ---", console.output)

    def test_second_game_keeps_high_score(self):
        game1 = [str(p) for p in [9, 0] * 10]
        game2 = [str(p) for p in [3, 3] * 10]
        script = ["1", "Bo", "B", "20"] + game1 + ["n", "y"] + game2 + ["n", "n"]
        console = ScriptedConsole(script)
        players = play_session(console, self.cfg)
        self.assertEqual(players[0].high_score, 90)
        self.assertIn("Bo (B) - Age 20: 60", console.output)
        with open(self.path, encoding="utf-8") as f:
            saved = f.read().splitlines()
        self.assertEqual(saved.count("Bo (B) - High Score: 90"), 2)

    def test_two_players_alternate(self):
        script = ["2", "Ann", "Annie", "30", "Bo", "B", "20"]
        for _ in range(9):
            script += ["10", "4", "5"]
        # tenth frame: Ann takes both bonus rolls before Bo bowls
        script += ["10", "10", "10", "4", "5", "n", "n"]
        console = ScriptedConsole(script)
        ann, bo = play_session(console, self.cfg)
        self.assertEqual(ann.high_score, 300)
        self.assertEqual(bo.high_score, 90)
        self.assertIn("\nFrame 1: Bo's turn (B)", console.output)
        self.assertIn("Enter pins knocked down for bonus roll:", console.output)


class TestMainEntryPoint(unittest.TestCase):
    """
    `main` ends the session with a goodbye line when input runs out or the user presses Ctrl-C.
    """

    def _run_main(self, error):
        out = io.StringIO()
        with mock.patch("builtins.input", side_effect=error), contextlib.redirect_stdout(out):
            main()  # must not raise
        return out.getvalue()

    def test_end_of_input(self):
        text = self._run_main(EOFError)
        self.assertIn("Welcome to the Ultimate Bowling Game!", text)
        self.assertTrue(text.rstrip().endswith("Exiting bowling."))

    def test_keyboard_interrupt(self):
        text = self._run_main(KeyboardInterrupt)
        self.assertIn("Exiting bowling.", text)

    def test_end_of_input_mid_game(self):
        answers = iter(["1", "Ann", "Annie", "30", "10", "3"])

        def scripted_input():
            try:
                return next(answers)
            except StopIteration:
                raise EOFError

        out = io.StringIO()
        with mock.patch("builtins.input", side_effect=scripted_input), contextlib.redirect_stdout(out):
            main()
        text = out.getvalue()
        self.assertIn("STRIKE!", text)
        self.assertTrue(text.rstrip().endswith("Exiting bowling."))


if __name__ == '__main__':
    unittest.main()
