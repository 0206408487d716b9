import datetime
import os
import tempfile
import unittest
from bowling.core.player import Player
from bowling.persistence import score_log


class TestScoreLog(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self._tmp.name, "scores.txt")
        self.players = [Player("Ann", "Annie", 30, high_score=120), Player("Bo", "B", 20)]
        self.when = datetime.datetime(2024, 5, 1, 18, 30, 0)

    def tearDown(self):
        self._tmp.cleanup()

    def test_format_block(self):
        lines = score_log.format_game_record(self.players, self.when)
        self.assertEqual(lines, [
            "Game played on 2024-05-01 18:30:00",
            "Ann (Annie) - High Score: 120",
            "Bo (B) - High Score: 0",
            "-" * 30,
        ])

    def test_append_only(self):
        score_log.append_game_record(self.players, self.path, played_at=self.when)
        score_log.append_game_record(self.players[:1], self.path, played_at=self.when)
        lines = list(score_log.read_records(self.path))
        self.assertEqual(len(lines), 4 + 3)
        self.assertEqual(lines[4], "Game played on 2024-05-01 18:30:00")
        self.assertEqual(lines[-1], score_log.SEPARATOR)

    def test_reading_missing_file_propagates(self):
        with self.assertRaises(FileNotFoundError):
            list(score_log.read_records(self.path))


if __name__ == '__main__':
    unittest.main()
