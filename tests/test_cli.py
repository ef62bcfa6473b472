from __future__ import annotations

import io
import os
import sqlite3
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from pgnfacts import cli
from tests.pgn_fixture_helpers import FOOLS_MATE_PGN, SCENARIO_PGN, join_games, write_pgn


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        env = patch.dict(os.environ, {}, clear=True)
        env.start()
        self.addCleanup(env.stop)
        dotenv = patch("pgnfacts.config.load_dotenv")
        dotenv.start()
        self.addCleanup(dotenv.stop)

    def test_main_imports_and_prints_summary(self) -> None:
        input_path = write_pgn(join_games(SCENARIO_PGN, FOOLS_MATE_PGN))
        output_path = input_path.parent / "cli.sqlite"
        stdout = io.StringIO()

        with redirect_stdout(stdout):
            code = cli.main(
                [
                    "--input",
                    str(input_path),
                    "--output",
                    str(output_path),
                    "--encoding-width",
                    "773",
                    "--exclude-header",
                    "Event",
                    "--log-level",
                    "WARNING",
                ]
            )

        self.assertEqual(code, cli.EXIT_OK)
        self.assertIn("imported=2", stdout.getvalue())
        conn = sqlite3.connect(str(output_path))
        try:
            events = conn.execute("SELECT DISTINCT Event FROM game_summary").fetchall()
            lengths = conn.execute("SELECT DISTINCT length(PositionBinary) FROM position_fact").fetchall()
        finally:
            conn.close()
        self.assertEqual(events, [(None,)])
        self.assertEqual(lengths, [(97,)])

    def test_invalid_width_exits_with_config_error(self) -> None:
        code = cli.main(["--encoding-width", "100", "--log-level", "ERROR"])

        self.assertEqual(code, cli.EXIT_CONFIG_ERROR)

    def test_padding_wider_than_width_exits_with_config_error(self) -> None:
        code = cli.main(
            ["--encoding-width", "773", "--castling-padding", "3", "--log-level", "ERROR"]
        )

        self.assertEqual(code, cli.EXIT_CONFIG_ERROR)

    def test_unopenable_store_exits_with_store_error(self) -> None:
        input_path = write_pgn(SCENARIO_PGN)

        with self.assertLogs("pgnfacts", level="ERROR"):
            code = cli.main(["--input", str(input_path), "--output", str(input_path.parent)])

        self.assertEqual(code, cli.EXIT_STORE_ERROR)


if __name__ == "__main__":
    unittest.main()
