import tempfile
import unittest
from pathlib import Path

import pandas as pd
from typer.testing import CliRunner

from coinpi.ui.cli import app


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    def test_run_prints_summary(self) -> None:
        result = self.runner.invoke(
            app, ["run", "--n-sims", "400", "--chunk-size", "100", "--seed", "2026", "--no-progress"]
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("pi_hat", result.output)
        self.assertIn("2026", result.output)
        self.assertIn("Checks:", result.output)

    def test_invalid_count_exits_with_usage_code(self) -> None:
        result = self.runner.invoke(app, ["run", "--n-sims", "0", "--no-progress"])
        self.assertEqual(result.exit_code, 2)

    def test_ratios_written_to_csv(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "ratios.csv"
            result = self.runner.invoke(
                app,
                [
                    "run",
                    "--n-sims",
                    "120",
                    "--chunk-size",
                    "30",
                    "--seed",
                    "11",
                    "--no-progress",
                    "--ratios-out",
                    str(target),
                ],
            )
            self.assertIn(result.exit_code, (0, 1), result.output)
            frame = pd.read_csv(target)
            self.assertEqual(list(frame.columns), ["trial", "ratio"])
            self.assertEqual(len(frame), 120)
            self.assertTrue((frame["ratio"] > 0.5).all())

    def test_negative_seed_accepted(self) -> None:
        result = self.runner.invoke(
            app, ["run", "--n-sims", "60", "--chunk-size", "20", "--seed", "-3", "--no-progress"]
        )
        self.assertNotEqual(result.exit_code, 2, result.output)
        self.assertIn("-3", result.output)

    def test_seed_read_from_environment(self) -> None:
        result = self.runner.invoke(
            app,
            ["run", "--n-sims", "50", "--chunk-size", "25", "--no-progress"],
            env={"COINPI_SEED": "77"},
        )
        self.assertIn("77", result.output)


if __name__ == "__main__":
    unittest.main()
