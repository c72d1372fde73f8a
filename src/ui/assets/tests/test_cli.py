import unittest

from click.testing import CliRunner

from src.main import main


class TestCli(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_auto_text_game_runs_to_a_stop(self):
        result = self.runner.invoke(main, ["--text", "--auto", "--seed", "3", "--max-rounds", "50"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("Round", result.output)

    def test_seed_from_environment_is_reproducible(self):
        args = ["--text", "--auto", "--max-rounds", "30"]
        a = self.runner.invoke(main, args, env={"WAR_SEED": "17"})
        b = self.runner.invoke(main, args, env={"WAR_SEED": "17"})
        self.assertEqual(a.exit_code, 0, a.output)
        self.assertEqual(a.output, b.output)

    def test_interactive_text_game(self):
        result = self.runner.invoke(main, ["--text", "--seed", "1"], input="d\nd\nq\n")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.count("You played:"), 2)

    def test_auto_needs_text_mode(self):
        result = self.runner.invoke(main, ["--auto"])
        self.assertEqual(result.exit_code, 2)
        self.assertIn("--auto needs --text", result.output)

    def test_round_cap_must_be_positive(self):
        result = self.runner.invoke(main, ["--text", "--auto", "--max-rounds", "0"])
        self.assertEqual(result.exit_code, 2)


if __name__ == "__main__":
    unittest.main()
