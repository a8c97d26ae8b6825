import contextlib
import io
import textwrap
import unittest

import sight_main
from sight_dsl import parse_point, run_script


def run_captured(script_text: str, **kwargs):
    buf = io.StringIO()
    with contextlib.redirect_stdout(buf):
        output = run_script(script_text, **kwargs)
    return output, buf.getvalue().strip()


class HeadlessScriptOutputsTest(unittest.TestCase):
    def test_script_prints_stats_and_map(self):
        output, text = run_captured("wait 2", seed=1)
        lines = text.splitlines()
        self.assertEqual(lines[0], "Script complete")
        self.assertEqual(lines[1:5], output.stats.lines())
        self.assertTrue(lines[1].endswith(" walls"))
        # header row plus one row per 32px cell of a 1536x768 map
        grid = lines[5:]
        self.assertEqual(len(grid), 1 + 24)
        self.assertEqual(len(grid[1]), 3 + 48)
        self.assertIn("@", text)

    def test_same_seed_same_output(self):
        script = textwrap.dedent(
            """
            # walk up and to the right while looking at a corner
            aim 1400,100
            move wd 5; wait 3
            """
        )
        _, first = run_captured(script, seed=8)
        _, second = run_captured(script, seed=8)
        self.assertEqual(first, second)

    def test_move_carries_the_viewer(self):
        still, _ = run_captured("pos 400,300", seed=2)
        moved, _ = run_captured("pos 400,300; move d 10", seed=2)
        self.assertGreater(moved.fan[0][0], still.fan[0][0] + 10.0)

    def test_seed_command_regenerates(self):
        _, first = run_captured("seed 5", seed=1)
        _, second = run_captured("wait 0", seed=5)
        self.assertEqual(first, second)

    def test_small_map_smaller_grid(self):
        _, text = run_captured("wait", seed=3, width=320, height=160, cell=32)
        grid = text.splitlines()[5:]
        self.assertEqual(len(grid), 1 + 5)
        self.assertEqual(len(grid[1]), 3 + 10)
        # no walls on a map this small, so the whole cone is visible
        self.assertIn("*", text)

    def test_bad_commands_raise(self):
        for script in ("jump 3", "move", "move xq 2", "pos 12", "aim a,b", "wait -1", "seed x", "move d many"):
            with self.subTest(script=script):
                with self.assertRaises(ValueError):
                    run_captured(script, seed=1)

    def test_parse_point_accepts_both_separators(self):
        self.assertEqual(parse_point("3,4"), (3.0, 4.0))
        self.assertEqual(parse_point("3x4"), (3.0, 4.0))


class HeadlessRunTest(unittest.TestCase):
    def test_run_headless_prints_summary(self):
        buf = io.StringIO()
        with contextlib.redirect_stdout(buf):
            output = sight_main.run_headless(2, seed=6)
        text = buf.getvalue()
        self.assertTrue(text.startswith("Simulated 2 frames\n"))
        self.assertIn(f"{output.stats.rays} rays", text)
        self.assertIn(" rooms, ", text)
