"""
Smoke tests for the demonstration driver.
"""

import os
import io
import tempfile
import unittest
from contextlib import redirect_stdout

from indexed_heap.Demo.demo import HeapDemo, main


class TestHeapDemo(unittest.TestCase):
    """
    Runs the driver end to end and checks the printed report
    """
    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out):
            main(argv)
        return out.getvalue()


    def test_01_default_run(self):
        output = self._run([])

        self.assertIn("Sort array using heap_sort(): 3 5 6 9 15 19 23", output)
        self.assertIn("Build heap: 23, 9, 19, 5, 6, 15, 3", output)
        self.assertIn("Delete top 3 elements: [23, 19, 15]", output)
        self.assertIn("Top data: More data", output)
        self.assertIn("Sorted: True", output)
        self.assertNotIn("[heap_", output)
        self.assertNotIn("[invalid_", output)

    def test_02_errors_are_reported(self):
        # a single key leaves no index 4 / 3 / 2 to mutate
        output = self._run(["--keys", "1", "--num_random", "0"])

        self.assertIn("Insert 30: [heap_full]", output)
        self.assertIn("Increase key at index 4 by 20: [invalid_index]", output)
        self.assertIn("Delete index 2: [invalid_index]", output)

    def test_03_log_path(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            log_path = os.path.join(tmp_dir, "runs", "demo.txt")
            output = self._run(["--num_random", "5", "--seed", "7", "--log_path", log_path])

            self.assertTrue(os.path.isfile(log_path))
            with open(log_path, "r", encoding="utf-8") as f:
                logged = f.read()

        self.assertIn("[random_sort_run]", logged)
        self.assertEqual(logged, output)

    def test_04_config(self):
        demo = HeapDemo(["--keys", "4", "2", "--seed", "3"])
        self.assertEqual(demo.args.keys, [4, 2])
        self.assertEqual(demo.args.seed, 3)
        self.assertIsNone(demo.args.log_path)

        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit):
            HeapDemo(["--num_random", "-1"])


if __name__ == "__main__":
    unittest.main()
