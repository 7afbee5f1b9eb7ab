import io
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

from missing_value_finder import solve_missing


def run_cli(stdin_text: str, argv: list = None):
    out = io.StringIO()
    err = io.StringIO()
    code = 0

    with mock.patch("sys.stdin", io.StringIO(stdin_text)), redirect_stdout(out), redirect_stderr(err):
        try:
            solve_missing.main(argv or [])
        except SystemExit as e:
            code = e.code

    return code, out.getvalue(), err.getvalue()


class SolveMissingTestCase(unittest.TestCase):

    def tearDown(self):
        solve_missing.verbose = False

    def test_answers(self):
        gold = {"4\n1 2\n": "1\n",
                "5\n1 2 3\n": "1\n",
                "2\n": "1\n",
                "8 1 3 6 4 1 2": "1\n"}

        for stdin_text, expected in gold.items():
            code, out, err = run_cli(stdin_text)
            self.assertEqual(code, 0)
            self.assertEqual(out, expected)
            self.assertEqual(err, "")

    def test_strategies(self):
        for strategy in ("auto", "recursive", "iterative"):
            code, out, _ = run_cli("5\n3 1 2\n", ["-s", strategy])
            self.assertEqual(code, 0)
            self.assertEqual(out, "1\n")

    def test_verbose(self):
        code, out, err = run_cli("4\n1 2\n", ["-v", "-s", "iterative"])
        self.assertEqual(code, 0)
        self.assertEqual(out, "1\n")
        self.assertIn("n=4 m=2 strategy=iterative", err)
        self.assertIn("calls=9 probes=2 max_depth=2", err)

    def test_bad_input(self):
        for stdin_text in ["", "4 1", "abc", "1"]:
            code, out, err = run_cli(stdin_text)
            self.assertEqual(code, 1)
            self.assertEqual(out, "")
            self.assertTrue(err.startswith("ERROR"))

    def test_missing_file(self):
        code, out, err = run_cli("", ["-f", "/does/not/exist.txt"])
        self.assertEqual(code, 1)
        self.assertIn("does not exist", err)

    def test_directory_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            code, out, err = run_cli("", ["-f", tmp])

        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertTrue(err.startswith("ERROR"))
        self.assertIn("Could not read", err)

    def test_run(self):
        with mock.patch("sys.stdin", io.StringIO("6\n4 3 2 1\n")):
            self.assertEqual(solve_missing.run(), 1)


if __name__ == '__main__':
    unittest.main()
