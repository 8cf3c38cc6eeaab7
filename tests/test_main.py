import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

import pandas as pd

from config.config import validate_config
from main import build_parser, main


def run_cli(*argv):
    buffer = io.StringIO()
    with redirect_stdout(buffer):
        code = main(build_parser().parse_args(list(argv)))
    return code, buffer.getvalue().splitlines()


class TestCommandLine(unittest.TestCase):

    def test_single_expression(self):
        code, lines = run_cli("2+3*4")
        self.assertEqual(code, 0)
        self.assertEqual(lines, ["14"])

    def test_several_expressions(self):
        code, lines = run_cli("2^3^2", "(2+3)*4")
        self.assertEqual(lines, ["512", "20"])

    def test_strict_mode(self):
        code, lines = run_cli("--strict", "2+3*4")
        self.assertEqual(lines, ["20"])
        code, lines = run_cli("--strict", "2+")
        self.assertEqual(code, 1)
        self.assertEqual(lines, ["ERROR"])

    def test_error_message(self):
        code, lines = run_cli("(2+3")
        self.assertEqual(code, 1)
        self.assertTrue(lines[0].startswith("Error: "))

    def test_show_stages(self):
        code, lines = run_cli("--show_tokens", "--show_postfix", "2+3*4")
        self.assertEqual(lines, [
            "tokens:  2.0 + 3.0 * 4.0",
            "postfix: 2.0 3.0 4.0 * +",
            "14",
        ])

    def test_show_separators(self):
        code, lines = run_cli("--show_tokens", "--show_separators", "max(2, 3)")
        self.assertEqual(lines[0], "tokens:  max ( 2.0 ',' ' ' 3.0 )")
        self.assertEqual(lines[1], "3")

    def test_show_postfix_negative_operand(self):
        code, lines = run_cli("--show_postfix", "3*-2")
        self.assertEqual(lines, ["postfix: 3.0 -2.0 *", "-6"])

    def test_show_stages_on_bad_input(self):
        code, lines = run_cli("--show_postfix", "2+3)")
        self.assertEqual(code, 1)
        self.assertTrue(lines[0].startswith("stages:"))

    def test_no_expressions(self):
        code, lines = run_cli()
        self.assertEqual(code, 2)

    def test_batch(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_path = os.path.join(tmpdir, "in.csv")
            out_path = os.path.join(tmpdir, "out.csv")
            pd.DataFrame({"expression": ["1+1", "2*3"]}).to_csv(csv_path, index=False)
            code, _ = run_cli("--batch_path", csv_path, "--output_path", out_path)
            self.assertEqual(code, 0)
            self.assertEqual(pd.read_csv(out_path)["result"].tolist(), [2.0, 6.0])

    def test_batch_expected_mismatch(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_path = os.path.join(tmpdir, "in.csv")
            out_path = os.path.join(tmpdir, "out.csv")
            pd.DataFrame({"expression": ["1+1", "2*3", "(1"],
                          "expected": ["2", "6", "ERROR"]}).to_csv(csv_path, index=False)
            code, _ = run_cli("--batch_path", csv_path, "--output_path", out_path)
            self.assertEqual(code, 0)
            pd.DataFrame({"expression": ["1+1"], "expected": ["3"]}).to_csv(csv_path, index=False)
            code, _ = run_cli("--batch_path", csv_path, "--output_path", out_path)
            self.assertEqual(code, 1)


class TestConfig(unittest.TestCase):

    def test_validate_config(self):
        with redirect_stdout(io.StringIO()):
            validate_config()


if __name__ == '__main__':
    unittest.main()
