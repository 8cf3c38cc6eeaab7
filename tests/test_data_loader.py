import math
import os
import tempfile
import unittest

import pandas as pd

from core.calculator import EvaluationMode
from data.data_loader import load_expressions, evaluate_expressions, save_results


class TestBatchEvaluation(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.csv_path = os.path.join(self.tmpdir.name, "expressions.csv")
        pd.DataFrame({
            "id": ["a", "b", "c", "d"],
            "expression": ["2+3*4", "max(2,3)", "(2+3", "1/0"],
        }).to_csv(self.csv_path, index=False)

    def tearDown(self):
        self.tmpdir.cleanup()

    def test_load_csv(self):
        df = load_expressions(self.csv_path)
        self.assertEqual(df["expression"].tolist(), ["2+3*4", "max(2,3)", "(2+3", "1/0"])

    def test_load_txt(self):
        txt_path = os.path.join(self.tmpdir.name, "expressions.txt")
        with open(txt_path, "w", encoding="utf-8") as f:
            f.write("2+2\n\n3*3\n")
        df = load_expressions(txt_path)
        self.assertEqual(df["expression"].tolist(), ["2+2", "3*3"])

    def test_missing_column(self):
        with self.assertRaises(ValueError):
            load_expressions(self.csv_path, expression_column="formula")

    def test_evaluate_precedence(self):
        evaluated = evaluate_expressions(load_expressions(self.csv_path))
        self.assertEqual(evaluated["result"].iloc[0], 14)
        self.assertEqual(evaluated["result"].iloc[1], 3)
        self.assertTrue(math.isnan(evaluated["result"].iloc[2]))
        self.assertTrue(math.isinf(evaluated["result"].iloc[3]))
        self.assertEqual(evaluated["error"].iloc[0], "")
        self.assertTrue(evaluated["error"].iloc[2].startswith("Error: "))
        self.assertEqual(evaluated["id"].tolist(), ["a", "b", "c", "d"])

    def test_evaluate_strict(self):
        evaluated = evaluate_expressions(load_expressions(self.csv_path), EvaluationMode.STRICT)
        self.assertEqual(evaluated["result"].iloc[0], 20)
        self.assertTrue(math.isnan(evaluated["result"].iloc[1]))

    def test_input_frame_untouched(self):
        df = load_expressions(self.csv_path)
        evaluate_expressions(df)
        self.assertNotIn("result", df.columns)

    def test_expected_column(self):
        df = pd.DataFrame({
            "expression": ["2+3*4", "0.1+0.2", "(2+3", "2*3", "1/0"],
            "expected": ["14", "0.3", "ERROR", "7", "inf"],
        })
        evaluated = evaluate_expressions(df)
        self.assertEqual(evaluated["matches"].tolist(), [True, True, True, False, True])

    def test_no_expected_column(self):
        evaluated = evaluate_expressions(load_expressions(self.csv_path))
        self.assertNotIn("matches", evaluated.columns)

    def test_save_results(self):
        output_path = os.path.join(self.tmpdir.name, "out.csv")
        evaluated = evaluate_expressions(load_expressions(self.csv_path))
        self.assertEqual(save_results(evaluated, output_path), output_path)
        saved = pd.read_csv(output_path)
        self.assertEqual(list(saved.columns), ["id", "expression", "result", "error"])
        self.assertEqual(saved["result"].iloc[0], 14)


if __name__ == '__main__':
    unittest.main()
