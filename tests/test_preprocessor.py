import math
import unittest

from core.preprocessor import preprocess

PI = f" {repr(math.pi)} "
E = f" {repr(math.e)} "


class TestPreprocess(unittest.TestCase):

    def test_pi_symbol_and_word(self):
        self.assertEqual(preprocess("π"), PI)
        self.assertEqual(preprocess("2pi"), "2" + PI)

    def test_glyphs(self):
        self.assertEqual(preprocess("10÷2×3"), "10/2*3")

    def test_bare_e_left_alone_by_default(self):
        self.assertEqual(preprocess("1e3+e"), "1e3+e")

    def test_bare_e_legacy_substitution(self):
        self.assertEqual(preprocess("e", substitute_bare_e=True), E)
        # 旧行为也会改写指数记法
        self.assertEqual(preprocess("1e3", substitute_bare_e=True), "1" + E + "3")

    def test_canonical_text_unchanged(self):
        self.assertEqual(preprocess("2+3*4"), "2+3*4")

    def test_idempotent(self):
        for text in ["2+3*4", "π*2", "10÷5", "sin(pi)", "3×e"]:
            once = preprocess(text)
            self.assertEqual(preprocess(once), once, text)
        once = preprocess("e^2", substitute_bare_e=True)
        self.assertEqual(preprocess(once, substitute_bare_e=True), once)


if __name__ == '__main__':
    unittest.main()
