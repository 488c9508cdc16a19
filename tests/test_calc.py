import unittest

from themetokens.conversion.calc import evaluate_calc
from themetokens.conversion.units import round_to


class TestCalc(unittest.TestCase):
    def test_division(self):
        self.assertEqual(round_to(evaluate_calc("calc(1 / 0.75)")), 1.333)
        self.assertEqual(round_to(evaluate_calc("calc(1.25 / 0.875)")), 1.429)

    def test_multiplication(self):
        self.assertEqual(evaluate_calc("calc(2 * 0.75)"), 1.5)

    def test_single_number_inside_calc(self):
        self.assertEqual(evaluate_calc("calc( 1.5 )"), 1.5)

    def test_plain_value(self):
        self.assertEqual(evaluate_calc("1.625"), 1.625)
        self.assertEqual(evaluate_calc("1"), 1.0)

    def test_unevaluable(self):
        self.assertIsNone(evaluate_calc("normal"))
        self.assertIsNone(evaluate_calc("calc(a / 2)"))
        self.assertIsNone(evaluate_calc("calc(1 / 0)"))
        self.assertIsNone(evaluate_calc("calc(var(--x) * 2)"))


if __name__ == "__main__":
    unittest.main()
