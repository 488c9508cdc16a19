import unittest

from themetokens.conversion.units import (
    clean_number,
    format_multiplier,
    parse_float,
    parse_int_prefix,
    parse_rem,
    rem_to_px,
    round_to,
)


class TestUnits(unittest.TestCase):
    def test_parse_rem_accepts_bare_rem_only(self):
        self.assertEqual(parse_rem("0.25rem"), 0.25)
        self.assertEqual(parse_rem(" 40rem "), 40.0)
        self.assertEqual(parse_rem(".5rem"), 0.5)
        self.assertIsNone(parse_rem("9999px"))
        self.assertIsNone(parse_rem("1em"))
        self.assertIsNone(parse_rem("calc(1rem * 2)"))
        self.assertIsNone(parse_rem("rem"))

    def test_rem_to_px_uses_16px_root(self):
        self.assertEqual(rem_to_px(0.25), 4)
        self.assertEqual(rem_to_px(0.375), 6)
        self.assertEqual(rem_to_px(40), 640)

    def test_round_to_is_half_up(self):
        self.assertEqual(round_to(1 / 0.75), 1.333)
        self.assertEqual(round_to(1.25 / 0.875), 1.429)
        self.assertEqual(round_to(0.0005), 0.001)

    def test_parse_float_reads_leading_number(self):
        self.assertEqual(parse_float("1.5"), 1.5)
        self.assertEqual(parse_float(" 0.875 "), 0.875)
        self.assertEqual(parse_float("2rem"), 2.0)
        self.assertIsNone(parse_float("normal"))
        self.assertIsNone(parse_float(""))

    def test_parse_int_prefix(self):
        self.assertEqual(parse_int_prefix("700"), 700)
        self.assertEqual(parse_int_prefix("600abc"), 600)
        self.assertIsNone(parse_int_prefix("bold"))

    def test_clean_number_and_multiplier_keys(self):
        self.assertIsInstance(clean_number(4.0), int)
        self.assertEqual(clean_number(1.333), 1.333)
        self.assertEqual(format_multiplier(0.5), "0.5")
        self.assertEqual(format_multiplier(96), "96")
        self.assertEqual(format_multiplier(0), "0")


if __name__ == "__main__":
    unittest.main()
