import math
import unittest

from ratio import (
    Rational,
    Rounding,
    get_default_rounding,
    reset_default_rounding,
    set_default_rounding,
)
from ratio.rounding import round_quotient

R = Rounding


class RoundingTests(unittest.TestCase):
    def assertRoundings(self, value, default, expected):
        self.assertEqual(value.rounded(), default)
        for mode, result in expected.items():
            with self.subTest(value=str(value), mode=mode.name):
                self.assertEqual(value.rounded(mode), result)

    def test_ten_thirds(self):
        a = Rational(10, 3)
        self.assertRoundings(a, 3, {
            R.UP: 4,
            R.DOWN: 3,
            R.TOWARD_ZERO: 3,
            R.AWAY_FROM_ZERO: 4,
            R.TO_NEAREST_OR_EVEN: 3,
            R.TO_NEAREST_OR_AWAY_FROM_ZERO: 3,
            R.TO_NEAREST_OR_TOWARD_ZERO: 3,
        })
        b = -a
        self.assertEqual(b, Rational(-10, 3))
        self.assertRoundings(b, -3, {
            R.UP: -3,
            R.DOWN: -4,
            R.TOWARD_ZERO: -3,
            R.AWAY_FROM_ZERO: -4,
            R.TO_NEAREST_OR_EVEN: -3,
            R.TO_NEAREST_OR_AWAY_FROM_ZERO: -3,
            R.TO_NEAREST_OR_TOWARD_ZERO: -3,
        })

    def test_five_halves(self):
        c = Rational(5, 2)
        self.assertRoundings(c, 3, {
            R.UP: 3,
            R.DOWN: 2,
            R.TOWARD_ZERO: 2,
            R.AWAY_FROM_ZERO: 3,
            R.TO_NEAREST_OR_EVEN: 2,
            R.TO_NEAREST_OR_AWAY_FROM_ZERO: 3,
            R.TO_NEAREST_OR_TOWARD_ZERO: 2,
        })
        d = -c
        self.assertEqual(d, Rational(-5, 2))
        self.assertRoundings(d, -3, {
            R.UP: -2,
            R.DOWN: -3,
            R.TOWARD_ZERO: -2,
            R.AWAY_FROM_ZERO: -3,
            R.TO_NEAREST_OR_EVEN: -2,
            R.TO_NEAREST_OR_AWAY_FROM_ZERO: -3,
            R.TO_NEAREST_OR_TOWARD_ZERO: -2,
        })

    def test_one_ninth(self):
        self.assertRoundings(Rational(1, 9), 0, {
            R.UP: 1,
            R.DOWN: 0,
            R.TOWARD_ZERO: 0,
            R.AWAY_FROM_ZERO: 1,
            R.TO_NEAREST_OR_EVEN: 0,
            R.TO_NEAREST_OR_AWAY_FROM_ZERO: 0,
            R.TO_NEAREST_OR_TOWARD_ZERO: 0,
        })

    def test_ties_to_even_goes_up_from_odd(self):
        self.assertEqual(Rational(7, 2).rounded(R.TO_NEAREST_OR_EVEN), 4)
        self.assertEqual(Rational(-7, 2).rounded(R.TO_NEAREST_OR_EVEN), -4)

    def test_integers_are_unchanged(self):
        for mode in Rounding:
            self.assertEqual(Rational(-6, 2).rounded(mode), -3)

    def test_default_mode_is_context_local(self):
        self.assertIs(get_default_rounding(), R.TO_NEAREST_OR_AWAY_FROM_ZERO)
        token = set_default_rounding(R.TO_NEAREST_OR_EVEN)
        try:
            self.assertEqual(Rational(5, 2).rounded(), 2)
        finally:
            reset_default_rounding(token)
        self.assertEqual(Rational(5, 2).rounded(), 3)

    def test_illegal_modes(self):
        with self.assertRaises(TypeError):
            set_default_rounding("up")
        with self.assertRaises(TypeError):
            Rational(1, 3).rounded("up")

    def test_special_values_cannot_be_rounded(self):
        with self.assertRaises(ValueError):
            Rational.nan.rounded()
        with self.assertRaises(OverflowError):
            Rational.infinity.rounded(R.UP)
        with self.assertRaises(OverflowError):
            (-Rational.infinity).rounded()

    def test_math_protocol(self):
        value = Rational(-7, 3)
        self.assertEqual(math.floor(value), -3)
        self.assertEqual(math.ceil(value), -2)
        self.assertEqual(math.trunc(value), -2)
        self.assertEqual(round(Rational(5, 2)), 2)
        self.assertEqual(round(Rational(7, 2)), 4)
        self.assertEqual(round(Rational(-5, 2)), -2)

    def test_round_to_digits(self):
        self.assertEqual(round(Rational(1234, 1000), 2), Rational(123, 100))
        self.assertEqual(round(Rational(1250), -2), Rational(1200))
        self.assertEqual(round(Rational(1350), -2), Rational(1400))
        self.assertEqual(round(Rational(1, 3), 0), Rational(0))
        self.assertIs(round(Rational.infinity, 2), Rational.infinity)

    def test_round_quotient(self):
        self.assertEqual(round_quotient(-1, 3, R.DOWN), -1)
        self.assertEqual(round_quotient(-1, 3, R.UP), 0)
        self.assertEqual(round_quotient(3, 2, R.TO_NEAREST_OR_EVEN), 2)
        self.assertEqual(round_quotient(1, 2, R.TO_NEAREST_OR_EVEN), 0)
        self.assertEqual(round_quotient(0, 5, R.AWAY_FROM_ZERO), 0)

    def test_member_docs(self):
        self.assertEqual(R.UP.__doc__, "Round towards +Infinity.")


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
