import unittest
from fractions import Fraction

from bigratio import (
    MINUS_ONE,
    ONE,
    ONE_HALF,
    TWO,
    ZERO,
    DivisionByZeroError,
    InvalidOperationError,
    Rational,
)


def sample_values():
    return [
        ZERO,
        ONE,
        MINUS_ONE,
        TWO,
        ONE_HALF,
        Rational(-1, 2),
        Rational(3, 7),
        Rational(-4, 3),
        Rational(17, 9),
        Rational(-41, 152),
        Rational(10**20 + 1, 3),
        Rational(12),
    ]


class AdditionTests(unittest.TestCase):
    def test_add(self):
        self.assertEqual(Rational(3, 7).add(Rational(4, 3)), Rational(37, 21))
        self.assertIs(Rational(-4, 3).add(Rational(4, 3)), ZERO)
        self.assertEqual(ZERO.add(Rational(4, 3)), Rational(4, 3))
        self.assertEqual(Rational(4, 3).add(ZERO), Rational(4, 3))
        self.assertEqual(Rational(4).add(Rational(5)), Rational(9))
        self.assertEqual(Rational(4).add(Rational(5, 3)), Rational(17, 3))
        self.assertEqual(Rational(5, 3).add(Rational(4)), Rational(17, 3))
        self.assertIs(ONE_HALF.add(ONE_HALF), ONE)

    def test_subtract(self):
        self.assertEqual(Rational(3, 7).subtract(Rational(4, 3)), Rational(-19, 21))
        self.assertEqual(Rational(3, 7).subtract(ZERO), Rational(3, 7))
        self.assertIs(Rational(4, 3).subtract(Rational(4, 3)), ZERO)
        self.assertIs(ZERO.subtract(ZERO), ZERO)
        self.assertEqual(ZERO.subtract(Rational(3, 4)), Rational(-3, 4))
        self.assertEqual(Rational(5).subtract(Rational(7)), Rational(-2))
        self.assertEqual(Rational(5).subtract(Rational(7, 2)), Rational(3, 2))
        self.assertEqual(Rational(3, 5).subtract(Rational(-1)), Rational(8, 5))


class MultiplicationTests(unittest.TestCase):
    def test_multiply(self):
        self.assertEqual(Rational(3, 4).multiply(Rational(3, 4)), Rational(9, 16))
        self.assertIs(Rational(15, 8).multiply(Rational(8, 15)), ONE)
        self.assertEqual(Rational(15, 7).multiply(Rational(8, 15)), Rational(8, 7))
        self.assertEqual(Rational(8, 15).multiply(Rational(15, 7)), Rational(8, 7))
        self.assertIs(ZERO.multiply(Rational(8, 15)), ZERO)
        self.assertIs(Rational(8, 15).multiply(ZERO), ZERO)
        self.assertEqual(ONE.multiply(Rational(17, 4)), Rational(17, 4))
        self.assertEqual(Rational(17, 4).multiply(ONE), Rational(17, 4))
        self.assertEqual(Rational(3, 5).multiply(TWO), Rational(6, 5))
        self.assertEqual(TWO.multiply(Rational(3, 4)), Rational(3, 2))
        self.assertIs(Rational(-2, 3).multiply(Rational(-3, 2)), ONE)

    def test_divide(self):
        with self.assertRaises(DivisionByZeroError):
            ZERO.divide(ZERO)
        with self.assertRaises(ZeroDivisionError):
            Rational(4).divide(ZERO)

        self.assertIs(ZERO.divide(Rational(5, 3)), ZERO)
        self.assertEqual(Rational(19, 4).divide(ONE), Rational(19, 4))
        self.assertIs(Rational(5, 3).divide(Rational(5, 3)), ONE)
        self.assertEqual(Rational(19, 4).divide(Rational(13, 3)), Rational(57, 52))
        self.assertEqual(Rational(3, 5).divide(TWO), Rational(3, 10))
        self.assertEqual(Rational(-3, 4).divide(Rational(-1, 2)), Rational(3, 2))
        self.assertEqual(Rational(6, 35).divide(Rational(-4, 21)), Rational(-9, 10))

    def test_square_redouble_halve(self):
        self.assertIs(ZERO.square(), ZERO)
        self.assertIs(ONE.square(), ONE)
        self.assertIs(MINUS_ONE.square(), ONE)
        self.assertEqual(TWO.square(), Rational(4))
        self.assertEqual(Rational(13, 6).square(), Rational(169, 36))
        self.assertEqual(Rational(-13, 6).square(), Rational(169, 36))

        redoubled = {
            (0, 1): (0, 1), (1, 2): (1, 1), (-1, 2): (-1, 1), (1, 1): (2, 1),
            (-1, 1): (-2, 1), (3, 2): (3, 1), (-3, 2): (-3, 1), (15, 19): (30, 19),
            (-15, 19): (-30, 19), (15, 18): (15, 9), (-15, 18): (-15, 9),
        }
        for (n, d), expected in redoubled.items():
            self.assertEqual(Rational(n, d).redouble(), Rational(*expected))

        halved = {
            (0, 1): (0, 1), (2, 1): (1, 1), (-2, 1): (-1, 1), (1, 2): (1, 4),
            (-1, 2): (-1, 4), (1, 1): (1, 2), (-1, 1): (-1, 2), (3, 2): (3, 4),
            (-3, 2): (-3, 4), (15, 19): (15, 38), (-15, 19): (-15, 38),
            (14, 19): (7, 19), (-14, 19): (-7, 19),
        }
        for (n, d), expected in halved.items():
            self.assertEqual(Rational(n, d).halve(), Rational(*expected))

    def test_reciprocal(self):
        with self.assertRaises(DivisionByZeroError):
            ZERO.reciprocal()
        self.assertIs(ONE.reciprocal(), ONE)
        self.assertIs(TWO.reciprocal(), ONE_HALF)
        self.assertEqual(Rational.of(1, 2).reciprocal(), Rational.of(2, 1))
        self.assertEqual(Rational(-2).reciprocal(), Rational(1, -2))
        self.assertEqual(Rational(5, 13).reciprocal(), Rational(13, 5))
        reciprocal = Rational(-5, 13).reciprocal()
        self.assertEqual(reciprocal.numerator, -13)
        self.assertEqual(reciprocal.denominator, 5)

    def test_negate_and_abs(self):
        self.assertIs(ZERO.negate(), ZERO)
        self.assertIs(MINUS_ONE.negate(), ONE)
        self.assertEqual(Rational(-7, 17).negate(), Rational(7, 17))
        self.assertEqual(Rational(3, 5).abs(), Rational(3, 5))
        self.assertEqual(Rational(-733, 166).abs(), Rational(733, 166))
        self.assertIs(ZERO.abs(), ZERO)

    def test_min_max(self):
        self.assertEqual(Rational(3, 5).min(Rational(2, 5)), Rational(2, 5))
        self.assertEqual(Rational(-3, 5).min(Rational(-2, 5)), Rational(-3, 5))
        self.assertEqual(Rational(-3, 5).min(Rational(-19, 12)), Rational(-19, 12))
        self.assertEqual(Rational(3, 5).max(Rational(19, 12)), Rational(19, 12))
        self.assertEqual(Rational(-3, 5).max(Rational(-19, 12)), Rational(-3, 5))
        self.assertEqual(Rational(3, 5).max(Rational(3, 5)), Rational(3, 5))


class IntegerDivisionTests(unittest.TestCase):
    def test_divide_integer(self):
        with self.assertRaises(DivisionByZeroError):
            ZERO.divide_integer(ZERO)
        with self.assertRaises(DivisionByZeroError):
            Rational(4).divide_integer(ZERO)

        self.assertEqual(ZERO.divide_integer(Rational(2, 3)), 0)
        self.assertEqual(Rational(2, 3).divide_integer(Rational(2, 3)), 1)
        self.assertEqual(Rational(4, 5).divide_integer(Rational(2, 3)), 1)
        self.assertEqual(Rational(972, 13).divide_integer(Rational(412, 389)), 70)
        self.assertEqual(Rational(27, 14).divide_integer(Rational(37, 62)), 3)
        self.assertEqual(Rational(-27, 14).divide_integer(Rational(-37, 62)), 3)
        self.assertEqual(Rational(49, 6).divide_integer(Rational(-13, 22)), -13)
        self.assertEqual(Rational(-49, 6).divide_integer(Rational(13, 22)), -13)
        self.assertEqual(Rational(16).divide_integer(ONE), 16)
        self.assertEqual(Rational(16).divide_integer(Rational(3)), 5)
        self.assertEqual(Rational(-16).divide_integer(Rational(3)), -5)
        self.assertEqual(Rational(16).divide_integer(Rational(3, 5)), 26)
        self.assertEqual(Rational(28, 5).divide_integer(TWO), 2)

    def test_divide_integer_and_remainder(self):
        with self.assertRaises(DivisionByZeroError):
            Rational(4).divide_integer_and_remainder(ZERO)

        self.assertEqual(ZERO.divide_integer_and_remainder(Rational(2, 3)), (0, ZERO))
        self.assertEqual(Rational(2, 3).divide_integer_and_remainder(Rational(2, 3)), (1, ZERO))
        self.assertEqual(
            Rational(4, 5).divide_integer_and_remainder(Rational(2, 3)), (1, Rational(2, 15))
        )
        self.assertEqual(
            Rational(49, 6).divide_integer_and_remainder(Rational(-13, 22)), (-13, Rational(16, 33))
        )
        self.assertEqual(
            Rational(-49, 6).divide_integer_and_remainder(Rational(13, 22)), (-13, Rational(-16, 33))
        )
        self.assertEqual(Rational(16).divide_integer_and_remainder(Rational(3)), (5, ONE))
        self.assertEqual(Rational(-16).divide_integer_and_remainder(Rational(3)), (-5, MINUS_ONE))
        self.assertEqual(Rational(16).divide_integer_and_remainder(Rational(3, 5)), (26, Rational(2, 5)))
        self.assertEqual(Rational(28, 5).divide_integer_and_remainder(TWO), (2, Rational(8, 5)))
        self.assertEqual(Rational(1, 3).divide_integer_and_remainder(TWO), (0, Rational(1, 3)))

    def test_quotient_and_remainder_recombine(self):
        for a in sample_values():
            for b in sample_values():
                if b.is_zero():
                    continue
                quotient, remainder = a.divide_integer_and_remainder(b)
                self.assertEqual(quotient, a.divide_integer(b))
                self.assertEqual(b.multiply(Rational(quotient)).add(remainder), a)
                self.assertLess(remainder.abs(), b.abs())
                self.assertIn(remainder.signum, (0, a.signum))


class ModTests(unittest.TestCase):
    def test_mod_mismatched_signs(self):
        self.assertEqual(Rational.of(-19, 7).mod(Rational.of(5, 29)), Rational.of(9, 203))
        self.assertEqual(Rational(19, 7).mod(Rational(-5, 29)), Rational(-9, 203))

    def test_mod_matching_signs(self):
        self.assertEqual(Rational(19, 7).mod(Rational(5, 29)), Rational(26, 203))
        self.assertEqual(Rational(-19, 7).mod(Rational(-5, 29)), Rational(-26, 203))

    def test_mod_integers(self):
        self.assertEqual(Rational(7).mod(Rational(3)), ONE)
        self.assertEqual(Rational(-7).mod(Rational(3)), TWO)
        self.assertEqual(Rational(7).mod(Rational(-3)), Rational(-2))
        self.assertIs(Rational(-3).mod(Rational(3, 2)), ZERO)
        self.assertIs(Rational(5, 3).mod(Rational(5, 3)), ZERO)

    def test_mod_operator(self):
        self.assertEqual(Rational(-19, 7) % Rational(5, 29), Rational(9, 203))
        self.assertEqual(Rational(7, 2) % 1, ONE_HALF)
        self.assertEqual(5 % Rational(3, 2), ONE_HALF)

    def test_mod_range(self):
        for a in sample_values():
            for b in sample_values():
                if b.is_zero():
                    continue
                remainder = a.mod(b)
                self.assertLess(remainder.abs(), b.abs())
                self.assertIn(remainder.signum, (0, b.signum))
                self.assertEqual(remainder.as_fraction(), a.as_fraction() % b.as_fraction())

    def test_mod_by_zero(self):
        with self.assertRaises(DivisionByZeroError):
            Rational(1, 2).mod(ZERO)
        with self.assertRaises(ZeroDivisionError):
            _ = Rational(1, 2) % 0


class PowerTests(unittest.TestCase):
    def test_zero_base(self):
        with self.assertRaises(InvalidOperationError):
            ZERO.pow(0)
        for exponent in (-1, -2, -25):
            with self.assertRaises(DivisionByZeroError):
                ZERO.pow(exponent)
        for exponent in (1, 2, 17):
            self.assertIs(ZERO.pow(exponent), ZERO)

    def test_unit_bases(self):
        for base in (ONE_HALF, ONE, TWO, MINUS_ONE):
            self.assertIs(base.pow(0), ONE)
        self.assertIs(ONE.pow(17), ONE)
        self.assertIs(MINUS_ONE.pow(1), MINUS_ONE)
        self.assertIs(MINUS_ONE.pow(2), ONE)
        self.assertEqual(MINUS_ONE.pow(-3), MINUS_ONE)
        self.assertIs(TWO.pow(1), TWO)

    def test_positive_exponents(self):
        self.assertEqual(Rational(17, 9).pow(2), Rational(289, 81))
        self.assertEqual(Rational(-17, 9).pow(2), Rational(289, 81))
        self.assertEqual(Rational(17, 9).pow(3), Rational(4913, 729))
        self.assertEqual(Rational(-17, 9).pow(3), Rational(-4913, 729))
        self.assertEqual(Rational(17, 9).pow(4), Rational(83521, 6561))
        self.assertEqual(Rational(17, 9).pow(5), Rational(1419857, 59049))
        self.assertEqual(TWO.pow(100), Rational(2**100))

    def test_negative_exponents(self):
        self.assertEqual(Rational(123, 456).pow(-1), Rational(456, 123))
        self.assertEqual(Rational(123, 456).pow(-2), Rational(456 * 456, 123 * 123))
        self.assertEqual(Rational(123, 456).pow(-3), Rational(456**3, 123**3))
        self.assertEqual(Rational(123, 456).pow(-4), Rational(456**4, 123**4))
        self.assertEqual(Rational(-2, 3).pow(-3), Rational(-27, 8))
        self.assertEqual(Rational(-2, 3).pow(-4), Rational(81, 16))
        self.assertEqual(Rational(-2, 3) ** -5, Rational(-243, 32))

    def test_non_integer_exponent(self):
        with self.assertRaises(TypeError):
            Rational(2, 3).pow(0.5)


class GcdLcmTests(unittest.TestCase):
    def test_gcd(self):
        self.assertIs(ZERO.gcd(ZERO), ZERO)
        self.assertEqual(ZERO.gcd(Rational(3, 5)), Rational(3, 5))
        self.assertEqual(ONE.gcd(Rational(3, 5)), Rational(1, 5))
        self.assertEqual(Rational(3, 5).gcd(ZERO), Rational(3, 5))
        self.assertEqual(Rational(3, 5).gcd(ONE), Rational(1, 5))
        self.assertEqual(Rational(3, 5).gcd(Rational(3, 5)), Rational(3, 5))
        self.assertEqual(Rational(3, 5).gcd(Rational(4, 6)), Rational(1, 15))
        self.assertEqual(Rational(-9, 4).gcd(Rational(13, 7)), Rational(1, 28))
        self.assertEqual(Rational(255, 16).gcd(Rational(193, 5)), Rational(1, 80))
        self.assertEqual(Rational(55, 4).gcd(Rational(5, 4)), Rational(5, 4))
        self.assertEqual(Rational(55, 4).gcd(Rational(11, 6)), Rational(11, 12))
        self.assertEqual(Rational(85, 17).gcd(Rational(217, 13)), Rational(1, 13))

    def test_gcd_is_non_negative(self):
        self.assertEqual(Rational(-3, 5).gcd(Rational(-3, 5)), Rational(3, 5))
        self.assertEqual(ZERO.gcd(Rational(-3, 5)), Rational(3, 5))
        self.assertEqual(Rational(-6, 5).gcd(Rational(-4, 5)), Rational(2, 5))

    def test_lcm(self):
        self.assertIs(ZERO.lcm(ZERO), ZERO)
        self.assertIs(ZERO.lcm(Rational(3, 5)), ZERO)
        self.assertEqual(ONE.lcm(Rational(3, 5)), Rational(3))
        self.assertIs(Rational(3, 5).lcm(ZERO), ZERO)
        self.assertEqual(Rational(3, 5).lcm(ONE), Rational(3))
        self.assertEqual(Rational(3, 5).lcm(Rational(3, 5)), Rational(3, 5))
        self.assertEqual(Rational(3, 5).lcm(Rational(4, 6)), Rational(6))
        self.assertEqual(Rational(-9, 4).lcm(Rational(13, 7)), Rational(117))
        self.assertEqual(Rational(255, 16).lcm(Rational(193, 5)), Rational(49215))
        self.assertEqual(Rational(55, 4).lcm(Rational(5, 4)), Rational(55, 4))
        self.assertEqual(Rational(55, 4).lcm(Rational(11, 6)), Rational(55, 2))
        self.assertEqual(Rational(85, 17).lcm(Rational(217, 13)), Rational(1085))

    def test_gcd_divides_both(self):
        for a in sample_values():
            for b in sample_values():
                g = a.gcd(b)
                g.check_consistency()
                if g.is_zero():
                    self.assertTrue(a.is_zero() and b.is_zero())
                    continue
                self.assertTrue(a.divide(g).is_integer())
                self.assertTrue(b.divide(g).is_integer())


class AlgebraTests(unittest.TestCase):
    def test_results_are_canonical(self):
        for a in sample_values():
            for b in sample_values():
                results = [a.add(b), a.subtract(b), a.multiply(b), a.gcd(b), a.lcm(b)]
                if not b.is_zero():
                    results += [a.divide(b), a.mod(b), a.divide_integer_and_remainder(b)[1]]
                for result in results:
                    result.check_consistency()
            for result in (a.negate(), a.abs(), a.square(), a.redouble(), a.halve(), a.pow(3)):
                result.check_consistency()

    def test_field_laws(self):
        for a in sample_values():
            self.assertEqual(a.add(ZERO), a)
            self.assertIs(a.subtract(a), ZERO)
            self.assertEqual(a.negate().negate(), a)
            if not a.is_zero():
                self.assertIs(a.multiply(a.reciprocal()), ONE)
            for b in sample_values():
                self.assertEqual(a.add(b), b.add(a))
                self.assertEqual(a.multiply(b), b.multiply(a))
                self.assertEqual(a.subtract(b), a.add(b.negate()))

    def test_agrees_with_fraction(self):
        for a in sample_values():
            for b in sample_values():
                fa, fb = a.as_fraction(), b.as_fraction()
                self.assertEqual((a + b).as_fraction(), fa + fb)
                self.assertEqual((a - b).as_fraction(), fa - fb)
                self.assertEqual((a * b).as_fraction(), fa * fb)
                if fb:
                    self.assertEqual((a / b).as_fraction(), fa / fb)
                    self.assertEqual(a // b, fa // fb)

    def test_series_for_e(self):
        total = ZERO
        factorial = ONE
        for i in range(50):
            total = total.add(factorial)
            factorial = factorial.divide(Rational(i + 1))
        self.assertEqual(
            total,
            Rational(
                12719088750658039780384089386046426661997613299898270200126969,
                4679091261802058160555785871702272129904252549070848000000000,
            ),
        )

    def test_series_for_e_cubed(self):
        three = Rational(3)
        total = ZERO
        factorial = ONE
        for i in range(50):
            total = total.add(three.pow(i).multiply(factorial))
            factorial = factorial.divide(Rational(i + 1))
        self.assertEqual(
            total,
            Rational(
                97333136547926737301012888635254293286814530131950829,
                4845931523770265122090735735752760324259840000000000,
            ),
        )

    def test_newton_square_root_of_two(self):
        x = ONE
        for _ in range(5):
            x = x.add(TWO.divide(x)).halve()
        self.assertEqual(x.as_fraction(), _newton_sqrt2(5))
        self.assertLess(abs(float(x.square()) - 2.0), 1e-15)


def _newton_sqrt2(steps):
    x = Fraction(1)
    for _ in range(steps):
        x = (x + 2 / x) / 2
    return x


if __name__ == "__main__":  # pragma: no cover - direct execution helper
    unittest.main()
