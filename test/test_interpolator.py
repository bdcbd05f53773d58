import io
import random
import unittest
from contextlib import redirect_stderr
from fractions import Fraction
from recovery.config import Config
from recovery.decoder import Point, decode_points
from recovery.errors import EmptyInput, DuplicateCoordinate, InexactDivision
from recovery.interpolator import interpolate_at_zero, lagrange_terms
from polynomials import random_polynomial, make_shares, make_document


class InterpolatorTest(unittest.TestCase):
    def test_line_through_two_points(self):
        """(1, 4) and (2, 7) lie on 3x + 1"""
        self.assertEqual(interpolate_at_zero([Point(1, 4), Point(2, 7)]), 1)

    def test_single_point_is_constant(self):
        self.assertEqual(interpolate_at_zero([Point(5, 42)]), 42)

    def test_quadratic(self):
        points = [Point(1, 4), Point(2, 7), Point(3, 12)]
        self.assertEqual(interpolate_at_zero(points), 3)

    def test_non_integral_terms_sum_exactly(self):
        """y = x^2 at x = 1, 2, 4: individual terms are 8/3, -8, 16/3"""
        points = [Point(1, 1), Point(2, 4), Point(4, 16)]
        terms = [t.value for t in lagrange_terms(points)]
        self.assertEqual(terms, [Fraction(8, 3), Fraction(-8), Fraction(16, 3)])
        self.assertEqual(interpolate_at_zero(points, strict=True), 0)

    def test_threshold_sufficiency(self):
        """Any k distinct points of a degree k-1 integer polynomial give P(0)"""
        rng = random.Random(1337)
        for k in (2, 3, 5):
            for _ in range(20):
                coefficients = random_polynomial(k - 1, bits=64, rng=rng)
                xs = rng.sample(range(-1000, 1000), k)
                shares = make_shares(coefficients, xs)
                secret = interpolate_at_zero([Point(x, y) for x, y in shares], strict=True)
                self.assertEqual(secret, coefficients[0], msg=f"k={k}, xs={xs}")

    def test_any_subset_recovers_same_secret(self):
        rng = random.Random(7)
        coefficients = random_polynomial(2, rng=rng)
        shares = make_shares(coefficients, range(1, 8))
        for _ in range(10):
            subset = rng.sample(shares, 3)
            self.assertEqual(interpolate_at_zero([Point(*s) for s in subset]), coefficients[0])

    def test_pivot_order_does_not_matter(self):
        coefficients = [123456789, -17, 4, 9]
        points = [Point(*s) for s in make_shares(coefficients, [3, -7, 11, 2])]
        expected = interpolate_at_zero(points)
        self.assertEqual(interpolate_at_zero(list(reversed(points))), expected)
        self.assertEqual(expected, 123456789)

    def test_large_magnitude(self):
        """Coordinates and values well past 64 bits"""
        coefficients = [2 ** 200 + 12345, -(3 ** 90), 7 ** 50]
        xs = [2 ** 70, 2 ** 70 + 3, -(2 ** 65)]
        points = [Point(*s) for s in make_shares(coefficients, xs)]
        self.assertTrue(all(abs(p.y) > 2 ** 64 for p in points))
        self.assertEqual(interpolate_at_zero(points, strict=True), coefficients[0])

    def test_negative_secret(self):
        points = [Point(*s) for s in make_shares([-99, 5, 1], [1, 2, 3])]
        self.assertEqual(interpolate_at_zero(points), -99)

    def test_empty_input(self):
        with self.assertRaises(EmptyInput):
            interpolate_at_zero([])

    def test_duplicate_coordinate(self):
        with self.assertRaises(DuplicateCoordinate) as ctx:
            interpolate_at_zero([Point(1, 4), Point(2, 7), Point(1, 9)])
        self.assertEqual(ctx.exception.x, 1)

    def test_duplicate_coordinate_from_document(self):
        """'1' and '01' are different keys naming the same x"""
        document = {
            "keys": {"n": 3, "k": 3},
            "1": {"base": "10", "value": "4"},
            "01": {"base": "10", "value": "5"},
            "2": {"base": "10", "value": "7"},
        }
        points = decode_points(document)
        with self.assertRaises(DuplicateCoordinate):
            interpolate_at_zero(points)

    def test_inexact_warns_and_truncates(self):
        """(1, 0) and (3, 1) lie on a line through (0, -1/2)"""
        points = [Point(1, 0), Point(3, 1)]
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            self.assertEqual(interpolate_at_zero(points), 0)
        self.assertIn("not an integer", stderr.getvalue())

    def test_inexact_strict(self):
        with self.assertRaises(InexactDivision) as ctx:
            interpolate_at_zero([Point(1, 0), Point(3, 1)], strict=True)
        self.assertEqual(ctx.exception.value, Fraction(-1, 2))

    def test_strict_default_from_config(self):
        original = Config.STRICT_DIVISION
        try:
            Config.STRICT_DIVISION = True
            with self.assertRaises(InexactDivision):
                interpolate_at_zero([Point(1, 0), Point(3, 1)])
        finally:
            Config.STRICT_DIVISION = original

    def test_lagrange_term_products(self):
        terms = list(lagrange_terms([Point(1, 4), Point(2, 7), Point(3, 12)]))
        self.assertEqual([t.numerator for t in terms], [6, 3, 2])
        self.assertEqual([t.denominator for t in terms], [2, -1, 2])

    def test_deterministic(self):
        document = make_document(make_shares([31337, 2, 3, 4], [4, 8, 15, 16, 23]), k=4, base=7)
        first = interpolate_at_zero(decode_points(document))
        second = interpolate_at_zero(decode_points(document))
        self.assertEqual(first, second)
        self.assertEqual(first, 31337)


if __name__ == '__main__':
    unittest.main()
