from decimal import Decimal
from fractions import Fraction

from orderstat.math import midpoint
from orderstat.test import MyTestCase, parametrize


class Celsius:
    def __init__(self, degrees, scale):
        self.degrees = degrees
        self.scale = scale

    def __add__(self, other):
        return Celsius(self.degrees + other.degrees, self.scale)

    def __truediv__(self, other):
        return Celsius(self.degrees / other.degrees, self.scale)


class MathTest(MyTestCase):
    @parametrize(
        (1, 2, 1.5),
        (2, 4, 3.0),
        (-3, 3, 0.0),
        (2.0, 4.0, 3.0),
        (Fraction(1), Fraction(2), Fraction(3, 2)),
        (Fraction(1, 3), Fraction(1, 2), Fraction(5, 12)),
        (Decimal("0.1"), Decimal("0.2"), Decimal("0.15")),
        (False, True, 0.5),
        (True, True, 1.0),
        (-3.0, -1.0, -2.0),
        (-1.7e308, 1.7e308, 0.0),
    )
    def test_midpoint(self, a, b, truth):
        result = midpoint(a, b)
        self.assertEqual(truth, result)
        self.assertTypeEqual(truth, result)

    def test_midpoint_large_floats(self):
        result = midpoint(1e308, 1.7e308)
        self.assertTrue(1e308 < result < 1.7e308)

        result = midpoint(-1.7e308, -1e308)
        self.assertTrue(-1.7e308 < result < -1e308)

    def test_midpoint_not_constructible(self):
        with self.assertLogs("orderstat.math", "DEBUG"):
            result = midpoint(Celsius(1, "C"), Celsius(3, "C"))
        self.assertIsNone(result)


if __name__ == "__main__":
    import unittest

    unittest.main()
