from decimal import Decimal
from fractions import Fraction

from orderstat.exceptions import assert_numeric, assert_type
from orderstat.test import MyTestCase, parametrize
from orderstat.typing import Numeric


class ExceptionsTest(MyTestCase):
    @parametrize(
        ([],),
        ([1, 2, 3],),
        ([1, 2.5, Fraction(1, 3), Decimal("0.1"), True],),
        ((-1, 0, 1),),
    )
    def test_assert_numeric(self, values):
        assert_numeric("values", values)

    @parametrize(
        (["a", "b"],),
        ([1, None],),
        ([1, (2,)],),
        ([object()],),
    )
    def test_assert_numeric_raises(self, values):
        with self.assertRaises(TypeError):
            assert_numeric("values", values)

    def test_assert_numeric_message(self):
        with self.assertRaisesRegex(TypeError, r"^seq\[1\] must be one of these types: Numeric\. Not: str$"):
            assert_numeric("seq", [1, "2"])

    def test_assert_type(self):
        assert_type("x", 1, int)
        assert_type("x", 1.5, (int, float))
        assert_type("x", Fraction(1), Numeric)

        with self.assertRaisesRegex(TypeError, r"^x must be one of these types: int, float\. Not: str$"):
            assert_type("x", "1", (int, float))


if __name__ == "__main__":
    import unittest

    unittest.main()
