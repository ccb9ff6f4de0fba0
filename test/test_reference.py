"""
The golden model itself, checked against the architectural
examples and against python integer arithmetic.
"""
from random import randint, seed

from mdu.common import reference
from mdu.common.opcodes import Funct3
from mdu.common.helpers import to_signed, to_unsigned

import unittest

class TestReference(unittest.TestCase):
    def test_examples(self):
        compute = reference.compute
        self.assertEqual(compute(Funct3.div, 7, 2), 3)
        self.assertEqual(compute(Funct3.rem, 7, 2), 1)
        self.assertEqual(compute(Funct3.div, -7, 2), to_unsigned(-3, 32))
        self.assertEqual(compute(Funct3.rem, -7, 2), to_unsigned(-1, 32))
        self.assertEqual(compute(Funct3.divu, 0xFFFFFFFF, 2), 0x7FFFFFFF)
        self.assertEqual(compute(Funct3.remu, 0xFFFFFFFF, 2), 1)
        self.assertEqual(compute(Funct3.mulhu, 0xFFFFFFFF, 0xFFFFFFFF), 0xFFFFFFFE)

    def test_special_cases(self):
        compute = reference.compute
        for width in (1, 8, 32, 64):
            min_int = 1 << (width - 1)
            all_ones = (1 << width) - 1
            with self.subTest(width=width):
                self.assertEqual(compute(Funct3.div, 5, 0, width), all_ones)
                self.assertEqual(compute(Funct3.divu, 5, 0, width), all_ones)
                self.assertEqual(compute(Funct3.rem, min_int, 0, width), min_int)
                self.assertEqual(compute(Funct3.remu, all_ones, 0, width), all_ones)
                self.assertEqual(compute(Funct3.div, min_int, all_ones, width), min_int)
                self.assertEqual(compute(Funct3.rem, min_int, all_ones, width), 0)

    def test_multiply_matches_python(self):
        seed(3)
        width = 32
        for _ in range(200):
            a = randint(-(2 ** 31), 2 ** 31 - 1)
            b = randint(-(2 ** 31), 2 ** 31 - 1)
            ua, ub = to_unsigned(a, width), to_unsigned(b, width)
            self.assertEqual(reference.mul(ua, ub, width), to_unsigned(a * b, width))
            self.assertEqual(reference.mulh(ua, ub, width),
                to_unsigned((a * b) >> width, width))
            self.assertEqual(reference.mulhsu(ua, ub, width),
                to_unsigned((a * ub) >> width, width))
            self.assertEqual(reference.mulhu(ua, ub, width), (ua * ub) >> width)

    def test_divide_identity(self):
        seed(4)
        width = 32
        for _ in range(200):
            n = randint(-(2 ** 31), 2 ** 31 - 1)
            d = randint(-(2 ** 31), 2 ** 31 - 1) or 1
            if (n, d) == (-(2 ** 31), -1):
                continue
            q = to_signed(reference.compute(Funct3.div, n, d), width)
            r = to_signed(reference.compute(Funct3.rem, n, d), width)
            self.assertEqual(q * d + r, n)
            self.assertTrue(r == 0 or (r < 0) == (n < 0))

            un, ud = to_unsigned(n, width), to_unsigned(d, width)
            q = reference.compute(Funct3.divu, un, ud)
            r = reference.compute(Funct3.remu, un, ud)
            self.assertEqual(q * ud + r, un)
            self.assertLess(r, ud)

    def test_bad_arguments(self):
        with self.assertRaises(ValueError):
            reference.compute(8, 1, 1)
        with self.assertRaises(ValueError):
            reference.compute(Funct3.div, 1, 1, width=0)

    def test_helpers(self):
        self.assertEqual(to_signed(0xFF, 8), -1)
        self.assertEqual(to_signed(0x7F, 8), 127)
        self.assertEqual(to_unsigned(-1, 8), 0xFF)
        self.assertEqual(to_unsigned(0x1FF, 8), 0xFF)

if __name__ == "__main__":
    unittest.main()
