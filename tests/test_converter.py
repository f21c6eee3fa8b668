"""Unit tests for the numeral converter."""

import random
import unittest
from unittest import mock

from basejump_pkg.config import MAGNITUDE_LIMIT, RESULT_LIMIT
from basejump_pkg.converter import (
    decode,
    digit_char,
    digit_value,
    encode,
    is_valid_digit,
    normalize,
)
from basejump_pkg.types import (
    InvalidBaseError,
    InvalidDigitError,
    NumeralOverflowError,
)


class TestDigitMapping(unittest.TestCase):
    """Test digit character <-> value mapping."""

    def test_decimal_digits(self):
        for value, char in enumerate("0123456789"):
            self.assertEqual(digit_value(char), value)

    def test_letters_either_case(self):
        self.assertEqual(digit_value("a"), 10)
        self.assertEqual(digit_value("A"), 10)
        self.assertEqual(digit_value("z"), 35)
        self.assertEqual(digit_value("Z"), 35)

    def test_invalid_characters(self):
        for char in ["+", " ", "-", "_", "é", "²", ""]:
            self.assertIsNone(digit_value(char), f"{char!r} should have no value")

    def test_digit_char_uppercase(self):
        self.assertEqual(digit_char(0), "0")
        self.assertEqual(digit_char(9), "9")
        self.assertEqual(digit_char(10), "A")
        self.assertEqual(digit_char(35), "Z")

    def test_digit_char_out_of_range(self):
        with self.assertRaises(InvalidDigitError):
            digit_char(36)
        with self.assertRaises(InvalidDigitError):
            digit_char(-1)

    def test_is_valid_digit(self):
        self.assertTrue(is_valid_digit("1", 2))
        self.assertFalse(is_valid_digit("2", 2))
        self.assertTrue(is_valid_digit("f", 16))
        self.assertFalse(is_valid_digit("g", 16))
        self.assertFalse(is_valid_digit("+", 36))


class TestDecode(unittest.TestCase):
    """Test decoding digit strings."""

    def test_known_values(self):
        self.assertEqual(decode("FF", 16), 255)
        self.assertEqual(decode("ff", 16), 255)
        self.assertEqual(decode("1010", 2), 10)
        self.assertEqual(decode("777", 8), 511)
        self.assertEqual(decode("Z", 36), 35)
        self.assertEqual(decode("0", 2), 0)
        self.assertEqual(decode("0007", 10), 7)

    def test_digit_not_below_base(self):
        with self.assertRaises(InvalidDigitError):
            decode("2", 2)
        with self.assertRaises(InvalidDigitError):
            decode("19A", 10)
        with self.assertRaises(InvalidDigitError):
            decode("G", 16)

    def test_unmapped_character(self):
        with self.assertRaises(InvalidDigitError):
            decode("1+1", 10)

    def test_empty_string(self):
        with self.assertRaises(InvalidDigitError) as ctx:
            decode("", 10)
        self.assertEqual(ctx.exception.code, "INVALID_DIGIT")

    def test_invalid_base(self):
        with self.assertRaises(InvalidBaseError):
            decode("1", 1)
        with self.assertRaises(InvalidBaseError):
            decode("1", 37)

    def test_largest_magnitude(self):
        self.assertEqual(decode("1" * 64, 2), MAGNITUDE_LIMIT - 1)
        self.assertEqual(decode("FFFFFFFFFFFFFFFF", 16), MAGNITUDE_LIMIT - 1)

    def test_overflow(self):
        with self.assertRaises(NumeralOverflowError) as ctx:
            decode("10000000000000000", 16)
        self.assertEqual(ctx.exception.code, "NUMERAL_OVERFLOW")


class TestEncode(unittest.TestCase):
    """Test encoding magnitudes."""

    def test_zero_in_every_base(self):
        for base in range(2, 37):
            self.assertEqual(encode(0, base), "0")

    def test_known_values(self):
        self.assertEqual(encode(255, 16), "FF")
        self.assertEqual(encode(255, 2), "11111111")
        self.assertEqual(encode(35, 36), "Z")
        self.assertEqual(encode(36, 36), "10")
        self.assertEqual(encode(10, 10), "10")

    def test_digits_come_from_digit_char(self):
        with mock.patch("basejump_pkg.converter.digit_char", wraps=digit_char) as spy:
            self.assertEqual(encode(35 * 36 + 10, 36), "ZA")
        self.assertEqual([c.args[0] for c in spy.call_args_list], [10, 35])

    def test_no_leading_zeros(self):
        for base in (2, 7, 16, 36):
            self.assertNotEqual(encode(base**5, base)[0], "0")

    def test_negative_rejected(self):
        with self.assertRaises(NumeralOverflowError):
            encode(-1, 10)

    def test_invalid_base(self):
        with self.assertRaises(InvalidBaseError):
            encode(5, 0)

    def test_round_trip_random_values(self):
        rng = random.Random(1234)
        for _ in range(500):
            value = rng.randrange(RESULT_LIMIT)
            base = rng.randint(2, 36)
            self.assertEqual(decode(encode(value, base), base), value)

    def test_round_trip_boundaries(self):
        for value in (0, 1, RESULT_LIMIT - 1):
            for base in range(2, 37):
                self.assertEqual(decode(encode(value, base), base), value)


class TestNormalize(unittest.TestCase):
    """Test the decode/encode normalization used for typed input."""

    def test_uppercases_and_strips_zeros(self):
        self.assertEqual(normalize("00ff", 16), "FF")
        self.assertEqual(normalize("000", 8), "0")
        self.assertEqual(normalize("z", 36), "Z")


if __name__ == "__main__":
    unittest.main()
