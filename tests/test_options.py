"""Unit tests for base and base-list validation."""

import unittest

from basejump_pkg.options import Configuration, in_range, parse_base, parse_output_bases
from basejump_pkg.types import ConfigurationError


class TestParseBase(unittest.TestCase):
    """Test single base parsing."""

    def test_valid_bases(self):
        self.assertEqual(parse_base("2"), 2)
        self.assertEqual(parse_base("16"), 16)
        self.assertEqual(parse_base("36"), 36)
        self.assertEqual(parse_base("010"), 10)

    def test_out_of_range(self):
        for text in ["0", "1", "37", "100"]:
            with self.assertRaises(ConfigurationError, msg=text):
                parse_base(text)

    def test_not_decimal(self):
        for text in ["", " 8", "8 ", "+8", "-8", "0x10", "1e1", "ten", "٨"]:
            with self.assertRaises(ConfigurationError, msg=repr(text)):
                parse_base(text)

    def test_error_code(self):
        with self.assertRaises(ConfigurationError) as ctx:
            parse_base("40")
        self.assertEqual(ctx.exception.code, "INVALID_ARGS")

    def test_in_range(self):
        self.assertTrue(in_range(2))
        self.assertTrue(in_range(36))
        self.assertFalse(in_range(1))
        self.assertFalse(in_range(37))


class TestParseOutputBases(unittest.TestCase):
    """Test comma-separated base list parsing."""

    def test_order_preserved(self):
        self.assertEqual(parse_output_bases("16,2,10"), (16, 2, 10))

    def test_single_base(self):
        self.assertEqual(parse_output_bases("8"), (8,))

    def test_all_bases(self):
        text = ",".join(str(b) for b in range(2, 37))
        self.assertEqual(parse_output_bases(text), tuple(range(2, 37)))

    def test_malformed_lists(self):
        for text in ["", ",", ",2", "2,", "2,,8", "2, 8", "2;8", "2,x"]:
            with self.assertRaises(ConfigurationError, msg=repr(text)):
                parse_output_bases(text)

    def test_duplicate_rejected(self):
        with self.assertRaises(ConfigurationError):
            parse_output_bases("2,8,2")

    def test_out_of_range_entry(self):
        with self.assertRaises(ConfigurationError):
            parse_output_bases("2,40")

    def test_too_many_entries(self):
        # 37 entries can only happen with a repeat, which is caught first
        text = ",".join(str(b) for b in range(2, 37)) + ",2"
        with self.assertRaises(ConfigurationError):
            parse_output_bases(text)


class TestConfiguration(unittest.TestCase):
    """Test the run configuration defaults."""

    def test_defaults(self):
        configuration = Configuration()
        self.assertEqual(configuration.input_base, 10)
        self.assertEqual(configuration.output_bases, (2, 10, 16))
        self.assertIsNone(configuration.file_path)
        self.assertTrue(configuration.interactive)

    def test_file_mode(self):
        self.assertFalse(Configuration(file_path="exprs.txt").interactive)


if __name__ == "__main__":
    unittest.main()
