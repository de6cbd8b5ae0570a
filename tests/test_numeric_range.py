"""
Unit tests for reference range extraction.
"""

import unittest
from hl7_derivation.core.data_models import Field
from hl7_derivation.utils.numeric_range import extract_high, extract_low


class TestExtractRange(unittest.TestCase):
    """Test cases for extract_low and extract_high"""

    def test_single_number_is_high(self):
        """A single number is the upper limit and there is no lower limit"""
        for text in ["0.50", ">0.50", "<0.50", "-0.50", "<0.50 IU/mL", "=0.50"]:
            with self.subTest(text=text):
                self.assertIsNone(extract_low(text))
                self.assertEqual(extract_high(text), "0.50")

    def test_two_numbers(self):
        """Two numbers give low then high, whatever the notation around them"""
        for text in ["0.50-2.50", "0.50 2.50", "<0.50 < 2.50", ">0.50 > 2.50", "0.50 - 2.50 mg/dL"]:
            with self.subTest(text=text):
                self.assertEqual(extract_low(text), "0.50")
                self.assertEqual(extract_high(text), "2.50")

    def test_observation_ranges(self):
        self.assertEqual(extract_low("5.9-8.4"), "5.9")
        self.assertEqual(extract_high("5.9-8.4"), "8.4")
        self.assertEqual(extract_low("649-1346 cells/mcL"), "649")
        self.assertEqual(extract_high("649-1346 cells/mcL"), "1346")
        self.assertEqual(extract_low("1.1 mL - 1.5 mL"), "1.1")
        self.assertEqual(extract_high("1.1 mL - 1.5 mL"), "1.5")

    def test_underscore_separator(self):
        self.assertEqual(extract_low("70_105"), "70")
        self.assertEqual(extract_high("70_105"), "105")

    def test_only_first_two_numbers_count(self):
        self.assertEqual(extract_low("1-2-3"), "1")
        self.assertEqual(extract_high("1-2-3"), "2")

    def test_malformed_number_passes_through(self):
        """No numeric validation: text is returned as matched"""
        self.assertEqual(extract_high("1.2.3"), "1.2.3")
        self.assertIsNone(extract_low("1.2.3"))

    def test_no_number(self):
        self.assertIsNone(extract_low("negative"))
        self.assertIsNone(extract_high("negative"))

    def test_blank_and_none(self):
        self.assertIsNone(extract_low(""))
        self.assertIsNone(extract_low("   "))
        self.assertIsNone(extract_high(None))
        self.assertIsNone(extract_low(None))

    def test_wrapped_value(self):
        self.assertEqual(extract_high(Field.of("<0.06")), "0.06")


if __name__ == '__main__':
    unittest.main()
