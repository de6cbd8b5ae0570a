import unittest
from hl7_derivation.core.data_models import Field
from hl7_derivation.utils.names import generate_name


class TestGenerateName(unittest.TestCase):
    """Test display name assembly."""

    def test_first_and_family(self):
        self.assertEqual(generate_name(None, "Jane", None, "Doe", None), "Jane Doe")

    def test_all_parts_in_order(self):
        self.assertEqual(generate_name("Dr", "John", "Q", "Public", "Jr"), "Dr John Q Public Jr")

    def test_blank_parts_skipped(self):
        self.assertEqual(generate_name("  ", "Jane", "", "Doe", "\t"), "Jane Doe")

    def test_parts_trimmed(self):
        self.assertEqual(generate_name(None, " Jane ", None, " Doe ", None), "Jane Doe")

    def test_all_absent(self):
        self.assertIsNone(generate_name(None, None, None, None, None))
        self.assertIsNone(generate_name("", " ", None, "", None))

    def test_wrapped_parts(self):
        self.assertEqual(generate_name(None, Field.of("Mary"), None, Field.of("Smith"), None), "Mary Smith")


if __name__ == '__main__':
    unittest.main()
