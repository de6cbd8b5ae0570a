import unittest
from unittest.mock import patch

from hl7_derivation.config import Config
from hl7_derivation.core.registry import FUNCTION_REGISTRY, evaluate, get_function, list_functions
from hl7_derivation.exceptions import UnknownFunctionError
from hl7_derivation.utils.numeric_range import extract_high


class TestRegistry(unittest.TestCase):
    """Test the named derivation function surface."""

    def test_template_aliases(self):
        self.assertIs(FUNCTION_REGISTRY['extractHigh'], FUNCTION_REGISTRY['extract_high'])
        self.assertIs(get_function('extractHigh'), extract_high)

    def test_unknown_function(self):
        with self.assertRaises(UnknownFunctionError):
            get_function('noSuchFunction')
        self.assertIsNone(evaluate('noSuchFunction', 'x'))

    def test_evaluate(self):
        self.assertEqual(evaluate('extractHigh', '<0.50 IU/mL'), '0.50')
        self.assertIsNone(evaluate('extractLow', '<0.50 IU/mL'))
        self.assertEqual(evaluate('generateName', None, 'Jane', None, 'Doe', None), 'Jane Doe')
        self.assertEqual(evaluate('getAddressUse', 'C', None, None), 'temp')
        self.assertEqual(evaluate('getEncounterStatus', None, None, None), 'unknown')
        self.assertEqual(evaluate('split', 'a^b^c', '^', 1), 'b')

    def test_evaluate_date_difference(self):
        with patch.object(Config, 'DEFAULT_ZONE_ID', None):
            self.assertEqual(evaluate('diffDateMin', '202401010000', '202401010130'), 90)

    def test_wrong_argument_count_is_none(self):
        self.assertIsNone(evaluate('extractHigh'))
        self.assertIsNone(evaluate('getAddressType', 'M', None, 'extra'))

    def test_bad_arguments_log_warning(self):
        with self.assertLogs('hl7_derivation.core.registry', level='WARNING') as logs:
            self.assertIsNone(evaluate('extractHigh'))
        self.assertTrue(logs.output[0].startswith('WARNING:'))

    def test_failing_function_logs_error(self):
        with patch.dict(FUNCTION_REGISTRY, {'explode': lambda: 1 / 0}):
            with self.assertLogs('hl7_derivation.core.registry', level='WARNING') as logs:
                self.assertIsNone(evaluate('explode'))
        self.assertTrue(logs.output[0].startswith('ERROR:'))

    def test_list_functions(self):
        entries = list_functions()
        ids = [e['id'] for e in entries]
        self.assertEqual(len(ids), len(set(FUNCTION_REGISTRY.values())))
        self.assertIn('extract_high', ids)
        high = next(e for e in entries if e['id'] == 'extract_high')
        self.assertEqual(high['alias'], 'extractHigh')
        self.assertTrue(high['description'])
        split_entry = next(e for e in entries if e['id'] == 'split')
        self.assertEqual(split_entry['alias'], '')


if __name__ == '__main__':
    unittest.main()
