import csv
import io
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path
from unittest.mock import patch

from hl7_derivation.config import Config
from hl7_derivation.main import main


class TestMain(unittest.TestCase):
    """Test the command line entry point."""

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()
        patcher = patch.object(Config, 'DEFAULT_ZONE_ID', None)
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def _run(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_single_call(self):
        code, out, _ = self._run(['extractHigh', '<0.50 IU/mL'])
        self.assertEqual(code, 0)
        self.assertEqual(out, '0.50\n')

    def test_null_token(self):
        code, out, _ = self._run(['getFormattedTelecomNumberValue', 'NULL', 'NULL', '650', '1234567', 'NULL', 'NULL'])
        self.assertEqual(code, 0)
        self.assertEqual(out, '(650) 123 4567\n')

    def test_split_index_argument(self):
        code, out, _ = self._run(['split', 'a^b^c', '^', '1'])
        self.assertEqual(code, 0)
        self.assertEqual(out, 'b\n')

    def test_none_prints_empty_line(self):
        code, out, _ = self._run(['extractLow', '0.50'])
        self.assertEqual(code, 0)
        self.assertEqual(out, '\n')

    def test_date_difference(self):
        code, out, _ = self._run(['diffDateMin', '202401010000', '202401010130'])
        self.assertEqual(out, '90\n')

    def test_unknown_function(self):
        code, _, err = self._run(['noSuchFunction'])
        self.assertEqual(code, 1)
        self.assertIn('unknown derivation function', err)

    def test_list(self):
        code, out, _ = self._run(['--list'])
        self.assertEqual(code, 0)
        self.assertIn('extract_high', out)
        self.assertIn('extractHigh', out)

    def test_missing_csv(self):
        code, _, err = self._run(['--csv', str(Path(self.temp_dir) / 'missing.csv'),
                                  'extractHigh', '--columns', 'range'])
        self.assertEqual(code, 1)
        self.assertIn('CSV file not found', err)

    def test_batch(self):
        input_file = Path(self.temp_dir) / 'ranges.csv'
        with open(input_file, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(['range'])
            writer.writerow(['3.5-5.0'])
        output_file = Path(self.temp_dir) / 'out.csv'

        code, _, err = self._run(['extractLow', '--csv', str(input_file), '--columns', 'range',
                                  '--output-column', 'low', '-o', str(output_file)])
        self.assertEqual(code, 0)
        self.assertIn('FIELD DERIVATION QUALITY REPORT', err)
        with open(output_file, 'r', encoding='utf-8') as f:
            rows = list(csv.DictReader(f))
        self.assertEqual(rows[0]['low'], '3.5')


if __name__ == '__main__':
    unittest.main()
