"""
Batch Derivation Service

Service layer for applying one derivation function to every row of a CSV
file of already extracted field values.
"""

import csv
import logging
from typing import Any, Dict, List, Optional

from ..config import Config
from ..reporting.audit_logger import DerivationAuditLogger
from .data_models import BatchStatistics
from .registry import evaluate, get_function


class DerivationService:
    """Service for batch field derivation."""

    def __init__(self, function_name: str, columns: List[str], output_column: str,
                 null_token: Optional[str] = None):
        """
        Initialize the batch derivation service.

        Args:
            function_name: Registered derivation function to apply
            columns: Input columns, in the function's argument order
            output_column: Column receiving the derived value
            null_token: Cell text standing for an absent value

        Raises:
            UnknownFunctionError: If ``function_name`` is not registered
        """
        get_function(function_name)
        self.function_name = function_name
        self.columns = columns
        self.output_column = output_column
        self.null_token = Config.NULL_TOKEN if null_token is None else null_token
        self.audit_logger = DerivationAuditLogger()
        self.undefined_rows: List[dict] = []

    def derive_row(self, row: Dict[str, Any]) -> Any:
        """Apply the derivation function to one row."""
        args = [self._cell_value(row, column) for column in self.columns]
        return evaluate(self.function_name, *args)

    def process_file(self, input_file: str, output_file: Optional[str] = None) -> BatchStatistics:
        """
        Derive a value for every row of a CSV file.

        Args:
            input_file: Path to the input CSV file
            output_file: Output file path (no output written if None)

        Returns:
            Batch statistics
        """
        logging.info(f"Processing field file: {input_file}")

        stats = BatchStatistics(function_name=self.function_name)
        self.undefined_rows = []

        with open(input_file, 'r', encoding='utf-8') as infile:
            reader = csv.DictReader(infile)
            fieldnames = list(reader.fieldnames or [])

            missing = [c for c in self.columns if c not in fieldnames]
            if missing:
                logging.warning(f"Input columns not found, treated as absent: {', '.join(missing)}")

            processed_records = []
            for line_number, row in enumerate(reader, start=2):
                result = self.derive_row(row)
                stats.record(result)
                self.audit_logger.log_derivation(self.function_name, line_number, result)
                if result is None or result == '':
                    self.undefined_rows.append({'line': line_number, 'row': dict(row)})
                row[self.output_column] = '' if result is None else result
                processed_records.append(row)

        if self.output_column not in fieldnames:
            fieldnames.append(self.output_column)

        if output_file:
            self._write_output_file(output_file, fieldnames, processed_records)

        self.audit_logger.log_session_summary(stats)
        return stats

    def get_undefined_rows(self) -> List[dict]:
        """Rows for which nothing could be derived."""
        return self.undefined_rows.copy()

    def _cell_value(self, row: Dict[str, Any], column: str) -> Optional[str]:
        """Read a cell; missing cells and the null token become None."""
        value = row.get(column)
        if value is None or value == self.null_token:
            return None
        return value

    def _write_output_file(self, output_file: str, fieldnames: List[str], records: List[dict]):
        """Write processed records to output file."""
        with open(output_file, 'w', newline='', encoding='utf-8') as outfile:
            writer = csv.DictWriter(outfile, fieldnames=fieldnames)
            writer.writeheader()
            writer.writerows(records)
