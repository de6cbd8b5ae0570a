"""
Audit logging and reporting for batch field derivation.

Provides structured log lines for each derived row and a plain text quality
report for a finished batch.
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..core.data_models import BatchStatistics


class DerivationAuditLogger:
    """
    Audit logging for batch field derivation.

    One log line per row, so a derived attribute can be traced back to the
    input line it came from.
    """

    def __init__(self, logger_name: str = "field_derivation"):
        """
        Initialize derivation audit logger.

        Args:
            logger_name: Name for the logger instance
        """
        self.logger = logging.getLogger(logger_name)
        self.session_start_time = datetime.now()

    def log_derivation(self, function_name: str, line_number: int, result: Any) -> None:
        """
        Log the outcome of one derivation.

        Args:
            function_name: Derivation function applied
            line_number: Input line the values came from
            result: Derived value
        """
        if result is None or result == '':
            self.logger.warning(f"NOT_DERIVED - Line {line_number} - {function_name} produced no value")
            return
        self.logger.info(f"DERIVED - Line {line_number} - {function_name}: {result!r}")

    def log_session_summary(self, stats: BatchStatistics) -> None:
        """
        Log summary statistics for the derivation session.

        Args:
            stats: Batch statistics to log
        """
        session_duration = datetime.now() - self.session_start_time

        self.logger.info(f"DERIVATION_SESSION_COMPLETE - Duration: {session_duration}")
        self.logger.info(f"FUNCTION: {stats.function_name}")
        self.logger.info(f"TOTAL_PROCESSED: {stats.total_processed}")
        self.logger.info(f"DERIVED: {stats.derived}")
        self.logger.info(f"NOT_DERIVED: {stats.not_derived}")

        if stats.value_counts:
            self.logger.info("VALUE_DISTRIBUTION:")
            for value, count in sorted(stats.value_counts.items()):
                self.logger.info(f"  {value}: {count}")


def generate_derivation_quality_report(stats: BatchStatistics,
                                       undefined_rows: Optional[List[Dict[str, Any]]] = None,
                                       max_values: int = 10) -> str:
    """
    Generate a data quality report for a derivation batch.

    Args:
        stats: Batch statistics
        undefined_rows: Rows that produced no value
        max_values: How many distinct values and rows to list

    Returns:
        Formatted report
    """
    report_lines = []

    report_lines.extend([
        "=" * 70,
        "FIELD DERIVATION QUALITY REPORT",
        "=" * 70,
        f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}",
        f"Function: {stats.function_name}",
        ""
    ])

    total = stats.total_processed
    if total > 0:
        derived_rate = (stats.derived / total) * 100
        not_derived_rate = (stats.not_derived / total) * 100

        report_lines.extend([
            "OVERALL METRICS:",
            f"  Total rows processed: {total:,}",
            f"  Values derived: {stats.derived:,} ({derived_rate:.1f}%)",
            f"  No value derived: {stats.not_derived:,} ({not_derived_rate:.1f}%)",
            ""
        ])
    else:
        report_lines.extend(["No rows processed.", ""])

    if stats.value_counts:
        report_lines.append("VALUE DISTRIBUTION:")
        ranked = sorted(stats.value_counts.items(), key=lambda x: x[1], reverse=True)
        for value, count in ranked[:max_values]:
            percentage = (count / total * 100) if total > 0 else 0
            report_lines.append(f"  {value}: {count:,} ({percentage:.1f}%)")
        if len(ranked) > max_values:
            report_lines.append(f"  ... and {len(ranked) - max_values} more distinct values")
        report_lines.append("")

    if undefined_rows:
        report_lines.extend([
            f"ROWS WITHOUT A VALUE ({len(undefined_rows)} items):",
            "-" * 50
        ])
        for item in undefined_rows[:max_values]:
            cells = ", ".join(f"{k}={v!r}" for k, v in item.get('row', {}).items())
            report_lines.append(f"  line {item.get('line', '?')}: {cells}")
        if len(undefined_rows) > max_values:
            report_lines.append(f"    ... and {len(undefined_rows) - max_values} more items")
        report_lines.append("")

    report_lines.append("=" * 70)
    return "\n".join(report_lines)
