"""Audit logging and batch reports."""

from .audit_logger import DerivationAuditLogger, generate_derivation_quality_report

__all__ = [
    'DerivationAuditLogger',
    'generate_derivation_quality_report'
]
