"""Core data model and named function surface."""

# Import main classes for easier access
from .data_models import (
    EncounterStatus,
    AddressUse,
    AddressType,
    Field,
    RepetitionCount,
    Segment,
    BatchStatistics
)

__all__ = [
    'EncounterStatus',
    'AddressUse',
    'AddressType',
    'Field',
    'RepetitionCount',
    'Segment',
    'BatchStatistics'
]
