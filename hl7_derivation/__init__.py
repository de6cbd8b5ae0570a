"""
HL7 Field Derivation

Pure, stateless rules turning field values extracted from HL7 v2 messages into
normalized clinical attributes: reference range limits, display names,
address use/type/district, encounter status, telecom numbers, elapsed minutes
and delimited token handling.

None of the rules raise on bad input. When nothing can be derived they return
None, or an empty string for the coded address rules.
"""

from .core.data_models import EncounterStatus, Field, RepetitionCount, Segment
from .core.registry import FUNCTION_REGISTRY, evaluate, list_functions
from .utils import (
    get_string_value,
    extract_low,
    extract_high,
    generate_name,
    get_address_use,
    get_address_type,
    get_address_district,
    get_encounter_status,
    get_formatted_telecom_number_value,
    diff_date_min,
    split,
    concatenate_with_char,
    make_string_array
)

__version__ = "1.0.0"

__all__ = [
    'EncounterStatus',
    'Field',
    'RepetitionCount',
    'Segment',
    'FUNCTION_REGISTRY',
    'evaluate',
    'list_functions',
    'get_string_value',
    'extract_low',
    'extract_high',
    'generate_name',
    'get_address_use',
    'get_address_type',
    'get_address_district',
    'get_encounter_status',
    'get_formatted_telecom_number_value',
    'diff_date_min',
    'split',
    'concatenate_with_char',
    'make_string_array'
]
