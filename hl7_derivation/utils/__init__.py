"""Field derivation rules."""

# Import rule functions for easier access
from .normalizers import get_string_value, is_blank, is_not_blank
from .numeric_range import extract_low, extract_high
from .names import generate_name
from .address import (
    get_address_use,
    get_address_type,
    get_address_district,
    inspect_repetitions
)
from .encounter import get_encounter_status
from .telecom import get_formatted_telecom_number_value
from .date_difference import parse_temporal, diff_date_min
from .tokenizers import split, concatenate_with_char, make_string_array

__all__ = [
    'get_string_value',
    'is_blank',
    'is_not_blank',
    'extract_low',
    'extract_high',
    'generate_name',
    'get_address_use',
    'get_address_type',
    'get_address_district',
    'inspect_repetitions',
    'get_encounter_status',
    'get_formatted_telecom_number_value',
    'parse_temporal',
    'diff_date_min',
    'split',
    'concatenate_with_char',
    'make_string_array'
]
