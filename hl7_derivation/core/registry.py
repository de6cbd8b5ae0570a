"""
Named derivation function surface.

Template expressions refer to derivation rules by name and pass the field
values they extracted positionally, e.g. ``extractHigh(OBX.7)``. Each rule is
registered under its Python name and under the camelCase name used in
templates.

Every rule handles None/blank input itself; ``evaluate`` additionally turns
unknown names and unexpected failures into None so a template never aborts.
"""

import logging
from typing import Any, Callable, Dict, List

from ..exceptions import UnknownFunctionError
from ..utils.address import get_address_district, get_address_type, get_address_use
from ..utils.date_difference import diff_date_min
from ..utils.encounter import get_encounter_status
from ..utils.names import generate_name
from ..utils.numeric_range import extract_high, extract_low
from ..utils.telecom import get_formatted_telecom_number_value
from ..utils.tokenizers import concatenate_with_char, make_string_array, split

logger = logging.getLogger(__name__)


FUNCTION_REGISTRY: Dict[str, Callable[..., Any]] = {
    # Ranges
    'extract_low':                          extract_low,
    'extractLow':                           extract_low,
    'extract_high':                         extract_high,
    'extractHigh':                          extract_high,

    # Names
    'generate_name':                        generate_name,
    'generateName':                         generate_name,

    # Address
    'get_address_use':                      get_address_use,
    'getAddressUse':                        get_address_use,
    'get_address_type':                     get_address_type,
    'getAddressType':                       get_address_type,
    'get_address_district':                 get_address_district,
    'getAddressDistrict':                   get_address_district,

    # Encounter
    'get_encounter_status':                 get_encounter_status,
    'getEncounterStatus':                   get_encounter_status,

    # Telecom
    'get_formatted_telecom_number_value':   get_formatted_telecom_number_value,
    'getFormattedTelecomNumberValue':       get_formatted_telecom_number_value,

    # Date/time
    'diff_date_min':                        diff_date_min,
    'diffDateMin':                          diff_date_min,

    # Tokens
    'split':                                split,
    'concatenate_with_char':                concatenate_with_char,
    'concatenateWithChar':                  concatenate_with_char,
    'make_string_array':                    make_string_array,
    'makeStringArray':                      make_string_array,
}


def get_function(name: str) -> Callable[..., Any]:
    """Look up a derivation function, raising ``UnknownFunctionError``."""
    try:
        return FUNCTION_REGISTRY[name]
    except KeyError:
        raise UnknownFunctionError(f"No derivation function named '{name}'") from None


def evaluate(name: str, *args: Any) -> Any:
    """
    Invoke a derivation function by name.

    Args:
        name: Registered function name (snake_case or template camelCase)
        *args: Field values, passed positionally

    Returns:
        The derived value, or None for an unknown name or a failed call

    Example:
        evaluate("extractHigh", "<0.50 IU/mL")
        # -> "0.50"
    """
    try:
        function = get_function(name)
    except UnknownFunctionError as e:
        logger.error(str(e))
        return None

    try:
        return function(*args)
    except TypeError as e:
        logger.warning(f"Bad arguments for derivation function '{name}': {e}")
        return None
    except Exception as e:
        logger.error(f"Derivation function '{name}' failed: {e}")
        return None


def list_functions() -> List[Dict[str, str]]:
    """
    Describe the registered functions, one entry per function.

    The first registered name is reported as ``id`` and the template alias,
    when there is one, as ``alias``.
    """
    entries: Dict[Callable[..., Any], Dict[str, str]] = {}
    for name, function in FUNCTION_REGISTRY.items():
        entry = entries.get(function)
        if entry is None:
            entries[function] = {
                'id': name,
                'alias': '',
                'description': (function.__doc__ or '').strip().split('\n')[0],
            }
        elif not entry['alias']:
            entry['alias'] = name
    return list(entries.values())
