"""
Address attribute resolution from XAD components.

Use and type are decided by ordered rules over the address type (XAD.7), the
temporary indicator (XAD.16), the bad address indicator (XAD.17) and the
address usage (XAD.18). The first rule that matches wins and comparisons
ignore case. When nothing matches an empty string is returned.
"""

import logging
from typing import Any, Optional

from ..core.data_models import AddressType, AddressUse, RepetitionCount
from .normalizers import equals_ignore_case, get_string_value

logger = logging.getLogger(__name__)

# PID-11 Patient Address
PATIENT_ADDRESS_FIELD = 11


def get_address_use(xad7_type: Any, xad16_temp: Any, xad17_bad: Any) -> str:
    """
    Resolve the address use code.

    Args:
        xad7_type: Address type (XAD.7)
        xad16_temp: Temporary indicator (XAD.16)
        xad17_bad: Bad address indicator (XAD.17)

    Returns:
        "temp", "old", "home", "work", "billing" or "" when no rule matches
    """
    logger.info(f"Calculating address Use from XAD.7 {xad7_type}, XAD.16 {xad16_temp}, XAD.17 {xad17_bad}")

    addr_type = get_string_value(xad7_type)
    temp = get_string_value(xad16_temp)
    bad = get_string_value(xad17_bad)

    if equals_ignore_case(temp, 'Y') or (temp is None and equals_ignore_case(addr_type, 'C')):
        return AddressUse.TEMP.value
    if equals_ignore_case(bad, 'Y') or (bad is None and equals_ignore_case(addr_type, 'BA')):
        return AddressUse.OLD.value
    if equals_ignore_case(addr_type, 'H'):
        return AddressUse.HOME.value
    if equals_ignore_case(addr_type, 'B') or equals_ignore_case(addr_type, 'O'):
        return AddressUse.WORK.value
    if equals_ignore_case(addr_type, 'BI'):
        return AddressUse.BILLING.value
    return ''


def get_address_type(xad7_type: Any, xad18_type: Any) -> str:
    """
    Resolve the address type code.

    Returns:
        "postal", "physical" or "" when no rule matches
    """
    logger.info(f"Calculating address Type from XAD.7 {xad7_type}, XAD.18 {xad18_type}")

    addr_type = get_string_value(xad7_type)
    usage = get_string_value(xad18_type)

    if equals_ignore_case(usage, 'M') or (usage is None and equals_ignore_case(addr_type, 'M')):
        return AddressType.POSTAL.value
    if equals_ignore_case(usage, 'V') or (usage is None and equals_ignore_case(addr_type, 'SH')):
        return AddressType.PHYSICAL.value
    return ''


def inspect_repetitions(segment: Any, field_number: int) -> RepetitionCount:
    """
    Count the repetitions of a segment field without raising.

    The segment only needs a ``get_field(number)`` method returning the
    repetitions, as ``Segment`` does.
    """
    if segment is None:
        return RepetitionCount.failure("no segment supplied")

    get_field = getattr(segment, 'get_field', None)
    if not callable(get_field):
        return RepetitionCount.failure(f"{type(segment).__name__} does not expose get_field")

    # Parser libraries raise their own exception types here.
    try:
        repetitions = get_field(field_number)
        count = 0 if repetitions is None else len(repetitions)
    except Exception as e:
        return RepetitionCount.failure(str(e) or type(e).__name__)

    return RepetitionCount.success(count)


def get_address_district(patient_county_pid12: Any, address_county_parish_pid119: Any,
                         patient: Any) -> Optional[str]:
    """
    Resolve the address district.

    The address county/parish (PID-11.9) is used when valued. Otherwise the
    patient county (PID-12) is used, but only if the patient has exactly one
    address (PID-11 repeats once).

    Args:
        patient_county_pid12: Patient county code (PID-12)
        address_county_parish_pid119: Address county/parish (PID-11.9)
        patient: The PID segment, inspected for its address count

    Returns:
        District text or None
    """
    logger.info(f"getAddressCountyParish for {patient}")

    district = get_string_value(address_county_parish_pid119)
    if district is not None:
        return district

    addresses = inspect_repetitions(patient, PATIENT_ADDRESS_FIELD)
    if not addresses.ok:
        logger.debug(f"Cannot count patient addresses, keeping unvalued district: {addresses.error}")
        return district

    if addresses.count == 1:
        return get_string_value(patient_county_pid12)
    return district
