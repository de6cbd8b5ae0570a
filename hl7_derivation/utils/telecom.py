"""
Telecom (XTN) number formatting.

Builds a user friendly ContactPoint value from the XTN parts:
    +22 650 555 1234 ext. 89   country, area, local and extension
    (650) 555 1234             area and local
    555 1234                   local only
Without a local number the unformatted number (XTN.12) is used, then the
legacy telephone number string (XTN.1).
"""

import logging
from typing import Any, Optional

from .normalizers import get_string_value

logger = logging.getLogger(__name__)

# The local number is split after the exchange: 555 1234
LOCAL_NUMBER_SPLIT = 3


def get_formatted_telecom_number_value(xtn1_old: Any, xtn5_country: Any, xtn6_area: Any,
                                       xtn7_local: Any, xtn8_extension: Any,
                                       xtn12_unformatted: Any) -> str:
    """
    Format a telephone number from its XTN components.

    Args:
        xtn1_old: Telephone number as a single string (XTN.1, deprecated)
        xtn5_country: Country code (XTN.5)
        xtn6_area: Area/city code (XTN.6)
        xtn7_local: Local number (XTN.7)
        xtn8_extension: Extension (XTN.8)
        xtn12_unformatted: Unformatted telephone number (XTN.12)

    Returns:
        The formatted number, or "" when no part is present
    """
    local = get_string_value(xtn7_local)
    if local is not None:
        value = format_country_and_area(xtn5_country, xtn6_area) + format_local_number(local)
        extension = get_string_value(xtn8_extension)
        if extension is not None:
            value = f"{value} ext. {extension}"
        return value

    unformatted = get_string_value(xtn12_unformatted)
    if unformatted is not None:
        return unformatted

    old = get_string_value(xtn1_old)
    if old is not None:
        return old

    return ''


def format_local_number(local_number: str) -> str:
    """Split a seven digit local number after the third digit: 123 4567."""
    if len(local_number) <= LOCAL_NUMBER_SPLIT:
        logger.warning(f"Local number '{local_number}' is too short to split, using it unformatted")
        return local_number
    return f"{local_number[:LOCAL_NUMBER_SPLIT]} {local_number[LOCAL_NUMBER_SPLIT:]}"


def format_country_and_area(country: Any, area: Any) -> str:
    """Prefix for the local number; empty unless there is an area code."""
    area_code: Optional[str] = get_string_value(area)
    if area_code is None:
        return ''
    country_code = get_string_value(country)
    if country_code is not None:
        return f"+{country_code} {area_code} "
    return f"({area_code}) "
