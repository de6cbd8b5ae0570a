"""
Reference range extraction for observation results.

A reference range such as OBX-7 arrives as free text ("3.5-5.0", "<0.50 IU/mL",
"649-1346 cells/mcL"). Two numbers mean a lower and an upper limit. A single
number is always the upper limit: for a toxic substance the upper limit is the
toxic limit, and we cannot tell a drug from a toxic substance here.

Comparators and other notation are not interpreted. ">0.50", "<0.50" and
"-0.50" all yield the high value 0.50; "0.50-2.50", "0.50 2.50" and
"<0.50 < 2.50" all yield low 0.50 and high 2.50.
"""

import logging
import re
from typing import Any, Optional, Tuple

from .normalizers import get_string_value

logger = logging.getLogger(__name__)

# non-digits (lazy), first number, non-digits, second number (may be empty), rest
FIRST_TWO_NUMBERS_AMID_OTHER_TEXT = re.compile(r'^\D*?([\d.]+)\D*([\d.]*).*', re.ASCII | re.DOTALL)


def _first_two_numbers(value: Any) -> Optional[Tuple[str, str]]:
    text = get_string_value(value)
    if text is None:
        return None
    match = FIRST_TWO_NUMBERS_AMID_OTHER_TEXT.search(text)
    if not match:
        logger.debug(f"No number found in range text '{text}'")
        return None
    return match.group(1), match.group(2)


def extract_low(value: Any) -> Optional[str]:
    """
    Extract the lower limit of a range.

    Returns the first number only when a second number is also present.
    """
    numbers = _first_two_numbers(value)
    if numbers is None:
        return None
    first, second = numbers
    return first if second else None


def extract_high(value: Any) -> Optional[str]:
    """
    Extract the upper limit of a range.

    Returns the second number when present, otherwise the only number.
    """
    numbers = _first_two_numbers(value)
    if numbers is None:
        return None
    first, second = numbers
    return second or first
