"""Person name assembly from XPN components."""

import logging
from typing import Any, Optional

from .normalizers import get_string_value

logger = logging.getLogger(__name__)


def generate_name(prefix: Any, first: Any, middle: Any, family: Any, suffix: Any) -> Optional[str]:
    """
    Build a display name from its parts.

    Args:
        prefix: Name prefix (e.g. "Dr")
        first: Given name
        middle: Second given name or initials
        family: Family name
        suffix: Name suffix (e.g. "Jr")

    Returns:
        Space-joined non-blank parts in the order above, or None if all are blank
    """
    logger.info(f"Generating name from prefix {prefix}, first {first}, middle {middle}, "
                f"family {family}, suffix {suffix}")

    parts = [get_string_value(part) for part in (prefix, first, middle, family, suffix)]
    name = ' '.join(p for p in parts if p is not None)
    return name or None
