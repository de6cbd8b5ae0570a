"""Splitting and joining of delimited field values."""

import logging
from typing import Any, List, Optional

from .normalizers import get_string_value

logger = logging.getLogger(__name__)

ESCAPED_NEWLINE = '\\n'


def split(value: Any, delimiter: str, index: int) -> Optional[str]:
    """
    Return the token at ``index`` after splitting on ``delimiter``.

    The whole delimiter string separates tokens and empty tokens are skipped,
    so "a^^b" split on "^" gives ["a", "b"].

    Returns:
        The token, or None for blank input or an index out of range or not
        an integer
    """
    text = get_string_value(value)
    if text is None:
        return None

    # Template engines may hand the index over as text
    try:
        position = int(index)
    except (TypeError, ValueError):
        logger.warning(f"Split index '{index}' is not an integer")
        return None

    delimiter = get_string_value(delimiter, trim=False)
    tokens = [t for t in text.split(delimiter) if t] if delimiter else [text]
    if 0 <= position < len(tokens):
        return tokens[position]
    return None


def concatenate_with_char(value: Any, delimiter_char: Optional[str]) -> Optional[str]:
    """
    Join every repetition of a field with the given delimiter.

    Template engines hand the delimiter over as text, so a newline arrives as
    the two characters backslash and n. Those are turned back into a newline
    before joining.
    """
    delimiter = ' ' if delimiter_char is None else delimiter_char
    if ESCAPED_NEWLINE in delimiter:
        delimiter = delimiter.replace(ESCAPED_NEWLINE, '\n')

    return get_string_value(value, all_components=True, delimiter=delimiter, trim=False)


def make_string_array(*strs: Optional[str]) -> List[str]:
    """Collect the non-None arguments into a list."""
    return [s for s in strs if s is not None]
