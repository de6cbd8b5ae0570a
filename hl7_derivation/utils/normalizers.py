"""
Value coercion utilities for field derivation.

Every derivation function funnels its inputs through ``get_string_value`` once
at entry, so wrapper objects, repeating fields and plain strings are all
reduced to a plain string (or None) the same way.
"""

from typing import Any, Optional

from ..core.data_models import Field


def get_string_value(value: Any, all_components: bool = False,
                     delimiter: str = ' ', trim: bool = True) -> Optional[str]:
    """
    Reduce a field value to its canonical string form.

    Args:
        value: None, a string, a ``Field``, a list/tuple of repetitions, an
            object exposing ``value``, or anything with a ``str()`` form
        all_components: Encode every component of a ``Field`` instead of
            only the first one
        delimiter: Separator placed between repetitions
        trim: Strip surrounding whitespace; blank results become None

    Returns:
        The string form, or None when there is nothing to return
    """
    if value is None:
        return None

    if isinstance(value, (list, tuple)):
        parts = [get_string_value(v, all_components, delimiter, trim) for v in value]
        joined = delimiter.join(p for p in parts if p is not None)
        return _finish(joined, trim)

    if isinstance(value, Field):
        text = value.encode() if all_components else value.value
    elif isinstance(value, str):
        text = value
    elif hasattr(value, 'value'):
        return get_string_value(value.value, all_components, delimiter, trim)
    else:
        text = str(value)

    return _finish(text, trim)


def _finish(text: Optional[str], trim: bool) -> Optional[str]:
    if text is None:
        return None
    if trim:
        text = text.strip()
    return text if text else None


def is_blank(value: Any) -> bool:
    """True for None, empty and all-whitespace values."""
    return get_string_value(value) is None


def is_not_blank(value: Any) -> bool:
    """True when the value has at least one non-whitespace character."""
    return not is_blank(value)


def equals_ignore_case(value: Optional[str], code: str) -> bool:
    """Case-insensitive comparison that is False for None."""
    return value is not None and value.casefold() == code.casefold()
