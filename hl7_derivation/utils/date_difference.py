"""
Point-in-time parsing and elapsed time calculation.

HL7 DTM values carry their own precision: "2024" is a year, "20240101" a day,
"202401011230-0500" a minute with an offset. Only values with a time of day
can be compared in minutes; anything coarser makes the difference undefined.
"""

import logging
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..config import Config
from ..exceptions import TemporalParseError
from .normalizers import get_string_value

logger = logging.getLogger(__name__)

Temporal = Union[date, datetime]

HL7_DTM = re.compile(
    r'^(?P<year>\d{4})'
    r'(?:(?P<month>\d{2})'
    r'(?:(?P<day>\d{2})'
    r'(?:(?P<hour>\d{2})'
    r'(?:(?P<minute>\d{2})'
    r'(?:(?P<second>\d{2})'
    r'(?:\.(?P<fraction>\d{1,4}))?'
    r')?)?)?)?)?'
    r'(?P<offset>[+-]\d{4})?$',
    re.ASCII
)

MICROSECONDS_PER_MINUTE = 60 * 1000 * 1000


def _parse_offset(offset: str) -> timezone:
    sign = -1 if offset[0] == '-' else 1
    hours, minutes = int(offset[1:3]), int(offset[3:5])
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def _parse_hl7_dtm(text: str) -> Optional[Temporal]:
    match = HL7_DTM.match(text)
    if not match:
        return None

    parts = match.groupdict()
    if parts['day'] is None:
        raise TemporalParseError(f"'{text}' has no day precision", text)

    year, month, day = int(parts['year']), int(parts['month']), int(parts['day'])
    if parts['hour'] is None:
        return date(year, month, day)

    fraction = parts['fraction'] or ''
    microsecond = int(fraction.ljust(6, '0')) if fraction else 0
    tzinfo = _parse_offset(parts['offset']) if parts['offset'] else None
    return datetime(year, month, day,
                    int(parts['hour']),
                    int(parts['minute'] or 0),
                    int(parts['second'] or 0),
                    microsecond,
                    tzinfo=tzinfo)


def _parse_iso(text: str) -> Optional[Temporal]:
    if len(text) == 10:
        return date.fromisoformat(text)
    return datetime.fromisoformat(text.replace('Z', '+00:00'))


def _apply_default_zone(value: Temporal, zone_id: Optional[str]) -> Temporal:
    if not zone_id or not isinstance(value, datetime) or value.tzinfo is not None:
        return value
    try:
        return value.replace(tzinfo=ZoneInfo(zone_id))
    except (ZoneInfoNotFoundError, ValueError, TypeError, OSError) as e:
        logger.warning(f"Ignoring invalid default zone id '{zone_id}': {e}")
        return value


def parse_temporal(value: Any, strict: bool = False, zone_id: Optional[str] = None) -> Optional[Temporal]:
    """
    Parse an HL7 DTM or ISO 8601 value into a date or datetime.

    Args:
        value: Field value holding the point in time
        strict: Raise ``TemporalParseError`` instead of returning None
        zone_id: Zone for values without an offset (defaults to
            ``Config.DEFAULT_ZONE_ID``)

    Returns:
        ``date`` for day precision, ``datetime`` (naive or aware) for time
        precision, None when the value is blank or cannot be parsed
    """
    text = get_string_value(value)
    if text is None:
        return None

    if zone_id is None:
        zone_id = Config.DEFAULT_ZONE_ID

    try:
        parsed = _parse_hl7_dtm(text)
        if parsed is None:
            parsed = _parse_iso(text)
    except TemporalParseError:
        if strict:
            raise
        return None
    except ValueError as e:
        if strict:
            raise TemporalParseError(f"Cannot parse '{text}': {e}", text) from e
        logger.warning(f"Cannot parse date/time '{text}': {e}")
        return None

    return _apply_default_zone(parsed, zone_id)


def _truncated_minutes(delta: timedelta) -> int:
    microseconds = (delta.days * 86400 + delta.seconds) * 1000000 + delta.microseconds
    minutes = abs(microseconds) // MICROSECONDS_PER_MINUTE
    return -minutes if microseconds < 0 else minutes


def diff_date_min(start: Any, end: Any) -> Optional[int]:
    """
    Return the difference end - start in whole minutes.

    Args:
        start: Start point in time
        end: End point in time

    Returns:
        Signed minutes truncated toward zero, or None when either value cannot
        be parsed or the two values cannot be compared at minute precision
    """
    logger.info(f"Generating time diff in min from var1 {start}, var2 {end}")

    try:
        date1 = parse_temporal(start, strict=True)
        date2 = parse_temporal(end, strict=True)
    except TemporalParseError as e:
        logger.warning(f"Cannot evaluate time difference for start: {start} , end: {end} reason {e}")
        return None

    logger.info(f"temporal dates start: {date1} , end: {date2}")
    if date1 is None or date2 is None:
        return None

    if not isinstance(date1, datetime) or not isinstance(date2, datetime):
        logger.warning(f"Cannot evaluate time difference for start: {start} , end: {end} "
                       f"reason minutes are not supported for date-only values")
        return None

    # Aware values sharing a tzinfo subtract as wall-clock time; compare instants.
    if date1.tzinfo is not None and date2.tzinfo is not None:
        date1 = date1.astimezone(timezone.utc)
        date2 = date2.astimezone(timezone.utc)

    try:
        delta = date2 - date1
    except TypeError as e:
        logger.warning(f"Cannot evaluate time difference for start: {start} , end: {end} reason {e}")
        logger.debug(f"Offset-aware and offset-naive values for start: {date1!r} , end: {date2!r}")
        return None

    return _truncated_minutes(delta)
