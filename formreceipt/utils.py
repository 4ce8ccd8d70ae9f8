# -*- coding: utf-8 -*-

import logging
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

# Month names as used in Algeria (ar-DZ)
AR_DZ_MONTHS = (
    'جانفي', 'فيفري', 'مارس', 'أفريل', 'ماي', 'جوان',
    'جويلية', 'أوت', 'سبتمبر', 'أكتوبر', 'نوفمبر', 'ديسمبر',
)
AR_AM = 'ص'
AR_PM = 'م'


def utc_now_iso():
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def parse_timestamp(value):
    """Parse an ISO-8601 timestamp (``Z`` suffix allowed). Returns None if unparseable."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def get_timezone(tz_name):
    """Zone for tz_name, or UTC when it is empty or unknown."""
    if not tz_name:
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        logger.warning("Unknown time zone '%s', using UTC: %s", tz_name, e)
        return timezone.utc


def format_arabic_date(value, tz_name=None, placeholder='N/A'):
    """Format a timestamp like '18 أكتوبر 2026 في 02:30 م'."""
    parsed = parse_timestamp(value)
    if parsed is None:
        return placeholder
    parsed = parsed.astimezone(get_timezone(tz_name))

    hour = parsed.hour % 12 or 12
    period = AR_AM if parsed.hour < 12 else AR_PM
    return '{} {} {} في {:02d}:{:02d} {}'.format(
        parsed.day, AR_DZ_MONTHS[parsed.month - 1], parsed.year,
        hour, parsed.minute, period)
