"""
Parsing of order creation timestamps.

Timestamps carry no offset. They are read as wall-clock time in the given
zone, or in the local system zone when none is given (never UTC by default).
"""

import logging
import re
from datetime import datetime, tzinfo

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# strptime alone accepts single-digit fields, so the shape is checked first
_TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}")


def parse_creation_date(
    text: str, tz: tzinfo | None = None, report_tz: tzinfo | None = None
) -> datetime | None:
    """
    Parse a ``YYYY-MM-DDTHH:MM:SS`` timestamp into an aware datetime.

    Args:
        text: The timestamp text.
        tz: Zone the wall-clock time belongs to. None means the local zone.
        report_tz: Zone to convert the result into. None keeps ``tz``.

    Returns the datetime, or None when the text does not match the format,
    names an impossible date, or falls outside the datetime range once moved
    between zones (e.g. ``0001-01-01T00:00:00`` west of UTC).
    """
    if not isinstance(text, str) or not _TIMESTAMP_RE.fullmatch(text):
        logger.warning("Unparseable creation date %r: expected %s", text, DATE_FORMAT)
        return None

    try:
        naive = datetime.strptime(text, DATE_FORMAT)
        if tz is None:
            # astimezone() on a naive datetime assumes local time
            moment = naive.astimezone()
        else:
            moment = naive.replace(tzinfo=tz)
        if report_tz is not None:
            moment = moment.astimezone(report_tz)
    except (ValueError, OverflowError) as e:
        logger.warning("Unparseable creation date %r: %s", text, e)
        return None

    return moment
