"""
BookmarkTree - Timestamp Attributes

Netscape exports store ADD_DATE and LAST_MODIFIED as decimal seconds since
the Unix epoch.
"""

import logging
import re
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger(__name__)

_EPOCH_PATTERN = re.compile(r"[+-]?\d+")


def parse_epoch(value: Optional[str]) -> Optional[datetime]:
    """
    Convert an epoch-seconds attribute value to an aware UTC datetime.

    Args:
        value: Attribute text, or None if the attribute is missing

    Returns:
        The parsed instant, or None when the value is empty or unparseable
    """
    value = (value or "").strip()
    if not value:
        return None

    if not _EPOCH_PATTERN.fullmatch(value):
        logger.warning(f"Error parsing timestamp: {value!r} is not a decimal epoch value")
        return None

    try:
        return datetime.fromtimestamp(int(value), tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        logger.warning(f"Error parsing timestamp: {value!r} is out of range ({e})")
        return None
