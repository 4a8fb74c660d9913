import logging
import secrets
import string
from datetime import datetime, timezone

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.digits + string.ascii_lowercase
_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def random_id(length: int = 9) -> str:
    """Short lowercase base-36 identifier for users and reports."""
    return ''.join(secrets.choice(_ID_ALPHABET) for _ in range(length))


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime.

    Naive values are taken as UTC. Unparseable values sort as the oldest
    possible time rather than failing the whole listing.
    """
    try:
        parsed = date_parser.isoparse(value)
    except (ValueError, TypeError, OverflowError):
        logger.warning(f"Unparseable timestamp {value!r}, treating as oldest")
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
