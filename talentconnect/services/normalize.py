import logging
import re
from datetime import datetime, timezone
from typing import Any, Optional
from urllib.parse import urlparse

from talentconnect.constants import AVAILABILITY_VALUES, AVAILABLE, BUSY, SALARY_BRACKETS

log = logging.getLogger("talentconnect.normalize")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def norm_availability(raw: Optional[str]) -> str:
    """Normalize availability; missing values default to 'available' like new profiles do."""
    if raw is None:
        return AVAILABLE
    s = str(raw).strip().lower()
    if not s:
        return AVAILABLE
    return s  # unknown values are left for schema validation to reject


def stored_availability(raw: Optional[str]) -> str:
    """Availability of an existing row: anything not 'available' ranks as busy."""
    s = norm_availability(raw)
    if s not in AVAILABILITY_VALUES:
        log.warning("Unknown availability %r; treating as %s", raw, BUSY)
        return BUSY
    return s


def is_available(availability: Optional[str]) -> bool:
    return availability == AVAILABLE


def parse_created_at(raw: Any) -> Optional[datetime]:
    """
    Convert a createdAt value to an aware datetime (UTC when no zone given).
    Supports datetime objects, ISO strings, 'YYYY-MM-DD HH:MM:SS' and numeric
    epoch seconds/milliseconds. Returns None if unrecognized.
    """
    if raw is None or raw == "":
        return None

    if isinstance(raw, datetime):
        return raw if raw.tzinfo else raw.replace(tzinfo=timezone.utc)

    # numeric timestamps
    if isinstance(raw, (int, float)) and not isinstance(raw, bool):
        n = float(raw)
        try:
            return datetime.fromtimestamp(n / 1000 if n >= 1e12 else n, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            log.warning("createdAt epoch %r out of range: %s", raw, e)
            return None

    s = str(raw).strip()
    if re.fullmatch(r"\d+(\.\d+)?", s):
        return parse_created_at(float(s))

    # ISO 8601 (also accepts the space separator MySQL rows use)
    try:
        dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
        return dt if dt.tzinfo else dt.replace(tzinfo=timezone.utc)
    except ValueError:
        pass

    log.warning("Unrecognized createdAt value %r", raw)
    return None


def recency_key(created_at: Optional[datetime]) -> float:
    """Sort key: newer is larger; unknown dates sort as oldest."""
    return (created_at or _EPOCH).timestamp()


def salary_in_bracket(expected_salary: Optional[str], bracket: Optional[str]) -> bool:
    """
    Coarse salary filter: the bracket matches when any of its number fragments
    appears anywhere in the free-text salary ("70" matches "70k" and "170k").
    Unknown or empty brackets do not filter.
    """
    if not bracket:
        return True
    fragments = SALARY_BRACKETS.get(bracket.strip().lower())
    if fragments is None:
        log.warning("Unknown salary bracket %r; not filtering on salary", bracket)
        return True
    text = expected_salary or ""
    return any(f in text for f in fragments)


def validate_url(url: Optional[str]) -> Optional[str]:
    """Keep only absolute http(s) URLs; anything else becomes None."""
    if not url or not url.strip():
        return None
    candidate = url.strip()
    try:
        parsed = urlparse(candidate)
    except ValueError:
        return None
    if parsed.scheme in {"http", "https"} and parsed.netloc:
        return candidate
    return None


def contains_ci(haystack: Optional[str], needle: str) -> bool:
    """Case-insensitive substring test; empty haystack never matches."""
    if not haystack:
        return False
    return needle.lower() in haystack.lower()


def clean_text(raw: Optional[str]) -> Optional[str]:
    """Trim; blank becomes None."""
    if raw is None:
        return None
    s = str(raw).strip()
    return s or None
