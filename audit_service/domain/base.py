from datetime import UTC, datetime, timedelta
from typing import Optional

from audit_service.domain.errors import ValidationError


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (the store keeps naive UTC)."""
    return datetime.now(UTC).replace(tzinfo=None)


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None or value.tzinfo is None:
        return value
    try:
        return value.astimezone(UTC).replace(tzinfo=None)
    except OverflowError:
        raise ValidationError(f"Date out of range: {value.isoformat()}") from None


def utc_ago(**window) -> datetime:
    """utcnow() minus a timedelta(**window); windows reaching past year 1 are rejected."""
    try:
        return utcnow() - timedelta(**window)
    except OverflowError:
        raise ValidationError(f"Time window out of range: {window}") from None
