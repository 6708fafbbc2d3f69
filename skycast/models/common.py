"""Common helpers shared across models."""

from datetime import UTC, datetime, timedelta

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def from_epoch(seconds: int) -> datetime:
    """Convert epoch seconds to an aware UTC datetime, independent of host tz."""
    return EPOCH + timedelta(seconds=seconds)
