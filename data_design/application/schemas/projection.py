"""Conversions used when an entity is rendered for external consumers."""

import uuid
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MICROSECOND = timedelta(microseconds=1)


def canonical_identifier(value: object) -> object:
    """Render a UUID as its 36-character canonical text."""
    if isinstance(value, uuid.UUID):
        return str(value)
    return value


def epoch_millis(value: object) -> object:
    """Render a datetime as whole milliseconds since the Unix epoch, rounded half up."""
    if not isinstance(value, datetime):
        return value
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    micros = (value - _EPOCH) // _ONE_MICROSECOND
    return (micros + 500) // 1000
