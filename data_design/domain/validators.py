"""Pure field validators shared by every domain entity.

Each validator takes a raw caller-supplied value, normalizes it and either
returns the typed value or raises a :class:`ValidationError` subclass. None
of them touch the store or keep state.
"""

import re
import uuid
from datetime import datetime, timedelta, timezone

from email_validator import EmailNotValidError, validate_email as _check_email

from data_design.domain.exceptions import ImpossibleDate, InvalidFormat, ValidationError

_TIMESTAMP_PATTERN = re.compile(
    r"(?P<year>[0-9]{4})-(?P<month>[0-9]{2})-(?P<day>[0-9]{2})"
    r"[ T](?P<hour>[0-9]{2}):(?P<minute>[0-9]{2}):(?P<second>[0-9]{2})"
    r"(?:\.(?P<fraction>[0-9]{1,6}))?"
    r"(?P<offset>Z|[+-][0-9]{2}:[0-9]{2})?"
)
_CANONICAL_IDENTIFIER_PATTERN = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_HEX_PATTERN = re.compile(r"[0-9a-f]+")

IdentifierInput = str | bytes | bytearray | memoryview | uuid.UUID
TimestampInput = datetime | str


def validate_identifier(value: IdentifierInput, field: str = "id") -> uuid.UUID:
    """Normalize a canonical string, 16 raw bytes or a UUID into a UUID."""
    if isinstance(value, uuid.UUID):
        return value

    if isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
        if len(raw) != 16:
            raise InvalidFormat(field, f"binary identifier must be 16 bytes, got {len(raw)}")
        return uuid.UUID(bytes=raw)

    if isinstance(value, str):
        candidate = value.strip()
        if _CANONICAL_IDENTIFIER_PATTERN.fullmatch(candidate) is None:
            raise InvalidFormat(field, f"'{value}' is not a canonical identifier")
        return uuid.UUID(candidate)

    raise InvalidFormat(field, f"cannot build an identifier from {type(value).__name__}")


def validate_timestamp(value: TimestampInput, field: str = "timestamp") -> datetime:
    """Normalize a datetime or a ``YYYY-MM-DD HH:MM:SS[.ffffff]`` string to aware UTC.

    Naive datetimes are taken to already be in UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return _to_utc(value, field)

    if not isinstance(value, str):
        raise InvalidFormat(field, f"cannot build a timestamp from {type(value).__name__}")

    match = _TIMESTAMP_PATTERN.fullmatch(value.strip())
    if match is None:
        raise InvalidFormat(field, f"'{value}' is not a valid date and time")

    parts = match.groupdict()
    fraction = (parts["fraction"] or "").ljust(6, "0")
    try:
        tz = _parse_offset(parts["offset"])
        parsed = datetime(
            int(parts["year"]),
            int(parts["month"]),
            int(parts["day"]),
            int(parts["hour"]),
            int(parts["minute"]),
            int(parts["second"]),
            int(fraction),
            tzinfo=tz,
        )
    except ValueError as exc:
        raise ImpossibleDate(field, f"'{value}' is not a date that exists") from exc
    return _to_utc(parsed, field)


def validate_text(value: str, field: str, max_length: int) -> str:
    """Trim a string and reject it when empty or longer than ``max_length``."""
    if not isinstance(value, str):
        raise InvalidFormat(field, f"expected text, got {type(value).__name__}")
    value = value.strip()
    if not value:
        raise ValidationError(field, "value is empty")
    if len(value) > max_length:
        raise ValidationError(field, f"value is longer than {max_length} characters")
    return value


def validate_email(value: str, field: str = "email", max_length: int = 128) -> str:
    """Trim and syntax-check an email address; deliverability is not checked."""
    value = validate_text(value, field, max_length)
    try:
        checked = _check_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValidationError(field, f"'{value}' is not a valid email address") from exc
    return checked.normalized


def validate_hex(value: str, field: str, length: int) -> str:
    """Trim and lowercase a hexadecimal string that must be exactly ``length`` long."""
    if not isinstance(value, str):
        raise InvalidFormat(field, f"expected hexadecimal text, got {type(value).__name__}")
    value = value.strip().lower()
    if not value:
        raise ValidationError(field, "value is empty")
    if _HEX_PATTERN.fullmatch(value) is None:
        raise ValidationError(field, "value is not hexadecimal")
    if len(value) != length:
        raise ValidationError(field, f"value must be exactly {length} characters, got {len(value)}")
    return value


def _to_utc(value: datetime, field: str) -> datetime:
    # Offsets near year 1 or year 9999 can push the UTC instant out of range
    try:
        return value.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ImpossibleDate(field, f"'{value}' falls outside the representable range in UTC") from exc


def _parse_offset(raw: str | None) -> timezone:
    if raw is None or raw == "Z":
        return timezone.utc
    sign = -1 if raw[0] == "-" else 1
    hours, minutes = int(raw[1:3]), int(raw[4:6])
    if minutes >= 60:
        raise ValueError(f"offset minutes out of range: {raw}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))
