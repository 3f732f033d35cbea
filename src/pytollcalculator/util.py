"""Shared utilities for validation and normalization."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime

from .exceptions import ValidationError
from .models import VehicleType

_VEHICLE_TYPES = {vehicle.value.casefold(): vehicle for vehicle in VehicleType}


def as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise ValidationError("Value must be a date or datetime.")
    return value


def parse_vehicle_type(value: VehicleType | str | None) -> VehicleType | None:
    if value is None or isinstance(value, VehicleType):
        return value
    if not isinstance(value, str):
        raise ValidationError("Vehicle type must be a string.")
    normalized = value.strip().casefold()
    try:
        return _VEHICLE_TYPES[normalized]
    except KeyError:
        raise ValidationError(f"Unknown vehicle type: {value!r}.") from None


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO 8601 passage time, keeping its local wall-clock reading."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Timestamp must be a non-empty string.")
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError(f"Timestamp is not a valid ISO 8601 value: {value!r}.") from exc


def ensure_timestamps(values: Iterable[datetime]) -> list[datetime]:
    if values is None:
        return []
    timestamps = list(values)
    for value in timestamps:
        if not isinstance(value, datetime):
            raise ValidationError("Timestamps must be datetime values.")
    if len({value.tzinfo is None for value in timestamps}) > 1:
        raise ValidationError("Timestamps cannot mix naive and timezone-aware values.")
    return timestamps
