"""Fee schedule loading from packaged data."""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import time
from importlib import resources
from importlib.resources.abc import Traversable

from .exceptions import ValidationError
from .models import FeeBand

SCHEDULE_FILENAME = "schedule.json"
SCHEMA_FILENAME = "schedule.schema.json"
_SCHEDULE_CACHE: FeeSchedule | None = None


@dataclass(frozen=True, slots=True)
class FeeSchedule:
    bands: tuple[FeeBand, ...]
    daily_cap: int
    charge_interval_seconds: int

    def fee_for_time(self, value: time) -> int:
        for band in self.bands:
            if band.contains(value):
                return band.fee
        return 0


def _package_root() -> Traversable:
    return resources.files("pytollcalculator")


def load_schedule_schema() -> dict:
    schema_path = _package_root() / SCHEMA_FILENAME
    return json.loads(schema_path.read_text(encoding="utf-8"))


def _parse_clock(value: object, field: str) -> time:
    if not isinstance(value, str):
        raise ValidationError(f"Fee band {field} must be an HH:MM string.")
    try:
        parsed = time.fromisoformat(value)
    except ValueError as exc:
        raise ValidationError(f"Fee band {field} is not a valid HH:MM value.") from exc
    if parsed.second or parsed.microsecond:
        raise ValidationError(f"Fee band {field} must have minute resolution.")
    return parsed


def _is_non_negative_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def build_schedule(data: dict) -> FeeSchedule:
    if not isinstance(data, dict):
        raise ValidationError("Fee schedule must be a JSON object.")
    missing = [key for key in ("daily_cap", "charge_interval_minutes", "bands") if key not in data]
    if missing:
        raise ValidationError(f"Fee schedule missing keys: {', '.join(missing)}.")
    daily_cap = data["daily_cap"]
    interval_minutes = data["charge_interval_minutes"]
    raw_bands = data["bands"]
    if not _is_non_negative_int(daily_cap):
        raise ValidationError("Fee schedule daily_cap must be a non-negative integer.")
    if not _is_non_negative_int(interval_minutes) or interval_minutes == 0:
        raise ValidationError("Fee schedule charge_interval_minutes must be a positive integer.")
    if not isinstance(raw_bands, list) or not raw_bands:
        raise ValidationError("Fee schedule bands must be a non-empty list.")

    bands: list[FeeBand] = []
    for raw in raw_bands:
        if not isinstance(raw, dict):
            raise ValidationError("Fee band must be a JSON object.")
        start = _parse_clock(raw.get("start"), "start")
        end = _parse_clock(raw.get("end"), "end")
        fee = raw.get("fee")
        if not _is_non_negative_int(fee):
            raise ValidationError("Fee band fee must be a non-negative integer.")
        if end <= start:
            raise ValidationError(f"Fee band {start:%H:%M}-{end:%H:%M} is empty.")
        if bands and start < bands[-1].end:
            raise ValidationError(f"Fee band starting {start:%H:%M} overlaps the previous band.")
        bands.append(FeeBand(start=start, end=end, fee=fee))
    return FeeSchedule(
        bands=tuple(bands),
        daily_cap=daily_cap,
        charge_interval_seconds=interval_minutes * 60,
    )


def load_schedule() -> FeeSchedule:
    global _SCHEDULE_CACHE
    if _SCHEDULE_CACHE is not None:
        return _SCHEDULE_CACHE
    schedule_path = _package_root() / SCHEDULE_FILENAME
    try:
        data = json.loads(schedule_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValidationError("Fee schedule is not valid JSON.") from exc
    _SCHEDULE_CACHE = build_schedule(data)
    return _SCHEDULE_CACHE


def clear_schedule_cache() -> None:
    """Clear the cached fee schedule (used in tests)."""
    global _SCHEDULE_CACHE
    _SCHEDULE_CACHE = None
