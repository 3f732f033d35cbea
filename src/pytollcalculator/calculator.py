"""Daily toll fee aggregation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime, time

from .exceptions import MixedDayError
from .holidays import HolidayLookup, holiday_set, is_exempt_date
from .models import ChargeInterval, FeeBreakdown, VehicleType
from .schedule import load_schedule
from .util import ensure_timestamps, parse_vehicle_type

_LOGGER = logging.getLogger(__name__)


def fee_for_time(value: time) -> int:
    """Return the band fee for a time of day, 0 outside charged hours."""
    return load_schedule().fee_for_time(value.replace(second=0, microsecond=0, tzinfo=None))


def is_toll_free_vehicle(vehicle: VehicleType | str | None) -> bool:
    vehicle_type = parse_vehicle_type(vehicle)
    return vehicle_type is not None and vehicle_type.is_toll_free


def toll_fee_at(
    timestamp: datetime,
    vehicle: VehicleType | str | None,
    *,
    holidays: HolidayLookup = holiday_set,
) -> int:
    """Return the fee for a single passage, ignoring other passages that day."""
    if is_toll_free_vehicle(vehicle) or is_exempt_date(timestamp, holidays=holidays):
        return 0
    return fee_for_time(timestamp.time())


def daily_fee_breakdown(
    vehicle: VehicleType | str | None,
    timestamps: Iterable[datetime],
    *,
    holidays: HolidayLookup = holiday_set,
) -> FeeBreakdown:
    """Fold one day of passages into charge intervals.

    A charge interval starts at a passage and absorbs every later passage at
    most an hour after that start; it is charged the highest single fee seen
    inside it. The sum over intervals is capped at the daily maximum.

    Raises:
        MixedDayError: If the passages fall on more than one calendar date.
    """
    vehicle_type = parse_vehicle_type(vehicle)
    ordered = sorted(ensure_timestamps(timestamps))
    if not ordered:
        return FeeBreakdown(intervals=(), uncapped_total=0, total=0)

    first_day = ordered[0].date()
    for timestamp in ordered:
        if timestamp.date() != first_day:
            raise MixedDayError(
                f"All passages must be on the same day: {first_day.isoformat()} "
                f"and {timestamp.date().isoformat()} given.",
                user_message="Split passages by calendar day before calculating fees.",
            )

    schedule = load_schedule()
    _LOGGER.debug(
        "Daily fee for %s started (%s passages on %s)",
        vehicle_type.value if vehicle_type else None,
        len(ordered),
        first_day.isoformat(),
    )
    intervals: list[ChargeInterval] = []
    first_fee = toll_fee_at(ordered[0], vehicle_type, holidays=holidays)
    interval = ChargeInterval(start=ordered[0], fee=first_fee)
    total = first_fee
    for timestamp in ordered[1:]:
        elapsed = (timestamp - interval.start).total_seconds()
        fee = toll_fee_at(timestamp, vehicle_type, holidays=holidays)
        if elapsed <= schedule.charge_interval_seconds:
            if fee > interval.fee:
                total += fee - interval.fee
            interval = ChargeInterval(
                start=interval.start,
                fee=max(fee, interval.fee),
                passages=interval.passages + 1,
            )
        else:
            intervals.append(interval)
            interval = ChargeInterval(start=timestamp, fee=fee)
            total += fee
    intervals.append(interval)

    capped = min(total, schedule.daily_cap)
    if capped < total:
        _LOGGER.debug("Daily fee capped from %s to %s", total, capped)
    _LOGGER.debug("Daily fee completed: %s intervals, total %s", len(intervals), capped)
    return FeeBreakdown(intervals=tuple(intervals), uncapped_total=total, total=capped)


def total_daily_fee(
    vehicle: VehicleType | str | None,
    timestamps: Iterable[datetime],
    *,
    holidays: HolidayLookup = holiday_set,
) -> int:
    """Return the capped toll fee for one vehicle's passages on one day."""
    return daily_fee_breakdown(vehicle, timestamps, holidays=holidays).total
