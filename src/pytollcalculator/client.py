"""Calculator facade with a per-instance holiday cache."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from datetime import date, datetime

from .calculator import daily_fee_breakdown, toll_fee_at, total_daily_fee
from .holidays import holiday_set, is_exempt_date
from .models import FeeBreakdown, VehicleType

_LOGGER = logging.getLogger(__name__)


class TollCalculator:
    """Facade for fee calculations that reuses holiday sets across calls."""

    def __init__(self) -> None:
        self._holiday_cache: dict[int, frozenset[date]] = {}
        self._lock = threading.Lock()

    def toll_free_dates(self, year: int) -> frozenset[date]:
        with self._lock:
            cached = self._holiday_cache.get(year)
            if cached is None:
                _LOGGER.debug("Building holiday set for %s", year)
                cached = holiday_set(year)
                self._holiday_cache[year] = cached
            return cached

    def clear_cache(self) -> None:
        """Drop cached holiday sets."""
        with self._lock:
            self._holiday_cache.clear()

    def is_toll_free_date(self, day: date) -> bool:
        return is_exempt_date(day, holidays=self.toll_free_dates)

    def get_toll_fee_at(self, timestamp: datetime, vehicle: VehicleType | str | None) -> int:
        return toll_fee_at(timestamp, vehicle, holidays=self.toll_free_dates)

    def get_toll_fee(
        self,
        vehicle: VehicleType | str | None,
        timestamps: Iterable[datetime],
    ) -> int:
        return total_daily_fee(vehicle, timestamps, holidays=self.toll_free_dates)

    def get_breakdown(
        self,
        vehicle: VehicleType | str | None,
        timestamps: Iterable[datetime],
    ) -> FeeBreakdown:
        return daily_fee_breakdown(vehicle, timestamps, holidays=self.toll_free_dates)
