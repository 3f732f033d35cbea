"""pytollcalculator package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .calculator import daily_fee_breakdown, fee_for_time, toll_fee_at, total_daily_fee
from .client import TollCalculator
from .exceptions import MixedDayError, PyTollCalculatorError, ValidationError
from .holidays import easter_sunday, holiday_set, is_exempt_date, midsummer_eve
from .models import TOLL_FREE_VEHICLES, ChargeInterval, FeeBand, FeeBreakdown, VehicleType
from .schedule import FeeSchedule, load_schedule

try:
    __version__ = version("pytollcalculator")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "TOLL_FREE_VEHICLES",
    "ChargeInterval",
    "FeeBand",
    "FeeBreakdown",
    "FeeSchedule",
    "MixedDayError",
    "PyTollCalculatorError",
    "TollCalculator",
    "ValidationError",
    "VehicleType",
    "__version__",
    "daily_fee_breakdown",
    "easter_sunday",
    "fee_for_time",
    "holiday_set",
    "is_exempt_date",
    "load_schedule",
    "midsummer_eve",
    "toll_fee_at",
    "total_daily_fee",
]
