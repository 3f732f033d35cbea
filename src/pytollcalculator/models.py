"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time
from enum import Enum


class VehicleType(str, Enum):
    CAR = "Car"
    MOTORBIKE = "Motorbike"
    TRACTOR = "Tractor"
    EMERGENCY = "Emergency"
    DIPLOMAT = "Diplomat"
    FOREIGN = "Foreign"
    MILITARY = "Military"

    @property
    def is_toll_free(self) -> bool:
        return self in TOLL_FREE_VEHICLES


TOLL_FREE_VEHICLES = frozenset(
    {
        VehicleType.MOTORBIKE,
        VehicleType.TRACTOR,
        VehicleType.EMERGENCY,
        VehicleType.DIPLOMAT,
        VehicleType.FOREIGN,
        VehicleType.MILITARY,
    }
)


@dataclass(frozen=True, slots=True)
class FeeBand:
    """Half-open time-of-day range ``[start, end)`` charged at ``fee``."""

    start: time
    end: time
    fee: int

    def contains(self, value: time) -> bool:
        return self.start <= value < self.end


@dataclass(frozen=True, slots=True)
class ChargeInterval:
    start: datetime
    fee: int
    passages: int = 1


@dataclass(frozen=True, slots=True)
class FeeBreakdown:
    intervals: tuple[ChargeInterval, ...]
    uncapped_total: int
    total: int

    @property
    def capped(self) -> bool:
        return self.total < self.uncapped_total
