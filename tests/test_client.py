from datetime import date, datetime

import pytest

from pytollcalculator import client as client_module
from pytollcalculator.client import TollCalculator
from pytollcalculator.exceptions import MixedDayError
from pytollcalculator.models import VehicleType


def _counting_holiday_set(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    calls: list[int] = []
    original = client_module.holiday_set

    def wrapped(year: int) -> frozenset[date]:
        calls.append(year)
        return original(year)

    monkeypatch.setattr(client_module, "holiday_set", wrapped)
    return calls


def test_holiday_sets_are_cached_per_year(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _counting_holiday_set(monkeypatch)
    calculator = TollCalculator()

    first = calculator.get_toll_fee(
        VehicleType.CAR, [datetime(2024, 3, 4, 7, 0), datetime(2024, 3, 4, 8, 5)]
    )
    second = calculator.get_toll_fee(VehicleType.CAR, [datetime(2024, 3, 5, 7, 0)])
    calculator.get_toll_fee_at(datetime(2025, 3, 4, 7, 0), VehicleType.CAR)

    assert first == 31
    assert second == 18
    assert calls == [2024, 2025]
    assert calculator.toll_free_dates(2024) is calculator.toll_free_dates(2024)


def test_clear_cache_forces_rebuild(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _counting_holiday_set(monkeypatch)
    calculator = TollCalculator()

    calculator.toll_free_dates(2024)
    calculator.clear_cache()
    calculator.toll_free_dates(2024)

    assert calls == [2024, 2024]


def test_instances_do_not_share_cache(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _counting_holiday_set(monkeypatch)

    TollCalculator().toll_free_dates(2024)
    TollCalculator().toll_free_dates(2024)

    assert calls == [2024, 2024]


def test_is_toll_free_date() -> None:
    calculator = TollCalculator()
    assert calculator.is_toll_free_date(date(2024, 3, 29))
    assert calculator.is_toll_free_date(date(2024, 3, 30))
    assert not calculator.is_toll_free_date(date(2024, 3, 28))


def test_get_breakdown() -> None:
    breakdown = TollCalculator().get_breakdown(
        "Car", [datetime(2024, 3, 4, 6, 0), datetime(2024, 3, 4, 6, 45)]
    )
    assert breakdown.total == 13
    assert len(breakdown.intervals) == 1


def test_get_toll_fee_mixed_days() -> None:
    with pytest.raises(MixedDayError):
        TollCalculator().get_toll_fee(
            VehicleType.CAR, [datetime(2024, 3, 4, 7, 0), datetime(2024, 3, 5, 7, 0)]
        )
