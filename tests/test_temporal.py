from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest

from weather_service.core.temporal import as_utc, is_alert_active, to_storage_time, validate_alert_window
from weather_service.errors import ValidationError

from conftest import HOUR, T


def _alert(city_id=1, start_time=T - HOUR, end_time=T + HOUR, is_active=True):
    return SimpleNamespace(city_id=city_id, start_time=start_time, end_time=end_time, is_active=is_active)


class TestIsAlertActive:
    def test_inside_window(self) -> None:
        assert is_alert_active(_alert(), city_id=1, now=T)

    def test_start_is_inclusive(self) -> None:
        assert is_alert_active(_alert(), city_id=1, now=T - HOUR)

    def test_end_is_exclusive(self) -> None:
        assert not is_alert_active(_alert(), city_id=1, now=T + HOUR)

    def test_just_before_end(self) -> None:
        assert is_alert_active(_alert(), city_id=1, now=T + HOUR - timedelta(microseconds=1))

    def test_not_started_yet(self) -> None:
        assert not is_alert_active(_alert(start_time=T + HOUR, end_time=T + 2 * HOUR), city_id=1, now=T)

    @pytest.mark.parametrize("offset", [timedelta(0), timedelta(days=1), timedelta(days=3650)])
    def test_without_end_time_never_expires(self, offset: timedelta) -> None:
        assert is_alert_active(_alert(start_time=T, end_time=None), city_id=1, now=T + offset)

    def test_without_end_time_still_waits_for_start(self) -> None:
        assert not is_alert_active(_alert(start_time=T, end_time=None), city_id=1, now=T - HOUR)

    def test_inactive_flag_wins_over_window(self) -> None:
        assert not is_alert_active(_alert(is_active=False), city_id=1, now=T)
        assert not is_alert_active(_alert(is_active=False, end_time=None), city_id=1, now=T)

    def test_other_city(self) -> None:
        assert not is_alert_active(_alert(city_id=2), city_id=1, now=T)

    def test_naive_store_values_compare_as_utc(self) -> None:
        alert = _alert(start_time=to_storage_time(T - HOUR), end_time=to_storage_time(T + HOUR))
        assert is_alert_active(alert, city_id=1, now=T)
        assert not is_alert_active(alert, city_id=1, now=T + HOUR)

    def test_now_in_another_timezone(self) -> None:
        plus_two = timezone(timedelta(hours=2))
        assert not is_alert_active(_alert(), city_id=1, now=(T + HOUR).astimezone(plus_two))


class TestValidateAlertWindow:
    def test_open_ended_window_is_valid(self) -> None:
        validate_alert_window(T, None)

    def test_ordered_window_is_valid(self) -> None:
        validate_alert_window(T, T + timedelta(seconds=1))

    def test_equal_bounds_are_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must be before"):
            validate_alert_window(T, T)

    def test_reversed_bounds_are_rejected(self) -> None:
        with pytest.raises(ValidationError):
            validate_alert_window(T + HOUR, T)

    def test_compares_instants_not_wall_clock(self) -> None:
        # 13:00+02:00 is 11:00 UTC, before 12:00 UTC
        end = datetime(2024, 1, 15, 13, 0, tzinfo=timezone(timedelta(hours=2)))
        with pytest.raises(ValidationError):
            validate_alert_window(T, end)


def test_as_utc() -> None:
    assert as_utc(None) is None
    assert as_utc(datetime(2024, 1, 15, 12, 0)) == T
    assert as_utc(datetime(2024, 1, 15, 14, 0, tzinfo=timezone(timedelta(hours=2)))).tzinfo == timezone.utc
    assert to_storage_time(T).tzinfo is None
