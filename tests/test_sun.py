from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Optional

import pytest

from sunriseset import (
    Location,
    SolarEventRangeError,
    Zenith,
    calculate,
    sun_times,
    sunrise,
    sunrise_instant,
    sunset,
    sunset_instant,
)
from sunriseset.astro import _utc_instant

TOLERANCE = timedelta(seconds=1)

LONDON = Location(51.623556, 0.010213)
HAMMERFEST = Location(70.662941, 23.684380)
PORT_STANLEY = Location(-51.699665, -57.852222)


@dataclass(frozen=True)
class Case:
    name: str
    date_utc: date
    zenith: Zenith
    location: Location
    sunrise: Optional[str]
    sunset: Optional[str]

    def __str__(self) -> str:
        return f"{self.name}-{self.date_utc}-{self.zenith.name}"


CASES = [
    Case("london", date(2019, 12, 29), Zenith.OFFICIAL, LONDON,
         "2019-12-29T08:06:18Z", "2019-12-29T15:57:43Z"),
    Case("port-stanley", date(2020, 1, 18), Zenith.OFFICIAL, PORT_STANLEY,
         "2020-01-18T08:01:48Z", "2020-01-19T00:01:20Z"),
    Case("hammerfest", date(2020, 6, 1), Zenith.OFFICIAL, HAMMERFEST, None, None),
    Case("london", date(2019, 12, 29), Zenith.CIVIL, LONDON,
         "2019-12-29T07:25:59Z", "2019-12-29T16:38:00Z"),
    # Known approximation error of the almanac formula near the polar circle.
    Case("hammerfest", date(2020, 1, 20), Zenith.OFFICIAL, HAMMERFEST,
         None, "2020-01-20T10:58:29Z"),
    # Real sunrise is close to 02:10.
    Case("hammerfest", date(2020, 8, 5), Zenith.OFFICIAL, HAMMERFEST,
         "2020-08-05T00:11:09Z", "2020-08-05T20:47:09Z"),
]


def _instant(value: Optional[str]) -> Optional[datetime]:
    if value is None:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _assert_close(result: Optional[datetime], expected: Optional[datetime]) -> None:
    if expected is None:
        assert result is None
        return
    assert result is not None
    assert abs(result - expected) <= TOLERANCE


def _seconds_of_day(value: time) -> int:
    return value.hour * 3600 + value.minute * 60 + value.second


def _assert_clock_close(result: Optional[time], expected: Optional[datetime]) -> None:
    if expected is None:
        assert result is None
        return
    assert result is not None
    diff = abs(_seconds_of_day(result) - _seconds_of_day(expected.time()))
    assert min(diff, 86400 - diff) <= TOLERANCE.total_seconds()


@pytest.mark.parametrize("case", CASES, ids=str)
def test_sunrise_instant(case: Case) -> None:
    result = sunrise_instant(case.date_utc, case.zenith, case.location)
    _assert_close(result, _instant(case.sunrise))


@pytest.mark.parametrize("case", CASES, ids=str)
def test_sunset_instant(case: Case) -> None:
    result = sunset_instant(case.date_utc, case.zenith, case.location)
    _assert_close(result, _instant(case.sunset))


@pytest.mark.parametrize("case", CASES, ids=str)
def test_sunrise_time(case: Case) -> None:
    result = sunrise(case.date_utc, case.zenith, case.location)
    _assert_clock_close(result, _instant(case.sunrise))


@pytest.mark.parametrize("case", CASES, ids=str)
def test_sunset_time(case: Case) -> None:
    result = sunset(case.date_utc, case.zenith, case.location)
    _assert_clock_close(result, _instant(case.sunset))


def test_instants_are_utc_aware():
    result = sunrise_instant(date(2019, 12, 29), Zenith.OFFICIAL, LONDON)
    assert result is not None
    assert result.utcoffset() == timedelta(0)
    assert result.tzinfo is UTC


def test_latitude_longitude_overload_matches_location():
    by_location = sunset_instant(date(2020, 1, 18), Zenith.OFFICIAL, PORT_STANLEY)
    by_numbers = sunset_instant(
        date(2020, 1, 18), Zenith.OFFICIAL, PORT_STANLEY.latitude, PORT_STANLEY.longitude
    )
    assert by_location == by_numbers


def test_sunset_west_of_greenwich_rolls_past_midnight():
    result = sunset_instant(date(2020, 1, 18), Zenith.OFFICIAL, PORT_STANLEY)
    assert result is not None
    assert result.date() == date(2020, 1, 19)
    assert sunset(date(2020, 1, 18), Zenith.OFFICIAL, PORT_STANLEY) == result.time()


def test_wider_zenith_moves_events_outward():
    day = date(2019, 12, 29)
    official = sun_times(day, Zenith.OFFICIAL, LONDON)
    civil = sun_times(day, Zenith.CIVIL, LONDON)
    nautical = sun_times(day, Zenith.NAUTICAL, LONDON)
    astronomical = sun_times(day, Zenith.ASTRONOMICAL, LONDON)
    assert astronomical.sunrise < nautical.sunrise < civil.sunrise < official.sunrise
    assert official.sunset < civil.sunset < nautical.sunset < astronomical.sunset


@pytest.mark.parametrize("latitude", [float(lat) for lat in range(-60, 61, 5)])
def test_events_present_between_polar_circles(latitude: float):
    for month in range(1, 13):
        for day in (1, 15):
            for longitude in (-150.0, -45.0, 0.0, 90.0, 179.0):
                result = sun_times(date(2021, month, day), Zenith.OFFICIAL, latitude, longitude)
                assert result.status == "ok", (latitude, longitude, month, day)


@pytest.mark.parametrize("rising", [True, False])
@pytest.mark.parametrize("day", [date(2020, 6, 1), date(2020, 12, 21)])
def test_polar_day_and_night_are_absent(rising: bool, day: date):
    assert calculate(rising, day, Zenith.OFFICIAL, HAMMERFEST.latitude, HAMMERFEST.longitude) is None


def test_sun_times_status():
    assert sun_times(date(2019, 12, 29), Zenith.OFFICIAL, LONDON).status == "ok"
    assert sun_times(date(2020, 6, 1), Zenith.OFFICIAL, HAMMERFEST).status == "no_event"
    assert sun_times(date(2020, 1, 20), Zenith.OFFICIAL, HAMMERFEST).status == "partial"


@pytest.mark.parametrize("latitude", [90.0, -90.0, 120.0, -400.0])
def test_extreme_coordinates_do_not_raise(latitude: float):
    for rising in (True, False):
        calculate(rising, date(2021, 3, 20), Zenith.ASTRONOMICAL, latitude, 725.0)


def test_missing_longitude_is_rejected():
    with pytest.raises(TypeError):
        sunrise_instant(date(2019, 12, 29), Zenith.OFFICIAL, 51.6)


def test_longitude_with_location_is_rejected():
    with pytest.raises(TypeError):
        sunrise_instant(date(2019, 12, 29), Zenith.OFFICIAL, LONDON, 0.0)


def test_location_value_semantics():
    assert Location(51.623556, 0.010213) == LONDON
    assert hash(Location(51.623556, 0.010213)) == hash(LONDON)
    assert Location(51.623556, 0.010214) != LONDON
    assert str(LONDON) == "{latitude:51.623556, longitude:0.010213}"
    with pytest.raises(AttributeError):
        LONDON.latitude = 0.0  # type: ignore[misc]


def test_zenith_decimal_degrees():
    assert Zenith.OFFICIAL.decimal_degrees == pytest.approx(90.833333333)
    assert Zenith.CIVIL.decimal_degrees == 96.0
    assert Zenith.NAUTICAL.decimal_degrees == 102.0
    assert Zenith.ASTRONOMICAL.decimal_degrees == 108.0


def test_zenith_from_twilight():
    assert Zenith.from_twilight("civil") is Zenith.CIVIL
    assert Zenith.from_twilight("Astronomical") is Zenith.ASTRONOMICAL
    with pytest.raises(ValueError, match="Unsupported twilight selector"):
        Zenith.from_twilight("golden")


@pytest.mark.parametrize(
    "rising, day, longitude",
    [
        (True, date(1, 1, 1), 180.0),
        (False, date(9999, 12, 31), -180.0),
        (True, date(2021, 3, 20), 1e10),
    ],
)
def test_instant_outside_datetime_range_is_reported(rising: bool, day: date, longitude: float):
    with pytest.raises(SolarEventRangeError, match="outside the supported datetime range"):
        calculate(rising, day, Zenith.OFFICIAL, 0.0, longitude)


def test_range_error_is_a_value_error():
    with pytest.raises(ValueError):
        sunrise_instant(date(1, 1, 1), Zenith.OFFICIAL, 0.0, 180.0)


def test_date_extremes_inside_range_still_compute():
    assert sunset_instant(date(1, 1, 1), Zenith.OFFICIAL, 0.0, 180.0) is not None
    assert sunrise_instant(date(9999, 12, 31), Zenith.OFFICIAL, 0.0, -180.0) is not None


def test_full_day_of_local_seconds_rolls_to_next_midnight():
    assert _utc_instant(date(2020, 2, 28), 86400, 0.0) == datetime(2020, 2, 29, tzinfo=UTC)
    assert _utc_instant(date(2020, 12, 31), 86400, 0.0) == datetime(2021, 1, 1, tzinfo=UTC)


def test_longitude_shift_is_applied_without_rewrapping_the_date():
    # Local 23:00 at 60W becomes 03:00 UTC the following day.
    assert _utc_instant(date(2020, 1, 18), 23 * 3600, -4.0) == datetime(2020, 1, 19, 3, tzinfo=UTC)
    # Local 01:00 at 60E becomes 21:00 UTC the previous day.
    assert _utc_instant(date(2020, 1, 18), 3600, 4.0) == datetime(2020, 1, 17, 21, tzinfo=UTC)
