"""Sunrise and sunset times from the Almanac for Computers approximation.

The algorithm is the one-pass formula published by the US Naval Observatory
(see http://edwilliams.org/sunrise_sunset_algorithm.htm). Results are in UTC
and are typically within a minute or two of an ephemeris solution, with
larger errors close to the polar circles.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from typing import Optional, Tuple, Union

from .diagnostics import DiagnosticSink, null_sink
from .trig import acos, asin, atan, constrain, cos, round_half_up, sin, tan
from .values import Location, Zenith

__all__ = [
    "SolarEventRangeError",
    "SunTimes",
    "calculate",
    "sun_times",
    "sunrise",
    "sunrise_instant",
    "sunset",
    "sunset_instant",
]

Where = Union[Location, float]


class SolarEventRangeError(ValueError):
    """Raised when an event instant falls outside the representable datetime range."""


@dataclass(frozen=True)
class SunTimes:
    """Sunrise and sunset of a single day; ``None`` where the event is absent."""

    sunrise: Optional[datetime]
    sunset: Optional[datetime]

    @property
    def status(self) -> str:
        if self.sunrise is not None and self.sunset is not None:
            return "ok"
        if self.sunrise is None and self.sunset is None:
            return "no_event"
        return "partial"


def _coordinates(where: Where, longitude: Optional[float]) -> Tuple[float, float]:
    if isinstance(where, Location):
        if longitude is not None:
            raise TypeError("longitude must not be given together with a Location")
        return where.latitude, where.longitude
    if longitude is None:
        raise TypeError("longitude is required when latitude is given as a number")
    return float(where), float(longitude)


def _utc_instant(date_utc: date, local_seconds: int, lng_hour: float) -> datetime:
    """Midnight of *date_utc* plus *local_seconds*, shifted back by *lng_hour*.

    ``local_seconds`` may be a full day (86400), which yields the next midnight.
    """

    try:
        return (
            datetime.combine(date_utc, time(0), tzinfo=UTC)
            + timedelta(seconds=local_seconds)
            - timedelta(seconds=round_half_up(lng_hour * 60 * 60))
        )
    except OverflowError as exc:
        raise SolarEventRangeError(
            f"Event on {date_utc.isoformat()} at longitude hour {lng_hour:f} "
            "is outside the supported datetime range"
        ) from exc


def calculate(
    rising: bool,
    date_utc: date,
    zenith: Zenith,
    latitude: float,
    longitude: float,
    sink: DiagnosticSink = null_sink,
) -> Optional[datetime]:
    """Compute the UTC instant of sunrise (*rising*) or sunset.

    Parameters
    ----------
    rising:
        ``True`` for sunrise, ``False`` for sunset.
    date_utc:
        Calendar date the event is computed for.
    zenith:
        Zenith convention defining the event.
    latitude, longitude:
        Geographic coordinates in degrees (east-positive longitude). Not range
        checked.
    sink:
        Receives every intermediate quantity; never affects the result.

    Returns
    -------
    datetime or None
        Timezone-aware UTC instant, or ``None`` when the sun does not cross
        *zenith* on that day (polar day and polar night alike).

    Raises
    ------
    SolarEventRangeError
        If the shifted instant falls outside the range of :class:`datetime`,
        e.g. a sunrise on 0001-01-01 east of Greenwich.

    The instant is built on *date_utc* from the local mean time and then
    shifted by the longitude offset without re-wrapping the date, so a west
    longitude sunset may land on the following calendar day.
    """

    day_of_year = date_utc.timetuple().tm_yday
    sink("Day of year = %d", day_of_year)

    # Longitude as an hour offset and the approximate time of the event.
    lng_hour = longitude / 15
    t = day_of_year + (((6 if rising else 18) - lng_hour) / 24)
    sink("Longitude hour = %f", lng_hour)
    sink("Approximate time = %f", t)

    mean_anomaly = (0.9856 * t) - 3.289
    sink("Sun's mean anomaly = %f", mean_anomaly)

    true_longitude = constrain(
        360,
        mean_anomaly
        + (1.916 * sin(mean_anomaly))
        + (0.020 * sin(2 * mean_anomaly))
        + 282.634,
    )
    sink("Sun's true longitude = %f", true_longitude)

    right_ascension = constrain(360, atan(0.91764 * tan(true_longitude)))
    sink("Sun's right ascension = %f", right_ascension)

    # Right ascension must sit in the same quadrant as the true longitude.
    l_quadrant = math.floor(true_longitude / 90) * 90
    ra_quadrant = math.floor(right_ascension / 90) * 90
    right_ascension = right_ascension + (l_quadrant - ra_quadrant)
    sink("Sun's right ascension quadrant adjusted = %f", right_ascension)

    ra_hours = right_ascension / 15
    sink("Sun's right ascension in hours = %f", ra_hours)

    sin_dec = 0.39782 * sin(true_longitude)
    cos_dec = cos(asin(sin_dec))
    sink("Sun's declination (sin, cos) (%f, %f)", sin_dec, cos_dec)

    sink("Zenith decimal deg = %f", zenith.decimal_degrees)
    cos_h = (cos(zenith.decimal_degrees) - (sin_dec * sin(latitude))) / (
        cos_dec * cos(latitude)
    )
    sink("Sun's local hour angle %f", cos_h)

    event = "sunrise" if rising else "sunset"
    if cos_h > 1:
        sink("There's no %s on this day (polar night)", event)
        return None
    if cos_h < -1:
        sink("There's no %s on this day (midnight sun)", event)
        return None

    acos_h = acos(cos_h)
    hour_angle = (360 - acos_h if rising else acos_h) / 15
    sink("acos(cosH) = %f", acos_h)
    sink("H = %f", hour_angle)

    local_mean_time = hour_angle + ra_hours - (0.06571 * t) - 6.622
    local_seconds = round_half_up(constrain(24, local_mean_time) * 60 * 60)
    sink("Local mean time of %s = %s", event, timedelta(seconds=local_seconds))

    result = _utc_instant(date_utc, local_seconds, lng_hour)
    sink("%s = %s", event.capitalize(), result.isoformat())
    sink()
    return result


def sunrise_instant(
    date_utc: date,
    zenith: Zenith,
    where: Where,
    longitude: Optional[float] = None,
    *,
    sink: DiagnosticSink = null_sink,
) -> Optional[datetime]:
    """UTC instant of sunrise at a :class:`Location` or ``latitude, longitude``."""

    latitude, longitude = _coordinates(where, longitude)
    return calculate(True, date_utc, zenith, latitude, longitude, sink)


def sunset_instant(
    date_utc: date,
    zenith: Zenith,
    where: Where,
    longitude: Optional[float] = None,
    *,
    sink: DiagnosticSink = null_sink,
) -> Optional[datetime]:
    """UTC instant of sunset at a :class:`Location` or ``latitude, longitude``."""

    latitude, longitude = _coordinates(where, longitude)
    return calculate(False, date_utc, zenith, latitude, longitude, sink)


def _clock_time(instant: Optional[datetime]) -> Optional[time]:
    if instant is None:
        return None
    return instant.astimezone(UTC).time()


def sunrise(
    date_utc: date,
    zenith: Zenith,
    where: Where,
    longitude: Optional[float] = None,
    *,
    sink: DiagnosticSink = null_sink,
) -> Optional[time]:
    """UTC clock time of sunrise, discarding the date."""

    return _clock_time(sunrise_instant(date_utc, zenith, where, longitude, sink=sink))


def sunset(
    date_utc: date,
    zenith: Zenith,
    where: Where,
    longitude: Optional[float] = None,
    *,
    sink: DiagnosticSink = null_sink,
) -> Optional[time]:
    """UTC clock time of sunset, discarding the date."""

    return _clock_time(sunset_instant(date_utc, zenith, where, longitude, sink=sink))


def sun_times(
    date_utc: date,
    zenith: Zenith,
    where: Where,
    longitude: Optional[float] = None,
    *,
    sink: DiagnosticSink = null_sink,
) -> SunTimes:
    """Compute both events of *date_utc* in one call."""

    return SunTimes(
        sunrise=sunrise_instant(date_utc, zenith, where, longitude, sink=sink),
        sunset=sunset_instant(date_utc, zenith, where, longitude, sink=sink),
    )
