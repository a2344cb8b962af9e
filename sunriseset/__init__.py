"""Sunrise and sunset times from the Almanac for Computers approximation."""

from .astro import (
    SolarEventRangeError,
    SunTimes,
    calculate,
    sun_times,
    sunrise,
    sunrise_instant,
    sunset,
    sunset_instant,
)
from .diagnostics import LoggerSink, console_sink, null_sink
from .values import Location, Zenith

__all__ = [
    "Location",
    "LoggerSink",
    "SolarEventRangeError",
    "SunTimes",
    "Zenith",
    "calculate",
    "console_sink",
    "null_sink",
    "sun_times",
    "sunrise",
    "sunrise_instant",
    "sunset",
    "sunset_instant",
]
