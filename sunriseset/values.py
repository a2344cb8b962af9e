"""Value objects describing where and how a solar event is computed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

__all__ = ["Location", "Zenith"]


@dataclass(frozen=True)
class Location:
    """Geographic position in decimal degrees (east-positive longitude).

    Coordinates are not range checked; callers supply sane values.
    """

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return "{latitude:%f, longitude:%f}" % (self.latitude, self.longitude)


class Zenith(Enum):
    """Solar zenith angle at which the sun is considered to rise or set."""

    OFFICIAL = (90, 50)
    CIVIL = (96, 0)
    NAUTICAL = (102, 0)
    ASTRONOMICAL = (108, 0)

    def __init__(self, degrees: int, minutes: int) -> None:
        self.decimal_degrees = degrees + minutes / 60

    @classmethod
    def from_twilight(cls, twilight: str) -> "Zenith":
        try:
            return cls[twilight.upper()]
        except KeyError as exc:
            raise ValueError(f"Unsupported twilight selector: {twilight}") from exc
