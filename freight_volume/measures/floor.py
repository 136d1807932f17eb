"""
Floor meters: the two-dimensional footprint in m². Height plays no part.
"""

from ..exceptions import InvalidFloorDimensionsError
from ..units import Unit, all_positive, to_meters
from .base import Dimension, Measure


class FloorMeter(Measure):
    length: Dimension
    width: Dimension

    def _compute(self) -> float:
        return self.length * self.width

    @classmethod
    def from_unit(cls, length: float, width: float, unit) -> "FloorMeter":
        unit = Unit.coerce(unit)
        length = to_meters(float(length), unit)
        width = to_meters(float(width), unit)
        if not all_positive(length, width):
            raise InvalidFloorDimensionsError.non_positive()
        return cls(magnitude=length * width, length=length, width=width)

    @classmethod
    def from_meters(cls, length: float, width: float) -> "FloorMeter":
        return cls.from_unit(length, width, Unit.METERS)

    @classmethod
    def from_decimeters(cls, length: float, width: float) -> "FloorMeter":
        return cls.from_unit(length, width, Unit.DECIMETERS)

    @classmethod
    def from_centimeters(cls, length: float, width: float) -> "FloorMeter":
        return cls.from_unit(length, width, Unit.CENTIMETERS)
