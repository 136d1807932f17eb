"""
Cubic measures: volume in cm³, dm³ and m³.

Each measure scales the three dimensions into its own unit first and
multiplies after, so the stored length/width/height are always in the
measure's unit (CubicDecimeter.from_meters(1.2, 0.8, 1.0).length == 12.0).
"""

from typing import ClassVar

from ..exceptions import NonPositiveDimensionsError
from ..units import Unit, all_positive, convert
from .base import Dimension, Measure


class CubicMeasure(Measure):
    """Shared factory logic; subclasses only pick their UNIT."""

    UNIT: ClassVar[Unit]

    length: Dimension
    width: Dimension
    height: Dimension

    def _compute(self) -> float:
        return self.length * self.width * self.height

    @classmethod
    def from_unit(cls, length: float, width: float, height: float, unit) -> "CubicMeasure":
        """Convert dimensions given in `unit` into this measure's unit, then multiply."""
        unit = Unit.coerce(unit)
        length, width, height = (
            convert(float(v), unit, cls.UNIT) for v in (length, width, height)
        )
        if not all_positive(length, width, height):
            raise NonPositiveDimensionsError.create()
        return cls(
            magnitude=length * width * height,
            length=length,
            width=width,
            height=height,
        )

    @classmethod
    def from_centimeters(cls, length: float, width: float, height: float) -> "CubicMeasure":
        return cls.from_unit(length, width, height, Unit.CENTIMETERS)

    @classmethod
    def from_decimeters(cls, length: float, width: float, height: float) -> "CubicMeasure":
        return cls.from_unit(length, width, height, Unit.DECIMETERS)

    @classmethod
    def from_meters(cls, length: float, width: float, height: float) -> "CubicMeasure":
        return cls.from_unit(length, width, height, Unit.METERS)


class CubicCentimeter(CubicMeasure):
    """Volume in cm³ (1 m³ = 1,000,000 cm³)."""

    UNIT: ClassVar[Unit] = Unit.CENTIMETERS


class CubicDecimeter(CubicMeasure):
    """Volume in dm³, i.e. liters (1 m³ = 1,000 dm³)."""

    UNIT: ClassVar[Unit] = Unit.DECIMETERS


class CubicMeter(CubicMeasure):
    UNIT: ClassVar[Unit] = Unit.METERS
