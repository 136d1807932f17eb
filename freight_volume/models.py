"""
Volume: three dimensions held in meters, and the measures derived from them.

    vol = Volume.from_centimeters(120, 80, 100)
    vol.meters().value()          # 0.96 m³
    vol.centimeters().value()     # 960000 cm³
    vol.floor_meters().value()    # 0.96 m²
    vol.loading_meters().value()  # 0.4 LDM
    vol.get_length(Unit.CENTIMETERS)  # 120.0
"""

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import NonPositiveDimensionsError
from .measures import CubicCentimeter, CubicDecimeter, CubicMeter, FloorMeter, LoadingMeter
from .normalizer import KeyedDimensions, PositionalDimensions, classify, resolve
from .units import Unit, all_positive, from_meters, to_meters

logger = logging.getLogger(__name__)


class Volume(BaseModel):
    model_config = ConfigDict(frozen=True)

    length_m: float = Field(gt=0, allow_inf_nan=False)
    width_m: float = Field(gt=0, allow_inf_nan=False)
    height_m: float = Field(gt=0, allow_inf_nan=False)

    # --- Factories ---

    @classmethod
    def from_unit(cls, length: float, width: float, height: float, unit=Unit.CENTIMETERS) -> "Volume":
        """Build from dimensions in any unit. Raises NonPositiveDimensionsError."""
        unit = Unit.coerce(unit)
        length, width, height = float(length), float(width), float(height)
        length_m, width_m, height_m = (to_meters(v, unit) for v in (length, width, height))
        if not all_positive(length_m, width_m, height_m):
            raise NonPositiveDimensionsError.create()

        vol = cls(length_m=length_m, width_m=width_m, height_m=height_m)
        logger.debug(
            "Normalized %s x %s x %s %s -> %s x %s x %s m",
            length, width, height, unit.symbol, vol.length_m, vol.width_m, vol.height_m,
        )
        return vol

    @classmethod
    def from_centimeters(cls, length: float, width: float, height: float) -> "Volume":
        return cls.from_unit(length, width, height, Unit.CENTIMETERS)

    @classmethod
    def from_decimeters(cls, length: float, width: float, height: float) -> "Volume":
        return cls.from_unit(length, width, height, Unit.DECIMETERS)

    @classmethod
    def from_meters(cls, length: float, width: float, height: float) -> "Volume":
        return cls.from_unit(length, width, height, Unit.METERS)

    @classmethod
    def from_array(cls, dimensions, unit=Unit.CENTIMETERS) -> "Volume":
        """
        Build from [length, width, height] or {"length": .., "width": .., "height": ..}.
        Raises DimensionCountMismatchError / MissingDimensionKeysError on bad shape.
        """
        request = classify(dimensions)
        if not isinstance(request, (PositionalDimensions, KeyedDimensions)):
            raise TypeError(f"from_array expects a sequence or mapping, got {dimensions!r}")
        return cls.from_unit(*resolve(request), unit)

    # --- Measures ---

    def centimeters(self) -> CubicCentimeter:
        return CubicCentimeter.from_meters(self.length_m, self.width_m, self.height_m)

    def decimeters(self) -> CubicDecimeter:
        return CubicDecimeter.from_meters(self.length_m, self.width_m, self.height_m)

    def meters(self) -> CubicMeter:
        return CubicMeter.from_meters(self.length_m, self.width_m, self.height_m)

    def floor_meters(self) -> FloorMeter:
        """Footprint in m², height is ignored."""
        return FloorMeter.from_meters(self.length_m, self.width_m)

    def loading_meters(self, quantity: Optional[int] = None,
                       stacking_factor: Optional[float] = None,
                       truck_width: Optional[float] = None) -> LoadingMeter:
        """Loading meters for `quantity` units of this footprint. Defaults come from settings."""
        return LoadingMeter.from_meters(
            self.length_m, self.width_m, quantity, stacking_factor, truck_width,
        )

    # --- Dimension getters ---

    def get_length(self, unit=Unit.METERS) -> float:
        return from_meters(self.length_m, Unit.coerce(unit))

    def get_width(self, unit=Unit.METERS) -> float:
        return from_meters(self.width_m, Unit.coerce(unit))

    def get_height(self, unit=Unit.METERS) -> float:
        return from_meters(self.height_m, Unit.coerce(unit))
