"""
Loading meters (LDM): linear meters of truck floor a shipment occupies.

    LDM = (quantity × length_m × width_m) / truck_width_m / stacking_factor

Example: one Euro pallet (120 × 80 cm) on a 2.4 m wide trailer
    (1 × 1.2 × 0.8) / 2.4 / 1.0 = 0.4 LDM

Stacking factor is how many units go on top of each other; 2.0 halves the
footprint. The result keeps every input so a shipment line can be traced
back from the number alone.
"""

import logging
from typing import Optional

from pydantic import Field

from ..config import settings
from ..exceptions import (
    InvalidFloorDimensionsError,
    InvalidQuantityError,
    InvalidStackingFactorError,
    InvalidTruckWidthError,
)
from ..units import Unit, all_positive, from_meters, to_meters
from .base import Dimension, Measure

logger = logging.getLogger(__name__)


class LoadingMeter(Measure):
    length: Dimension       # cm
    width: Dimension        # cm
    quantity: int = Field(ge=1)
    stacking_factor: float = Field(gt=0, allow_inf_nan=False)
    truck_width: float = Field(gt=0, allow_inf_nan=False)  # m

    def _compute(self) -> float:
        length_m = to_meters(self.length, Unit.CENTIMETERS)
        width_m = to_meters(self.width, Unit.CENTIMETERS)
        return (self.quantity * (length_m * width_m)) / self.truck_width / self.stacking_factor

    @classmethod
    def from_centimeters(cls, length: float, width: float,
                         quantity: Optional[int] = None,
                         stacking_factor: Optional[float] = None,
                         truck_width: Optional[float] = None) -> "LoadingMeter":
        """
        Compute loading meters from a footprint in centimeters.

        Args:
            length, width: footprint of one unit in cm
            quantity: number of units, >= 1 (settings.DEFAULT_QUANTITY if None)
            stacking_factor: > 0 (settings.DEFAULT_STACKING_FACTOR if None)
            truck_width: interior width in meters, > 0 (settings.DEFAULT_TRUCK_WIDTH_M if None)

        Checks run in order (dimensions, quantity, stacking factor, truck
        width) and the first failure raises.
        """
        if quantity is None:
            quantity = settings.DEFAULT_QUANTITY
        if stacking_factor is None:
            stacking_factor = settings.DEFAULT_STACKING_FACTOR
        if truck_width is None:
            truck_width = settings.DEFAULT_TRUCK_WIDTH_M

        length = float(length)
        width = float(width)
        if not all_positive(length, width):
            raise InvalidFloorDimensionsError.non_positive()
        if quantity < 1:
            raise InvalidQuantityError.must_be_at_least_one()
        if not stacking_factor > 0:
            raise InvalidStackingFactorError.must_be_positive()
        if not truck_width > 0:
            raise InvalidTruckWidthError.must_be_positive()

        length_m = to_meters(length, Unit.CENTIMETERS)
        width_m = to_meters(width, Unit.CENTIMETERS)
        value = (quantity * (length_m * width_m)) / truck_width / stacking_factor

        logger.debug(
            "LDM %.4f = (%d x %.4f m x %.4f m) / %.2f m truck / %.2f stacking",
            value, quantity, length_m, width_m, truck_width, stacking_factor,
        )
        return cls(
            magnitude=value,
            length=length,
            width=width,
            quantity=quantity,
            stacking_factor=stacking_factor,
            truck_width=truck_width,
        )

    @classmethod
    def from_meters(cls, length: float, width: float,
                    quantity: Optional[int] = None,
                    stacking_factor: Optional[float] = None,
                    truck_width: Optional[float] = None) -> "LoadingMeter":
        """Same as from_centimeters, with the footprint given in meters."""
        return cls.from_centimeters(
            from_meters(float(length), Unit.CENTIMETERS),
            from_meters(float(width), Unit.CENTIMETERS),
            quantity, stacking_factor, truck_width,
        )
