"""
freight_volume: cubic volume, floor area and loading meters from three
dimensions.

Exposes the volume() entry point, the Volume handle, the Unit enum, the
five measure types and the error classes.
"""

from .calculator import volume
from .exceptions import (
    VolumeError,
    InvalidDimensionsError,
    MissingRequiredDimensionsError,
    DimensionCountMismatchError,
    MissingDimensionKeysError,
    NonPositiveDimensionsError,
    InvalidFloorDimensionsError,
    InvalidLoadingMeterParameterError,
    InvalidQuantityError,
    InvalidStackingFactorError,
    InvalidTruckWidthError,
)
from .measures import CubicCentimeter, CubicDecimeter, CubicMeter, FloorMeter, LoadingMeter
from .units import Unit
from .models import Volume

__all__ = [
    "volume",
    "Volume",
    "Unit",
    # measures
    "CubicCentimeter",
    "CubicDecimeter",
    "CubicMeter",
    "FloorMeter",
    "LoadingMeter",
    # errors
    "VolumeError",
    "InvalidDimensionsError",
    "MissingRequiredDimensionsError",
    "DimensionCountMismatchError",
    "MissingDimensionKeysError",
    "NonPositiveDimensionsError",
    "InvalidFloorDimensionsError",
    "InvalidLoadingMeterParameterError",
    "InvalidQuantityError",
    "InvalidStackingFactorError",
    "InvalidTruckWidthError",
]
