from .base import Measure
from .cubic import CubicMeasure, CubicCentimeter, CubicDecimeter, CubicMeter
from .floor import FloorMeter
from .loading import LoadingMeter

__all__ = [
    "Measure",
    "CubicMeasure",
    "CubicCentimeter",
    "CubicDecimeter",
    "CubicMeter",
    "FloorMeter",
    "LoadingMeter",
]
