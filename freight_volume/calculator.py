"""
Volume calculator entry point.

    volume([120, 80, 100]).loading_meters().value()                 # 0.4
    volume([1.2, 0.8, 1], Unit.METERS).meters().value()             # 0.96
    volume(length=120, width=80, height=100).centimeters().value()  # 960000.0
    volume({"length": 12, "width": 8, "height": 10}, "dm")          # decimeters

Dimensions default to centimeters (settings.DEFAULT_UNIT).
"""

from .config import settings
from .normalizer import normalize
from .units import Unit
from .models import Volume


def volume(dimensions=None, unit=None, length=None, width=None, height=None) -> Volume:
    """
    Build a Volume from a dimension collection or from named dimensions.

    Args:
        dimensions: [length, width, height] or a mapping with exactly those keys.
            When given, length/width/height are ignored.
        unit: Unit, its value or its symbol. Applies to all three dimensions.
            settings.DEFAULT_UNIT if None.
        length, width, height: used only when dimensions is None.

    Raises:
        DimensionCountMismatchError: collection does not hold 3 values
        MissingDimensionKeysError: mapping lacks length, width or height
        MissingRequiredDimensionsError: a named dimension is None
        NonPositiveDimensionsError: any dimension is <= 0
    """
    unit = Unit.coerce(settings.DEFAULT_UNIT if unit is None else unit)
    return Volume.from_unit(*normalize(dimensions, length, width, height), unit)
