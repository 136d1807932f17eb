"""
Length units accepted for dimension input, and their fixed meter factors.

All conversions go through UNITS_PER_METER:
    to meters   -> value / UNITS_PER_METER[unit]
    from meters -> value * UNITS_PER_METER[unit]

Dividing by 100 (rather than multiplying by 0.01) keeps common inputs exact,
e.g. 120 cm -> 1.2 m instead of 1.2000000000000002 m.
"""

import enum
import math


class Unit(str, enum.Enum):
    CENTIMETERS = "centimeters"
    DECIMETERS = "decimeters"
    METERS = "meters"

    @property
    def symbol(self) -> str:
        return UNIT_SYMBOLS[self]

    @property
    def meter_factor(self) -> float:
        """Meters per one of this unit (0.01, 0.1, 1.0)."""
        return 1.0 / UNITS_PER_METER[self]

    @classmethod
    def coerce(cls, value) -> "Unit":
        """Accept a Unit, its value ("meters") or its symbol ("m"), case-insensitive."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for unit in cls:
            if key in (unit.value, unit.symbol):
                return unit
        raise ValueError(
            f"Unknown unit: {value!r}. "
            f"Available: {[u.value for u in cls] + [u.symbol for u in cls]}"
        )


# Units per meter: 1 m = 100 cm = 10 dm
UNITS_PER_METER = {
    Unit.CENTIMETERS: 100,
    Unit.DECIMETERS: 10,
    Unit.METERS: 1,
}

UNIT_SYMBOLS = {
    Unit.CENTIMETERS: "cm",
    Unit.DECIMETERS: "dm",
    Unit.METERS: "m",
}


def to_meters(value: float, unit: Unit) -> float:
    """Convert a length in `unit` to meters."""
    return value / UNITS_PER_METER[unit]


def from_meters(value: float, unit: Unit) -> float:
    """Convert a length in meters to `unit`."""
    return value * UNITS_PER_METER[unit]


def convert(value: float, source: Unit, target: Unit) -> float:
    """Convert a length between two units."""
    if source is target:
        return value
    return value * UNITS_PER_METER[target] / UNITS_PER_METER[source]


def all_positive(*values: float) -> bool:
    """True when every value is a finite number strictly greater than zero."""
    return all(math.isfinite(v) and v > 0 for v in values)
