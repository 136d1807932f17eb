"""
Input normalizer. Turns the three accepted input shapes into one
(length, width, height) tuple.

    volume([120, 80, 100])                              -> PositionalDimensions
    volume({"length": 120, "width": 80, "height": 100}) -> KeyedDimensions
    volume(length=120, width=80, height=100)            -> NamedDimensions

A collection always wins: when one is given the named values are ignored.
Shape errors are raised here, and values that are not numbers at all
(None, "abc") fail as non-positive. The positivity check itself is left to
the Volume factories so every construction path shares one check.
"""

from collections.abc import Iterable, Mapping, Set
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from .exceptions import (
    DimensionCountMismatchError,
    MissingDimensionKeysError,
    MissingRequiredDimensionsError,
    NonPositiveDimensionsError,
)

DIMENSION_NAMES = ("length", "width", "height")


@dataclass(frozen=True)
class PositionalDimensions:
    """[length, width, height] in that order."""
    values: Tuple[Any, ...]


@dataclass(frozen=True)
class KeyedDimensions:
    values: Mapping


@dataclass(frozen=True)
class NamedDimensions:
    length: Optional[Any] = None
    width: Optional[Any] = None
    height: Optional[Any] = None


DimensionRequest = Union[PositionalDimensions, KeyedDimensions, NamedDimensions]


def classify(dimensions=None, length=None, width=None, height=None) -> DimensionRequest:
    """Pick the request shape. Collection first, named values otherwise."""
    if dimensions is not None:
        if isinstance(dimensions, Mapping):
            return KeyedDimensions(dimensions)
        # Strings and bytes would split into characters; sets have no order
        if isinstance(dimensions, (str, bytes, bytearray, Set)) or not isinstance(dimensions, Iterable):
            raise TypeError(
                f"Dimensions must be a sequence or mapping, got {type(dimensions).__name__}"
            )
        return PositionalDimensions(tuple(dimensions))
    return NamedDimensions(length, width, height)


def resolve(request: DimensionRequest) -> Tuple[float, float, float]:
    """Validate the shape and return (length, width, height) as floats."""
    if isinstance(request, NamedDimensions):
        missing = [name for name in DIMENSION_NAMES if getattr(request, name) is None]
        if missing:
            raise MissingRequiredDimensionsError.from_missing(missing)
        raw = (request.length, request.width, request.height)

    else:
        # Count is checked before keys for both collection shapes
        if len(request.values) != 3:
            raise DimensionCountMismatchError.from_count(len(request.values))
        if isinstance(request, KeyedDimensions):
            if not all(name in request.values for name in DIMENSION_NAMES):
                raise MissingDimensionKeysError.from_provided_keys(request.values.keys())
            raw = tuple(request.values[name] for name in DIMENSION_NAMES)
        else:
            raw = request.values

    return tuple(_as_dimension(v) for v in raw)


def _as_dimension(value) -> float:
    """float(value), with None and non-numeric values reported as non-positive."""
    if value is None:
        raise NonPositiveDimensionsError.create()
    try:
        return float(value)
    except (TypeError, ValueError):
        raise NonPositiveDimensionsError.create() from None


def normalize(dimensions=None, length=None, width=None, height=None) -> Tuple[float, float, float]:
    """classify() + resolve() in one call."""
    return resolve(classify(dimensions, length, width, height))
