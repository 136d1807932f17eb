"""
Error taxonomy for dimension and loading-meter input.

Every error here is a caller-input error: raised at construction time,
never retried, never logged. Both families are also ValueErrors so callers
that only care about "bad input" can catch the builtin.
"""


class VolumeError(Exception):
    """Marker base for every error raised by this package."""


# --- Dimension errors ---

class InvalidDimensionsError(VolumeError, ValueError):
    """Base for errors about the length / width / height input."""


class MissingRequiredDimensionsError(InvalidDimensionsError):
    def __init__(self, message: str, missing: list):
        super().__init__(message)
        self.missing = missing

    @classmethod
    def from_missing(cls, missing: list) -> "MissingRequiredDimensionsError":
        return cls(f"Missing required dimensions: {', '.join(missing)}", list(missing))


class DimensionCountMismatchError(InvalidDimensionsError):
    def __init__(self, message: str, given: int):
        super().__init__(message)
        self.given = given

    @classmethod
    def from_count(cls, given: int) -> "DimensionCountMismatchError":
        return cls(f"Dimensions array must contain exactly 3 values, {given} given", given)


class MissingDimensionKeysError(InvalidDimensionsError):
    def __init__(self, message: str, provided_keys: list):
        super().__init__(message)
        self.provided_keys = provided_keys

    @classmethod
    def from_provided_keys(cls, keys) -> "MissingDimensionKeysError":
        """Keys are stringified and sorted so mixed int/str keys still report cleanly."""
        provided = sorted(str(k) for k in keys)
        return cls(
            f"Dimensions array must have keys [length, width, height], got [{', '.join(provided)}]",
            provided,
        )


class NonPositiveDimensionsError(InvalidDimensionsError):
    """One combined error, whichever dimension(s) failed."""

    @classmethod
    def create(cls) -> "NonPositiveDimensionsError":
        return cls("All dimensions must be positive numbers")


class InvalidFloorDimensionsError(NonPositiveDimensionsError):
    """Raised by the two-dimensional measures (floor meters, loading meters)."""

    @classmethod
    def non_positive(cls) -> "InvalidFloorDimensionsError":
        return cls("Length and width must be positive numbers")


# --- Loading meter parameter errors ---

class InvalidLoadingMeterParameterError(VolumeError, ValueError):
    """Base for quantity / stacking factor / truck width errors."""


class InvalidQuantityError(InvalidLoadingMeterParameterError):
    @classmethod
    def must_be_at_least_one(cls) -> "InvalidQuantityError":
        return cls("Quantity must be at least 1")


class InvalidStackingFactorError(InvalidLoadingMeterParameterError):
    @classmethod
    def must_be_positive(cls) -> "InvalidStackingFactorError":
        return cls("Stacking factor must be positive")


class InvalidTruckWidthError(InvalidLoadingMeterParameterError):
    @classmethod
    def must_be_positive(cls) -> "InvalidTruckWidthError":
        return cls("Truck width must be positive")
