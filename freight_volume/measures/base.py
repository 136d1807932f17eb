"""
Base class for all derived measures (cubic, floor, loading meters).

A measure is a frozen pydantic model: the computed scalar (`magnitude`)
plus the inputs that produced it. Build measures through their
from_* classmethods, which validate before constructing and raise the
package's own errors. Direct construction is still checked: inputs must be
positive and finite, and `magnitude` must agree with them.
"""

import math
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..formatting import format_number

# A length, width or height: positive and finite
Dimension = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class Measure(BaseModel):
    """All measures inherit from this."""

    model_config = ConfigDict(frozen=True)

    magnitude: float

    def _compute(self) -> float:
        """The scalar implied by the stored inputs."""
        raise NotImplementedError

    @model_validator(mode="after")
    def _magnitude_matches_inputs(self):
        expected = self._compute()
        if not math.isclose(self.magnitude, expected, rel_tol=1e-9):
            raise ValueError(f"magnitude {self.magnitude!r} does not match its inputs ({expected!r})")
        return self

    def value(self) -> float:
        """The raw scalar."""
        return self.magnitude

    def format(self, decimals: Optional[int] = None, decimal_point: Optional[str] = None,
               thousands_separator: Optional[str] = None) -> str:
        """Grouped, fixed-decimal string, e.g. "1,083.19". See formatting.format_number."""
        return format_number(self.magnitude, decimals, decimal_point, thousands_separator)

    def __str__(self) -> str:
        return str(self.magnitude)

    def __float__(self) -> float:
        return self.magnitude
