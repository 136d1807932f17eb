"""
Shared test fixtures: the Euro pallet (120 × 80 cm) used throughout.
"""

import pytest

from freight_volume import Volume, volume


@pytest.fixture
def euro_pallet():
    """A loaded Euro pallet, 120 × 80 × 100 cm."""
    return volume([120, 80, 100])


@pytest.fixture
def euro_pallet_in_meters():
    return Volume.from_meters(1.2, 0.8, 1.0)
