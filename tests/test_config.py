"""
Tests for config.py: environment-driven defaults.
"""

import pytest
from pydantic import ValidationError

from freight_volume import LoadingMeter, Unit, volume
from freight_volume.config import Settings, settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.DEFAULT_UNIT is Unit.CENTIMETERS
    assert s.DEFAULT_QUANTITY == 1
    assert s.DEFAULT_STACKING_FACTOR == 1.0
    assert s.DEFAULT_TRUCK_WIDTH_M == 2.4
    assert s.FORMAT_DECIMALS == 2


def test_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("FREIGHT_VOLUME_DEFAULT_UNIT", "m")
    monkeypatch.setenv("FREIGHT_VOLUME_DEFAULT_TRUCK_WIDTH_M", "2.48")
    s = Settings(_env_file=None)
    assert s.DEFAULT_UNIT is Unit.METERS
    assert s.DEFAULT_TRUCK_WIDTH_M == 2.48


@pytest.mark.parametrize("name, value", [
    ("FREIGHT_VOLUME_DEFAULT_TRUCK_WIDTH_M", "0"),
    ("FREIGHT_VOLUME_DEFAULT_STACKING_FACTOR", "-1"),
    ("FREIGHT_VOLUME_DEFAULT_QUANTITY", "0"),
    ("FREIGHT_VOLUME_FORMAT_DECIMALS", "-2"),
    ("FREIGHT_VOLUME_DEFAULT_UNIT", "furlongs"),
])
def test_out_of_range_settings_fail_at_load(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_default_unit_drives_volume(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_UNIT", Unit.METERS)
    vol = volume([1.2, 0.8, 1.0])
    assert vol.get_length(Unit.CENTIMETERS) == pytest.approx(120)


def test_loading_defaults_come_from_settings(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_TRUCK_WIDTH_M", 3.0)
    monkeypatch.setattr(settings, "DEFAULT_STACKING_FACTOR", 2.0)
    ldm = LoadingMeter.from_centimeters(120, 80)
    assert ldm.truck_width == 3.0
    assert ldm.value() == pytest.approx(0.96 / 3.0 / 2.0)


def test_format_defaults_come_from_settings(monkeypatch, euro_pallet):
    monkeypatch.setattr(settings, "FORMAT_DECIMALS", 1)
    monkeypatch.setattr(settings, "FORMAT_DECIMAL_POINT", ",")
    monkeypatch.setattr(settings, "FORMAT_THOUSANDS_SEPARATOR", ".")
    assert euro_pallet.centimeters().format() == "960.000,0"


def test_settings_configuration():
    assert Settings.model_config["env_prefix"] == "FREIGHT_VOLUME_"
    assert Settings.model_config["env_file"] == ".env"
    assert Settings.model_config["extra"] == "ignore"
