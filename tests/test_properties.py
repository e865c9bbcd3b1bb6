import pytest

from asyncsamsungac.enums import (
    Active,
    AutoClean,
    CurrentHeaterCoolerState,
    SwingMode,
    TargetHeaterCoolerState,
)
from asyncsamsungac.models.device import DeviceState
from asyncsamsungac.properties import PROPERTIES, PropertySpec, _build_table

from conftest import make_device


def state(**kwargs):
    return DeviceState.from_dict(make_device(**kwargs))


def test_active_projection():
    assert PROPERTIES["active"].read(state(power="On")) == Active.ACTIVE
    assert PROPERTIES["active"].read(state(power="Off")) == Active.INACTIVE
    assert PROPERTIES["active"].write(Active.ACTIVE, None) == ("", {"Operation": {"power": "On"}})
    assert PROPERTIES["active"].write(Active.INACTIVE, None) == ("", {"Operation": {"power": "Off"}})


def test_temperature_projections():
    s = state(current=27, desired=23)

    assert PROPERTIES["current_temperature"].read(s) == 27
    assert PROPERTIES["target_temperature"].read(s) == 23
    assert PROPERTIES["target_temperature"].write(20, None) == ("/temperatures/0", {"desired": 20})
    assert PROPERTIES["cooling_threshold_temperature"] is PROPERTIES["target_temperature"]
    assert not PROPERTIES["current_temperature"].writable


def test_swing_projection_keeps_active_modes():
    spec = PROPERTIES["swing_mode"]
    s = state(modes=["Dry"], options=["Comode_Nano"])

    assert spec.read(s) == SwingMode.SWING_ENABLED
    assert spec.read(state(options=["Comode_Off"])) == SwingMode.SWING_DISABLED
    assert spec.requires_state
    assert spec.write(SwingMode.SWING_DISABLED, s) == ("/mode", {"modes": ["Dry"], "options": ["Comode_Off"]})
    assert spec.write(SwingMode.SWING_ENABLED, s) == ("/mode", {"modes": ["Dry"], "options": ["Comode_Nano"]})


@pytest.mark.parametrize("mode", ["CoolClean", "Cool", "Dry", "DryClean", "Auto", "Wind"])
def test_cool_like_modes_report_cooling(mode):
    assert PROPERTIES["current_heater_cooler_state"].read(state(modes=[mode])) == CurrentHeaterCoolerState.COOLING


@pytest.mark.parametrize("modes", [["Heat"], [], ["Heat", "Cool"]])
def test_other_modes_report_idle(modes):
    assert PROPERTIES["current_heater_cooler_state"].read(state(modes=modes)) == CurrentHeaterCoolerState.IDLE


def test_target_heater_cooler_state():
    spec = PROPERTIES["target_heater_cooler_state"]

    assert spec.read(state()) == TargetHeaterCoolerState.COOL
    assert spec.write(TargetHeaterCoolerState.COOL, None) == ("/mode", {"modes": ["Cool"]})
    with pytest.raises(ValueError):
        spec.validate(TargetHeaterCoolerState.HEAT)


def test_fan_and_auto_clean_projections():
    s = state(speed=3, options=["Autoclean_On"])

    assert PROPERTIES["rotation_speed"].read(s) == 3
    assert PROPERTIES["rotation_speed"].write(1, None) == ("/wind", {"speedLevel": 1})
    assert PROPERTIES["auto_clean"].read(s) == AutoClean.ENABLED
    assert PROPERTIES["auto_clean"].write(AutoClean.DISABLED, None) == ("/mode", {"options": ["Autoclean_Off"]})


@pytest.mark.parametrize("value", [17, 31, 24.5])
def test_temperature_range_rejected(value):
    with pytest.raises(ValueError):
        PROPERTIES["target_temperature"].validate(value)


@pytest.mark.parametrize("value", [18, 24, 30])
def test_temperature_range_accepted(value):
    PROPERTIES["target_temperature"].validate(value)


def test_projections_tolerate_missing_sections():
    s = DeviceState.from_dict({"Id": "0"})

    assert PROPERTIES["active"].read(s) == Active.INACTIVE
    assert PROPERTIES["current_temperature"].read(s) is None
    assert PROPERTIES["swing_mode"].read(s) == SwingMode.SWING_DISABLED
    assert PROPERTIES["current_heater_cooler_state"].read(s) == CurrentHeaterCoolerState.IDLE


def test_duplicate_names_rejected():
    spec = PropertySpec(name="a", read=lambda s: None, aliases=("b",))
    other = PropertySpec(name="b", read=lambda s: None)

    with pytest.raises(ValueError):
        _build_table([spec, other])


@pytest.mark.parametrize("value", ["24", None, True, [24]])
def test_non_numeric_values_rejected(value):
    with pytest.raises(ValueError):
        PROPERTIES["target_temperature"].validate(value)
