"""Projection table between device state and exposed property values.

Each :class:`PropertySpec` pairs a pure read projection with an optional write
projection. The appliance facade looks properties up by name, so exposing a
new property only means adding a row to :data:`PROPERTIES`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, Optional, Sequence, Tuple

from asyncsamsungac.enums import (
    Active,
    AutoClean,
    CurrentHeaterCoolerState,
    SwingMode,
    TargetHeaterCoolerState,
    AUTO_CLEAN_OFF,
    AUTO_CLEAN_ON,
    COOL_LIKE_MODES,
    COOL_MODE,
    MAX_FAN_SPEED,
    MAX_TEMPERATURE,
    MIN_FAN_SPEED,
    MIN_TEMPERATURE,
    POWER_OFF,
    POWER_ON,
    SWING_OFF_OPTION,
    SWING_OPTION,
    TEMPERATURE_STEP,
)
from asyncsamsungac.models.device import DeviceState

# (device-relative path, partial update)
Command = Tuple[str, Dict[str, Any]]

ReadProjection = Callable[[DeviceState], Any]
WriteProjection = Callable[[Any, Optional[DeviceState]], Command]


@dataclass(frozen=True)
class PropertySpec:
    """Static description of one exposed property."""

    name: str
    read: ReadProjection
    write: Optional[WriteProjection] = None
    requires_state: bool = False
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    min_step: Optional[float] = None
    valid_values: Optional[Sequence[Any]] = None
    aliases: Tuple[str, ...] = field(default=())

    @property
    def writable(self) -> bool:
        return self.write is not None

    def validate(self, value: Any) -> None:
        """Reject values outside the property's fixed range.

        Raises:
            ValueError: If ``value`` is not accepted
        """
        if self.valid_values is not None and value not in self.valid_values:
            raise ValueError(f"{self.name}: {value!r} not in {list(self.valid_values)}")
        has_range = self.min_value is not None or self.max_value is not None
        if has_range and (isinstance(value, bool) or not isinstance(value, (int, float))):
            raise ValueError(f"{self.name}: {value!r} is not a number")
        if self.min_value is not None and value < self.min_value:
            raise ValueError(f"{self.name}: {value} is below {self.min_value}")
        if self.max_value is not None and value > self.max_value:
            raise ValueError(f"{self.name}: {value} is above {self.max_value}")
        if self.min_step and self.min_value is not None:
            offset = (value - self.min_value) / self.min_step
            if offset != int(offset):
                raise ValueError(f"{self.name}: {value} is not a multiple of {self.min_step}")


# ----------------------------------------------------------------------
# Read projections


def read_active(state: DeviceState) -> Active:
    return Active.ACTIVE if state.power == POWER_ON else Active.INACTIVE


def read_current_temperature(state: DeviceState) -> Optional[float]:
    return state.current_temperature


def read_target_temperature(state: DeviceState) -> Optional[float]:
    return state.desired_temperature


def read_swing_mode(state: DeviceState) -> SwingMode:
    return SwingMode.SWING_ENABLED if SWING_OPTION in state.options else SwingMode.SWING_DISABLED


def read_current_heater_cooler_state(state: DeviceState) -> CurrentHeaterCoolerState:
    if state.primary_mode in COOL_LIKE_MODES:
        return CurrentHeaterCoolerState.COOLING
    return CurrentHeaterCoolerState.IDLE


def read_target_heater_cooler_state(state: DeviceState) -> TargetHeaterCoolerState:
    # Cooling is the only target the unit is driven to
    return TargetHeaterCoolerState.COOL


def read_rotation_speed(state: DeviceState) -> Optional[int]:
    return state.fan_speed


def read_auto_clean(state: DeviceState) -> AutoClean:
    return AutoClean.ENABLED if AUTO_CLEAN_ON in state.options else AutoClean.DISABLED


# ----------------------------------------------------------------------
# Write projections


def write_active(value: Any, state: Optional[DeviceState] = None) -> Command:
    power = POWER_ON if value == Active.ACTIVE else POWER_OFF
    return "", {"Operation": {"power": power}}


def write_target_temperature(value: Any, state: Optional[DeviceState] = None) -> Command:
    return "/temperatures/0", {"desired": value}


def write_swing_mode(value: Any, state: Optional[DeviceState] = None) -> Command:
    option = SWING_OPTION if value == SwingMode.SWING_ENABLED else SWING_OFF_OPTION
    # The mode resource is replaced as a whole, so resend the active modes
    modes = list(state.modes) if state is not None else []
    return "/mode", {"modes": modes, "options": [option]}


def write_target_heater_cooler_state(value: Any, state: Optional[DeviceState] = None) -> Command:
    return "/mode", {"modes": [COOL_MODE]}


def write_rotation_speed(value: Any, state: Optional[DeviceState] = None) -> Command:
    return "/wind", {"speedLevel": int(value)}


def write_auto_clean(value: Any, state: Optional[DeviceState] = None) -> Command:
    option = AUTO_CLEAN_ON if value == AutoClean.ENABLED else AUTO_CLEAN_OFF
    return "/mode", {"options": [option]}


def _build_table(specs: Iterable[PropertySpec]) -> Dict[str, PropertySpec]:
    table: Dict[str, PropertySpec] = {}
    for spec in specs:
        for key in (spec.name, *spec.aliases):
            if key in table:
                raise ValueError(f"Duplicate property name {key!r}")
            table[key] = spec
    return table


PROPERTIES: Dict[str, PropertySpec] = _build_table([
    PropertySpec(
        name="active",
        read=read_active,
        write=write_active,
        valid_values=tuple(Active),
    ),
    PropertySpec(
        name="current_temperature",
        read=read_current_temperature,
    ),
    PropertySpec(
        name="target_temperature",
        read=read_target_temperature,
        write=write_target_temperature,
        min_value=MIN_TEMPERATURE,
        max_value=MAX_TEMPERATURE,
        min_step=TEMPERATURE_STEP,
        aliases=("cooling_threshold_temperature",),
    ),
    PropertySpec(
        name="swing_mode",
        read=read_swing_mode,
        write=write_swing_mode,
        requires_state=True,
        valid_values=tuple(SwingMode),
    ),
    PropertySpec(
        name="current_heater_cooler_state",
        read=read_current_heater_cooler_state,
    ),
    PropertySpec(
        name="target_heater_cooler_state",
        read=read_target_heater_cooler_state,
        write=write_target_heater_cooler_state,
        valid_values=(TargetHeaterCoolerState.COOL,),
    ),
    PropertySpec(
        name="rotation_speed",
        read=read_rotation_speed,
        write=write_rotation_speed,
        min_value=MIN_FAN_SPEED,
        max_value=MAX_FAN_SPEED,
        min_step=1,
    ),
    PropertySpec(
        name="auto_clean",
        read=read_auto_clean,
        write=write_auto_clean,
        valid_values=tuple(AutoClean),
    ),
])
"""Exposed properties by name (aliases included)."""
