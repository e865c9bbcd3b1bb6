from enum import IntEnum


class Active(IntEnum):
    INACTIVE = 0
    ACTIVE = 1


class SwingMode(IntEnum):
    SWING_DISABLED = 0
    SWING_ENABLED = 1


class CurrentHeaterCoolerState(IntEnum):
    INACTIVE = 0
    IDLE = 1
    HEATING = 2
    COOLING = 3


class TargetHeaterCoolerState(IntEnum):
    AUTO = 0
    HEAT = 1
    COOL = 2


class AutoClean(IntEnum):
    DISABLED = 0
    ENABLED = 1


# Device-side vocabulary
POWER_ON = "On"
POWER_OFF = "Off"

SWING_OPTION = "Comode_Nano"
SWING_OFF_OPTION = "Comode_Off"

AUTO_CLEAN_ON = "Autoclean_On"
AUTO_CLEAN_OFF = "Autoclean_Off"

COOL_MODE = "Cool"

# Operating modes reported as "cooling"
COOL_LIKE_MODES = frozenset({"CoolClean", "Cool", "Dry", "DryClean", "Auto", "Wind"})

MIN_TEMPERATURE = 18
MAX_TEMPERATURE = 30
TEMPERATURE_STEP = 1

MIN_FAN_SPEED = 0
MAX_FAN_SPEED = 4
