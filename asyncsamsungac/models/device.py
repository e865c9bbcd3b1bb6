"""
Models for Samsung air conditioner state.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional, List

from pydantic import BaseModel, Field, ValidationError

from asyncsamsungac.exceptions.api import ParseError


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return an object section of a device entry, or an empty dict if absent."""
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ParseError(f"Section '{key}' must be an object, got {type(section).__name__}")
    return section


def _first(items: Any) -> Dict[str, Any]:
    """Return the first mapping of a list section, or an empty dict."""
    if isinstance(items, list) and items and isinstance(items[0], dict):
        return items[0]
    return {}


class DeviceState(BaseModel):
    """Snapshot of a single air conditioner as reported by ``GET /devices``."""

    id: Optional[str] = None
    power: Optional[str] = None
    current_temperature: Optional[float] = None
    desired_temperature: Optional[float] = None
    modes: List[str] = Field(default_factory=list)
    options: List[str] = Field(default_factory=list)
    fan_speed: Optional[int] = None

    # Store the raw state data for access to device-specific fields
    raw_state: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "DeviceState":
        """
        Create a DeviceState from one element of the ``Devices`` list.

        Args:
            data: Decoded JSON object describing the device

        Returns:
            A DeviceState instance

        Raises:
            ParseError: If the element or one of its sections is malformed
        """
        if not isinstance(data, dict):
            raise ParseError(f"Device entry must be an object, got {type(data).__name__}")

        operation = _section(data, "Operation")
        mode = _section(data, "Mode")
        wind = _section(data, "Wind")
        temperatures = data.get("Temperatures")
        if temperatures is not None and not isinstance(temperatures, list):
            raise ParseError("Section 'Temperatures' must be a list")
        temperature = _first(temperatures)

        try:
            return cls(
                id=data.get("Id"),
                power=operation.get("power"),
                current_temperature=temperature.get("current"),
                desired_temperature=temperature.get("desired"),
                modes=mode.get("modes") or [],
                options=mode.get("options") or [],
                fan_speed=wind.get("speedLevel"),
                raw_state=data,
            )
        except ValidationError as exc:
            raise ParseError(f"Malformed device entry: {exc}") from exc

    @property
    def is_on(self) -> bool:
        """Whether the unit reports power ``On``."""
        return self.power == "On"

    @property
    def primary_mode(self) -> Optional[str]:
        """First entry of the active mode list, if any."""
        return self.modes[0] if self.modes else None


@dataclass
class CacheEntry:
    """Last known device state and the monotonic time it was fetched at."""

    state: Optional[DeviceState] = None
    fetched_at: Optional[float] = None

    @property
    def empty(self) -> bool:
        return self.state is None


@dataclass(frozen=True)
class PendingWrite:
    """A command on its way to the device."""

    path: str
    payload: Dict[str, Any]
