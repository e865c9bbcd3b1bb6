"""High-level air conditioner proxy.

Binds a transport, a :class:`DeviceStateCache` and a :class:`CommandDispatcher`
for one unit and exposes its properties by name.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from asyncsamsungac.api.transport import HttpTransport, Transport
from asyncsamsungac.cache import DEFAULT_CACHE_TTL, DeviceStateCache, StateListener
from asyncsamsungac.dispatcher import CommandDispatcher
from asyncsamsungac.enums import Active, SwingMode, TargetHeaterCoolerState
from asyncsamsungac.exceptions.api import StateUnavailableError
from asyncsamsungac.exceptions.command import CommandFailedError
from asyncsamsungac.exceptions.config import ReadOnlyPropertyError, UnknownPropertyError
from asyncsamsungac.models.device import DeviceState
from asyncsamsungac.models.device_config import AirConditionerConfig
from asyncsamsungac.properties import PROPERTIES, PropertySpec

__all__: Iterable[str] = ["AirConditioner"]

logger = logging.getLogger(__name__)

MANUFACTURER = "Samsung"
MODEL = "Air Conditioner"


class AirConditioner:
    """Proxy bound to a single air conditioner."""

    def __init__(
        self,
        transport: Transport,
        *,
        device_index: int = 0,
        cache_ttl: float = DEFAULT_CACHE_TTL,
        eager_refresh: bool = True,
        name: Optional[str] = None,
        serial_number: str = "DefaultSN",
        properties: Mapping[str, PropertySpec] = PROPERTIES,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the proxy.

        Parameters
        ----------
        transport : Transport
            Object used to read ``/devices`` and to send commands
        device_index : int, optional
            Position of the unit in the ``Devices`` list, used for reads and writes
        cache_ttl : float, optional
            Seconds a fetched state is trusted
        eager_refresh : bool, optional
            Re-read the state right after a successful command
        name : str, optional
            Display name
        serial_number : str, optional
            Serial number reported in :attr:`information`
        properties : Mapping[str, PropertySpec], optional
            Property table, defaults to :data:`asyncsamsungac.properties.PROPERTIES`
        clock : Callable[[], float], optional
            Monotonic time source used for cache freshness
        """
        self._transport = transport
        self.device_index = device_index
        self.name = name or f"Air Conditioner {device_index}"
        self.serial_number = serial_number
        self._properties = dict(properties)

        self.cache = DeviceStateCache(transport, device_index, cache_ttl, clock=clock)
        self.dispatcher = CommandDispatcher(
            transport, self.cache, device_index, eager_refresh=eager_refresh
        )

    @classmethod
    def from_config(cls, config: AirConditionerConfig) -> "AirConditioner":
        """Create a proxy talking HTTPS to the unit described by ``config``."""
        transport = HttpTransport(
            config.host,
            config.token,
            config.cert_path,
            port=config.port,
            timeout=config.timeout,
        )
        return cls(
            transport,
            device_index=config.device_index,
            cache_ttl=config.cache_ttl,
            eager_refresh=config.eager_refresh,
            name=config.name,
            serial_number=config.serial_number,
        )

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    # ------------------------------------------------------------------
    # Generic property access

    @property
    def information(self) -> Dict[str, str]:
        """Static accessory information."""
        return {
            "manufacturer": MANUFACTURER,
            "model": MODEL,
            "serial_number": self.serial_number,
            "name": self.name,
        }

    @property
    def property_names(self) -> list[str]:
        return list(self._properties)

    def describe(self, name: str) -> PropertySpec:
        """Return the :class:`PropertySpec` registered under ``name``."""
        try:
            return self._properties[name]
        except KeyError:
            raise UnknownPropertyError(f"Unknown property {name!r}") from None

    async def state(self) -> DeviceState:
        """Return the (possibly cached) device state."""
        return await self.cache.get()

    async def get(self, name: str) -> Any:
        """Read one property.

        Raises
        ------
        UnknownPropertyError
            If ``name`` is not registered
        StateUnavailableError
            If no state could be fetched and none is cached
        """
        spec = self.describe(name)
        value = spec.read(await self.cache.get())
        logger.debug(f"Get {name}: {value}")
        return value

    async def get_all(self) -> Dict[str, Any]:
        """Read every property from a single snapshot."""
        state = await self.cache.get()
        seen = set()
        values = {}
        for spec in self._properties.values():
            if spec.name in seen:
                continue
            seen.add(spec.name)
            values[spec.name] = spec.read(state)
        return values

    async def set(self, name: str, value: Any) -> None:
        """Write one property.

        Raises
        ------
        UnknownPropertyError
            If ``name`` is not registered
        ReadOnlyPropertyError
            If the property cannot be written
        ValueError
            If ``value`` is outside the property's range
        CommandFailedError
            If the device rejected or never received the command, or the
            current state needed to build it could not be read
        NetworkTimeoutError
            If the device did not answer in time
        """
        spec = self.describe(name)
        if spec.write is None:
            raise ReadOnlyPropertyError(f"Property {name!r} is read-only")
        spec.validate(value)

        current = None
        if spec.requires_state:
            try:
                current = await self.cache.get()
            except StateUnavailableError as exc:
                raise CommandFailedError(
                    self.dispatcher.resolve(""), f"cannot build {name} command: {exc}"
                ) from exc
        path, payload = spec.write(value, current)
        logger.info(f"Set {name} to {value}")
        await self.dispatcher.send(path, payload)

    def add_listener(self, callback: StateListener) -> None:
        """Be notified with every freshly fetched state."""
        self.cache.add_listener(callback)

    def remove_listener(self, callback: StateListener) -> None:
        self.cache.remove_listener(callback)

    # ------------------------------------------------------------------
    # Convenience accessors

    async def get_active(self) -> Active:
        return await self.get("active")

    async def set_active(self, value: Active) -> None:
        await self.set("active", value)

    async def turn_on(self) -> None:
        await self.set_active(Active.ACTIVE)

    async def turn_off(self) -> None:
        await self.set_active(Active.INACTIVE)

    async def get_current_temperature(self) -> Optional[float]:
        return await self.get("current_temperature")

    async def get_target_temperature(self) -> Optional[float]:
        return await self.get("target_temperature")

    async def set_target_temperature(self, value: int) -> None:
        await self.set("target_temperature", value)

    async def get_swing_mode(self) -> SwingMode:
        return await self.get("swing_mode")

    async def set_swing_mode(self, value: SwingMode) -> None:
        await self.set("swing_mode", value)

    async def get_current_heater_cooler_state(self):
        return await self.get("current_heater_cooler_state")

    async def get_target_heater_cooler_state(self) -> TargetHeaterCoolerState:
        return await self.get("target_heater_cooler_state")

    async def set_target_heater_cooler_state(self, value: TargetHeaterCoolerState) -> None:
        await self.set("target_heater_cooler_state", value)
