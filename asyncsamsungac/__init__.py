"""
Asyncsamsungac - Async Python client for Samsung air conditioners.

This package provides an asynchronous client for the local REST API of Samsung
air conditioners, exposing the unit as a set of cached, named properties.
"""

__version__ = "0.1.0"

from asyncsamsungac.appliance import AirConditioner
from asyncsamsungac.api.transport import Transport, HttpTransport, CurlTransport
from asyncsamsungac.cache import DeviceStateCache
from asyncsamsungac.dispatcher import CommandDispatcher
from asyncsamsungac.models.device import DeviceState
from asyncsamsungac.models.device_config import AirConditionerConfig
from asyncsamsungac.properties import PROPERTIES, PropertySpec
from asyncsamsungac.exceptions import SamsungACException
from asyncsamsungac.exceptions.api import ParseError, DeviceNotFoundError, StateUnavailableError
from asyncsamsungac.exceptions.auth import AuthenticationError
from asyncsamsungac.exceptions.command import CommandFailedError
from asyncsamsungac.exceptions.config import ConfigurationError, UnknownPropertyError, ReadOnlyPropertyError
from asyncsamsungac.exceptions.network import NetworkError, NetworkConnectionError, NetworkTimeoutError, ResponseError
from asyncsamsungac.enums import Active, SwingMode, CurrentHeaterCoolerState, TargetHeaterCoolerState, AutoClean


async def connect(config: AirConditionerConfig) -> AirConditioner:
    """
    Create an air conditioner proxy and read its state once.

    Args:
        config: Connection configuration

    Returns:
        An AirConditioner whose cache is already warm
    """
    appliance = AirConditioner.from_config(config)
    await appliance.state()
    return appliance
