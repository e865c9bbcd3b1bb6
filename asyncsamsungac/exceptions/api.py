"""
Exceptions for device state retrieval.
"""

from asyncsamsungac.exceptions import SamsungACException


class ParseError(SamsungACException):
    """Exception raised when a device response cannot be interpreted."""
    pass


class DeviceNotFoundError(ParseError):
    """Exception raised when the configured device index is not in the response."""

    def __init__(self, device_index: int, available: int):
        self.device_index = device_index
        self.available = available
        super().__init__(
            f"Device index {device_index} not found ({available} device(s) reported)"
        )


class StateUnavailableError(SamsungACException):
    """Exception raised when no device state could be fetched and none is cached."""
    pass
