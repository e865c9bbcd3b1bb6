"""
Exceptions for write commands.
"""

from asyncsamsungac.exceptions import SamsungACException


class CommandFailedError(SamsungACException):
    """Exception raised when a command could not be delivered to the device."""

    def __init__(self, path: str, message=None):
        self.path = path
        self.message = message
        super().__init__(f"Command to {path} failed{': ' + message if message else ''}")
