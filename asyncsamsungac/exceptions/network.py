"""
Network-related exceptions.
"""

from asyncsamsungac.exceptions import SamsungACException


class NetworkError(SamsungACException):
    """Exception raised for network-related errors."""
    pass


class NetworkConnectionError(NetworkError):
    """Exception raised when the air conditioner cannot be reached."""
    pass


class NetworkTimeoutError(NetworkError):
    """Exception raised when a request to the air conditioner times out."""
    pass


class ResponseError(NetworkError):
    """Exception raised when the device answers with an error status."""

    def __init__(self, status_code, message=None):
        """Initialize the exception with a status code and optional message.

        Args:
            status_code: HTTP status code
            message: Optional error message
        """
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP error {status_code}{': ' + message if message else ''}")
