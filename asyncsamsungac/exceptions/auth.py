"""
Authentication-related exceptions.
"""

from asyncsamsungac.exceptions import SamsungACException


class AuthenticationError(SamsungACException):
    """Exception raised when the bearer token or client certificate is rejected."""
    pass
