"""
Configuration and property lookup exceptions.
"""

from asyncsamsungac.exceptions import SamsungACException


class ConfigurationError(SamsungACException):
    """Exception raised for invalid client configuration."""
    pass


class UnknownPropertyError(ConfigurationError):
    """Exception raised when a property name is not registered."""
    pass


class ReadOnlyPropertyError(ConfigurationError):
    """Exception raised when writing to a property that has no write projection."""
    pass
