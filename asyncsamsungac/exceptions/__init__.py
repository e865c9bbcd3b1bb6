"""
Exceptions raised by asyncsamsungac.
"""


class SamsungACException(Exception):
    """Base exception for all asyncsamsungac errors."""
    pass
