"""
Exception hierarchy for pyquake3
"""

from typing import Optional


class Quake3Error(Exception):
    """Base class for every error raised by pyquake3"""
    pass


class ConfigValidationError(Quake3Error, ValueError):
    """Raised when a configuration value is rejected"""
    pass


class InvalidAddressError(ConfigValidationError):
    """Raised when a value cannot be converted to an IP address"""
    pass


class IncompleteConfigurationError(Quake3Error):
    """Raised when a required configuration field was never supplied"""
    pass


class TransportError(Quake3Error):
    """
    Raised when the UDP socket could not be bound, connected, written or read.

    The underlying OSError (if any) is chained as ``__cause__``.
    """

    def __init__(self, message: str, step: Optional[str] = None):
        super().__init__(message)
        self.step = step


class MalformedResponseError(Quake3Error):
    """Raised when a status reply is structurally invalid"""
    pass
