"""
Configuration validation utilities
"""

import ipaddress
import logging
from typing import Any, Optional, Union

from ..errors import ConfigValidationError, InvalidAddressError

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_address(address: Any) -> IPAddress:
    """
    Convert a value to an IP address.

    Accepts a textual literal ("192.0.2.1", "::1"), an int, packed bytes,
    an ipaddress object, or a sequence of 4 or 16 octets.
    """
    if isinstance(address, (ipaddress.IPv4Address, ipaddress.IPv6Address)):
        return address

    if isinstance(address, bool) or address is None:
        raise InvalidAddressError(f"Cannot convert {address!r} to an IP address")

    if isinstance(address, (list, tuple, bytearray)):
        if len(address) not in (4, 16):
            raise InvalidAddressError(f"Address must have 4 or 16 octets, got {len(address)}")
        try:
            address = bytes(address)
        except (TypeError, ValueError) as e:
            raise InvalidAddressError(f"Invalid address octets {address!r}: {e}") from e

    if isinstance(address, str):
        address = address.strip()

    try:
        return ipaddress.ip_address(address)
    except ValueError as e:
        raise InvalidAddressError(f"Cannot convert {address!r} to an IP address") from e


def validate_port(port: int) -> int:
    """Validate port number (any unsigned 16-bit value)"""
    if not isinstance(port, int) or isinstance(port, bool):
        raise ConfigValidationError("Port must be an integer")

    if port < 0 or port > 65535:
        raise ConfigValidationError("Port must be between 0 and 65535")

    return port


def validate_timeout(timeout: Optional[float]) -> Optional[float]:
    """Validate timeout value; None means block forever"""
    if timeout is None:
        return None

    if not isinstance(timeout, (int, float)) or isinstance(timeout, bool):
        raise ConfigValidationError("Timeout must be a number")

    if timeout <= 0:
        raise ConfigValidationError("Timeout must be greater than 0")

    return float(timeout)


def validate_buffer_size(size: int) -> int:
    """Validate receive buffer size"""
    if not isinstance(size, int) or isinstance(size, bool):
        raise ConfigValidationError("Buffer size must be an integer")

    if size < 1 or size > 65535:
        raise ConfigValidationError("Buffer size must be between 1 and 65535")

    return size


def validate_log_level(level: str) -> int:
    """Validate a log level name and return its numeric value"""
    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        raise ConfigValidationError(f"Log level must be one of: {', '.join(VALID_LOG_LEVELS)}")

    return getattr(logging, level.upper())
