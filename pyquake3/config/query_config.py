"""
Query Configuration - settings for a single status query
"""

from dataclasses import dataclass, asdict, fields
from typing import Dict, Any, Optional

from ..errors import IncompleteConfigurationError
from .validation import (
    validate_address, validate_port, validate_timeout,
    validate_buffer_size, validate_log_level
)

DEFAULT_PORT = 27960
DEFAULT_BUFFER_SIZE = 1024


@dataclass
class QueryConfig:
    """Query configuration settings"""

    # Connection settings
    address: Optional[str] = None
    port: int = DEFAULT_PORT
    timeout: Optional[float] = None

    # Receive buffer, sized for the largest observed status reply
    buffer_size: int = DEFAULT_BUFFER_SIZE

    # Logging
    log_level: str = "INFO"

    # Output
    strip_colors: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'QueryConfig':
        """Create from dictionary, ignoring unknown keys"""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})

    def update(self, **kwargs):
        """Update configuration values"""
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def validate(self) -> 'QueryConfig':
        """
        Check every field.

        Raises:
            IncompleteConfigurationError: if no address was given
            ConfigValidationError: if a field holds an invalid value
        """
        if self.address is None:
            raise IncompleteConfigurationError("Query configuration has no address")

        validate_address(self.address)
        validate_port(self.port)
        validate_timeout(self.timeout)
        validate_buffer_size(self.buffer_size)
        validate_log_level(self.log_level)
        return self
