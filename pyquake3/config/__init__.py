"""
Configuration system for pyquake3
"""

from .query_config import QueryConfig, DEFAULT_PORT, DEFAULT_BUFFER_SIZE
from ..errors import ConfigValidationError

__all__ = ['QueryConfig', 'ConfigValidationError', 'DEFAULT_PORT', 'DEFAULT_BUFFER_SIZE']
