"""
Data models for pyquake3
"""

from .player import Player
from .status import StatusResponse

__all__ = ['Player', 'StatusResponse']
