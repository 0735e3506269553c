"""
Quake III status protocol
"""

from .constants import GETSTATUS_PROBE, OOB_MARKER, STATUS_BUFFER_SIZE
from .colors import strip_colors, has_colors

__all__ = ['GETSTATUS_PROBE', 'OOB_MARKER', 'STATUS_BUFFER_SIZE', 'strip_colors', 'has_colors']
