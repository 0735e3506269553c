"""
Player model for the status roster
"""

from dataclasses import dataclass, asdict
from typing import Dict, Any

from ..protocol.colors import strip_colors


@dataclass
class Player:
    """A connected player as reported in a status reply."""

    score: int = 0
    ping: int = 0
    name: str = ""  # Raw, color codes included

    @property
    def clean_name(self) -> str:
        """Name without color codes or surrounding quotes."""
        return strip_colors(self.name).strip('"')

    @property
    def is_bot(self) -> bool:
        """Bots always report a ping of zero."""
        return self.ping == 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.clean_name} (score {self.score}, ping {self.ping})"
