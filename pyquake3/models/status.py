"""Status reply data structures."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any

from .player import Player
from ..protocol.colors import strip_colors
from ..protocol.constants import STATUS_RESPONSE_COMMAND


@dataclass
class StatusResponse:
    """
    Decoded reply to a ``getstatus`` probe.

    Attributes:
        header: Raw first line of the reply (out-of-band marker included)
        variables: Server variables; the last duplicate key wins
        players: Players in the order the server listed them
    """

    header: str
    variables: Dict[str, str] = field(default_factory=dict)
    players: List[Player] = field(default_factory=list)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a server variable."""
        return self.variables.get(key, default)

    @property
    def is_status_reply(self) -> bool:
        """True when the header names the statusResponse command."""
        return self.header.endswith(STATUS_RESPONSE_COMMAND)

    @property
    def hostname(self) -> str:
        return self.variables.get('sv_hostname', self.variables.get('hostname', ''))

    @property
    def map_name(self) -> str:
        return self.variables.get('mapname', '')

    @property
    def game_name(self) -> str:
        return self.variables.get('gamename', '')

    @property
    def max_clients(self) -> Optional[int]:
        """``sv_maxclients`` as an int, or None when absent or not numeric."""
        value = self.variables.get('sv_maxclients')
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None

    @property
    def needs_password(self) -> bool:
        return self.variables.get('g_needpass', '0') == '1'

    @property
    def player_count(self) -> int:
        return len(self.players)

    @property
    def humans(self) -> List[Player]:
        return [player for player in self.players if not player.is_bot]

    @property
    def bots(self) -> List[Player]:
        return [player for player in self.players if player.is_bot]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'header': self.header,
            'variables': dict(self.variables),
            'players': [player.to_dict() for player in self.players]
        }

    def __str__(self) -> str:
        """String representation of the server status."""
        name = strip_colors(self.hostname) or 'unnamed server'
        limit = self.max_clients if self.max_clients is not None else '?'
        return f"{name} on {self.map_name or '?'} ({self.player_count}/{limit} players)"
