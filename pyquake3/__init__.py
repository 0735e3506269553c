"""
pyquake3 - a Quake III ``getstatus`` query client

Usage:
    from pyquake3 import QueryChannel

    with (QueryChannel.builder()
            .with_address("192.0.2.10")
            .with_port(27960)
            .with_timeout(2.0)
            .build()) as channel:
        status = channel.query_status()

    print(status.hostname, status.map_name)
    for player in status.players:
        print(player.score, player.ping, player.name)

Or quick query:
    from pyquake3 import query_status

    status = query_status("192.0.2.10", 27960)

Decoding a captured reply:
    from pyquake3 import decode_status

    status = decode_status(payload)
"""

__version__ = "1.0.0"

from .errors import (
    Quake3Error,
    ConfigValidationError,
    InvalidAddressError,
    IncompleteConfigurationError,
    TransportError,
    MalformedResponseError
)
from .models import Player, StatusResponse
from .protocol.status_decoder import StatusDecoder, decode_status, parse_player_line
from .protocol.colors import strip_colors
from .connection import QueryChannel, ChannelBuilder, AddressedChannelBuilder, ReadyChannelBuilder
from .config import QueryConfig, DEFAULT_PORT
from .client import query_status, query_server, open_channel

__all__ = [
    "Quake3Error",
    "ConfigValidationError",
    "InvalidAddressError",
    "IncompleteConfigurationError",
    "TransportError",
    "MalformedResponseError",
    "Player",
    "StatusResponse",
    "StatusDecoder",
    "decode_status",
    "parse_player_line",
    "strip_colors",
    "QueryChannel",
    "ChannelBuilder",
    "AddressedChannelBuilder",
    "ReadyChannelBuilder",
    "QueryConfig",
    "DEFAULT_PORT",
    "query_status",
    "query_server",
    "open_channel",
]
