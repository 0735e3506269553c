"""
pyquake3 - convenience entry points for drivers
"""

import logging
from typing import Any, Optional

from .config.query_config import QueryConfig, DEFAULT_PORT
from .connection.query_channel import QueryChannel
from .models.status import StatusResponse

logger = logging.getLogger(__name__)


def open_channel(config: QueryConfig) -> QueryChannel:
    """
    Build a channel from a QueryConfig.

    Raises:
        IncompleteConfigurationError: if the config has no address
        ConfigValidationError: if a field is invalid
        TransportError: if the socket cannot be bound or connected
    """
    config.validate()
    return (QueryChannel.builder()
            .with_address(config.address)
            .with_port(config.port)
            .with_timeout(config.timeout)
            .build())


def query_server(config: QueryConfig) -> StatusResponse:
    """Query the server described by ``config`` once."""
    with open_channel(config) as channel:
        status = channel.query_status(buffer_size=config.buffer_size)

    logger.debug(f"{config.address}:{config.port} reported {status.player_count} players")
    return status


def query_status(address: Any, port: int = DEFAULT_PORT,
                 timeout: Optional[float] = None) -> StatusResponse:
    """
    Quick helper: build a channel, send ``getstatus`` and decode the reply.

    Usage:
        status = query_status("192.0.2.10", 27960, timeout=2.0)
        for player in status.players:
            print(player.clean_name, player.score)
    """
    with (QueryChannel.builder()
          .with_address(address)
          .with_port(port)
          .with_timeout(timeout)
          .build()) as channel:
        return channel.query_status()
