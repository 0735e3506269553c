"""
Staged Builder for QueryChannel
===============================

Each configuration stage is its own class and only offers the next valid
step, so a channel can never be built from a partial configuration:

    ChannelBuilder            .with_address(addr) -> AddressedChannelBuilder
    AddressedChannelBuilder   .with_port(port)    -> ReadyChannelBuilder
    ReadyChannelBuilder       .with_timeout(secs) -> ReadyChannelBuilder
                              .build()            -> QueryChannel

Example usage:
    channel = (QueryChannel.builder()
        .with_address("192.0.2.10")
        .with_port(27960)
        .with_timeout(2.0)
        .build())

Stages are immutable; every step returns a new object.
"""

import socket
import logging
from typing import Any, Optional

from ..config.validation import IPAddress, validate_address, validate_port, validate_timeout
from ..errors import TransportError
from .query_channel import QueryChannel

logger = logging.getLogger(__name__)


class ChannelBuilder:
    """Initial stage: nothing configured yet."""

    __slots__ = ()

    def with_address(self, address: Any) -> 'AddressedChannelBuilder':
        """
        Set the server address.

        Args:
            address: IP literal, int, packed bytes, ipaddress object or
                sequence of 4/16 octets

        Raises:
            InvalidAddressError: if the value is not an IP address
        """
        return AddressedChannelBuilder(validate_address(address))


class AddressedChannelBuilder:
    """Second stage: address known, port missing."""

    __slots__ = ('_address',)

    def __init__(self, address: IPAddress):
        self._address = address

    @property
    def address(self) -> IPAddress:
        return self._address

    def with_port(self, port: int) -> 'ReadyChannelBuilder':
        """
        Set the server port.

        Raises:
            ConfigValidationError: if port is not in 0..65535
        """
        return ReadyChannelBuilder(self._address, validate_port(port))


class ReadyChannelBuilder:
    """Final stage: address and port known, channel can be built."""

    __slots__ = ('_address', '_port', '_timeout')

    def __init__(self, address: IPAddress, port: int, timeout: Optional[float] = None):
        self._address = address
        self._port = port
        self._timeout = timeout

    @property
    def address(self) -> IPAddress:
        return self._address

    @property
    def port(self) -> int:
        return self._port

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    def with_timeout(self, timeout: Optional[float]) -> 'ReadyChannelBuilder':
        """
        Set a socket read timeout in seconds (None blocks forever).

        An expired timeout surfaces from receive() as TransportError.
        """
        return ReadyChannelBuilder(self._address, self._port, validate_timeout(timeout))

    def build(self) -> QueryChannel:
        """
        Bind a datagram socket to an ephemeral local port and connect it.

        Raises:
            TransportError: if the socket cannot be created, bound or connected
        """
        if self._address.version == 6:
            family, wildcard = socket.AF_INET6, "::"
        else:
            family, wildcard = socket.AF_INET, "0.0.0.0"

        try:
            sock = socket.socket(family, socket.SOCK_DGRAM)
        except OSError as e:
            raise TransportError(f"binding failed: {e}", step="binding") from e

        try:
            try:
                sock.bind((wildcard, 0))
            except OSError as e:
                raise TransportError(f"binding failed: {e}", step="binding") from e

            try:
                sock.connect((str(self._address), self._port))
            except OSError as e:
                raise TransportError(
                    f"connecting to {self._address}:{self._port} failed: {e}", step="connecting"
                ) from e

            sock.settimeout(self._timeout)
        except TransportError:
            sock.close()
            raise

        logger.info(f"Opened channel to {self._address}:{self._port}")
        return QueryChannel(self._address, self._port, sock)
