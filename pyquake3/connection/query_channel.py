"""
Query Channel - a UDP socket connected to exactly one game server
"""

import socket
import logging
from typing import Optional, TYPE_CHECKING

from ..config.validation import IPAddress
from ..errors import TransportError
from ..models.status import StatusResponse
from ..protocol.constants import GETSTATUS_PROBE, STATUS_BUFFER_SIZE
from ..protocol.status_decoder import StatusDecoder, decode_status

if TYPE_CHECKING:
    from .builder import ChannelBuilder


class QueryChannel:
    """
    Connected datagram channel to one server.

    Channels are created by :meth:`ChannelBuilder.build` and are never pointed
    at another endpoint. They are not safe for concurrent use; give each
    thread its own channel.

    Usage:
        with QueryChannel.builder().with_address("192.0.2.10").with_port(27960).build() as channel:
            status = channel.query_status()
    """

    def __init__(self, address: IPAddress, port: int, sock: socket.socket):
        self.logger = logging.getLogger(__name__)
        self.address = address
        self.port = port
        self._socket: Optional[socket.socket] = sock

    @staticmethod
    def builder() -> 'ChannelBuilder':
        """Start configuring a new channel."""
        from .builder import ChannelBuilder
        return ChannelBuilder()

    @property
    def closed(self) -> bool:
        return self._socket is None

    @property
    def local_port(self) -> Optional[int]:
        """Ephemeral local port the socket is bound to."""
        if self._socket is None:
            return None
        return self._socket.getsockname()[1]

    def send(self, data: bytes) -> None:
        """
        Send ``data`` as a single datagram.

        Raises:
            TransportError: if the socket is closed or the write fails
        """
        if self._socket is None:
            raise TransportError("send failed: channel is closed", step="sending")

        try:
            sent = self._socket.send(data)
        except OSError as e:
            raise TransportError(f"send failed: {e}", step="sending") from e

        if sent != len(data):
            raise TransportError(
                f"send failed: wrote {sent} of {len(data)} bytes", step="sending"
            )

        self.logger.debug(f"Sent {sent} bytes to {self.address}:{self.port}")

    def receive(self, capacity: int) -> bytes:
        """
        Block until one datagram arrives and return exactly its bytes.

        Raises:
            TransportError: if the socket is closed, the read fails or the
                configured timeout expires
        """
        if self._socket is None:
            raise TransportError("receive failed: channel is closed", step="receiving")

        try:
            data = self._socket.recv(capacity)
        except OSError as e:
            raise TransportError(f"receive failed: {e}", step="receiving") from e

        self.logger.debug(f"Received {len(data)} bytes from {self.address}:{self.port}")
        return data

    def query_status(self, decoder: Optional[StatusDecoder] = None,
                     buffer_size: int = STATUS_BUFFER_SIZE) -> StatusResponse:
        """
        Send the ``getstatus`` probe and decode the reply.

        Args:
            decoder: Optional decoder overriding the default player parsing
            buffer_size: Receive buffer; replies longer than this are truncated

        Raises:
            TransportError: if sending or receiving fails
            MalformedResponseError: if the reply cannot be decoded
        """
        self.send(GETSTATUS_PROBE)
        payload = self.receive(buffer_size)

        if decoder is not None:
            return decoder.decode(payload)
        return decode_status(payload)

    def close(self) -> None:
        """Close the socket. Further sends and receives raise TransportError."""
        if self._socket is None:
            return

        self._socket.close()
        self._socket = None
        self.logger.info(f"Closed channel to {self.address}:{self.port}")

    def __enter__(self) -> 'QueryChannel':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<QueryChannel {self.address}:{self.port} {state}>"
