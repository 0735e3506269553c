"""
Connection components: staged builder and query channel
"""

from .query_channel import QueryChannel
from .builder import ChannelBuilder, AddressedChannelBuilder, ReadyChannelBuilder

__all__ = ['QueryChannel', 'ChannelBuilder', 'AddressedChannelBuilder', 'ReadyChannelBuilder']
