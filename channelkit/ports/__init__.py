"""Port interfaces (Hexagonal Architecture)."""

from channelkit.ports.outbound import ChannelOwner

__all__ = ["ChannelOwner"]
