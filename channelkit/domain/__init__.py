"""Domain layer — channel entities and the dispatch/guard layer."""

from channelkit.domain.models import ChannelType, Message, RequestError, UnsupportedChannelOperation, User
from channelkit.domain.options import MessageEdit, MessagePayload, MessageQuery
from channelkit.domain.channel import MESSAGING, Channel, noop
from channelkit.domain.channels import DMChannel, GroupChannel, GuildChannel, channel_from_payload

__all__ = [
    "ChannelType",
    "Message",
    "RequestError",
    "UnsupportedChannelOperation",
    "User",
    "MessageEdit",
    "MessagePayload",
    "MessageQuery",
    "MESSAGING",
    "Channel",
    "noop",
    "DMChannel",
    "GroupChannel",
    "GuildChannel",
    "channel_from_payload",
]
