"""channelkit — channel facade over a Discord client."""

from channelkit.config import CONFIG, AppConfig, __version__
from channelkit.domain.channel import Channel, noop
from channelkit.domain.channels import DMChannel, GroupChannel, GuildChannel, channel_from_payload
from channelkit.domain.models import (
    SELF_USER,
    ChannelType,
    Message,
    RequestError,
    UnsupportedChannelOperation,
    User,
)
from channelkit.domain.options import MessageEdit, MessagePayload, MessageQuery
from channelkit.ports.outbound import ChannelOwner

__all__ = [
    "CONFIG",
    "AppConfig",
    "__version__",
    "Channel",
    "noop",
    "DMChannel",
    "GroupChannel",
    "GuildChannel",
    "channel_from_payload",
    "SELF_USER",
    "ChannelType",
    "Message",
    "RequestError",
    "UnsupportedChannelOperation",
    "User",
    "MessageEdit",
    "MessagePayload",
    "MessageQuery",
    "ChannelOwner",
]
