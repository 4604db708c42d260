"""Concrete channel variants and construction from Discord channel payloads."""

from typing import Any, Dict, List, Optional

from channelkit.domain.channel import Channel
from channelkit.domain.models import ChannelID, ChannelType, MessageID, User, UserID, snowflake
from channelkit.ports.outbound import ChannelOwner

GUILD_TYPES = frozenset({
    ChannelType.GUILD_TEXT,
    ChannelType.GUILD_VOICE,
    ChannelType.GUILD_CATEGORY,
})


class GuildChannel(Channel):
    """Text, voice or category channel inside a guild."""

    def __init__(
        self,
        id: ChannelID,
        type: ChannelType,
        owner: Optional[ChannelOwner] = None,
        last_message_id: Optional[MessageID] = None,
        *,
        guild_id: Optional[int] = None,
        name: str = "",
        position: int = 0,
        topic: Optional[str] = None,
        parent_id: Optional[ChannelID] = None,
        nsfw: bool = False,
        bitrate: Optional[int] = None,
        user_limit: Optional[int] = None,
    ):
        if ChannelType(type) not in GUILD_TYPES:
            raise ValueError(f"{ChannelType(type).name} is not a guild channel type")
        super().__init__(id, type, owner, last_message_id)
        self.guild_id = guild_id
        self.name = name
        self.position = position
        self.topic = topic
        self.parent_id = parent_id
        self.nsfw = nsfw
        # Voice only
        self.bitrate = bitrate
        self.user_limit = user_limit


class DMChannel(Channel):
    """One-on-one conversation with a user."""

    def __init__(
        self,
        id: ChannelID,
        owner: Optional[ChannelOwner] = None,
        last_message_id: Optional[MessageID] = None,
        *,
        recipient: Optional[User] = None,
    ):
        super().__init__(id, ChannelType.DM, owner, last_message_id)
        self.recipient = recipient


class GroupChannel(Channel):
    """Group DM."""

    def __init__(
        self,
        id: ChannelID,
        owner: Optional[ChannelOwner] = None,
        last_message_id: Optional[MessageID] = None,
        *,
        name: Optional[str] = None,
        icon: Optional[str] = None,
        owner_id: Optional[UserID] = None,
        recipients: Optional[List[User]] = None,
    ):
        super().__init__(id, ChannelType.GROUP_DM, owner, last_message_id)
        self.name = name
        self.icon = icon
        self.owner_id = owner_id
        self.recipients = recipients or []


def channel_from_payload(data: Dict[str, Any], owner: Optional[ChannelOwner] = None) -> Channel:
    """Build the matching variant from a Discord channel object."""
    try:
        kind = ChannelType(int(data["type"]))
    except ValueError:
        raise ValueError(f"Unsupported channel type: {data['type']!r}")

    channel_id = int(data["id"])
    last_message_id = snowflake(data.get("last_message_id"))

    if kind in GUILD_TYPES:
        return GuildChannel(
            channel_id,
            kind,
            owner,
            last_message_id,
            guild_id=snowflake(data.get("guild_id")),
            name=data.get("name", ""),
            position=data.get("position", 0),
            topic=data.get("topic"),
            parent_id=snowflake(data.get("parent_id")),
            nsfw=data.get("nsfw", False),
            bitrate=data.get("bitrate"),
            user_limit=data.get("user_limit"),
        )

    recipients = [User.from_payload(r) for r in data.get("recipients", [])]
    if kind == ChannelType.DM:
        return DMChannel(
            channel_id,
            owner,
            last_message_id,
            recipient=recipients[0] if recipients else None,
        )
    return GroupChannel(
        channel_id,
        owner,
        last_message_id,
        name=data.get("name"),
        icon=data.get("icon"),
        owner_id=snowflake(data.get("owner_id")),
        recipients=recipients,
    )
