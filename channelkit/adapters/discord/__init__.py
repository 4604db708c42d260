"""Discord adapter — ChannelOwner backed by discord.py."""

from channelkit.adapters.discord.owner import DiscordChannelOwner, message_from_discord, user_from_discord

__all__ = ["DiscordChannelOwner", "message_from_discord", "user_from_discord"]
