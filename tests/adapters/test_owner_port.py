"""Tests for ChannelOwner protocol conformance.

Verifies that owner implementations expose every forwarded operation.
"""

from unittest.mock import MagicMock

from channelkit.adapters.discord.owner import DiscordChannelOwner
from channelkit.ports.outbound import ChannelOwner

OWNER_METHODS = [
    "add_reaction",
    "delete_channel",
    "delete_message",
    "delete_messages",
    "delete_reaction",
    "edit_message",
    "get_message",
    "get_messages",
    "get_reaction",
    "get_pinned_messages",
    "pin",
    "send",
    "unpin",
]


class TestChannelOwnerConformance:
    def test_discord_owner_is_channel_owner(self):
        owner = DiscordChannelOwner(MagicMock())
        assert isinstance(owner, ChannelOwner)

    def test_discord_owner_has_every_method(self):
        for name in OWNER_METHODS:
            assert callable(getattr(DiscordChannelOwner, name)), name

    def test_plain_object_is_not_owner(self):
        assert not isinstance(object(), ChannelOwner)


class TestAdapterReexports:
    def test_discord_package(self):
        from channelkit.adapters.discord import DiscordChannelOwner as Reexported
        assert Reexported is DiscordChannelOwner
