"""Tests for channel variants and construction from Discord payloads."""

import pytest

from channelkit.domain.channels import DMChannel, GroupChannel, GuildChannel, channel_from_payload
from channelkit.domain.models import ChannelType, RequestError, User


class _Owner:
    strict_capabilities = False


class TestChannelType:
    def test_discriminants(self):
        assert [t.value for t in ChannelType] == [0, 1, 2, 3, 4]
        assert ChannelType(2) is ChannelType.GUILD_VOICE

    def test_unknown_code(self):
        with pytest.raises(ValueError):
            ChannelType(13)


class TestVariants:
    def test_guild_channel_rejects_private_types(self):
        with pytest.raises(ValueError, match="not a guild channel"):
            GuildChannel(1, ChannelType.DM)

    def test_dm_channel_type_is_fixed(self):
        assert DMChannel(1).type is ChannelType.DM

    def test_group_channel_defaults(self):
        group = GroupChannel(1)
        assert group.type is ChannelType.GROUP_DM
        assert group.recipients == []
        assert group.last_message_id is None


class TestChannelFromPayload:
    def test_text_channel(self):
        owner = _Owner()
        channel = channel_from_payload({
            "id": "100",
            "type": 0,
            "guild_id": "7",
            "name": "general",
            "position": 3,
            "topic": "chat",
            "last_message_id": "555",
            "parent_id": "90",
        }, owner)
        assert isinstance(channel, GuildChannel)
        assert channel.id == 100
        assert channel.type is ChannelType.GUILD_TEXT
        assert channel.guild_id == 7
        assert channel.name == "general"
        assert channel.position == 3
        assert channel.topic == "chat"
        assert channel.parent_id == 90
        assert channel.last_message_id == 555
        assert channel.owner is owner

    def test_voice_channel(self):
        channel = channel_from_payload({
            "id": "101", "type": 2, "name": "lounge", "bitrate": 64000, "user_limit": 5,
        })
        assert channel.type is ChannelType.GUILD_VOICE
        assert channel.bitrate == 64000
        assert channel.user_limit == 5
        assert channel.can_message is False

    def test_category_channel(self):
        channel = channel_from_payload({"id": "102", "type": 4, "name": "Projects"})
        assert isinstance(channel, GuildChannel)
        assert channel.type is ChannelType.GUILD_CATEGORY
        assert channel.last_message_id is None

    def test_dm_channel(self):
        channel = channel_from_payload({
            "id": "200",
            "type": 1,
            "last_message_id": None,
            "recipients": [{"id": "9", "username": "alice", "discriminator": "0001"}],
        })
        assert isinstance(channel, DMChannel)
        assert channel.recipient == User(id=9, username="alice", discriminator="0001")

    def test_dm_channel_without_recipients(self):
        channel = channel_from_payload({"id": "201", "type": 1})
        assert channel.recipient is None

    def test_group_channel(self):
        channel = channel_from_payload({
            "id": "300",
            "type": 3,
            "name": "friends",
            "owner_id": "9",
            "recipients": [{"id": "9", "username": "alice"}, {"id": "10", "username": "bob"}],
        })
        assert isinstance(channel, GroupChannel)
        assert channel.name == "friends"
        assert channel.owner_id == 9
        assert [u.username for u in channel.recipients] == ["alice", "bob"]

    def test_unsupported_type(self):
        with pytest.raises(ValueError, match="Unsupported channel type"):
            channel_from_payload({"id": "1", "type": 15})


class TestRequestError:
    def test_str(self):
        error = RequestError(message="Unknown Message", status=404, code=10008)
        assert str(error) == "404 (code 10008): Unknown Message"

    def test_is_exception(self):
        with pytest.raises(RequestError):
            raise RequestError(message="boom")
