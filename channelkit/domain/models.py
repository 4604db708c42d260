"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional

ChannelID = int
MessageID = int
UserID = int

# Forwarded in place of a user id when a reaction belongs to the bot itself
SELF_USER = "@me"


class ChannelType(IntEnum):
    """Discord channel type codes."""

    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4


def snowflake(value: Any) -> Optional[int]:
    """Discord sends ids as strings; None stays None."""
    if value is None:
        return None
    return int(value)


@dataclass(eq=False)
class RequestError(Exception):
    """Failure reported by the owner for a single request."""

    message: str
    status: int = 0  # HTTP status, 0 for transport failures
    code: int = 0  # Discord JSON error code, 0 if none

    def __str__(self) -> str:
        return f"{self.status} (code {self.code}): {self.message}"


@dataclass(eq=False)
class UnsupportedChannelOperation(RequestError):
    """Messaging call made on a channel type that cannot carry messages."""

    channel_type: Optional[ChannelType] = None
    operation: str = ""


@dataclass
class User:
    id: UserID
    username: str = ""
    discriminator: str = "0"
    bot: bool = False
    avatar: Optional[str] = None

    @classmethod
    def from_payload(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=int(data["id"]),
            username=data.get("username", ""),
            discriminator=data.get("discriminator", "0"),
            bot=data.get("bot", False),
            avatar=data.get("avatar"),
        )


@dataclass
class Message:
    """A message as seen by callers of the channel facade."""

    id: MessageID
    channel_id: ChannelID
    content: str = ""
    author: Optional[User] = None
    timestamp: str = ""  # ISO datetime
    edited_timestamp: Optional[str] = None
    pinned: bool = False
    tts: bool = False
    embeds: List[Dict[str, Any]] = field(default_factory=list)
