"""Channel facade — one operation set shared by every channel variant.

Each operation checks whether the channel's type may carry messages, then
forwards to the owning client with the channel's own id and hands over the
caller's completion callback untouched. Nothing here awaits or blocks: a call
either short-circuits or returns the owner's handle for the pending request.

Two situations drop a call without ever invoking the callback:

* the channel is a voice channel (``delete`` is exempt), and
* the owner has been garbage collected.

With ``strict_capabilities`` enabled on the owner, the voice case instead
delivers an ``UnsupportedChannelOperation`` through the callback.
"""

import sys
import weakref
from typing import Any, Dict, Optional, Sequence

from channelkit.config import CONFIG
from channelkit.domain.models import (
    SELF_USER,
    ChannelID,
    ChannelType,
    MessageID,
    UnsupportedChannelOperation,
    UserID,
)
from channelkit.ports.outbound import (
    ChannelCallback,
    ChannelOwner,
    EditOptions,
    ErrorCallback,
    MessageCallback,
    MessagesCallback,
    QueryOptions,
    SendPayload,
    UsersCallback,
)


def _log(msg: str):
    print(msg, file=sys.stderr)


def noop(*_args) -> None:
    """Default completion callback: accepts any result and does nothing."""


# Which channel types can carry messages. Must list every ChannelType.
MESSAGING: Dict[ChannelType, bool] = {
    ChannelType.GUILD_TEXT: True,
    ChannelType.DM: True,
    ChannelType.GUILD_VOICE: False,
    ChannelType.GROUP_DM: True,
    ChannelType.GUILD_CATEGORY: True,
}

_unmapped = set(ChannelType) - set(MESSAGING)
if _unmapped:
    raise RuntimeError(f"MESSAGING table has no entry for {sorted(t.name for t in _unmapped)}")


class Channel:
    """Base for all channel variants.

    ``owner`` is held weakly; the channel never keeps its client alive.
    """

    def __init__(
        self,
        id: ChannelID,
        type: ChannelType,
        owner: Optional[ChannelOwner] = None,
        last_message_id: Optional[MessageID] = None,
    ):
        self._id = id
        self._type = ChannelType(type)
        self._owner_ref = weakref.ref(owner) if owner is not None else None
        # Written by the owner as messages arrive
        self.last_message_id = last_message_id

    @property
    def id(self) -> ChannelID:
        return self._id

    @property
    def type(self) -> ChannelType:
        return self._type

    @property
    def owner(self) -> Optional[ChannelOwner]:
        if self._owner_ref is None:
            return None
        return self._owner_ref()

    @property
    def can_message(self) -> bool:
        return MESSAGING[self._type]

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self._id} type={self._type.name}>"

    # ------------------------------------------------------------------
    # Guard
    # ------------------------------------------------------------------

    def _owner_for(self, operation: str) -> Optional[ChannelOwner]:
        owner = self.owner
        if owner is None and CONFIG["log_drops"]:
            _log(f"[channelkit] {operation} on channel {self._id} dropped: owner is gone")
        return owner

    def _messaging_owner(self, operation: str, then, result_slots: int) -> Optional[ChannelOwner]:
        """Return the owner if this channel may carry messages, else None.

        ``result_slots`` is how many leading ``None`` values the callback
        takes before its error argument (strict mode only).
        """
        owner = self._owner_for(operation)
        if owner is None:
            return None
        if MESSAGING[self._type]:
            return owner
        if owner.strict_capabilities:
            error = UnsupportedChannelOperation(
                message=f"{operation} is not supported on {self._type.name} channels",
                status=0,
                code=0,
                channel_type=self._type,
                operation=operation,
            )
            then(*([None] * result_slots), error)
        elif CONFIG["log_drops"]:
            _log(f"[channelkit] {operation} on {self._type.name} channel {self._id} ignored")
        return None

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def add_reaction(self, reaction: str, message_id: MessageID, then: ErrorCallback = noop) -> Any:
        """Add a unicode or custom (``name:id``) emoji reaction to a message."""
        owner = self._messaging_owner("add_reaction", then, 0)
        if owner is None:
            return None
        return owner.add_reaction(reaction, message_id, self._id, then=then)

    def delete(self, then: ChannelCallback = noop) -> Any:
        """Delete this channel. Works on every channel type, voice included."""
        owner = self._owner_for("delete")
        if owner is None:
            return None
        return owner.delete_channel(self._id, then=then)

    def delete_message(self, message_id: MessageID, then: ErrorCallback = noop) -> Any:
        owner = self._messaging_owner("delete_message", then, 0)
        if owner is None:
            return None
        return owner.delete_message(message_id, self._id, then=then)

    def delete_messages(self, message_ids: Sequence[MessageID], then: ErrorCallback = noop) -> Any:
        """Bulk delete. The ids go to the owner as one unit."""
        owner = self._messaging_owner("delete_messages", then, 0)
        if owner is None:
            return None
        return owner.delete_messages(message_ids, self._id, then=then)

    def delete_reaction(
        self,
        reaction: str,
        message_id: MessageID,
        user_id: Optional[UserID] = None,
        then: ErrorCallback = noop,
    ) -> Any:
        """Remove a reaction. Without ``user_id`` the bot's own reaction is removed."""
        owner = self._messaging_owner("delete_reaction", then, 0)
        if owner is None:
            return None
        target = SELF_USER if user_id is None else user_id
        return owner.delete_reaction(reaction, message_id, target, self._id, then=then)

    def edit_message(self, message_id: MessageID, options: EditOptions, then: MessageCallback = noop) -> Any:
        owner = self._messaging_owner("edit_message", then, 1)
        if owner is None:
            return None
        return owner.edit_message(message_id, options, self._id, then=then)

    def get_message(self, message_id: MessageID, then: MessageCallback) -> Any:
        owner = self._messaging_owner("get_message", then, 1)
        if owner is None:
            return None
        return owner.get_message(message_id, self._id, then=then)

    def get_messages(self, options: Optional[QueryOptions] = None, *, then: MessagesCallback) -> Any:
        """Fetch a page of history.

        Option keys:
        - around / before / after: message id to anchor the page on
        - limit: how many messages (1-100)
        """
        owner = self._messaging_owner("get_messages", then, 1)
        if owner is None:
            return None
        return owner.get_messages(self._id, options, then=then)

    def get_reaction(self, reaction: str, message_id: MessageID, then: UsersCallback) -> Any:
        """Users who reacted to a message with ``reaction``."""
        owner = self._messaging_owner("get_reaction", then, 1)
        if owner is None:
            return None
        return owner.get_reaction(reaction, message_id, self._id, then=then)

    def get_pinned_messages(self, then: MessagesCallback = noop) -> Any:
        owner = self._messaging_owner("get_pinned_messages", then, 1)
        if owner is None:
            return None
        return owner.get_pinned_messages(self._id, then=then)

    def pin(self, message_id: MessageID, then: ErrorCallback = noop) -> Any:
        owner = self._messaging_owner("pin", then, 0)
        if owner is None:
            return None
        return owner.pin(message_id, self._id, then=then)

    def send(self, message: SendPayload, then: MessageCallback = noop) -> Any:
        """Send text, or a dict / MessagePayload with content, embed and tts."""
        owner = self._messaging_owner("send", then, 1)
        if owner is None:
            return None
        return owner.send(message, self._id, then=then)

    def unpin(self, message_id: MessageID, then: ErrorCallback = noop) -> Any:
        owner = self._messaging_owner("unpin", then, 0)
        if owner is None:
            return None
        return owner.unpin(message_id, self._id, then=then)
