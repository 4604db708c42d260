"""Outbound ports — interface the channel facade forwards its work to."""

from typing import Any, Callable, List, Mapping, Optional, Protocol, Sequence, Union, runtime_checkable

from channelkit.domain.models import ChannelID, Message, MessageID, RequestError, User, UserID
from channelkit.domain.options import MessageEdit, MessagePayload, MessageQuery

# Completion callback shapes
ErrorCallback = Callable[[Optional[RequestError]], Any]
MessageCallback = Callable[[Optional[Message], Optional[RequestError]], Any]
MessagesCallback = Callable[[Optional[List[Message]], Optional[RequestError]], Any]
UsersCallback = Callable[[Optional[List[User]], Optional[RequestError]], Any]
ChannelCallback = Callable[[Optional[Any], Optional[RequestError]], Any]

QueryOptions = Union[MessageQuery, Mapping[str, Any]]
EditOptions = Union[MessageEdit, Mapping[str, Any]]
SendPayload = Union[MessagePayload, Mapping[str, Any], str]


@runtime_checkable
class ChannelOwner(Protocol):
    """The client that performs network work on behalf of channel entities.

    Every method returns immediately and reports through ``then`` later.
    The return value is an opaque handle for the pending request.
    """

    @property
    def strict_capabilities(self) -> bool: ...

    def add_reaction(self, reaction: str, message_id: MessageID, channel_id: ChannelID,
                     then: ErrorCallback) -> Any: ...

    def delete_channel(self, channel_id: ChannelID, then: ChannelCallback) -> Any: ...

    def delete_message(self, message_id: MessageID, channel_id: ChannelID,
                       then: ErrorCallback) -> Any: ...

    def delete_messages(self, message_ids: Sequence[MessageID], channel_id: ChannelID,
                        then: ErrorCallback) -> Any: ...

    def delete_reaction(self, reaction: str, message_id: MessageID, user_id: Union[UserID, str],
                        channel_id: ChannelID, then: ErrorCallback) -> Any: ...

    def edit_message(self, message_id: MessageID, options: EditOptions, channel_id: ChannelID,
                     then: MessageCallback) -> Any: ...

    def get_message(self, message_id: MessageID, channel_id: ChannelID,
                    then: MessageCallback) -> Any: ...

    def get_messages(self, channel_id: ChannelID, options: Optional[QueryOptions],
                     then: MessagesCallback) -> Any: ...

    def get_reaction(self, reaction: str, message_id: MessageID, channel_id: ChannelID,
                     then: UsersCallback) -> Any: ...

    def get_pinned_messages(self, channel_id: ChannelID, then: MessagesCallback) -> Any: ...

    def pin(self, message_id: MessageID, channel_id: ChannelID, then: ErrorCallback) -> Any: ...

    def send(self, message: SendPayload, channel_id: ChannelID, then: MessageCallback) -> Any: ...

    def unpin(self, message_id: MessageID, channel_id: ChannelID, then: ErrorCallback) -> Any: ...
