"""Discord owner — ChannelOwner implementation backed by discord.Client.

discord.py does the HTTP work. This adapter schedules one task per call on
the running loop, converts results into domain values, and reports
``(result, error)`` to the caller's completion callback.
"""

import asyncio
import re
import sys
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Set, Union

import aiohttp
import discord
from pydantic import ValidationError

from channelkit.config import CONFIG
from channelkit.domain.channel import Channel
from channelkit.domain.channels import channel_from_payload
from channelkit.domain.models import (
    SELF_USER,
    ChannelID,
    Message,
    MessageID,
    RequestError,
    User,
    UserID,
)
from channelkit.domain.options import MessageEdit, MessagePayload, MessageQuery
from channelkit.ports.outbound import (
    ChannelCallback,
    EditOptions,
    ErrorCallback,
    MessageCallback,
    MessagesCallback,
    QueryOptions,
    SendPayload,
    UsersCallback,
)

_BULK_DELETE_MAX = 100
_PAGE_MAX = 100


def _log(msg: str):
    print(msg, file=sys.stderr)


def _page_size(value: int) -> int:
    return min(max(int(value), 1), _PAGE_MAX)


def user_from_discord(user: Union[discord.User, discord.Member]) -> User:
    return User(
        id=user.id,
        username=user.name,
        discriminator=user.discriminator,
        bot=user.bot,
        avatar=user.avatar.key if user.avatar else None,
    )


def message_from_discord(message: discord.Message) -> Message:
    """Convert a discord.Message to the domain Message."""
    return Message(
        id=message.id,
        channel_id=message.channel.id,
        content=message.content,
        author=user_from_discord(message.author),
        timestamp=message.created_at.isoformat(),
        edited_timestamp=message.edited_at.isoformat() if message.edited_at else None,
        pinned=message.pinned,
        tts=message.tts,
        embeds=[embed.to_dict() for embed in message.embeds],
    )


_CUSTOM_EMOJI_RE = re.compile(r"^<a?:(\w+):(\d+)>$")


def _emoji(reaction: str) -> str:
    # "<:name:id>" and "<a:name:id>" -> "name:id"; unicode and "name:id" pass as-is
    match = _CUSTOM_EMOJI_RE.match(reaction)
    if match:
        return f"{match.group(1)}:{match.group(2)}"
    return reaction


def _with_embed(fields: Dict[str, Any]) -> Dict[str, Any]:
    embed = fields.get("embed")
    if isinstance(embed, dict):
        fields = dict(fields, embed=discord.Embed.from_dict(embed))
    embeds = fields.get("embeds")
    if isinstance(embeds, list):
        fields = dict(fields, embeds=[
            discord.Embed.from_dict(e) if isinstance(e, dict) else e for e in embeds
        ])
    return fields


class DiscordChannelOwner:
    """ChannelOwner over a discord.Client.

    Also keeps the channel entities it has built, so that incoming messages
    can advance their ``last_message_id``.
    """

    def __init__(
        self,
        client: discord.Client,
        strict_capabilities: Optional[bool] = None,
        history_limit: Optional[int] = None,
        reaction_limit: Optional[int] = None,
    ):
        self._client = client
        self._strict = CONFIG["strict_capabilities"] if strict_capabilities is None else strict_capabilities
        self._history_limit = _page_size(history_limit or CONFIG["history_limit"])
        self._reaction_limit = _page_size(reaction_limit or CONFIG["reaction_limit"])
        self._channels: Dict[ChannelID, Channel] = {}
        self._tasks: Set[asyncio.Task] = set()

    @property
    def strict_capabilities(self) -> bool:
        return self._strict

    # ------------------------------------------------------------------
    # Channel entities
    # ------------------------------------------------------------------

    def build_channel(self, data: Dict[str, Any]) -> Channel:
        """Create (or replace) the channel entity for a Discord channel payload."""
        channel = channel_from_payload(data, owner=self)
        self._channels[channel.id] = channel
        return channel

    def get_channel(self, channel_id: ChannelID) -> Optional[Channel]:
        return self._channels.get(channel_id)

    def observe_message(self, message: Message) -> None:
        """Advance the channel's last_message_id when a newer message shows up."""
        channel = self._channels.get(message.channel_id)
        if channel is None:
            return
        if channel.last_message_id is None or message.id > channel.last_message_id:
            channel.last_message_id = message.id

    # ------------------------------------------------------------------
    # Scheduling
    # ------------------------------------------------------------------

    def _schedule(
        self,
        operation: str,
        work: Callable[[], Awaitable[Any]],
        then: Callable[..., Any],
        with_result: bool,
    ) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(self._run(operation, work, then, with_result))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, operation: str, work, then, with_result: bool) -> None:
        result = None
        error: Optional[RequestError] = None
        try:
            result = await work()
        except RequestError as e:
            error = e
        except discord.HTTPException as e:
            error = RequestError(message=e.text or str(e), status=e.status, code=e.code)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            error = RequestError(message=str(e) or e.__class__.__name__, status=0)
        except ValidationError as e:
            error = RequestError(message=str(e), status=400)
        except Exception as e:
            error = RequestError(message=str(e) or e.__class__.__name__, status=0)

        if error is not None:
            result = None
            _log(f"[channelkit] {operation} failed: {error}")

        try:
            if with_result:
                then(result, error)
            else:
                then(error)
        except Exception as e:
            _log(f"[channelkit] {operation} completion raised: {e!r}")

    def _messageable(self, channel_id: ChannelID) -> discord.PartialMessageable:
        return self._client.get_partial_messageable(channel_id)

    def _partial(self, channel_id: ChannelID, message_id: MessageID) -> discord.PartialMessage:
        return self._messageable(channel_id).get_partial_message(message_id)

    # ------------------------------------------------------------------
    # ChannelOwner
    # ------------------------------------------------------------------

    def add_reaction(self, reaction: str, message_id: MessageID, channel_id: ChannelID,
                     then: ErrorCallback) -> asyncio.Task:
        async def work():
            await self._partial(channel_id, message_id).add_reaction(_emoji(reaction))

        return self._schedule("add_reaction", work, then, with_result=False)

    def delete_channel(self, channel_id: ChannelID, then: ChannelCallback) -> asyncio.Task:
        async def work():
            data = await self._client.http.delete_channel(channel_id)
            self._channels.pop(channel_id, None)
            return channel_from_payload(data, owner=self)

        return self._schedule("delete_channel", work, then, with_result=True)

    def delete_message(self, message_id: MessageID, channel_id: ChannelID,
                       then: ErrorCallback) -> asyncio.Task:
        async def work():
            await self._partial(channel_id, message_id).delete()

        return self._schedule("delete_message", work, then, with_result=False)

    def delete_messages(self, message_ids: Sequence[MessageID], channel_id: ChannelID,
                        then: ErrorCallback) -> asyncio.Task:
        """All-or-nothing bulk delete; Discord accepts 2-100 ids per request."""
        ids = list(message_ids)

        async def work():
            if not ids:
                return
            if len(ids) > _BULK_DELETE_MAX:
                raise RequestError(
                    message=f"Bulk delete takes at most {_BULK_DELETE_MAX} messages, got {len(ids)}",
                    status=400,
                )
            if len(ids) == 1:
                await self._partial(channel_id, ids[0]).delete()
                return
            await self._client.http.delete_messages(channel_id, ids)

        return self._schedule("delete_messages", work, then, with_result=False)

    def delete_reaction(self, reaction: str, message_id: MessageID, user_id: Union[UserID, str],
                        channel_id: ChannelID, then: ErrorCallback) -> asyncio.Task:
        async def work():
            if user_id == SELF_USER:
                await self._client.http.remove_own_reaction(channel_id, message_id, _emoji(reaction))
            else:
                await self._partial(channel_id, message_id).remove_reaction(
                    _emoji(reaction), discord.Object(id=int(user_id))
                )

        return self._schedule("delete_reaction", work, then, with_result=False)

    def edit_message(self, message_id: MessageID, options: EditOptions, channel_id: ChannelID,
                     then: MessageCallback) -> asyncio.Task:
        async def work():
            fields = _with_embed(MessageEdit.coerce(options).fields())
            try:
                edited = await self._partial(channel_id, message_id).edit(**fields)
            except TypeError as e:
                raise RequestError(message=f"Unsupported edit field: {e}", status=400)
            return message_from_discord(edited)

        return self._schedule("edit_message", work, then, with_result=True)

    def get_message(self, message_id: MessageID, channel_id: ChannelID,
                    then: MessageCallback) -> asyncio.Task:
        async def work():
            found = await self._messageable(channel_id).fetch_message(message_id)
            return message_from_discord(found)

        return self._schedule("get_message", work, then, with_result=True)

    def get_messages(self, channel_id: ChannelID, options: Optional[QueryOptions],
                     then: MessagesCallback) -> asyncio.Task:
        async def work() -> List[Message]:
            query = MessageQuery.coerce(options)
            kwargs: Dict[str, Any] = {"limit": query.limit or self._history_limit}
            if query.anchor:
                kwargs[query.anchor] = discord.Object(id=getattr(query, query.anchor))
            kwargs.update(query.model_extra or {})
            try:
                history = self._messageable(channel_id).history(**kwargs)
            except TypeError as e:
                raise RequestError(message=f"Unsupported query option: {e}", status=400)
            return [message_from_discord(m) async for m in history]

        return self._schedule("get_messages", work, then, with_result=True)

    def get_reaction(self, reaction: str, message_id: MessageID, channel_id: ChannelID,
                     then: UsersCallback) -> asyncio.Task:
        async def work() -> List[User]:
            data = await self._client.http.get_reaction_users(
                channel_id, message_id, _emoji(reaction), self._reaction_limit
            )
            return [User.from_payload(u) for u in data]

        return self._schedule("get_reaction", work, then, with_result=True)

    def get_pinned_messages(self, channel_id: ChannelID, then: MessagesCallback) -> asyncio.Task:
        async def work() -> List[Message]:
            pinned = await self._messageable(channel_id).pins()
            return [message_from_discord(m) for m in pinned]

        return self._schedule("get_pinned_messages", work, then, with_result=True)

    def pin(self, message_id: MessageID, channel_id: ChannelID, then: ErrorCallback) -> asyncio.Task:
        async def work():
            await self._partial(channel_id, message_id).pin()

        return self._schedule("pin", work, then, with_result=False)

    def send(self, message: SendPayload, channel_id: ChannelID, then: MessageCallback) -> asyncio.Task:
        async def work() -> Message:
            fields = _with_embed(MessagePayload.coerce(message).fields())
            try:
                sent = await self._messageable(channel_id).send(**fields)
            except TypeError as e:
                raise RequestError(message=f"Unsupported message field: {e}", status=400)
            result = message_from_discord(sent)
            self.observe_message(result)
            return result

        return self._schedule("send", work, then, with_result=True)

    def unpin(self, message_id: MessageID, channel_id: ChannelID, then: ErrorCallback) -> asyncio.Task:
        async def work():
            await self._partial(channel_id, message_id).unpin()

        return self._schedule("unpin", work, then, with_result=False)
